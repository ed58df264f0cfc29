"""Burnout scoring model.

Maps a day's wellness metrics to a 0-10 burnout score and layers two
independent readings on top of it: a low/moderate/high classification
and an adaptive goal suggestion. Everything here is pure.
"""
import math
from dataclasses import dataclass

from app.core.constants import (
    BURNOUT_MESSAGES,
    CLASSIFY_LOW_MAX,
    CLASSIFY_MODERATE_MAX,
    OVERWORK_MAX_PENALTY,
    OVERWORK_RATE,
    SCORE_MAX,
    SCORE_MIN,
    SLEEP_OPTIMAL_HIGH,
    SLEEP_OPTIMAL_LOW,
    SLEEP_OVER_MAX_PENALTY,
    SLEEP_OVER_RATE,
    SLEEP_UNDER_MAX_PENALTY,
    SUGGESTION_HEALTHY,
    SUGGESTION_MAINTAIN,
    SUGGESTION_REDUCE,
    SUGGEST_MAINTAIN_MIN,
    SUGGEST_REDUCE_MIN,
    WORKDAY_HOURS,
)


@dataclass(frozen=True)
class WellnessMetrics:
    stress_level: int       # 1-5
    sleep_hours: float      # 0-24
    mood_level: int         # 1-5
    time_spent_hours: float  # 0-24


@dataclass(frozen=True)
class BurnoutClassification:
    level: str  # low, moderate, high
    message: str


@dataclass(frozen=True)
class BurnoutAssessment:
    score: float
    level: str
    message: str
    suggestion: str


def round_half_up(value: float, ndigits: int = 1) -> float:
    """Round like JS Math.round: .5 goes up, not to even.

    Example: round_half_up(0.25) -> 0.3 (built-in round gives 0.2)
    """
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def stress_term(stress_level: int) -> float:
    # 1..5 -> 0..4
    return (stress_level - 1) / 4 * 4


def sleep_term(sleep_hours: float) -> float:
    if sleep_hours < SLEEP_OPTIMAL_LOW:
        # 3..0 as sleep rises from 0 to 6h
        return SLEEP_UNDER_MAX_PENALTY - (sleep_hours / SLEEP_OPTIMAL_LOW) * SLEEP_UNDER_MAX_PENALTY
    if sleep_hours > SLEEP_OPTIMAL_HIGH:
        return min(SLEEP_OVER_MAX_PENALTY, (sleep_hours - SLEEP_OPTIMAL_HIGH) * SLEEP_OVER_RATE)
    return 0.0


def mood_term(mood_level: int) -> float:
    # 1..5 -> 3..0
    return (5 - mood_level) / 4 * 3


def time_term(time_spent_hours: float) -> float:
    if time_spent_hours > WORKDAY_HOURS:
        return min(OVERWORK_MAX_PENALTY, (time_spent_hours - WORKDAY_HOURS) * OVERWORK_RATE)
    return 0.0


def compute_score(metrics: WellnessMetrics) -> float:
    """Burnout score in [0, 10] at one decimal.

    Inputs are not validated here; out-of-domain values are still scored
    and the result clamped.
    """
    raw = (
        stress_term(metrics.stress_level)
        + sleep_term(metrics.sleep_hours)
        + mood_term(metrics.mood_level)
        + time_term(metrics.time_spent_hours)
    )
    clamped = min(SCORE_MAX, max(SCORE_MIN, raw))
    return round_half_up(clamped, 1)


def classify(score: float) -> BurnoutClassification:
    if score <= CLASSIFY_LOW_MAX:
        level = "low"
    elif score <= CLASSIFY_MODERATE_MAX:
        level = "moderate"
    else:
        level = "high"
    return BurnoutClassification(level=level, message=BURNOUT_MESSAGES[level])


def suggest(score: float) -> str:
    if score >= SUGGEST_REDUCE_MIN:
        return SUGGESTION_REDUCE
    if score >= SUGGEST_MAINTAIN_MIN:
        return SUGGESTION_MAINTAIN
    return SUGGESTION_HEALTHY


def assess_score(score: float) -> BurnoutAssessment:
    c = classify(score)
    return BurnoutAssessment(score=score, level=c.level, message=c.message, suggestion=suggest(score))


def assess(metrics: WellnessMetrics) -> BurnoutAssessment:
    return assess_score(compute_score(metrics))
