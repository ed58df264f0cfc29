import itertools

import pytest

from app.core.burnout import (
    WellnessMetrics,
    assess,
    classify,
    compute_score,
    round_half_up,
    sleep_term,
    suggest,
    time_term,
)
from app.core.constants import SUGGESTION_HEALTHY, SUGGESTION_MAINTAIN, SUGGESTION_REDUCE

STRESS = [1, 2, 3, 4, 5]
MOOD = [1, 2, 3, 4, 5]
SLEEP = [0, 2, 4, 6, 7.5, 9, 10, 12, 24]
TIME = [0, 4, 8, 9, 12, 16, 18, 24]


def score(stress, sleep, mood, time_spent):
    return compute_score(WellnessMetrics(stress, sleep, mood, time_spent))


def test_score_is_bounded_for_all_valid_inputs():
    for s, sl, m, t in itertools.product(STRESS, SLEEP, MOOD, TIME):
        value = score(s, sl, m, t)
        assert 0.0 <= value <= 10.0
        # one decimal place
        assert round(value * 10) == pytest.approx(value * 10)


def test_score_is_deterministic():
    m = WellnessMetrics(4, 5.5, 2, 11)
    assert len({compute_score(m) for _ in range(20)}) == 1


def test_higher_stress_never_lowers_score():
    for sl, m, t in itertools.product(SLEEP, MOOD, TIME):
        values = [score(s, sl, m, t) for s in STRESS]
        assert values == sorted(values)


def test_higher_mood_never_raises_score():
    for s, sl, t in itertools.product(STRESS, SLEEP, TIME):
        values = [score(s, sl, m, t) for m in MOOD]
        assert values == sorted(values, reverse=True)


def test_sleep_further_from_optimal_never_lowers_score():
    under = [6, 5, 4, 3, 2, 1, 0]
    over = [9, 10, 11, 12, 16, 24]
    for s, m, t in itertools.product(STRESS, MOOD, TIME):
        for series in (under, over):
            values = [score(s, sl, m, t) for sl in series]
            assert values == sorted(values)


def test_more_time_above_workday_never_lowers_score():
    hours = [8, 9, 10, 12, 16, 18, 24]
    for s, sl, m in itertools.product(STRESS, SLEEP, MOOD):
        values = [score(s, sl, m, t) for t in hours]
        assert values == sorted(values)


def test_sleep_penalty_boundaries():
    assert sleep_term(6) == 0
    assert sleep_term(9) == 0
    assert sleep_term(7.5) == 0
    assert sleep_term(0) == 3
    # oversleep is capped at 2
    assert sleep_term(13) == 2
    assert sleep_term(24) == 2


def test_time_penalty_boundaries():
    assert time_term(8) == 0
    assert time_term(0) == 0
    assert time_term(18) == pytest.approx(3)
    assert time_term(24) == 3


@pytest.mark.parametrize(
    "value,level",
    [(0, "low"), (3, "low"), (3.1, "moderate"), (6, "moderate"), (6.1, "high"), (10, "high")],
)
def test_classify_bands(value, level):
    assert classify(value).level == level


def test_classify_messages():
    assert classify(1).message == "You're doing great! Keep up the healthy habits."
    assert classify(5).message == "Consider taking some time to recharge and relax."
    assert classify(9).message == "High burnout detected. Please prioritize rest and self-care."


def test_suggest_thresholds_are_independent_of_classify():
    assert suggest(7) == SUGGESTION_REDUCE
    assert suggest(6.9) == SUGGESTION_MAINTAIN
    assert suggest(6.9) != suggest(7)
    assert suggest(4) == SUGGESTION_MAINTAIN
    assert suggest(3.9) == SUGGESTION_HEALTHY
    assert suggest(3.9) != suggest(4)
    # 3.5 is "moderate" but still a healthy suggestion
    assert classify(3.5).level == "moderate"
    assert suggest(3.5) == SUGGESTION_HEALTHY


def test_example_moderate_day():
    a = assess(WellnessMetrics(stress_level=3, sleep_hours=8, mood_level=3, time_spent_hours=8))
    assert a.score == 3.5
    assert a.level == "moderate"


def test_example_overloaded_day_clamps_to_ten():
    # 4 + 1 + 3 + 2.4 = 10.4 -> 10.0
    a = assess(WellnessMetrics(stress_level=5, sleep_hours=4, mood_level=1, time_spent_hours=16))
    assert a.score == 10.0
    assert a.level == "high"
    assert a.suggestion == SUGGESTION_REDUCE


def test_rounding_is_half_up_not_bankers():
    # stress 0 + sleep (9.5 - 9) * 0.5 = 0.25 + mood 0 + time 0
    assert score(1, 9.5, 5, 0) == 0.3
    # built-in round() would give 0.2
    assert round(0.25, 1) == 0.2
    assert round_half_up(0.25) == 0.3
    assert round_half_up(67.5, 0) == 68


def test_out_of_range_inputs_are_scored_and_clamped():
    # mood above the scale drives the raw score negative
    assert score(1, 8, 9, 0) == 0.0
    assert score(9, 0, 1, 24) == 10.0
