"""Shared application constants.

Centralizes the burnout model's thresholds and advisory text so we can
document and adjust them in one place.
"""

# Input domains (mirrored by schema validation and DB check constraints)
STRESS_MIN, STRESS_MAX = 1, 5
MOOD_MIN, MOOD_MAX = 1, 5
HOURS_MIN, HOURS_MAX = 0.0, 24.0

# Burnout score range
SCORE_MIN, SCORE_MAX = 0.0, 10.0

# Sleep: no penalty inside [SLEEP_OPTIMAL_LOW, SLEEP_OPTIMAL_HIGH]
SLEEP_OPTIMAL_LOW = 6.0
SLEEP_OPTIMAL_HIGH = 9.0
SLEEP_UNDER_MAX_PENALTY = 3.0
SLEEP_OVER_RATE = 0.5
SLEEP_OVER_MAX_PENALTY = 2.0

# Time spent: penalty per hour above the workday, capped
WORKDAY_HOURS = 8.0
OVERWORK_RATE = 0.3
OVERWORK_MAX_PENALTY = 3.0

# Classification bands, upper bound inclusive: score <= 3 low, <= 6 moderate
CLASSIFY_LOW_MAX = 3.0
CLASSIFY_MODERATE_MAX = 6.0

BURNOUT_MESSAGES = {
    "low": "You're doing great! Keep up the healthy habits.",
    "moderate": "Consider taking some time to recharge and relax.",
    "high": "High burnout detected. Please prioritize rest and self-care.",
}

# Goal suggestion thresholds, lower bound inclusive (independent of the bands above)
SUGGEST_REDUCE_MIN = 7.0
SUGGEST_MAINTAIN_MIN = 4.0

SUGGESTION_REDUCE = "Consider reducing your weekly goals by 30-50% to focus on recovery."
SUGGESTION_MAINTAIN = "You might want to maintain current goals but add more rest periods."
SUGGESTION_HEALTHY = (
    "Your burnout levels look healthy - you can maintain or slightly increase your goals."
)

# Goals
DEFAULT_TARGET_DAYS = 5
MIN_PASSWORD_LENGTH = 6
