from datetime import date
from pydantic import BaseModel, Field, field_validator

from app.core.burnout import round_half_up
from app.core.constants import (
    HOURS_MAX,
    HOURS_MIN,
    MOOD_MAX,
    MOOD_MIN,
    STRESS_MAX,
    STRESS_MIN,
)


class WellnessMetricsIn(BaseModel):
    """The four raw inputs a user reports for a day."""

    stress_level: int = Field(..., ge=STRESS_MIN, le=STRESS_MAX)
    sleep_hours: float = Field(..., ge=HOURS_MIN, le=HOURS_MAX)
    mood_level: int = Field(..., ge=MOOD_MIN, le=MOOD_MAX)
    time_spent_hours: float = Field(..., ge=HOURS_MIN, le=HOURS_MAX)

    @field_validator("sleep_hours", "time_spent_hours")
    @classmethod
    def _to_column_scale(cls, v):
        # Stored as Numeric(4, 2); score what gets stored
        return round_half_up(v, 2)


class BurnoutAssessmentRead(BaseModel):
    burnout_score: float
    level: str  # low, moderate, high
    message: str
    suggestion: str


class CheckinRead(WellnessMetricsIn, BurnoutAssessmentRead):
    id: int
    date: date
    display_date: str  # "Today" or e.g. "Mon, Jan 6"
