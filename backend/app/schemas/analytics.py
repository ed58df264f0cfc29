from datetime import date
from typing import Optional
from pydantic import BaseModel

from app.schemas.checkin import CheckinRead
from app.schemas.goal import GoalRead


class WeeklyPoint(BaseModel):
    week_start: date
    total_goals: int
    goal_completion_pct: int
    avg_burnout_score: float


class TrendPoint(BaseModel):
    date: date
    burnout_score: float
    stress_level: int
    mood_level: int
    sleep_hours: float


class AnalyticsSummary(BaseModel):
    avg_goal_completion_pct: float
    avg_burnout_score: float
    latest_burnout_score: float
    level: str
    message: str
    suggestion: str


class Dashboard(BaseModel):
    week_start: date
    week_label: str
    goals: list[GoalRead]
    today_checkin: Optional[CheckinRead] = None
