from datetime import date, timedelta
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.checkins import checkin_read, get_checkin
from app.api.deps import get_current_user
from app.api.goals import _goal_read, goals_for_week
from app.core.burnout import assess_score, round_half_up
from app.core.config import settings
from app.core.dates import format_week_range, local_today, monday_of, week_end, weeks_back
from app.db import get_db
from app.models.burnout_checkin import BurnoutCheckin
from app.models.user import User
from app.schemas.analytics import AnalyticsSummary, Dashboard, TrendPoint, WeeklyPoint

router = APIRouter(tags=["analytics"])


def weekly_point(db: Session, user: User, week_start: date) -> WeeklyPoint:
    """Goal completion and average burnout for one Monday-Sunday week."""
    goals = goals_for_week(db, user, week_start)
    total_goals = len(goals)
    ratio_sum = 0.0
    for g in goals:
        done = sum(1 for c in g.completions if c.completed)
        ratio_sum += done / g.target_days
    completion_pct = (ratio_sum / total_goals) * 100 if total_goals else 0.0

    scores = [
        float(s)
        for (s,) in db.query(BurnoutCheckin.burnout_score)
        .filter(BurnoutCheckin.user_id == user.id)
        .filter(BurnoutCheckin.date >= week_start)
        .filter(BurnoutCheckin.date <= week_end(week_start))
        .all()
    ]
    avg_score = sum(scores) / len(scores) if scores else 0.0

    return WeeklyPoint(
        week_start=week_start,
        total_goals=total_goals,
        goal_completion_pct=int(round_half_up(completion_pct, 0)),
        avg_burnout_score=round_half_up(avg_score, 1),
    )


def burnout_trend(db: Session, user: User, days: int, today: date) -> list[TrendPoint]:
    since = today - timedelta(days=days)
    rows = (
        db.query(BurnoutCheckin)
        .filter(BurnoutCheckin.user_id == user.id)
        .filter(BurnoutCheckin.date >= since)
        .filter(BurnoutCheckin.date <= today)
        .order_by(BurnoutCheckin.date)
        .all()
    )
    return [
        TrendPoint(
            date=r.date,
            burnout_score=float(r.burnout_score),
            stress_level=r.stress_level,
            mood_level=r.mood_level,
            sleep_hours=float(r.sleep_hours),
        )
        for r in rows
    ]


@router.get("/analytics/weekly", response_model=list[WeeklyPoint])
def get_weekly(
    weeks: Optional[int] = Query(None, ge=1, le=52),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """One point per week, oldest first, ending with the current week."""
    today = local_today(settings.timezone)
    count = weeks or settings.analytics_weeks
    return [weekly_point(db, user, ws) for ws in weeks_back(today, count)]


@router.get("/analytics/trend", response_model=list[TrendPoint])
def get_trend(
    days: Optional[int] = Query(None, ge=1, le=365),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    today = local_today(settings.timezone)
    return burnout_trend(db, user, days or settings.trend_days, today)


@router.get("/analytics/summary", response_model=AnalyticsSummary)
def get_summary(
    weeks: Optional[int] = Query(None, ge=1, le=52),
    days: Optional[int] = Query(None, ge=1, le=365),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    today = local_today(settings.timezone)
    points = [weekly_point(db, user, ws) for ws in weeks_back(today, weeks or settings.analytics_weeks)]
    trend = burnout_trend(db, user, days or settings.trend_days, today)

    avg_completion = sum(p.goal_completion_pct for p in points) / len(points) if points else 0.0
    avg_burnout = sum(p.avg_burnout_score for p in points) / len(points) if points else 0.0
    latest = trend[-1].burnout_score if trend else 0.0
    a = assess_score(latest)

    return AnalyticsSummary(
        avg_goal_completion_pct=round_half_up(avg_completion, 1),
        avg_burnout_score=round_half_up(avg_burnout, 1),
        latest_burnout_score=latest,
        level=a.level,
        message=a.message,
        suggestion=a.suggestion,
    )


@router.get("/dashboard", response_model=Dashboard)
def get_dashboard(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """This week's goals plus today's check-in (if any)."""
    today = local_today(settings.timezone)
    wk = monday_of(today)
    row = get_checkin(db, user, today)
    return Dashboard(
        week_start=wk,
        week_label=format_week_range(wk),
        goals=[_goal_read(g) for g in goals_for_week(db, user, wk)],
        today_checkin=checkin_read(row) if row else None,
    )
