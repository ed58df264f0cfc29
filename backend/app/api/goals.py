import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from app.api.deps import get_current_user
from app.core.burnout import round_half_up
from app.core.config import settings
from app.core.dates import local_today, monday_of, week_days
from app.db import get_db
from app.models.daily_completion import DailyCompletion
from app.models.goal import Goal
from app.models.user import User
from app.schemas.goal import CompletionRead, CompletionUpdate, GoalCreate, GoalRead, GoalUpdate

log = logging.getLogger(__name__)

router = APIRouter(prefix="/goals", tags=["goals"])


def _goal_read(goal: Goal) -> GoalRead:
    completions = {c.date: bool(c.completed) for c in goal.completions}
    completed_days = sum(1 for done in completions.values() if done)
    progress = min(100.0, completed_days / goal.target_days * 100) if goal.target_days else 0.0
    return GoalRead(
        id=goal.id,
        title=goal.title,
        description=goal.description,
        target_days=goal.target_days,
        week_start=goal.week_start,
        completions=completions,
        completed_days=completed_days,
        progress_pct=round_half_up(progress, 1),
    )


def _get_owned_goal(db: Session, user: User, goal_id: int) -> Goal:
    # Other users' goals are reported as missing
    goal = db.query(Goal).filter(Goal.id == goal_id, Goal.user_id == user.id).first()
    if not goal:
        raise HTTPException(status_code=404, detail="Goal not found")
    return goal


def goals_for_week(db: Session, user: User, week_start: date) -> list[Goal]:
    return (
        db.query(Goal)
        .filter(Goal.user_id == user.id)
        .filter(Goal.week_start == monday_of(week_start))
        .order_by(Goal.created_at, Goal.id)
        .all()
    )


@router.get("/", response_model=list[GoalRead])
def list_goals(
    week_start: Optional[date] = Query(None),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    List a week's goals with their daily completion map.

      GET /goals?week_start=2025-01-06
    Any date inside the week works; defaults to the current week.
    """
    wk = week_start or local_today(settings.timezone)
    return [_goal_read(g) for g in goals_for_week(db, user, wk)]


@router.post("/", response_model=GoalRead)
def create_goal(
    payload: GoalCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    wk = monday_of(payload.week_start or local_today(settings.timezone))
    goal = Goal(
        user_id=user.id,
        title=payload.title,
        description=payload.description or None,
        target_days=payload.target_days,
        week_start=wk,
    )
    db.add(goal)
    db.flush()

    # One unchecked completion row per day of the week
    db.add_all(
        DailyCompletion(goal_id=goal.id, user_id=user.id, date=d, completed=False)
        for d in week_days(wk)
    )
    db.commit()
    db.refresh(goal)
    log.info(f"[GOALS] User {user.id} created goal {goal.id} for week {wk}")
    return _goal_read(goal)


@router.get("/{goal_id}", response_model=GoalRead)
def get_goal(
    goal_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return _goal_read(_get_owned_goal(db, user, goal_id))


@router.put("/{goal_id}", response_model=GoalRead)
def update_goal(
    goal_id: int,
    payload: GoalUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    goal = _get_owned_goal(db, user, goal_id)
    update_data = payload.model_dump(exclude_unset=True)
    for key, value in update_data.items():
        if value is None and key != "description":
            continue
        setattr(goal, key, value)
    db.commit()
    db.refresh(goal)
    return _goal_read(goal)


@router.delete("/{goal_id}", status_code=204)
def delete_goal(
    goal_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    goal = _get_owned_goal(db, user, goal_id)
    db.delete(goal)
    db.commit()
    log.info(f"[GOALS] User {user.id} deleted goal {goal_id}")
    return Response(status_code=204)


def _set_completion(db: Session, user: User, goal: Goal, day: date, completed: Optional[bool]) -> DailyCompletion:
    """Upsert the completion row for `day`; completed=None flips the current state."""
    if day not in week_days(goal.week_start):
        raise HTTPException(status_code=422, detail="date must fall within the goal's week")
    row = (
        db.query(DailyCompletion)
        .filter(DailyCompletion.goal_id == goal.id, DailyCompletion.date == day)
        .first()
    )
    if not row:
        row = DailyCompletion(goal_id=goal.id, user_id=user.id, date=day, completed=False)
        db.add(row)
    row.completed = (not row.completed) if completed is None else completed
    db.commit()
    db.refresh(row)
    return row


@router.put("/{goal_id}/completions/{day}", response_model=CompletionRead)
def set_completion(
    goal_id: int,
    day: date,
    payload: CompletionUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    goal = _get_owned_goal(db, user, goal_id)
    return _set_completion(db, user, goal, day, payload.completed)


@router.post("/{goal_id}/completions/{day}/toggle", response_model=CompletionRead)
def toggle_completion(
    goal_id: int,
    day: date,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    goal = _get_owned_goal(db, user, goal_id)
    return _set_completion(db, user, goal, day, None)
