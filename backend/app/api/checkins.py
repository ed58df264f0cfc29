import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.api.deps import get_current_user
from app.core.burnout import WellnessMetrics, assess, assess_score
from app.core.config import settings
from app.core.dates import format_display_date, local_today
from app.db import get_db
from app.models.burnout_checkin import BurnoutCheckin
from app.models.user import User
from app.schemas.checkin import BurnoutAssessmentRead, CheckinRead, WellnessMetricsIn

log = logging.getLogger(__name__)

router = APIRouter(prefix="/checkins", tags=["checkins"])


def checkin_read(row: BurnoutCheckin) -> CheckinRead:
    score = float(row.burnout_score)
    a = assess_score(score)
    return CheckinRead(
        id=row.id,
        date=row.date,
        display_date=format_display_date(row.date),
        stress_level=row.stress_level,
        sleep_hours=float(row.sleep_hours),
        mood_level=row.mood_level,
        time_spent_hours=float(row.time_spent_hours),
        burnout_score=score,
        level=a.level,
        message=a.message,
        suggestion=a.suggestion,
    )


def get_checkin(db: Session, user: User, day: date) -> Optional[BurnoutCheckin]:
    return (
        db.query(BurnoutCheckin)
        .filter(BurnoutCheckin.user_id == user.id, BurnoutCheckin.date == day)
        .first()
    )


@router.post("/preview", response_model=BurnoutAssessmentRead)
def preview_checkin(payload: WellnessMetricsIn, user: User = Depends(get_current_user)):
    """Score metrics without saving them (live form preview)."""
    a = assess(WellnessMetrics(**payload.model_dump()))
    return BurnoutAssessmentRead(
        burnout_score=a.score, level=a.level, message=a.message, suggestion=a.suggestion
    )


@router.get("/", response_model=list[CheckinRead])
def list_checkins(
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    query = db.query(BurnoutCheckin).filter(BurnoutCheckin.user_id == user.id)
    if start_date is not None:
        query = query.filter(BurnoutCheckin.date >= start_date)
    if end_date is not None:
        query = query.filter(BurnoutCheckin.date <= end_date)
    return [checkin_read(r) for r in query.order_by(BurnoutCheckin.date).all()]


@router.get("/today", response_model=CheckinRead)
def get_today_checkin(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    row = get_checkin(db, user, local_today(settings.timezone))
    if not row:
        raise HTTPException(status_code=404, detail="No check-in today")
    return checkin_read(row)


@router.get("/{day}", response_model=CheckinRead)
def read_checkin(
    day: date,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    row = get_checkin(db, user, day)
    if not row:
        raise HTTPException(status_code=404, detail="Check-in not found")
    return checkin_read(row)


@router.put("/{day}", response_model=CheckinRead)
def upsert_checkin(
    day: date,
    payload: WellnessMetricsIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Create or replace the check-in for `day`; the score is always recomputed."""
    score = assess(WellnessMetrics(**payload.model_dump())).score

    row = get_checkin(db, user, day)
    if not row:
        row = BurnoutCheckin(user_id=user.id, date=day)
        db.add(row)
    row.stress_level = payload.stress_level
    row.sleep_hours = payload.sleep_hours
    row.mood_level = payload.mood_level
    row.time_spent_hours = payload.time_spent_hours
    row.burnout_score = score

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="Check-in for this date already exists")
    db.refresh(row)
    log.info(f"[CHECKIN] User {user.id} {day}: burnout_score={score}")
    return checkin_read(row)


@router.delete("/{day}", status_code=204)
def delete_checkin(
    day: date,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    row = get_checkin(db, user, day)
    if not row:
        raise HTTPException(status_code=404, detail="Check-in not found")
    db.delete(row)
    db.commit()
    return Response(status_code=204)
