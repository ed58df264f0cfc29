from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    UniqueConstraint,
)
from sqlalchemy.sql import func
from app.db import Base


class BurnoutCheckin(Base):
    __tablename__ = "burnout_checkins"
    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_burnout_checkins_user_date"),
        CheckConstraint("stress_level >= 1 AND stress_level <= 5", name="ck_checkins_stress"),
        CheckConstraint("sleep_hours >= 0 AND sleep_hours <= 24", name="ck_checkins_sleep"),
        CheckConstraint("mood_level >= 1 AND mood_level <= 5", name="ck_checkins_mood"),
        CheckConstraint("time_spent_hours >= 0 AND time_spent_hours <= 24", name="ck_checkins_time"),
        CheckConstraint("burnout_score >= 0 AND burnout_score <= 10", name="ck_checkins_score"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    date = Column(Date, nullable=False)

    stress_level = Column(Integer, nullable=False)
    sleep_hours = Column(Numeric(4, 2), nullable=False)
    mood_level = Column(Integer, nullable=False)
    time_spent_hours = Column(Numeric(4, 2), nullable=False)

    # Derived from the four metrics above; recomputed on every write
    burnout_score = Column(Numeric(3, 1), nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
