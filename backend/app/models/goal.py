from sqlalchemy import CheckConstraint, Column, Date, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db import Base


class Goal(Base):
    __tablename__ = "goals"
    __table_args__ = (
        CheckConstraint("target_days >= 1 AND target_days <= 7", name="ck_goals_target_days"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    title = Column(String, nullable=False)
    description = Column(String, nullable=True)
    target_days = Column(Integer, nullable=False, server_default="5")

    # Monday of the week (local)
    week_start = Column(Date, nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    completions = relationship(
        "DailyCompletion",
        back_populates="goal",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="DailyCompletion.date",
    )
