from datetime import date
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.constants import DEFAULT_TARGET_DAYS


def _clean_title(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("title must not be blank")
    return v


class GoalBase(BaseModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    target_days: int = Field(DEFAULT_TARGET_DAYS, ge=1, le=7)

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, v):
        return _clean_title(v)


class GoalCreate(GoalBase):
    """Schema for creating a goal; week_start defaults to the current week."""

    week_start: Optional[date] = None


class GoalUpdate(BaseModel):
    """All fields optional."""

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    target_days: Optional[int] = Field(None, ge=1, le=7)

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, v):
        return v if v is None else _clean_title(v)

    # Be lenient with extra fields from clients
    model_config = ConfigDict(extra="ignore")


class GoalRead(GoalBase):
    id: int
    week_start: date
    # ISO date -> completed
    completions: dict[date, bool] = {}
    completed_days: int = 0
    progress_pct: float = 0.0


class CompletionUpdate(BaseModel):
    completed: bool


class CompletionRead(BaseModel):
    goal_id: int
    date: date
    completed: bool

    model_config = ConfigDict(from_attributes=True)
