from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from recovery.core.constants import GOAL_CATEGORIES, PRIORITY_RANGE


def _check_category(v):
    if v is not None and v not in GOAL_CATEGORIES:
        raise ValueError(f"category must be one of: {', '.join(GOAL_CATEGORIES)}")
    return v


class GoalBase(BaseModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    category: str = "Recovery"
    target_date: Optional[date] = None
    priority: int = Field(3, ge=PRIORITY_RANGE[0], le=PRIORITY_RANGE[1])

    @field_validator("category")
    @classmethod
    def _known_category(cls, v):
        return _check_category(v)


class GoalCreate(GoalBase):
    """Schema for creating a new goal."""
    pass


class GoalUpdate(BaseModel):
    """Schema for updating an existing goal (all fields optional)."""

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    category: Optional[str] = None
    target_date: Optional[date] = None
    priority: Optional[int] = Field(None, ge=PRIORITY_RANGE[0], le=PRIORITY_RANGE[1])

    # Be lenient with extra fields from clients
    model_config = ConfigDict(extra="ignore")

    @field_validator("category")
    @classmethod
    def _known_category(cls, v):
        return _check_category(v)


class GoalRead(GoalBase):
    """Schema returned to the frontend when reading a goal."""

    id: int
    is_completed: bool
    completed_date: Optional[date] = None
    created_at: datetime
    progress: float              # 0-100
    days_left_label: Optional[str] = None  # e.g. "3 days left", None without target
