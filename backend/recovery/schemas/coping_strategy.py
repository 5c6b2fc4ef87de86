from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from recovery.core.constants import EFFECTIVENESS_RANGE, STRATEGY_CATEGORIES


class StrategyCreate(BaseModel):
    """Schema for adding a custom strategy to the user's library."""

    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    category: str = "Custom"

    @field_validator("title")
    @classmethod
    def _strip_title(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("title cannot be blank")
        return v

    @field_validator("category")
    @classmethod
    def _known_category(cls, v):
        if v not in STRATEGY_CATEGORIES:
            raise ValueError(f"category must be one of: {', '.join(STRATEGY_CATEGORIES)}")
        return v


class StrategyRating(BaseModel):
    rating: int = Field(..., ge=EFFECTIVENESS_RANGE[0], le=EFFECTIVENESS_RANGE[1])


class StrategyRead(BaseModel):
    id: int
    category: str
    title: str
    description: Optional[str] = None
    is_custom: bool
    effectiveness_rating: Optional[int] = None
    usage_count: int
    last_used: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
