from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from recovery.core.constants import ENERGY_RANGE, MOOD_RANGE, SLEEP_RANGE


class CheckInBase(BaseModel):
    mood_score: int = Field(5, ge=MOOD_RANGE[0], le=MOOD_RANGE[1])
    energy_level: int = Field(3, ge=ENERGY_RANGE[0], le=ENERGY_RANGE[1])
    sleep_quality: int = Field(3, ge=SLEEP_RANGE[0], le=SLEEP_RANGE[1])
    trigger_tags: list[str] = []
    gratitude_note: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("trigger_tags")
    @classmethod
    def _unique_tags(cls, v):
        # keep selection order, drop blanks and repeats
        seen: list[str] = []
        for tag in v:
            tag = tag.strip()
            if tag and tag not in seen:
                seen.append(tag)
        return seen

    @field_validator("gratitude_note", "notes", mode="before")
    @classmethod
    def _blank_to_none(cls, v):
        if isinstance(v, str) and v.strip() == "":
            return None
        return v


class CheckInUpsert(CheckInBase):
    """Schema for submitting the check-in of a day (creates or overwrites)."""
    pass


class CheckInRead(CheckInBase):
    """Schema returned to the frontend when reading a check-in."""

    id: int
    date: date
    # Scores may be missing on older rows
    mood_score: Optional[int] = None
    energy_level: Optional[int] = None
    sleep_quality: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)
