import re
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from recovery.core.constants import (
    CONTACT_PRIORITY_LABELS,
    MIN_PHONE_DIGITS,
    RELATIONSHIP_OPTIONS,
)


def phone_digits(phone: str) -> str:
    return re.sub(r"\D", "", phone or "")


def format_phone(phone: str) -> str:
    """'5551234567' -> '(555) 123-4567'; other lengths come back unchanged."""
    digits = phone_digits(phone)
    if len(digits) == 10:
        return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"
    return phone


def _check_phone(v):
    if v is None:
        return v
    v = v.strip()
    if len(phone_digits(v)) < MIN_PHONE_DIGITS:
        raise ValueError(f"phone must contain at least {MIN_PHONE_DIGITS} digits")
    return v


def _check_relationship(v):
    if v is not None and v not in RELATIONSHIP_OPTIONS:
        raise ValueError(f"relationship must be one of: {', '.join(RELATIONSHIP_OPTIONS)}")
    return v


class ContactBase(BaseModel):
    name: str = Field(..., min_length=1)
    phone: str
    relationship: Optional[str] = None
    priority_level: int = Field(1, ge=1, le=5)

    @field_validator("phone")
    @classmethod
    def _dialable_phone(cls, v):
        return _check_phone(v)

    @field_validator("relationship", mode="before")
    @classmethod
    def _known_relationship(cls, v):
        if isinstance(v, str) and v.strip() == "":
            return None
        return _check_relationship(v)


class ContactCreate(ContactBase):
    pass


class ContactUpdate(BaseModel):
    """Partial update; omitted fields keep their value."""

    name: Optional[str] = Field(None, min_length=1)
    phone: Optional[str] = None
    relationship: Optional[str] = None
    priority_level: Optional[int] = Field(None, ge=1, le=5)

    model_config = ConfigDict(extra="ignore")

    @field_validator("phone")
    @classmethod
    def _dialable_phone(cls, v):
        return _check_phone(v)

    @field_validator("relationship", mode="before")
    @classmethod
    def _known_relationship(cls, v):
        if isinstance(v, str) and v.strip() == "":
            return None
        return _check_relationship(v)


class ContactRead(ContactBase):
    id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @computed_field
    @property
    def priority_label(self) -> str:
        return CONTACT_PRIORITY_LABELS[self.priority_level]

    @computed_field
    @property
    def display_phone(self) -> str:
        return format_phone(self.phone)

    @computed_field
    @property
    def dial_number(self) -> str:
        # what a tel:/sms: link should carry
        return phone_digits(self.phone)


class CrisisHotline(BaseModel):
    name: str
    number: str
    description: str
