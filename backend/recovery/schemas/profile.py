from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from recovery.core.constants import DEFAULT_NOTIFICATION_PREFERENCES, DEFAULT_PRIVACY_SETTINGS


class PrivacySettings(BaseModel):
    anonymous: bool = DEFAULT_PRIVACY_SETTINGS["anonymous"]
    share_progress: bool = DEFAULT_PRIVACY_SETTINGS["share_progress"]
    data_analytics: bool = DEFAULT_PRIVACY_SETTINGS["data_analytics"]


class NotificationPreferences(BaseModel):
    daily_reminder: bool = DEFAULT_NOTIFICATION_PREFERENCES["daily_reminder"]
    milestone_alerts: bool = DEFAULT_NOTIFICATION_PREFERENCES["milestone_alerts"]
    weekly_summary: bool = DEFAULT_NOTIFICATION_PREFERENCES["weekly_summary"]
    crisis_check_ins: bool = DEFAULT_NOTIFICATION_PREFERENCES["crisis_check_ins"]
    # "HH:MM", 24h clock, in the profile timezone
    reminder_time: str = Field(
        DEFAULT_NOTIFICATION_PREFERENCES["reminder_time"],
        pattern=r"^([01]\d|2[0-3]):[0-5]\d$",
    )


class ProfileUpsert(BaseModel):
    recovery_start_date: Optional[date] = None
    timezone: str = "UTC"
    recovery_program: Optional[str] = None
    privacy_settings: PrivacySettings = Field(default_factory=PrivacySettings)
    notification_preferences: NotificationPreferences = Field(default_factory=NotificationPreferences)

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, v):
        from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Unknown timezone: {v}") from None
        return v


class ProfileRead(BaseModel):
    recovery_start_date: Optional[date] = None
    timezone: str = "UTC"
    recovery_program: Optional[str] = None
    privacy_settings: PrivacySettings = Field(default_factory=PrivacySettings)
    notification_preferences: NotificationPreferences = Field(default_factory=NotificationPreferences)
    days_clean: Optional[int] = None
    clean_time_label: Optional[str] = None  # e.g. "1 year 2 months 3 days"

    model_config = ConfigDict(from_attributes=True)
