from sqlalchemy import Column, String, Date, DateTime, JSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.sql import func
from recovery.db import Base


class RecoveryProfile(Base):
    __tablename__ = "recovery_profiles"

    # One profile per user, keyed by the auth provider's user id
    user_id = Column(String, primary_key=True, index=True)

    # Absent means days-clean milestones are never evaluated
    recovery_start_date = Column(Date, nullable=True)
    timezone = Column(String(64), nullable=False, server_default="UTC")
    recovery_program = Column(String, nullable=True)

    # {"anonymous": false, "share_progress": false, "data_analytics": true}
    privacy_settings = Column(JSON().with_variant(JSONB, "postgresql"), nullable=True)
    # {"daily_reminder": true, ..., "reminder_time": "09:00"}
    notification_preferences = Column(JSON().with_variant(JSONB, "postgresql"), nullable=True)

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
