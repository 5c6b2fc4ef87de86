from sqlalchemy import Column, Integer, String, Date, DateTime, JSON, UniqueConstraint
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.sql import func
from recovery.db import Base


class DailyCheckIn(Base):
    __tablename__ = "daily_checkins"
    # One check-in per user per calendar day; re-submitting overwrites it
    __table_args__ = (UniqueConstraint("user_id", "date", name="uq_checkin_user_date"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)

    date = Column(Date, nullable=False)

    mood_score = Column(Integer, nullable=True)      # 1-10
    energy_level = Column(Integer, nullable=True)    # 1-5
    sleep_quality = Column(Integer, nullable=True)   # 1-5

    # ["Stress", "Boredom", ...] in the order they were selected
    trigger_tags = Column(JSON().with_variant(JSONB, "postgresql"), nullable=False, default=list)

    gratitude_note = Column(String, nullable=True)
    notes = Column(String, nullable=True)

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
