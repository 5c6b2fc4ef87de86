from sqlalchemy import Column, Integer, String, Date, DateTime, UniqueConstraint
from sqlalchemy.sql import func
from recovery.db import Base


class Milestone(Base):
    __tablename__ = "milestones"
    # Inserting an already-earned milestone fails here instead of duplicating it
    __table_args__ = (
        UniqueConstraint(
            "user_id", "milestone_type", "milestone_value",
            name="uq_milestone_user_type_value",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)

    # days_clean, meetings_attended, check_ins_completed, goals_achieved
    milestone_type = Column(String(30), nullable=False)
    milestone_value = Column(Integer, nullable=False)

    achieved_date = Column(Date, nullable=False)
    title = Column(String, nullable=False)
    description = Column(String, nullable=True)

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
