from sqlalchemy import Column, Integer, String, Boolean, Date, DateTime, CheckConstraint
from sqlalchemy.sql import func, false
from recovery.db import Base


class Goal(Base):
    __tablename__ = "goals"
    __table_args__ = (
        CheckConstraint(
            "(is_completed AND completed_date IS NOT NULL)"
            " OR (NOT is_completed AND completed_date IS NULL)",
            name="ck_goal_completed_date",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)

    title = Column(String, nullable=False)
    description = Column(String, nullable=True)
    category = Column(String(40), nullable=False, server_default="Recovery")

    target_date = Column(Date, nullable=True)

    # completed_date is set iff is_completed
    is_completed = Column(Boolean, nullable=False, default=False, server_default=false())
    completed_date = Column(Date, nullable=True)

    # 1 = highest, 5 = lowest
    priority = Column(Integer, nullable=False, default=3, server_default="3")

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
