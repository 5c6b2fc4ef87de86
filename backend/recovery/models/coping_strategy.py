from sqlalchemy import Column, Integer, String, Boolean, DateTime, UniqueConstraint
from sqlalchemy.sql import func, false
from recovery.db import Base


class CopingStrategy(Base):
    __tablename__ = "coping_strategies"
    # Titles are unique per user; built-in strategies are copied in once
    __table_args__ = (UniqueConstraint("user_id", "title", name="uq_strategy_user_title"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)

    category = Column(String(40), nullable=False, server_default="Custom")
    title = Column(String, nullable=False)
    description = Column(String, nullable=True)

    # False for the built-in library, True for strategies the user added
    is_custom = Column(Boolean, nullable=False, default=False, server_default=false())

    effectiveness_rating = Column(Integer, nullable=True)  # 1-5
    usage_count = Column(Integer, nullable=False, default=0, server_default="0")
    last_used = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
