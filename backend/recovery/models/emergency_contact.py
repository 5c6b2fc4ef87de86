from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from recovery.db import Base


class EmergencyContact(Base):
    __tablename__ = "emergency_contacts"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)

    name = Column(String, nullable=False)
    phone = Column(String(40), nullable=False)
    relationship = Column(String(40), nullable=True)

    # 1 = Critical ... 5 = Reference
    priority_level = Column(Integer, nullable=False, default=1, server_default="1")

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
