from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict

from recovery.metrics.records import MilestoneType


class MilestoneRead(BaseModel):
    id: Optional[int] = None
    milestone_type: MilestoneType
    milestone_value: int
    achieved_date: date
    title: str
    description: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class MilestoneAwardRead(BaseModel):
    milestone: MilestoneRead
    status: str  # created, exists, failed
    error: Optional[str] = None


class MilestoneEvaluation(BaseModel):
    awards: list[MilestoneAwardRead]
    created: int
    failed: int
