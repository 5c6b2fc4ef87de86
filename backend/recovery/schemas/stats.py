from datetime import date
from typing import Optional

from pydantic import BaseModel

from recovery.schemas.check_in import CheckInRead


class DashboardStats(BaseModel):
    total_check_ins: int
    average_mood: float  # last N days, one decimal
    streak: int
    recent_check_ins: list[CheckInRead]


class TriggerCount(BaseModel):
    trigger: str
    count: int


class DailyPoint(BaseModel):
    date: date
    mood: int
    energy: int
    sleep: int


class ProgressStats(BaseModel):
    window_days: int
    start_date: date
    end_date: date
    check_in_count: int
    average_mood: float
    average_energy: float
    average_sleep: float
    consistency_percent: int
    # tag -> count, in order of first appearance
    trigger_counts: dict[str, int]
    top_triggers: list[TriggerCount]
    series: list[DailyPoint]
    integrity_warning: Optional[str] = None
