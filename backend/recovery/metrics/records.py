"""Plain records the metrics engine computes over.

These are snapshots handed over by the record store; the engine never
talks to the database itself.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional


class MilestoneType(str, Enum):
    days_clean = "days_clean"
    meetings_attended = "meetings_attended"
    check_ins_completed = "check_ins_completed"
    goals_achieved = "goals_achieved"


@dataclass(frozen=True)
class CheckIn:
    date: date
    mood_score: Optional[int] = None     # 1-10
    energy_level: Optional[int] = None   # 1-5
    sleep_quality: Optional[int] = None  # 1-5
    trigger_tags: tuple[str, ...] = ()
    gratitude_note: Optional[str] = None
    notes: Optional[str] = None
    id: Optional[int] = None


@dataclass(frozen=True)
class Goal:
    id: Optional[int]
    title: str
    created_at: datetime
    category: str = "Recovery"
    priority: int = 3
    target_date: Optional[date] = None
    is_completed: bool = False
    completed_date: Optional[date] = None
    description: Optional[str] = None

    def __post_init__(self):
        if self.is_completed != (self.completed_date is not None):
            raise ValueError("completed_date must be set exactly when the goal is completed")


@dataclass(frozen=True)
class Milestone:
    milestone_type: MilestoneType
    milestone_value: int
    achieved_date: date
    title: str
    description: Optional[str] = None
    id: Optional[int] = None

    @property
    def key(self) -> tuple[str, int]:
        return (MilestoneType(self.milestone_type).value, self.milestone_value)


@dataclass(frozen=True)
class RecoveryProfile:
    recovery_start_date: Optional[date] = None
    timezone: str = "UTC"
    recovery_program: Optional[str] = None


@dataclass(frozen=True)
class MilestoneCounters:
    """Current counter values; `None` means the counter is not tracked."""

    days_clean: Optional[int] = None
    check_ins_completed: Optional[int] = None
    meetings_attended: Optional[int] = None
    goals_achieved: Optional[int] = None

    def value_for(self, milestone_type: MilestoneType) -> Optional[int]:
        return getattr(self, MilestoneType(milestone_type).value)


@dataclass(frozen=True)
class WindowSummary:
    window_days: int
    check_in_count: int
    average_mood: float
    average_energy: float
    average_sleep: float
    consistency_percent: int
    trigger_counts: dict[str, int] = field(default_factory=dict)
    integrity_warning: Optional[str] = None
