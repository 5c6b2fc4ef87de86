"""Automatic milestone unlocking.

`evaluate_milestones` is the pure part: it compares counters against the
fixed threshold tables and returns every milestone that is earned but not
yet recorded. `award_milestones` gathers the counters through a record
store, runs the evaluation and persists each new milestone on its own, so
one failed insert never undoes the others.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from recovery.core.constants import MILESTONE_THRESHOLDS
from recovery.core.time_utils import days_between
from recovery.metrics.records import Milestone, MilestoneCounters, MilestoneType
from recovery.store import InsertResult, RecordStore, StoreError

logger = logging.getLogger(__name__)


def _plural(n: int, singular: str, plural: str) -> str:
    return singular if n == 1 else plural


def _days_clean_text(n):
    return (
        f"{n} {_plural(n, 'Day', 'Days')} Clean",
        f"Congratulations on reaching {n} {_plural(n, 'day', 'days')} of sobriety!",
    )


def _meetings_text(n):
    return (
        f"{n} {_plural(n, 'Meeting', 'Meetings')} Attended",
        f"You've shown up for {n} {_plural(n, 'meeting', 'meetings')}. Keep going!",
    )


def _check_ins_text(n):
    return (
        f"{n} Check-ins Completed",
        f"Great job on completing {n} daily check-ins!",
    )


def _goals_text(n):
    return (
        f"{n} {_plural(n, 'Goal', 'Goals')} Achieved",
        f"You've achieved {n} {_plural(n, 'goal', 'goals')}. Well done!",
    )


_TEMPLATES = {
    MilestoneType.days_clean: _days_clean_text,
    MilestoneType.meetings_attended: _meetings_text,
    MilestoneType.check_ins_completed: _check_ins_text,
    MilestoneType.goals_achieved: _goals_text,
}


def milestone_text(milestone_type: MilestoneType, value: int) -> tuple[str, str]:
    """(title, description) for a milestone of `milestone_type` at `value`."""
    return _TEMPLATES[MilestoneType(milestone_type)](value)


def days_clean(recovery_start_date: Optional[date], today: Optional[date] = None) -> Optional[int]:
    """Whole days since the recovery start date, or None when there is none."""
    if recovery_start_date is None:
        return None
    return days_between(recovery_start_date, today or date.today())


def describe_clean_time(days: Optional[int]) -> Optional[str]:
    """'1 year 2 months 3 days' style label; years are 365 days, months 30.

    Zero parts are left out except for a bare '0 days'. None for a missing
    or negative count.
    """
    if days is None or days < 0:
        return None
    years, rest = divmod(days, 365)
    months, rest = divmod(rest, 30)
    parts = []
    if years:
        parts.append(f"{years} {_plural(years, 'year', 'years')}")
    if months:
        parts.append(f"{months} {_plural(months, 'month', 'months')}")
    if rest or not parts:
        parts.append(f"{rest} {_plural(rest, 'day', 'days')}")
    return " ".join(parts)


def evaluate_milestones(
    counters: MilestoneCounters,
    existing: Iterable[Milestone],
    today: Optional[date] = None,
) -> list[Milestone]:
    """Milestones earned by `counters` that are not in `existing`.

    Every qualifying threshold is returned, not only the highest:
    days_clean=35 with nothing recorded yields 1, 7 and 30.
    """
    today = today or date.today()
    earned = {m.key for m in existing}

    new: list[Milestone] = []
    for type_name, thresholds in MILESTONE_THRESHOLDS.items():
        milestone_type = MilestoneType(type_name)
        current = counters.value_for(milestone_type)
        if current is None:
            continue
        for threshold in thresholds:
            if current < threshold or (type_name, threshold) in earned:
                continue
            title, description = milestone_text(milestone_type, threshold)
            new.append(
                Milestone(
                    milestone_type=milestone_type,
                    milestone_value=threshold,
                    achieved_date=today,
                    title=title,
                    description=description,
                )
            )
    return new


@dataclass(frozen=True)
class MilestoneAward:
    """Outcome of persisting one newly earned milestone."""

    milestone: Milestone
    status: str  # "created", "exists" or "failed"
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status != "failed"


def gather_counters(store: RecordStore, user_id: str, today: Optional[date] = None) -> MilestoneCounters:
    profile = store.fetch_recovery_profile(user_id)
    return MilestoneCounters(
        days_clean=days_clean(profile.recovery_start_date if profile else None, today),
        check_ins_completed=store.fetch_check_in_count(user_id),
        # no meeting log exists yet, so meeting milestones never unlock
        meetings_attended=None,
        goals_achieved=store.fetch_completed_goal_count(user_id),
    )


def award_milestones(store: RecordStore, user_id: str, today: Optional[date] = None) -> list[MilestoneAward]:
    """Evaluate and persist newly earned milestones for `user_id`.

    Fetch failures propagate as `StoreError`. Insert failures are reported
    per milestone; milestones inserted earlier in the pass stay inserted.
    """
    today = today or date.today()
    counters = gather_counters(store, user_id, today)
    existing = store.fetch_milestones(user_id)

    awards: list[MilestoneAward] = []
    for milestone in evaluate_milestones(counters, existing, today):
        try:
            result = store.insert_milestone(user_id, milestone)
        except StoreError as e:
            logger.error("Failed to record milestone %s for user %s: %s", milestone.key, user_id, e)
            awards.append(MilestoneAward(milestone, "failed", str(e)))
            continue
        if result is InsertResult.EXISTS:
            logger.info("Milestone %s already recorded for user %s", milestone.key, user_id)
            awards.append(MilestoneAward(milestone, "exists"))
        else:
            logger.info("Milestone %s unlocked for user %s", milestone.key, user_id)
            awards.append(MilestoneAward(milestone, "created"))
    return awards
