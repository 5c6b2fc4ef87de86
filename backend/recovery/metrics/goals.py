from __future__ import annotations

import dataclasses
from datetime import date
from typing import Optional

from recovery.core.time_utils import days_between, local_day
from recovery.metrics.records import Goal


def goal_progress(goal: Goal, today: Optional[date] = None, tz_name: Optional[str] = None) -> float:
    """Percent of the way from creation to target date, in [0, 100].

    Completed goals are at 100 and goals without a target date at 0. A
    target on or before the creation day counts as reached once the goal
    exists.

    `created_at` is read as a calendar day in `tz_name`, which should be the
    zone `today` was taken in.
    """
    if goal.is_completed:
        return 100.0
    if goal.target_date is None:
        return 0.0

    today = today or date.today()
    created = local_day(goal.created_at, tz_name)
    elapsed = days_between(created, today)
    total = days_between(created, goal.target_date)

    if total <= 0:
        return 100.0 if elapsed >= 0 else 0.0
    return min(100.0, max(0.0, elapsed / total * 100))


def days_until_target(target_date: date, today: Optional[date] = None) -> int:
    return days_between(today or date.today(), target_date)


def describe_days_until(days: int) -> str:
    """'3 days overdue', 'Due today', '1 day left' or 'N days left'."""
    if days < 0:
        return f"{abs(days)} days overdue"
    if days == 0:
        return "Due today"
    if days == 1:
        return "1 day left"
    return f"{days} days left"


def set_completion(goal: Goal, completed: bool, today: Optional[date] = None) -> Goal:
    """Copy of `goal` marked (in)complete; completion is stamped with today."""
    completed_date = (today or date.today()) if completed else None
    return dataclasses.replace(goal, is_completed=completed, completed_date=completed_date)
