"""Consecutive-day check-in streaks."""
from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Iterable, Optional, Sequence

from recovery.core.time_utils import to_day
from recovery.metrics.records import CheckIn

logger = logging.getLogger(__name__)


def dates_from_check_ins(check_ins: Iterable[CheckIn]) -> list[date]:
    """Unique check-in days, most recent first."""
    days: set[date] = set()
    for check_in in check_ins:
        day = to_day(check_in.date)
        if day in days:
            logger.warning("Duplicate check-in found for %s", day)
        days.add(day)
    return sorted(days, reverse=True)


def calculate_streak(dates: Sequence[date], today: Optional[date] = None) -> int:
    """Count consecutive days with a check-in, walking back from `today`.

    `dates` must be ordered most recent first with one entry per day. The
    walk stops at the first gap or at the end of `dates`, so a list shorter
    than the real history yields a shorter streak.

    Example: [today, today-1, today-3] -> 2
    """
    if not dates:
        return 0
    today = today or date.today()

    streak = 0
    for i, day in enumerate(dates):
        expected = today - timedelta(days=i)
        if to_day(day) != expected:
            break
        streak += 1
    return streak
