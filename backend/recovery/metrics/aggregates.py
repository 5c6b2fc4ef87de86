"""Rolling averages and trigger counts over a window of check-ins."""
from __future__ import annotations

import logging
import math
from collections import Counter
from datetime import date
from typing import Iterable, Sequence

from recovery.core.constants import TOP_TRIGGER_LIMIT
from recovery.metrics.records import CheckIn, WindowSummary

logger = logging.getLogger(__name__)

SCORE_FIELDS = ("mood_score", "energy_level", "sleep_quality")


def average_score(check_ins: Sequence[CheckIn], field: str) -> float:
    """Mean of `field` with missing scores counted as 0; 0.0 for no records."""
    if field not in SCORE_FIELDS:
        raise ValueError(f"Unknown score field: {field}")
    if not check_ins:
        return 0.0
    total = sum(getattr(c, field) or 0 for c in check_ins)
    return total / len(check_ins)


def average_mood(check_ins: Sequence[CheckIn]) -> float:
    return average_score(check_ins, "mood_score")


def average_energy(check_ins: Sequence[CheckIn]) -> float:
    return average_score(check_ins, "energy_level")


def average_sleep(check_ins: Sequence[CheckIn]) -> float:
    return average_score(check_ins, "sleep_quality")


def trigger_frequency(check_ins: Iterable[CheckIn]) -> dict[str, int]:
    """Occurrences per trigger tag, keyed in order of first appearance.

    Example: [{Stress}, {Stress, Boredom}] -> {"Stress": 2, "Boredom": 1}
    """
    counts: dict[str, int] = {}
    for check_in in check_ins:
        for tag in check_in.trigger_tags or ():
            counts[tag] = counts.get(tag, 0) + 1
    return counts


def top_triggers(counts: dict[str, int], limit: int = TOP_TRIGGER_LIMIT) -> list[tuple[str, int]]:
    """Most frequent triggers first; ties keep first-appearance order."""
    return Counter(counts).most_common(limit)


def consistency_percent(record_count: int, window_days: int) -> int:
    """Share of days in the window with a check-in, rounded half up.

    Not clamped: a value above 100 means the store returned more than one
    check-in for some day.
    """
    if window_days <= 0:
        raise ValueError("window_days must be > 0")
    return math.floor(record_count / window_days * 100 + 0.5)


def daily_series(check_ins: Iterable[CheckIn]) -> list[dict]:
    """Chart points oldest first: {date, mood, energy, sleep} (missing as 0)."""
    points = [
        {
            "date": c.date,
            "mood": c.mood_score or 0,
            "energy": c.energy_level or 0,
            "sleep": c.sleep_quality or 0,
        }
        for c in check_ins
    ]
    points.sort(key=lambda p: p["date"])
    return points


def _duplicate_days(check_ins: Iterable[CheckIn]) -> list[date]:
    seen: set[date] = set()
    dupes: list[date] = []
    for c in check_ins:
        if c.date in seen and c.date not in dupes:
            dupes.append(c.date)
        seen.add(c.date)
    return dupes


def summarize_window(check_ins: Sequence[CheckIn], window_days: int) -> WindowSummary:
    """All window statistics for the progress view.

    `check_ins` are expected to already fall inside the window.
    """
    count = len(check_ins)
    consistency = consistency_percent(count, window_days)

    warning = None
    dupes = _duplicate_days(check_ins)
    if consistency > 100 or dupes:
        warning = (
            f"{count} check-ins in a {window_days}-day window"
            f" (duplicate days: {', '.join(d.isoformat() for d in dupes) or 'none'})"
        )
        logger.warning("Check-in data integrity violation: %s", warning)

    return WindowSummary(
        window_days=window_days,
        check_in_count=count,
        average_mood=average_mood(check_ins),
        average_energy=average_energy(check_ins),
        average_sleep=average_sleep(check_ins),
        consistency_percent=consistency,
        trigger_counts=trigger_frequency(check_ins),
        integrity_warning=warning,
    )
