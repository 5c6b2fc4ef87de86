from datetime import date, timedelta

from recovery.metrics.records import CheckIn
from recovery.metrics.streaks import calculate_streak, dates_from_check_ins


TODAY = date(2025, 3, 10)


def days_ago(*offsets):
    return [TODAY - timedelta(days=n) for n in offsets]


def test_empty_history_has_no_streak():
    assert calculate_streak([], TODAY) == 0


def test_streak_stops_at_first_gap():
    assert calculate_streak(days_ago(0, 1, 3), TODAY) == 2


def test_streak_without_check_in_today_is_zero():
    assert calculate_streak(days_ago(1, 2, 3), TODAY) == 0


def test_unbroken_history_counts_every_day():
    assert calculate_streak(days_ago(*range(10)), TODAY) == 10


def test_short_window_ends_streak():
    # only the 3 most recent check-ins were fetched
    assert calculate_streak(days_ago(0, 1, 2), TODAY) == 3


def test_string_dates_are_compared_by_day():
    assert calculate_streak(["2025-03-10", "2025-03-09T23:59:00"], TODAY) == 2


def test_dates_from_check_ins_dedupes_and_sorts_newest_first():
    check_ins = [CheckIn(date=d) for d in days_ago(2, 0, 1, 0)]
    assert dates_from_check_ins(check_ins) == days_ago(0, 1, 2)
