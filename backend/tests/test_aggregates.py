from datetime import date, timedelta

import pytest

from recovery.core.time_utils import window_start
from recovery.metrics.aggregates import (
    average_energy,
    average_mood,
    average_score,
    average_sleep,
    consistency_percent,
    daily_series,
    summarize_window,
    top_triggers,
    trigger_frequency,
)
from recovery.metrics.records import CheckIn


D = date(2025, 3, 10)


def test_average_mood_of_nothing_is_zero():
    assert average_mood([]) == 0


def test_average_mood():
    check_ins = [CheckIn(date=D, mood_score=8), CheckIn(date=D - timedelta(days=1), mood_score=4)]
    assert average_mood(check_ins) == 6.0


def test_missing_scores_count_as_zero():
    check_ins = [
        CheckIn(date=D, energy_level=4, sleep_quality=None),
        CheckIn(date=D - timedelta(days=1), energy_level=None, sleep_quality=3),
    ]
    assert average_energy(check_ins) == 2.0
    assert average_sleep(check_ins) == 1.5


def test_unknown_score_field_rejected():
    with pytest.raises(ValueError):
        average_score([], "notes")


def test_trigger_frequency_keeps_first_appearance_order():
    check_ins = [
        CheckIn(date=D, trigger_tags=("Stress",)),
        CheckIn(date=D - timedelta(days=1), trigger_tags=("Stress", "Boredom")),
    ]
    counts = trigger_frequency(check_ins)
    assert counts == {"Stress": 2, "Boredom": 1}
    assert list(counts) == ["Stress", "Boredom"]


def test_top_triggers_sorted_by_count():
    counts = {"Boredom": 1, "Stress": 3, "Family": 1, "Anger": 2}
    assert top_triggers(counts, limit=3) == [("Stress", 3), ("Anger", 2), ("Boredom", 1)]


def test_consistency_rounds_half_up():
    assert consistency_percent(7, 7) == 100
    assert consistency_percent(1, 8) == 13  # 12.5
    assert consistency_percent(0, 30) == 0


def test_consistency_requires_positive_window():
    with pytest.raises(ValueError):
        consistency_percent(1, 0)


def test_summarize_window():
    check_ins = [
        CheckIn(date=D, mood_score=7, energy_level=3, sleep_quality=4, trigger_tags=("Family",)),
        CheckIn(date=D - timedelta(days=2), mood_score=5, energy_level=5, sleep_quality=2),
    ]
    summary = summarize_window(check_ins, 7)
    assert summary.check_in_count == 2
    assert summary.average_mood == 6.0
    assert summary.average_energy == 4.0
    assert summary.average_sleep == 3.0
    assert summary.consistency_percent == 29
    assert summary.trigger_counts == {"Family": 1}
    assert summary.integrity_warning is None


def test_duplicate_days_are_reported_not_clamped(caplog):
    check_ins = [CheckIn(date=D, mood_score=5)] * 3
    summary = summarize_window(check_ins, 2)
    assert summary.consistency_percent == 150
    assert summary.integrity_warning is not None
    assert D.isoformat() in summary.integrity_warning
    assert "integrity" in caplog.text


def test_daily_series_is_chronological():
    check_ins = [CheckIn(date=D, mood_score=6), CheckIn(date=D - timedelta(days=1), energy_level=2)]
    series = daily_series(check_ins)
    assert [p["date"] for p in series] == [D - timedelta(days=1), D]
    assert series[0] == {"date": D - timedelta(days=1), "mood": 0, "energy": 2, "sleep": 0}


def test_window_start_covers_exact_number_of_days():
    assert window_start(D, 7) == date(2025, 3, 4)
    assert window_start(D, 1) == D
