from datetime import date, datetime, timezone

import pytest

from recovery.core.time_utils import local_day, to_day, to_local_datetime, window_start


def test_naive_datetimes_are_utc():
    local = to_local_datetime(datetime(2025, 1, 1, 23, 30), "Asia/Tokyo")
    assert local.date() == date(2025, 1, 2)
    assert local.hour == 8


def test_local_day_converts_aware_datetimes():
    created = datetime(2025, 1, 2, 5, 0, tzinfo=timezone.utc)
    assert local_day(created, "Pacific/Pago_Pago") == date(2025, 1, 1)
    assert local_day(created, "Pacific/Kiritimati") == date(2025, 1, 2)
    assert local_day(created) == date(2025, 1, 2)


def test_local_day_leaves_dates_alone():
    assert local_day(date(2025, 1, 1), "Pacific/Kiritimati") == date(2025, 1, 1)
    assert local_day("2025-01-01T23:00:00Z", "Asia/Tokyo") == date(2025, 1, 1)


def test_to_day_rejects_garbage():
    with pytest.raises(ValueError):
        to_day("not a date")
    with pytest.raises(TypeError):
        to_day(42)


def test_window_start():
    assert window_start(date(2025, 1, 7), 7) == date(2025, 1, 1)
    with pytest.raises(ValueError):
        window_start(date(2025, 1, 7), 0)
