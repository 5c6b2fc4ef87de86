from datetime import date, datetime, timedelta, timezone


def to_local_datetime(dt, tz_name: str | None = None):
    """Convert a datetime from source tz (assume UTC if naive) to local or given tz.

    - If `tz_name` is 'local' or None: use system local timezone.
    - If `tz_name` is IANA tz name (e.g., 'America/New_York'): use that.
    - If `dt` has no tzinfo, assume UTC.
    - Unknown tz names fall back to the system local timezone.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    if tz_name and tz_name != "local":
        from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
        try:
            return dt.astimezone(ZoneInfo(tz_name))
        except (ZoneInfoNotFoundError, ValueError):
            return dt.astimezone()
    return dt.astimezone()


def today_local(tz_name: str | None = None) -> date:
    """Calendar day it currently is in `tz_name` (see `to_local_datetime`)."""
    return to_local_datetime(datetime.now(timezone.utc), tz_name).date()


def to_day(value) -> date:
    """Normalize a date, datetime or 'YYYY-MM-DD...' string to a calendar day.

    Example: '2025-01-01T08:30:00Z' -> date(2025, 1, 1)
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            raise ValueError(f"Invalid date value: {value!r}") from None
    raise TypeError(f"Cannot interpret {type(value).__name__} as a date")


def local_day(value, tz_name: str | None = None) -> date:
    """Calendar day of `value` as seen in `tz_name`.

    Datetimes are converted first (naive ones are taken as UTC); dates and
    strings are used as-is. Without `tz_name` no conversion happens.

    Example: 2025-01-02T05:00Z in 'Pacific/Pago_Pago' -> date(2025, 1, 1)
    """
    if tz_name and isinstance(value, datetime):
        return to_local_datetime(value, tz_name).date()
    return to_day(value)


def days_between(start: date, end: date) -> int:
    """Whole calendar days from `start` to `end` (negative if end is earlier)."""
    return (to_day(end) - to_day(start)).days


def window_start(today: date, window_days: int) -> date:
    """First day of a window of exactly `window_days` days ending on `today`.

    Example: today=2025-01-07, window_days=7 -> 2025-01-01
    """
    if window_days <= 0:
        raise ValueError("window_days must be > 0")
    return today - timedelta(days=window_days - 1)
