from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime) -> datetime:
    """Naive datetimes are taken as UTC; aware ones are converted to UTC.

    Season and week arithmetic compares against tz-aware anchors built at
    midnight UTC, so any naive value coming from a query string or a test
    must be wrapped first, otherwise Python raises "can't compare
    offset-naive and offset-aware datetimes".
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_utc(value: str | datetime) -> datetime:
    """Parse a date string or datetime into a tz-aware UTC datetime.

    Handles ISO 8601 strings (with or without Z/offset) and bare datetimes.
    """
    if isinstance(value, datetime):
        return ensure_utc(value)
    return ensure_utc(datetime.fromisoformat(value.replace("Z", "+00:00")))


def today_in_tz(tz_name: str, now: datetime | None = None) -> date:
    """Calendar date in an IANA timezone (US TV schedules are keyed to ET)."""
    current = ensure_utc(now) if now is not None else utcnow()
    return current.astimezone(ZoneInfo(tz_name)).date()


def to_espn_date(value: str | date) -> str:
    """``2025-01-31`` -> ``20250131`` (the ``dates`` param of ESPN scoreboards)."""
    if isinstance(value, date):
        return value.strftime("%Y%m%d")
    return str(value).replace("-", "")
