"""Timestamp helpers. The database stores naive UTC datetimes."""
from datetime import datetime, timezone
import pytz


def utcnow() -> datetime:
    """Current time as a naive UTC datetime, the storage format"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def as_utc(dt: datetime | None) -> datetime | None:
    """
    Attach the UTC zone to a stored naive datetime for API output.

    Args:
        dt: Naive datetime assumed to be in UTC, or None

    Returns:
        Timezone-aware UTC datetime, or None if input is None
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return pytz.utc.localize(dt)
    return dt.astimezone(pytz.utc)
