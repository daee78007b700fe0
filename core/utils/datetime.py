"""Datetime utilities for common operations."""

from datetime import datetime, timedelta, timezone
from typing import Callable

# Injectable "current time" source; the intake workflow takes one of these
Clock = Callable[[], datetime]


def now() -> datetime:
    """Get current datetime in UTC."""
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime) -> datetime:
    """
    Make a datetime timezone aware.

    Naive values (as returned by SQLite) are taken to be UTC already.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def add_minutes(dt: datetime, minutes: int) -> datetime:
    """
    Add minutes to a datetime.

    Args:
        dt: Datetime
        minutes: Number of minutes to add (can be negative)

    Returns:
        New datetime
    """
    return dt + timedelta(minutes=minutes)


def days_between(start: datetime, end: datetime) -> int:
    """Whole 24-hour periods elapsed from start to end (floored)."""
    return int((ensure_utc(end) - ensure_utc(start)).total_seconds() // 86400)


def to_unix_millis(dt: datetime) -> int:
    """
    Convert datetime to Unix time in milliseconds.

    Args:
        dt: Datetime to convert

    Returns:
        Milliseconds since epoch
    """
    return int(ensure_utc(dt).timestamp() * 1000)
