"""
Centralized Utilities for Time Handling in Respire.
Goal: Ensure consistent UTC storage and calendar-day arithmetic.
"""
from datetime import date, datetime, timezone
from typing import Optional, Union


def utcnow() -> datetime:
    """
    Get the current timezone-aware UTC datetime.
    Always use this instead of datetime.utcnow() or datetime.now().
    """
    return datetime.now(timezone.utc)


def utc_today() -> date:
    """Current calendar date in UTC, used as the default day key."""
    return utcnow().date()


def to_date(val: Union[date, datetime, str, None]) -> Optional[date]:
    """
    Normalize various date representations to a date object.

    Accepts date, datetime or an ISO string ("2024-01-03" or a full
    timestamp). Returns None when the value cannot be parsed.
    """
    if val is None:
        return None

    if isinstance(val, datetime):
        return val.date()

    if isinstance(val, date):
        return val

    if isinstance(val, str):
        try:
            return datetime.fromisoformat(val.replace('Z', '+00:00')).date()
        except ValueError:
            try:
                return datetime.strptime(val, '%Y-%m-%d').date()
            except ValueError:
                return None

    return None


def days_between(earlier: date, later: date) -> int:
    """Calendar-day difference, independent of wall-clock hours and DST."""
    return later.toordinal() - earlier.toordinal()
