"""
Time helpers shared by repositories and services.
"""
from datetime import datetime, timezone
from typing import Callable, Optional

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def to_naive_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Convert a datetime to timezone-naive UTC.
    SQL DATETIME columns (SQLite in particular) drop the offset.
    """
    if dt is None:
        return None
    if dt.tzinfo is not None:
        return dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt


def from_naive_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """Inverse of `to_naive_utc`: mark a naive UTC datetime as aware."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt
