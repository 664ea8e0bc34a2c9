"""UTC day helpers.

Daily counters are keyed by the UTC calendar day, and the same ``date`` value
is used on the read and write paths. Naive datetimes are treated as UTC.
"""

from datetime import UTC, date, datetime, time, timedelta
from typing import Callable, Optional

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current time, timezone-aware UTC."""
    return datetime.now(UTC)


def _as_utc(now: Optional[datetime]) -> datetime:
    if now is None:
        return utc_now()
    if now.tzinfo is None:
        return now.replace(tzinfo=UTC)
    return now.astimezone(UTC)


def utc_today(now: Optional[datetime] = None) -> date:
    """UTC calendar day for *now* (default: the current time)."""
    return _as_utc(now).date()


def next_utc_midnight(now: Optional[datetime] = None) -> datetime:
    """Start of the UTC day after *now*, timezone-aware."""
    tomorrow = utc_today(now) + timedelta(days=1)
    return datetime.combine(tomorrow, time.min, tzinfo=UTC)
