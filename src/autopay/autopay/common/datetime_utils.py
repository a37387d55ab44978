from __future__ import annotations

import calendar
from datetime import date, datetime, timezone
from typing import Iterable


def now_utc() -> datetime:
    """Current UTC time (timezone-aware).

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes (as returned by MySQL DATETIME) as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_naive_utc(value: datetime) -> datetime:
    return as_utc(value).replace(tzinfo=None)


def month_key(value: date) -> str:
    return f"{value.year:04d}-{value.month:02d}"


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def working_days_in_month(year: int, month: int, weekdays: Iterable[int]) -> int:
    """Count days of the month whose weekday (Monday=0) is a working weekday."""
    allowed = set(weekdays)
    return sum(1 for day in range(1, days_in_month(year, month) + 1) if date(year, month, day).weekday() in allowed)


def isoformat_z(value: datetime) -> str:
    """ISO-8601 in UTC with a trailing Z, matching JavaScript's toISOString."""
    return to_naive_utc(value).isoformat(timespec="milliseconds") + "Z"
