"""
utils/time.py
-------------
Date/time helpers: coercing loose input into datetimes and rendering
datetimes relative to now ("in 3 days", "2 hours ago").

Datetimes are kept naive and in UTC, matching the `TIMESTAMP` columns they
are stored in.
"""

import math
from datetime import date, datetime, timezone
from typing import Any, Optional

from dateutil import parser as date_parser


def utc_naive(dt: datetime) -> datetime:
    """Convert an aware datetime to naive UTC; naive ones are taken as UTC already."""
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


def utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_datetime(value: Any) -> datetime:
    """
    Coerce a value into a naive UTC datetime.

    Accepts datetimes, dates (promoted to midnight), strings in any format
    dateutil understands, and numbers as milliseconds since the Unix epoch.
    Values carrying a UTC offset are converted to UTC.

    Raises:
        ValueError: If the value cannot be interpreted as a date/time.
    """
    if isinstance(value, datetime):
        return utc_naive(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, bool):
        raise ValueError(f"Not a date: {value!r}")
    if isinstance(value, (int, float)):
        try:
            return utc_naive(datetime.fromtimestamp(value / 1000, tz=timezone.utc))
        except (OverflowError, OSError, ValueError) as e:
            raise ValueError(f"Timestamp out of range: {value!r}") from e
    if isinstance(value, str):
        try:
            return utc_naive(date_parser.parse(value))
        except (OverflowError, ValueError) as e:
            raise ValueError(f"Not a date: {value!r}") from e
    raise ValueError(f"Not a date: {value!r}")


def _count(amount: float, single: str, unit: str) -> str:
    n = math.floor(amount + 0.5)
    return single if n <= 1 else f"{n} {unit}"


def _describe(seconds: float) -> str:
    """Phrase an absolute duration the way a person would say it."""
    minutes = seconds / 60
    hours = minutes / 60
    days = hours / 24

    if seconds < 45:
        return "a few seconds"
    if seconds < 90:
        return "a minute"
    if minutes < 45:
        return _count(minutes, "a minute", "minutes")
    if minutes < 90:
        return "an hour"
    if hours < 22:
        return _count(hours, "an hour", "hours")
    if hours < 36:
        return "a day"
    if days < 26:
        return _count(days, "a day", "days")
    if days < 45:
        return "a month"
    if days < 320:
        return _count(days / 30.4, "a month", "months")
    if days < 548:
        return "a year"
    return _count(days / 365.25, "a year", "years")


def from_now(value: datetime, now: Optional[datetime] = None) -> str:
    """Render a datetime relative to `now` (default: current UTC time), e.g. "in 3 days"."""
    delta = (utc_naive(value) - utc_naive(now or utc_now())).total_seconds()
    phrase = _describe(abs(delta))
    return f"in {phrase}" if delta > 0 else f"{phrase} ago"
