"""
Date normalisation helpers.

Every day-difference in the engine is computed on calendar days. Instants are
stored with inconsistent time components (local midnight, UTC midnight, the
moment a button was pressed), so they are reduced to their date portion
before any comparison.
"""
from datetime import date, datetime, time, timedelta
from typing import Union

from flowmate.services.exceptions import InvalidDateError

DateLike = Union[str, date, datetime]


def parse_instant(value: DateLike) -> datetime:
    """
    Parse an ISO-8601 string, date or datetime into a datetime.

    Args:
        value: ISO-8601 string (a trailing "Z" is accepted), date or datetime

    Returns:
        Parsed datetime; plain dates become midnight of that day

    Raises:
        InvalidDateError: If the value is not a valid ISO-8601 instant

    Example:
        >>> parse_instant("2024-01-05T10:30:00.000Z")
        datetime.datetime(2024, 1, 5, 10, 30, tzinfo=datetime.timezone.utc)
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if not isinstance(value, str):
        raise InvalidDateError(f"Expected an ISO-8601 string, got {type(value).__name__}")

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise InvalidDateError(f"Invalid ISO-8601 date: {value!r}") from None


def to_day(value: DateLike) -> date:
    """Reduce an instant to its calendar day, dropping the time of day."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_instant(value).date()


def add_days(day: date, days: int) -> date:
    """Shift a calendar day by a number of days."""
    return day + timedelta(days=days)


def days_between(later: date, earlier: date) -> int:
    """Whole days from earlier to later; negative if later precedes earlier."""
    return (later - earlier).days


def format_long_date(value: DateLike) -> str:
    """Render a date as e.g. "Jan 5, 2025"."""
    day = to_day(value)
    return f"{day:%b} {day.day}, {day.year}"
