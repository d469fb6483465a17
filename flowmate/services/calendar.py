"""
Service module for painting calendar views with cycle phases.
"""
import calendar
from typing import Dict, Iterable
from datetime import date

from flowmate.models.period import PeriodInterval
from flowmate.models.phase import CyclePhase
from flowmate.models.preferences import Preferences
from flowmate.services.cycle import classify_date
from flowmate.services.exceptions import InvalidDateError
from flowmate.utils.dates import DateLike, add_days, days_between, to_day


def classify_range(
    start: DateLike,
    end: DateLike,
    history: Iterable[PeriodInterval],
    preferences: Preferences
) -> Dict[date, CyclePhase]:
    """
    Classify every day from start to end inclusive.

    Args:
        start: First day of the range
        end: Last day of the range
        history: Period intervals in any order
        preferences: User averages

    Returns:
        Phase for each day, in calendar order

    Raises:
        InvalidDateError: If end precedes start
    """
    first, last = to_day(start), to_day(end)
    if last < first:
        raise InvalidDateError(f"Range end {last} is before start {first}")

    history = list(history)
    return {
        day: classify_date(day, history, preferences)
        for day in (add_days(first, offset) for offset in range(days_between(last, first) + 1))
    }


def classify_month(
    year: int,
    month: int,
    history: Iterable[PeriodInterval],
    preferences: Preferences
) -> Dict[date, CyclePhase]:
    """
    Classify every day of a calendar month.

    Example:
        >>> phases = classify_month(2024, 1, history, preferences)
        >>> phases[date(2024, 1, 15)]
        <CyclePhase.OVULATION: 'ovulation'>
    """
    try:
        _, days_in_month = calendar.monthrange(year, month)
    except calendar.IllegalMonthError as e:
        raise InvalidDateError(str(e)) from e
    return classify_range(date(year, month, 1), date(year, month, days_in_month), history, preferences)
