"""
Shared utility functions for cycle phase calculations.

These utilities are used by the dashboard status and the calendar painter to
handle common operations like active period lookup, anchoring on the most
recent period and mapping a day offset to a phase.
"""
from typing import Iterable, List, NamedTuple, Optional
from datetime import date

from flowmate.models.period import PeriodInterval
from flowmate.models.phase import CyclePhase
from flowmate.models.preferences import Preferences
from flowmate.services.constants import (
    LUTEAL_PHASE_DAYS,
    FERTILE_DAYS_BEFORE_OVULATION,
    FERTILE_DAYS_AFTER_OVULATION
)
from flowmate.services.exceptions import InvalidPreferencesError
from flowmate.utils.dates import add_days, to_day


class FertileWindow(NamedTuple):
    """Ovulation day and fertile window bounds as offsets from period start."""
    ovulation_day: int
    start: int
    end: int

    def __contains__(self, offset: int) -> bool:
        return self.start <= offset <= self.end


def fertile_window(cycle_length: int) -> FertileWindow:
    """
    Compute the ovulation day and fertile window for a cycle length.

    Args:
        cycle_length: Average days from one period start to the next

    Returns:
        FertileWindow with offsets counted in days since the period started

    Example:
        >>> fertile_window(28)
        FertileWindow(ovulation_day=14, start=9, end=16)
    """
    ovulation_day = cycle_length - LUTEAL_PHASE_DAYS
    return FertileWindow(
        ovulation_day=ovulation_day,
        start=ovulation_day - FERTILE_DAYS_BEFORE_OVULATION,
        end=ovulation_day + FERTILE_DAYS_AFTER_OVULATION
    )


def phase_for_offset(days_since_start: int, cycle_length: int) -> CyclePhase:
    """
    Map days since the last period started to a non-period phase.

    The exact ovulation day is checked before the fertile window, which
    always contains it.
    """
    window = fertile_window(cycle_length)
    if days_since_start == window.ovulation_day:
        return CyclePhase.OVULATION
    if days_since_start in window:
        return CyclePhase.FERTILE
    return CyclePhase.REGULAR


def effective_end(
    period: PeriodInterval,
    default_length: int,
    use_duration: bool = False
) -> date:
    """
    Last day counted as part of a period.

    Closed periods end on their end date. Open periods are assumed to last
    default_length days past the start, or their own duration when
    use_duration is set and one was recorded.
    """
    if period.end_date is not None:
        return to_day(period.end_date)
    length = default_length
    if use_duration and period.duration:
        length = period.duration
    return add_days(to_day(period.start_date), length)


def find_active_period(
    history: Iterable[PeriodInterval],
    day: date,
    default_length: int,
    use_duration: bool = False
) -> Optional[PeriodInterval]:
    """
    Find the first period whose span contains the given day.

    Args:
        history: Period intervals in any order
        day: Calendar day to check
        default_length: Assumed length of open periods
        use_duration: Prefer an open period's recorded duration

    Returns:
        The first containing interval, or None
    """
    for period in history:
        start = to_day(period.start_date)
        if start <= day <= effective_end(period, default_length, use_duration):
            return period
    return None


def sort_by_start(history: Iterable[PeriodInterval], reverse: bool = True) -> List[PeriodInterval]:
    """Sort periods by start day, newest first unless reverse is False."""
    return sorted(history, key=lambda p: to_day(p.start_date), reverse=reverse)


def latest_period(
    history: Iterable[PeriodInterval],
    before: Optional[date] = None
) -> Optional[PeriodInterval]:
    """
    Get the period with the latest start.

    Args:
        history: Period intervals in any order
        before: Only consider periods starting strictly before this day

    Returns:
        The most recent matching interval, or None
    """
    candidates = history
    if before is not None:
        candidates = [p for p in history if to_day(p.start_date) < before]
    ordered = sort_by_start(candidates)
    return ordered[0] if ordered else None


def check_preferences(preferences: Preferences) -> None:
    """Fail fast on averages that would produce a misleading phase."""
    if preferences.average_cycle_length <= 0:
        raise InvalidPreferencesError(
            f"Average cycle length must be positive, got {preferences.average_cycle_length}"
        )
    if preferences.average_period_length <= 0:
        raise InvalidPreferencesError(
            f"Average period length must be positive, got {preferences.average_period_length}"
        )
