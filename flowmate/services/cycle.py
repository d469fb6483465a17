"""
Service module for cycle phase inference.

This module classifies calendar days into cycle phases from a history of
period intervals and the user's configured averages, and produces the status
message shown on the dashboard. Every function is pure: history and
preferences are passed in on each call and never mutated.

Typical usage:
    status = classify_today(state.period_history, state.preferences)
    phase = classify_date(day, state.period_history, state.preferences)
    next_start = predict_next_period_start(state.period_history, state.preferences)
"""
from typing import Iterable, Optional
from datetime import date

from flowmate.models.period import PeriodInterval
from flowmate.models.phase import CyclePhase, PhaseClassification
from flowmate.models.preferences import Preferences
from flowmate.services.constants import (
    PERIOD_EXPECTED_SOON_DAYS,
    PERIOD_DAY_MESSAGE,
    NO_DATA_MESSAGE,
    FUTURE_PERIOD_MESSAGE,
    OVULATION_MESSAGE,
    FERTILE_MESSAGE,
    PERIOD_EXPECTED_MESSAGE,
    CYCLE_DAY_MESSAGE
)
from flowmate.services.utils import (
    check_preferences,
    find_active_period,
    latest_period,
    phase_for_offset
)
from flowmate.utils.dates import DateLike, add_days, days_between, format_long_date, to_day


def classify_today(
    history: Iterable[PeriodInterval],
    preferences: Preferences,
    today: Optional[DateLike] = None
) -> PhaseClassification:
    """
    Compute the current cycle status.

    An ongoing period always wins over ovulation and fertile window
    inference. Otherwise the status is anchored on the most recent period in
    the whole history.

    Args:
        history: Period intervals in any order
        preferences: User averages
        today: Day to treat as today, defaults to the current date

    Returns:
        PhaseClassification with status, day count and message

    Raises:
        InvalidDateError: If today is not a valid ISO-8601 value
        InvalidPreferencesError: If the averages are not positive

    Example:
        >>> status = classify_today(history, preferences)
        >>> print(status.message)
        Day 2 of your period
    """
    check_preferences(preferences)
    today = date.today() if today is None else to_day(today)
    history = list(history)

    # Open periods here always use the preference length, never their own duration
    active = find_active_period(history, today, preferences.average_period_length)
    if active is not None:
        day_count = days_between(today, to_day(active.start_date)) + 1
        return PhaseClassification(
            status=CyclePhase.PERIOD,
            day_count=day_count,
            message=PERIOD_DAY_MESSAGE.format(day=day_count)
        )

    last_period = latest_period(history)
    if last_period is None:
        return PhaseClassification(
            status=CyclePhase.REGULAR,
            day_count=0,
            message=NO_DATA_MESSAGE
        )

    days_since = days_between(today, to_day(last_period.start_date))
    if days_since < 0:
        # Period recorded in the future
        return PhaseClassification(
            status=CyclePhase.REGULAR,
            day_count=abs(days_since),
            message=FUTURE_PERIOD_MESSAGE.format(days=abs(days_since))
        )

    cycle_length = preferences.average_cycle_length
    phase = phase_for_offset(days_since, cycle_length)
    if phase == CyclePhase.OVULATION:
        message = OVULATION_MESSAGE
    elif phase == CyclePhase.FERTILE:
        message = FERTILE_MESSAGE
    else:
        days_until = cycle_length - days_since
        if days_until <= PERIOD_EXPECTED_SOON_DAYS:
            unit = "day" if days_until == 1 else "days"
            message = PERIOD_EXPECTED_MESSAGE.format(days=days_until, unit=unit)
        else:
            message = CYCLE_DAY_MESSAGE.format(day=days_since)

    return PhaseClassification(status=phase, day_count=days_since, message=message)


def classify_date(
    target_date: DateLike,
    history: Iterable[PeriodInterval],
    preferences: Preferences
) -> CyclePhase:
    """
    Classify an arbitrary calendar day into a cycle phase.

    Unlike classify_today, the phase is anchored on the latest period that
    started strictly before target_date, so past days are painted relative
    to the cycle they belonged to.

    Args:
        target_date: Day to classify
        history: Period intervals in any order
        preferences: User averages

    Returns:
        Phase for the day

    Example:
        >>> classify_date(date(2024, 1, 15), history, preferences)
        <CyclePhase.OVULATION: 'ovulation'>
    """
    check_preferences(preferences)
    day = to_day(target_date)
    history = list(history)

    if find_active_period(history, day, preferences.average_period_length, use_duration=True):
        return CyclePhase.PERIOD

    previous_period = latest_period(history, before=day)
    if previous_period is None:
        return CyclePhase.REGULAR

    days_since = days_between(day, to_day(previous_period.start_date))
    return phase_for_offset(days_since, preferences.average_cycle_length)


def predict_next_period_start(
    history: Iterable[PeriodInterval],
    preferences: Preferences
) -> Optional[date]:
    """
    Predict when the next period starts.

    Anchors on the most recent recorded period, falling back to the
    onboarding last_period_start when there is no history.

    Returns:
        Predicted start day, or None if there is nothing to anchor on
    """
    check_preferences(preferences)
    last_period = latest_period(history)
    if last_period is not None:
        anchor = to_day(last_period.start_date)
    elif preferences.last_period_start is not None:
        anchor = to_day(preferences.last_period_start)
    else:
        return None
    return add_days(anchor, preferences.average_cycle_length)


def format_for_display(iso_date: DateLike) -> str:
    """
    Format an ISO-8601 instant for display, e.g. "Jan 5, 2025".

    Raises:
        InvalidDateError: If the value is not a valid ISO-8601 instant
    """
    return format_long_date(iso_date)


def describe_phase(phase: CyclePhase) -> str:
    """Get the calendar label for a phase, e.g. "Fertile window"."""
    return phase.label
