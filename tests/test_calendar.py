"""
Tests for calendar painting.
"""
import pytest
from collections import Counter
from datetime import date

from flowmate.models.phase import CyclePhase
from flowmate.services.calendar import classify_month, classify_range
from flowmate.services.exceptions import InvalidDateError

def test_classify_month(january_history, preferences):
    """Test a month is painted day by day."""
    phases = classify_month(2024, 1, january_history, preferences)

    assert len(phases) == 31
    assert list(phases)[0] == date(2024, 1, 1)
    assert list(phases)[-1] == date(2024, 1, 31)

    counts = Counter(phases.values())
    assert counts[CyclePhase.PERIOD] == 5
    assert counts[CyclePhase.FERTILE] == 7
    assert counts[CyclePhase.OVULATION] == 1
    assert counts[CyclePhase.REGULAR] == 18

    assert phases[date(2024, 1, 9)] == CyclePhase.REGULAR
    assert phases[date(2024, 1, 10)] == CyclePhase.FERTILE
    assert phases[date(2024, 1, 15)] == CyclePhase.OVULATION
    assert phases[date(2024, 1, 17)] == CyclePhase.FERTILE
    assert phases[date(2024, 1, 18)] == CyclePhase.REGULAR

def test_classify_month_leap_february(quarterly_history, preferences):
    """Test February in a leap year."""
    phases = classify_month(2024, 2, quarterly_history, preferences)

    assert len(phases) == 29
    assert phases[date(2024, 2, 1)] == CyclePhase.PERIOD
    assert phases[date(2024, 2, 15)] == CyclePhase.OVULATION

def test_classify_month_without_history(preferences):
    """Test an empty history paints every day regular."""
    phases = classify_month(2024, 6, [], preferences)
    assert set(phases.values()) == {CyclePhase.REGULAR}

def test_classify_range_single_day(january_history, preferences):
    """Test a one-day range."""
    phases = classify_range("2024-01-15T12:00:00", "2024-01-15", january_history, preferences)
    assert phases == {date(2024, 1, 15): CyclePhase.OVULATION}

def test_classify_range_rejects_reversed_range(january_history, preferences):
    """Test the end must not precede the start."""
    with pytest.raises(InvalidDateError, match="before start"):
        classify_range(date(2024, 1, 10), date(2024, 1, 1), january_history, preferences)

def test_classify_month_rejects_invalid_month(january_history, preferences):
    """Test months outside 1-12 are rejected."""
    with pytest.raises(InvalidDateError):
        classify_month(2024, 13, january_history, preferences)
