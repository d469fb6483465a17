"""
Pytest configuration and shared fixtures.
"""
import pytest
from typing import List

from flowmate.models.period import PeriodInterval
from flowmate.models.preferences import Preferences

@pytest.fixture
def preferences() -> Preferences:
    """Create preferences with a 28-day cycle and 5-day period."""
    return Preferences(average_cycle_length=28, average_period_length=5)

@pytest.fixture
def january_history() -> List[PeriodInterval]:
    """Create a single closed period from Jan 1 to Jan 5, 2024."""
    return [
        PeriodInterval(
            id="1704067200000",
            start_date="2024-01-01T00:00:00",
            end_date="2024-01-05T00:00:00"
        )
    ]

@pytest.fixture
def quarterly_history() -> List[PeriodInterval]:
    """Create three 5-day periods stored out of chronological order."""
    return [
        PeriodInterval(id="feb", start_date="2024-02-01", end_date="2024-02-05"),
        PeriodInterval(id="mar", start_date="2024-03-01", end_date="2024-03-05"),
        PeriodInterval(id="jan", start_date="2024-01-01", end_date="2024-01-05"),
    ]

@pytest.fixture
def persisted_state() -> dict:
    """Create a persisted app state record as written by the client."""
    return {
        "onboardingComplete": True,
        "userPreferences": {
            "averageCycleLength": 30,
            "averagePeriodLength": 4,
            "lastPeriodStart": None,
            "notificationsEnabled": True,
            "theme": "dark",
            "privacyLockEnabled": False,
            "mode": "full"
        },
        "periodHistory": [
            {
                "id": "1704067200000",
                "startDate": "2024-01-01T00:00:00.000Z",
                "endDate": "2024-01-04T00:00:00.000Z"
            },
            {
                "id": "1706659200000",
                "startDate": "2024-01-31T09:15:00.000Z",
                "endDate": None
            }
        ],
        "logs": [
            {
                "date": "2024-01-02T00:00:00.000Z",
                "flow": "heavy",
                "mood": "😣",
                "symptoms": ["cramps", "fatigue"],
                "notes": "Stayed home"
            }
        ],
        "currentView": "calendar",
        "activeDay": "2024-01-02"
    }
