"""
Environment-driven defaults.

Values are read lazily so tests and embedding applications can set the
environment before the first call.
"""
import os
from typing import Optional

from flowmate.models.preferences import Preferences
from flowmate.services.constants import (
    CYCLE_LENGTH_ENV,
    PERIOD_LENGTH_ENV,
    DEFAULT_AVERAGE_CYCLE_LENGTH,
    DEFAULT_AVERAGE_PERIOD_LENGTH
)


def _read_positive_int(name: str, default: int) -> int:
    raw: Optional[str] = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise EnvironmentError(
            f"{name} must be a whole number of days, got {raw!r}"
        ) from None
    if value <= 0:
        raise EnvironmentError(f"{name} must be positive, got {value}")
    return value


def get_default_preferences() -> Preferences:
    """
    Build the preferences a new user starts with.

    Returns:
        Preferences with averages from FLOWMATE_AVERAGE_CYCLE_LENGTH and
        FLOWMATE_AVERAGE_PERIOD_LENGTH, or 28 and 5 days when unset

    Raises:
        EnvironmentError: If a variable is set to a non-positive or
            non-numeric value
    """
    return Preferences(
        average_cycle_length=_read_positive_int(CYCLE_LENGTH_ENV, DEFAULT_AVERAGE_CYCLE_LENGTH),
        average_period_length=_read_positive_int(PERIOD_LENGTH_ENV, DEFAULT_AVERAGE_PERIOD_LENGTH)
    )
