"""
User preferences model definition.
"""
from datetime import date, datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from flowmate.services.constants import (
    DEFAULT_AVERAGE_CYCLE_LENGTH,
    DEFAULT_AVERAGE_PERIOD_LENGTH
)
from flowmate.utils.dates import parse_instant


class Theme(str, Enum):
    """Display theme."""
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


class TrackingMode(str, Enum):
    """How much detail the user tracks."""
    SIMPLE = "simple"
    FULL = "full"


class Preferences(BaseModel):
    """
    User-configured cycle averages and app settings.

    The averages feed every engine call; last_period_start is only used
    when no period history has been recorded yet.
    """
    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    average_cycle_length: int = Field(
        DEFAULT_AVERAGE_CYCLE_LENGTH, gt=0, alias="averageCycleLength"
    )
    average_period_length: int = Field(
        DEFAULT_AVERAGE_PERIOD_LENGTH, gt=0, alias="averagePeriodLength"
    )
    last_period_start: Optional[datetime] = Field(None, alias="lastPeriodStart")
    notifications_enabled: bool = Field(False, alias="notificationsEnabled")
    theme: Theme = Theme.LIGHT
    privacy_lock_enabled: bool = Field(False, alias="privacyLockEnabled")
    mode: TrackingMode = TrackingMode.SIMPLE

    @field_validator("last_period_start", mode="before")
    @classmethod
    def coerce_instant(cls, value):
        if isinstance(value, (str, date)) and not isinstance(value, datetime):
            return parse_instant(value)
        return value
