"""
Daily log model definition for per-day symptom tracking.
"""
from datetime import date, datetime
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from flowmate.utils.dates import parse_instant, to_day


class FlowIntensity(str, Enum):
    """Menstrual flow intensity."""
    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"


class DailyLog(BaseModel):
    """
    Represents a single day's log entry: flow, mood, symptoms and a note.
    """
    date: datetime
    flow: FlowIntensity = FlowIntensity.MEDIUM
    mood: Optional[str] = None  # Emoji
    symptoms: List[str] = Field(default_factory=list)
    notes: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def coerce_instant(cls, value):
        if isinstance(value, (str, date)) and not isinstance(value, datetime):
            return parse_instant(value)
        return value

    @property
    def day(self) -> date:
        """Calendar day of the entry, ignoring time of day."""
        return to_day(self.date)
