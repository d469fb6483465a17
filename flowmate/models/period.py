"""
Period interval model definition for recorded menstrual flow spans.
"""
import time
from uuid import uuid4
from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from flowmate.utils.dates import parse_instant


def generate_period_id() -> str:
    """
    Create an identifier from the creation timestamp in milliseconds.

    A random suffix keeps ids unique for periods created in the same
    millisecond.
    """
    return f"{time.time_ns() // 1_000_000}-{uuid4().hex[:8]}"


class PeriodInterval(BaseModel):
    """
    Represents a span of menstrual flow, open-ended until explicitly closed.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=generate_period_id)
    start_date: datetime = Field(..., alias="startDate")
    end_date: Optional[datetime] = Field(None, alias="endDate")
    duration: Optional[int] = Field(None, ge=1)  # Overrides the default length while open
    cycle_length: Optional[int] = Field(None, ge=1, alias="cycleLength")

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def coerce_instant(cls, value):
        if isinstance(value, (str, date)) and not isinstance(value, datetime):
            return parse_instant(value)
        return value

    @property
    def is_open(self) -> bool:
        """Check if the period is still ongoing."""
        return self.end_date is None
