"""
Phase model definition for cycle phase classification.
"""
from enum import Enum
from pydantic import BaseModel, Field


class CyclePhase(str, Enum):
    """
    Cycle phases a calendar day can be classified into.
    """
    PERIOD = "period"
    FERTILE = "fertile"
    OVULATION = "ovulation"
    REGULAR = "regular"

    @property
    def label(self) -> str:
        """Short label shown next to a selected calendar day."""
        return PHASE_LABELS[self]


PHASE_LABELS = {
    CyclePhase.PERIOD: "Period day",
    CyclePhase.FERTILE: "Fertile window",
    CyclePhase.OVULATION: "Ovulation day",
    CyclePhase.REGULAR: "Regular day",
}


class PhaseClassification(BaseModel):
    """
    Current status of the cycle as shown on the dashboard.

    day_count depends on the status: the day of the period, the days since
    the last period started, or the days until a future-dated period.
    """
    status: CyclePhase
    day_count: int = Field(..., ge=0)
    message: str
