"""
Record mapping for the remote account-backed store.

Rows use snake_case columns keyed by user. Period rows upsert on "id" and
log rows upsert on "user_id,date".
"""
from typing import Dict, Any

from pydantic import ValidationError

from flowmate.models.log import DailyLog
from flowmate.models.period import PeriodInterval
from flowmate.services.exceptions import RecordError

PERIOD_CONFLICT_KEY = "id"
LOG_CONFLICT_KEY = "user_id,date"


def _require(row: Dict[str, Any], *columns: str) -> None:
    missing = [c for c in columns if row.get(c) is None]
    if missing:
        raise RecordError(f"Row is missing required columns: {', '.join(missing)}")


def period_to_row(period: PeriodInterval, user_id: str) -> Dict[str, Any]:
    """Convert a period interval to a period_history row."""
    return {
        "user_id": user_id,
        "id": period.id,
        "start_date": period.start_date.isoformat(),
        "end_date": period.end_date.isoformat() if period.end_date else None
    }


def period_from_row(row: Dict[str, Any]) -> PeriodInterval:
    """
    Build a period interval from a period_history row.

    Raises:
        RecordError: If id or start_date is missing or malformed
    """
    _require(row, "id", "start_date")
    try:
        return PeriodInterval(
            id=str(row["id"]),
            start_date=row["start_date"],
            end_date=row.get("end_date")
        )
    except ValidationError as e:
        raise RecordError(f"Invalid period row {row['id']}: {e}") from e


def log_to_row(log: DailyLog, user_id: str) -> Dict[str, Any]:
    """Convert a daily log to a period_logs row."""
    return {
        "user_id": user_id,
        "date": log.date.isoformat(),
        "flow": log.flow.value,
        "mood": log.mood,
        "symptoms": list(log.symptoms),
        "notes": log.notes
    }


def log_from_row(row: Dict[str, Any]) -> DailyLog:
    """
    Build a daily log from a period_logs row.

    Raises:
        RecordError: If date or flow is missing or malformed
    """
    _require(row, "date", "flow")
    try:
        return DailyLog(
            date=row["date"],
            flow=row["flow"],
            mood=row.get("mood"),
            symptoms=row.get("symptoms") or [],
            notes=row.get("notes")
        )
    except ValidationError as e:
        raise RecordError(f"Invalid log row for {row['date']}: {e}") from e
