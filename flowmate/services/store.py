"""
In-memory application state for cycle tracking.

FlowMateState owns the period history, daily logs, preferences and screen
state, and hands snapshots of them to the cycle engine. It stores and
replays records only; persistence and remote sync are left to the embedding
application, which can use to_dict/from_dict and the row mappers in
flowmate.utils.records.

Typical usage:
    state = FlowMateState()
    state.start_period("2024-01-01T08:30:00.000Z")
    state.end_period("2024-01-05")
    print(state.current_status().message)
"""
from typing import Any, Dict, List, Optional
from datetime import date
from pydantic import ValidationError

from flowmate.models.log import DailyLog
from flowmate.models.period import PeriodInterval
from flowmate.models.phase import CyclePhase, PhaseClassification
from flowmate.models.preferences import Preferences
from flowmate.services.constants import STORAGE_KEY, VIEWS
from flowmate.services.cycle import classify_date, classify_today, predict_next_period_start
from flowmate.services.exceptions import InvalidDateError
from flowmate.utils.dates import DateLike, parse_instant, to_day
from flowmate.utils.logging import log_exception, logger
from flowmate.utils.settings import get_default_preferences


class FlowMateState:
    """Container for the records the cycle engine reads."""

    # Key the embedding application persists to_dict() under
    storage_key = STORAGE_KEY

    def __init__(
        self,
        preferences: Optional[Preferences] = None,
        period_history: Optional[List[PeriodInterval]] = None,
        logs: Optional[List[DailyLog]] = None,
        onboarding_complete: bool = False
    ):
        self.preferences = preferences if preferences is not None else get_default_preferences()
        self.period_history: List[PeriodInterval] = list(period_history or [])
        self.logs: List[DailyLog] = list(logs or [])
        self.onboarding_complete = onboarding_complete
        self.current_view = "dashboard"
        self.active_day: Optional[date] = None

    # Onboarding and preferences

    def complete_onboarding(self) -> None:
        """Mark onboarding as finished."""
        self.onboarding_complete = True
        logger.info("Onboarding completed")

    def update_preferences(self, **changes: Any) -> Preferences:
        """
        Merge changes into the current preferences.

        Args:
            **changes: Preference fields by name or camelCase alias

        Returns:
            The updated preferences

        Raises:
            pydantic.ValidationError: If a value is invalid, e.g. a
                non-positive cycle length
        """
        aliases = {
            field.alias: name
            for name, field in Preferences.model_fields.items() if field.alias
        }
        merged = self.preferences.model_dump()
        for key, value in changes.items():
            name = aliases.get(key, key)
            if name not in merged:
                raise ValueError(f"Unknown preference {key!r}")
            merged[name] = value
        self.preferences = Preferences.model_validate(merged)
        logger.info("Preferences updated", extra={"fields": sorted(changes)})
        return self.preferences

    # Period history

    def get_active_period(self) -> Optional[PeriodInterval]:
        """Get the open period, if any."""
        return next((p for p in self.period_history if p.is_open), None)

    def get_open_periods(self) -> List[PeriodInterval]:
        """Get every open period; more than one only after replaying bad records."""
        return [p for p in self.period_history if p.is_open]

    def start_period(self, when: DateLike) -> PeriodInterval:
        """
        Open a new period starting at the given instant.

        Every period still open is closed at the same instant first, so at
        most one period is open afterwards.

        Returns:
            The newly opened period
        """
        start = parse_instant(when)
        for active in self.get_open_periods():
            logger.info("Closing open period before starting a new one", extra={
                "period_id": active.id,
                "start_date": str(to_day(active.start_date))
            })
            self._close(active, start)

        period = PeriodInterval(start_date=start)
        self.period_history.append(period)
        logger.info("Period started", extra={
            "period_id": period.id,
            "start_date": str(to_day(start))
        })
        return period

    def end_period(self, when: DateLike) -> Optional[PeriodInterval]:
        """
        Close the open period at the given instant.

        Returns:
            The closed period, or None if no period was open

        Raises:
            InvalidDateError: If the end falls before the period started
        """
        active = self.get_active_period()
        if active is None:
            logger.warning("No open period to end", extra={"end_date": str(to_day(when))})
            return None
        return self._close(active, parse_instant(when))

    def toggle_period(self, when: DateLike) -> Optional[PeriodInterval]:
        """End the open period, or start one if none is open."""
        if self.get_active_period() is not None:
            return self.end_period(when)
        return self.start_period(when)

    def _close(self, period: PeriodInterval, end) -> PeriodInterval:
        if to_day(end) < to_day(period.start_date):
            raise InvalidDateError(
                f"Period {period.id} cannot end on {to_day(end)} before it started on "
                f"{to_day(period.start_date)}"
            )
        index = self.period_history.index(period)
        closed = period.model_copy(update={"end_date": end})
        self.period_history[index] = closed
        logger.info("Period ended", extra={
            "period_id": closed.id,
            "end_date": str(to_day(end))
        })
        return closed

    # Daily logs

    def get_log(self, day: DateLike) -> Optional[DailyLog]:
        """Find the log for a calendar day, ignoring time of day."""
        target = to_day(day)
        return next((log for log in self.logs if log.day == target), None)

    def add_log(self, log: DailyLog) -> DailyLog:
        """Append a log entry."""
        self.logs.append(log)
        logger.info("Log added", extra={"date": str(log.day), "flow": log.flow.value})
        return log

    def update_log(self, day: DateLike, **changes: Any) -> Optional[DailyLog]:
        """
        Merge changes into the log for a day.

        Returns:
            The updated log, or None if no log exists for that day
        """
        existing = self.get_log(day)
        if existing is None:
            logger.warning("No log to update", extra={"date": str(to_day(day))})
            return None
        merged = existing.model_dump()
        merged.update(changes)
        updated = DailyLog.model_validate(merged)
        self.logs[self.logs.index(existing)] = updated
        logger.info("Log updated", extra={"date": str(updated.day), "fields": sorted(changes)})
        return updated

    def save_log(self, log: DailyLog) -> DailyLog:
        """Add the log, or replace the existing one for the same day."""
        if self.get_log(log.day) is None:
            return self.add_log(log)
        return self.update_log(
            log.day,
            **log.model_dump(exclude={"date"})
        )

    # Screen state

    def set_current_view(self, view: str) -> None:
        """Switch the visible screen."""
        if view not in VIEWS:
            raise ValueError(f"Unknown view {view!r}, expected one of {', '.join(VIEWS)}")
        self.current_view = view

    def set_active_day(self, day: Optional[DateLike]) -> None:
        """Select a calendar day, or clear the selection with None."""
        self.active_day = to_day(day) if day is not None else None

    # Engine projections

    def current_status(self, today: Optional[DateLike] = None) -> PhaseClassification:
        """Dashboard status for today."""
        return classify_today(list(self.period_history), self.preferences, today=today)

    def phase_for(self, day: DateLike) -> CyclePhase:
        """Calendar phase for a day."""
        return classify_date(day, list(self.period_history), self.preferences)

    def next_period_start(self) -> Optional[date]:
        """Predicted start of the next period."""
        return predict_next_period_start(list(self.period_history), self.preferences)

    # Record replay

    def to_dict(self) -> Dict[str, Any]:
        """Serialise the state in the persisted camelCase record shape."""
        return {
            "onboardingComplete": self.onboarding_complete,
            "userPreferences": self.preferences.model_dump(by_alias=True, mode="json"),
            "periodHistory": [
                p.model_dump(by_alias=True, mode="json") for p in self.period_history
            ],
            "logs": [log.model_dump(mode="json", exclude_none=True) for log in self.logs],
            "currentView": self.current_view,
            "activeDay": self.active_day.isoformat() if self.active_day else None
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FlowMateState":
        """Rebuild state from a persisted record."""
        preferences = data.get("userPreferences")
        try:
            state = cls(
                preferences=Preferences.model_validate(preferences) if preferences else None,
                period_history=[PeriodInterval.model_validate(p) for p in data.get("periodHistory", [])],
                logs=[DailyLog.model_validate(log) for log in data.get("logs", [])],
                onboarding_complete=bool(data.get("onboardingComplete", False))
            )
        except ValidationError:
            log_exception(logger, "Could not restore persisted state", extra={
                "periods": len(data.get("periodHistory", [])),
                "logs": len(data.get("logs", []))
            })
            raise
        state.set_current_view(data.get("currentView") or "dashboard")
        state.set_active_day(data.get("activeDay"))
        open_periods = state.get_open_periods()
        if len(open_periods) > 1:
            logger.warning("Restored state has more than one open period", extra={
                "storage_key": cls.storage_key,
                "period_ids": [p.id for p in open_periods]
            })
        logger.debug("State restored", extra={
            "storage_key": cls.storage_key,
            "periods": len(state.period_history),
            "logs": len(state.logs)
        })
        return state
