"""
Service-level exceptions.

This module contains exceptions that can be raised by the cycle engine and
the collaborators that feed it.
"""

class CycleEngineError(Exception):
    """Base exception for cycle tracking errors."""
    pass

class InvalidDateError(CycleEngineError, ValueError):
    """Raised when a date is malformed or inconsistent with its interval."""
    pass

class InvalidPreferencesError(CycleEngineError, ValueError):
    """Raised when cycle or period averages are not positive."""
    pass

class RecordError(CycleEngineError):
    """Raised when a stored record is missing required fields."""
    pass
