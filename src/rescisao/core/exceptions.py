"""Rescisao exception hierarchy."""

from __future__ import annotations

from datetime import date


class RescisaoError(Exception):
    """Base exception for all settlement engine errors."""


class InvalidInput(RescisaoError):
    """Malformed date, month key, amount, or edit field."""


class InvalidDateRange(RescisaoError):
    """Termination date precedes hire date."""

    def __init__(self, hire_date: date, termination_date: date) -> None:
        self.hire_date = hire_date
        self.termination_date = termination_date
        super().__init__(
            f"Termination date {termination_date.isoformat()} precedes "
            f"hire date {hire_date.isoformat()}"
        )


class SettlementNotCalculatedError(RescisaoError):
    """An edit or fund override was requested before any accepted calculation."""


class RuleNotFoundError(RescisaoError):
    """No rule table registered for the requested version."""
