from __future__ import annotations

from dataclasses import dataclass
from datetime import date

"""Derived analysis results (never persisted, rebuilt on every query)."""

__all__ = [
    "DaysToNext",
    "QuotaViolation",
]


@dataclass(frozen=True)
class QuotaViolation:
    """A (unit, day) group whose appointment count exceeds the unit's daily limit."""
    unit: str  # as written in the source, not normalized
    date: date
    count: int
    limit: int

    @property
    def excess(self) -> int:
        return self.count - self.limit


@dataclass(frozen=True)
class DaysToNext:
    """Distance in days from today to the latest scheduled appointment.

    Negative when that date is already in the past, 0 when it is today.
    """
    days: int
    last_date: date
