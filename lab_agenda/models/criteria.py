from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

"""FilterCriteria value object.

Every field is optional; a field left as None places no constraint on that
dimension. Present fields combine by logical AND.
"""

__all__ = [
    "FilterCriteria",
]


@dataclass(frozen=True)
class FilterCriteria:
    month: int | None = None  # 1-12
    year: int | None = None
    on_date: date | None = None  # exact calendar day
    times: frozenset[str] | None = None  # allowed scheduled_time labels; empty = no constraint
    text: str | None = None  # case-insensitive substring over every attribute

    @classmethod
    def build(
        cls,
        month: int | None = None,
        year: int | None = None,
        on_date: date | None = None,
        times: Iterable[str] | None = None,
        text: str | None = None,
    ) -> FilterCriteria:
        """Convenience constructor accepting any iterable of time labels."""
        return cls(
            month=month,
            year=year,
            on_date=on_date,
            times=frozenset(t.strip() for t in times) if times is not None else None,
            text=text,
        )

    @property
    def is_empty(self) -> bool:
        return (
            self.month is None
            and self.year is None
            and self.on_date is None
            and not self.times
            and not self.text
        )
