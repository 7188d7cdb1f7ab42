from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable
from datetime import date, datetime

from ..models.analysis import DaysToNext
from ..models.record import Record

"""Read-only metrics over a record set.

Only records with a parseable scheduled date contribute.
"""

__all__ = [
    "available_years",
    "count_by_date",
    "count_by_year",
    "days_to_next_appointment",
    "latest_scheduled_date",
]

_SECONDS_PER_DAY = 24 * 60 * 60


def _days(records: Iterable[Record]) -> list[date]:
    return [r.scheduled_on for r in records if r.scheduled_on is not None]


def available_years(records: Iterable[Record]) -> list[int]:
    """Distinct calendar years, most recent first."""
    return sorted({day.year for day in _days(records)}, reverse=True)


def latest_scheduled_date(records: Iterable[Record]) -> date | None:
    days = _days(records)
    return max(days) if days else None


def days_to_next_appointment(records: Iterable[Record], today: date | None = None) -> DaysToNext | None:
    """Days from ``today`` to the latest scheduled date, or None when there is no data.

    Both ends are taken at midnight; partial days round up.
    """
    last = latest_scheduled_date(records)
    if last is None:
        return None
    if today is None:
        today = date.today()
    elif isinstance(today, datetime):
        today = today.date()
    seconds = (datetime.combine(last, datetime.min.time()) - datetime.combine(today, datetime.min.time())).total_seconds()
    return DaysToNext(days=math.ceil(seconds / _SECONDS_PER_DAY), last_date=last)


def count_by_date(records: Iterable[Record], last: int | None = None) -> list[tuple[date, int]]:
    """Appointments per day in chronological order, optionally only the last ``last`` days."""
    counts = sorted(Counter(_days(records)).items())
    if last is not None:
        counts = counts[-last:] if last > 0 else []
    return counts


def count_by_year(records: Iterable[Record]) -> list[tuple[int, int]]:
    """Appointments per year, oldest first."""
    return sorted(Counter(day.year for day in _days(records)).items())
