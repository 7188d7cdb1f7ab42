from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import date, datetime

from ..models.criteria import FilterCriteria
from ..models.record import Record

"""Multi-criteria filter engine.

Each present criterion becomes an independent predicate; a record is kept
only if every predicate accepts it. Date-based predicates reject records
whose scheduled date is unparseable. Input order is preserved.
"""

__all__ = [
    "build_predicate",
    "filter_records",
]

Predicate = Callable[[Record], bool]


def _month(month: int) -> Predicate:
    wanted = f"{int(month):02d}"

    def check(record: Record) -> bool:
        day = record.scheduled_on
        return day is not None and f"{day.month:02d}" == wanted

    return check


def _year(year: int) -> Predicate:
    def check(record: Record) -> bool:
        day = record.scheduled_on
        return day is not None and day.year == int(year)

    return check


def _on_date(wanted: date) -> Predicate:
    # time of day is ignored
    if isinstance(wanted, datetime):
        wanted = wanted.date()

    def check(record: Record) -> bool:
        return record.scheduled_on is not None and record.scheduled_on == wanted

    return check


def _times(times: frozenset[str]) -> Predicate:
    def check(record: Record) -> bool:
        return record.scheduled_time.strip() in times

    return check


def _text(text: str) -> Predicate:
    needle = text.lower()

    def check(record: Record) -> bool:
        return any(needle in value.lower() for value in record.values())

    return check


def build_predicate(criteria: FilterCriteria) -> Predicate:
    """Combine the criteria present in ``criteria`` into one AND predicate."""
    predicates: list[Predicate] = []
    if criteria.month is not None:
        predicates.append(_month(criteria.month))
    if criteria.year is not None:
        predicates.append(_year(criteria.year))
    if criteria.on_date is not None:
        predicates.append(_on_date(criteria.on_date))
    if criteria.times:
        predicates.append(_times(criteria.times))
    if criteria.text:
        predicates.append(_text(criteria.text))

    def combined(record: Record) -> bool:
        return all(p(record) for p in predicates)

    return combined


def filter_records(records: Iterable[Record], criteria: FilterCriteria | None = None) -> list[Record]:
    """Records satisfying every present criterion (all records when none is set)."""
    if criteria is None:
        return list(records)
    predicate = build_predicate(criteria)
    return [r for r in records if predicate(r)]
