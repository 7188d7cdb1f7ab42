from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date

from ..models.analysis import QuotaViolation
from ..models.config_models import QuotaLimitTable, normalize_unit_name
from ..models.record import Record

"""Per-unit daily quota analysis.

Records are grouped by (normalized unit name, scheduled day). Records with
an empty unit or an unparseable date take no part in grouping. A group is a
violation when its count is strictly greater than the unit's limit.
"""

__all__ = [
    "check_quota_violations",
    "group_by_unit_day",
]

logger = logging.getLogger(__name__)


class _Group:
    __slots__ = ("unit", "day", "count")

    def __init__(self, unit: str, day: date) -> None:
        self.unit = unit  # first spelling seen, kept for display
        self.day = day
        self.count = 0


def group_by_unit_day(records: Iterable[Record]) -> dict[tuple[str, date], _Group]:
    """Groups keyed by (normalized unit, day), in first-appearance order."""
    groups: dict[tuple[str, date], _Group] = {}
    for record in records:
        unit = normalize_unit_name(record.unit)
        day = record.scheduled_on
        if not unit or day is None:
            continue
        key = (unit, day)
        group = groups.get(key)
        if group is None:
            group = groups[key] = _Group(record.unit, day)
        group.count += 1
    return groups


def check_quota_violations(
    records: Iterable[Record], limits: QuotaLimitTable | None = None
) -> list[QuotaViolation]:
    """Violations sorted by descending excess; ties keep grouping order."""
    limits = limits or QuotaLimitTable.default()
    violations: list[QuotaViolation] = []
    for group in group_by_unit_day(records).values():
        limit = limits.limit_for(group.unit)
        if group.count > limit:
            violations.append(
                QuotaViolation(unit=group.unit, date=group.day, count=group.count, limit=limit)
            )
    # sorted() is stable
    violations = sorted(violations, key=lambda v: v.excess, reverse=True)
    logger.debug("quota violations=%d", len(violations))
    return violations
