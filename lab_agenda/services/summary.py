from __future__ import annotations

from ..models.analysis import DaysToNext
from ..tabular.dates import format_date

"""Summary line rendering for the appointment analysis run.

Format:
SUMMARY records={total} filtered={filtered} violations={violations}
last_date={DD/MM/YYYY|-} days_to_last={days|-}
"""

__all__ = [
    "render_summary_line",
]


def render_summary_line(
    total_records: int,
    filtered_records: int,
    violations: int,
    days_to_next: DaysToNext | None,
) -> str:
    """Render a SUMMARY line.

    Args:
        total_records: Records in the loaded batch
        filtered_records: Records left after applying filter criteria
        violations: Number of quota violations in the filtered set
        days_to_next: Metric result, None when no record has a readable date

    Examples:
        >>> from datetime import date
        >>> render_summary_line(20, 13, 1, DaysToNext(days=-3, last_date=date(2024, 6, 10)))
        'SUMMARY records=20 filtered=13 violations=1 last_date=10/06/2024 days_to_last=-3'
        >>> render_summary_line(0, 0, 0, None)
        'SUMMARY records=0 filtered=0 violations=0 last_date=- days_to_last=-'
    """
    if days_to_next is None:
        last_str = "-"
        days_str = "-"
    else:
        last_str = format_date(days_to_next.last_date)
        days_str = str(days_to_next.days)

    return (
        f"SUMMARY records={total_records} "
        f"filtered={filtered_records} "
        f"violations={violations} "
        f"last_date={last_str} "
        f"days_to_last={days_str}"
    )
