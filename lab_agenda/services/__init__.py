"""Query services over a record set: filtering, quota analysis, metrics."""

from .filters import build_predicate, filter_records
from .metrics import available_years, count_by_date, count_by_year, days_to_next_appointment
from .quota import check_quota_violations
from .status import classify_status

__all__ = [
    "available_years",
    "build_predicate",
    "check_quota_violations",
    "classify_status",
    "count_by_date",
    "count_by_year",
    "days_to_next_appointment",
    "filter_records",
]
