"""Domain models for the laboratory-collection appointment analytics engine.

This package contains the record, configuration and result types shared by
the tabular layer, the query services and the CLI.
"""

from .analysis import DaysToNext, QuotaViolation
from .batch import Batch
from .config_models import AgendaConfig, ColumnSchema, QuotaLimitTable
from .criteria import FilterCriteria
from .record import RECORD_FIELDS, ParsedDate, Record

__all__ = [
    # Configuration models
    "AgendaConfig",
    "ColumnSchema",
    "QuotaLimitTable",
    # Data models
    "RECORD_FIELDS",
    "Batch",
    "ParsedDate",
    "Record",
    # Query models
    "FilterCriteria",
    "DaysToNext",
    "QuotaViolation",
]
