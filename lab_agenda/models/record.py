from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

"""Record model for the appointment batch.

A Record is the normalized unit of data: one string attribute per column of
the source table plus a synthetic sequential ``id`` assigned at normalization
time. The scheduled date is interpreted once, when the record is built (from
``scheduled_date`` unless a matching ``ParsedDate`` is passed in), and
kept as a ``ParsedDate`` so consumers decide explicitly what to do with rows
whose date could not be read.
"""

__all__ = [
    "RECORD_FIELDS",
    "ParsedDate",
    "Record",
]

# Order matches the source table layout.
RECORD_FIELDS: tuple[str, ...] = (
    "record_id",
    "patient_name",
    "birth_date",
    "request_number",
    "schedule_type",
    "scheduled_time",
    "scheduled_date",
    "quantity",
    "unit",
    "collection_lab",
    "status",
)


@dataclass(frozen=True)
class ParsedDate:
    """Outcome of interpreting a date string.

    ``value`` is None when the string could not be read as a calendar date;
    ``raw`` always keeps the original text.
    """
    raw: str
    value: date | None = None

    @property
    def ok(self) -> bool:
        return self.value is not None

    @property
    def unparseable(self) -> bool:
        return self.value is None


@dataclass(frozen=True)
class Record:
    """Normalized appointment row.

    All source attributes are plain strings (empty when the row was short).
    ``id`` is the 0-based position of the row inside its batch.
    """
    id: int
    record_id: str = ""  # prontuário
    patient_name: str = ""
    birth_date: str = ""
    request_number: str = ""
    schedule_type: str = ""
    scheduled_time: str = ""
    scheduled_date: str = ""
    quantity: str = ""
    unit: str = ""
    collection_lab: str = ""
    status: str = ""
    scheduled: ParsedDate = field(default_factory=lambda: ParsedDate(raw=""), compare=False)

    def __post_init__(self) -> None:
        # scheduled always describes scheduled_date
        if self.scheduled.raw != self.scheduled_date:
            from ..tabular.dates import interpret_date  # tabular.dates imports this module

            object.__setattr__(self, "scheduled", interpret_date(self.scheduled_date))

    @property
    def scheduled_on(self) -> date | None:
        """Calendar day of the appointment, None when unparseable."""
        return self.scheduled.value

    def values(self) -> list[str]:
        """String form of every attribute (id included), used by free-text search."""
        return [str(self.id)] + [getattr(self, name) for name in RECORD_FIELDS]

    def as_dict(self) -> dict[str, str]:
        return {name: getattr(self, name) for name in RECORD_FIELDS}
