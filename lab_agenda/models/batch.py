from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import UTC, datetime

from .config_models import ColumnSchema
from .record import Record

"""Batch snapshot model.

A Batch is one complete, immutable set of records produced by a single data
load. A new load builds a new Batch; the previous one is dropped as a whole,
so readers always see either the old snapshot or the new one.
"""

__all__ = [
    "Batch",
]


@dataclass(frozen=True)
class Batch:
    records: tuple[Record, ...]
    schema: ColumnSchema
    loaded_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    @property
    def unparseable_dates(self) -> int:
        """Number of records whose scheduled date could not be interpreted."""
        return sum(1 for r in self.records if r.scheduled.unparseable)
