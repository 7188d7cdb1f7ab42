from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime

from ..models.batch import Batch
from ..models.config_models import ColumnSchema
from ..models.record import Record
from .dates import interpret_date
from .parser import parse_rows

"""Row -> Record normalization (schema-on-read).

Each Record attribute is read from the row at the index given by the
ColumnSchema. Short rows and out-of-range indexes produce empty strings;
normalization never fails.
"""

__all__ = [
    "build_batch",
    "normalize_row",
    "normalize_rows",
]

logger = logging.getLogger(__name__)


def normalize_row(row: Sequence[str], schema: ColumnSchema, position: int) -> Record:
    """Build the Record for ``row``; ``position`` becomes its synthetic id."""
    values: dict[str, str] = {}
    for name, index in schema:
        if 0 <= index < len(row) and row[index] is not None:
            values[name] = str(row[index])
        else:
            values[name] = ""
    return Record(id=position, scheduled=interpret_date(values["scheduled_date"]), **values)


def normalize_rows(rows: Sequence[Sequence[str]], schema: ColumnSchema) -> list[Record]:
    return [normalize_row(row, schema, position) for position, row in enumerate(rows)]


def build_batch(text: str, schema: ColumnSchema | None = None, loaded_at: datetime | None = None) -> Batch:
    """Parse raw export text and normalize it into a new Batch snapshot."""
    schema = schema or ColumnSchema.default()
    records = tuple(normalize_rows(parse_rows(text), schema))
    if loaded_at is None:
        batch = Batch(records=records, schema=schema)
    else:
        batch = Batch(records=records, schema=schema, loaded_at=loaded_at)
    if batch.unparseable_dates:
        logger.debug("batch records=%d unparseable_dates=%d", len(batch), batch.unparseable_dates)
    return batch
