from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

import pandas as pd
from openpyxl.utils import get_column_letter

from ..models.record import RECORD_FIELDS, Record

"""Spreadsheet export of a record set.

Columns keep the source headings. ``.xlsx`` files get a single sheet named
"Agendamentos" (openpyxl engine) with column widths fitted to the content;
``.csv`` files are written as UTF-8.
"""

__all__ = [
    "EXPORT_HEADINGS",
    "SHEET_NAME",
    "ExportError",
    "default_export_name",
    "export_records",
    "records_to_frame",
]

logger = logging.getLogger(__name__)

SHEET_NAME = "Agendamentos"
MAX_COLUMN_WIDTH = 50

EXPORT_HEADINGS: dict[str, str] = {
    "record_id": "Prontuário",
    "patient_name": "Paciente",
    "birth_date": "Data Nascimento",
    "request_number": "Nº Solicitação",
    "schedule_type": "Tipo Agenda",
    "scheduled_time": "Hora Agenda",
    "scheduled_date": "Data Agenda",
    "quantity": "Quantidade",
    "unit": "Unidade",
    "collection_lab": "Laboratório Coleta",
    "status": "Status",
}


class ExportError(Exception):
    """Raised when there is nothing to export or the target format is unsupported."""


def records_to_frame(records: Sequence[Record]) -> pd.DataFrame:
    """One row per record, one column per source heading (all strings)."""
    rows = [[getattr(r, name) for name in RECORD_FIELDS] for r in records]
    return pd.DataFrame(rows, columns=[EXPORT_HEADINGS[name] for name in RECORD_FIELDS], dtype=str)


def default_export_name(now: datetime | None = None) -> str:
    now = now or datetime.now()
    return f"Agendamentos_{now.strftime('%Y-%m-%dT%H-%M-%S')}.xlsx"


def _column_widths(df: pd.DataFrame) -> list[int]:
    widths = []
    for col in df.columns:
        longest = max([len(str(col))] + [len(str(v)) for v in df[col].tolist()])
        widths.append(min(longest + 2, MAX_COLUMN_WIDTH))
    return widths


def export_records(records: Sequence[Record], path: Path) -> Path:
    """Write ``records`` to ``path`` (.xlsx or .csv) and return the path."""
    if not records:
        raise ExportError("no records to export")
    suffix = path.suffix.lower()
    if suffix not in (".xlsx", ".csv"):
        raise ExportError(f"unsupported export format: {path.suffix or '(none)'}")

    df = records_to_frame(records)
    path.parent.mkdir(parents=True, exist_ok=True)
    if suffix == ".csv":
        df.to_csv(path, index=False, encoding="utf-8")
    else:
        with pd.ExcelWriter(path, engine="openpyxl") as writer:
            df.to_excel(writer, sheet_name=SHEET_NAME, index=False)
            sheet = writer.sheets[SHEET_NAME]
            for i, width in enumerate(_column_widths(df), start=1):
                sheet.column_dimensions[get_column_letter(i)].width = width
    logger.debug("exported records=%d path=%s", len(records), path)
    return path
