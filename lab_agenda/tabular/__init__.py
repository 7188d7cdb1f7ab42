"""Raw text -> rows -> records."""

from .dates import format_date, interpret_date, parse_date
from .normalizer import build_batch, normalize_row, normalize_rows
from .parser import parse_header, parse_line, parse_rows

__all__ = [
    "build_batch",
    "format_date",
    "interpret_date",
    "normalize_row",
    "normalize_rows",
    "parse_date",
    "parse_header",
    "parse_line",
    "parse_rows",
]
