from __future__ import annotations

import logging
import re
from datetime import date, datetime

from dateutil import parser as date_parser

from ..models.record import ParsedDate

"""Date interpretation for scheduled/birth date strings.

The export is predominantly DD/MM/YYYY, but other spellings show up. Order:

1. Split on ``/``. With exactly three parts read day, month and year from the
   leading digits of each part. If that is not a real calendar day (e.g. 31/04)
   the reading is discarded.
2. Otherwise fall back to a general-purpose parse (dateutil). Missing
   components default to January 1st; any time of day is dropped.

Failure in both steps yields an unparseable ``ParsedDate``. Nothing here raises.
"""

__all__ = [
    "format_date",
    "interpret_date",
    "parse_date",
]

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
# fills missing year/month/day components
_FALLBACK_DEFAULT = datetime(2000, 1, 1)


def _leading_int(part: str) -> int | None:
    match = _LEADING_INT.match(part)
    if match is None:
        return None
    return int(match.group(1))


def _day_first(text: str) -> date | None:
    parts = text.split("/")
    if len(parts) != 3:
        return None
    day, month, year = (_leading_int(p) for p in parts)
    if day is None or month is None or year is None:
        return None
    try:
        return date(year, month, day)
    except (ValueError, OverflowError):
        return None


def _general(text: str) -> date | None:
    try:
        parsed = date_parser.parse(text, default=_FALLBACK_DEFAULT, ignoretz=True)
    except (ValueError, OverflowError):
        return None
    return parsed.date()


def parse_date(text: str | None) -> date | None:
    """Return the calendar date for ``text`` or None when unparseable."""
    if not text or not text.strip():
        return None
    value = _day_first(text)
    if value is None:
        value = _general(text.strip())
        if value is None:
            logger.debug("unparseable date: %r", text)
    return value


def interpret_date(text: str | None) -> ParsedDate:
    """Like ``parse_date`` but keeps the raw text next to the outcome."""
    return ParsedDate(raw=text or "", value=parse_date(text))


def format_date(value: date | str | None) -> str:
    """Render as DD/MM/YYYY; strings are interpreted first. Empty when unreadable."""
    if isinstance(value, str):
        value = parse_date(value)
    if value is None:
        return ""
    return f"{value.day:02d}/{value.month:02d}/{value.year}"
