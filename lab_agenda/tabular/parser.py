from __future__ import annotations

import logging

"""Delimited-text parser for the appointment export.

Rules:
- The first physical line is the header and is discarded by ``parse_rows``.
- Each remaining line is trimmed; lines empty after trimming yield no row.
- A double quote toggles quoted mode. A comma outside quoted mode closes the
  current field; everything else (commas inside quotes included) is kept.
- Fields are trimmed after extraction.

There is no escaping of embedded quotes: ``""`` inside a quoted field is two
toggles, not a literal quote. Malformed input never raises; it degrades to
best-effort splitting.
"""

__all__ = [
    "DELIMITER",
    "QUOTE",
    "parse_header",
    "parse_line",
    "parse_rows",
]

logger = logging.getLogger(__name__)

DELIMITER = ","
QUOTE = '"'


def parse_line(line: str) -> list[str]:
    """Split one line into trimmed fields."""
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    for char in line:
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char == DELIMITER and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)
    fields.append("".join(current).strip())
    return fields


def parse_header(text: str) -> list[str]:
    """Fields of the header line (empty list for empty input)."""
    first, _, _ = text.partition("\n")
    first = first.strip()
    if not first:
        return []
    return parse_line(first)


def parse_rows(text: str) -> list[list[str]]:
    """Parse the whole export, skipping the header line and blank lines."""
    lines = text.split("\n")
    rows: list[list[str]] = []
    skipped = 0
    for raw in lines[1:]:
        line = raw.strip()
        if not line:
            skipped += 1
            continue
        rows.append(parse_line(line))
    logger.debug("parsed rows=%d blank_lines=%d", len(rows), skipped)
    return rows
