"""
Quote-aware reader for the exported actor sheets.

Two passes: split the text into rows, then split each row into fields.
Both passes track quoting with a flag that flips on every '"' seen, so
a quoted span may hold commas and newlines. Doubled quotes ("") are not
treated as an escape; they flip the flag twice and disappear from the
field. Input containing a raw, unpaired '"' inside data will shift the
row/field boundaries from that point on. Neither pass ever raises.
"""

from __future__ import annotations

import logging
from typing import List

from .rules import FIELD_DELIMITER, QUOTE, ROW_TERMINATOR

logger = logging.getLogger(__name__)


def split_rows(text: str) -> List[str]:
    """
    Split text into logical rows.

    A newline inside a quoted span stays part of the row. Quote characters
    are kept in the row text so split_fields() sees them. Rows are stripped
    and blank rows are dropped.
    """
    rows: List[str] = []
    buf: List[str] = []
    in_quotes = False

    for char in text:
        if char == QUOTE:
            in_quotes = not in_quotes

        if char == ROW_TERMINATOR and not in_quotes:
            row = "".join(buf).strip()
            if row:
                rows.append(row)
            buf = []
        else:
            buf.append(char)

    row = "".join(buf).strip()
    if row:
        rows.append(row)

    return rows


def split_fields(row: str) -> List[str]:
    """Split one row into stripped fields. The last field is always emitted, even if empty."""
    fields: List[str] = []
    buf: List[str] = []
    in_quotes = False

    for char in row:
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char == FIELD_DELIMITER and not in_quotes:
            fields.append("".join(buf).strip())
            buf = []
        else:
            buf.append(char)

    fields.append("".join(buf).strip())
    return fields


def parse_table(text: str) -> List[List[str]]:
    rows = [split_fields(row) for row in split_rows(text)]
    logger.debug("parsed %d rows from %d chars", len(rows), len(text))
    return rows
