"""
Turn parsed actor-sheet rows into typed records.

Every numeric attribute is matched on its own; a field that doesn't match
gives None for that attribute only. Rows that are too short are dropped.
Nothing here raises on malformed content.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .models import ColumnMap, Record
from .rules import (
    EMPLOYEES_PATTERN,
    GROWTH_PATTERN,
    HEADER_ROWS,
    MARKET_SHARE_PATTERN,
    MIN_FIELD_COUNT,
    REVENUE_PATTERN,
)

logger = logging.getLogger(__name__)

DEFAULT_COLUMN_MAP = ColumnMap()


def parse_revenue(text: str) -> Optional[float]:
    """'NOK 88 mill.' -> 88.0"""
    m = REVENUE_PATTERN.search(text)
    return float(m.group(1)) if m else None


def parse_growth(text: str) -> Optional[float]:
    """'-4%\\n\\n(%)' -> -4.0"""
    m = GROWTH_PATTERN.search(text)
    return float(m.group(1)) if m else None


def parse_employees(text: str) -> Optional[int]:
    """'0\\n\\n28 i 227 lokasjoner' -> 0. Only a number at the very start counts."""
    m = EMPLOYEES_PATTERN.search(text)
    return int(m.group(1)) if m else None


def parse_market_share(text: str) -> Optional[float]:
    m = MARKET_SHARE_PATTERN.search(text)
    return float(m.group(1)) if m else None


def _field(fields: Sequence[str], index: int) -> str:
    return fields[index] if index < len(fields) else ""


def extract_record(fields: Sequence[str], columns: ColumnMap = DEFAULT_COLUMN_MAP) -> Record:
    return Record(
        name=_field(fields, columns.name),
        revenue=parse_revenue(_field(fields, columns.revenue)),
        year_over_year_growth=parse_growth(_field(fields, columns.year_over_year_growth)),
        employee_count=parse_employees(_field(fields, columns.employee_count)),
        market_share=parse_market_share(_field(fields, columns.market_share)),
    )


def extract_records(
    rows: Sequence[Sequence[str]],
    columns: ColumnMap = DEFAULT_COLUMN_MAP,
) -> List[Record]:
    """
    Build one Record per data row.

    The first HEADER_ROWS rows are skipped. Rows with fewer than
    MIN_FIELD_COUNT fields produce nothing, whatever the column map says.
    """
    records: List[Record] = []
    skipped = 0

    for fields in rows[HEADER_ROWS:]:
        if len(fields) < MIN_FIELD_COUNT:
            skipped += 1
            continue
        records.append(extract_record(fields, columns))

    logger.debug("extracted %d records, skipped %d short rows", len(records), skipped)
    return records
