"""
Row normalisation: raw string cells → FeedbackRecord, and back again for saves.
"""
from __future__ import annotations

import datetime as dt
import math
import re
from decimal import Decimal

from feedback_intel.config import CANONICAL_FIELDS, UNCATEGORIZED, UNKNOWN_SUPPLIER
from feedback_intel.data.mapping import (
    NOT_FOUND,
    MatchMode,
    describe_mapping,
    detect_index_offset,
    resolve_columns,
)
from feedback_intel.data.schemas import FeedbackRecord


# ---------------------------------------------------------------------------
# Field coercion
# ---------------------------------------------------------------------------

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_PRICE_STRIP_RE = re.compile(r"[^0-9.\-]")


def normalize_date(raw: str) -> str:
    """Truncate datetime text to YYYY-MM-DD; "" if it is not a real ISO date.

    "2025-11-07 03:12:00" and "2025-11-07T03:12:00Z" both become "2025-11-07".
    """
    value = (raw or "").strip()
    cut = [i for i in (value.find(" "), value.find("T")) if i != -1]
    if cut:
        value = value[:min(cut)]
    if not _ISO_DATE_RE.match(value):
        return ""
    try:
        dt.date.fromisoformat(value)
    except ValueError:
        return ""
    return value


def normalize_price(raw: str) -> float:
    """Parse a money-ish string ("$2,590.00 AUD") into a non-negative float."""
    cleaned = _PRICE_STRIP_RE.sub("", raw or "")
    if not cleaned:
        return 0.0
    try:
        value = float(cleaned)
    except ValueError:
        return 0.0
    if math.isnan(value) or math.isinf(value) or value < 0:
        return 0.0
    return value


def format_price(price: float) -> str:
    """Plain decimal string for the spreadsheet: 100.0 → "100", 1e-05 → "0.00001"."""
    if float(price).is_integer():
        return str(int(price))
    return format(Decimal(repr(float(price))), "f")


# ---------------------------------------------------------------------------
# Row → record
# ---------------------------------------------------------------------------

def _cell(row: list[str], idx: int, offset: int) -> str:
    if idx == NOT_FOUND:
        return ""
    real = idx + offset
    if real >= len(row) or row[real] is None:
        return ""
    return str(row[real]).strip()


def normalize_row(row: list[str], columns: dict[str, int], offset: int = 0) -> FeedbackRecord | None:
    """Build one record from a data row; None for a row with no content."""
    if not any(str(c).strip() for c in row if c is not None):
        return None

    def val(attr: str) -> str:
        return _cell(row, columns.get(attr, NOT_FOUND), offset)

    return FeedbackRecord(
        date=normalize_date(val("date")),
        supplier_name=val("supplier_name") or UNKNOWN_SUPPLIER,
        label=val("label") or UNCATEGORIZED,
        sub_label=val("sub_label") or UNCATEGORIZED,
        micro_label=val("micro_label") or UNCATEGORIZED,
        price=normalize_price(val("price")),
        message=val("message"),
        link=val("link"),
    )


def records_from_rows(
    rows: list[list[str]],
    mode: MatchMode = MatchMode.ALIAS,
    detect_offset: bool = True,
) -> list[FeedbackRecord]:
    """Map a header + data grid into records.

    Offset detection looks at the first data row only and, when it fires,
    shifts every column for every row.
    """
    if not rows or len(rows) < 2:
        return []

    header, data = rows[0], rows[1:]
    columns = resolve_columns(header, mode)
    unmapped = [attr for attr, found in describe_mapping(header, columns).items() if found is None]
    if unmapped:
        print(f"  No column for {', '.join(unmapped)} — using defaults")

    offset = 0
    if detect_offset:
        offset = detect_index_offset(data[0], columns["date"])
        if offset:
            print("  Detected leading index column — shifting columns by +1")

    records = []
    for row in data:
        rec = normalize_row(row, columns, offset)
        if rec is not None:
            records.append(rec)
    return records


# ---------------------------------------------------------------------------
# Record → row (spreadsheet save)
# ---------------------------------------------------------------------------

def record_to_row(record: FeedbackRecord) -> list[str]:
    """Cells in SAVE_HEADERS order."""
    row = []
    for attr, _, _, _ in CANONICAL_FIELDS:
        value = getattr(record, attr)
        row.append(format_price(value) if attr == "price" else (value or ""))
    return row
