"""
Header → canonical field mapping and leading-index-column detection.
"""
from __future__ import annotations

import re
from enum import Enum

from feedback_intel.config import CANONICAL_FIELDS

NOT_FOUND = -1

_BARE_INT_RE = re.compile(r"^\d+$")


class MatchMode(str, Enum):
    """How header cells are matched against canonical field aliases.

    ALIAS     — whole-cell, case-insensitive alias match only (file import).
    CONTAINS  — alias match first, then substring match of the field's
                fragments against the lower-cased header (spreadsheet load).
    """
    ALIAS = "alias"
    CONTAINS = "contains"


def resolve_columns(headers: list[str], mode: MatchMode = MatchMode.ALIAS) -> dict[str, int]:
    """Return {field: column index or NOT_FOUND} for every canonical field.

    Exact alias matches are claimed first for all fields so a loose fragment
    ("label") cannot steal a column that another field names exactly
    ("Sub Label"). Within one field, the earliest alias in its list wins.
    """
    lowered = [str(h).strip().lower() for h in headers]
    columns: dict[str, int] = {}
    claimed: set[int] = set()

    for attr, _, aliases, _ in CANONICAL_FIELDS:
        columns[attr] = NOT_FOUND
        for alias in aliases:
            alias = alias.lower()
            idx = next((i for i, h in enumerate(lowered) if h == alias and i not in claimed), NOT_FOUND)
            if idx != NOT_FOUND:
                columns[attr] = idx
                claimed.add(idx)
                break

    if mode == MatchMode.CONTAINS:
        for attr, _, _, fragments in CANONICAL_FIELDS:
            if columns[attr] != NOT_FOUND:
                continue
            for i, h in enumerate(lowered):
                if i in claimed:
                    continue
                if any(frag in h for frag in fragments):
                    columns[attr] = i
                    claimed.add(i)
                    break

    return columns


def looks_like_date(value: str) -> bool:
    """Rough check used only by offset detection."""
    return "202" in value or "/" in value


def detect_index_offset(first_row: list[str], date_idx: int) -> int:
    """1 when the table carries an unlabelled leading index column, else 0.

    The signal is the Date column holding a bare integer while the cell to
    its right looks like a date — what a DataFrame exported with its index
    produces.
    """
    if date_idx == NOT_FOUND or date_idx >= len(first_row):
        return 0
    value = first_row[date_idx]
    if not _BARE_INT_RE.match(value):
        return 0
    if date_idx + 1 >= len(first_row):
        return 0
    return 1 if looks_like_date(first_row[date_idx + 1]) else 0


def describe_mapping(headers: list[str], columns: dict[str, int]) -> dict[str, str | None]:
    """{field: matched header text or None} — handy for import diagnostics."""
    return {
        attr: (headers[idx] if idx != NOT_FOUND and idx < len(headers) else None)
        for attr, idx in columns.items()
    }
