"""
Delimited-text parsing: delimiter sniffing and quote-aware line splitting.

Input is split into lines before tokenising, so a quoted cell cannot span
lines — a newline inside quotes ends the row.
"""
from __future__ import annotations

COMMA = ","
TAB = "\t"


def detect_delimiter(header_line: str) -> str:
    """Tab when the header has more tabs than commas, otherwise comma."""
    return TAB if header_line.count(TAB) > header_line.count(COMMA) else COMMA


def clean_cell(cell: str) -> str:
    """Trim whitespace and drop one pair of wrapping double quotes."""
    cell = cell.strip()
    if cell.startswith('"'):
        cell = cell[1:]
    if cell.endswith('"'):
        cell = cell[:-1]
    return cell.strip()


def split_line(line: str, delimiter: str) -> list[str]:
    """Split one line on ``delimiter``, ignoring delimiters inside quotes.

    A double quote toggles quoted mode and is itself dropped from the cell.
    """
    cells: list[str] = []
    cell: list[str] = []
    in_quote = False
    for char in line:
        if char == '"':
            in_quote = not in_quote
        elif char == delimiter and not in_quote:
            cells.append("".join(cell))
            cell = []
        else:
            cell.append(char)
    cells.append("".join(cell))
    return [clean_cell(c) for c in cells]


def non_blank_lines(text: str) -> list[str]:
    """Split on newlines (CRLF tolerated) and drop whitespace-only lines."""
    return [line.rstrip("\r") for line in text.split("\n") if line.strip()]


def parse_delimited(text: str) -> list[list[str]]:
    """Parse a CSV/TSV blob into rows of cleaned cells (header first).

    Returns [] when there is no header plus at least one data row.
    """
    if not text:
        return []
    lines = non_blank_lines(text)
    if len(lines) < 2:
        return []

    delimiter = detect_delimiter(lines[0])
    return [split_line(line, delimiter) for line in lines]
