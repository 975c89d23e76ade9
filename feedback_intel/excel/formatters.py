"""
Cell styling for the feedback workbook: headers, typed data cells, KPI cards.
"""
from __future__ import annotations

from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE, Cell
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from feedback_intel.excel.styles import (
    ALTERNATE_FILL,
    CENTER,
    DATA_FONT,
    HEADER_BORDER,
    HEADER_FILL,
    HEADER_FONT,
    KPI_LABEL_FONT,
    KPI_VALUE_FONT,
    LEFT,
    NUMBER_FORMATS,
    RIGHT,
    THIN_BORDER,
    TOTAL_BORDER,
    TOTAL_FILL,
    TOTAL_FONT,
    WRAP,
)

# KPI cards round money to whole dollars; table cells keep cents
KPI_FORMATS = dict(NUMBER_FORMATS, currency='"$"#,##0')


def _alignment(kind: str):
    if kind in NUMBER_FORMATS:
        return RIGHT
    return WRAP if kind == "wrap" else LEFT


def write_value(ws: Worksheet, row: int, col: int, value) -> Cell:
    """Assign ``value``; strings lose XML-illegal control characters and are
    always stored as text, so imported "=..." never becomes a formula."""
    if not isinstance(value, str):
        return ws.cell(row=row, column=col, value=value)
    cell = ws.cell(row=row, column=col, value=ILLEGAL_CHARACTERS_RE.sub("", value))
    cell.data_type = "s"
    return cell


def format_header_row(ws: Worksheet, row_num: int, num_cols: int) -> None:
    for col in range(1, num_cols + 1):
        cell = ws.cell(row=row_num, column=col)
        cell.font, cell.fill = HEADER_FONT, HEADER_FILL
        cell.alignment, cell.border = CENTER, HEADER_BORDER


def format_data_cell(
    ws: Worksheet,
    row_num: int,
    col_num: int,
    value,
    kind: str = "text",
    is_total: bool = False,
) -> None:
    """Write ``value`` and style it for its kind (text, wrap, link, currency, number, percent).

    Body rows are banded on even row numbers; a total row gets its own fill.
    """
    cell = write_value(ws, row_num, col_num, value)
    cell.font = TOTAL_FONT if is_total else DATA_FONT
    cell.border = TOTAL_BORDER if is_total else THIN_BORDER
    cell.alignment = _alignment(kind)
    if kind in NUMBER_FORMATS:
        cell.number_format = NUMBER_FORMATS[kind]
    if kind == "link" and cell.value:
        cell.hyperlink = str(cell.value)

    if is_total:
        cell.fill = TOTAL_FILL
    elif row_num % 2 == 0:
        cell.fill = ALTERNATE_FILL


def auto_column_width(ws: Worksheet, min_width: int = 10, max_width: int = 60) -> None:
    """Size each column to its longest value, within [min_width, max_width]."""
    for idx, cells in enumerate(ws.iter_cols(), 1):
        longest = max((len(str(c.value)) for c in cells if c.value is not None), default=0)
        ws.column_dimensions[get_column_letter(idx)].width = min(max(longest + 2, min_width), max_width)


def add_kpi_card(ws: Worksheet, row: int, col: int, value, caption: str, kind: str = "number") -> None:
    """Big number on ``row`` with its caption underneath."""
    number = write_value(ws, row, col, value)
    number.font, number.alignment = KPI_VALUE_FONT, CENTER
    if kind in KPI_FORMATS:
        number.number_format = KPI_FORMATS[kind]

    label = ws.cell(row=row + 1, column=col, value=caption)
    label.font, label.alignment = KPI_LABEL_FONT, CENTER
