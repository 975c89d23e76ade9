"""
ExcelWriter — builds the styled feedback workbook one block at a time.

Every ``write_*`` method takes the row to start on and returns the next free
row, so a sheet is laid out by threading that number through the calls.
"""
from __future__ import annotations

import io
from pathlib import Path
from typing import NamedTuple

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from feedback_intel.excel.formatters import (
    add_kpi_card,
    auto_column_width,
    format_data_cell,
    format_header_row,
    write_value,
)
from feedback_intel.excel.styles import (
    DATA_FONT,
    DEMO_FILL,
    LABEL_FILL,
    LABEL_FONT,
    SECTION_FONT,
    SUBTITLE_FONT,
    THIN_BORDER,
    TITLE_FONT,
)

SUMMED_TYPES = ("currency", "number")


class Column(NamedTuple):
    key: str        # dict key in each row
    kind: str       # text | wrap | link | currency | number | percent
    header: str


class ExcelWriter:
    """Workbook under construction; ``save`` or ``to_bytes`` when done."""

    def __init__(self) -> None:
        self.wb = Workbook()
        self._fresh = True

    def add_sheet(self, title: str) -> Worksheet:
        # openpyxl starts with one empty sheet; rename it instead of leaving it behind
        if self._fresh:
            self._fresh = False
            ws = self.wb.active
            ws.title = title
            return ws
        return self.wb.create_sheet(title=title)

    # ------------------------------------------------------------------
    # Free-text blocks
    # ------------------------------------------------------------------

    @staticmethod
    def _merged_line(ws: Worksheet, row: int, text: str, font, width: int, fill=None) -> None:
        cell = write_value(ws, row, 1, text)
        cell.font = font
        if fill is not None:
            cell.fill = fill
        ws.merge_cells(start_row=row, start_column=1, end_row=row, end_column=width)

    def write_title(self, ws: Worksheet, title: str, subtitle: str, width: int = 6) -> int:
        self._merged_line(ws, 1, title, TITLE_FONT, width)
        self._merged_line(ws, 2, subtitle, SUBTITLE_FONT, width)
        for col in range(1, width + 1):
            ws.column_dimensions[get_column_letter(col)].width = 20
        return 4

    def write_banner(self, ws: Worksheet, row: int, text: str, width: int = 6) -> int:
        """Highlighted notice across the sheet, e.g. the demo-data warning."""
        self._merged_line(ws, row, text, LABEL_FONT, width, fill=DEMO_FILL)
        return row + 2

    def write_section(self, ws: Worksheet, row: int, title: str) -> int:
        write_value(ws, row, 1, title).font = SECTION_FONT
        return row + 2

    # ------------------------------------------------------------------
    # Summary blocks
    # ------------------------------------------------------------------

    def write_kpi_row(self, ws: Worksheet, row: int, cards: list[tuple], spacing: int = 2) -> int:
        """cards: [(value, caption, number kind), ...] laid out left to right."""
        for i, (value, caption, kind) in enumerate(cards):
            add_kpi_card(ws, row, 1 + i * spacing, value, caption, kind)
        return row + 3

    def write_key_values(self, ws: Worksheet, row: int, pairs: list[tuple[str, str]]) -> int:
        for key, value in pairs:
            key_cell = write_value(ws, row, 1, key)
            key_cell.font, key_cell.fill, key_cell.border = LABEL_FONT, LABEL_FILL, THIN_BORDER
            value_cell = write_value(ws, row, 2, value)
            value_cell.font, value_cell.border = DATA_FONT, THIN_BORDER
            row += 1
        return row + 1

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def write_table(
        self,
        ws: Worksheet,
        start_row: int,
        columns: list[Column],
        rows: list[dict],
        show_total: bool = False,
        autofit: bool = True,
    ) -> int:
        """Header row, one row per dict, optional TOTAL row summing numeric columns."""
        for col_num, column in enumerate(columns, 1):
            write_value(ws, start_row, col_num, column.header)
        format_header_row(ws, start_row, len(columns))

        row = start_row + 1
        for item in rows:
            for col_num, column in enumerate(columns, 1):
                value = item.get(column.key)
                if value is None:
                    value = 0 if column.kind in SUMMED_TYPES else ""
                format_data_cell(ws, row, col_num, value, column.kind)
            row += 1

        if show_total and rows:
            self._write_total_row(ws, row, columns, rows)
            row += 1

        if autofit:
            auto_column_width(ws)
        ws.freeze_panes = f"A{start_row + 1}"
        return row

    @staticmethod
    def _write_total_row(ws: Worksheet, row: int, columns: list[Column], rows: list[dict]) -> None:
        format_data_cell(ws, row, 1, "TOTAL", "text", is_total=True)
        for col_num, column in enumerate(columns[1:], 2):
            if column.kind in SUMMED_TYPES:
                total = sum(item.get(column.key) or 0 for item in rows)
                format_data_cell(ws, row, col_num, total, column.kind, is_total=True)
            else:
                format_data_cell(ws, row, col_num, "", "text", is_total=True)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def save(self, path: str | Path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.wb.save(path)
        return path

    def to_bytes(self) -> bytes:
        buf = io.BytesIO()
        self.wb.save(buf)
        return buf.getvalue()
