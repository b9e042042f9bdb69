"""
ExcelRenderer — writes a results view to a styled workbook, one row per card.
"""
from __future__ import annotations

from datetime import datetime
from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from travel_recs.excel.styles import (
    ALTERNATE_FILL, CENTER, DATA_FONT, HEADER_FILL, HEADER_FONT, LEFT,
    NAME_FONT, NOTICE_FONT, SUBTITLE_FONT, THIN_BORDER, TIME_FONT, TITLE_FONT, WRAP,
)
from travel_recs.render.views import CardView, ErrorView, ResultsView

# (header, width)
COLUMNS = [
    ("Name", 30),
    ("Current Time", 28),
    ("Description", 70),
    ("Image URL", 50),
]
HEADER_ROW = 4


class ExcelRenderer:
    """Builds a workbook for a view; save() writes it to disk."""

    def __init__(self, title: str = "Travel Recommendations") -> None:
        self.title = title

    # ------------------------------------------------------------------
    # Layout helpers
    # ------------------------------------------------------------------

    def _new_sheet(self, subtitle: str) -> tuple[Workbook, Worksheet]:
        wb = Workbook()
        ws = wb.active
        ws.title = "Results"

        ws.cell(row=1, column=1).value = self.title
        ws.cell(row=1, column=1).font = TITLE_FONT
        ws.merge_cells(start_row=1, start_column=1, end_row=1, end_column=len(COLUMNS))

        ws.cell(row=2, column=1).value = subtitle
        ws.cell(row=2, column=1).font = SUBTITLE_FONT
        ws.merge_cells(start_row=2, start_column=1, end_row=2, end_column=len(COLUMNS))

        for col, (_, width) in enumerate(COLUMNS, 1):
            ws.column_dimensions[get_column_letter(col)].width = width
        return wb, ws

    def _write_header(self, ws: Worksheet) -> None:
        for col, (label, _) in enumerate(COLUMNS, 1):
            cell = ws.cell(row=HEADER_ROW, column=col)
            cell.value = label
            cell.font = HEADER_FONT
            cell.fill = HEADER_FILL
            cell.alignment = CENTER
            cell.border = THIN_BORDER

    def _write_card(self, ws: Worksheet, row: int, card: CardView) -> None:
        values = [card.name, card.current_time, card.description, card.image_url]
        for col, value in enumerate(values, 1):
            cell = ws.cell(row=row, column=col)
            cell.value = value
            cell.font = DATA_FONT
            cell.border = THIN_BORDER
            cell.alignment = WRAP if col == 3 else LEFT
            if row % 2 == 0:
                cell.fill = ALTERNATE_FILL
        ws.cell(row=row, column=1).font = NAME_FONT
        if card.current_time:
            ws.cell(row=row, column=2).font = TIME_FONT

    def _write_message(self, ws: Worksheet, row: int, text: str) -> None:
        cell = ws.cell(row=row, column=1)
        cell.value = text
        cell.font = NOTICE_FONT
        cell.alignment = WRAP
        ws.merge_cells(start_row=row, start_column=1, end_row=row, end_column=len(COLUMNS))

    # ------------------------------------------------------------------
    # Renderer interface
    # ------------------------------------------------------------------

    def render(self, view: ResultsView) -> Workbook:
        """Card table, or just the no-results notice when the view is empty."""
        category = view.category.value if view.category else "-"
        subtitle = f"Category: {category}  |  Generated {datetime.now():%Y-%m-%d %H:%M}"
        wb, ws = self._new_sheet(subtitle)

        if view.is_empty:
            self._write_message(ws, HEADER_ROW, view.notice or "")
            return wb

        self._write_header(ws)
        for row, card in enumerate(view.cards, HEADER_ROW + 1):
            self._write_card(ws, row, card)
        ws.freeze_panes = ws.cell(row=HEADER_ROW + 1, column=1)
        return wb

    def render_error(self, view: ErrorView) -> Workbook:
        wb, ws = self._new_sheet(view.message)
        self._write_message(ws, HEADER_ROW, f"Details: {view.detail}")
        return wb

    def save(self, view: ResultsView | ErrorView, output_path: str | Path) -> Path:
        """Write the results (or the load error) workbook to output_path."""
        wb = self.render_error(view) if isinstance(view, ErrorView) else self.render(view)
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        wb.save(output_path)
        return output_path
