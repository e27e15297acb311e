"""
Excel export template for consolidated pick lists.

Produces a single-sheet workbook for warehouse pickers:
1. Styled header row with filters
2. One row per merged entry in walking order, alternating row shading
3. Optional TOTAL row summing the quantity column
"""

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional
import logging

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from ..constants import EXCEL_SHEET_NAME, OUTPUT_COLUMNS, QUANTITY_COLUMN
from ..models.pick_entry import MergedPickEntry

logger = logging.getLogger(__name__)

# Color constants
HEADER_COLOR = "1E88E5"
ALT_ROW_COLOR = "F5F5F5"

_THIN_BORDER = Border(
    left=Side(style='thin'),
    right=Side(style='thin'),
    top=Side(style='thin'),
    bottom=Side(style='thin')
)


def create_header_style() -> Dict[str, Any]:
    """Create header row style (blue background, white text, bold)."""
    return {
        'font': Font(name='Calibri', size=11, bold=True, color='FFFFFF'),
        'fill': PatternFill(start_color=HEADER_COLOR, end_color=HEADER_COLOR, fill_type='solid'),
        'alignment': Alignment(horizontal='center', vertical='center', wrap_text=True),
        'border': _THIN_BORDER,
    }


def create_cell_style(bold: bool = False, bg_color: Optional[str] = None) -> Dict[str, Any]:
    """Create standard cell style."""
    style = {
        'font': Font(name='Calibri', size=10, bold=bold),
        'alignment': Alignment(horizontal='left', vertical='center'),
        'border': _THIN_BORDER,
    }

    if bg_color:
        style['fill'] = PatternFill(start_color=bg_color, end_color=bg_color, fill_type='solid')

    return style


def apply_style(cell, style: Dict[str, Any]):
    """Apply a style dictionary to a cell."""
    for attr, value in style.items():
        setattr(cell, attr, value)


def apply_alternating_rows(worksheet, start_row: int, end_row: int, start_col: int = 1, end_col: int = 3):
    """Apply alternating row colors (white / light gray)."""
    for row_idx in range(start_row, end_row + 1):
        if (row_idx - start_row) % 2 == 1:
            for col_idx in range(start_col, end_col + 1):
                cell = worksheet.cell(row=row_idx, column=col_idx)
                cell.fill = PatternFill(start_color=ALT_ROW_COLOR, end_color=ALT_ROW_COLOR, fill_type='solid')


def add_filters(worksheet, end_column: int, header_row: int = 1):
    """Add Excel filters to header row."""
    end_col_letter = get_column_letter(end_column)
    worksheet.auto_filter.ref = f"A{header_row}:{end_col_letter}{header_row}"


def format_number(worksheet, column: int, start_row: int, end_row: int):
    """Format column as integer with thousands separator (#,##0)."""
    for row_idx in range(start_row, end_row + 1):
        cell = worksheet.cell(row=row_idx, column=column)
        cell.number_format = '#,##0'


def add_total_row(worksheet, row: int, columns_to_sum: List[int], label_col: int = 1, label: str = "TOTAL"):
    """Add totals row with SUM formulas over data rows 2..row-1."""
    label_cell = worksheet.cell(row=row, column=label_col)
    label_cell.value = label
    label_cell.font = Font(name='Calibri', size=10, bold=True)
    label_cell.fill = PatternFill(start_color=ALT_ROW_COLOR, end_color=ALT_ROW_COLOR, fill_type='solid')

    for col in columns_to_sum:
        cell = worksheet.cell(row=row, column=col)
        col_letter = get_column_letter(col)
        cell.value = f"=SUM({col_letter}2:{col_letter}{row - 1})"
        cell.font = Font(name='Calibri', size=10, bold=True)
        cell.fill = PatternFill(start_color=ALT_ROW_COLOR, end_color=ALT_ROW_COLOR, fill_type='solid')
        cell.number_format = '#,##0'


def auto_fit_columns(worksheet, max_width: int = 50):
    """Auto-fit column widths based on content."""
    for column in worksheet.columns:
        column_letter = get_column_letter(column[0].column)
        max_length = max(
            (len(str(cell.value)) for cell in column if cell.value is not None),
            default=0,
        )
        worksheet.column_dimensions[column_letter].width = min(max_length + 2, max_width)


def export_pick_list_excel(
    entries: Iterable[MergedPickEntry],
    output_path: Path | str,
    include_total: bool = True,
) -> str:
    """
    Export consolidated pick list to a formatted Excel file.

    Args:
        entries: Merged entries in walking order
        output_path: Path to save Excel file (.xlsx)
        include_total: Append a TOTAL row summing quantities

    Returns:
        Path to created file
    """
    entries = list(entries)
    headers = list(OUTPUT_COLUMNS)
    quantity_col = headers.index(QUANTITY_COLUMN) + 1

    wb = Workbook()
    ws = wb.active
    ws.title = EXCEL_SHEET_NAME

    header_style = create_header_style()
    for col_idx, header in enumerate(headers, start=1):
        apply_style(ws.cell(row=1, column=col_idx, value=header), header_style)

    cell_style = create_cell_style()
    for row_idx, entry in enumerate(entries, start=2):
        for col_idx, value in enumerate(entry.to_dict().values(), start=1):
            cell = ws.cell(row=row_idx, column=col_idx, value=value)
            if isinstance(value, str):
                # Product codes like "=A1" must stay text, not formulas
                cell.data_type = "s"
            apply_style(cell, cell_style)

    last_data_row = len(entries) + 1
    if entries:
        apply_alternating_rows(ws, 2, last_data_row, end_col=len(headers))
        format_number(ws, quantity_col, 2, last_data_row)
        if include_total:
            add_total_row(ws, last_data_row + 1, [quantity_col])

    add_filters(ws, len(headers))
    ws.freeze_panes = "A2"
    auto_fit_columns(ws)

    wb.save(output_path)
    logger.info(f"Wrote {len(entries)} entries to {output_path}")
    return str(output_path)
