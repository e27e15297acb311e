"""
Exporters for consolidated pick lists.

This module provides:
- CSV export (header row plus one row per merged entry)
- Formatted Excel export for warehouse pickers
"""

from .csv_exporter import export_pick_list, export_pick_list_csv, to_dataframe
from .excel_templates import export_pick_list_excel

__all__ = [
    'export_pick_list',
    'export_pick_list_csv',
    'export_pick_list_excel',
    'to_dataframe',
]
