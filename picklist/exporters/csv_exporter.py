"""CSV export for consolidated pick lists."""

from pathlib import Path
from typing import Iterable
import logging

import pandas as pd

from ..constants import EXCEL_EXTENSIONS, OUTPUT_COLUMNS
from ..errors import PickListError
from ..models.pick_entry import MergedPickEntry
from .excel_templates import export_pick_list_excel

logger = logging.getLogger(__name__)


def to_dataframe(entries: Iterable[MergedPickEntry]) -> pd.DataFrame:
    """Build an output DataFrame with columns in output order."""
    return pd.DataFrame(
        [entry.to_dict() for entry in entries],
        columns=list(OUTPUT_COLUMNS),
    )


def export_pick_list_csv(entries: Iterable[MergedPickEntry], output_path: Path | str) -> str:
    """
    Write consolidated entries as CSV.

    Header row of field names, then one row per entry. Values containing
    commas or quotes are quoted.

    Args:
        entries: Merged entries in walking order
        output_path: Destination file

    Returns:
        Path to created file
    """
    df = to_dataframe(entries)
    df.to_csv(output_path, index=False, lineterminator="\n")
    logger.info(f"Wrote {len(df)} entries to {output_path}")
    return str(output_path)


def export_pick_list(
    entries: Iterable[MergedPickEntry],
    output_path: Path | str,
    include_total: bool = True,
) -> str:
    """Write entries as Excel for .xlsx paths and as CSV otherwise.

    include_total only applies to Excel output.

    Raises:
        PickListError: For other Excel suffixes (e.g., .xlsm), which cannot be
            written as a plain workbook
    """
    suffix = Path(output_path).suffix.lower()
    if suffix == ".xlsx":
        return export_pick_list_excel(entries, output_path, include_total=include_total)
    if suffix in EXCEL_EXTENSIONS:
        raise PickListError(
            f"Unsupported output file type '{suffix}'",
            {"excel_output": ".xlsx"},
        )
    return export_pick_list_csv(entries, output_path)
