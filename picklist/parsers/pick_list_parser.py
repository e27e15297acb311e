"""Pick list parser for CSV and Excel exports."""

from pathlib import Path
from typing import Any, List
import logging
import warnings
import zipfile

import pandas as pd
from openpyxl.utils.exceptions import InvalidFileException

from ..constants import (
    CSV_EXTENSIONS,
    PICK_LOCATION_COLUMN,
    PRODUCT_CODE_COLUMN,
    QUANTITY_COLUMN,
    REQUIRED_COLUMNS,
    SUPPORTED_EXTENSIONS,
)
from ..errors import InputReadFailure, MissingColumns
from ..models.pick_entry import PickEntry

logger = logging.getLogger(__name__)


def _cell_text(value: Any) -> str:
    """Normalize a cell to stripped text ("" for empty cells)."""
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ""
    # Spreadsheet numbers arrive as floats; 168846.0 should read as "168846"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


class PickListParser:
    """Parser for warehouse pick list files.

    Expected file format:
    - CSV (.csv) or Excel (.xlsx, .xlsm, first sheet by default)
    - Header row with at least these columns (any order, extra columns ignored):
        - product_code: Product identifier
        - pick_location: Bay and shelf separated by a space (e.g., "AB 12")
        - quantity: Integer quantity to pick

    The parser:
    1. Reads every cell as text ("NA", "None" and "nan" are kept as text)
    2. Validates that the required columns are present
    3. Skips rows where all required fields are blank (with warning)
    4. Returns PickEntry models in file order

    Location and quantity values are not interpreted here; that happens
    when the list is sorted and consolidated.
    """

    def __init__(self, file_path: Path | str):
        """Initialize pick list parser.

        Args:
            file_path: Path to pick list file

        Raises:
            InputReadFailure: If the file doesn't exist or has an unsupported extension
        """
        self.file_path = Path(file_path)
        if not self.file_path.is_file():
            raise InputReadFailure(f"File not found: {file_path}")

        if self.file_path.suffix.lower() not in SUPPORTED_EXTENSIONS:
            raise InputReadFailure(
                f"Unsupported file type '{self.file_path.suffix}'",
                {"supported": sorted(SUPPORTED_EXTENSIONS)},
            )

    @property
    def is_csv(self) -> bool:
        """True when the file is read as CSV."""
        return self.file_path.suffix.lower() in CSV_EXTENSIONS

    def read_dataframe(self, sheet_name: str | int = 0) -> pd.DataFrame:
        """Read the raw file into a DataFrame of text cells.

        Args:
            sheet_name: Sheet name or index for Excel files (ignored for CSV)

        Returns:
            DataFrame with stripped column names

        Raises:
            InputReadFailure: If the file cannot be read
        """
        try:
            if self.is_csv:
                df = pd.read_csv(self.file_path, dtype=str, keep_default_na=False)
            else:
                df = pd.read_excel(
                    self.file_path,
                    sheet_name=sheet_name,
                    dtype=object,
                    keep_default_na=False,
                    engine="openpyxl",
                )
        except pd.errors.EmptyDataError as e:
            raise InputReadFailure(f"File is empty: {self.file_path}") from e
        except (OSError, ValueError, zipfile.BadZipFile, InvalidFileException) as e:
            raise InputReadFailure(f"Unable to read {self.file_path}: {e}") from e

        df.columns = [str(col).strip() for col in df.columns]
        logger.debug(f"Read {len(df)} rows with columns {list(df.columns)} from {self.file_path}")
        return df

    def parse(self, sheet_name: str | int = 0) -> List[PickEntry]:
        """Parse pick list file and return entries in file order.

        Args:
            sheet_name: Sheet name or index for Excel files (default: first sheet)

        Returns:
            List of PickEntry models

        Raises:
            InputReadFailure: If the file cannot be read
            MissingColumns: If required columns are missing
        """
        df = self.read_dataframe(sheet_name)

        missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
        if missing:
            raise MissingColumns(
                f"Missing required columns: {missing}",
                {"file": self.file_path.name, "found": list(df.columns)},
            )

        entries = []
        blank_rows = 0

        for row_number, row in enumerate(df.to_dict("records"), start=1):
            product_code = _cell_text(row[PRODUCT_CODE_COLUMN])
            pick_location = _cell_text(row[PICK_LOCATION_COLUMN])
            quantity = _cell_text(row[QUANTITY_COLUMN])

            if not (product_code or pick_location or quantity):
                blank_rows += 1
                continue

            entries.append(PickEntry(
                product_code=product_code,
                pick_location=pick_location,
                quantity=quantity,
                source_row=row_number,
            ))

        if blank_rows > 0:
            warnings.warn(
                f"Skipped {blank_rows} blank rows in {self.file_path.name}.",
                UserWarning
            )

        logger.info(f"Parsed {len(entries)} pick list entries from {self.file_path.name}")
        return entries

    def __str__(self) -> str:
        """String representation."""
        return f"PickListParser({self.file_path.name})"
