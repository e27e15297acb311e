"""Centralized constants for pick list processing.

Column names, file formats and the default output location used across the
parser, exporters, workflow and command-line entry point.
"""

# ============================================================================
# COLUMN NAMES
# ============================================================================

#: Product identifier column
PRODUCT_CODE_COLUMN = "product_code"

#: Combined bay + shelf column, e.g. "AB 12"
PICK_LOCATION_COLUMN = "pick_location"

#: Pick quantity column
QUANTITY_COLUMN = "quantity"

#: Columns that must be present in every input file
REQUIRED_COLUMNS = (PRODUCT_CODE_COLUMN, PICK_LOCATION_COLUMN, QUANTITY_COLUMN)

#: Column order of the consolidated output
OUTPUT_COLUMNS = (PRODUCT_CODE_COLUMN, QUANTITY_COLUMN, PICK_LOCATION_COLUMN)


# ============================================================================
# FILES
# ============================================================================

#: Extensions read with pandas.read_csv
CSV_EXTENSIONS = {".csv"}

#: Extensions read with pandas.read_excel (openpyxl engine)
EXCEL_EXTENSIONS = {".xlsx", ".xlsm"}

SUPPORTED_EXTENSIONS = CSV_EXTENSIONS | EXCEL_EXTENSIONS

#: Output file written when no output path is given
DEFAULT_OUTPUT_FILENAME = "sorted_output.csv"

#: Worksheet name used by the Excel exporter
EXCEL_SHEET_NAME = "Pick List"


# ============================================================================
# MESSAGES
# ============================================================================

SUCCESS_MESSAGE = "CSV file successfully sorted and aggregated."
