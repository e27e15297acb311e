"""
Command-line utility to sort a pick list by location and merge duplicates.

Usage:
    picklist-sort input_file [-o output_file] [--sheet NAME] [-v]

Examples:
    # Write sorted_output.csv in the current directory
    picklist-sort picks.csv

    # Write a formatted Excel workbook instead
    picklist-sort picks.csv -o picks_sorted.xlsx

    # Read the "Monday" sheet of a workbook with progress logging
    picklist-sort "Week 42.xlsx" --sheet Monday -v
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .constants import DEFAULT_OUTPUT_FILENAME, SUCCESS_MESSAGE
from .errors import PickListError
from .workflows import PickListConfig, run_pick_list

logger = logging.getLogger(__name__)


def sheet_arg(value: str) -> str | int:
    """Read an all-digit --sheet value as a zero-based sheet index."""
    return int(value) if value.isascii() and value.isdigit() else value


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="picklist-sort",
        description="Sort a warehouse pick list by bay and shelf and merge duplicate entries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    picklist-sort picks.csv
    picklist-sort picks.csv -o picks_sorted.xlsx
    picklist-sort "Week 42.xlsx" --sheet Monday -v
        """,
    )

    parser.add_argument(
        "input_file",
        type=str,
        help="Path to pick list (.csv, .xlsx or .xlsm) with product_code, pick_location and quantity columns",
    )

    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=DEFAULT_OUTPUT_FILENAME,
        help=f"Output file, .csv or .xlsx (default: {DEFAULT_OUTPUT_FILENAME})",
    )

    parser.add_argument(
        "--sheet",
        type=sheet_arg,
        default=None,
        help="Sheet name, or zero-based index if all digits, for Excel input (default: first sheet)",
    )

    parser.add_argument(
        "--no-total",
        action="store_true",
        help="Omit the TOTAL row from Excel output",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Verbose output (-v for progress, -vv for debug)",
    )

    return parser


def configure_logging(verbosity: int):
    """Configure root logging for the given -v count."""
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the pick list CLI."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = PickListConfig(
            input_path=Path(args.input_file),
            output_path=Path(args.output),
            sheet_name=args.sheet if args.sheet is not None else 0,
            include_total=not args.no_total,
        )
        result = run_pick_list(config)

    except (PickListError, ValueError, OSError) as e:
        logger.debug("Pick list run failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(SUCCESS_MESSAGE)
    if args.verbose:
        print(f"   Input:  {result.input_path} ({result.rows_read} rows)")
        print(f"   Output: {result.output_path} ({result.rows_written} rows, {result.total_quantity} units)")
        print(f"   Merged: {result.duplicates_merged} duplicate rows")

    return 0


if __name__ == "__main__":
    sys.exit(main())
