"""Pick list sorting workflow.

Orchestrates one run over an input file:

1. Parse the pick list (CSV or Excel)
2. Sort entries into warehouse walking order
3. Consolidate duplicate product/location entries
4. Check that quantities were preserved
5. Write the output file

The output file is only opened after steps 1-4 succeed, so a failed run
never leaves a partial output behind.
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import List, Optional
import logging
import time

from ..aggregation.quantity_aggregator import aggregate, validate_aggregation
from ..constants import DEFAULT_OUTPUT_FILENAME
from ..errors import PickListError
from ..exporters.csv_exporter import export_pick_list
from ..models.pick_entry import MergedPickEntry, PickEntry
from ..parsers.pick_list_parser import PickListParser
from ..sorting.location_comparator import sort_by_location

logger = logging.getLogger(__name__)


@dataclass
class PickListConfig:
    """Configuration for a pick list run.

    Attributes:
        input_path: Pick list to read (.csv, .xlsx, .xlsm)
        output_path: File to write (.csv, or .xlsx for a formatted workbook)
        sheet_name: Sheet name or index for Excel input
        include_total: Append a TOTAL row to Excel output
    """
    input_path: Path
    output_path: Path = field(default_factory=lambda: Path(DEFAULT_OUTPUT_FILENAME))
    sheet_name: str | int = 0
    include_total: bool = True

    def __post_init__(self):
        """Normalize paths and validate configuration."""
        self.input_path = Path(self.input_path)
        self.output_path = Path(self.output_path)

        if self.input_path.resolve() == self.output_path.resolve():
            raise ValueError(
                f"Output path must differ from input path: {self.output_path}"
            )


@dataclass
class PickListResult:
    """Result of a pick list run.

    Attributes:
        input_path: File that was read
        output_path: File that was written
        run_timestamp: When the run started
        rows_read: Entries parsed from the input
        rows_written: Consolidated entries written
        total_quantity: Sum of all written quantities
        run_time_seconds: Wall time of the run
        entries: Consolidated entries in walking order
    """
    input_path: Path
    output_path: Path
    run_timestamp: datetime
    rows_read: int = 0
    rows_written: int = 0
    total_quantity: int = 0
    run_time_seconds: Optional[float] = None
    entries: List[MergedPickEntry] = field(default_factory=list)

    @property
    def duplicates_merged(self) -> int:
        """Number of input rows folded into another row."""
        return self.rows_read - self.rows_written


class PickListWorkflow:
    """Runs parse → sort → consolidate → export for one pick list.

    Example Usage:
        ```python
        config = PickListConfig(input_path=Path("picks.csv"))
        result = PickListWorkflow(config).execute()
        print(result.rows_written)
        ```
    """

    def __init__(self, config: PickListConfig):
        self.config = config

    def parse_input(self) -> List[PickEntry]:
        """Read the configured input file."""
        logger.info(f"Reading pick list from {self.config.input_path}")
        parser = PickListParser(self.config.input_path)
        return parser.parse(sheet_name=self.config.sheet_name)

    def consolidate(self, entries: List[PickEntry]) -> List[MergedPickEntry]:
        """Sort entries into walking order and merge duplicates.

        Raises:
            PickListError: If any entry is malformed or totals are not preserved
        """
        logger.info(f"Sorting {len(entries)} entries by pick location")
        sorted_entries = sort_by_location(entries)

        merged = aggregate(sorted_entries)
        logger.info(f"Consolidated {len(sorted_entries)} entries into {len(merged)}")

        check = validate_aggregation(sorted_entries, merged)
        if not check["valid"]:
            raise PickListError(
                "Quantity totals changed during consolidation",
                {
                    "total_original": check["total_quantity_original"],
                    "total_merged": check["total_quantity_merged"],
                },
            )

        return merged

    def execute(self) -> PickListResult:
        """Execute the workflow.

        Returns:
            PickListResult describing the run

        Raises:
            PickListError: On any input error; nothing is written
        """
        start = time.time()
        result = PickListResult(
            input_path=self.config.input_path,
            output_path=self.config.output_path,
            run_timestamp=datetime.now(),
        )

        entries = self.parse_input()
        merged = self.consolidate(entries)

        export_pick_list(
            merged,
            self.config.output_path,
            include_total=self.config.include_total,
        )

        result.rows_read = len(entries)
        result.rows_written = len(merged)
        result.total_quantity = sum(entry.quantity for entry in merged)
        result.entries = merged
        result.run_time_seconds = time.time() - start

        logger.info(
            f"Wrote {result.rows_written} entries ({result.total_quantity} units) "
            f"to {result.output_path} in {result.run_time_seconds:.3f}s"
        )
        return result


def run_pick_list(config: PickListConfig) -> PickListResult:
    """Convenience wrapper: PickListWorkflow(config).execute()."""
    return PickListWorkflow(config).execute()
