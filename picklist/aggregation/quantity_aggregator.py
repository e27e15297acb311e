"""Quantity consolidation for pick lists.

Rows that share a product code and a pick location are merged into a single
row whose quantity is the sum of the originals. Output order follows the
first occurrence of each (product_code, pick_location) pair, so running this
after sort_by_location keeps walking order.
"""

from collections import defaultdict
from typing import Any, Dict, Iterable, List, Tuple
import logging
import re

from ..constants import PICK_LOCATION_COLUMN, PRODUCT_CODE_COLUMN, QUANTITY_COLUMN
from ..errors import InvalidQuantity
from ..models.pick_entry import MergedPickEntry
from ..utils.record_fields import get_field

logger = logging.getLogger(__name__)

AggregationKey = Tuple[str, str]

_INTEGER_PATTERN = re.compile(r"^[+-]?\d+(\.0*)?$", re.ASCII)


def parse_quantity(value: Any) -> int:
    """
    Convert a raw quantity to an integer.

    Accepts integers, integral floats (e.g., 3.0 from a spreadsheet cell) and
    strings holding an optionally signed integer.

    Args:
        value: Raw quantity

    Returns:
        Quantity as int

    Raises:
        InvalidQuantity: If the value is not an integer

    Example:
        >>> parse_quantity(" 12 ")
        12
        >>> parse_quantity("3.0")
        3
    """
    if isinstance(value, bool):
        raise InvalidQuantity(f"Quantity must be an integer, got {value!r}")

    if isinstance(value, int):
        return value

    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise InvalidQuantity(f"Quantity must be an integer, got {value!r}")

    if isinstance(value, str):
        text = value.strip()
        if _INTEGER_PATTERN.match(text):
            try:
                return int(text.split(".")[0])
            except ValueError as e:
                # int() refuses strings past sys.get_int_max_str_digits()
                raise InvalidQuantity(f"Quantity is too long ({len(text)} characters)") from e

    raise InvalidQuantity(f"Quantity must be an integer, got {value!r}")


def aggregation_key(record: Any) -> AggregationKey:
    """Return the (product_code, pick_location) pair identifying duplicates."""
    return (
        get_field(record, PRODUCT_CODE_COLUMN),
        get_field(record, PICK_LOCATION_COLUMN),
    )


def aggregate(records: Iterable[Any]) -> List[MergedPickEntry]:
    """
    Merge duplicate (product_code, pick_location) rows, summing quantities.

    Args:
        records: Ordered PickEntry models, merged entries or row mappings

    Returns:
        One MergedPickEntry per distinct pair, in first-seen order

    Raises:
        InvalidQuantity: If any quantity is not an integer
        MissingColumns: If a record lacks a required field

    Example:
        rows = [
            {"product_code": "A", "pick_location": "A 2", "quantity": "3"},
            {"product_code": "A", "pick_location": "A 2", "quantity": "5"},
            {"product_code": "B", "pick_location": "AA 1", "quantity": "4"},
        ]
        aggregate(rows)
        # [MergedPickEntry("A", 8, "A 2"), MergedPickEntry("B", 4, "AA 1")]
    """
    # dicts keep insertion order, which gives first-seen output order
    totals: Dict[AggregationKey, int] = {}
    row_count = 0

    for record in records:
        key = aggregation_key(record)
        raw_quantity = get_field(record, QUANTITY_COLUMN)
        try:
            quantity = parse_quantity(raw_quantity)
        except InvalidQuantity as e:
            raise InvalidQuantity(
                e.message,
                {"product_code": key[0], "pick_location": key[1]},
            ) from e

        totals[key] = totals.get(key, 0) + quantity
        row_count += 1

    merged = [
        MergedPickEntry(product_code=product_code, quantity=total, pick_location=pick_location)
        for (product_code, pick_location), total in totals.items()
    ]

    logger.debug(f"Aggregated {row_count} rows into {len(merged)} entries")
    return merged


def validate_aggregation(
    original: Iterable[Any],
    merged: Iterable[MergedPickEntry],
) -> Dict[str, Any]:
    """
    Validate that consolidation preserved quantities.

    Args:
        original: Rows before aggregation
        merged: Result of aggregate()

    Returns:
        Dictionary with validation results:
        - valid: bool - True if every key total and the grand total match
        - total_quantity_original: Sum of original quantities
        - total_quantity_merged: Sum of merged quantities
        - by_key_diff: Dict mapping (product_code, pick_location) to difference
        - duplicate_keys: Keys appearing more than once in the merged output
    """
    original_by_key: Dict[AggregationKey, int] = defaultdict(int)
    merged_by_key: Dict[AggregationKey, int] = defaultdict(int)
    merged_counts: Dict[AggregationKey, int] = defaultdict(int)

    for record in original:
        original_by_key[aggregation_key(record)] += parse_quantity(get_field(record, QUANTITY_COLUMN))

    for entry in merged:
        key = (entry.product_code, entry.pick_location)
        merged_by_key[key] += entry.quantity
        merged_counts[key] += 1

    by_key_diff = {
        key: merged_by_key.get(key, 0) - original_by_key.get(key, 0)
        for key in set(original_by_key) | set(merged_by_key)
    }
    duplicate_keys = sorted(key for key, count in merged_counts.items() if count > 1)

    total_original = sum(original_by_key.values())
    total_merged = sum(merged_by_key.values())

    valid = (
        total_original == total_merged
        and not any(by_key_diff.values())
        and not duplicate_keys
    )

    return {
        "valid": valid,
        "total_quantity_original": total_original,
        "total_quantity_merged": total_merged,
        "by_key_diff": by_key_diff,
        "duplicate_keys": duplicate_keys,
    }
