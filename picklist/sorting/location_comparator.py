"""Warehouse location ordering.

Pick locations are written as ``"<bay> <shelf>"`` (e.g., ``"A 2"``,
``"AB 12"``). Walking order through the warehouse is:

1. Every single-letter bay before any longer bay ("Z" before "AA")
2. Bays of the same kind alphabetically
3. Shelves within a bay numerically ("9" before "10")

This module provides the comparator, an equivalent sort key, and a stable
sort over pick list records.
"""

from functools import cmp_to_key
from typing import Any, Iterable, List, Tuple
import logging

from ..constants import PICK_LOCATION_COLUMN
from ..errors import InvalidLocationFormat, InvalidShelf
from ..models.location import LocationKey
from ..utils.record_fields import get_field

logger = logging.getLogger(__name__)


def parse_location(location: str) -> Tuple[str, str]:
    """
    Split a pick location into bay and shelf at the last space.

    Everything before the last space is the bay, everything after it is the
    shelf, so bays that themselves contain spaces are kept whole.

    Args:
        location: Pick location string (e.g., "AB 12")

    Returns:
        Tuple of (bay, shelf) strings

    Raises:
        InvalidLocationFormat: If the location contains no space

    Example:
        >>> parse_location("AB 12")
        ('AB', '12')
        >>> parse_location("A B 3")
        ('A B', '3')
    """
    if not isinstance(location, str):
        raise InvalidLocationFormat(
            f"Invalid pick location format: {location!r}",
            {"expected": "'<bay> <shelf>' string"},
        )

    bay, separator, shelf = location.rpartition(" ")
    if not separator:
        raise InvalidLocationFormat(f"Invalid pick location format: {location}")

    return bay, shelf


def parse_shelf(shelf: str, location: str = "") -> int:
    """Convert a shelf token to a non-negative integer.

    Raises:
        InvalidShelf: If the shelf is not made of ASCII digits or is too long
            to convert
    """
    context = {"pick_location": location} if location else None
    if not (shelf.isascii() and shelf.isdigit()):
        raise InvalidShelf(f"Shelf must be a non-negative integer, got {shelf!r}", context)

    try:
        return int(shelf)
    except ValueError as e:
        # int() refuses strings past sys.get_int_max_str_digits()
        raise InvalidShelf(f"Shelf is too long ({len(shelf)} digits)", context) from e


def parse_location_key(location: str) -> LocationKey:
    """
    Parse a pick location into a LocationKey.

    Args:
        location: Pick location string

    Returns:
        LocationKey with integer shelf

    Raises:
        InvalidLocationFormat: If the location contains no space
        InvalidShelf: If the shelf is not a non-negative integer
    """
    bay, shelf = parse_location(location)
    return LocationKey(bay=bay, shelf=parse_shelf(shelf, location))


def _compare(a, b) -> int:
    return (a > b) - (a < b)


def compare_bays(bay_a: str, bay_b: str) -> int:
    """
    Compare two bay identifiers.

    A single-character bay always comes before a longer one regardless of
    letters. Otherwise bays compare alphabetically.

    Args:
        bay_a: First bay
        bay_b: Second bay

    Returns:
        -1 if bay_a comes first, 1 if bay_b comes first, 0 if equal

    Example:
        >>> compare_bays("Z", "AA")
        -1
        >>> compare_bays("AB", "AA")
        1
    """
    a_single = len(bay_a) == 1
    b_single = len(bay_b) == 1

    if a_single and not b_single:
        return -1
    if b_single and not a_single:
        return 1
    return _compare(bay_a, bay_b)


def compare_locations(location_a: str, location_b: str) -> int:
    """
    Compare two pick locations in warehouse walking order.

    Bays are compared first (see compare_bays); shelves break ties and are
    compared as integers.

    Args:
        location_a: First pick location
        location_b: Second pick location

    Returns:
        -1, 0 or 1

    Raises:
        InvalidLocationFormat: If either location contains no space
        InvalidShelf: If either shelf is not a non-negative integer
    """
    return compare_location_keys(
        parse_location_key(location_a), parse_location_key(location_b)
    )


def compare_location_keys(key_a: LocationKey, key_b: LocationKey) -> int:
    """Compare two already-parsed locations: bay first, then shelf."""
    bay_order = compare_bays(key_a.bay, key_b.bay)
    if bay_order != 0:
        return bay_order

    return _compare(key_a.shelf, key_b.shelf)


def location_sort_key(location: str) -> Tuple[bool, str, int]:
    """Sort key equivalent to compare_locations, for use with ``sorted(..., key=...)``."""
    return parse_location_key(location).sort_key()


def sort_by_location(records: Iterable[Any]) -> List[Any]:
    """
    Sort pick list records by their pick location.

    The sort is stable: records at the same location keep their relative
    input order. The input is not modified.

    Args:
        records: PickEntry models, merged entries or row mappings

    Returns:
        New list of the same records in walking order

    Raises:
        InvalidLocationFormat: If any location contains no space
        InvalidShelf: If any shelf is not a non-negative integer
        MissingColumns: If a record has no pick_location field
    """
    # Parse every location up front so a malformed one fails even when the
    # sort never compares it (e.g., a single record).
    keyed = [
        (parse_location_key(get_field(record, PICK_LOCATION_COLUMN)), record)
        for record in records
    ]
    by_location = cmp_to_key(compare_location_keys)

    sorted_records = [
        record for _, record in sorted(keyed, key=lambda pair: by_location(pair[0]))
    ]

    logger.debug(f"Sorted {len(sorted_records)} records by pick location")
    return sorted_records
