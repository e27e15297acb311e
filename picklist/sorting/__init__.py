"""Warehouse location ordering."""

from .location_comparator import (
    parse_location,
    parse_shelf,
    parse_location_key,
    compare_bays,
    compare_locations,
    compare_location_keys,
    location_sort_key,
    sort_by_location,
)

__all__ = [
    "parse_location",
    "parse_shelf",
    "parse_location_key",
    "compare_bays",
    "compare_locations",
    "compare_location_keys",
    "location_sort_key",
    "sort_by_location",
]
