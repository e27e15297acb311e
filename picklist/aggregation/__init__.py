"""Quantity consolidation for pick lists."""

from .quantity_aggregator import (
    AggregationKey,
    aggregate,
    aggregation_key,
    parse_quantity,
    validate_aggregation,
)

__all__ = [
    "AggregationKey",
    "aggregate",
    "aggregation_key",
    "parse_quantity",
    "validate_aggregation",
]
