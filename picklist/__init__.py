"""Warehouse pick list sorting and quantity consolidation."""

__version__ = "0.1.0"
