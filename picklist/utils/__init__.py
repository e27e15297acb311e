"""Shared helpers."""

from .record_fields import get_field

__all__ = ["get_field"]
