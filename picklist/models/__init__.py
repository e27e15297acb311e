"""Data models for pick list processing."""

from .location import LocationKey
from .pick_entry import PickEntry, MergedPickEntry

__all__ = [
    "LocationKey",
    "PickEntry",
    "MergedPickEntry",
]
