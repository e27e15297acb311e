"""Parsers for input pick list files."""

from .pick_list_parser import PickListParser

__all__ = [
    "PickListParser",
]
