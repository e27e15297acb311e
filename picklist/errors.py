"""Exceptions raised while reading, sorting and consolidating pick lists.

Every error aborts the run. The command-line entry point is the only place
they are caught and reported.
"""

from typing import Any, Dict, Optional


class PickListError(Exception):
    """Base exception for pick list processing errors with context."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        self.message = message
        self.context = context or {}
        super().__init__(self.format_message())

    def format_message(self) -> str:
        """Format error message with context."""
        msg = self.message
        if self.context:
            details = ", ".join(f"{key}={value!r}" for key, value in self.context.items())
            msg += f" ({details})"
        return msg


class InvalidLocationFormat(PickListError, ValueError):
    """Raised when a pick location has no space between bay and shelf."""


class NumericParseError(PickListError, ValueError):
    """Raised when a value that must be an integer cannot be parsed."""


class InvalidQuantity(NumericParseError):
    """Raised when a quantity is not an integer."""


class InvalidShelf(NumericParseError):
    """Raised when a shelf is not a non-negative integer."""


class InputReadFailure(PickListError):
    """Raised when the input file is missing, unreadable or of an unknown type."""


class MissingColumns(PickListError, ValueError):
    """Raised when the input file lacks one or more required columns."""
