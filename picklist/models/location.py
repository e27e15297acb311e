"""Location key model for warehouse pick locations."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class LocationKey:
    """Bay and shelf decomposed from a pick location string.

    Attributes:
        bay: Aisle/section identifier, usually one or two letters (e.g., "A", "AB")
        shelf: Vertical position within the bay
    """
    bay: str
    shelf: int

    @property
    def is_single_letter_bay(self) -> bool:
        """True when the bay identifier is a single character."""
        return len(self.bay) == 1

    def sort_key(self) -> Tuple[bool, str, int]:
        """
        Tuple ordering consistent with location comparison.

        Single-character bays sort before all others, then bays compare
        alphabetically, then shelves numerically.

        Returns:
            (not single-letter bay, bay, shelf)
        """
        return (not self.is_single_letter_bay, self.bay, self.shelf)

    def __str__(self) -> str:
        """String representation."""
        return f"{self.bay} {self.shelf}"
