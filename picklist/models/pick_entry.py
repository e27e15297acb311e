"""Pick list entry models."""

from dataclasses import dataclass
from typing import Dict, Optional, Union
from pydantic import BaseModel, Field

from ..constants import PICK_LOCATION_COLUMN, PRODUCT_CODE_COLUMN, QUANTITY_COLUMN


class PickEntry(BaseModel):
    """
    A single row of an incoming pick list.

    The quantity is kept as read; it is only converted to an integer when
    duplicate entries are consolidated.

    Attributes:
        product_code: Product identifier
        pick_location: Bay and shelf separated by a space (e.g., "AB 12")
        quantity: Quantity to pick, as text or integer
        source_row: Optional 1-based data row number in the source file
    """
    product_code: str = Field(..., description="Product identifier")
    pick_location: str = Field(..., description="Bay and shelf, e.g. 'AB 12'")
    quantity: Union[int, str] = Field(..., description="Quantity to pick (raw)")
    source_row: Optional[int] = Field(None, description="Data row number in source file", ge=1)

    def __str__(self) -> str:
        """String representation."""
        return f"{self.product_code} x{self.quantity} @ {self.pick_location}"


@dataclass(frozen=True)
class MergedPickEntry:
    """Consolidated pick list row.

    One merged entry exists per distinct (product_code, pick_location) pair;
    quantity is the sum of every contributing row.

    Attributes:
        product_code: Product identifier
        quantity: Total quantity to pick at this location
        pick_location: Bay and shelf separated by a space
    """
    product_code: str
    quantity: int
    pick_location: str

    def to_dict(self) -> Dict[str, Union[str, int]]:
        """Convert to an output row in column order."""
        return {
            PRODUCT_CODE_COLUMN: self.product_code,
            QUANTITY_COLUMN: self.quantity,
            PICK_LOCATION_COLUMN: self.pick_location,
        }
