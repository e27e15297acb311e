"""Field access for pick list records.

Records reach the sorter and aggregator either as ``PickEntry`` models,
``MergedPickEntry`` values or plain row mappings (e.g., from
``csv.DictReader`` or ``DataFrame.to_dict("records")``).
"""

from collections.abc import Mapping
from typing import Any

from ..errors import MissingColumns


def get_field(record: Any, name: str) -> Any:
    """Read a named field from a mapping or an attribute-style record.

    Args:
        record: Row mapping or object exposing the field as an attribute
        name: Field name (e.g., "pick_location")

    Returns:
        The field value

    Raises:
        MissingColumns: If the record has no such field
    """
    if isinstance(record, Mapping):
        if name in record:
            return record[name]
    elif hasattr(record, name):
        return getattr(record, name)
    raise MissingColumns(f"Record has no '{name}' field", {"record": record})
