from __future__ import annotations

from enum import Enum
from typing import Any, List, Tuple


class InputShape(str, Enum):
    """What kind of payload the caller handed us."""

    # {"@odata.context": ..., "value": [<TMS order>, ...]}
    RAW_ORDER_LIST = "raw_order_list"
    # [<normalized order or TMS order>, ...]
    ORDER_LIST = "order_list"
    UNRECOGNIZED = "unrecognized"


def classify_input(data: Any) -> Tuple[InputShape, List[Any]]:
    """Resolve the payload into its shape and the list of order entries.

    Supports:
    - dict with a list under ``value`` -> every entry is a TMS order
    - list -> each entry is checked with ``is_normalized_order``
    - anything else -> no orders
    """
    if isinstance(data, dict) and isinstance(data.get("value"), list):
        return InputShape.RAW_ORDER_LIST, data["value"]
    if isinstance(data, list):
        return InputShape.ORDER_LIST, data
    return InputShape.UNRECOGNIZED, []


def is_normalized_order(record: Any) -> bool:
    """An order already in output form carries ``soNo`` and a ``services`` list."""
    if not isinstance(record, dict):
        return False
    return bool(record.get("soNo")) and isinstance(record.get("services"), list)
