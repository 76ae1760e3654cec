from __future__ import annotations

import math
from typing import Any, Dict, List, Union

Number = Union[int, float]


def get_first(record: Any, *keys: str, default: Any = None) -> Any:
    """Return the value of the first key present (and not None) in ``record``.

    Used where the TMS payload and hand-written input name the same field
    differently, e.g. ``dfCreateDeliveryOrderServices`` vs ``services``.
    """
    if not isinstance(record, dict):
        return default
    for key in keys:
        val = record.get(key)
        if val is not None:
            return val
    return default


def get_list(record: Any, *keys: str) -> List[Any]:
    val = get_first(record, *keys)
    if isinstance(val, list):
        return val
    return []


def as_record(value: Any) -> Dict[str, Any]:
    if isinstance(value, dict):
        return value
    return {}


def to_number(value: Any) -> Number:
    """Coerce an aggregation operand; anything that is not a real number is 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value):
            return 0
        return value
    return 0


def sum_field(items: List[Any], key: str) -> Number:
    total: Number = 0
    for item in items:
        total += to_number(as_record(item).get(key))
    return total
