from __future__ import annotations

import json
import math
import re
from decimal import Decimal
from typing import Any, Dict, List

from .logging_setup import get_logger

logger = get_logger(__name__)

CSV_HEADERS = [
    "soNo", "storeNo", "eCommOrderNo", "salesChannel", "orderDate",
    "productAmount", "productAmountVat", "serviceAmount", "serviceAmountVat",
    "itemCnt", "pkgs", "pickDateTime", "payStatus", "shipCust", "shipAddr",
    "locationCode", "shipPostal", "shipCity", "shipPhone", "shipEmail",
    "codTask", "codAmount", "orderCmt", "services",
]

_WHITESPACE_RE = re.compile(r"\s+")


def format_number(value: float) -> str:
    """Shortest round-trip text for a float, laid out as JavaScript's ``String(n)`` does.

    Plain notation for magnitudes in [1e-6, 1e21), otherwise ``1.5e-7`` style.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = exponent + k

    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = digits[:n] + "." + digits[n:]
    elif -6 < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        e = n - 1
        mantissa = digits[0] + ("." + digits[1:] if k > 1 else "")
        text = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return sign + text


def stringify_value(value: Any) -> str:
    """Render a scalar the way it reads in the JSON output pane."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format_number(value)
    if isinstance(value, (dict, list)):
        try:
            return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
        except (TypeError, ValueError):
            return str(value)
    return str(value)


def collapse_whitespace(text: str) -> str:
    """Fold CR/LF/tab and runs of whitespace into single spaces."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def quote(text: str) -> str:
    return '"' + text.replace('"', '""') + '"'


def escape_csv_field(value: Any) -> str:
    """Quote one cell; None and "" stay empty and unquoted."""
    if value is None or value == "":
        return ""
    return quote(collapse_whitespace(stringify_value(value)))


def services_to_csv(services: Any) -> str:
    """Serialize the services list into a single-line JSON cell."""
    if not services:
        return ""
    try:
        json_string = json.dumps(services, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError):
        logger.warning("Could not serialize services to CSV", exc_info=True)
        return '""'
    return quote(collapse_whitespace(json_string))


def order_to_row(order: Dict[str, Any]) -> str:
    cells = [escape_csv_field(order.get(field)) for field in CSV_HEADERS[:-1]]
    cells.append(services_to_csv(order.get("services")))
    return ",".join(cells)


def generate_csv(orders: List[Dict[str, Any]]) -> str:
    """Encode normalized orders as CSV text.

    Rows are joined with bare ``\\n``. No byte-order mark is added here; the
    download path prepends one for spreadsheet tools.
    """
    if not orders:
        return ""

    rows = [",".join(CSV_HEADERS)]
    rows.extend(order_to_row(order if isinstance(order, dict) else {}) for order in orders)
    return "\n".join(rows)
