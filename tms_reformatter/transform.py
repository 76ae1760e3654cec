"""Reshape TMS delivery orders into the flattened order schema.

A TMS order carries its services and service items as two sibling lists
linked by ``svcOrdNo``. The output nests each service's items under that
service, with per-service gross weight (``gw``) and volume (``cbm``) totals.
"""
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Any, Dict, List

from .accessors import as_record, get_first, get_list, sum_field
from .formatters import format_cod_task, format_pick_date_time, format_timeslot
from .logging_setup import get_logger
from .records import InputShape, classify_input, is_normalized_order

logger = get_logger(__name__)

SERVICES_KEYS = ("dfCreateDeliveryOrderServices", "services")
SERVICE_ITEMS_KEYS = ("dfCreateDeliveryOrderServiceItems", "serviceItems")


_MEASURE_QUANTUM = Decimal("0.0001")
# Wide enough to quantize any finite float without InvalidOperation.
_MEASURE_CONTEXT = Context(prec=400)


def format_measure(total) -> str:
    """Four decimals, exact ties rounded away from zero."""
    if total == 0:
        total = 0.0
    if isinstance(total, float) and not math.isfinite(total):
        return f"{total:.4f}"
    rounded = Decimal(total).quantize(_MEASURE_QUANTUM, rounding=ROUND_HALF_UP, context=_MEASURE_CONTEXT)
    return f"{rounded:f}"


def build_item(item: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "lineNo": item.get("lineNoIMV"),
        "itemNo": item.get("itemNo"),
        "itemDesc": item.get("itemDesc"),
        "qty": item.get("quantity"),
        "weight": item.get("weight"),
        "volume": item.get("volume"),
        "unitPrice": item.get("unitPrice"),
        "pkgs": item.get("NoOfPkgs"),
    }


def build_service(svc: Dict[str, Any], doc_line_no: int, service_items: List[Any]) -> Dict[str, Any]:
    svc_ord_no = svc.get("svcOrdNo")
    matched = [as_record(item) for item in service_items if as_record(item).get("svcOrdNo") == svc_ord_no]

    return {
        "svcOrdNo": svc_ord_no,
        "svcItemNo": svc.get("svcItemNo"),
        "svcName": svc.get("svcName"),
        "svcProviderName": svc.get("serviceProviderName"),
        "svcDate": svc.get("date"),
        "timeslot": format_timeslot(svc.get("timeslot")),
        "status": svc.get("status"),
        "gdval": 0,
        "gw": format_measure(sum_field(matched, "weight")),
        "cbm": format_measure(sum_field(matched, "volume")),
        "prxOrg": 0,
        "prxVat": 0,
        "docLineNo": doc_line_no,
        "svcCmt": svc.get("svcCmt"),
        "pkgs": svc.get("NoOfPkgs"),
        "items": [build_item(item) for item in matched],
    }


def transform_order(order: Any) -> Dict[str, Any]:
    """Fully transform one TMS order."""
    order = as_record(order)
    service_items = get_list(order, *SERVICE_ITEMS_KEYS)

    # Summed over every service item of the order, not per service.
    service_amount = sum_field(service_items, "unitPrice")

    services = [
        build_service(as_record(svc), idx + 1, service_items)
        for idx, svc in enumerate(get_list(order, *SERVICES_KEYS))
    ]

    return {
        "soNo": order.get("shipRef"),
        "storeNo": order.get("storeNo"),
        "eCommOrderNo": order.get("secondRef"),
        "salesChannel": order.get("salesChannel"),
        "orderDate": order.get("orderDate"),
        "productAmount": order.get("productAmount"),
        "productAmountVat": order.get("productAmountVat"),
        "serviceAmount": service_amount,
        "serviceAmountVat": service_amount,
        "itemCnt": order.get("itemCnt"),
        "pkgs": order.get("pkgs"),
        "pickDateTime": format_pick_date_time(order.get("pickDateTime")),
        "payStatus": "Paid",
        "shipCust": order.get("shipCust"),
        "shipAddr": order.get("shipAddr"),
        "locationCode": order.get("locationCode"),
        "shipPostal": order.get("shipPostal"),
        "shipCity": order.get("shipCity"),
        "shipPhone": order.get("shipPhone"),
        "shipEmail": order.get("shipEmail"),
        "codTask": format_cod_task(order.get("codTask")),
        "codAmount": order.get("codAmount"),
        "orderCmt": order.get("orderCmt"),
        "services": services,
    }


def reformat_order(order: Dict[str, Any]) -> Dict[str, Any]:
    """Re-apply the field formatters to an order that is already normalized.

    Amounts and aggregates are left alone; every other field is copied through.
    """
    reformatted = dict(order)
    reformatted["pickDateTime"] = format_pick_date_time(order.get("pickDateTime"))
    reformatted["codTask"] = format_cod_task(order.get("codTask"))
    reformatted["services"] = [
        {**svc, "timeslot": format_timeslot(svc.get("timeslot"))} if isinstance(svc, dict) else svc
        for svc in order["services"]
    ]
    return reformatted


def transform_data(data: Any) -> List[Dict[str, Any]]:
    """Transform a parsed JSON payload into a list of normalized orders.

    Unrecognized payloads produce an empty list rather than an error.
    """
    shape, orders = classify_input(data)

    if shape is InputShape.RAW_ORDER_LIST:
        result = [transform_order(order) for order in orders]
    elif shape is InputShape.ORDER_LIST:
        result = [reformat_order(order) if is_normalized_order(order) else transform_order(order) for order in orders]
    else:
        result = []

    logger.debug("Transformed %d order(s) from %s input", len(result), shape.value)
    return result
