"""Shared fixtures: small TMS orders with services and service items."""
from __future__ import annotations

import copy

import pytest

from tms_reformatter.sample_data import SAMPLE_PAYLOAD


@pytest.fixture
def sample_payload():
    return copy.deepcopy(SAMPLE_PAYLOAD)


@pytest.fixture
def multi_service_order():
    """Three services, two of which share ``svcOrdNo`` S1, plus an orphan item."""
    return {
        "shipRef": "SO-1",
        "storeNo": "603",
        "secondRef": "EC-1",
        "salesChannel": "ECOM",
        "orderDate": "2025-06-27",
        "productAmount": 1000,
        "productAmountVat": 1110,
        "itemCnt": 4,
        "pkgs": 5,
        "pickDateTime": "2025-06-28T14:05:09Z",
        "payStatus": "",
        "shipCust": "ilham",
        "codTask": True,
        "codAmount": 185,
        "dfCreateDeliveryOrderServices": [
            {"svcOrdNo": "S1", "svcItemNo": "HD", "svcName": "Home Delivery", "serviceProviderName": "DHL",
             "date": "2025-07-03", "timeslot": "9:00:00 AM..5:00:00 PM", "status": "Open", "NoOfPkgs": 2,
             "svcCmt": "ring twice", "prxOrg": 169000},
            {"svcOrdNo": "S2", "svcItemNo": "ASM", "svcName": "Assembly", "serviceProviderName": "Crew",
             "date": "2025-07-04", "timeslot": "12:00:00 PM..12:30:00 PM", "status": "Open", "NoOfPkgs": 1},
            {"svcOrdNo": "S1", "svcItemNo": "HD2", "svcName": "Second Drop", "timeslot": ""},
        ],
        "dfCreateDeliveryOrderServiceItems": [
            {"svcOrdNo": "S1", "lineNoIMV": 1, "itemNo": "A", "itemDesc": "Chair", "quantity": 2,
             "weight": 1.5, "volume": 0.1, "unitPrice": 100, "NoOfPkgs": 1},
            {"svcOrdNo": "S1", "lineNoIMV": 2, "itemNo": "B", "itemDesc": "Table", "quantity": 1,
             "weight": 2, "volume": 0.2, "unitPrice": 50, "NoOfPkgs": 1},
            {"svcOrdNo": "S2", "lineNoIMV": 3, "itemNo": "C", "itemDesc": "Shelf", "quantity": 1,
             "weight": 3, "unitPrice": 25},
            {"svcOrdNo": "S3", "lineNoIMV": 4, "itemNo": "D", "itemDesc": "Orphan", "unitPrice": 10},
        ],
    }
