"""A single-order TMS delivery payload used by the "Load Sample Data" button."""
from __future__ import annotations

import json

SAMPLE_PAYLOAD = {
    "@odata.context": "https://tms.example.com/api/logistics/v1.0/$metadata#companies(528777c4-3ddc-491c-adf4-dcae745e8f7a)/dfCreateDeliveryOrders",
    "value": [
        {
            "@odata.etag": "W/\"JzQ0O1JJMWZncGdDNnd5cGY0dnk4b2xON1Z4L2lNcUtUdlpYeCtibzZHOVIvQ0U9MTswMDsn\"",
            "id": "e4e61d90-086a-4696-bc8e-43f1adfe1a84",
            "shipRef": "60325068657",
            "storeNo": "603",
            "secondRef": "157303791",
            "salesChannel": "ECOM",
            "orderDate": "2025-06-27",
            "productAmount": 4503603.6036036036,
            "productAmountVat": 4999000,
            "itemCnt": 1,
            "pkgs": 3,
            "payStatus": "",
            "shipCust": "ilham",
            "shipAddr": "jalan jalan",
            "locationCode": "jalan",
            "shipPostal": "16519",
            "pickDateTime": "0001-01-01T00:00:00Z",
            "shipCity": "Depok(Bedahan)",
            "shipPhone": "85155222344",
            "shipEmail": "ilham@mail.com",
            "orderCmt": "",
            "codTask": False,
            "codAmount": 0,
            "dfCreateDeliveryOrderServices": [
                {
                    "@odata.etag": "W/\"JzQ0O2x5WVZSMk02Z0djOEFseENBT0RWNndNUXhITFIzUkhIR2JucFlKSFo0QmM9MTswMDsn\"",
                    "documentId": "e4e61d90-086a-4696-bc8e-43f1adfe1a84",
                    "docLineNo": 1,
                    "svcOrdNo": "60325149541",
                    "svcItemNo": "HD HOUSE",
                    "svcName": "Home Delivery House Ecommerce",
                    "serviceProviderName": "DHL HOUSE JABO",
                    "date": "2025-07-03",
                    "timeslot": " 9:00:00 AM.. 8:00:00 PM",
                    "status": "Service Provider Contacted",
                    "gdval": 0,
                    "prxOrg": 169000,
                    "prxVat": 169000,
                    "NoOfPkgs": 3,
                    "svcCmt": "",
                }
            ],
            "dfCreateDeliveryOrderServiceItems": [
                {
                    "@odata.etag": "W/\"JzQ0O05ndHZvcGxOVDVnK1hGQUgrckNVWVJVZlhRK3NqMWovdWFhUnNXR2FmUkE9MTswMDsn\"",
                    "documentId": "e4e61d90-086a-4696-bc8e-43f1adfe1a84",
                    "lineNoIMV": 1,
                    "svcOrdNo": "60325149541",
                    "sequence": 10000,
                    "itemNo": "70378683",
                    "itemDesc": "MUSKEN N WRD 2DR+3DRW 124X60X201 BROWN AP",
                    "quantity": 1,
                    "weight": 99.95,
                    "volume": 0.2418,
                    "unitPrice": 4999000,
                    "NoOfPkgs": 3,
                }
            ],
        }
    ],
}


def sample_payload_text() -> str:
    return json.dumps(SAMPLE_PAYLOAD, indent=2, ensure_ascii=False)
