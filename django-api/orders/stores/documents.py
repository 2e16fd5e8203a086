"""Persisted record layout.

One document per order::

    {id, submitterName, region, garmentQuantities, sleeveCounts,
     accessoryQuantities, totalItems, totalPrice, createdAt}

Field names and nesting must round-trip exactly so the admin feed can show
orders created under any catalog version. Nothing here consults the catalog.
"""

from datetime import datetime
from typing import Any

from orders.domain import OrderId, OrderRecord


def record_to_document(record: OrderRecord) -> dict[str, Any]:
    return {
        "id": str(record.id),
        "submitterName": record.submitter_name,
        "region": record.region,
        "garmentQuantities": {g: dict(sizes) for g, sizes in record.garment_quantities.items()},
        "sleeveCounts": {g: dict(counts) for g, counts in record.sleeve_counts.items()},
        "accessoryQuantities": dict(record.accessory_quantities),
        "totalItems": record.total_items,
        "totalPrice": record.total_price,
        "createdAt": record.created_at.isoformat(),
    }


def record_from_document(document: dict[str, Any]) -> OrderRecord:
    """Rebuild a record from its stored layout.

    Raises:
        KeyError: If a required field is missing.
        ValueError: If the ID or timestamp is malformed.
    """
    created_at = document["createdAt"]
    if isinstance(created_at, str):
        created_at = datetime.fromisoformat(created_at)
    return OrderRecord(
        id=OrderId.from_string(str(document["id"])),
        submitter_name=document["submitterName"],
        region=document["region"],
        garment_quantities={
            g: {size: int(qty) for size, qty in sizes.items()} for g, sizes in document["garmentQuantities"].items()
        },
        sleeve_counts={
            g: {style: int(n) for style, n in counts.items()} for g, counts in document["sleeveCounts"].items()
        },
        accessory_quantities={a: int(qty) for a, qty in document["accessoryQuantities"].items()},
        total_items=int(document["totalItems"]),
        total_price=int(document["totalPrice"]),
        created_at=created_at,
    )
