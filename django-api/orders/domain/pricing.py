"""Pricing engine.

Integer arithmetic only; every catalog price is a whole currency unit.
"""

from orders.domain.catalog import Accessory, Catalog, GarmentType, SleeveStyle
from orders.domain.models import OrderDraft


def garment_subtotal(draft: OrderDraft, garment: GarmentType, catalog: Catalog) -> int:
    """Sizes plus sleeve surcharges for one garment type."""
    sizes = sum(qty * catalog.price_for(garment, size_id) for size_id, qty in draft.garment_quantities[garment].items())
    sleeves = draft.sleeve_counts[garment]
    return (
        sizes
        + sleeves.long * catalog.sleeve_surcharge(SleeveStyle.LONG)
        + sleeves.ruffled * catalog.sleeve_surcharge(SleeveStyle.RUFFLED)
    )


def price(draft: OrderDraft, catalog: Catalog) -> int:
    """Total price of ``draft``.

    Safe to call on partial or invalid drafts for a running estimate; the
    draft is never modified.
    """
    garments = sum(garment_subtotal(draft, garment, catalog) for garment in GarmentType)
    accessories = sum(draft.accessory_quantities[a] * catalog.accessory_price(a) for a in Accessory)
    return garments + accessories
