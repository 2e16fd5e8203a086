from orders.domain.builder import OrderBuilder
from orders.domain.catalog import Accessory, Catalog, GarmentSpec, GarmentType, SizeOption, SleeveStyle, default_catalog
from orders.domain.models import OrderDraft, OrderRecord, OrderSubmission, Totals
from orders.domain.pricing import price
from orders.domain.value_objects import OrderId, SleeveCounts

__all__ = [
    "Accessory",
    "Catalog",
    "GarmentSpec",
    "GarmentType",
    "SizeOption",
    "SleeveStyle",
    "default_catalog",
    "OrderBuilder",
    "OrderDraft",
    "OrderRecord",
    "OrderSubmission",
    "Totals",
    "price",
    "OrderId",
    "SleeveCounts",
]
