"""Domain models for drafts, submissions and persisted records.

Drafts are mutable and owned by a single session. Submissions and records
are frozen; a record's totals are the ones computed at submission time and
are never recomputed from the catalog.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime

from orders.domain.catalog import Accessory, GarmentType
from orders.domain.value_objects import OrderId, SleeveCounts


def _empty_garments() -> dict[GarmentType, dict[str, int]]:
    return {garment: {} for garment in GarmentType}


def _empty_sleeves() -> dict[GarmentType, SleeveCounts]:
    return {garment: SleeveCounts() for garment in GarmentType}


def _empty_accessories() -> dict[Accessory, int]:
    return {accessory: 0 for accessory in Accessory}


@dataclass
class OrderDraft:
    """An in-progress order, mutated field by field by the order builder."""

    submitter_name: str = ""
    region: str = ""
    garment_quantities: dict[GarmentType, dict[str, int]] = field(default_factory=_empty_garments)
    sleeve_counts: dict[GarmentType, SleeveCounts] = field(default_factory=_empty_sleeves)
    accessory_quantities: dict[Accessory, int] = field(default_factory=_empty_accessories)

    def total_units_of(self, garment: GarmentType) -> int:
        return sum(self.garment_quantities[garment].values())

    def short_sleeve_count(self, garment: GarmentType) -> int:
        return self.sleeve_counts[garment].short_for(self.total_units_of(garment))

    @property
    def total_items(self) -> int:
        garments = sum(self.total_units_of(garment) for garment in GarmentType)
        return garments + sum(self.accessory_quantities.values())


@dataclass(frozen=True)
class Totals:
    """Derived totals of a draft."""

    units_by_garment: Mapping[GarmentType, int]
    total_items: int
    total_price: int

    @property
    def total_polo(self) -> int:
        return self.units_by_garment[GarmentType.POLO]

    @property
    def total_tee(self) -> int:
        return self.units_by_garment[GarmentType.TEE]


@dataclass(frozen=True)
class OrderSubmission:
    """Frozen snapshot of a validated draft, as handed to the store."""

    submitter_name: str
    region: str
    garment_quantities: Mapping[str, Mapping[str, int]]
    sleeve_counts: Mapping[str, Mapping[str, int]]
    accessory_quantities: Mapping[str, int]
    total_items: int
    total_price: int


@dataclass(frozen=True)
class OrderRecord:
    """Domain representation of a persisted order.

    Quantities are keyed by plain strings rather than catalog enums so
    records created under an older catalog still load.
    """

    id: OrderId
    submitter_name: str
    region: str
    garment_quantities: Mapping[str, Mapping[str, int]]
    sleeve_counts: Mapping[str, Mapping[str, int]]
    accessory_quantities: Mapping[str, int]
    total_items: int
    total_price: int
    created_at: datetime

    @classmethod
    def from_submission(cls, submission: OrderSubmission, order_id: OrderId, created_at: datetime) -> "OrderRecord":
        return cls(
            id=order_id,
            submitter_name=submission.submitter_name,
            region=submission.region,
            garment_quantities=submission.garment_quantities,
            sleeve_counts=submission.sleeve_counts,
            accessory_quantities=submission.accessory_quantities,
            total_items=submission.total_items,
            total_price=submission.total_price,
            created_at=created_at,
        )
