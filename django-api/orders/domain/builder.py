"""Order builder: owns a draft and keeps its quantity invariants.

Sleeve counts never exceed the garment total. Reducing a size quantity
shrinks sleeve counts on the spot (long first, then ruffled), while a
sleeve request that would overshoot is refused and leaves the draft as is.
"""

from orders.domain.catalog import Accessory, Catalog, GarmentType, SleeveStyle
from orders.domain.errors import (
    MissingIdentityError,
    NoItemsSelectedError,
    SleeveExceedsGarmentCountError,
    UnknownSizeError,
)
from orders.domain.models import OrderDraft, OrderSubmission, Totals
from orders.domain.pricing import price
from orders.domain.value_objects import SleeveCounts, clamp_quantity


class OrderBuilder:
    """Mutates a single draft on behalf of one session."""

    def __init__(self, catalog: Catalog, draft: OrderDraft | None = None) -> None:
        self._catalog = catalog
        self.draft = draft if draft is not None else OrderDraft()

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def reset(self) -> None:
        self.draft = OrderDraft()

    def set_identity(self, name: str, region: str) -> None:
        self.draft.submitter_name = name
        self.draft.region = region

    def set_size_quantity(self, garment: GarmentType, size_id: str, qty: int) -> None:
        """Set the count for one size and re-fit the garment's sleeve counts.

        Raises:
            UnknownSizeError: If the size is not offered for the garment.
        """
        if not self._catalog.has_size(garment, size_id):
            raise UnknownSizeError(garment, size_id)

        quantities = self.draft.garment_quantities[garment]
        qty = clamp_quantity(qty)
        if qty:
            quantities[size_id] = qty
        else:
            quantities.pop(size_id, None)

        total = self.draft.total_units_of(garment)
        self.draft.sleeve_counts[garment] = self.draft.sleeve_counts[garment].clamped_to(total)

    def adjust_size_quantity(self, garment: GarmentType, size_id: str, delta: int) -> None:
        current = self.draft.garment_quantities[garment].get(size_id, 0)
        self.set_size_quantity(garment, size_id, current + delta)

    def set_sleeve_count(self, garment: GarmentType, style: SleeveStyle, count: int) -> bool:
        """Apply a sleeve count if it fits within the garment total.

        Returns False and leaves the draft unchanged when ``count`` plus the
        other style's count would exceed the number of garments.
        """
        count = clamp_quantity(count)
        current = self.draft.sleeve_counts[garment]
        if style is SleeveStyle.LONG:
            proposed = SleeveCounts(long=count, ruffled=current.ruffled)
        else:
            proposed = SleeveCounts(long=current.long, ruffled=count)

        if proposed.assigned > self.draft.total_units_of(garment):
            return False
        self.draft.sleeve_counts[garment] = proposed
        return True

    def set_accessory_quantity(self, accessory: Accessory, qty: int) -> None:
        self.draft.accessory_quantities[accessory] = clamp_quantity(qty)

    def compute_totals(self) -> Totals:
        return Totals(
            units_by_garment={garment: self.draft.total_units_of(garment) for garment in GarmentType},
            total_items=self.draft.total_items,
            total_price=price(self.draft, self._catalog),
        )

    def validate_for_submit(self) -> None:
        """Check the draft can be submitted.

        Raises:
            SleeveExceedsGarmentCountError: If sleeve choices outnumber garments.
            NoItemsSelectedError: If nothing is ordered.
            MissingIdentityError: If the name or region is blank.
        """
        for garment in GarmentType:
            if self.draft.sleeve_counts[garment].assigned > self.draft.total_units_of(garment):
                raise SleeveExceedsGarmentCountError(garment)

        if self.draft.total_items == 0:
            raise NoItemsSelectedError()

        if not self.draft.submitter_name.strip():
            raise MissingIdentityError("submitter_name")
        if not self.draft.region.strip():
            raise MissingIdentityError("region")

    def to_submission(self) -> OrderSubmission:
        """Validate and freeze the draft with its totals."""
        self.validate_for_submit()
        totals = self.compute_totals()
        draft = self.draft
        return OrderSubmission(
            submitter_name=draft.submitter_name.strip(),
            region=draft.region.strip(),
            garment_quantities={
                garment.value: dict(draft.garment_quantities[garment]) for garment in GarmentType
            },
            sleeve_counts={
                garment.value: {
                    SleeveStyle.LONG.value: draft.sleeve_counts[garment].long,
                    SleeveStyle.RUFFLED.value: draft.sleeve_counts[garment].ruffled,
                }
                for garment in GarmentType
            },
            accessory_quantities={a.value: draft.accessory_quantities[a] for a in Accessory},
            total_items=totals.total_items,
            total_price=totals.total_price,
        )
