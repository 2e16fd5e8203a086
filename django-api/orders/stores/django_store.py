"""Django ORM implementation of the OrderStore.

Writes go through the ORM; the ``post_save`` / ``post_delete`` receivers in
``orders.signals`` publish to ``order_changes``, which reloads and pushes a
fresh snapshot to every subscriber of the collection.
"""

import structlog
from django.db import DatabaseError

from orders import models
from orders.domain import OrderId, OrderRecord, OrderSubmission
from orders.domain.errors import StoreError
from orders.stores.hub import SubscriptionHub, order_changes
from orders.stores.interfaces import ErrorCallback, OrderStore, Snapshot, Subscription, UpdateCallback

logger = structlog.get_logger(__name__)


def to_domain(row: models.Order) -> OrderRecord:
    return OrderRecord(
        id=OrderId(value=row.id),
        submitter_name=row.submitter_name,
        region=row.region,
        garment_quantities=row.garment_quantities,
        sleeve_counts=row.sleeve_counts,
        accessory_quantities=row.accessory_quantities,
        total_items=row.total_items,
        total_price=row.total_price,
        created_at=row.created_at,
    )


class DjangoOrderStore(OrderStore):
    """Database-backed order store using Django ORM."""

    def __init__(self, collection: str, hub: SubscriptionHub = order_changes) -> None:
        self.collection = collection
        self._hub = hub

    def submit(self, submission: OrderSubmission) -> OrderId:
        try:
            row = models.Order.objects.create(
                collection=self.collection,
                submitter_name=submission.submitter_name,
                region=submission.region,
                garment_quantities={g: dict(sizes) for g, sizes in submission.garment_quantities.items()},
                sleeve_counts={g: dict(counts) for g, counts in submission.sleeve_counts.items()},
                accessory_quantities=dict(submission.accessory_quantities),
                total_items=submission.total_items,
                total_price=submission.total_price,
            )
        except (DatabaseError, OverflowError) as exc:
            logger.error("Order insert failed", collection=self.collection, error=str(exc))
            raise StoreError() from exc
        return OrderId(value=row.id)

    def delete(self, order_id: OrderId) -> None:
        try:
            models.Order.objects.filter(collection=self.collection, id=order_id.value).delete()
        except DatabaseError as exc:
            logger.error("Order delete failed", collection=self.collection, order_id=str(order_id), error=str(exc))
            raise StoreError() from exc

    def snapshot(self) -> Snapshot:
        try:
            rows = list(models.Order.objects.filter(collection=self.collection).order_by("-created_at"))
        except DatabaseError as exc:
            raise StoreError() from exc
        return tuple(to_domain(row) for row in rows)

    def subscribe_all(self, on_update: UpdateCallback, on_error: ErrorCallback) -> Subscription:
        return self._hub.subscribe(self.collection, self.snapshot, on_update, on_error)
