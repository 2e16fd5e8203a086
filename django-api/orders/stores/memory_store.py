"""In-memory order store for testing and development.

Orders are kept as plain documents in the persisted record layout, so
everything read back goes through the same document round trip a remote
document store would. Configurable failure behavior lets tests exercise
the store-error paths without a database.
"""

from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

from orders.domain import OrderId, OrderRecord, OrderSubmission
from orders.domain.errors import StoreError
from orders.stores.documents import record_from_document, record_to_document
from orders.stores.hub import SubscriptionHub
from orders.stores.interfaces import ErrorCallback, OrderStore, Snapshot, Subscription, UpdateCallback


class InMemoryOrderStore(OrderStore):
    """Fake store that always succeeds by default."""

    def __init__(self, collection: str = "orders") -> None:
        self.collection = collection
        self.documents: dict[str, dict[str, Any]] = {}
        self.deleted: list[OrderId] = []
        self.should_succeed = True
        self.failure_reason = "Order store unavailable"
        self._hub = SubscriptionHub()

    def configure(self, should_succeed: bool = True, failure_reason: str = "Order store unavailable") -> None:
        """Configure the fake store behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def _check(self) -> None:
        if not self.should_succeed:
            raise StoreError(self.failure_reason)

    def submit(self, submission: OrderSubmission) -> OrderId:
        self._check()
        order_id = OrderId(value=uuid4())
        record = OrderRecord.from_submission(submission, order_id, datetime.now(UTC))
        self.put_document(record_to_document(record))
        return order_id

    def put_document(self, document: dict[str, Any]) -> None:
        """Store a raw document, e.g. one written under an older catalog."""
        self.documents[str(document["id"])] = document
        self._hub.publish(self.collection)

    def delete(self, order_id: OrderId) -> None:
        self._check()
        self.documents.pop(str(order_id), None)
        self.deleted.append(order_id)
        self._hub.publish(self.collection)

    def snapshot(self) -> Snapshot:
        self._check()
        records = [record_from_document(doc) for doc in reversed(list(self.documents.values()))]
        return tuple(sorted(records, key=lambda r: r.created_at, reverse=True))

    def subscribe_all(self, on_update: UpdateCallback, on_error: ErrorCallback) -> Subscription:
        return self._hub.subscribe(self.collection, self.snapshot, on_update, on_error)
