"""Admin order feed: live view of every submitted order plus guarded deletes.

The store pushes full snapshots; the feed keeps only the most recent one.
Deleting is two-step: a record is marked with ``request_delete`` and only
removed by ``confirm_delete``. At most one record is marked at a time, so
each admin session gets its own feed (see ``orders.services.get_admin_feed``).
"""

from collections import Counter, defaultdict
from dataclasses import dataclass, field
from enum import Enum

import structlog

from orders.domain import OrderId, OrderRecord
from orders.domain.errors import AuthError, DeleteNotRequestedError, DomainError, OrderNotFoundError, StoreError
from orders.stores.interfaces import CallerGate, OrderStore, Snapshot, Subscription

logger = structlog.get_logger(__name__)


def _nonzero(tally: dict[str, Counter]) -> dict[str, dict[str, int]]:
    nested = {key: {k: n for k, n in counter.items() if n} for key, counter in tally.items()}
    return {key: counts for key, counts in nested.items() if counts}


class FeedState(Enum):
    UNSUBSCRIBED = "UNSUBSCRIBED"
    SUBSCRIBING = "SUBSCRIBING"
    LIVE = "LIVE"
    ERROR = "ERROR"


@dataclass(frozen=True)
class FeedSummary:
    """Production tally over the current snapshot."""

    order_count: int
    total_items: int
    total_revenue: int
    garment_sizes: dict[str, dict[str, int]] = field(default_factory=dict)
    sleeves: dict[str, dict[str, int]] = field(default_factory=dict)
    accessories: dict[str, int] = field(default_factory=dict)


class AdminOrderFeed:
    """Consumes the store's snapshot stream for the admin surface."""

    def __init__(self, store: OrderStore) -> None:
        self._store = store
        self._subscription: Subscription | None = None
        self.state = FeedState.UNSUBSCRIBED
        self.records: Snapshot = ()
        self.pending_delete: OrderId | None = None
        self.error: str | None = None

    def start(self, gate: CallerGate) -> None:
        """Subscribe to the store. Does nothing if already subscribed.

        Raises:
            AuthError: If no caller could be established.
        """
        if self._subscription is not None:
            return
        try:
            gate.ensure_authorized()
        except AuthError as exc:
            self.state = FeedState.ERROR
            self.error = exc.message
            raise

        self.state = FeedState.SUBSCRIBING
        self._subscription = self._store.subscribe_all(self._on_update, self._on_error)

    def stop(self) -> None:
        """Unsubscribe. Safe to call any number of times."""
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None
        self.state = FeedState.UNSUBSCRIBED

    def refresh(self) -> None:
        """Pull a fresh snapshot through the subscription.

        Change notifications only cover writes made in this process;
        refreshing picks up records added or removed by anyone else.
        """
        if self._subscription is not None:
            self._subscription.refresh()

    def _on_update(self, snapshot: Snapshot) -> None:
        self.records = tuple(snapshot)
        self.state = FeedState.LIVE
        self.error = None
        if self.pending_delete is not None and self.find(self.pending_delete) is None:
            self.pending_delete = None
        logger.debug("Feed snapshot received", collection=self._store.collection, count=len(self.records))

    def _on_error(self, exc: Exception) -> None:
        self.state = FeedState.ERROR
        self.error = exc.message if isinstance(exc, DomainError) else StoreError().message
        logger.warning("Feed subscription failed", collection=self._store.collection, error=str(exc))

    def find(self, order_id: OrderId) -> OrderRecord | None:
        return next((r for r in self.records if r.id == order_id), None)

    def request_delete(self, order_id: OrderId) -> None:
        """Mark a record for deletion, replacing any earlier mark.

        Raises:
            OrderNotFoundError: If the record is not in the current snapshot.
        """
        if self.find(order_id) is None:
            raise OrderNotFoundError(str(order_id))
        self.pending_delete = order_id

    def cancel_delete(self) -> None:
        self.pending_delete = None

    def confirm_delete(self, order_id: OrderId) -> None:
        """Delete a record that is awaiting confirmation.

        Raises:
            DeleteNotRequestedError: If ``order_id`` is not the marked record.
            StoreError: If the store could not delete it; the mark is kept.
        """
        if self.pending_delete != order_id:
            raise DeleteNotRequestedError(str(order_id))
        try:
            self._store.delete(order_id)
        except StoreError as exc:
            self.error = exc.message
            raise
        logger.info("Order deleted", order_id=str(order_id), collection=self._store.collection)
        if self.pending_delete == order_id:
            self.pending_delete = None
        self.error = None

    def summary(self) -> FeedSummary:
        """Tally of the live snapshot, from the totals frozen on each record."""
        sizes: dict[str, Counter] = defaultdict(Counter)
        sleeves: dict[str, Counter] = defaultdict(Counter)
        accessories: Counter = Counter()
        for record in self.records:
            for garment, quantities in record.garment_quantities.items():
                sizes[garment].update(quantities)
            for garment, counts in record.sleeve_counts.items():
                sleeves[garment].update(counts)
            accessories.update(record.accessory_quantities)

        return FeedSummary(
            order_count=len(self.records),
            total_items=sum(r.total_items for r in self.records),
            total_revenue=sum(r.total_price for r in self.records),
            garment_sizes=_nonzero(sizes),
            sleeves=_nonzero(sleeves),
            accessories={a: n for a, n in accessories.items() if n},
        )
