"""Per-collection fan-out of "records changed" notifications to live subscribers."""

from collections import defaultdict
from collections.abc import Callable

import structlog

from orders.domain.errors import StoreError
from orders.stores.interfaces import ErrorCallback, Snapshot, Subscription, UpdateCallback

logger = structlog.get_logger(__name__)


class HubSubscription(Subscription):
    def __init__(self, hub: "SubscriptionHub", collection: str, listener: Callable[[], None]) -> None:
        self._hub = hub
        self._collection = collection
        self._listener = listener
        self.active = True

    def unsubscribe(self) -> None:
        if not self.active:
            return
        self.active = False
        self._hub.remove(self._collection, self._listener)
        logger.info("Feed unsubscribed", collection=self._collection)

    def refresh(self) -> None:
        self._listener()


class SubscriptionHub:
    """Calls every listener of a collection whenever it is published."""

    def __init__(self) -> None:
        self._listeners: dict[str, list[Callable[[], None]]] = defaultdict(list)

    def subscribe(
        self,
        collection: str,
        load_snapshot: Callable[[], Snapshot],
        on_update: UpdateCallback,
        on_error: ErrorCallback,
    ) -> HubSubscription:
        """Register a subscriber and deliver the current snapshot straight away."""

        def deliver() -> None:
            if not subscription.active:
                return
            try:
                snapshot = load_snapshot()
            except StoreError as exc:
                logger.warning("Snapshot load failed", collection=collection, error=exc.message)
                on_error(exc)
                return
            on_update(snapshot)

        subscription = HubSubscription(self, collection, deliver)
        self._listeners[collection].append(deliver)
        logger.info("Feed subscribed", collection=collection)
        deliver()
        return subscription

    def remove(self, collection: str, listener: Callable[[], None]) -> None:
        listeners = self._listeners.get(collection, [])
        if listener in listeners:
            listeners.remove(listener)

    def publish(self, collection: str) -> None:
        # Copy so listeners may unsubscribe while being notified.
        for listener in list(self._listeners.get(collection, ())):
            listener()

    def subscriber_count(self, collection: str) -> int:
        return len(self._listeners.get(collection, ()))

    def clear(self) -> None:
        self._listeners.clear()


order_changes = SubscriptionHub()
