"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable

from orders.domain import OrderId, OrderRecord, OrderSubmission

Snapshot = tuple[OrderRecord, ...]
UpdateCallback = Callable[[Snapshot], None]
ErrorCallback = Callable[[Exception], None]


class Subscription(ABC):
    """Handle returned by ``OrderStore.subscribe_all``."""

    @abstractmethod
    def unsubscribe(self) -> None:
        """Stop deliveries. Safe to call more than once."""
        ...

    @abstractmethod
    def refresh(self) -> None:
        """Reload the current records and deliver them as a fresh snapshot.

        Used by readers that cannot rely on change notifications alone,
        such as when other processes write to the same collection.
        """
        ...


class OrderStore(ABC):
    """Interface for order persistence, scoped to one collection."""

    collection: str

    @abstractmethod
    def submit(self, submission: OrderSubmission) -> OrderId:
        """Persist a submission, assigning its ID and creation time.

        Raises:
            StoreError: If the order could not be stored.
        """
        ...

    @abstractmethod
    def delete(self, order_id: OrderId) -> None:
        """Remove a record. Deleting an ID that is already gone is not an error.

        Raises:
            StoreError: If the delete could not be performed.
        """
        ...

    @abstractmethod
    def subscribe_all(self, on_update: UpdateCallback, on_error: ErrorCallback) -> Subscription:
        """Push the full set of records, newest first, now and after every change.

        Each ``on_update`` call carries a complete replacement snapshot,
        never a diff. Failures to load a snapshot go to ``on_error``.
        """
        ...


class CallerGate(ABC):
    """Establishes that a caller is present before store access."""

    @abstractmethod
    def ensure_authorized(self) -> None:
        """Raises AuthError if no caller could be established."""
        ...


class SubmitGuard(ABC):
    """Marks one caller's submit as outstanding, across requests and workers."""

    @abstractmethod
    def acquire(self) -> bool:
        """Claim the marker. Returns False if a submit is already outstanding."""
        ...

    @abstractmethod
    def release(self) -> None:
        ...
