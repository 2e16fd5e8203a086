"""Order submission service - all business logic for submitting a draft.

Services:
- Depend only on interfaces (stores, caller gate, submit guard)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or raise domain errors
"""

import structlog

from orders.domain import Catalog, OrderBuilder, OrderId, OrderSubmission
from orders.domain.errors import AlreadyInProgressError, AuthError, StoreError, ValidationError
from orders.stores.interfaces import CallerGate, OrderStore, SubmitGuard

logger = structlog.get_logger(__name__)


class OrderSubmissionService:
    """Owns one session's draft and submits it to the store.

    ``error`` is the single message shown to the user; each failure
    replaces the previous one and a successful submit clears it.

    ``busy`` only spans calls on this instance. Pass a ``guard`` to also
    refuse a submit while another one for the same caller is outstanding
    elsewhere, e.g. in a concurrent request.
    """

    def __init__(
        self,
        store: OrderStore,
        gate: CallerGate,
        catalog: Catalog,
        builder: OrderBuilder | None = None,
        guard: SubmitGuard | None = None,
    ) -> None:
        self._store = store
        self._gate = gate
        self._guard = guard
        self.builder = builder if builder is not None else OrderBuilder(catalog)
        self.busy = False
        self.error: str | None = None
        self.last_order_id: OrderId | None = None

    @property
    def submitted(self) -> bool:
        return self.last_order_id is not None

    def submit(self) -> OrderId:
        """Submit the current draft and start a fresh one.

        Raises:
            AlreadyInProgressError: If a submit is already outstanding.
            AuthError: If no caller could be established.
            ValidationError: If the draft is not ready to submit.
            StoreError: If the store rejected the order.
        """
        if self.busy:
            exc = AlreadyInProgressError()
            self.error = exc.message
            raise exc

        self.busy = True
        try:
            self._gate.ensure_authorized()
            submission = self.builder.to_submission()
            order_id = self._submit_guarded(submission)
        except (AlreadyInProgressError, AuthError, ValidationError, StoreError) as exc:
            self.error = exc.message
            logger.warning("Order submission rejected", code=exc.code.value)
            raise
        finally:
            self.busy = False

        logger.info(
            "Order submitted",
            order_id=str(order_id),
            collection=self._store.collection,
            total_items=submission.total_items,
            total_price=submission.total_price,
        )
        self.error = None
        self.last_order_id = order_id
        self.builder.reset()
        return order_id

    def start_new_order(self) -> None:
        """Leave the confirmation state and begin an empty draft."""
        self.last_order_id = None
        self.error = None
        self.builder.reset()

    def _submit_guarded(self, submission: OrderSubmission) -> OrderId:
        if self._guard is None:
            return self._store.submit(submission)
        if not self._guard.acquire():
            raise AlreadyInProgressError()
        try:
            return self._store.submit(submission)
        finally:
            self._guard.release()
