"""Caller presence and in-flight submit markers backed by Django sessions."""

import structlog
from django.core.cache import cache
from django.db import DatabaseError
from django.http import HttpRequest

from orders.conf import get_submit_lock_timeout
from orders.domain.errors import AuthError
from orders.stores.interfaces import CallerGate, SubmitGuard

logger = structlog.get_logger(__name__)


class SessionCallerGate(CallerGate):
    """Treats any request with a session as an authorized caller.

    A session is created on first use, so anonymous visitors get one the
    same way they would be signed in anonymously.
    """

    def __init__(self, request: HttpRequest) -> None:
        self._request = request

    def ensure_authorized(self) -> None:
        session = getattr(self._request, "session", None)
        if session is None:
            raise AuthError()
        if session.session_key is not None:
            return
        try:
            session.save()
        except DatabaseError as exc:
            logger.error("Anonymous session could not be created", error=str(exc))
            raise AuthError() from exc
        logger.info("Anonymous session created")


class SessionSubmitGuard(SubmitGuard):
    """In-flight marker keyed by the caller's session, held in the Django cache.

    The session must already exist, so acquire only after
    ``SessionCallerGate.ensure_authorized``. The marker expires after
    ``SUBMIT_LOCK_TIMEOUT`` seconds in case a worker dies mid-submit.
    """

    def __init__(self, request: HttpRequest) -> None:
        self._request = request

    @property
    def key(self) -> str:
        return f"orders:submitting:{self._request.session.session_key}"

    def acquire(self) -> bool:
        claimed = cache.add(self.key, True, timeout=get_submit_lock_timeout())
        if not claimed:
            logger.info("Submit already in flight for session")
        return claimed

    def release(self) -> None:
        cache.delete(self.key)
