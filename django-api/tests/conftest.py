"""Pytest configuration and shared fixtures."""

from uuid import UUID

import pytest
from rest_framework.test import APIClient

from orders.conf import get_catalog
from orders.domain import OrderBuilder, default_catalog
from orders.domain.errors import AuthError
from orders.services import reset_admin_feed
from orders.stores import CallerGate, reset_order_store
from orders.stores.hub import order_changes
from orders.stores.memory_store import InMemoryOrderStore


class AllowGate(CallerGate):
    def __init__(self) -> None:
        self.calls = 0

    def ensure_authorized(self) -> None:
        self.calls += 1


class DenyGate(CallerGate):
    def ensure_authorized(self) -> None:
        raise AuthError()


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def reset_singletons():
    reset_admin_feed()
    reset_order_store()
    get_catalog.cache_clear()
    order_changes.clear()
    yield
    reset_admin_feed()
    reset_order_store()
    get_catalog.cache_clear()
    order_changes.clear()


@pytest.fixture
def catalog():
    return default_catalog()


@pytest.fixture
def builder(catalog) -> OrderBuilder:
    return OrderBuilder(catalog)


@pytest.fixture
def memory_store() -> InMemoryOrderStore:
    return InMemoryOrderStore("test-orders")


@pytest.fixture
def allow_gate() -> AllowGate:
    return AllowGate()


@pytest.fixture
def deny_gate() -> DenyGate:
    return DenyGate()


@pytest.fixture
def delete_row_behind_orm():
    """Delete an order row with plain SQL, as another process would, so no signals fire."""
    from django.db import connection

    from orders.models import Order

    def delete(order_id: str) -> None:
        pk = Order._meta.pk.get_db_prep_value(UUID(str(order_id)), connection)
        with connection.cursor() as cursor:
            cursor.execute(f"DELETE FROM {Order._meta.db_table} WHERE id = %s", [pk])

    return delete
