"""Order store abstraction: pluggable persistence for submitted orders."""

from orders.stores.interfaces import CallerGate, OrderStore, SubmitGuard, Subscription

_store_instance = None


def get_order_store() -> OrderStore:
    """Return the configured order store (singleton).

    Uses the Django ORM store by default. Set ``ORDERS["STORE"]`` to
    ``"memory"`` for the in-memory store.
    """
    global _store_instance
    if _store_instance is None:
        from orders.conf import get_collection, get_store_name

        adapter = get_store_name()
        if adapter == "django":
            from orders.stores.django_store import DjangoOrderStore

            _store_instance = DjangoOrderStore(get_collection())
        elif adapter == "memory":
            from orders.stores.memory_store import InMemoryOrderStore

            _store_instance = InMemoryOrderStore(get_collection())
        else:
            raise ValueError(f"Unknown order store: {adapter}")
    return _store_instance


def reset_order_store() -> None:
    """Reset the store singleton (useful for testing)."""
    global _store_instance
    _store_instance = None


__all__ = ["CallerGate", "OrderStore", "SubmitGuard", "Subscription", "get_order_store", "reset_order_store"]
