"""Settings access for the orders app.

Reads ``settings.ORDERS``::

    ORDERS = {
        "COLLECTION": "artifacts/order-system-v1/public/data/orders",
        "STORE": "django",  # or "memory"
        "CATALOG": None,  # or a mapping accepted by Catalog.from_config
        "SUBMIT_LOCK_TIMEOUT": 60,  # seconds a session's submit stays marked in flight
        "MAX_ADMIN_FEEDS": 100,  # admin sessions with a live feed per process
    }
"""

from functools import lru_cache

from django.conf import settings

from orders.domain import Catalog, default_catalog


def get_collection() -> str:
    return settings.ORDERS["COLLECTION"]


def get_store_name() -> str:
    return settings.ORDERS.get("STORE", "django")


def get_submit_lock_timeout() -> int:
    return int(settings.ORDERS.get("SUBMIT_LOCK_TIMEOUT", 60))


def get_max_admin_feeds() -> int:
    return int(settings.ORDERS.get("MAX_ADMIN_FEEDS", 100))


@lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    """Catalog built once per process; call ``get_catalog.cache_clear()`` after changing settings."""
    config = settings.ORDERS.get("CATALOG")
    return Catalog.from_config(config) if config else default_catalog()
