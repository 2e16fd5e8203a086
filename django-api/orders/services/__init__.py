from collections import OrderedDict

from orders.services.admin_feed import AdminOrderFeed, FeedState, FeedSummary
from orders.services.submission import OrderSubmissionService

_feeds: "OrderedDict[str, AdminOrderFeed]" = OrderedDict()


def get_admin_feed(owner: str) -> AdminOrderFeed:
    """Return the admin feed for one admin session, bound to the configured store.

    Each owner has its own delete mark. The least recently used feed is
    stopped once more than ``ORDERS["MAX_ADMIN_FEEDS"]`` are open.
    """
    from orders.conf import get_max_admin_feeds
    from orders.stores import get_order_store

    feed = _feeds.get(owner)
    if feed is None:
        feed = _feeds[owner] = AdminOrderFeed(get_order_store())
    _feeds.move_to_end(owner)
    while len(_feeds) > get_max_admin_feeds():
        _, evicted = _feeds.popitem(last=False)
        evicted.stop()
    return feed


def reset_admin_feed() -> None:
    """Stop and drop every admin feed (useful for testing)."""
    while _feeds:
        _, feed = _feeds.popitem()
        feed.stop()


__all__ = [
    "AdminOrderFeed",
    "FeedState",
    "FeedSummary",
    "OrderSubmissionService",
    "get_admin_feed",
    "reset_admin_feed",
]
