from orders.handlers.views import (
    AdminDeleteCancelView,
    AdminDeleteConfirmView,
    AdminDeleteRequestView,
    AdminOrderListView,
    CatalogView,
    OrderQuoteView,
    OrderSubmitView,
)

__all__ = [
    "AdminDeleteCancelView",
    "AdminDeleteConfirmView",
    "AdminDeleteRequestView",
    "AdminOrderListView",
    "CatalogView",
    "OrderQuoteView",
    "OrderSubmitView",
]
