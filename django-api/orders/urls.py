from django.urls import path

from orders.handlers import (
    AdminDeleteCancelView,
    AdminDeleteConfirmView,
    AdminDeleteRequestView,
    AdminOrderListView,
    CatalogView,
    OrderQuoteView,
    OrderSubmitView,
)

urlpatterns = [
    path("catalog", CatalogView.as_view(), name="catalog"),
    path("orders", OrderSubmitView.as_view(), name="order-submit"),
    path("orders/quote", OrderQuoteView.as_view(), name="order-quote"),
    path("admin/orders", AdminOrderListView.as_view(), name="admin-order-list"),
    path("admin/orders/delete-cancel", AdminDeleteCancelView.as_view(), name="admin-order-delete-cancel"),
    path(
        "admin/orders/<str:order_id>/delete-request",
        AdminDeleteRequestView.as_view(),
        name="admin-order-delete-request",
    ),
    path(
        "admin/orders/<str:order_id>/delete-confirm",
        AdminDeleteConfirmView.as_view(),
        name="admin-order-delete-confirm",
    ),
]
