"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain errors to ``domain_exception_handler`` for HTTP mapping
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from orders.conf import get_catalog
from orders.domain import OrderId
from orders.domain.errors import InvalidOrderIdError
from orders.handlers.serializers import AdminFeedSerializer, DraftSerializer, TotalsSerializer, catalog_payload
from orders.services import AdminOrderFeed, FeedState, OrderSubmissionService, get_admin_feed
from orders.stores import get_order_store
from orders.stores.auth import SessionCallerGate, SessionSubmitGuard


def parse_order_id(value: str) -> OrderId:
    try:
        return OrderId.from_string(value)
    except ValueError:
        raise InvalidOrderIdError() from None


def live_feed(request: Request) -> AdminOrderFeed:
    """This admin session's feed, (re)subscribed if needed and reloaded from the store."""
    gate = SessionCallerGate(request)
    gate.ensure_authorized()
    feed = get_admin_feed(request.session.session_key)
    if feed.state in (FeedState.UNSUBSCRIBED, FeedState.ERROR):
        feed.stop()
        feed.start(gate)
    else:
        feed.refresh()
    return feed


class CatalogView(APIView):
    """Handler for GET /api/catalog"""

    def get(self, request: Request) -> Response:
        return Response(catalog_payload(get_catalog()))


class OrderQuoteView(APIView):
    """Handler for POST /api/orders/quote"""

    def post(self, request: Request) -> Response:
        serializer = DraftSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        builder = serializer.to_builder(get_catalog())
        return Response(TotalsSerializer(builder.compute_totals()).data)


class OrderSubmitView(APIView):
    """Handler for POST /api/orders"""

    def post(self, request: Request) -> Response:
        serializer = DraftSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        catalog = get_catalog()
        service = OrderSubmissionService(
            get_order_store(),
            SessionCallerGate(request),
            catalog,
            builder=serializer.to_builder(catalog),
            guard=SessionSubmitGuard(request),
        )
        order_id = service.submit()
        return Response({"id": str(order_id)}, status=status.HTTP_201_CREATED)


class AdminOrderListView(APIView):
    """Handler for GET /api/admin/orders"""

    def get(self, request: Request) -> Response:
        return Response(AdminFeedSerializer(live_feed(request)).data)


class AdminDeleteRequestView(APIView):
    """Handler for POST /api/admin/orders/{order_id}/delete-request"""

    def post(self, request: Request, order_id: str) -> Response:
        feed = live_feed(request)
        feed.request_delete(parse_order_id(order_id))
        return Response(AdminFeedSerializer(feed).data)


class AdminDeleteConfirmView(APIView):
    """Handler for POST /api/admin/orders/{order_id}/delete-confirm"""

    def post(self, request: Request, order_id: str) -> Response:
        feed = live_feed(request)
        feed.confirm_delete(parse_order_id(order_id))
        return Response(AdminFeedSerializer(feed).data)


class AdminDeleteCancelView(APIView):
    """Handler for POST /api/admin/orders/delete-cancel"""

    def post(self, request: Request) -> Response:
        feed = live_feed(request)
        feed.cancel_delete()
        return Response(AdminFeedSerializer(feed).data)
