"""Integration tests for the order HTTP API.

Run with: pytest tests/test_api.py -v
"""

import pytest
from rest_framework.test import APIClient

from orders.domain.errors import AuthError
from orders.models import Order
from orders.stores import get_order_store, reset_order_store
from orders.stores.auth import SessionCallerGate

SCENARIO_A = {
    "submitterName": "Budi Santoso",
    "region": "Jakarta Barat",
    "garmentQuantities": {"Polo": {"M": 3}},
    "sleeveCounts": {"Polo": {"Long": 2}},
}

SCENARIO_B = {
    "submitterName": "Sari",
    "region": "Bandung",
    "garmentQuantities": {"Tee": {"XXL": 1}},
    "accessoryQuantities": {"Cap": 2},
}


def submit(client: APIClient, payload: dict):
    return client.post("/api/orders", payload, format="json")


class TestCatalog:
    """Tests for GET /api/catalog"""

    def test_returns_prices(self, api_client: APIClient):
        response = api_client.get("/api/catalog")

        assert response.status_code == 200
        body = response.json()
        assert body["garments"]["Polo"]["basePrice"] == 85000
        assert body["garments"]["Tee"]["sizes"][4] == {"id": "XXL", "surcharge": 5000}
        assert body["sleeves"] == {"Long": 5000, "Ruffled": 7000}
        assert body["accessories"] == {"Cap": 35000, "Mug": 25000}

    def test_configured_catalog(self, api_client: APIClient, settings):
        settings.ORDERS = {
            **settings.ORDERS,
            "CATALOG": {
                "garments": {
                    "Polo": {"base_price": 90000, "sizes": [["M", 0]]},
                    "Tee": {"base_price": 80000, "sizes": [["M", 0]]},
                },
                "sleeves": {"Long": 6000, "Ruffled": 8000},
                "accessories": {"Cap": 40000, "Mug": 30000},
            },
        }
        response = api_client.get("/api/catalog")
        assert response.json()["garments"]["Polo"]["basePrice"] == 90000


class TestQuote:
    """Tests for POST /api/orders/quote"""

    def test_quote_scenario_b(self, api_client: APIClient):
        response = api_client.post("/api/orders/quote", SCENARIO_B, format="json")

        assert response.status_code == 200
        assert response.json() == {"totalPolo": 0, "totalTee": 1, "totalItems": 3, "totalPrice": 150000}

    def test_quote_allows_incomplete_draft(self, api_client: APIClient):
        response = api_client.post("/api/orders/quote", {"accessoryQuantities": {"Mug": 1}}, format="json")
        assert response.status_code == 200
        assert response.json()["totalPrice"] == 25000

    def test_quote_unknown_size(self, api_client: APIClient):
        response = api_client.post("/api/orders/quote", {"garmentQuantities": {"Tee": {"XS": 1}}}, format="json")
        assert response.status_code == 400
        assert response.json()["code"] == "UNKNOWN_SIZE"


@pytest.mark.django_db
class TestSubmitOrder:
    """Tests for POST /api/orders"""

    def test_scenario_a(self, api_client: APIClient):
        response = submit(api_client, SCENARIO_A)

        assert response.status_code == 201
        row = Order.objects.get(id=response.json()["id"])
        assert row.total_price == 265000
        assert row.total_items == 3

    def test_creates_anonymous_session(self, api_client: APIClient):
        submit(api_client, SCENARIO_A)
        assert "sessionid" in api_client.cookies

    def test_no_items(self, api_client: APIClient):
        response = submit(api_client, {"submitterName": "Budi", "region": "Jakarta"})

        assert response.status_code == 400
        assert response.json() == {"code": "NO_ITEMS_SELECTED", "message": "Please select at least one product"}
        assert not Order.objects.exists()

    def test_sleeves_over_garment_count(self, api_client: APIClient):
        payload = {**SCENARIO_A, "sleeveCounts": {"Polo": {"Long": 5}}}
        response = submit(api_client, payload)
        assert response.status_code == 400
        assert response.json()["code"] == "SLEEVE_EXCEEDS_GARMENT_COUNT"

    def test_missing_region(self, api_client: APIClient):
        response = submit(api_client, {**SCENARIO_A, "region": ""})
        assert response.status_code == 400
        assert response.json()["code"] == "MISSING_IDENTITY"

    def test_unknown_garment(self, api_client: APIClient):
        response = submit(api_client, {**SCENARIO_A, "garmentQuantities": {"Hoodie": {"M": 1}}})
        assert response.status_code == 400
        assert "garmentQuantities" in response.json()

    def test_store_unavailable(self, api_client: APIClient, settings):
        settings.ORDERS = {**settings.ORDERS, "STORE": "memory"}
        reset_order_store()
        get_order_store().configure(should_succeed=False)

        response = submit(api_client, SCENARIO_A)

        assert response.status_code == 503
        assert response.json()["code"] == "STORE_UNAVAILABLE"

    def test_quantity_too_large(self, api_client: APIClient):
        payload = {**SCENARIO_A, "garmentQuantities": {"Polo": {"M": 10**19}}, "sleeveCounts": {}}
        response = submit(api_client, payload)
        assert response.status_code == 400
        assert "garmentQuantities" in response.json()
        assert not Order.objects.exists()

    def test_second_submit_while_first_outstanding(self, api_client: APIClient, settings):
        settings.ORDERS = {**settings.ORDERS, "STORE": "memory"}
        reset_order_store()
        store = get_order_store()
        submit(api_client, SCENARIO_B)
        store_submit = store.submit
        overlapping = []

        def slow_submit(submission):
            overlapping.append(submit(api_client, SCENARIO_A))
            return store_submit(submission)

        store.submit = slow_submit
        response = submit(api_client, SCENARIO_A)
        store.submit = store_submit

        assert response.status_code == 201
        assert overlapping[0].status_code == 409
        assert overlapping[0].json()["code"] == "ALREADY_IN_PROGRESS"
        assert len(store.documents) == 2
        assert submit(api_client, SCENARIO_B).status_code == 201

    def test_other_session_not_blocked(self, api_client: APIClient, settings):
        settings.ORDERS = {**settings.ORDERS, "STORE": "memory"}
        reset_order_store()
        store = get_order_store()
        submit(api_client, SCENARIO_B)
        store_submit = store.submit
        overlapping = []
        calls = []

        def slow_submit(submission):
            calls.append(submission)
            if len(calls) == 1:
                overlapping.append(submit(APIClient(), SCENARIO_A))
            return store_submit(submission)

        store.submit = slow_submit
        response = submit(api_client, SCENARIO_A)
        store.submit = store_submit

        assert response.status_code == 201
        assert overlapping[0].status_code == 201
        assert len(store.documents) == 3

    def test_caller_not_established(self, api_client: APIClient, monkeypatch):
        def refuse(self):
            raise AuthError()

        monkeypatch.setattr(SessionCallerGate, "ensure_authorized", refuse)
        response = submit(api_client, SCENARIO_A)
        assert response.status_code == 401
        assert not Order.objects.exists()


@pytest.mark.django_db
class TestAdminOrders:
    """Tests for the admin feed endpoints."""

    def test_lists_live_orders(self, api_client: APIClient):
        submit(api_client, SCENARIO_A)
        submit(api_client, SCENARIO_B)

        response = api_client.get("/api/admin/orders")

        assert response.status_code == 200
        body = response.json()
        assert body["state"] == "LIVE"
        assert body["pendingDelete"] is None
        assert {o["submitterName"] for o in body["orders"]} == {"Budi Santoso", "Sari"}
        assert body["summary"]["orderCount"] == 2
        assert body["summary"]["totalRevenue"] == 265000 + 150000

    def test_feed_follows_new_orders(self, api_client: APIClient):
        api_client.get("/api/admin/orders")
        submit(api_client, SCENARIO_B)

        body = api_client.get("/api/admin/orders").json()

        assert len(body["orders"]) == 1
        order = body["orders"][0]
        assert order["garmentQuantities"] == {"Polo": {}, "Tee": {"XXL": 1}}
        assert order["accessoryQuantities"] == {"Cap": 2, "Mug": 0}
        assert order["totalPrice"] == 150000

    def test_delete_workflow(self, api_client: APIClient):
        x = submit(api_client, SCENARIO_A).json()["id"]
        y = submit(api_client, SCENARIO_B).json()["id"]
        api_client.get("/api/admin/orders")

        api_client.post(f"/api/admin/orders/{x}/delete-request")
        response = api_client.post(f"/api/admin/orders/{y}/delete-request")
        assert response.json()["pendingDelete"] == y

        response = api_client.post(f"/api/admin/orders/{y}/delete-confirm")

        assert response.status_code == 200
        body = response.json()
        assert body["pendingDelete"] is None
        assert [o["id"] for o in body["orders"]] == [x]
        assert str(Order.objects.get().id) == x

    def test_cancel_delete(self, api_client: APIClient):
        x = submit(api_client, SCENARIO_A).json()["id"]
        api_client.post(f"/api/admin/orders/{x}/delete-request")

        response = api_client.post("/api/admin/orders/delete-cancel")

        assert response.json()["pendingDelete"] is None
        assert Order.objects.count() == 1

    def test_confirm_without_request(self, api_client: APIClient):
        x = submit(api_client, SCENARIO_A).json()["id"]
        response = api_client.post(f"/api/admin/orders/{x}/delete-confirm")
        assert response.status_code == 409
        assert Order.objects.count() == 1

    def test_feed_drops_rows_deleted_outside_the_app(self, api_client: APIClient, delete_row_behind_orm):
        ids = [submit(api_client, SCENARIO_A).json()["id"] for _ in range(3)]
        assert len(api_client.get("/api/admin/orders").json()["orders"]) == 3
        api_client.post(f"/api/admin/orders/{ids[0]}/delete-request")

        delete_row_behind_orm(ids[0])
        body = api_client.get("/api/admin/orders").json()

        assert {o["id"] for o in body["orders"]} == set(ids[1:])
        assert body["pendingDelete"] is None
        assert body["summary"]["orderCount"] == 2

    def test_feed_shows_rows_added_outside_the_app(self, api_client: APIClient, settings):
        api_client.get("/api/admin/orders")
        Order.objects.bulk_create(
            [
                Order(
                    collection=settings.ORDERS["COLLECTION"],
                    submitter_name="Rina",
                    region="Medan",
                    garment_quantities={"Polo": {"L": 1}},
                    sleeve_counts={},
                    accessory_quantities={},
                    total_items=1,
                    total_price=85000,
                )
            ]
        )

        body = api_client.get("/api/admin/orders").json()

        assert [o["submitterName"] for o in body["orders"]] == ["Rina"]

    def test_each_admin_session_has_its_own_mark(self, api_client: APIClient):
        x = submit(api_client, SCENARIO_A).json()["id"]
        y = submit(api_client, SCENARIO_B).json()["id"]
        other_admin = APIClient()

        api_client.post(f"/api/admin/orders/{x}/delete-request")
        response = other_admin.post(f"/api/admin/orders/{y}/delete-request")
        assert response.json()["pendingDelete"] == y
        assert api_client.get("/api/admin/orders").json()["pendingDelete"] == x

        response = api_client.post(f"/api/admin/orders/{x}/delete-confirm")

        assert response.status_code == 200
        assert [o["id"] for o in response.json()["orders"]] == [y]
        assert other_admin.get("/api/admin/orders").json()["pendingDelete"] == y

    def test_invalid_order_id(self, api_client: APIClient):
        response = api_client.post("/api/admin/orders/not-a-uuid/delete-request")
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ORDER_ID"

    def test_unknown_order(self, api_client: APIClient):
        response = api_client.post("/api/admin/orders/2b0d7b3e-6c5f-4e3a-9f51-3c3c1f8a9d10/delete-request")
        assert response.status_code == 404

    def test_caller_not_established(self, api_client: APIClient, monkeypatch):
        def refuse(self):
            raise AuthError()

        monkeypatch.setattr(SessionCallerGate, "ensure_authorized", refuse)
        response = api_client.get("/api/admin/orders")
        assert response.status_code == 401


@pytest.mark.django_db
class TestDjangoAdmin:
    def test_order_changelist(self, admin_client, api_client: APIClient):
        submit(api_client, SCENARIO_A)
        response = admin_client.get("/admin/orders/order/")
        assert response.status_code == 200
        assert b"Budi Santoso" in response.content
