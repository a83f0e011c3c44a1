"""Integration tests for Order API endpoints.

Covers:
- Order creation gated by product existence (404 / 400, nothing written).
- Reads expand the referenced product.
- Update / delete routes are not offered (405).
- The end-to-end Pen scenario.
"""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.integration

UNKNOWN_ID = "ffffffffffffffffffffffff"


@pytest.fixture()
def product(api_client):
    response = api_client.post(
        "/api/v1/products/", {"name": "Pen", "price": 10}, format="json"
    )
    return response.data


@pytest.fixture()
def order(api_client, product):
    response = api_client.post(
        "/api/v1/orders/", {"product_id": product["id"], "quantity": 2}, format="json"
    )
    return response.data


class TestOrderCreate:
    def test_create_returns_expanded_order(self, api_client, product, document_store):
        response = api_client.post(
            "/api/v1/orders/",
            {"product_id": product["id"], "quantity": 3, "notes": "gift"},
            format="json",
        )

        assert response.status_code == 201
        assert response.data["product_id"] == product["id"]
        assert response.data["product"]["name"] == "Pen"
        assert response.data["quantity"] == 3
        assert response.data["notes"] == "gift"
        assert document_store.orders.count_documents({}) == 1

    def test_unknown_product_returns_404(self, api_client, document_store):
        response = api_client.post(
            "/api/v1/orders/", {"product_id": UNKNOWN_ID}, format="json"
        )

        assert response.status_code == 404
        assert response.data["detail"] == "Product id not found"
        assert document_store.orders.count_documents({}) == 0

    def test_malformed_product_id_returns_400(self, api_client, document_store):
        response = api_client.post(
            "/api/v1/orders/", {"product_id": "abc"}, format="json"
        )

        assert response.status_code == 400
        assert document_store.orders.count_documents({}) == 0

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"product_id": UNKNOWN_ID, "quantity": 0},
            {"product_id": UNKNOWN_ID, "quantity": True},
        ],
    )
    def test_invalid_body_returns_400(self, api_client, payload):
        response = api_client.post("/api/v1/orders/", payload, format="json")
        assert response.status_code == 400

    def test_non_object_body_returns_400(self, api_client, document_store):
        response = api_client.post("/api/v1/orders/", "Pen", format="json")

        assert response.status_code == 400
        assert response.data["detail"] == "Request body must be a JSON object."
        assert document_store.orders.count_documents({}) == 0


class TestOrderRead:
    def test_list_expands_products(self, api_client, order):
        response = api_client.get("/api/v1/orders/")

        assert response.status_code == 200
        assert len(response.data) == 1
        assert response.data[0]["product"]["name"] == "Pen"
        assert response.data[0]["product"]["price"] == 10.0

    def test_retrieve(self, api_client, order):
        response = api_client.get(f"/api/v1/orders/{order['id']}/")

        assert response.status_code == 200
        assert response.data["id"] == order["id"]
        assert response.data["product"]["id"] == order["product_id"]

    @pytest.mark.parametrize("order_id", [UNKNOWN_ID, "not-an-id"])
    def test_missing_returns_404(self, api_client, order_id):
        response = api_client.get(f"/api/v1/orders/{order_id}/")
        assert response.status_code == 404


class TestOrderMutationsNotOffered:
    def test_update_not_allowed(self, api_client, order):
        response = api_client.patch(
            f"/api/v1/orders/{order['id']}/", {"quantity": 5}, format="json"
        )
        assert response.status_code == 405

    def test_delete_not_allowed(self, api_client, order):
        response = api_client.delete(f"/api/v1/orders/{order['id']}/")
        assert response.status_code == 405


class TestPenScenario:
    def test_full_flow(self, api_client, document_store):
        pen = api_client.post(
            "/api/v1/products/", {"name": "Pen", "price": 10}, format="json"
        )
        assert pen.status_code == 201
        p1 = pen.data["id"]

        created = api_client.post(
            "/api/v1/orders/", {"product_id": p1, "quantity": 2}, format="json"
        )
        assert created.status_code == 201
        assert created.data["product_id"] == p1

        blocked = api_client.delete(f"/api/v1/products/{p1}/")
        assert blocked.status_code == 400

        orders_before = document_store.orders.count_documents({})
        missing = api_client.post(
            "/api/v1/orders/", {"product_id": UNKNOWN_ID}, format="json"
        )
        assert missing.status_code == 404
        assert document_store.orders.count_documents({}) == orders_before
        assert document_store.products.count_documents({}) == 1
