"""Integration tests for the Product API endpoints.

Covers:
- CRUD operations via /products.
- The compare endpoint.
- Domain error mapping (400, 404) and the error body shape.
"""

from __future__ import annotations

from decimal import Decimal
from unittest import mock

import pytest

from modules.core.pagination import MAX_PAGE, MAX_PAGE_SIZE
from modules.products.models import Product
from modules.products.services import ProductService

pytestmark = pytest.mark.integration

ERROR_KEYS = {"timestamp", "status", "error", "path"}

PAYLOAD = {
    "name": "PC Gamer",
    "description": "Lorem ipsum dolor sit amet, consectetur.",
    "price": 1200.0,
    "img_url": "4-big.jpg",
}


# ===========================================================================
# LIST
# ===========================================================================


class TestProductList:
    def test_first_page(self, api_client, product, other_product):
        response = api_client.get("/products")

        assert response.status_code == 200
        body = response.json()
        assert [p["id"] for p in body["content"]] == [product.id, other_product.id]
        assert body["total_elements"] == 2
        assert body["number"] == 0
        assert body["size"] == 20
        assert body["offset"] == 0
        assert body["total_pages"] == 1

    def test_page_and_sort(self, api_client, product, other_product):
        response = api_client.get("/products?page=0&size=1&sort=price,desc")

        body = response.json()
        assert [p["name"] for p in body["content"]] == ["Smart TV"]
        assert body["total_pages"] == 2

    def test_past_the_end(self, api_client, product):
        body = api_client.get("/products?page=10").json()
        assert body["content"] == []
        assert body["total_elements"] == 1

    def test_page_beyond_offset_range(self, api_client, product):
        response = api_client.get("/products?page=100000000000000000000")

        assert response.status_code == 400
        assert "page" in response.json()["errors"]

    def test_last_allowed_page_is_empty(self, api_client, product):
        response = api_client.get(f"/products?page={MAX_PAGE}&size={MAX_PAGE_SIZE}")

        assert response.status_code == 200
        assert response.json()["content"] == []

    def test_invalid_sort_field(self, api_client):
        response = api_client.get("/products?sort=password")

        assert response.status_code == 400
        assert "sort" in response.json()["errors"]

    def test_price_is_json_number(self, api_client, product):
        item = api_client.get("/products").json()["content"][0]
        assert item["price"] == 90.5


# ===========================================================================
# RETRIEVE
# ===========================================================================


class TestProductRetrieve:
    def test_found(self, api_client, product):
        response = api_client.get(f"/products/{product.id}")

        assert response.status_code == 200
        assert response.json() == {
            "id": product.id,
            "name": "The Lord of the Rings",
            "description": "Lorem ipsum dolor sit amet, consectetur.",
            "price": 90.5,
            "img_url": "1-big.jpg",
            "rating": None,
            "specifications": None,
        }

    def test_not_found_body(self, api_client):
        response = api_client.get("/products/1000")

        assert response.status_code == 404
        body = response.json()
        assert set(body) == ERROR_KEYS
        assert body["status"] == 404
        assert body["error"] == "Product 1000 not found."
        assert body["path"] == "/products/1000"

    def test_non_numeric_id(self, api_client):
        response = api_client.get("/products/abc")

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid product id: 'abc'."


# ===========================================================================
# COMPARE
# ===========================================================================


class TestProductCompare:
    def test_requested_order(self, api_client, product, other_product):
        response = api_client.get(f"/products/compare?ids={other_product.id},{product.id}")

        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [other_product.id, product.id]

    def test_missing_ids_skipped(self, api_client, product):
        response = api_client.get(f"/products/compare?ids={product.id},1000")

    def test_trailing_comma_accepted(self, api_client, product, other_product):
        response = api_client.get(f"/products/compare?ids={product.id},{other_product.id},")

        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [product.id, other_product.id]

        assert [p["id"] for p in response.json()] == [product.id]

    def test_none_found(self, api_client):
        response = api_client.get("/products/compare?ids=1000,1001")

        assert response.status_code == 404
        assert response.json()["path"] == "/products/compare"

    @pytest.mark.parametrize("query", ["", "?ids=", "?ids=1,abc"])
    def test_malformed_ids(self, api_client, query):
        response = api_client.get(f"/products/compare{query}")

        assert response.status_code == 400
        assert set(response.json()) == ERROR_KEYS


# ===========================================================================
# CREATE
# ===========================================================================


class TestProductCreate:
    def test_created(self, api_client):
        response = api_client.post("/products", PAYLOAD, format="json")

        assert response.status_code == 201
        body = response.json()
        assert body["id"] is not None
        assert body["name"] == "PC Gamer"
        assert body["price"] == 1200.0
        assert response["Location"].endswith(f"/products/{body['id']}")
        assert Product.objects.get(pk=body["id"]).price == Decimal("1200.00")

    def test_created_product_reads_back_unchanged(self, api_client):
        payload = {
            **PAYLOAD,
            "price": 1350.0,
            "rating": 4.7,
            "specifications": "Ryzen 7, 32GB RAM, RTX 4070",
        }

        created = api_client.post("/products", payload, format="json")
        fetched = api_client.get(created["Location"])

        assert fetched.status_code == 200
        assert fetched.json() == created.json()
        assert {key: fetched.json()[key] for key in payload} == payload

    def test_id_in_body_ignored(self, api_client, product):
        response = api_client.post("/products", {**PAYLOAD, "id": product.id}, format="json")

        assert response.status_code == 201
        assert response.json()["id"] != product.id

    def test_invalid_payload_never_reaches_service(self, api_client):
        with mock.patch.object(ProductService, "insert") as insert:
            response = api_client.post(
                "/products",
                {"name": "A", "description": PAYLOAD["description"], "price": -5},
                format="json",
            )

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Validation failed."
        assert set(body["errors"]) == {"name", "price"}
        insert.assert_not_called()

    def test_blank_description(self, api_client):
        response = api_client.post(
            "/products", {**PAYLOAD, "description": "           "}, format="json"
        )

        assert response.status_code == 400
        assert "description" in response.json()["errors"]

    def test_malformed_json(self, api_client):
        response = api_client.post("/products", "{not json", content_type="application/json")

        assert response.status_code == 400
        assert set(response.json()) == ERROR_KEYS


# ===========================================================================
# UPDATE
# ===========================================================================


class TestProductUpdate:
    def test_updated(self, api_client, product):
        response = api_client.put(
            f"/products/{product.id}",
            {**PAYLOAD, "name": "Updated Product"},
            format="json",
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Updated Product"
        product.refresh_from_db()
        assert product.name == "Updated Product"
        assert product.img_url == "4-big.jpg"

    def test_not_found(self, api_client):
        response = api_client.put("/products/1000", PAYLOAD, format="json")

        assert response.status_code == 404

    def test_invalid_payload(self, api_client, product):
        response = api_client.put(f"/products/{product.id}", {"name": "A"}, format="json")

        assert response.status_code == 400
        product.refresh_from_db()
        assert product.name == "The Lord of the Rings"

    def test_partial_update_not_allowed(self, api_client, product):
        response = api_client.patch(f"/products/{product.id}", {"name": "Xyz"}, format="json")

        assert response.status_code == 405


# ===========================================================================
# DELETE
# ===========================================================================


class TestProductDelete:
    def test_deleted(self, api_client, other_product):
        response = api_client.delete(f"/products/{other_product.id}")

        assert response.status_code == 204
        assert not Product.objects.filter(pk=other_product.id).exists()

    def test_not_found(self, api_client):
        response = api_client.delete("/products/1000")

        assert response.status_code == 404

    def test_referenced_by_order(self, api_client, order, product):
        response = api_client.delete(f"/products/{product.id}")

        assert response.status_code == 400
        assert "referenced" in response.json()["error"]
        assert Product.objects.filter(pk=product.id).exists()
