"""Integration tests for the product RPC endpoint.

Covers:
- Every command through POST /rpc/products.
- Pagination metadata and empty pages past the end.
- Soft-delete visibility across commands.
- Tagged error envelopes (404, 400).
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.models import Product

pytestmark = pytest.mark.integration


# ===========================================================================
# Envelope
# ===========================================================================


class TestEnvelope:
    def test_missing_cmd_returns_400(self, api_client):
        response = api_client.post("/rpc/products", {"payload": {}}, format="json")
        assert response.status_code == 400
        assert response.json()["ok"] is False

    def test_unknown_cmd_returns_400(self, rpc):
        response = rpc("drop_table")
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Unknown command 'drop_table'"

    def test_invalid_payload_returns_400(self, rpc):
        response = rpc("find_one_product", {"id": "abc"})
        assert response.status_code == 400
        body = response.json()
        assert body["ok"] is False
        assert body["error"]["message"] == "Invalid payload"
        assert body["error"]["details"]["errors"]

    def test_get_not_allowed(self, api_client):
        assert api_client.get("/rpc/products").status_code == 405


# ===========================================================================
# create_product
# ===========================================================================


class TestCreateProduct:
    def test_creates_available_product(self, rpc):
        response = rpc("create_product", {"name": "Widget", "price": "19.99"})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["name"] == "Widget"
        assert data["price"] == "19.99"
        assert data["available"] is True
        assert Product.objects.filter(id=data["id"], available=True).exists()

    def test_negative_price_rejected(self, rpc):
        response = rpc("create_product", {"name": "Widget", "price": -1})
        assert response.status_code == 400
        assert Product.objects.count() == 0

    @pytest.mark.parametrize("price", ["19.999", "123456789012.50"])
    def test_price_outside_column_precision_rejected(self, rpc, price):
        response = rpc("create_product", {"name": "Widget", "price": price})
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Invalid payload"
        assert Product.objects.count() == 0

    def test_returned_price_matches_stored_price(self, rpc):
        created = rpc("create_product", {"name": "Widget", "price": "19.9"})
        assert created.json()["data"]["price"] == "19.90"
        found = rpc("find_one_product", {"id": created.json()["data"]["id"]})
        assert found.json()["data"]["price"] == "19.90"


# ===========================================================================
# find_all_products
# ===========================================================================


class TestFindAllProducts:
    def test_second_page(self, rpc, five_products):
        response = rpc("find_all_products", {"page": 2, "limit": 2})
        assert response.status_code == 200
        body = response.json()["data"]
        assert [p["id"] for p in body["data"]] == [
            five_products[2].id,
            five_products[3].id,
        ]
        assert body["meta"] == {"page": 2, "total": 5, "lastPage": 3}

    def test_page_past_the_end_is_empty(self, rpc, five_products):
        response = rpc("find_all_products", {"page": 10, "limit": 2})
        assert response.status_code == 200
        body = response.json()["data"]
        assert body["data"] == []
        assert body["meta"] == {"page": 10, "total": 5, "lastPage": 3}

    @pytest.mark.parametrize("limit", [1, 2, 3, 4, 5, 6])
    def test_data_never_exceeds_limit(self, rpc, five_products, limit):
        body = rpc("find_all_products", {"page": 1, "limit": limit}).json()["data"]
        assert len(body["data"]) <= limit
        assert body["meta"]["lastPage"] == -(-5 // limit)

    def test_never_returns_unavailable(self, rpc, five_products):
        Product.objects.filter(id=five_products[1].id).update(available=False)
        body = rpc("find_all_products", {"page": 1, "limit": 10}).json()["data"]
        assert all(p["available"] for p in body["data"])
        assert five_products[1].id not in [p["id"] for p in body["data"]]
        assert body["meta"]["total"] == 4

    def test_defaults_when_payload_omitted(self, rpc, five_products, settings):
        settings.PRODUCTS_DEFAULT_PAGE_SIZE = 10
        body = rpc("find_all_products").json()["data"]
        assert body["meta"] == {"page": 1, "total": 5, "lastPage": 1}

    def test_zero_limit_rejected(self, rpc):
        assert rpc("find_all_products", {"page": 1, "limit": 0}).status_code == 400

    def test_page_beyond_id_range_rejected(self, rpc, five_products):
        response = rpc("find_all_products", {"page": 10**20, "limit": 2})
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Invalid payload"

    def test_very_large_page_is_empty(self, rpc, five_products):
        response = rpc("find_all_products", {"page": 2**62, "limit": 2})
        assert response.status_code == 200
        body = response.json()["data"]
        assert body["data"] == []
        assert body["meta"] == {"page": 2**62, "total": 5, "lastPage": 3}


# ===========================================================================
# find_one_product
# ===========================================================================


class TestFindOneProduct:
    def test_success(self, rpc, make_product):
        product = make_product()
        response = rpc("find_one_product", {"id": product.id})
        assert response.status_code == 200
        assert response.json()["data"]["id"] == product.id

    def test_not_found(self, rpc):
        response = rpc("find_one_product", {"id": 12345})
        assert response.status_code == 404
        assert response.json() == {
            "ok": False,
            "error": {"status": 404, "message": "Product with id 12345 not found"},
        }


# ===========================================================================
# update_product
# ===========================================================================


class TestUpdateProduct:
    def test_partial_update(self, rpc, make_product):
        product = make_product(name="Widget", price=Decimal("19.99"))
        response = rpc("update_product", {"id": product.id, "price": "5.50"})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["price"] == "5.50"
        assert data["name"] == "Widget"

    def test_id_never_changes(self, rpc, make_product):
        product = make_product()
        response = rpc("update_product", {"id": product.id, "name": "Renamed"})
        assert response.json()["data"]["id"] == product.id
        assert Product.objects.get(id=product.id).name == "Renamed"

    def test_unavailable_product_not_found(self, rpc, make_product):
        product = make_product(available=False)
        response = rpc("update_product", {"id": product.id, "name": "Renamed"})
        assert response.status_code == 404


# ===========================================================================
# delete_product
# ===========================================================================


class TestDeleteProduct:
    def test_soft_deletes(self, rpc, make_product):
        product = make_product()
        response = rpc("delete_product", {"id": product.id})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["available"] is False
        assert data["name"] == "Widget"
        assert Product.objects.filter(id=product.id).exists()

    def test_find_one_after_remove_is_not_found(self, rpc, make_product):
        product = make_product()
        rpc("delete_product", {"id": product.id})
        assert rpc("find_one_product", {"id": product.id}).status_code == 404

    def test_remove_twice_is_not_found(self, rpc, make_product):
        product = make_product()
        assert rpc("delete_product", {"id": product.id}).status_code == 200
        response = rpc("delete_product", {"id": product.id})
        assert response.status_code == 404
        assert response.json()["error"]["message"] == (
            f"Product with id {product.id} not found"
        )


# ===========================================================================
# validate_products
# ===========================================================================


class TestValidateProducts:
    def test_duplicates_collapse(self, rpc, make_product):
        first = make_product(name="First")
        second = make_product(name="Second")
        response = rpc(
            "validate_products", {"ids": [first.id, first.id, second.id]}
        )
        assert response.status_code == 200
        assert sorted(p["id"] for p in response.json()["data"]) == [
            first.id,
            second.id,
        ]

    def test_missing_id_fails(self, rpc, make_product):
        first = make_product(name="First")
        second = make_product(name="Second")
        missing = second.id + 100
        response = rpc("validate_products", {"ids": [first.id, second.id, missing]})
        assert response.status_code == 400
        error = response.json()["error"]
        assert error["message"] == "Some products were not found"
        assert error["details"] == {"missing_ids": [missing]}

    def test_unavailable_id_fails(self, rpc, make_product):
        first = make_product(name="First")
        gone = make_product(name="Gone", available=False)
        response = rpc("validate_products", {"ids": [first.id, gone.id]})
        assert response.status_code == 400

    def test_id_beyond_id_range_rejected(self, rpc):
        response = rpc("validate_products", {"ids": [10**20]})
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Invalid payload"
