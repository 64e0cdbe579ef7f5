from decimal import Decimal

import pytest

from rest_framework.test import APIClient

from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing the RPC endpoint."""
    return APIClient()


@pytest.fixture()
def rpc(api_client):
    """Call a product RPC command and return the HTTP response."""

    def call(cmd, payload=None, **extra):
        body = {"cmd": cmd}
        if payload is not None:
            body["payload"] = payload
        return api_client.post("/rpc/products", body, format="json", **extra)

    return call


@pytest.fixture()
def repository():
    """A connected Product repository, closed after the test."""
    with ProductDjangoRepository() as repo:
        yield repo


@pytest.fixture()
def make_product():
    """Factory persisting a Product with sensible defaults."""

    def make(**overrides) -> Product:
        defaults = {"name": "Widget", "price": Decimal("19.99")}
        defaults.update(overrides)
        product = Product(**defaults)
        product.save()
        return product

    return make


@pytest.fixture()
def five_products(make_product):
    """Products 1..5 in insertion order, all available."""
    return [
        make_product(name=f"Product {idx}", price=Decimal(idx)) for idx in range(1, 6)
    ]
