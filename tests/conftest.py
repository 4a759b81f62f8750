from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from modules.orders.models import Order, OrderItem, Payment
from modules.products.models import Category, Product
from modules.users.models import User


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


# ---------------------------------------------------------------------------
# Persisted entities
# ---------------------------------------------------------------------------


@pytest.fixture()
def category():
    return Category.objects.create(name="Livros")


@pytest.fixture()
def product(category):
    product = Product.objects.create(
        name="The Lord of the Rings",
        description="Lorem ipsum dolor sit amet, consectetur.",
        price=Decimal("90.50"),
        img_url="1-big.jpg",
    )
    product.categories.add(category)
    return product


@pytest.fixture()
def other_product():
    return Product.objects.create(
        name="Smart TV",
        description="Nulla eu imperdiet purus. Maecenas ante.",
        price=Decimal("2190.00"),
    )


@pytest.fixture()
def user():
    return User.objects.create(
        name="Maria Brown",
        email="maria@gmail.com",
        phone="988888888",
        password="pbkdf2_sha256$not-a-real-hash",
    )


@pytest.fixture()
def order(user, product, other_product):
    order = Order.objects.create(
        client=user,
        moment=datetime(2022, 7, 25, 13, 0, tzinfo=timezone.utc),
    )
    OrderItem.objects.create(order=order, product=product, quantity=2)
    OrderItem.objects.create(order=order, product=other_product, quantity=1)
    return order


@pytest.fixture()
def paid_order(order):
    Payment.objects.create(
        order=order,
        moment=datetime(2022, 7, 25, 15, 0, tzinfo=timezone.utc),
    )
    return order
