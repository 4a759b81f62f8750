"""Unit tests for OrderService and the order projection."""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from modules.core.exceptions import DomainError, ErrorKind
from modules.orders.dtos import OrderDTO
from modules.orders.repositories import OrderDjangoRepository
from modules.orders.services import OrderService

pytestmark = pytest.mark.unit


class TestOrderServiceWithMock:
    def test_missing_raises_not_found(self):
        repo = MagicMock()
        repo.find_by_id.return_value = None

        with pytest.raises(DomainError) as exc_info:
            OrderService(repository=repo).find_by_id(7)

        assert exc_info.value.kind is ErrorKind.RESOURCE_NOT_FOUND
        assert exc_info.value.message == "Order 7 not found."


class TestOrderServiceWithDatabase:
    @pytest.fixture()
    def service(self):
        return OrderService(repository=OrderDjangoRepository())

    def test_projection(self, service, paid_order, user):
        dto = service.find_by_id(paid_order.id)

        assert isinstance(dto, OrderDTO)
        assert dto.client.email == user.email
        assert [item.product_name for item in dto.items] == ["The Lord of the Rings", "Smart TV"]
        assert dto.items[0].subtotal == Decimal("181.00")
        assert dto.total == Decimal("2371.00")
        assert dto.payment is not None

    def test_unpaid_order_has_no_payment(self, service, order):
        assert service.find_by_id(order.id).payment is None

    def test_password_never_projected(self, service, order):
        assert "password" not in service.find_by_id(order.id).client.model_dump()

    def test_bounded_queries(self, service, paid_order, django_assert_max_num_queries):
        with django_assert_max_num_queries(3):
            service.find_by_id(paid_order.id)
