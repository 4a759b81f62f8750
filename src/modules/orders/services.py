"""Order service layer (Use Cases).

Orders are read-only through the API: the service loads an order with
its client, items and payment and returns a transfer projection.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from modules.core.exceptions import DomainError
from modules.orders.dtos import OrderDTO

if TYPE_CHECKING:
    from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for Order use-cases.

    Receives an ``IOrderRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IOrderRepository) -> None:
        self._repo = repository

    def find_by_id(self, id: int) -> OrderDTO:
        """Retrieve a single order.

        Raises:
            DomainError: RESOURCE_NOT_FOUND if the order does not exist.
        """
        order = self._repo.find_by_id(id)
        if order is None:
            logger.info("order.not_found", order_id=id)
            raise DomainError.not_found(f"Order {id} not found.")
        return OrderDTO.from_entity(order)
