"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs are immutable (``frozen=True``).

- ``OrderItemDTO``: a line item with its price snapshot and subtotal.
- ``PaymentDTO``: payment of an order.
- ``OrderDTO``: an order with client summary, items, payment and total.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from modules.users.dtos import UserSummaryDTO

if TYPE_CHECKING:
    from modules.orders.models import Order, OrderItem, Payment


class OrderItemDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    product_id: int
    product_name: str
    quantity: int
    price: Decimal
    subtotal: Decimal

    @classmethod
    def from_entity(cls, item: OrderItem) -> OrderItemDTO:
        return cls(
            product_id=item.product_id,
            product_name=item.product.name,
            quantity=item.quantity,
            price=item.price,
            subtotal=item.subtotal,
        )


class PaymentDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    moment: datetime

    @classmethod
    def from_entity(cls, payment: Payment) -> PaymentDTO:
        return cls(id=payment.id, moment=payment.moment)


class OrderDTO(BaseModel):
    """Immutable DTO for order API responses."""

    model_config = ConfigDict(frozen=True)

    id: int
    moment: datetime
    status: str
    client: UserSummaryDTO
    items: List[OrderItemDTO]
    payment: Optional[PaymentDTO] = None
    total: Decimal

    @classmethod
    def from_entity(cls, order: Order) -> OrderDTO:
        """Build an output DTO from an Order model instance.

        Assumes ``client``, ``items__product`` and ``payment`` are loaded
        eagerly by the repository.
        """
        items = [OrderItemDTO.from_entity(item) for item in order.items.all()]
        payment = getattr(order, "payment", None)
        return cls(
            id=order.id,
            moment=order.moment,
            status=str(order.status),
            client=UserSummaryDTO.from_entity(order.client),
            items=items,
            payment=PaymentDTO.from_entity(payment) if payment is not None else None,
            total=sum((item.subtotal for item in items), Decimal("0.00")),
        )

    def to_response(self) -> Dict[str, Any]:
        return self.model_dump()
