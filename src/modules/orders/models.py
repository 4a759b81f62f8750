"""Order, OrderItem and Payment models.

Relationships have one owning side each; the other side is a query:
- ``Order.client`` owns the order/user link (``user.orders`` is the inverse).
- ``OrderItem`` owns both the order and the product link; an order's
  products and a product's orders are derived through the items.
- ``Payment.order`` owns the one-to-one link (``order.payment`` is the inverse).

Business rules implemented:
- Client FK uses PROTECT to preserve financial history.
- Product FK on OrderItem uses PROTECT: a product referenced by an order
  cannot be deleted.
- OrderItem ``price`` snapshots the product price at creation time and
  never follows later product price changes.
- An OrderItem is identified by its (order, product) pair.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any, Hashable, Optional

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from modules.core.models import IdentityModel
from modules.orders.constants import TERMINAL_STATES, OrderStatus

if TYPE_CHECKING:
    from modules.products.models import Product


class Order(IdentityModel):
    """Order aggregate root."""

    moment = models.DateTimeField(default=timezone.now)
    status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.WAITING_PAYMENT,
    )
    client = models.ForeignKey(
        "users.User",
        on_delete=models.PROTECT,
        related_name="orders",
    )

    class Meta:
        db_table = "orders"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["status"], name="orders_status_idx"),
        ]

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATES

    def products(self) -> models.QuerySet[Product]:
        """Products on this order, through its items."""
        from modules.products.models import Product

        return Product.objects.filter(order_items__order=self).distinct()

    @property
    def total(self) -> Decimal:
        return sum((item.subtotal for item in self.items.all()), Decimal("0.00"))

    def __str__(self) -> str:
        return f"Order {self.id} ({self.status})"


class OrderItem(IdentityModel):
    """Line item linking an Order to a Product.

    ``price`` is a **snapshot** of the product price at the time of
    purchase.  When not given it is copied from the product on the first
    save and then left alone.
    """

    order = models.ForeignKey(
        Order,
        on_delete=models.CASCADE,
        related_name="items",
    )
    product = models.ForeignKey(
        "products.Product",
        on_delete=models.PROTECT,
        related_name="order_items",
    )
    quantity = models.PositiveIntegerField(
        default=1,
        validators=[MinValueValidator(1)],
    )
    price = models.DecimalField(max_digits=10, decimal_places=2)

    class Meta:
        db_table = "order_items"
        ordering = ["order_id", "product_id"]
        constraints = [
            models.UniqueConstraint(
                fields=["order", "product"],
                name="order_items_order_product_uniq",
            ),
            models.CheckConstraint(
                condition=models.Q(quantity__gte=1),
                name="order_items_quantity_positive",
            ),
        ]

    @property
    def identity(self) -> Optional[Hashable]:
        if self.order_id is None or self.product_id is None:
            return None
        return (self.order_id, self.product_id)

    @property
    def subtotal(self) -> Decimal:
        return self.quantity * self.price

    def clean(self) -> None:
        super().clean()
        if self.quantity is not None and self.quantity < 1:
            raise ValidationError({"quantity": "Quantity must be at least 1."})

    def save(self, *args: Any, **kwargs: Any) -> None:
        if self.price is None:
            price = getattr(self.product, "price", None)
            if price is None:
                raise ValidationError({"price": "Product has no price to snapshot."})
            self.price = price
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.product} x{self.quantity} (${self.price})"


class Payment(IdentityModel):
    moment = models.DateTimeField(default=timezone.now)
    order = models.OneToOneField(
        Order,
        on_delete=models.CASCADE,
        related_name="payment",
    )

    class Meta:
        db_table = "payments"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"Payment {self.id} for order {self.order_id}"
