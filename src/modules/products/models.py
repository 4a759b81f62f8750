"""Product and Category models.

Business rules implemented:
- Price, when present, must be greater than zero (validator + DB constraint).
- Product is the owning side of the product/category many-to-many; a
  category reaches its products through the ``products`` reverse relation.
- A product's orders are not stored on the product: ``orders()`` queries
  them through the order items that reference it.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import IdentityModel

if TYPE_CHECKING:
    from modules.orders.models import Order


class Category(IdentityModel):
    name = models.CharField(max_length=100, unique=True)

    class Meta:
        db_table = "categories"
        ordering = ["name"]
        verbose_name_plural = "categories"

    def __str__(self) -> str:
        return self.name


class Product(IdentityModel):
    """Product aggregate root."""

    name = models.CharField(max_length=80)
    description = models.TextField()
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    img_url = models.CharField(max_length=255, null=True, blank=True)  # noqa: DJ01
    rating = models.FloatField(null=True, blank=True)
    specifications = models.TextField(null=True, blank=True)  # noqa: DJ01
    categories = models.ManyToManyField(
        Category,
        related_name="products",
        blank=True,
        db_table="product_categories",
    )

    class Meta:
        db_table = "products"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0) | models.Q(price__isnull=True),
                name="products_price_positive",
            ),
        ]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self) -> None:
        super().clean()
        if self.price is not None and self.price <= 0:
            raise ValidationError({"price": "Price must be greater than zero."})

    # ------------------------------------------------------------------
    # Derived relations
    # ------------------------------------------------------------------

    def orders(self) -> models.QuerySet[Order]:
        """Orders that contain this product, through their items."""
        from modules.orders.models import Order

        return Order.objects.filter(items__product=self).distinct()

    def __str__(self) -> str:
        return self.name
