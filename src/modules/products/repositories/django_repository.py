"""Django ORM implementations of the Product and Category repositories.

Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising HTTP-level exceptions.  ``get_reference`` and the
integrity errors raised by ``delete_by_id`` are left for the Service
Layer to translate.
"""

from __future__ import annotations

from typing import List

from modules.core.repositories.django_repository import DjangoRepository
from modules.products.models import Category, Product
from modules.products.repositories.interfaces import (
    ICategoryRepository,
    IProductRepository,
)


class ProductDjangoRepository(DjangoRepository[Product], IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    model = Product


class CategoryDjangoRepository(DjangoRepository[Category], ICategoryRepository):
    """Concrete Category repository backed by Django ORM."""

    model = Category

    def list_all(self) -> List[Category]:
        return list(Category.objects.order_by("name"))
