"""Product and Category repository interfaces.

Extend ``IRepository`` with nothing product-specific beyond naming: the
product service needs exactly the generic operations (look-up, paging,
batched look-up by ids, existence check, save, delete).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Category, Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""


class ICategoryRepository(IRepository["Category"]):
    """Repository contract for categories."""

    @abstractmethod
    def list_all(self) -> List[Category]:
        """Every category, ordered by name."""
