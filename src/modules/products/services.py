"""Product service layer (Use Cases).

Orchestrates the Product use-cases, delegating persistence to the
injected ``IProductRepository`` and returning transfer projections.

This is the single place where store-native failures become domain
errors:
- a missing entity behind ``get_reference`` -> RESOURCE_NOT_FOUND;
- an ``IntegrityError`` while deleting (the product is still referenced
  by order items) -> DATABASE.
Any other store failure propagates untouched.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Dict, List, Optional

import structlog
from django.core.exceptions import ObjectDoesNotExist
from django.db import IntegrityError, transaction

from modules.core.exceptions import DomainError
from modules.core.validation import MAX_ID, MIN_ID
from modules.products.dtos import CategoryDTO, ProductOutputDTO
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.core.pagination import Page, PageRequest
    from modules.products.dtos import ProductInputDTO
    from modules.products.repositories.interfaces import (
        ICategoryRepository,
        IProductRepository,
    )

logger = structlog.get_logger(__name__)

ID_TOKEN = re.compile(r"[+-]?[0-9]+")

PRODUCT_FIELDS = (
    "name",
    "description",
    "price",
    "img_url",
    "rating",
    "specifications",
)


def not_found(id: int) -> DomainError:
    return DomainError.not_found(f"Product {id} not found.")


def parse_ids(ids_csv: Optional[str]) -> List[int]:
    """Parse ``"1, 2,3"`` into ``[1, 2, 3]``.

    Trailing empty tokens (``"1,2,"``) are dropped; an empty token
    anywhere else is rejected.

    Raises:
        DomainError: BAD_REQUEST for missing/blank input or any token
            that is not a 64-bit integer.
    """
    tokens = [token.strip() for token in (ids_csv or "").split(",")]
    while tokens and not tokens[-1]:
        tokens.pop()
    if not tokens:
        raise DomainError.bad_request("The 'ids' parameter is required.")

    ids = []
    for token in tokens:
        if not ID_TOKEN.fullmatch(token):
            raise DomainError.bad_request(f"Invalid product id: '{token}'.")
        value = int(token)
        if not MIN_ID <= value <= MAX_ID:
            raise DomainError.bad_request(f"Invalid product id: '{token}'.")
        ids.append(value)
    return ids


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_by_id(self, id: int) -> ProductOutputDTO:
        """Retrieve a single product.

        Raises:
            DomainError: RESOURCE_NOT_FOUND if the product does not exist.
        """
        product = self._repo.find_by_id(id)
        if product is None:
            raise not_found(id)
        return ProductOutputDTO.from_entity(product)

    def find_all(self, page_request: PageRequest) -> Page[ProductOutputDTO]:
        """Return one page of products; page metadata is passed through."""
        page = self._repo.find_all(page_request)
        return page.map(ProductOutputDTO.from_entity)

    def compare_products_by_ids(self, ids_csv: Optional[str]) -> List[ProductOutputDTO]:
        """Return the products named in a comma-separated id list.

        Products come back in the order their ids were requested (first
        occurrence wins); ids that match nothing are skipped.

        Raises:
            DomainError: BAD_REQUEST for malformed input (the repository
                is not called), RESOURCE_NOT_FOUND when no id matches.
        """
        ids = parse_ids(ids_csv)
        products = self._repo.find_all_by_ids(ids)
        if not products:
            logger.info("product.compare_empty", ids=ids)
            raise DomainError.not_found("No products found for the given ids.")

        by_id: Dict[int, Product] = {product.id: product for product in products}
        ordered = [by_id.pop(id) for id in ids if id in by_id]
        return [ProductOutputDTO.from_entity(product) for product in ordered]

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def insert(self, dto: ProductInputDTO) -> ProductOutputDTO:
        """Create a product; the store assigns its identity."""
        product = Product(**{field: getattr(dto, field) for field in PRODUCT_FIELDS})
        product = self._repo.save(product)
        logger.info("product.created", product_id=product.id)
        return ProductOutputDTO.from_entity(product)

    @transaction.atomic
    def update(self, id: int, dto: ProductInputDTO) -> ProductOutputDTO:
        """Overwrite every mutable field of an existing product.

        Raises:
            DomainError: RESOURCE_NOT_FOUND if the product does not exist.
        """
        try:
            product = self._repo.get_reference(id)
        except ObjectDoesNotExist as exc:
            raise not_found(id) from exc

        for field in PRODUCT_FIELDS:
            setattr(product, field, getattr(dto, field))

        product = self._repo.save(product)
        logger.info("product.updated", product_id=id)
        return ProductOutputDTO.from_entity(product)

    @transaction.atomic
    def delete(self, id: int) -> None:
        """Delete a product.

        Raises:
            DomainError: RESOURCE_NOT_FOUND if the product does not exist
                (nothing is deleted), DATABASE if order items still
                reference it.
        """
        if not self._repo.exists_by_id(id):
            raise not_found(id)
        try:
            self._repo.delete_by_id(id)
        except IntegrityError as exc:
            logger.warning("product.delete_blocked", product_id=id, reason=str(exc))
            raise DomainError.database(
                f"Product {id} is referenced by existing orders and cannot be deleted."
            ) from exc
        logger.info("product.deleted", product_id=id)


class CategoryService:
    """Read-only use-cases for categories."""

    def __init__(self, repository: ICategoryRepository) -> None:
        self._repo = repository

    def find_all(self) -> List[CategoryDTO]:
        return [CategoryDTO.from_entity(category) for category in self._repo.list_all()]

    def find_by_id(self, id: int) -> CategoryDTO:
        category = self._repo.find_by_id(id)
        if category is None:
            raise DomainError.not_found(f"Category {id} not found.")
        return CategoryDTO.from_entity(category)
