"""Product and Category DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the Service
layer.  DTOs are immutable (``frozen=True``).

- ``ProductInputDTO``: body of create/update requests; carries the
  validation constraints.  An ``id`` in the body is ignored.
- ``ProductOutputDTO``: projection of a stored product.
- ``CategoryDTO``: projection of a category.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Annotated, Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from modules.products.models import Category, Product


# ---------------------------------------------------------------------------
# Input DTO
# ---------------------------------------------------------------------------


class ProductInputDTO(BaseModel):
    """Immutable DTO for product create/update requests.

    Validates:
    - ``name`` is 3 to 80 characters and not blank.
    - ``description`` has at least 10 characters and is not blank.
    - ``price``, when supplied, is greater than zero.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=3, max_length=80)
    description: str = Field(min_length=10)
    price: Optional[Annotated[Decimal, Field(gt=0, max_digits=10, decimal_places=2)]] = None
    img_url: Optional[Annotated[str, Field(max_length=255)]] = None
    rating: Optional[float] = None
    specifications: Optional[str] = None

    @field_validator("price", mode="before")
    @classmethod
    def price_from_float(cls, v: Any) -> Any:
        # str() keeps the shortest repr, so 199.99 stays two decimal places
        if isinstance(v, float):
            return str(v)
        return v

    @field_validator("name", "description")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class ProductOutputDTO(BaseModel):
    """Immutable DTO for product API responses."""

    model_config = ConfigDict(frozen=True)

    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = None
    img_url: Optional[str] = None
    rating: Optional[float] = None
    specifications: Optional[str] = None

    @classmethod
    def from_entity(cls, product: Product) -> ProductOutputDTO:
        """Build an output DTO from a Product model instance."""
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            img_url=product.img_url,
            rating=product.rating,
            specifications=product.specifications,
        )

    def to_response(self) -> Dict[str, Any]:
        """Plain dict for DRF's JSON renderer (prices become JSON numbers)."""
        return self.model_dump()


class CategoryDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str

    @classmethod
    def from_entity(cls, category: Category) -> CategoryDTO:
        return cls(id=category.id, name=category.name)
