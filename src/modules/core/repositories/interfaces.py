"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on the Django ORM directly.

Entities are keyed by a numeric identity.  Repositories report absence
by returning ``None``/``False`` except ``get_reference``, which raises the
model's ``DoesNotExist`` like the ORM does.  Store errors (e.g.
``IntegrityError``) are not translated here.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, Iterable, List, Optional, TypeVar

if TYPE_CHECKING:
    from modules.core.pagination import Page, PageRequest

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the entity managed by the
    repository (e.g. ``Product``, ``Order``).
    """

    @abstractmethod
    def find_by_id(self, id: int) -> Optional[T]:
        """Retrieve an entity by its identity, or ``None``."""

    @abstractmethod
    def get_reference(self, id: int) -> T:
        """Retrieve an entity that is expected to exist.

        Raises the model's ``DoesNotExist`` when it does not.
        """

    @abstractmethod
    def find_all(self, page_request: PageRequest) -> Page[T]:
        """Return one page of entities."""

    @abstractmethod
    def find_all_by_ids(self, ids: Iterable[int]) -> List[T]:
        """Return the entities matching *ids* in store order."""

    @abstractmethod
    def exists_by_id(self, id: int) -> bool:
        """Tell whether an entity with this identity exists."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (insert or update) an entity."""

    @abstractmethod
    def delete_by_id(self, id: int) -> None:
        """Remove an entity by identity."""
