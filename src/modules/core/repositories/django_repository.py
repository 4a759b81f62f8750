"""Django ORM implementation of the generic repository.

Concrete repositories set ``model`` and, when they need eager loading,
override ``get_queryset``.  Writes run inside ``transaction.atomic`` so a
failing delete rolls back to its own savepoint and leaves the caller's
transaction usable.
"""

from __future__ import annotations

from typing import Generic, Iterable, List, Optional, Type, TypeVar

import structlog
from django.db import models, transaction

from modules.core.pagination import Page, PageRequest
from modules.core.repositories.interfaces import IRepository

logger = structlog.get_logger(__name__)

M = TypeVar("M", bound=models.Model)

DEFAULT_ORDERING = ("id",)


class DjangoRepository(IRepository[M], Generic[M]):
    model: Type[M]

    def get_queryset(self) -> models.QuerySet:
        return self.model._default_manager.all()

    def find_by_id(self, id: int) -> Optional[M]:
        return self.get_queryset().filter(pk=id).first()

    def get_reference(self, id: int) -> M:
        return self.get_queryset().get(pk=id)

    def find_all(self, page_request: PageRequest) -> Page[M]:
        queryset = self.get_queryset().order_by(
            *(page_request.ordering or DEFAULT_ORDERING)
        )
        total = queryset.count()
        start = page_request.offset
        content = list(queryset[start : start + page_request.size])
        return Page(
            content=content,
            number=page_request.page,
            size=page_request.size,
            total_elements=total,
        )

    def find_all_by_ids(self, ids: Iterable[int]) -> List[M]:
        return list(self.get_queryset().filter(pk__in=list(ids)).order_by("pk"))

    def exists_by_id(self, id: int) -> bool:
        return self.model._default_manager.filter(pk=id).exists()

    @transaction.atomic
    def save(self, entity: M) -> M:
        entity.save()
        logger.info(
            "repository.saved",
            model=self.model._meta.label,
            entity_id=entity.pk,
        )
        return entity

    @transaction.atomic
    def delete_by_id(self, id: int) -> None:
        deleted, _ = self.model._default_manager.filter(pk=id).delete()
        logger.info(
            "repository.deleted",
            model=self.model._meta.label,
            entity_id=id,
            rows=deleted,
        )
