"""Base abstract model for the commerce domain.

Provides ``IdentityModel``: every entity is keyed by a numeric identity
assigned by the store on insert, and that identity is the only thing
equality and hashing look at.

Django's default ``Model.__eq__`` treats two unsaved instances as distinct
and ``Model.__hash__`` refuses to hash them.  Here two instances of the
same model without identity compare equal and hash to ``0``; once the
identity is assigned it never changes.
"""

from __future__ import annotations

from typing import Any, Hashable, Optional

from django.db import models

UNSAVED_HASH = 0


class IdentityModel(models.Model):
    """Abstract base with identity-based equality and hashing.

    The primary key comes from ``DEFAULT_AUTO_FIELD`` (``BigAutoField``).
    Subclasses with a natural key override :attr:`identity`.
    """

    class Meta:
        abstract = True

    @property
    def identity(self) -> Optional[Hashable]:
        """Value used for equality; ``None`` until the store assigns one."""
        return self.pk

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, models.Model):
            return NotImplemented
        if self._meta.concrete_model != other._meta.concrete_model:
            return False
        return self.identity == getattr(other, "identity", other.pk)

    def __hash__(self) -> int:
        identity = self.identity
        if identity is None:
            return UNSAVED_HASH
        return hash(identity)
