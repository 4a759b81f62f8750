"""Domain error taxonomy.

Services signal failures with a single exception type tagged by
``ErrorKind`` rather than one class per failure.  The API layer never
inspects store-native errors: it only reads ``kind`` and ``message``
(see ``modules.core.exception_handler``).
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    BAD_REQUEST = "BAD_REQUEST"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    DATABASE = "DATABASE"


class DomainError(Exception):
    """A failure the client can act upon.

    - ``BAD_REQUEST``: malformed client input; raised before the store is touched.
    - ``RESOURCE_NOT_FOUND``: the requested identity (or identities) is absent.
    - ``DATABASE``: integrity-constraint violation reported by the store.
    """

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = ErrorKind(kind)
        self.message = message

    @classmethod
    def bad_request(cls, message: str) -> DomainError:
        return cls(ErrorKind.BAD_REQUEST, message)

    @classmethod
    def not_found(cls, message: str) -> DomainError:
        return cls(ErrorKind.RESOURCE_NOT_FOUND, message)

    @classmethod
    def database(cls, message: str) -> DomainError:
        return cls(ErrorKind.DATABASE, message)

    def __repr__(self) -> str:
        return f"DomainError({self.kind.value}, {self.message!r})"
