"""Request payload validation against pydantic DTOs.

A ``PayloadValidator`` is built once, when the view module is imported,
and holds nothing but the compiled pydantic schema, so a single instance
serves every request.  Views call ``validate`` before reaching any
service; failures become DRF ``ValidationError``s and therefore a 400
with per-field messages.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, List, Type, TypeVar

from django.http import QueryDict
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from rest_framework import serializers

from modules.core.exceptions import DomainError

DTO = TypeVar("DTO", bound=BaseModel)

NON_FIELD_ERRORS = "non_field_errors"


class PayloadValidator(Generic[DTO]):
    def __init__(self, dto_class: Type[DTO]) -> None:
        self.dto_class = dto_class
        self._adapter = TypeAdapter(dto_class)

    def validate(self, data: Any) -> DTO:
        """Return the DTO built from *data* or raise ``ValidationError``."""
        if isinstance(data, QueryDict):
            data = data.dict()
        try:
            return self._adapter.validate_python(data)
        except PydanticValidationError as exc:
            raise serializers.ValidationError(self.field_errors(exc)) from exc

    @staticmethod
    def field_errors(exc: PydanticValidationError) -> Dict[str, List[str]]:
        errors: Dict[str, List[str]] = {}
        for error in exc.errors():
            key = ".".join(str(part) for part in error["loc"]) or NON_FIELD_ERRORS
            errors.setdefault(key, []).append(error["msg"])
        return errors


# Identities are 64-bit signed integers (BigAutoField).
MAX_ID = 2**63 - 1
MIN_ID = -(2**63)


def parse_id(value: Any, resource: str = "resource") -> int:
    """Convert a URL path identity to ``int``.

    Raises:
        DomainError: BAD_REQUEST when *value* is not a non-negative 64-bit integer.
    """
    text = str(value)
    if not text.isascii() or not text.isdigit() or int(text) > MAX_ID:
        raise DomainError.bad_request(f"Invalid {resource} id: '{text}'.")
    return int(text)
