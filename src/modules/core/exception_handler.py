"""Translation of errors into API responses.

``translate_error`` is the only place that maps a ``DomainError`` to an
HTTP status.  ``api_exception_handler`` is installed as DRF's
``EXCEPTION_HANDLER`` and gives every handled error the same body::

    {"timestamp": ..., "status": 404, "error": "...", "path": "/products/9"}

Exceptions that are neither domain errors nor DRF ``APIException``s are
left alone and surface as a 500.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

import structlog
from django.utils import timezone
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from modules.core.exceptions import DomainError, ErrorKind

logger = structlog.get_logger(__name__)

STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.RESOURCE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
    # Integrity violations come from client-supplied referential state
    # (e.g. deleting a product that orders still reference).
    ErrorKind.DATABASE: status.HTTP_400_BAD_REQUEST,
}

VALIDATION_MESSAGE = "Validation failed."


@dataclass(frozen=True)
class CustomError:
    """Error body returned by the API."""

    timestamp: Optional[datetime]
    status: Optional[int]
    error: Optional[str]
    path: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
            "status": self.status,
            "error": self.error,
            "path": self.path,
        }


def translate_error(error: DomainError, path: str) -> Tuple[int, CustomError]:
    """Map a domain error to ``(status_code, body)``.

    The timestamp is taken now, not when the error was raised.
    """
    status_code = STATUS_BY_KIND[error.kind]
    body = CustomError(
        timestamp=timezone.now(),
        status=status_code,
        error=error.message,
        path=path,
    )
    return status_code, body


def _request_path(context: Dict[str, Any]) -> str:
    request = context.get("request")
    return request.path if request is not None else ""


def _validation_errors(detail: Any) -> Dict[str, Any]:
    if isinstance(detail, dict):
        return {str(key): value for key, value in detail.items()}
    if isinstance(detail, list):
        return {"non_field_errors": detail}
    return {"non_field_errors": [detail]}


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    """DRF exception handler producing the ``CustomError`` body shape."""
    path = _request_path(context)

    if isinstance(exc, DomainError):
        status_code, body = translate_error(exc, path)
        logger.warning(
            "api.domain_error",
            kind=exc.kind.value,
            status_code=status_code,
            path=path,
            message=exc.message,
        )
        return Response(body.to_dict(), status=status_code)

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, exceptions.ValidationError):
        body = CustomError(
            timestamp=timezone.now(),
            status=response.status_code,
            error=VALIDATION_MESSAGE,
            path=path,
        ).to_dict()
        body["errors"] = _validation_errors(response.data)
        logger.info("api.validation_failed", path=path, fields=sorted(body["errors"]))
    else:
        detail = response.data.get("detail") if isinstance(response.data, dict) else None
        body = CustomError(
            timestamp=timezone.now(),
            status=response.status_code,
            error=str(detail) if detail is not None else str(exc),
            path=path,
        ).to_dict()

    response.data = body
    return response
