"""Order API views.

Exposes ``OrderService`` via HTTP.  Domain errors propagate to
``modules.core.exception_handler``.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.serializers import ErrorSerializer
from modules.core.validation import parse_id
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.serializers import OrderSerializer
from modules.orders.services import OrderService


class OrderViewSet(GenericViewSet):
    """Read-only access to a single order with its items and payment."""

    serializer_class = OrderSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderService(repository=OrderDjangoRepository())

    @extend_schema(responses={200: OrderSerializer, 400: ErrorSerializer, 404: ErrorSerializer})
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /orders/{pk}"""
        dto = self._service.find_by_id(parse_id(pk, "order"))
        return Response(dto.to_response())
