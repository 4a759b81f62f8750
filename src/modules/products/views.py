"""Product and Category API views.

Exposes ``ProductService`` and ``CategoryService`` via HTTP using DRF
ViewSets.  Payloads are validated by a ``PayloadValidator`` before any
service call; domain errors raised by the services are rendered by
``modules.core.exception_handler`` and never caught here.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.reverse import reverse
from rest_framework.viewsets import GenericViewSet

from modules.core.pagination import page_request_from_query
from modules.core.serializers import ErrorSerializer
from modules.core.validation import PayloadValidator, parse_id
from modules.products.dtos import ProductInputDTO
from modules.products.repositories.django_repository import (
    CategoryDjangoRepository,
    ProductDjangoRepository,
)
from modules.products.serializers import (
    CategorySerializer,
    ProductPageSerializer,
    ProductSerializer,
)
from modules.products.services import CategoryService, ProductService

# Built once at import; shared by every request.
product_validator: PayloadValidator[ProductInputDTO] = PayloadValidator(ProductInputDTO)

PAGE_PARAMETERS = [
    OpenApiParameter("page", int, description="Zero-based page number."),
    OpenApiParameter("size", int, description="Page size (1-100)."),
    OpenApiParameter("sort", str, many=True, description="field[,asc|desc]"),
]


class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    Does **not** extend ``ModelViewSet``: all ORM access goes through
    the service and repository layers.
    """

    serializer_class = ProductSerializer
    payload_validator = product_validator
    sortable_fields = ("id", "name", "price", "rating")

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve / Compare
    # ------------------------------------------------------------------

    @extend_schema(parameters=PAGE_PARAMETERS, responses=ProductPageSerializer)
    def list(self, request: Request) -> Response:
        """GET /products"""
        page_request = page_request_from_query(request.query_params, self.sortable_fields)
        page = self._service.find_all(page_request)
        return Response(page.to_dict(lambda dto: dto.to_response()))

    @extend_schema(responses={200: ProductSerializer, 404: ErrorSerializer})
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /products/{pk}"""
        dto = self._service.find_by_id(parse_id(pk, "product"))
        return Response(dto.to_response())

    @extend_schema(
        parameters=[OpenApiParameter("ids", str, required=True, description="e.g. 1,2,3")],
        responses={200: ProductSerializer(many=True), 400: ErrorSerializer, 404: ErrorSerializer},
    )
    @action(detail=False, methods=["get"], url_path="compare")
    def compare(self, request: Request) -> Response:
        """GET /products/compare?ids=1,2"""
        dtos = self._service.compare_products_by_ids(request.query_params.get("ids"))
        return Response([dto.to_response() for dto in dtos])

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(request=ProductSerializer, responses={201: ProductSerializer, 400: ErrorSerializer})
    def create(self, request: Request) -> Response:
        """POST /products"""
        dto = self.payload_validator.validate(request.data)
        created = self._service.insert(dto)
        location = reverse("product-detail", kwargs={"pk": created.id}, request=request)
        return Response(
            created.to_response(),
            status=status.HTTP_201_CREATED,
            headers={"Location": location},
        )

    @extend_schema(request=ProductSerializer, responses={200: ProductSerializer, 404: ErrorSerializer})
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /products/{pk}"""
        id = parse_id(pk, "product")
        dto = self.payload_validator.validate(request.data)
        updated = self._service.update(id, dto)
        return Response(updated.to_response())

    @extend_schema(responses={204: None, 400: ErrorSerializer, 404: ErrorSerializer})
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /products/{pk}"""
        self._service.delete(parse_id(pk, "product"))
        return Response(status=status.HTTP_204_NO_CONTENT)


class CategoryViewSet(GenericViewSet):
    """Read-only category endpoints."""

    serializer_class = CategorySerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CategoryService(repository=CategoryDjangoRepository())

    def list(self, request: Request) -> Response:
        """GET /categories"""
        return Response([dto.model_dump() for dto in self._service.find_all()])

    @extend_schema(responses={200: CategorySerializer, 404: ErrorSerializer})
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /categories/{pk}"""
        dto = self._service.find_by_id(parse_id(pk, "category"))
        return Response(dto.model_dump())
