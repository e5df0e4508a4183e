"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Request bodies are decoded into Pydantic DTOs; a ``None``/``False``
from the service becomes a 404.  Anything else that goes wrong is left
to ``standard_exception_handler``, which answers with a generic 500.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, List, Type, TypeVar

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status, viewsets
from rest_framework.exceptions import ErrorDetail, NotFound, ValidationError
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.reverse import reverse

from modules.products.constants import DELETED_MESSAGE
from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductDeletedSerializer, ProductSerializer
from modules.products.services import ProductService
from shared.infrastructure.bus import get_event_publisher

DTO = TypeVar("DTO", bound=BaseModel)


def _decode(dto_class: Type[DTO], data: Any) -> DTO:
    """Validate a request body against ``dto_class``.

    Raises DRF ``ValidationError`` (400) for non-object bodies and for
    every Pydantic error, keyed by the offending wire field.
    """
    if not isinstance(data, Mapping):
        raise ValidationError(
            {"non_field_errors": [ErrorDetail("Expected a JSON object.", code="invalid")]}
        )
    try:
        return dto_class.model_validate(dict(data))
    except PydanticValidationError as exc:
        errors: Dict[str, List[ErrorDetail]] = {}
        for error in exc.errors():
            attr = ".".join(str(part) for part in error["loc"]) or "non_field_errors"
            errors.setdefault(attr, []).append(ErrorDetail(error["msg"], code=error["type"]))
        raise ValidationError(errors)


class ProductViewSet(viewsets.ViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    All ORM access goes through the service/repository layer.
    """

    lookup_value_regex = "[0-9]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(
            repository=ProductDjangoRepository(),
            publisher=get_event_publisher(),
        )

    def _not_found(self, pk: int) -> NotFound:
        return NotFound(f"Product {pk} not found.")

    # ------------------------------------------------------------------
    # List / Retrieve / Exists
    # ------------------------------------------------------------------

    @extend_schema(responses=ProductSerializer(many=True))
    def list(self, request: Request) -> Response:
        """GET /api/products"""
        products = self._service.list_products()
        return Response(ProductSerializer(products, many=True).data)

    @extend_schema(responses=ProductSerializer)
    def retrieve(self, request: Request, pk: str) -> Response:
        """GET /api/products/{pk}; HEAD answers existence with an empty body."""
        if request.method == "HEAD":
            return self._exists(int(pk))

        product = self._service.get_product(int(pk))
        if product is None:
            raise self._not_found(pk)
        return Response(ProductSerializer(product).data)

    def _exists(self, pk: int) -> Response:
        if not self._service.product_exists(pk):
            return Response(status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_200_OK)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(request=OpenApiTypes.OBJECT, responses={201: ProductSerializer})
    def create(self, request: Request) -> Response:
        """POST /api/products"""
        dto = _decode(CreateProductDTO, request.data)
        product = self._service.create_product(dto)
        location = reverse("product-detail", kwargs={"pk": product.id}, request=request)
        return Response(
            ProductSerializer(product).data,
            status=status.HTTP_201_CREATED,
            headers={"Location": location},
        )

    @extend_schema(request=OpenApiTypes.OBJECT, responses=ProductSerializer)
    def update(self, request: Request, pk: str) -> Response:
        """PUT /api/products/{pk}"""
        dto = _decode(UpdateProductDTO, request.data)
        product = self._service.update_product(int(pk), dto)
        if product is None:
            raise self._not_found(pk)
        return Response(ProductSerializer(product).data)

    @extend_schema(request=OpenApiTypes.OBJECT, responses=ProductSerializer)
    def partial_update(self, request: Request, pk: str) -> Response:
        """PATCH /api/products/{pk}; same merge semantics as PUT."""
        return self.update(request, pk)

    @extend_schema(responses=ProductDeletedSerializer)
    def destroy(self, request: Request, pk: str) -> Response:
        """DELETE /api/products/{pk}"""
        if not self._service.delete_product(int(pk)):
            raise self._not_found(pk)
        return Response({"message": DELETED_MESSAGE, "id": int(pk)})
