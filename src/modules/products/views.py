"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into appropriate
HTTP status codes. The view never swallows generic exceptions, so
store failures surface as server errors.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.store import get_store
from modules.orders.repositories.mongo_repository import OrderMongoRepository
from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import InvalidProductId, ProductInUse, ProductNotFound
from modules.products.repositories.mongo_repository import ProductMongoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService


def build_product_service() -> ProductService:
    """Compose a ``ProductService`` over the shared document store."""
    store = get_store()
    return ProductService(
        product_repository=ProductMongoRepository(store.products),
        order_repository=OrderMongoRepository(store.orders),
    )


NOT_AN_OBJECT = "Request body must be a JSON object."


def _invalid_body(detail: str) -> Response:
    return Response({"detail": detail}, status=status.HTTP_400_BAD_REQUEST)


@extend_schema(responses=ProductSerializer)
class ProductViewSet(ViewSet):
    """ViewSet for Product CRUD operations.

    All store access goes through the service/repository layer.
    """

    serializer_class = ProductSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = build_product_service()

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/products/"""
        products = self._service.list_products()
        return Response(ProductSerializer(products, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}/"""
        try:
            product = self._service.get_product(pk)
        except InvalidProductId as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        except ProductNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/products/"""
        if not isinstance(request.data, dict):
            return _invalid_body(NOT_AN_OBJECT)
        try:
            dto = CreateProductDTO(**request.data)
        except PydanticValidationError as exc:
            return _invalid_body(str(exc))

        product = self._service.create_product(dto)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/products/{pk}/ (applied as a partial update)"""
        if not isinstance(request.data, dict):
            return _invalid_body(NOT_AN_OBJECT)
        try:
            dto = UpdateProductDTO(**request.data)
        except PydanticValidationError as exc:
            return _invalid_body(str(exc))

        try:
            product = self._service.update_product(pk, dto)
        except InvalidProductId as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        except ProductNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        return Response(ProductSerializer(product).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/products/{pk}/"""
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}/"""
        try:
            result = self._service.delete_product(pk)
        except (InvalidProductId, ProductInUse) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        except ProductNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        return Response(result, status=status.HTTP_200_OK)
