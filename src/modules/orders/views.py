"""Order API views.

Exposes the ``OrderService`` via HTTP using a DRF ViewSet.  Orders can
be created and read; there is no update or delete route, so those
methods answer 405.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.store import get_store
from modules.orders.dtos import CreateOrderDTO
from modules.orders.repositories.mongo_repository import OrderMongoRepository
from modules.orders.serializers import OrderSerializer
from modules.orders.services import OrderService
from modules.products.exceptions import InvalidProductId, ProductNotFound
from modules.products.views import NOT_AN_OBJECT, build_product_service


def build_order_service() -> OrderService:
    """Compose an ``OrderService`` over the shared document store."""
    product_service = build_product_service()
    return OrderService(
        order_repository=OrderMongoRepository(get_store().orders),
        find_product=product_service.get_product,
    )


@extend_schema(responses=OrderSerializer)
class OrderViewSet(ViewSet):
    """ViewSet for Order operations."""

    serializer_class = OrderSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = build_order_service()

    def list(self, request: Request) -> Response:
        """GET /api/v1/orders/"""
        orders = self._service.list_orders()
        return Response(OrderSerializer(orders, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/orders/{pk}/"""
        order = self._service.get_order(pk)
        if order is None:
            return Response(
                {"detail": "Order not found."},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response(OrderSerializer(order).data)

    def create(self, request: Request) -> Response:
        """POST /api/v1/orders/"""
        if not isinstance(request.data, dict):
            return Response(
                {"detail": NOT_AN_OBJECT},
                status=status.HTTP_400_BAD_REQUEST,
            )
        try:
            dto = CreateOrderDTO(**request.data)
        except PydanticValidationError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            order = self._service.create_order(dto)
        except InvalidProductId as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        except ProductNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)

        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)
