"""Order service layer (Use Cases).

Orders reference exactly one product.  Creation is guarded by a
product lookup: if it fails, the error propagates and nothing is
written.  The service never sees the product repository, only the
lookup callable it was given (``ProductService.get_product`` in the
running app).

There is no transaction spanning the lookup and the insert, so a
product deleted between the two leaves an order pointing at nothing;
reads expand such a reference to ``None``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Callable, List, Optional

import structlog

from modules.core.exceptions import InvalidRequest, NotFound

if TYPE_CHECKING:
    from modules.core.repositories.interfaces import Document
    from modules.orders.dtos import CreateOrderDTO
    from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)

ProductLookup = Callable[[str], "Document"]


class OrderService:
    """Application service for Order use-cases.

    Receives its repository and the product lookup via constructor
    injection (DIP).
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        find_product: ProductLookup,
    ) -> None:
        self._order_repo = order_repository
        self._find_product = find_product

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_order(self, dto: CreateOrderDTO) -> Document:
        """Create an order for an existing product.

        Raises:
            InvalidProductId: ``product_id`` is not a well-formed ObjectId.
            ProductNotFound: no product has ``product_id``.
        """
        log = logger.bind(product_id=dto.product_id)

        try:
            product = self._find_product(dto.product_id)
        except (InvalidRequest, NotFound) as exc:
            log.warning("order.product_missing", reason=str(exc))
            raise

        order = self._order_repo.create(
            {
                **dto.to_document(),
                "product_id": dto.product_id,
                "created_at": datetime.now(timezone.utc),
            }
        )
        log.info("order.created", order_id=str(order["_id"]))
        return {**order, "product": product}

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_orders(self) -> List[Document]:
        return self._order_repo.list()

    def get_order(self, id: str) -> Optional[Document]:
        """Return the order with its product expanded, or ``None``."""
        return self._order_repo.get_by_id(id)
