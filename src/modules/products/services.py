"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected repositories.

Every operation that takes an id runs the same two-step check first:
the id must be a well-formed ObjectId, then a product must exist with
it.  Malformed ids never reach the store.

A product referenced by at least one order cannot be deleted; the
order repository is injected only to count those references.
"""

from __future__ import annotations

import enum
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Dict, List

import structlog

from modules.core.store import is_valid_id
from modules.products.exceptions import InvalidProductId, ProductInUse, ProductNotFound

if TYPE_CHECKING:
    from modules.core.repositories.interfaces import Document
    from modules.orders.repositories.interfaces import IOrderRepository
    from modules.products.dtos import CreateProductDTO, UpdateProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class IdCheck(enum.Enum):
    OK = "ok"
    MALFORMED = "malformed"
    NOT_FOUND = "not_found"


class ProductService:
    """Application service for Product use-cases.

    Receives its repositories via constructor injection (DIP).
    """

    def __init__(
        self,
        product_repository: IProductRepository,
        order_repository: IOrderRepository,
    ) -> None:
        self._repo = product_repository
        self._order_repo = order_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, dto: CreateProductDTO) -> Document:
        now = datetime.now(timezone.utc)
        product = self._repo.create(
            {**dto.to_document(), "created_at": now, "updated_at": now}
        )
        logger.info(
            "product.created",
            product_id=str(product["_id"]),
            name=product["name"],
        )
        return product

    def update_product(self, id: str, dto: UpdateProductDTO) -> Document:
        """Apply the supplied fields to an existing product.

        Raises:
            InvalidProductId: ``id`` is not a well-formed ObjectId.
            ProductNotFound: no product has this id.
        """
        self._raise_for(self.validate_id(id))

        fields = dto.changes()
        product = self._repo.update(
            id, {**fields, "updated_at": datetime.now(timezone.utc)}
        )
        if product is None:
            # Deleted between the existence check and the write.
            raise ProductNotFound("Product id not found")
        logger.info("product.updated", product_id=id, fields=sorted(fields))
        return product

    def delete_product(self, id: str) -> Dict[str, str]:
        """Delete a product that no order references.

        Raises:
            InvalidProductId: ``id`` is not a well-formed ObjectId.
            ProductNotFound: no product has this id.
            ProductInUse: at least one order references the product.
        """
        self._raise_for(self.validate_id(id))

        references = self._order_repo.count_by_product(id)
        if references > 0:
            logger.warning("product.delete_blocked", product_id=id, orders=references)
            raise ProductInUse(
                "Cannot delete product because it is referenced in some orders"
            )

        self._repo.delete(id)
        logger.info("product.deleted", product_id=id)
        return {"message": "Delete product successful"}

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Document]:
        return self._repo.list()

    def get_product(self, id: str) -> Document:
        """Retrieve a single product by id.

        Raises:
            InvalidProductId: ``id`` is not a well-formed ObjectId.
            ProductNotFound: no product has this id.
        """
        self._raise_for(self.validate_id(id))
        product = self._repo.get_by_id(id)
        if product is None:
            raise ProductNotFound("Product id not found")
        return product

    # ------------------------------------------------------------------
    # Id validation
    # ------------------------------------------------------------------

    def validate_id(self, id: Any) -> IdCheck:
        """Classify *id*: malformed, well formed but unknown, or usable."""
        if not is_valid_id(id):
            return IdCheck.MALFORMED
        if self._repo.get_by_id(id) is None:
            return IdCheck.NOT_FOUND
        return IdCheck.OK

    @staticmethod
    def _raise_for(check: IdCheck) -> None:
        if check is IdCheck.MALFORMED:
            raise InvalidProductId("Invalid product id format")
        if check is IdCheck.NOT_FOUND:
            raise ProductNotFound("Product id not found")
