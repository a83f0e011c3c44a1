"""MongoDB implementation of the Order repository.

Satisfies ``IOrderRepository`` over the ``orders`` collection.  Reads
expand each order's ``product_id`` into the full product document
(``product``), fetched from the sibling ``products`` collection in one
extra query per call.  A product that no longer exists expands to
``None``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from pymongo.collection import Collection

from modules.core.repositories.interfaces import Document
from modules.core.store import PRODUCTS, to_object_id
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderMongoRepository(IOrderRepository):
    """Concrete Order repository backed by a pymongo collection."""

    def __init__(self, collection: Collection) -> None:
        self._collection = collection
        self._products = collection.database[PRODUCTS]

    def get_by_id(self, id: str) -> Optional[Document]:
        """Retrieve an order with its product expanded.

        Returns ``None`` for non-existent or malformed IDs.
        """
        oid = to_object_id(id)
        if oid is None:
            return None
        order = self._collection.find_one({"_id": oid})
        if order is None:
            return None
        return self._expand([order])[0]

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Document]:
        return self._expand(list(self._collection.find(filters or {})))

    def create(self, data: Document) -> Document:
        """Insert an order; ``data["product_id"]`` must be a valid id."""
        document = dict(data)
        document["product_id"] = to_object_id(document["product_id"])
        result = self._collection.insert_one(document)
        document["_id"] = result.inserted_id
        logger.info(
            "order.inserted",
            order_id=str(result.inserted_id),
            product_id=str(document["product_id"]),
        )
        return document

    def count_by_product(self, product_id: Any) -> int:
        oid = to_object_id(product_id)
        if oid is None:
            return 0
        return self._collection.count_documents({"product_id": oid})

    def _expand(self, orders: List[Document]) -> List[Document]:
        ids = list({o["product_id"] for o in orders if o.get("product_id")})
        products: Dict[Any, Document] = {}
        if ids:
            cursor = self._products.find({"_id": {"$in": ids}})
            products = {p["_id"]: p for p in cursor}
        return [
            {**order, "product": products.get(order.get("product_id"))}
            for order in orders
        ]
