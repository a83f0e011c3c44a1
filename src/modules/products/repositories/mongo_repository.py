"""MongoDB implementation of the Product repository.

Satisfies ``IProductRepository`` over the ``products`` collection.
Error handling follows the Null Object pattern: methods return ``None``
(or ``False``) for malformed or unknown ids instead of raising; the
Service Layer decides how to translate a missing entity into an API
response.  ``PyMongoError`` is never caught here.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from pymongo import ReturnDocument
from pymongo.collection import Collection

from modules.core.repositories.interfaces import Document
from modules.core.store import to_object_id
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductMongoRepository(IProductRepository):
    """Concrete Product repository backed by a pymongo collection."""

    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    def get_by_id(self, id: str) -> Optional[Document]:
        oid = to_object_id(id)
        if oid is None:
            return None
        return self._collection.find_one({"_id": oid})

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Document]:
        """List products in the collection's natural order.

        Examples of valid filters::

            {"category": "stationery"}
            {"price": {"$lte": 10}}
        """
        return list(self._collection.find(filters or {}))

    def create(self, data: Document) -> Document:
        document = dict(data)
        result = self._collection.insert_one(document)
        document["_id"] = result.inserted_id
        logger.info("product.inserted", product_id=str(result.inserted_id))
        return document

    def update(self, id: str, changes: Dict[str, Any]) -> Optional[Document]:
        oid = to_object_id(id)
        if oid is None:
            return None
        document = self._collection.find_one_and_update(
            {"_id": oid},
            {"$set": changes},
            return_document=ReturnDocument.AFTER,
        )
        if document is not None:
            logger.info("product.saved", product_id=str(oid), fields=sorted(changes))
        return document

    def delete(self, id: str) -> bool:
        oid = to_object_id(id)
        if oid is None:
            return False
        result = self._collection.delete_one({"_id": oid})
        if result.deleted_count:
            logger.info("product.removed", product_id=str(oid))
        return bool(result.deleted_count)
