"""MongoDB document store access.

Holds the process-wide ``MongoClient`` (a thread-safe connection pool)
and exposes the two collections the API works with.  The client is
created lazily on first use from ``settings.MONGO_URI`` so importing
views or running management commands never opens a connection.

Identifiers are BSON ObjectIds; ``is_valid_id`` is the structural check
(24 hex characters) used before any lookup touches the store.
"""

from __future__ import annotations

import threading
from typing import Any, Dict, Optional

import structlog
from bson import ObjectId
from bson.errors import InvalidId
from django.conf import settings
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

logger = structlog.get_logger(__name__)

PRODUCTS = "products"
ORDERS = "orders"

_store: Optional["DocumentStore"] = None
_lock = threading.Lock()


def is_valid_id(value: Any) -> bool:
    """Return ``True`` when *value* is a well-formed ObjectId."""
    if isinstance(value, ObjectId):
        return True
    return isinstance(value, str) and ObjectId.is_valid(value)


def to_object_id(value: Any) -> Optional[ObjectId]:
    """Convert *value* to an ObjectId, or ``None`` when it is malformed."""
    if not is_valid_id(value):
        return None
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


class DocumentStore:
    """Thin handle over a pymongo ``Database``."""

    def __init__(self, database: Database) -> None:
        self._db = database

    @property
    def products(self) -> Collection:
        return self._db[PRODUCTS]

    @property
    def orders(self) -> Collection:
        return self._db[ORDERS]

    def ping(self) -> Dict[str, Any]:
        """Round-trip to the server; raises ``PyMongoError`` when unreachable."""
        return self._db.command("ping")


def _connect() -> DocumentStore:
    client: MongoClient = MongoClient(
        settings.MONGO_URI,
        serverSelectionTimeoutMS=settings.MONGO_TIMEOUT_MS,
        tz_aware=True,
    )
    name = settings.MONGO_DB_NAME or None
    database = client.get_default_database(default="shop") if not name else client[name]
    logger.info("store.connected", uri=settings.MONGO_URI, database=database.name)
    return DocumentStore(database)


def get_store() -> DocumentStore:
    """Return the shared ``DocumentStore``, connecting on first call."""
    global _store
    if _store is None:
        with _lock:
            if _store is None:
                _store = _connect()
    return _store
