"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on pymongo directly.

Entities travel as plain documents (``dict``) keyed by ``_id``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

Document = Dict[str, Any]


class IRepository(ABC):
    """Base repository contract over a single collection."""

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[Document]:
        """Retrieve a document by identifier, ``None`` if absent or malformed."""

    @abstractmethod
    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Document]:
        """List documents matching an optional query filter."""

    @abstractmethod
    def create(self, data: Document) -> Document:
        """Insert a new document and return it with its assigned ``_id``."""
