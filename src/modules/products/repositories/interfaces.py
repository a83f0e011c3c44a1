"""Product repository interface.

Extends ``IRepository`` with the partial update and hard delete the
product use-cases need.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Dict, Optional

from modules.core.repositories.interfaces import Document, IRepository


class IProductRepository(IRepository):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def update(self, id: str, changes: Dict[str, Any]) -> Optional[Document]:
        """Apply *changes* and return the updated document (``None`` if gone)."""

    @abstractmethod
    def delete(self, id: str) -> bool:
        """Remove a product; ``True`` if a document was deleted."""
