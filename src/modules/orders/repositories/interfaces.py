"""Order repository interface.

Extends ``IRepository`` with the reference count the product side
needs before deleting a product.  Documents returned by ``get_by_id``
and ``list`` carry their product expanded under ``product``.

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any

from modules.core.repositories.interfaces import IRepository


class IOrderRepository(IRepository):
    """Repository contract for the Order aggregate."""

    @abstractmethod
    def count_by_product(self, product_id: Any) -> int:
        """Number of orders referencing *product_id*."""
