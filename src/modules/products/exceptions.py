"""Product domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import InvalidRequest, NotFound


class InvalidProductId(InvalidRequest):
    """The identifier is not a well-formed ObjectId."""


class ProductNotFound(NotFound):
    """The identifier is well formed but no product has it."""


class ProductInUse(InvalidRequest):
    """The product cannot be deleted while orders reference it."""
