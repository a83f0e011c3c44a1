"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateOrderDTO``: input for order creation.
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, StrictInt, field_validator


class CreateOrderDTO(BaseModel):
    """Immutable DTO for order creation requests.

    ``product_id`` is kept as the caller sent it: the product service
    decides whether it is well formed and whether it exists.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    product_id: str
    quantity: StrictInt = 1
    notes: str = ""

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Quantity must be at least 1.")
        return v

    def to_document(self) -> Dict[str, Any]:
        return {"quantity": self.quantity, "notes": self.notes}
