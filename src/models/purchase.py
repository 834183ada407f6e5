# src/models/purchase.py

"""Completed purchase record."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any

from src.models.product import parse_timestamp


@dataclass(frozen=True)
class Purchase:
    """One product bought by one user.

    ``price`` is what was paid at checkout, independent of the
    product's current price.
    """

    id: str
    user_id: str
    product_id: str
    purchased_at: datetime
    price: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "product_id": self.product_id,
            "purchased_at": self.purchased_at.isoformat(),
            "price": str(self.price),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Purchase":
        return cls(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            product_id=str(data["product_id"]),
            purchased_at=parse_timestamp(data["purchased_at"]),
            price=Decimal(str(data["price"])),
        )
