# src/models/cart_line.py

"""Cart line model: one product and how many of it are in the cart."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CartLine:
    """A (product, quantity) pair. Quantity is always at least 1."""

    product_id: str
    quantity: int = 1

    def to_dict(self) -> dict[str, Any]:
        return {"product_id": self.product_id, "quantity": self.quantity}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CartLine":
        return cls(
            product_id=str(data["product_id"]),
            quantity=int(data["quantity"]),
        )
