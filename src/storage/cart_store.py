# src/storage/cart_store.py

"""Shopping cart for the current installation."""

import logging
from collections.abc import Callable
from decimal import Decimal

from src.config.settings import Settings
from src.models.cart_line import CartLine
from src.models.product import Product
from src.services.notifier import Notifier, Severity
from src.storage.indexes import position_index
from src.storage.local_storage import LocalStorage

logger = logging.getLogger("ecofinds.cart")

ProductResolver = Callable[[str], Product | None]

_ZERO = Decimal("0.00")


class CartStore:
    """Owns the cart lines; at most one line per product, quantity >= 1.

    Every mutation replaces the line tuple and persists it before
    returning.
    """

    def __init__(
        self,
        storage: LocalStorage,
        notifier: Notifier,
        key: str = Settings.CART_KEY,
    ) -> None:
        self._storage = storage
        self._notifier = notifier
        self._key = key
        self._lines: tuple[CartLine, ...] = ()
        self._positions: dict[str, int] = {}
        self._load()

    def _load(self) -> None:
        raw = self._storage.get_item(self._key)
        if raw is None:
            self._publish(())
            return

        lines: list[CartLine] = []
        seen: set[str] = set()
        for item in raw:
            try:
                line = CartLine.from_dict(item)
            except (KeyError, TypeError, ValueError) as exc:
                logger.warning("Skipping malformed cart line: %s", exc)
                continue
            if line.quantity < 1 or line.product_id in seen:
                logger.warning(
                    "Dropping invalid cart line for product %s", line.product_id,
                )
                continue
            seen.add(line.product_id)
            lines.append(line)
        self._publish(tuple(lines), persist=False)
        logger.info("Loaded cart with %d lines", len(lines))

    def _publish(
        self, lines: tuple[CartLine, ...], persist: bool = True,
    ) -> None:
        if persist:
            self._storage.set_item(self._key, [line.to_dict() for line in lines])
        self._lines = lines
        self._positions = position_index(lines, lambda line: line.product_id)

    # ── Mutations ────────────────────────────────────────

    def add(self, product_id: str) -> None:
        """Add one unit of *product_id*."""
        pos = self._positions.get(product_id)
        if pos is None:
            lines = self._lines + (CartLine(product_id=product_id, quantity=1),)
        else:
            existing = self._lines[pos]
            lines = (
                self._lines[:pos]
                + (CartLine(product_id, existing.quantity + 1),)
                + self._lines[pos + 1:]
            )
        self._publish(lines)
        logger.debug("Added product %s to cart", product_id)
        self._notifier.notify(
            "Added to cart",
            "Item has been added to your cart.",
            Severity.SUCCESS,
        )

    def remove(self, product_id: str) -> None:
        """Drop the line for *product_id*, if there is one."""
        if product_id in self._positions:
            self._publish(
                tuple(line for line in self._lines if line.product_id != product_id)
            )
            logger.debug("Removed product %s from cart", product_id)
        self._notifier.notify(
            "Removed from cart",
            "Item has been removed from your cart.",
            Severity.INFO,
        )

    def set_quantity(self, product_id: str, quantity: int) -> None:
        """Overwrite a line's quantity; ``<= 0`` removes the line.

        Products that are not already in the cart are left out.
        """
        if quantity <= 0:
            self.remove(product_id)
            return
        pos = self._positions.get(product_id)
        if pos is None:
            logger.debug(
                "Quantity change for product %s not in cart ignored", product_id,
            )
            return
        self._publish(
            self._lines[:pos]
            + (CartLine(product_id, quantity),)
            + self._lines[pos + 1:]
        )

    def clear(self) -> None:
        """Empty the cart."""
        self._publish(())
        logger.info("Cart cleared")
        self._notifier.notify(
            "Cart cleared",
            "All items have been removed from your cart.",
            Severity.INFO,
        )

    # ── Reads ────────────────────────────────────────────

    def get(self, product_id: str) -> CartLine | None:
        pos = self._positions.get(product_id)
        return None if pos is None else self._lines[pos]

    def lines(self) -> list[CartLine]:
        return list(self._lines)

    def total(self, resolve: ProductResolver) -> Decimal:
        """Sum ``quantity * price`` over lines whose product resolves.

        Lines pointing at deleted products contribute nothing.
        """
        total = _ZERO
        for line in self._lines:
            product = resolve(line.product_id)
            if product is None:
                continue
            total += product.price * line.quantity
        return total

    def item_count(self) -> int:
        return sum(line.quantity for line in self._lines)

    def __len__(self) -> int:
        return len(self._lines)
