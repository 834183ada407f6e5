# src/storage/catalog_store.py

"""Catalog of product listings, persisted and indexed for lookups."""

import logging
import uuid
from collections.abc import Callable, Mapping
from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any

from src.config.settings import Settings
from src.models.product import (
    EDITABLE_FIELDS,
    PROTECTED_FIELDS,
    Product,
    ProductDraft,
    Specification,
)
from src.services.notifier import Notifier, Severity
from src.storage.indexes import group_by, index_by
from src.storage.local_storage import LocalStorage
from src.storage.seed_data import sample_products

logger = logging.getLogger("ecofinds.catalog")


class CatalogStore:
    """Owns every product listing.

    State is an immutable tuple of products. Each mutation derives a new
    tuple, publishes it, rebuilds the by-id, by-seller and by-category
    indexes and persists the whole list before returning.
    """

    def __init__(
        self,
        storage: LocalStorage,
        notifier: Notifier,
        seed: Callable[[], list[Product]] | None = sample_products,
        key: str = Settings.PRODUCTS_KEY,
    ) -> None:
        self._storage = storage
        self._notifier = notifier
        self._key = key
        self._records: tuple[Product, ...] = ()
        self._by_id: dict[str, Product] = {}
        self._by_seller: dict[str, tuple[Product, ...]] = {}
        self._by_category: dict[str, tuple[Product, ...]] = {}
        self._featured: tuple[Product, ...] = ()
        self._load(seed)

    # ── Lifecycle ────────────────────────────────────────

    def _load(self, seed: Callable[[], list[Product]] | None) -> None:
        raw = self._storage.get_item(self._key)
        if raw is None:
            seeded = tuple(seed()) if seed else ()
            logger.info("No persisted catalog, seeding %d products", len(seeded))
            self._publish(seeded)
            return

        products: list[Product] = []
        for item in raw:
            try:
                products.append(Product.from_dict(item))
            except (KeyError, TypeError, ValueError, InvalidOperation) as exc:
                logger.warning("Skipping malformed product record: %s", exc)
        self._publish(tuple(products), persist=False)
        logger.info("Loaded %d products from storage", len(products))

    def _publish(
        self, records: tuple[Product, ...], persist: bool = True,
    ) -> None:
        # Serialise and write before swapping state so a failure leaves
        # memory and disk on the previous snapshot.
        if persist:
            payload = [p.to_dict() for p in records]
            self._storage.set_item(self._key, payload)

        by_id = index_by(records, lambda p: p.id)
        by_seller = group_by(records, lambda p: p.seller_id)
        by_category = group_by(records, lambda p: p.category)
        featured = tuple(p for p in records if p.featured)

        self._records = records
        self._by_id = by_id
        self._by_seller = by_seller
        self._by_category = by_category
        self._featured = featured

    def _new_id(self) -> str:
        while True:
            candidate = uuid.uuid4().hex
            if candidate not in self._by_id:
                return candidate

    # ── Mutations ────────────────────────────────────────

    def add(self, draft: ProductDraft) -> Product:
        """Create a listing from *draft* with a fresh id and timestamp.

        Values are stored as given; input validation belongs to the
        listing workflow in :mod:`src.services.listings`.
        """
        product = Product.from_draft(
            draft,
            product_id=self._new_id(),
            created_at=datetime.now(timezone.utc),
        )
        self._publish(self._records + (product,))
        logger.info(
            "Added product %s '%s' for seller %s",
            product.id, product.title, product.seller_id,
        )
        self._notifier.notify(
            "Product added",
            "Your product has been successfully listed.",
            Severity.SUCCESS,
        )
        return product

    def update(
        self, product_id: str, changes: Mapping[str, Any],
    ) -> Product | None:
        """Merge *changes* into an existing product.

        ``id``, ``seller_id``, ``created_at`` and the ``seller`` snapshot
        are never changed. An unknown *product_id* or a value that cannot
        be converted is reported to the notifier and leaves the catalog
        untouched.
        """
        current = self._by_id.get(product_id)
        if current is None:
            logger.warning("Update of unknown product %s ignored", product_id)
            self._notifier.notify(
                "Error", "Product not found", Severity.ERROR,
            )
            return None

        try:
            merged = _clean_changes(changes)
        except (InvalidOperation, TypeError, ValueError) as exc:
            logger.warning(
                "Rejected update of product %s: %s", product_id, exc,
            )
            self._notifier.notify(
                "Error", "Invalid product details", Severity.ERROR,
            )
            return None
        updated = replace(current, **merged)
        self._publish(
            tuple(updated if p.id == product_id else p for p in self._records)
        )
        logger.info(
            "Updated product %s (fields=%s)", product_id, sorted(merged),
        )
        self._notifier.notify(
            "Product updated",
            "Your product has been successfully updated.",
            Severity.SUCCESS,
        )
        return updated

    def remove(self, product_id: str) -> None:
        """Delete a product. Removing an absent id is a no-op."""
        if product_id not in self._by_id:
            logger.debug("Remove of absent product %s skipped", product_id)
            return
        self._publish(tuple(p for p in self._records if p.id != product_id))
        logger.info("Removed product %s", product_id)
        self._notifier.notify(
            "Product deleted",
            "Your product has been successfully removed.",
            Severity.SUCCESS,
        )

    # ── Lookups ──────────────────────────────────────────

    def get_by_id(self, product_id: str) -> Product | None:
        return self._by_id.get(product_id)

    def list_by_seller(self, seller_id: str) -> list[Product]:
        return list(self._by_seller.get(seller_id, ()))

    def list_by_category(
        self, category: str, sub_category: str | None = None,
    ) -> list[Product]:
        products = self._by_category.get(category, ())
        if sub_category is None:
            return list(products)
        return [p for p in products if p.sub_category == sub_category]

    def list_featured(self) -> list[Product]:
        return list(self._featured)

    def all(self) -> list[Product]:
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._by_id


def _clean_changes(changes: Mapping[str, Any]) -> dict[str, Any]:
    """Drop protected and unknown fields and coerce value types."""
    cleaned: dict[str, Any] = {}
    for name, value in changes.items():
        if name in PROTECTED_FIELDS:
            logger.debug("Ignoring protected field '%s' in update", name)
            continue
        if name not in EDITABLE_FIELDS:
            logger.warning("Ignoring unknown product field '%s'", name)
            continue
        if name == "price" and not isinstance(value, Decimal):
            value = Decimal(str(value))
        elif name == "specifications":
            value = tuple(
                s if isinstance(s, Specification) else Specification(**s)
                for s in value
            )
        cleaned[name] = value
    return cleaned
