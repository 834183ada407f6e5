# src/storage/purchase_store.py

"""Append-only store of completed purchases."""

import logging
import uuid
from collections.abc import Callable, Iterable
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation

from src.config.settings import Settings
from src.models.purchase import Purchase
from src.services.notifier import Notifier, Severity
from src.storage.indexes import group_by
from src.storage.local_storage import LocalStorage
from src.storage.seed_data import sample_purchases

logger = logging.getLogger("ecofinds.purchases")

# (user_id, product_id, price)
PurchaseEntry = tuple[str, str, Decimal]


class PurchaseStore:
    """Owns purchase records. Records are immutable once created."""

    def __init__(
        self,
        storage: LocalStorage,
        notifier: Notifier,
        seed: Callable[[], list[Purchase]] | None = sample_purchases,
        key: str = Settings.PURCHASES_KEY,
    ) -> None:
        self._storage = storage
        self._notifier = notifier
        self._key = key
        self._records: tuple[Purchase, ...] = ()
        self._by_user: dict[str, tuple[Purchase, ...]] = {}
        self._load(seed)

    def _load(self, seed: Callable[[], list[Purchase]] | None) -> None:
        raw = self._storage.get_item(self._key)
        if raw is None:
            seeded = tuple(seed()) if seed else ()
            logger.info("No persisted purchases, seeding %d", len(seeded))
            self._publish(seeded)
            return

        records: list[Purchase] = []
        for item in raw:
            try:
                records.append(Purchase.from_dict(item))
            except (KeyError, TypeError, ValueError, InvalidOperation) as exc:
                logger.warning("Skipping malformed purchase record: %s", exc)
        self._publish(tuple(records), persist=False)
        logger.info("Loaded %d purchases from storage", len(records))

    def _publish(
        self, records: tuple[Purchase, ...], persist: bool = True,
    ) -> None:
        if persist:
            self._storage.set_item(self._key, [p.to_dict() for p in records])
        self._records = records
        self._by_user = group_by(records, lambda p: p.user_id)

    def _build(
        self, user_id: str, product_id: str, price: Decimal, now: datetime,
    ) -> Purchase:
        return Purchase(
            id=uuid.uuid4().hex,
            user_id=user_id,
            product_id=product_id,
            purchased_at=now,
            price=price,
        )

    def record(self, user_id: str, product_id: str, price: Decimal) -> Purchase:
        """Append one purchase at the caller-supplied price."""
        purchase = self._build(
            user_id, product_id, price, datetime.now(timezone.utc),
        )
        self._publish(self._records + (purchase,))
        logger.info(
            "Recorded purchase %s: user=%s product=%s price=%s",
            purchase.id, user_id, product_id, price,
        )
        self._notifier.notify(
            "Purchase complete",
            "Your purchase has been successfully completed.",
            Severity.SUCCESS,
        )
        return purchase

    def record_many(self, entries: Iterable[PurchaseEntry]) -> list[Purchase]:
        """Append several purchases in one replacement and one write."""
        now = datetime.now(timezone.utc)
        created = [self._build(u, p, price, now) for u, p, price in entries]
        if not created:
            return []
        self._publish(self._records + tuple(created))
        logger.info("Recorded %d purchases in one batch", len(created))
        self._notifier.notify(
            "Purchase complete",
            "Your purchase has been successfully completed.",
            Severity.SUCCESS,
        )
        return created

    def list_by_user(self, user_id: str) -> list[Purchase]:
        return list(self._by_user.get(user_id, ()))

    def all(self) -> list[Purchase]:
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)
