# src/services/marketplace.py

"""Application container: one storage backend, one notifier, every store."""

import logging
from dataclasses import dataclass
from pathlib import Path

from src.services.auth import AuthService
from src.services.checkout import CheckoutResult, checkout
from src.services.notifier import LogNotifier, Notifier
from src.storage.cart_store import CartStore
from src.storage.catalog_store import CatalogStore
from src.storage.local_storage import LocalStorage
from src.storage.purchase_store import PurchaseStore

logger = logging.getLogger("ecofinds.marketplace")


@dataclass
class Marketplace:
    """The stores of one installation, constructed together at startup.

    Consumers receive this object (or individual stores from it)
    explicitly instead of reaching for module-level singletons.
    """

    storage: LocalStorage
    notifier: Notifier
    catalog: CatalogStore
    cart: CartStore
    purchases: PurchaseStore
    auth: AuthService

    @classmethod
    def open(
        cls,
        data_dir: Path | None = None,
        notifier: Notifier | None = None,
        auth_delay: float | None = None,
    ) -> "Marketplace":
        """Load every store from *data_dir*, seeding whatever is missing."""
        storage = LocalStorage(data_dir)
        notifier = notifier or LogNotifier()
        market = cls(
            storage=storage,
            notifier=notifier,
            catalog=CatalogStore(storage, notifier),
            cart=CartStore(storage, notifier),
            purchases=PurchaseStore(storage, notifier),
            auth=AuthService(storage, notifier, delay=auth_delay),
        )
        logger.info(
            "Marketplace opened at %s (%d products, %d cart lines, %d purchases)",
            storage.root, len(market.catalog), len(market.cart), len(market.purchases),
        )
        return market

    def checkout(self) -> CheckoutResult:
        return checkout(
            self.cart, self.catalog, self.purchases, self.auth, self.notifier,
        )
