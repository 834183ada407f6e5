# src/services/checkout.py

"""Turn the cart into purchase records for the signed-in user."""

import logging
from dataclasses import dataclass, field

from src.models.purchase import Purchase
from src.services.auth import IdentityProvider
from src.services.notifier import Notifier, Severity
from src.storage.cart_store import CartStore
from src.storage.catalog_store import CatalogStore
from src.storage.purchase_store import PurchaseEntry, PurchaseStore

logger = logging.getLogger("ecofinds.checkout")


@dataclass
class CheckoutResult:
    """Outcome of one checkout attempt."""

    completed: bool
    purchases: list[Purchase] = field(default_factory=list)
    skipped_product_ids: list[str] = field(default_factory=list)


def checkout(
    cart: CartStore,
    catalog: CatalogStore,
    purchases: PurchaseStore,
    identity: IdentityProvider,
    notifier: Notifier,
) -> CheckoutResult:
    """Record one purchase per resolvable cart line, then empty the cart.

    Every line is resolved against the catalog before anything is
    written, and the purchases are stored in a single batch, so either
    all resolvable lines are recorded or none are. Lines whose product
    was deleted are skipped.
    """
    user_id = identity.current_user_id()
    if user_id is None:
        notifier.notify(
            "Please sign in",
            "You need to be signed in to complete your purchase.",
            Severity.ERROR,
        )
        return CheckoutResult(completed=False)

    entries: list[PurchaseEntry] = []
    skipped: list[str] = []
    for line in cart.lines():
        product = catalog.get_by_id(line.product_id)
        if product is None:
            logger.warning(
                "Skipping cart line for missing product %s", line.product_id,
            )
            skipped.append(line.product_id)
            continue
        entries.append((user_id, product.id, product.price * line.quantity))

    if not entries:
        if skipped:
            cart.clear()
        notifier.notify("Cart is empty", "There is nothing to check out.", Severity.INFO)
        return CheckoutResult(completed=False, skipped_product_ids=skipped)

    created = purchases.record_many(entries)
    cart.clear()
    logger.info(
        "Checkout for user %s recorded %d purchases (%d skipped)",
        user_id, len(created), len(skipped),
    )
    return CheckoutResult(
        completed=True, purchases=created, skipped_product_ids=skipped,
    )
