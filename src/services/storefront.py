# src/services/storefront.py

"""Read models joining the stores for display.

Cart lines and purchases that point at deleted products are left out
of every view here.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal

from src.config.settings import Settings
from src.filters.product_filter import ProductFilter
from src.models.category import CATEGORIES, Category
from src.models.product import Product
from src.models.purchase import Purchase
from src.storage.cart_store import CartStore
from src.storage.catalog_store import CatalogStore
from src.storage.purchase_store import PurchaseStore

logger = logging.getLogger("ecofinds.storefront")

_ZERO = Decimal("0.00")


@dataclass(frozen=True)
class CartItemView:
    product: Product
    quantity: int

    @property
    def subtotal(self) -> Decimal:
        return self.product.price * self.quantity


@dataclass(frozen=True)
class PurchaseView:
    purchase: Purchase
    product: Product


@dataclass(frozen=True)
class CategorySummary:
    category: Category
    product_count: int


@dataclass(frozen=True)
class DashboardSummary:
    listing_count: int
    purchase_count: int
    total_spent: Decimal
    listed_value: Decimal


def browse(
    catalog: CatalogStore,
    search: str | None = None,
    category: str | None = None,
) -> list[Product]:
    """Products matching the browse-page search box and category picker."""
    products = ProductFilter.filter_by_category(catalog.all(), category)
    return ProductFilter.filter_by_search(products, search)


def featured(
    catalog: CatalogStore, limit: int = Settings.FEATURED_LIMIT,
) -> list[Product]:
    return catalog.list_featured()[:limit]


def cart_view(cart: CartStore, catalog: CatalogStore) -> list[CartItemView]:
    items: list[CartItemView] = []
    for line in cart.lines():
        product = catalog.get_by_id(line.product_id)
        if product is None:
            logger.debug("Cart line for missing product %s hidden", line.product_id)
            continue
        items.append(CartItemView(product=product, quantity=line.quantity))
    return items


def purchase_history(
    purchases: PurchaseStore, catalog: CatalogStore, user_id: str,
) -> list[PurchaseView]:
    """The user's purchases joined with their products, newest first."""
    views: list[PurchaseView] = []
    for purchase in purchases.list_by_user(user_id):
        product = catalog.get_by_id(purchase.product_id)
        if product is not None:
            views.append(PurchaseView(purchase=purchase, product=product))
    views.sort(key=lambda v: v.purchase.purchased_at, reverse=True)
    return views


def seller_dashboard(
    catalog: CatalogStore, purchases: PurchaseStore, user_id: str,
) -> DashboardSummary:
    """Counts and totals for the dashboard page.

    Purchases of products that have since been deleted are left out, as
    they are in :func:`purchase_history`.
    """
    listings = catalog.list_by_seller(user_id)
    bought = [
        p for p in purchases.list_by_user(user_id)
        if catalog.get_by_id(p.product_id) is not None
    ]
    return DashboardSummary(
        listing_count=len(listings),
        purchase_count=len(bought),
        total_spent=sum((p.price for p in bought), _ZERO),
        listed_value=sum((p.price for p in listings), _ZERO),
    )


def category_summaries(catalog: CatalogStore) -> list[CategorySummary]:
    return [
        CategorySummary(
            category=c, product_count=len(catalog.list_by_category(c.name)),
        )
        for c in CATEGORIES
    ]
