# src/services/listings.py

"""Seller workflow: list, edit and withdraw products.

This layer owns input validation and ownership checks; the catalog
store below it accepts whatever it is given.
"""

import logging

from src.filters.product_validator import ListingForm, ListingValidator
from src.models.account import User
from src.models.category import find_category
from src.models.product import Product, ProductDraft, Seller, Specification
from src.services.notifier import Notifier, Severity
from src.storage.catalog_store import CatalogStore

logger = logging.getLogger("ecofinds.listings")


def _reject(notifier: Notifier, errors: list[str]) -> None:
    notifier.notify("Invalid listing", "; ".join(errors), Severity.ERROR)


def _form_fields(form: ListingForm) -> dict[str, object]:
    category = find_category(form.category)
    price = ListingValidator.parse_price(form.price)
    if category is None or price is None:
        raise ValueError("Listing form must pass validation first")
    return {
        "title": form.title.strip(),
        "description": form.description.strip(),
        "category": category.name,
        "sub_category": form.sub_category or None,
        "price": price,
        "image": form.image,
        "condition": form.condition,
        "specifications": tuple(
            Specification(name.strip(), value.strip())
            for name, value in form.specifications
        ),
    }


def seller_snapshot(user: User, location: str = "", total_sales: int = 0) -> Seller:
    """Copy the seller's current profile onto a new listing."""
    return Seller(
        name=user.username,
        rating=0.0,
        joined_at=user.joined_at,
        location=location,
        total_sales=total_sales,
    )


def create_listing(
    catalog: CatalogStore,
    notifier: Notifier,
    seller: User,
    form: ListingForm,
) -> Product | None:
    """Validate *form* and list it under *seller*."""
    errors = ListingValidator.validate(form)
    if errors:
        _reject(notifier, errors)
        return None

    draft = ProductDraft(
        seller_id=seller.id,
        seller=seller_snapshot(seller, location=form.location),
        **_form_fields(form),  # type: ignore[arg-type]
    )
    return catalog.add(draft)


def _owned(
    catalog: CatalogStore,
    notifier: Notifier,
    user: User,
    product_id: str,
) -> Product | None:
    product = catalog.get_by_id(product_id)
    if product is None:
        notifier.notify("Error", "Product not found", Severity.ERROR)
        return None
    if product.seller_id != user.id:
        logger.warning(
            "User %s tried to modify product %s owned by %s",
            user.id, product_id, product.seller_id,
        )
        notifier.notify(
            "Not allowed",
            "You can only change your own listings.",
            Severity.ERROR,
        )
        return None
    return product


def edit_listing(
    catalog: CatalogStore,
    notifier: Notifier,
    user: User,
    product_id: str,
    form: ListingForm,
) -> Product | None:
    """Apply an edited form to one of *user*'s listings."""
    if _owned(catalog, notifier, user, product_id) is None:
        return None
    errors = ListingValidator.validate(form)
    if errors:
        _reject(notifier, errors)
        return None
    return catalog.update(product_id, _form_fields(form))


def delete_listing(
    catalog: CatalogStore,
    notifier: Notifier,
    user: User,
    product_id: str,
) -> bool:
    """Withdraw one of *user*'s listings. Returns whether it was removed."""
    if _owned(catalog, notifier, user, product_id) is None:
        return False
    catalog.remove(product_id)
    return True


def my_listings(catalog: CatalogStore, user: User) -> list[Product]:
    """The user's listings, newest first."""
    return sorted(
        catalog.list_by_seller(user.id),
        key=lambda p: p.created_at,
        reverse=True,
    )
