# src/filters/product_validator.py

"""Validation of seller-entered listing forms before they reach the catalog."""

import logging
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from src.config.settings import Settings
from src.models.category import find_category

logger = logging.getLogger("ecofinds.filters")


@dataclass
class ListingForm:
    """Raw values as typed into the sell / edit form."""

    title: str
    description: str
    category: str
    price: str
    sub_category: str = ""
    image: str = ""
    condition: str = ""
    location: str = ""
    specifications: list[tuple[str, str]] = field(default_factory=list)


class ListingValidator:
    """Owns the listing invariants: non-blank title, known category,
    finite non-negative price."""

    @staticmethod
    def parse_price(raw: str) -> Decimal | None:
        """Parse a price string into a two-place Decimal.

        Returns ``None`` for anything non-numeric, non-finite or negative.
        """
        try:
            value = Decimal(raw.strip().replace(",", ""))
        except (InvalidOperation, AttributeError):
            return None
        if not value.is_finite() or value < 0:
            return None
        quantum = Decimal(1).scaleb(-Settings.PRICE_PLACES)
        return value.quantize(quantum, rounding=ROUND_HALF_UP)

    @staticmethod
    def validate(form: ListingForm) -> list[str]:
        """Return the problems with *form*; an empty list means valid."""
        errors: list[str] = []

        if not form.title.strip():
            errors.append("Title is required")

        category = find_category(form.category)
        if category is None:
            errors.append(f"Unknown category: {form.category!r}")
        elif form.sub_category and form.sub_category not in category.sub_categories:
            errors.append(
                f"Unknown sub-category {form.sub_category!r} for {category.name}"
            )

        if ListingValidator.parse_price(form.price) is None:
            errors.append("Price must be a non-negative number")

        for name, _value in form.specifications:
            if not name.strip():
                errors.append("Specification names cannot be blank")
                break

        if errors:
            logger.debug(
                "Listing form rejected (title=%s): %s", form.title, errors,
            )
        return errors
