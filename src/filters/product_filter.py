# src/filters/product_filter.py

"""Browse-page filtering of catalog products."""

import logging

from src.models.product import Product

logger = logging.getLogger("ecofinds.filters")


class ProductFilter:
    """Narrow a product list by search text and category."""

    @staticmethod
    def filter_by_search(
        products: list[Product],
        search_term: str | None,
    ) -> list[Product]:
        """Keep products whose title contains *search_term*, ignoring case."""
        if not search_term or not search_term.strip():
            return products

        needle = search_term.strip().lower()
        kept = [p for p in products if needle in p.title.lower()]
        logger.debug(
            "Search '%s' kept %d of %d products",
            needle, len(kept), len(products),
        )
        return kept

    @staticmethod
    def filter_by_category(
        products: list[Product],
        category: str | None,
    ) -> list[Product]:
        """Keep products in exactly *category*; ``None`` or "all" keeps everything."""
        if not category or category.lower() == "all":
            return products
        return [p for p in products if p.category == category]
