# tests/helpers.py

"""Builders shared by the store and service tests."""

import tempfile
import unittest
from decimal import Decimal
from pathlib import Path

from src.models.product import ProductDraft, Seller
from src.services.notifier import Notifier, Severity
from src.storage.local_storage import LocalStorage


def draft(
    title: str = "Desk Lamp",
    price: str = "25.00",
    category: str = "Home & Garden",
    seller_id: str = "1",
    featured: bool = False,
    sub_category: str | None = None,
) -> ProductDraft:
    """Create a minimal ProductDraft."""
    return ProductDraft(
        title=title,
        description=f"A used {title.lower()}",
        category=category,
        sub_category=sub_category,
        price=Decimal(price),
        seller_id=seller_id,
        seller=Seller(name=f"seller{seller_id}"),
        featured=featured,
    )


class StorageTestCase(unittest.TestCase):
    """TestCase with a throwaway storage directory and recording notifier."""

    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.data_dir = Path(tmp.name)
        self.storage = LocalStorage(self.data_dir)
        self.notifier = Notifier()

    def titles(self) -> list[str]:
        return [n.title for n in self.notifier.history]

    def errors(self) -> list[str]:
        return [
            n.message for n in self.notifier.history
            if n.severity is Severity.ERROR
        ]
