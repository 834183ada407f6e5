# tests/test_catalog_store.py

"""Tests for the persisted, indexed product catalog."""

from decimal import Decimal
from unittest.mock import patch

from src.config.settings import Settings
from src.storage.catalog_store import CatalogStore
from tests.helpers import StorageTestCase, draft


class TestCatalogSeeding(StorageTestCase):
    """Loading from storage or falling back to sample data."""

    def test_empty_storage_seeds_sample_products(self) -> None:
        """A fresh directory is seeded and the seed is persisted."""
        catalog = CatalogStore(self.storage, self.notifier)
        self.assertEqual(len(catalog), 6)
        self.assertEqual(
            len(self.storage.get_item(Settings.PRODUCTS_KEY)), 6
        )

    def test_seed_none_starts_empty(self) -> None:
        """Passing seed=None gives an empty catalog."""
        catalog = CatalogStore(self.storage, self.notifier, seed=None)
        self.assertEqual(len(catalog), 0)

    def test_reload_reproduces_records(self) -> None:
        """Persist then reload yields identical records in order."""
        first = CatalogStore(self.storage, self.notifier)
        first.add(draft("Road Bike", "300.00", "Sports"))
        first.remove("2")

        second = CatalogStore(self.storage, self.notifier)
        self.assertEqual(second.all(), first.all())

    def test_malformed_record_skipped(self) -> None:
        """A broken record is dropped, the rest still load."""
        good = CatalogStore(self.storage, self.notifier).all()[0].to_dict()
        self.storage.set_item(
            Settings.PRODUCTS_KEY, [good, {"title": "no id"}]
        )
        catalog = CatalogStore(self.storage, self.notifier)
        self.assertEqual(len(catalog), 1)

    def test_corrupt_document_reseeds(self) -> None:
        """Unparseable JSON is treated as absent."""
        path = self.data_dir / f"{Settings.PRODUCTS_KEY}.json"
        path.write_text("{not json", encoding="utf-8")
        catalog = CatalogStore(self.storage, self.notifier)
        self.assertEqual(len(catalog), 6)


class TestCatalogMutations(StorageTestCase):
    """add / update / remove behaviour."""

    def setUp(self) -> None:
        super().setUp()
        self.catalog = CatalogStore(self.storage, self.notifier, seed=None)

    def test_add_assigns_id_and_timestamp(self) -> None:
        """add() returns a stored product with store-owned fields."""
        product = self.catalog.add(draft())
        self.assertTrue(product.id)
        self.assertIsNotNone(product.created_at.tzinfo)
        self.assertIs(self.catalog.get_by_id(product.id), product)
        self.assertIn("Product added", self.titles())

    def test_add_ids_are_unique(self) -> None:
        """Every add gets a distinct identifier."""
        ids = {self.catalog.add(draft(f"Item {i}")).id for i in range(20)}
        self.assertEqual(len(ids), 20)

    def test_add_accepts_negative_price(self) -> None:
        """The store does not validate prices."""
        product = self.catalog.add(draft(price="-5.00"))
        self.assertEqual(product.price, Decimal("-5.00"))

    def test_add_persists_immediately(self) -> None:
        """The stored document reflects the add before it returns."""
        product = self.catalog.add(draft())
        stored = self.storage.get_item(Settings.PRODUCTS_KEY)
        self.assertEqual([p["id"] for p in stored], [product.id])

    def test_update_merges_fields(self) -> None:
        """Partial changes are merged into the existing record."""
        product = self.catalog.add(draft(price="10.00"))
        updated = self.catalog.update(
            product.id, {"title": "Brass Lamp", "price": "12.50"}
        )
        assert updated is not None
        self.assertEqual(updated.title, "Brass Lamp")
        self.assertEqual(updated.price, Decimal("12.50"))
        self.assertEqual(updated.description, product.description)
        self.assertEqual(self.catalog.get_by_id(product.id), updated)

    def test_update_preserves_protected_fields(self) -> None:
        """id, seller_id and created_at survive any payload."""
        product = self.catalog.add(draft(seller_id="7"))
        updated = self.catalog.update(
            product.id,
            {"id": "hijack", "seller_id": "99", "created_at": "x", "title": "New"},
        )
        assert updated is not None
        self.assertEqual(updated.id, product.id)
        self.assertEqual(updated.seller_id, "7")
        self.assertEqual(updated.created_at, product.created_at)
        self.assertIsNone(self.catalog.get_by_id("hijack"))

    def test_update_keeps_seller_snapshot(self) -> None:
        """A seller payload is ignored; memory and disk stay in step."""
        product = self.catalog.add(draft())
        updated = self.catalog.update(
            product.id, {"seller": {"name": "mallory"}, "title": "Renamed"}
        )
        assert updated is not None
        self.assertEqual(updated.seller, product.seller)
        self.assertEqual(updated.title, "Renamed")

        reopened = CatalogStore(self.storage, self.notifier)
        self.assertEqual(reopened.get_by_id(product.id), updated)

    def test_failed_write_leaves_state_unchanged(self) -> None:
        """A persistence error keeps the previous in-memory snapshot."""
        product = self.catalog.add(draft(price="10.00"))
        with patch.object(
            self.storage, "set_item", side_effect=OSError("disk full")
        ):
            with self.assertRaises(OSError):
                self.catalog.update(product.id, {"price": "99.00"})
        self.assertEqual(self.catalog.get_by_id(product.id), product)

        self.catalog.add(draft("Next"))
        reopened = CatalogStore(self.storage, self.notifier)
        self.assertEqual(reopened.all(), self.catalog.all())

    def test_update_bad_price_notifies(self) -> None:
        """A non-numeric price is reported and nothing changes."""
        product = self.catalog.add(draft(price="10.00"))
        result = self.catalog.update(product.id, {"price": "abc"})
        self.assertIsNone(result)
        self.assertEqual(self.catalog.get_by_id(product.id), product)
        self.assertIn("Invalid product details", self.errors())

    def test_update_bad_specifications_notifies(self) -> None:
        """Specification entries with unexpected keys are rejected."""
        product = self.catalog.add(draft())
        result = self.catalog.update(
            product.id, {"specifications": [{"label": "Size"}]}
        )
        self.assertIsNone(result)
        self.assertEqual(self.catalog.get_by_id(product.id), product)
        self.assertIn("Invalid product details", self.errors())

    def test_update_ignores_unknown_fields(self) -> None:
        """Unknown field names are dropped."""
        product = self.catalog.add(draft())
        updated = self.catalog.update(product.id, {"colour": "red"})
        self.assertEqual(updated, product)

    def test_update_unknown_id_reports_not_found(self) -> None:
        """Updating a missing id notifies and leaves the list alone."""
        self.catalog.add(draft())
        before = self.catalog.all()
        result = self.catalog.update("missing", {"title": "X"})
        self.assertIsNone(result)
        self.assertEqual(self.catalog.all(), before)
        self.assertIn("Product not found", self.errors())

    def test_remove_then_get_is_absent(self) -> None:
        """remove() deletes the record."""
        product = self.catalog.add(draft())
        self.catalog.remove(product.id)
        self.assertIsNone(self.catalog.get_by_id(product.id))
        self.assertNotIn(product.id, self.catalog)

    def test_remove_is_idempotent(self) -> None:
        """Removing twice is a silent no-op the second time."""
        product = self.catalog.add(draft())
        self.catalog.add(draft("Other"))
        self.catalog.remove(product.id)
        count = len(self.notifier.history)
        self.catalog.remove(product.id)
        self.assertEqual(len(self.catalog), 1)
        self.assertEqual(len(self.notifier.history), count)

    def test_mutation_does_not_alter_previous_snapshot(self) -> None:
        """Lists handed out earlier are not changed by later writes."""
        self.catalog.add(draft("A"))
        snapshot = self.catalog.all()
        self.catalog.add(draft("B"))
        self.assertEqual(len(snapshot), 1)


class TestCatalogLookups(StorageTestCase):
    """Index-backed read operations."""

    def setUp(self) -> None:
        super().setUp()
        self.catalog = CatalogStore(self.storage, self.notifier, seed=None)
        self.a = self.catalog.add(draft("A", category="Books", seller_id="1"))
        self.b = self.catalog.add(
            draft("B", category="Sports", seller_id="2", featured=True)
        )
        self.c = self.catalog.add(
            draft("C", category="Books", seller_id="1", sub_category="Comics")
        )

    def test_list_by_seller_insertion_order(self) -> None:
        self.assertEqual(self.catalog.list_by_seller("1"), [self.a, self.c])
        self.assertEqual(self.catalog.list_by_seller("nobody"), [])

    def test_list_by_category(self) -> None:
        self.assertEqual(self.catalog.list_by_category("Books"), [self.a, self.c])

    def test_list_by_sub_category(self) -> None:
        self.assertEqual(
            self.catalog.list_by_category("Books", "Comics"), [self.c]
        )

    def test_list_featured(self) -> None:
        self.assertEqual(self.catalog.list_featured(), [self.b])

    def test_indexes_follow_updates(self) -> None:
        """Changing category or featured flag moves the product."""
        self.catalog.update(self.a.id, {"category": "Sports", "featured": True})
        self.assertEqual(
            [p.id for p in self.catalog.list_by_category("Sports")],
            [self.a.id, self.b.id],
        )
        self.assertEqual(len(self.catalog.list_featured()), 2)

    def test_indexes_follow_removal(self) -> None:
        self.catalog.remove(self.c.id)
        self.assertEqual(self.catalog.list_by_seller("1"), [self.a])
        self.assertEqual(self.catalog.list_by_category("Books"), [self.a])
