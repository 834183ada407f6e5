# tests/test_local_storage.py

"""Tests for the file-backed key-value storage."""

import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from src.storage.local_storage import LocalStorage


class TestLocalStorage(unittest.TestCase):
    """get/set/remove/keys/clear over a temporary directory."""

    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.root = Path(tmp.name) / "nested" / "data"
        self.storage = LocalStorage(self.root)

    def test_creates_root_directory(self) -> None:
        self.assertTrue(self.root.is_dir())

    def test_missing_key_is_none(self) -> None:
        self.assertIsNone(self.storage.get_item("nothing"))

    def test_set_then_get(self) -> None:
        value = [{"id": "1", "price": "9.99", "title": "Café table"}]
        self.storage.set_item("ecofinds-products", value)
        self.assertEqual(self.storage.get_item("ecofinds-products"), value)

    def test_overwrite_replaces_document(self) -> None:
        self.storage.set_item("k", [1, 2, 3])
        self.storage.set_item("k", [])
        self.assertEqual(self.storage.get_item("k"), [])

    def test_no_temp_files_left_behind(self) -> None:
        self.storage.set_item("k", {"a": 1})
        self.assertEqual([p.name for p in self.root.iterdir()], ["k.json"])

    def test_failed_write_keeps_previous_document(self) -> None:
        """An error mid-write leaves the old value intact."""
        self.storage.set_item("k", {"v": 1})
        with patch(
            "src.storage.local_storage.json.dump", side_effect=OSError("disk full")
        ):
            with self.assertRaises(OSError):
                self.storage.set_item("k", {"v": 2})
        self.assertEqual(self.storage.get_item("k"), {"v": 1})
        self.assertEqual(len(list(self.root.iterdir())), 1)

    def test_corrupt_document_reads_as_none(self) -> None:
        (self.root / "k.json").write_text("[1, 2", encoding="utf-8")
        with self.assertLogs("ecofinds.storage", level="WARNING"):
            self.assertIsNone(self.storage.get_item("k"))

    def test_remove_item(self) -> None:
        self.storage.set_item("k", 1)
        self.storage.remove_item("k")
        self.storage.remove_item("k")
        self.assertIsNone(self.storage.get_item("k"))

    def test_keys_and_clear(self) -> None:
        self.storage.set_item("b", 1)
        self.storage.set_item("a", 2)
        self.assertEqual(self.storage.keys(), ["a", "b"])
        self.assertEqual(self.storage.clear(), 2)
        self.assertEqual(self.storage.keys(), [])

    def test_rejects_path_like_keys(self) -> None:
        for key in ["../escape", "a/b", ""]:
            with self.subTest(key=key):
                with self.assertRaises(ValueError):
                    self.storage.set_item(key, 1)


if __name__ == "__main__":
    unittest.main()
