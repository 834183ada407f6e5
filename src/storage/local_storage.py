# src/storage/local_storage.py

"""File-backed key-value storage, one JSON document per key."""

import json
import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Any

from src.config.settings import Settings

logger = logging.getLogger("ecofinds.storage")

_SAFE_KEY_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


class LocalStorage:
    """Persist JSON-serialisable values under string keys.

    Reads and writes are synchronous. A write lands in a temporary file
    that then replaces the target, so readers never observe a partial
    document. Processes sharing a directory are not coordinated: the
    last writer wins.
    """

    def __init__(self, root: Path | None = None) -> None:
        self.root: Path = root or Settings.DATA_DIR
        self.root.mkdir(parents=True, exist_ok=True)
        logger.debug("LocalStorage initialised at %s", self.root)

    def _path_for(self, key: str) -> Path:
        if not _SAFE_KEY_RE.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.root / f"{key}.json"

    def get_item(self, key: str) -> Any | None:
        """Return the stored value, or ``None`` when absent or unreadable."""
        path = self._path_for(key)
        if not path.exists():
            return None
        try:
            with open(path, encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as exc:
            logger.warning(
                "Ignoring corrupt document for key '%s' (%s)", key, exc,
            )
            return None

    def set_item(self, key: str, value: Any) -> None:
        """Serialise *value* and atomically replace the stored document."""
        path = self._path_for(key)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{key}.", suffix=".tmp", dir=self.root,
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(value, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Wrote key '%s' to %s", key, path)

    def remove_item(self, key: str) -> None:
        """Delete the document for *key*; absent keys are ignored."""
        self._path_for(key).unlink(missing_ok=True)
        logger.debug("Removed key '%s'", key)

    def keys(self) -> list[str]:
        """Return every stored key, sorted."""
        return sorted(p.stem for p in self.root.glob("*.json"))

    def clear(self) -> int:
        """Remove every stored document. Returns how many were removed."""
        removed = 0
        for key in self.keys():
            self.remove_item(key)
            removed += 1
        logger.info("Storage cleared (%d keys removed)", removed)
        return removed
