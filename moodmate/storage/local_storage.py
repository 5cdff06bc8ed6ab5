#!/usr/bin/env python3
"""
local_storage.py
-----------------
Durable key/value storage backed by one JSON document per key.

LocalStorage mirrors the browser localStorage contract the journal was
designed around: values are whole documents addressed by a string key,
read in full and rewritten in full. Each key lives in
<storage_dir>/<key>.json.

Writes go to a temporary file in the storage directory and are moved into
place with os.replace(), so readers never observe a half-written document.

Usage:
    from moodmate.storage.local_storage import LocalStorage

    storage = LocalStorage(config.storage_dir)
    storage.set_item("moodMateTheme", json.dumps("dark"))
    raw = storage.get_item("moodMateTheme")   # '"dark"'
    storage.remove_item("moodMateTheme")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
import re
import tempfile
from pathlib import Path
from typing import List, Optional

# --- Local imports ---
from moodmate.core.exceptions import PersistenceError
from moodmate.core.logging_manager import MoodMateLogger, safe_logger

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


class LocalStorage:
    """
    Directory-backed string storage.

    Attributes:
        storage_dir: Directory holding one <key>.json file per key
        logger: Optional logger for storage operations
    """

    def __init__(
        self, storage_dir: Path, logger: Optional[MoodMateLogger] = None
    ) -> None:
        self.storage_dir = Path(storage_dir)
        self.logger = logger

    def _path_for(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.storage_dir / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        """
        Read the raw document stored under key.

        Args:
            key: Storage key

        Returns:
            Document text, or None if the key is not set

        Raises:
            PersistenceError: If the document exists but cannot be read
        """
        path = self._path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(f"Cannot read '{key}': {e}") from e

    def set_item(self, key: str, value: str) -> None:
        """
        Store a document under key, replacing any previous value.

        Args:
            key: Storage key
            value: Document text

        Raises:
            PersistenceError: If the document cannot be written
        """
        path = self._path_for(key)
        tmp_name: Optional[str] = None
        try:
            self.storage_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{key}.", suffix=".tmp", dir=self.storage_dir
            )
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(value)
            os.replace(tmp_name, path)
            tmp_name = None
        except OSError as e:
            raise PersistenceError(f"Cannot write '{key}': {e}") from e
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

        safe_logger(self.logger).log_debug(
            "Stored item", {"key": key, "bytes": len(value.encode("utf-8"))}
        )

    def remove_item(self, key: str) -> None:
        """
        Delete the document stored under key. Missing keys are ignored.

        Raises:
            PersistenceError: If the document exists but cannot be deleted
        """
        path = self._path_for(key)
        try:
            path.unlink()
        except FileNotFoundError:
            return
        except OSError as e:
            raise PersistenceError(f"Cannot remove '{key}': {e}") from e

        safe_logger(self.logger).log_debug("Removed item", {"key": key})

    def keys(self) -> List[str]:
        """List the keys currently set."""
        if not self.storage_dir.is_dir():
            return []
        return sorted(path.stem for path in self.storage_dir.glob("*.json"))
