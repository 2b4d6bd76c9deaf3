from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional

from ..errors import StorageError
from .base import KeyValueStore

logger = logging.getLogger(__name__)


class JsonFileStore(KeyValueStore):
    """Single JSON file holding every slot as ``{key: text}``.

    The file is read lazily on first access. Changes stay in memory until
    ``flush``, which replaces the file atomically so a crash mid-write never
    leaves a truncated store behind.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._data: Optional[Dict[str, str]] = None
        self._dirty = False

    def _load(self) -> Dict[str, str]:
        if self._data is not None:
            return self._data
        self._data = {}
        if not self.path.exists():
            logger.debug("Store file does not exist yet: %s", self.path)
            return self._data
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.error("Failed to read store %s, treating it as empty: %s", self.path, exc)
            return self._data
        if not isinstance(raw, dict):
            logger.error("Store %s is malformed (not an object), treating it as empty", self.path)
            return self._data
        self._data = {str(k): v for k, v in raw.items() if isinstance(v, str)}
        return self._data

    def get(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        self._load()[key] = value
        self._dirty = True

    def has(self, key: str) -> bool:
        return key in self._load()

    def delete(self, key: str) -> None:
        if self._load().pop(key, None) is not None:
            self._dirty = True

    def flush(self) -> None:
        if not self._dirty:
            return
        payload = json.dumps(self._load(), ensure_ascii=False, sort_keys=True, indent=2)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            logger.debug("Writing store to temporary file: %s", tmp_path)
            with open(tmp_path, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except OSError as exc:
            raise StorageError(f"Failed to write store {self.path}: {exc}") from exc
        self._dirty = False
