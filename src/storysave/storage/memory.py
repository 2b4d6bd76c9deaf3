from __future__ import annotations

from typing import Dict, Optional

from .base import KeyValueStore


class MemoryStore(KeyValueStore):
    """Dict-backed store for tests and embedding."""

    def __init__(self, data: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(data or {})
        self.flush_count = 0

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def has(self, key: str) -> bool:
        return key in self._data

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def flush(self) -> None:
        self.flush_count += 1

    def keys(self) -> list[str]:
        return sorted(self._data)
