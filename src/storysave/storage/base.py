from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStore(ABC):
    """Interface for the host's persistent string store.

    Mirrors a PlayerPrefs-style API: values are strings addressed by a slot
    key, and nothing is guaranteed to be durable until ``flush`` is called.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored string, or None when the key is absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def has(self, key: str) -> bool:
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a key. Deleting an absent key is not an error."""

    @abstractmethod
    def flush(self) -> None:
        ...
