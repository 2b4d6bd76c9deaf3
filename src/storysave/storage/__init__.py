"""String key-value stores that hold serialized save data."""

from .base import KeyValueStore
from .file import JsonFileStore
from .memory import MemoryStore

__all__ = ["KeyValueStore", "JsonFileStore", "MemoryStore"]
