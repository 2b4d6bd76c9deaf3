from __future__ import annotations

import logging
from typing import Optional

from .context import SaveContext
from .errors import SaveValidationError, StorageError
from .history.codec import decode_history, encode_history
from .storage.base import KeyValueStore

logger = logging.getLogger(__name__)


class HistoryPersistence:
    """Reads and writes the context's SaveHistory under a slot key."""

    def __init__(self, context: SaveContext, store: KeyValueStore, indent: Optional[int] = 2) -> None:
        self.context = context
        self.store = store
        self.indent = indent

    def write(self, slot_key: str) -> bool:
        """Serialize the live history into ``slot_key`` and flush the store.

        Returns False, without touching the store, if serialization produced
        nothing. Store failures are logged and also reported as False.
        """
        text = encode_history(self.context.history, indent=self.indent)
        if not text:
            logger.warning("Serialized save history is empty; not writing slot '%s'", slot_key)
            return False
        try:
            self.store.set(slot_key, text)
            self.store.flush()
        except StorageError as exc:
            logger.error("I/O error while writing slot '%s': %s", slot_key, exc)
            return False
        logger.info("Saved history to slot '%s' (%d save points)", slot_key, self.context.history.num_save_points)
        return True

    def read(self, slot_key: str) -> bool:
        """Replace the live history with the one stored under ``slot_key``.

        The live history is left untouched if the slot is empty or cannot be
        decoded.
        """
        text = self.store.get(slot_key)
        if not text:
            logger.warning("No save data stored under slot '%s'", slot_key)
            return False
        try:
            history = decode_history(text)
        except SaveValidationError as exc:
            logger.warning("Failed to decode slot '%s': %s", slot_key, exc)
            return False
        self.context.history = history
        logger.info("Loaded history from slot '%s' (%d save points)", slot_key, history.num_save_points)
        return True

    def delete(self, slot_key: str) -> None:
        self.store.delete(slot_key)
        try:
            self.store.flush()
        except StorageError as exc:
            logger.error("I/O error while deleting slot '%s': %s", slot_key, exc)
            return
        logger.info("Deleted slot '%s'", slot_key)

    def exists(self, slot_key: str) -> bool:
        return self.store.has(slot_key)
