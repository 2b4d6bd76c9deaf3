from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)

Observer = Callable[[str], None]


class SavePointLoadedHandlers:
    """Observers notified whenever a save point key is resolved.

    This is separate from the ``save_point.loaded`` bus signal: that signal
    asks for a resolution, these observers react to one. Observers registered
    with ``keys`` only hear about matching keys (case-insensitive).
    """

    def __init__(self) -> None:
        self._observers: List[Tuple[Observer, Optional[frozenset]]] = []

    def register(self, observer: Observer, keys: Optional[Iterable[str]] = None) -> None:
        key_filter = frozenset(k.casefold() for k in keys) if keys is not None else None
        self._observers.append((observer, key_filter))

    def unregister(self, observer: Observer) -> None:
        self._observers = [(o, f) for o, f in self._observers if o != observer]

    def __len__(self) -> int:
        return len(self._observers)

    def notify(self, save_point_key: str) -> None:
        folded = save_point_key.casefold()
        for observer, key_filter in list(self._observers):
            if key_filter is not None and folded not in key_filter:
                continue
            logger.debug("Notifying %s of loaded save point '%s'", observer, save_point_key)
            try:
                observer(save_point_key)
            except Exception:
                logger.exception("Unhandled exception in save point observer for '%s'", save_point_key)
