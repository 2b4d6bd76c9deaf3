from __future__ import annotations

import logging
from typing import Optional

from .config import SaveConfig
from .context import SaveContext
from .events.handlers import SavePointLoadedHandlers
from .events.types import EventType, SavePointAdded
from .narrative import SceneQuery
from .persistence import HistoryPersistence
from .resolver import ResumeResolver
from .scheduler import LoadScheduler, PendingAction
from .storage.base import KeyValueStore

logger = logging.getLogger(__name__)


class SaveManager:
    """Manages the save history and provides the save/load operations.

    Loading is deferred: ``load`` only queues the request, and the history is
    read and resumed on the next ``tick``. Call ``enable`` so scene and save
    point signals on the context's bus reach the scheduler.
    """

    def __init__(
        self,
        context: SaveContext,
        store: KeyValueStore,
        scene_query: SceneQuery,
        handlers: Optional[SavePointLoadedHandlers] = None,
        config: Optional[SaveConfig] = None,
    ) -> None:
        self.context = context
        self.config = config or SaveConfig()
        self.persistence = HistoryPersistence(context, store, indent=self.config.indent)
        self.resolver = ResumeResolver(scene_query, handlers)
        self.scheduler = LoadScheduler(self.resolver, self._load_saved_game)
        self._enabled = False

    # Lifecycle

    def enable(self) -> None:
        if self._enabled:
            return
        self.scheduler.attach(self.context.bus)
        self._enabled = True

    def disable(self) -> None:
        if not self._enabled:
            return
        self.scheduler.detach(self.context.bus)
        self._enabled = False

    @property
    def enabled(self) -> bool:
        return self._enabled

    def tick(self) -> Optional[PendingAction]:
        """Run any previously scheduled load action."""
        return self.scheduler.tick()

    # Internal

    def _load_saved_game(self, slot_key: str) -> bool:
        if not self.persistence.read(slot_key):
            return False
        self.context.history.clear_rewound_save_points()
        self._load_latest_save_point()
        return True

    def _load_latest_save_point(self) -> None:
        latest = self.context.history.latest_save_point
        if latest is not None:
            self.resolver.resolve(latest.key)

    def _slot(self, slot_key: Optional[str]) -> str:
        return slot_key if slot_key is not None else self.config.default_slot

    # Public API

    @property
    def start_scene(self) -> Optional[str]:
        """The scene that should be loaded when restarting a game."""
        return self.context.start_scene

    @start_scene.setter
    def start_scene(self, value: Optional[str]) -> None:
        self.context.start_scene = value

    @property
    def num_save_points(self) -> int:
        return self.context.history.num_save_points

    @property
    def num_rewound_save_points(self) -> int:
        return self.context.history.num_rewound_save_points

    def save(self, slot_key: Optional[str] = None) -> bool:
        """Write the save history to persistent storage."""
        return self.persistence.write(self._slot(slot_key))

    def load(self, slot_key: Optional[str] = None) -> None:
        """Load the save history and resume at its latest save point on the next tick."""
        self.scheduler.request_load(self._slot(slot_key))

    def delete(self, slot_key: Optional[str] = None) -> None:
        self.persistence.delete(self._slot(slot_key))

    def save_data_exists(self, slot_key: Optional[str] = None) -> bool:
        return self.persistence.exists(self._slot(slot_key))

    def add_save_point(self, key: str, description: str = "") -> None:
        """Create a save point and add it to the history.

        Any rewound save points are discarded first.
        """
        self.context.history.add_save_point(key, description)
        self.context.bus.publish(EventType.SAVE_POINT_ADDED, SavePointAdded(key, description))

    def rewind(self) -> None:
        """Rewind to the previous save point and resume there.

        The first save point is never rewound; rewinding with a single point
        just resumes at it again.
        """
        history = self.context.history
        if history.num_save_points > 0:
            if history.num_save_points > 1:
                history.rewind()
            self._load_latest_save_point()

    def fast_forward(self) -> None:
        """Fast forward to the next rewound save point and resume there."""
        history = self.context.history
        if history.num_rewound_save_points > 0:
            history.fast_forward()
            self._load_latest_save_point()

    def clear_history(self) -> None:
        self.context.history.clear()

    def get_debug_info(self) -> str:
        return self.context.history.get_debug_info()
