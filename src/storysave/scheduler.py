"""Deferred load actions.

Scene loading is asynchronous relative to save data loading, so the
"scene loaded" and "save point loaded" notifications for one transition can
arrive in either order within a single update. Acting on the first one could
resume at the scene start before we learn a saved game is being restored.
Instead each notification only records what should happen, and the action
runs on the next tick once both have settled.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from .events.event_bus import Event, EventBus
from .events.types import EventType, LoadSceneMode
from .resolver import ResumeResolver

logger = logging.getLogger(__name__)


class PendingKind(str, Enum):
    IDLE = "idle"
    SCENE_START = "scene_start"
    HISTORY_KEY = "history_key"
    LOAD_SLOT = "load_slot"


@dataclass(frozen=True)
class PendingAction:
    """The single deferred action held by the scheduler.

    ``key`` is the save point key for HISTORY_KEY and the slot key for
    LOAD_SLOT; it is None otherwise.
    """

    kind: PendingKind = PendingKind.IDLE
    key: Optional[str] = None


IDLE = PendingAction()

SlotLoader = Callable[[str], bool]


class LoadScheduler:
    """Single-slot queue that runs at most one resume action per tick."""

    def __init__(self, resolver: ResumeResolver, slot_loader: SlotLoader) -> None:
        self.resolver = resolver
        self.slot_loader = slot_loader
        self._pending: PendingAction = IDLE

    @property
    def pending(self) -> PendingAction:
        return self._pending

    def attach(self, bus: EventBus) -> None:
        bus.subscribe(EventType.SCENE_LOADED, self._on_scene_loaded_event)
        bus.subscribe(EventType.SAVE_POINT_LOADED, self._on_save_point_loaded_event)

    def detach(self, bus: EventBus) -> None:
        bus.unsubscribe(EventType.SCENE_LOADED, self._on_scene_loaded_event)
        bus.unsubscribe(EventType.SAVE_POINT_LOADED, self._on_save_point_loaded_event)

    def _on_scene_loaded_event(self, event: Event) -> None:
        self.on_scene_loaded(event.payload.scene_id, event.payload.mode)

    def _on_save_point_loaded_event(self, event: Event) -> None:
        self.on_save_point_loaded(event.payload.key)

    def on_scene_loaded(self, scene_id: str, mode: LoadSceneMode = LoadSceneMode.NORMAL) -> None:
        # Additive loads bring in extra content, not a new transition
        if mode == LoadSceneMode.ADDITIVE:
            logger.debug("Ignoring additive load of scene '%s'", scene_id)
            return

        # Assume a normal scene start; a save point signal in the same
        # update overrides this.
        if self._pending.kind == PendingKind.IDLE:
            self._pending = PendingAction(PendingKind.SCENE_START)
            logger.debug("Scene '%s' loaded; queued scene start", scene_id)

    def on_save_point_loaded(self, save_point_key: str) -> None:
        self._pending = PendingAction(PendingKind.HISTORY_KEY, save_point_key)
        logger.debug("Queued resume at save point '%s'", save_point_key)

    def request_load(self, slot_key: str) -> None:
        self._pending = PendingAction(PendingKind.LOAD_SLOT, slot_key)
        logger.debug("Queued load of slot '%s'", slot_key)

    def tick(self) -> Optional[PendingAction]:
        """Run the pending action, if any, exactly once.

        The slot is cleared before the action runs, so anything the action
        queues is kept for the following tick.

        Returns:
            The action that ran, or None when idle.
        """
        action = self._pending
        if action.kind == PendingKind.IDLE:
            return None
        self._pending = IDLE

        logger.debug("Running deferred action %s", action)
        if action.kind == PendingKind.SCENE_START:
            self.resolver.resolve_start()
        elif action.kind == PendingKind.HISTORY_KEY:
            self.resolver.resolve(action.key)
        elif action.kind == PendingKind.LOAD_SLOT:
            self.slot_loader(action.key)
        return action
