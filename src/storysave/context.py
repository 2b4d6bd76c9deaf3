from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .events.event_bus import EventBus
from .history.model import SaveHistory


@dataclass
class SaveContext:
    """State shared by the save subsystem, constructed once at startup.

    ``history`` is replaced wholesale when a saved game is read back. Only
    the SaveManager that owns the context (and its persistence adapter)
    writes to it, always from the thread that drives the ticks.

    Attributes:
        history: The live save history.
        bus: Bus carrying scene/save point signals.
        start_scene: Scene to (re)load when the game restarts; consumed by the
            host's scene loader.
    """

    history: SaveHistory = field(default_factory=SaveHistory)
    bus: EventBus = field(default_factory=EventBus)
    start_scene: Optional[str] = None
