from .event_bus import Event, EventBus
from .handlers import SavePointLoadedHandlers
from .types import EventType, LoadSceneMode, SavePointAdded, SavePointLoaded, SceneLoaded

__all__ = [
    "Event",
    "EventBus",
    "EventType",
    "LoadSceneMode",
    "SavePointAdded",
    "SavePointLoaded",
    "SavePointLoadedHandlers",
    "SceneLoaded",
]
