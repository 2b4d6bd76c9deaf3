from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EventType:
    """Centralized event names used by the save subsystem."""

    # Inbound: the scene loader finished loading a scene
    SCENE_LOADED = "scene.loaded"

    # Inbound: a saved game finished loading and wants to resume at a key
    SAVE_POINT_LOADED = "save_point.loaded"

    # Outbound: a save point was appended to the history
    SAVE_POINT_ADDED = "save_point.added"


class LoadSceneMode(str, Enum):
    NORMAL = "normal"
    ADDITIVE = "additive"


@dataclass(frozen=True)
class SceneLoaded:
    scene_id: str
    mode: LoadSceneMode = LoadSceneMode.NORMAL


@dataclass(frozen=True)
class SavePointLoaded:
    key: str


@dataclass(frozen=True)
class SavePointAdded:
    key: str
    description: str = ""
