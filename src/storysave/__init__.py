"""Save-game coordination for narrative scenes.

Keeps a rewindable history of save points, persists it to a key-value store,
and decides where narrative execution resumes after a scene or save loads.
"""

from .config import DEFAULT_SAVE_DATA_KEY, SaveConfig
from .context import SaveContext
from .errors import SaveError, SaveValidationError, StorageError
from .history import SaveHistory, SavePoint
from .manager import SaveManager
from .narrative import Flowchart, SavePointDescriptor, SceneSavePoints
from .resolver import ResumeResolver
from .scheduler import LoadScheduler, PendingAction, PendingKind

__all__ = [
    "DEFAULT_SAVE_DATA_KEY",
    "Flowchart",
    "LoadScheduler",
    "PendingAction",
    "PendingKind",
    "ResumeResolver",
    "SaveConfig",
    "SaveContext",
    "SaveError",
    "SaveHistory",
    "SaveManager",
    "SavePoint",
    "SavePointDescriptor",
    "SaveValidationError",
    "SceneSavePoints",
    "StorageError",
]

__version__ = "0.1.0"
