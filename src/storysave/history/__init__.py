"""Save history: the ordered timeline of save points and its redo buffer."""

from .model import HISTORY_VERSION, SaveHistory, SavePoint
from .codec import decode_history, encode_history

__all__ = [
    "HISTORY_VERSION",
    "SaveHistory",
    "SavePoint",
    "decode_history",
    "encode_history",
]
