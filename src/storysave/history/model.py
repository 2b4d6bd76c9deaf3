from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..errors import SaveValidationError

logger = logging.getLogger(__name__)

# Increment when making breaking changes to the serialized layout
HISTORY_VERSION = 1


@dataclass(frozen=True)
class SavePoint:
    """A named snapshot of narrative progress.

    The key correlates the point with a resumption target in a scene and is
    matched case-insensitively. Save points are never mutated once created.
    """

    key: str
    description: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.key, str):
            raise SaveValidationError("SavePoint.key must be a string")
        if not isinstance(self.description, str):
            raise SaveValidationError("SavePoint.description must be a string")

    def to_dict(self) -> Dict[str, Any]:
        return {"key": self.key, "description": self.description}

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "SavePoint":
        return SavePoint(key=data["key"], description=data.get("description", ""))


@dataclass
class SaveHistory:
    """Ordered list of save points plus a buffer of rewound points.

    Rewinding moves the newest active point to the front of the rewound
    buffer; fast forwarding moves it back. Recording new progress discards the
    rewound buffer, since it describes a future that no longer happens.

    The first save point can never be rewound past. ``rewind`` and
    ``fast_forward`` do nothing when their precondition does not hold, but
    callers are expected to check the counts first.
    """

    save_points: List[SavePoint] = field(default_factory=list)
    rewound_save_points: List[SavePoint] = field(default_factory=list)
    version: int = HISTORY_VERSION

    @property
    def num_save_points(self) -> int:
        return len(self.save_points)

    @property
    def num_rewound_save_points(self) -> int:
        return len(self.rewound_save_points)

    @property
    def latest_save_point(self) -> Optional[SavePoint]:
        return self.save_points[-1] if self.save_points else None

    def add_save_point(self, key: str, description: str = "") -> SavePoint:
        self.clear_rewound_save_points()
        point = SavePoint(key=key, description=description)
        self.save_points.append(point)
        logger.debug("Added save point '%s' (total=%d)", key, len(self.save_points))
        return point

    def rewind(self) -> bool:
        if len(self.save_points) <= 1:
            return False
        point = self.save_points.pop()
        self.rewound_save_points.insert(0, point)
        logger.debug("Rewound save point '%s'", point.key)
        return True

    def fast_forward(self) -> bool:
        if not self.rewound_save_points:
            return False
        point = self.rewound_save_points.pop(0)
        self.save_points.append(point)
        logger.debug("Fast forwarded to save point '%s'", point.key)
        return True

    def clear_rewound_save_points(self) -> None:
        self.rewound_save_points.clear()

    def clear(self) -> None:
        self.save_points.clear()
        self.rewound_save_points.clear()

    def get_debug_info(self) -> str:
        """Return a human readable listing of both sequences, in order."""
        lines = ["Save points:"]
        for index, point in enumerate(self.save_points):
            lines.append(f"  {index}: {point.key} - {point.description}")
        lines.append("Rewound save points:")
        for index, point in enumerate(self.rewound_save_points):
            lines.append(f"  {index}: {point.key} - {point.description}")
        return "\n".join(lines) + "\n"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "save_points": [p.to_dict() for p in self.save_points],
            "rewound_save_points": [p.to_dict() for p in self.rewound_save_points],
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "SaveHistory":
        return SaveHistory(
            save_points=[SavePoint.from_dict(p) for p in data.get("save_points", [])],
            rewound_save_points=[
                SavePoint.from_dict(p) for p in data.get("rewound_save_points", [])
            ],
            version=int(data.get("version", HISTORY_VERSION)),
        )
