from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

from platformdirs import user_data_dir

logger = logging.getLogger(__name__)

APP_NAME = "storysave"

DEFAULT_SAVE_DATA_KEY = "save_data"
DEFAULT_STORE_FILENAME = "prefs.json"

# Environment variable overrides (useful for tests and power users)
ENV_SAVE_PATH = "STORYSAVE_SAVE_PATH"
ENV_SLOT = "STORYSAVE_SLOT"


@dataclass
class SaveConfig:
    """Configuration for the save subsystem.

    Attributes:
        default_slot: Slot key used when save/load/delete are called without one.
        storage_path: JSON store file. None means the platform user data dir.
        indent: Indentation of the serialized history; None writes it compact.
        tick_rate: Target ticks per second for TickLoop.run. 0 runs unthrottled.
        max_steps: If set, TickLoop stops after this many ticks.
    """

    default_slot: str = DEFAULT_SAVE_DATA_KEY
    storage_path: Optional[Path] = None
    indent: Optional[int] = 2
    tick_rate: float = 60.0
    max_steps: Optional[int] = None

    def resolved_storage_path(self) -> Path:
        if self.storage_path is not None:
            return Path(self.storage_path).expanduser()
        return Path(user_data_dir(appname=APP_NAME, appauthor=False)) / DEFAULT_STORE_FILENAME

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SaveConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))
        values = {k: v for k, v in data.items() if k in known}
        if values.get("storage_path") is not None:
            values["storage_path"] = Path(values["storage_path"])
        return cls(**values)

    @classmethod
    def from_json(cls, path: Path) -> "SaveConfig":
        """Load configuration from a JSON file. Missing fields fall back to defaults."""
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")
        logger.info("Loaded save config from %s", path)
        return cls.from_dict(raw)

    def with_env(self) -> "SaveConfig":
        """Return a copy with environment overrides applied."""
        cfg = self
        save_path = os.getenv(ENV_SAVE_PATH)
        if save_path:
            cfg = replace(cfg, storage_path=Path(save_path))
        slot = os.getenv(ENV_SLOT)
        if slot:
            cfg = replace(cfg, default_slot=slot)
        return cfg

    @classmethod
    def from_env(cls) -> "SaveConfig":
        return cls().with_env()
