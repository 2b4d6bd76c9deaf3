from __future__ import annotations

import json
import logging
from functools import lru_cache
from importlib import resources
from typing import Any, Dict, Optional

from jsonschema import Draft7Validator

from ..errors import SaveValidationError
from .model import HISTORY_VERSION, SaveHistory

logger = logging.getLogger(__name__)

_SCHEMA_PKG = "storysave.schemas"
_SCHEMA_FILE = "save_history.schema.json"


@lru_cache(maxsize=1)
def _history_validator() -> Draft7Validator:
    with resources.files(_SCHEMA_PKG).joinpath(_SCHEMA_FILE).open("rb") as fh:
        schema = json.load(fh)
    logger.debug("Loaded save history schema %s", schema.get("$id"))
    return Draft7Validator(schema)


def encode_history(history: SaveHistory, *, indent: Optional[int] = 2) -> str:
    """Encode a SaveHistory to a JSON string."""
    return json.dumps(history.to_dict(), ensure_ascii=False, sort_keys=True, indent=indent)


def decode_history(text: str) -> SaveHistory:
    """Decode JSON text into a SaveHistory with schema validation and version migration.

    Raises:
        SaveValidationError: if the text is not valid JSON, does not match the
            schema, or was written by a newer version.
    """
    try:
        data = json.loads(text)
    except (TypeError, ValueError, RecursionError) as e:
        raise SaveValidationError(f"Invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise SaveValidationError("Save history must be a JSON object")

    errors = sorted(_history_validator().iter_errors(data), key=lambda e: [str(p) for p in e.path])
    if errors:
        for err in errors:
            logger.warning("Save history schema error at %s: %s", list(err.path), err.message)
        first = errors[0]
        path = "/".join(str(p) for p in first.path) or "<root>"
        raise SaveValidationError(f"Invalid save history at {path}: {first.message}")

    version = int(data["version"])
    if version != HISTORY_VERSION:
        data = migrate_data(data, from_version=version, to_version=HISTORY_VERSION)

    return SaveHistory.from_dict(data)


def migrate_data(data: Dict[str, Any], from_version: int, to_version: int) -> Dict[str, Any]:
    """Migrate serialized history between versions.

    HISTORY_VERSION is 1, so there are no stepwise migrations yet.
    """
    if from_version == to_version:
        return data

    if from_version > to_version:
        raise SaveValidationError(
            f"Save history version {from_version} is newer than supported {to_version}."
        )

    data["version"] = to_version
    return data
