import json
from pathlib import Path

import pytest

from storysave.config import DEFAULT_SAVE_DATA_KEY, ENV_SAVE_PATH, ENV_SLOT, SaveConfig


def test_defaults():
    cfg = SaveConfig()
    assert cfg.default_slot == DEFAULT_SAVE_DATA_KEY == "save_data"
    assert cfg.indent == 2
    assert cfg.resolved_storage_path().name == "prefs.json"


def test_from_json_overrides_and_ignores_unknown(tmp_path: Path):
    path = tmp_path / "save.json"
    path.write_text(
        json.dumps({"default_slot": "slot9", "storage_path": str(tmp_path / "s.json"), "bogus": 1}),
        encoding="utf-8",
    )
    cfg = SaveConfig.from_json(path)
    assert cfg.default_slot == "slot9"
    assert cfg.resolved_storage_path() == tmp_path / "s.json"
    assert cfg.tick_rate == 60.0


def test_from_json_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        SaveConfig.from_json(tmp_path / "missing.json")


def test_env_overrides(tmp_path: Path, monkeypatch):
    monkeypatch.setenv(ENV_SAVE_PATH, str(tmp_path / "env.json"))
    monkeypatch.setenv(ENV_SLOT, "env_slot")
    cfg = SaveConfig.from_env()
    assert cfg.default_slot == "env_slot"
    assert cfg.resolved_storage_path() == tmp_path / "env.json"
