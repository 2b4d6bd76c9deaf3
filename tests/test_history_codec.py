import json

import pytest

from storysave.errors import SaveValidationError
from storysave.history import HISTORY_VERSION, SaveHistory, decode_history, encode_history


def test_encode_decode_preserves_both_sequences():
    history = SaveHistory()
    for key in ("intro", "forest", "castle", "throne"):
        history.add_save_point(key, f"At the {key}")
    history.rewind()
    history.rewind()

    text = encode_history(history)
    restored = decode_history(text)

    assert restored == history
    assert [p.key for p in restored.save_points] == ["intro", "forest"]
    assert [p.key for p in restored.rewound_save_points] == ["castle", "throne"]
    assert restored.save_points[1].description == "At the forest"


def test_encoded_text_carries_version():
    data = json.loads(encode_history(SaveHistory()))
    assert data["version"] == HISTORY_VERSION
    assert data["save_points"] == []


def test_compact_encoding():
    text = encode_history(SaveHistory(), indent=None)
    assert "\n" not in text


@pytest.mark.parametrize(
    "text",
    [
        "{ not json",
        "[]",
        '{"version": 1, "save_points": [{"description": "no key"}], "rewound_save_points": []}',
        '{"version": 1, "save_points": "nope", "rewound_save_points": []}',
        '{"save_points": [], "rewound_save_points": []}',
        "[" * 200000,
        '{"version": ' + "1" * 5000 + ', "save_points": [], "rewound_save_points": []}',
    ],
)
def test_invalid_documents_raise_validation_error(text):
    with pytest.raises(SaveValidationError):
        decode_history(text)


def test_newer_version_is_rejected():
    text = json.dumps({"version": HISTORY_VERSION + 1, "save_points": [], "rewound_save_points": []})
    with pytest.raises(SaveValidationError):
        decode_history(text)


def test_missing_description_defaults_to_empty():
    text = json.dumps({"version": 1, "save_points": [{"key": "a"}], "rewound_save_points": []})
    history = decode_history(text)
    assert history.save_points[0].description == ""
