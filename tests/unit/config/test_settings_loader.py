from __future__ import annotations

import pytest

from attach_picker.config import ConfigurationError, flatten_settings, load_settings


def test_load_settings_flattens_nested_objects(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text('{"emmylua": {"debug": {"filterUEProcesses": true, "ueProcessNames": ["UE4Editor"]}}}', encoding="utf-8")

    settings = load_settings(path)

    assert settings == {
        "emmylua.debug.filterUEProcesses": True,
        "emmylua.debug.ueProcessNames": ["UE4Editor"],
    }


def test_load_settings_keeps_flat_dotted_keys(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text('{"emmylua.debug.autoAttachSingleProcess": false}', encoding="utf-8")

    assert load_settings(path) == {"emmylua.debug.autoAttachSingleProcess": False}


def test_load_settings_missing_file_raises(tmp_path):
    with pytest.raises(ConfigurationError):
        load_settings(tmp_path / "absent.json")


def test_load_settings_rejects_invalid_json(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_settings(path)


def test_load_settings_rejects_top_level_array(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("[]", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_settings(path)


def test_flatten_settings_mixed_shapes():
    assert flatten_settings({"a": {"b": 1}, "a.c": 2}) == {"a.b": 1, "a.c": 2}
