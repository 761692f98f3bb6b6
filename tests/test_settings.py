import json
from pathlib import Path

from Settings import DEFAULT_SETTINGS, indent_unit_for, is_target_file, load_settings, save_settings


def test_load_settings_missing_file_returns_defaults(tmp_path: Path) -> None:
    """Без файла настроек используются значения по умолчанию."""
    assert load_settings(tmp_path / "missing.json") == DEFAULT_SETTINGS


def test_load_settings_merges_defaults(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"tab_size": 2, "custom": "kept"}), encoding="utf-8")
    settings = load_settings(path)
    assert settings["tab_size"] == 2
    assert settings["insert_spaces"] is True
    assert settings["custom"] == "kept"


def test_load_settings_invalid_json_falls_back(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_settings(path) == DEFAULT_SETTINGS


def test_load_settings_non_object_is_ignored(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert load_settings(path) == DEFAULT_SETTINGS


def test_defaults_are_not_shared_between_loads(tmp_path: Path) -> None:
    first = load_settings(tmp_path / "missing.json")
    first["file_extensions"].append(".txt")
    assert ".txt" not in load_settings(tmp_path / "missing.json")["file_extensions"]


def test_save_then_load(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    settings = dict(DEFAULT_SETTINGS, insert_spaces=False)
    assert save_settings(settings, path) is True
    assert load_settings(path)["insert_spaces"] is False


def test_save_settings_unwritable_path_returns_false(tmp_path: Path) -> None:
    assert save_settings(DEFAULT_SETTINGS, tmp_path / "no" / "such" / "dir.json") is False


def test_indent_unit_for_settings() -> None:
    assert indent_unit_for({"tab_size": 2, "insert_spaces": True}) == "  "
    assert indent_unit_for({"tab_size": 4, "insert_spaces": False}) == "\t"
    assert indent_unit_for({"tab_size": "wide", "insert_spaces": True}) == "    "


def test_is_target_file() -> None:
    assert is_target_file(DEFAULT_SETTINGS, None)
    assert is_target_file(DEFAULT_SETTINGS, "script.py")
    assert is_target_file(DEFAULT_SETTINGS, Path("gui.PYW"))
    assert not is_target_file(DEFAULT_SETTINGS, "notes.txt")
