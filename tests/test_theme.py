import json

import pytest

from chrome_palette.theme import (
    BACKGROUND_KEYS,
    FOREGROUND_KEYS,
    KEY_DEFINITIONS,
    MANAGED_KEYS,
    get_color_for_key,
    is_dark_theme_type,
    load_theme,
    normalize_theme_colors,
    validate_theme_type,
)


def test_managed_keys():
    assert len(MANAGED_KEYS) == 12
    assert MANAGED_KEYS[0] == "titleBar.activeBackground"
    assert MANAGED_KEYS[-1] == "sideBarSectionHeader.foreground"
    assert "editor.background" not in MANAGED_KEYS
    assert len(BACKGROUND_KEYS) == 6
    assert len(FOREGROUND_KEYS) == 6
    assert KEY_DEFINITIONS["sideBarSectionHeader.background"].element == "sideBar"


def test_theme_types():
    assert is_dark_theme_type("dark")
    assert is_dark_theme_type("hcDark")
    assert not is_dark_theme_type("light")
    assert not is_dark_theme_type("hcLight")
    with pytest.raises(ValueError):
        validate_theme_type("sepia")


FULL_COLORS = {
    "editor.background": "#1E1E1E",
    "editor.foreground": "#D4D4D4",
    "titleBar.activeBackground": "#3C3C3C",
    "statusBar.background": "#007ACC",
    "sideBar.background": "#252526",
    "sideBar.foreground": "#CCCCCC",
}


def test_direct_lookup():
    assert get_color_for_key("titleBar.activeBackground", FULL_COLORS) == "#3C3C3C"
    assert get_color_for_key("statusBar.background", FULL_COLORS) == "#007ACC"


def test_mapped_fallback():
    assert get_color_for_key("titleBar.inactiveBackground", FULL_COLORS) == "#3C3C3C"
    assert get_color_for_key("sideBarSectionHeader.background", FULL_COLORS) == "#252526"
    assert get_color_for_key("sideBarSectionHeader.foreground", FULL_COLORS) == "#CCCCCC"


def test_editor_fallback():
    assert get_color_for_key("activityBar.background", FULL_COLORS) == "#1E1E1E"
    assert get_color_for_key("statusBar.foreground", FULL_COLORS) == "#D4D4D4"


def test_missing_everywhere():
    assert get_color_for_key("statusBar.foreground", {"editor.background": "#000000"}) is None
    assert get_color_for_key("statusBar.background", {}) is None
    assert get_color_for_key("statusBar.background", None) is None


def test_unknown_key():
    with pytest.raises(ValueError):
        get_color_for_key("minimap.background", FULL_COLORS)


def test_normalize_theme_colors():
    colors = normalize_theme_colors(
        {"editor.background": "#1e1e1e", "statusBar.background": "007acc", "terminal.ansiRed": "#FF0000"}
    )
    assert colors == {"editor.background": "#1E1E1E", "statusBar.background": "#007ACC"}


def test_normalize_theme_colors_rejects_bad_hex():
    with pytest.raises(ValueError, match="statusBar.background"):
        normalize_theme_colors({"statusBar.background": "blue"})


def _write(tmp_path, data):
    path = tmp_path / "theme.json"
    path.write_text(json.dumps(data))
    return path


def test_load_theme_with_type(tmp_path):
    path = _write(tmp_path, {"type": "hcLight", "colors": {"editor.background": "#ffffff"}})
    colors, theme_type = load_theme(path)
    assert theme_type == "hcLight"
    assert colors == {"editor.background": "#FFFFFF"}


def test_load_theme_infers_type(tmp_path):
    _, theme_type = load_theme(_write(tmp_path, {"colors": {"editor.background": "#1E1E1E"}}))
    assert theme_type == "dark"
    _, theme_type = load_theme(_write(tmp_path, {"colors": {"editor.background": "#FAFAFA"}}))
    assert theme_type == "light"


def test_load_theme_bare_mapping(tmp_path):
    path = _write(
        tmp_path,
        {"_name": "Example", "editor.background": "#282C34", "statusBar.background": "#21252B"},
    )
    colors, theme_type = load_theme(path)
    assert colors == {"editor.background": "#282C34", "statusBar.background": "#21252B"}
    assert theme_type == "dark"


def test_load_theme_errors(tmp_path):
    with pytest.raises(ValueError):
        load_theme(_write(tmp_path, {"type": "sepia", "colors": {"editor.background": "#000000"}}))
    with pytest.raises(ValueError):
        load_theme(_write(tmp_path, {"colors": {}}))
    with pytest.raises(ValueError):
        load_theme(_write(tmp_path, ["#000000"]))
    with pytest.raises(OSError):
        load_theme(tmp_path / "missing.json")
