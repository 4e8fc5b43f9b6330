import json

import pytest
from PIL import Image

from chrome_palette.color.convert import hex_to_rgb
from chrome_palette.export import (
    create_preview_image,
    export_color_customizations,
    generate_tint_report,
    print_tint,
)
from chrome_palette.export.image import BAND_HEIGHT, CELL_WIDTH, GAP
from chrome_palette.preview import SAMPLE_HUES, generate_all_style_previews
from chrome_palette.theme.keys import KEY_DEFINITIONS, MANAGED_KEYS, TINT_TARGETS
from chrome_palette.tint import TintKeyDetail, TintResult, compute_tint


def _flat_result(hex_color, targets):
    """Every key the same color, so every element fails contrast."""
    keys = tuple(
        TintKeyDetail(
            key=key,
            element=KEY_DEFINITIONS[key].element,
            color_type=KEY_DEFINITIONS[key].color_type,
            tint_hex=hex_color,
            theme_hex=None,
            final_hex=hex_color,
            blend_factor=0.35,
            enabled=KEY_DEFINITIONS[key].element in targets,
        )
        for key in MANAGED_KEYS
    )
    return TintResult(0, hex_color, keys)


def test_export_color_customizations(tmp_path):
    result = compute_tint(identifier="my-project", targets=["statusBar"])
    path = tmp_path / "colors.json"
    export_color_customizations(result, path, identifier="my-project", style="pastel", theme_type="dark")

    data = json.loads(path.read_text())
    palette = data["workbench.colorCustomizations"]
    assert set(palette) == {"statusBar.background", "statusBar.foreground"}
    assert data["_base_hue"] == 1
    assert data["_base_tint"] == result.base_tint_hex
    assert data["_identifier"] == "my-project"
    assert data["_style"] == "pastel"
    assert data["_theme_type"] == "dark"
    assert "_harmony" not in data


def test_report_lists_every_key():
    result = compute_tint(base_hue=200, theme_type="light", style="muted")
    report, _ = generate_tint_report(result, theme_type="light", style="muted", harmony="uniform")
    assert "TINT REPORT" in report
    assert "Style:     muted" in report
    for key in MANAGED_KEYS:
        assert key in report


def test_report_flags_enabled_contrast_failures():
    result = _flat_result("#777777", targets=["titleBar", "sideBar"])
    report, issues = generate_tint_report(result)

    assert [issue[0] for issue in issues] == ["titleBar", "sideBar"]
    element, fg, bg, ratio = issues[0]
    assert fg == bg == "#777777"
    assert ratio == pytest.approx(1.0)
    assert "ISSUES FOUND: 2" in report
    assert "(disabled)" in report


def test_report_passes_with_good_contrast():
    result = _flat_result("#777777", targets=[])
    report, issues = generate_tint_report(result)
    assert issues == []
    assert "ALL ENABLED ELEMENTS PASS CONTRAST REQUIREMENTS" in report


def test_print_tint(capsys):
    result = compute_tint(identifier="my-project", targets=["titleBar"])
    print_tint(result, "dark")
    out = capsys.readouterr().out
    assert "WORKSPACE TINT (DARK THEME)" in out
    assert f"Base hue: 1  swatch: {result.base_tint_hex}" in out
    for element in TINT_TARGETS:
        assert element in out


def test_create_preview_image(tmp_path):
    previews = generate_all_style_previews("dark")[:2]
    path = tmp_path / "preview.png"
    size = create_preview_image(previews, path)

    columns = len(SAMPLE_HUES)
    expected_width = GAP + columns * (CELL_WIDTH + GAP)
    expected_height = GAP + 2 * (BAND_HEIGHT * len(TINT_TARGETS) + GAP)
    assert size == (expected_width, expected_height)

    with Image.open(path) as image:
        assert image.size == size
        first = previews[0].hue_colors[0]["titleBar"].background
        assert image.convert("RGB").getpixel((GAP + 1, GAP + 1)) == hex_to_rgb(first)


def test_create_preview_image_requires_previews(tmp_path):
    with pytest.raises(ValueError):
        create_preview_image([], tmp_path / "empty.png")
