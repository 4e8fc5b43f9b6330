import pytest

from chrome_palette.color.convert import oklch_to_hex
from chrome_palette.harmony import ALL_HARMONIES
from chrome_palette.preview import (
    SAMPLE_HUES,
    generate_all_harmony_previews,
    generate_all_style_previews,
    generate_colors_at_hue,
    generate_harmony_preview,
    generate_style_preview,
    generate_workspace_preview,
)
from chrome_palette.styles import ALL_STYLES, resolve
from chrome_palette.theme.keys import ELEMENT_KEY_PAIRS, TINT_TARGETS
from chrome_palette.tint import compute_tint

THEME = {"editor.background": "#1E1E1E", "editor.foreground": "#D4D4D4"}


def _final(result, key):
    return next(d.final_hex for d in result.keys if d.key == key)


def test_style_preview_shape():
    preview = generate_style_preview("pastel", "dark")
    assert preview.name == "pastel"
    assert preview.label == "Pastel"
    assert len(preview.hue_colors) == len(SAMPLE_HUES)
    for colors in preview.hue_colors:
        assert set(colors) == set(TINT_TARGETS)


def test_style_preview_colors_match_resolver():
    preview = generate_style_preview("neon", "light")
    for hue, colors in zip(SAMPLE_HUES, preview.hue_colors):
        expected = resolve("neon", "light", "statusBar.background", hue).tint
        assert colors["statusBar"].background == oklch_to_hex(expected)


def test_all_style_previews():
    assert [p.name for p in generate_all_style_previews("dark")] == list(ALL_STYLES)


def test_harmony_preview_applies_offsets():
    preview = generate_harmony_preview("duotone", "pastel", "dark")
    colors = preview.hue_colors[0]
    expected = resolve("pastel", "dark", "sideBar.background", SAMPLE_HUES[0], hue_offset=180).tint
    assert colors["sideBar"].background == oklch_to_hex(expected)


def test_all_harmony_previews():
    previews = generate_all_harmony_previews("muted", "hcDark")
    assert [p.name for p in previews] == list(ALL_HARMONIES)


def test_unknown_names_raise():
    with pytest.raises(ValueError):
        generate_style_preview("glossy", "dark")
    with pytest.raises(ValueError):
        generate_harmony_preview("rainbow", "pastel", "dark")
    with pytest.raises(ValueError):
        generate_colors_at_hue("pastel", "sepia", 10)


def test_workspace_preview_without_theme():
    preview = generate_workspace_preview("my-project", "pastel", "dark")
    assert preview.base_hue == 1
    assert not preview.is_blended
    assert preview.blend_factor is None
    assert preview.target_blend_factors is None

    result = compute_tint(identifier="my-project")
    for element, (bg_key, fg_key) in ELEMENT_KEY_PAIRS.items():
        assert preview.colors[element].background == _final(result, bg_key)
        assert preview.colors[element].foreground == _final(result, fg_key)


def test_workspace_preview_matches_blended_tint():
    preview = generate_workspace_preview(
        "my-project", "vibrant", "dark", theme_colors=THEME, target_blend_factors={"statusBar": 0}
    )
    assert preview.is_blended
    assert preview.blend_factor == 0.35
    assert preview.target_blend_factors == {"statusBar": 0}

    result = compute_tint(
        identifier="my-project",
        style="vibrant",
        theme_colors=THEME,
        target_blend_factors={"statusBar": 0},
    )
    for element, (bg_key, fg_key) in ELEMENT_KEY_PAIRS.items():
        assert preview.colors[element].background == _final(result, bg_key)
        assert preview.colors[element].foreground == _final(result, fg_key)


def test_workspace_preview_zero_blend_is_unblended():
    preview = generate_workspace_preview("my-project", "pastel", "dark", theme_colors=THEME, blend_factor=0)
    assert not preview.is_blended
    assert preview.colors == generate_workspace_preview("my-project", "pastel", "dark").colors
