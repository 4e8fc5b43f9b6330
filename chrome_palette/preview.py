"""
Preview data for comparing styles and harmonies.

Previews cover the main background/foreground pair of each tintable
element at a fixed set of sample hues, independent of any workspace. The
workspace preview uses the workspace's own hue and, when theme colors are
given, blends with them the same way compute_tint does.
"""

from collections import namedtuple

from .color.blend import blend_directed, effective_hue_direction
from .color.convert import hex_to_oklch, oklch_to_hex
from .color.hash import compute_base_hue
from .config import DEFAULT_BLEND_FACTOR
from .harmony import (
    ALL_HARMONIES,
    DEFAULT_HARMONY,
    HARMONY_DEFINITIONS,
    offset_for,
    validate_harmony,
)
from .styles import (
    ALL_STYLES,
    STYLE_LABELS,
    ResolveContext,
    get_style_resolver,
    validate_style,
)
from .theme.colors import get_color_for_key
from .theme.keys import ELEMENT_KEY_PAIRS, validate_theme_type
from .tint import majority_hue_direction

# OKLCH-calibrated hues: red, orange, yellow, green, teal, cyan, blue, purple
SAMPLE_HUES = (29, 55, 100, 145, 185, 235, 265, 305)

HUE_LABELS = {
    29: "Red",
    55: "Orange",
    100: "Yellow",
    145: "Green",
    185: "Teal",
    235: "Cyan",
    265: "Blue",
    305: "Purple",
}

ElementColors = namedtuple("ElementColors", ["background", "foreground"])

# name: style or harmony name; hue_colors: one {element: ElementColors} per sample hue
Preview = namedtuple("Preview", ["name", "label", "hue_colors"])

WorkspacePreview = namedtuple(
    "WorkspacePreview",
    ["identifier", "base_hue", "colors", "is_blended", "blend_factor", "target_blend_factors"],
)


def _resolve_key(resolver, theme_type, key, context, theme_colors, factor, direction):
    tint, hue_only = resolver(theme_type, key, context)
    theme_hex = get_color_for_key(key, theme_colors)
    if not theme_hex or factor is None or factor <= 0:
        return oklch_to_hex(tint)

    key_direction = effective_hue_direction(tint.h, hex_to_oklch(theme_hex).h, direction)
    return oklch_to_hex(blend_directed(tint, theme_hex, factor, hue_only, key_direction))


def generate_colors_at_hue(
    style,
    theme_type,
    hue,
    harmony=DEFAULT_HARMONY,
    theme_colors=None,
    blend_factor=None,
    target_blend_factors=None,
):
    """Background/foreground colors for every tintable element at one hue.

    Returns:
        dict: element -> ElementColors
    """
    validate_theme_type(theme_type)
    resolver = get_style_resolver(style)
    target_blend_factors = target_blend_factors or {}
    direction = majority_hue_direction(hue, theme_colors) if theme_colors else None

    colors = {}
    for element, (bg_key, fg_key) in ELEMENT_KEY_PAIRS.items():
        context = ResolveContext(hue, offset_for(harmony, element), theme_colors)
        factor = target_blend_factors.get(element, blend_factor)
        colors[element] = ElementColors(
            _resolve_key(resolver, theme_type, bg_key, context, theme_colors, factor, direction),
            _resolve_key(resolver, theme_type, fg_key, context, theme_colors, factor, direction),
        )
    return colors


def generate_style_preview(style, theme_type):
    return Preview(
        style,
        STYLE_LABELS[validate_style(style)],
        [generate_colors_at_hue(style, theme_type, hue) for hue in SAMPLE_HUES],
    )


def generate_all_style_previews(theme_type):
    return [generate_style_preview(style, theme_type) for style in ALL_STYLES]


def generate_harmony_preview(harmony, style, theme_type):
    return Preview(
        harmony,
        HARMONY_DEFINITIONS[validate_harmony(harmony)]["label"],
        [generate_colors_at_hue(style, theme_type, hue, harmony) for hue in SAMPLE_HUES],
    )


def generate_all_harmony_previews(style, theme_type):
    return [generate_harmony_preview(harmony, style, theme_type) for harmony in ALL_HARMONIES]


def generate_workspace_preview(
    identifier,
    style,
    theme_type,
    harmony=DEFAULT_HARMONY,
    seed=0,
    theme_colors=None,
    blend_factor=DEFAULT_BLEND_FACTOR,
    target_blend_factors=None,
):
    """Preview colors for a workspace, blended with the theme when possible.

    Blending happens only when theme colors are given and at least one
    blend factor (default or per-element) is above zero.

    Returns:
        WorkspacePreview
    """
    hue = compute_base_hue(identifier, seed)
    target_blend_factors = target_blend_factors or {}

    has_any_blend = blend_factor > 0 or any(f > 0 for f in target_blend_factors.values())
    is_blended = bool(theme_colors) and has_any_blend

    if is_blended:
        colors = generate_colors_at_hue(
            style, theme_type, hue, harmony, theme_colors, blend_factor, target_blend_factors
        )
    else:
        colors = generate_colors_at_hue(style, theme_type, hue, harmony)

    return WorkspacePreview(
        identifier=identifier,
        base_hue=hue,
        colors=colors,
        is_blended=is_blended,
        blend_factor=blend_factor if is_blended else None,
        target_blend_factors=target_blend_factors or None,
    )
