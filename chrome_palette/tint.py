"""
Tint computation for every managed palette key.

compute_tint runs in two passes. The first votes on a single hue rotation
direction from the base hue toward the theme's background colors; the
second resolves each key's tint and blends it with the theme using that one
direction. Deciding the direction per key instead would let elements at
different harmony offsets rotate toward the theme in opposite directions.
"""

import logging
from collections import namedtuple

from .color.blend import (
    CLOCKWISE,
    COUNTER_CLOCKWISE,
    DEFAULT_BLEND_METHOD,
    blend_to_hex,
    hue_blend_direction,
)
from .color.convert import OKLCH, hex_to_oklch, max_chroma, oklch_to_hex
from .color.hash import compute_base_hue
from .config import DEFAULT_BLEND_FACTOR, clamp_blend_factor, validate_blend_method
from .harmony import DEFAULT_HARMONY, offset_for, validate_harmony
from .styles import DEFAULT_STYLE, ResolveContext, get_style_resolver
from .theme.colors import get_color_for_key
from .theme.keys import (
    BACKGROUND,
    BACKGROUND_KEYS,
    ELEMENT_KEY_PAIRS,
    KEY_DEFINITIONS,
    MANAGED_KEYS,
    TINT_TARGETS,
    is_dark_theme_type,
    validate_theme_type,
)

logger = logging.getLogger(__name__)

# === BASE SWATCH ===

BASE_TINT_LIGHTNESS_DARK = 0.5
BASE_TINT_LIGHTNESS_LIGHT = 0.65
BASE_TINT_CHROMA_FACTOR = 0.7

# === RESULT TYPES ===

TintKeyDetail = namedtuple(
    "TintKeyDetail",
    [
        "key",
        "element",
        "color_type",
        "tint_hex",
        "theme_hex",
        "final_hex",
        "blend_factor",
        "enabled",
    ],
)

TintResult = namedtuple("TintResult", ["base_hue", "base_tint_hex", "keys"])


def compute_base_tint_hex(base_hue, theme_type):
    """Display-only swatch for a hue: neutral lightness, no theme blending."""
    if is_dark_theme_type(theme_type):
        lightness = BASE_TINT_LIGHTNESS_DARK
    else:
        lightness = BASE_TINT_LIGHTNESS_LIGHT
    chroma = max_chroma(lightness, base_hue) * BASE_TINT_CHROMA_FACTOR
    return oklch_to_hex(OKLCH(lightness, chroma, base_hue))


def majority_hue_direction(base_hue, theme_colors):
    """Vote on the rotation direction toward the theme's backgrounds.

    Every background palette key with a theme color (after fallback) casts
    one vote for the shortest-arc direction from `base_hue` to that color's
    hue. Ties go to clockwise.

    Args:
        base_hue: Workspace hue before harmony offsets
        theme_colors: Theme color mapping

    Returns:
        "cw", "ccw", or None when no background key has a theme color
    """
    clockwise = 0
    total = 0

    for key in BACKGROUND_KEYS:
        theme_hex = get_color_for_key(key, theme_colors)
        if not theme_hex:
            continue
        if hue_blend_direction(base_hue, hex_to_oklch(theme_hex).h) == CLOCKWISE:
            clockwise += 1
        total += 1

    if total == 0:
        return None

    direction = CLOCKWISE if clockwise >= total - clockwise else COUNTER_CLOCKWISE
    logger.debug("Majority hue direction %s (%d of %d votes clockwise)", direction, clockwise, total)
    return direction


def _validate_targets(targets):
    for target in targets:
        if target not in TINT_TARGETS:
            raise ValueError(f"Unknown tint target: {target!r}")
    return frozenset(targets)


def compute_tint(
    base_hue=None,
    identifier=None,
    targets=TINT_TARGETS,
    theme_type="dark",
    style=DEFAULT_STYLE,
    harmony=DEFAULT_HARMONY,
    theme_colors=None,
    blend_factor=DEFAULT_BLEND_FACTOR,
    target_blend_factors=None,
    seed=0,
    blend_method=DEFAULT_BLEND_METHOD,
):
    """Compute tint colors for every managed palette key.

    All keys are always computed; `enabled` on each detail only records
    whether the key's element is one of `targets`.

    Args:
        base_hue: Precomputed base hue; skips hashing when given
        identifier: Workspace identifier hashed with `seed` otherwise
        targets: Elements to mark as enabled
        theme_type: dark, light, hcDark or hcLight
        style: Style name
        harmony: Harmony name
        theme_colors: Theme color mapping, or None for no blending
        blend_factor: Default share of the theme color, clamped to 0-1
        target_blend_factors: Per-element blend factor overrides, clamped the same way
        seed: Hue seed used with `identifier`
        blend_method: "hueShift" or "overlay"

    Returns:
        TintResult

    Raises:
        ValueError: If neither base_hue nor identifier is given, or an
            option names an unknown theme type, style, harmony, method or
            element
    """
    if base_hue is None:
        if identifier is None:
            raise ValueError("compute_tint requires either base_hue or identifier")
        base_hue = compute_base_hue(identifier, seed)

    validate_theme_type(theme_type)
    base_tint_hex = compute_base_tint_hex(base_hue, theme_type)
    resolver = get_style_resolver(style)
    validate_harmony(harmony)
    validate_blend_method(blend_method)
    enabled_targets = _validate_targets(targets)
    target_blend_factors = target_blend_factors or {}
    _validate_targets(target_blend_factors)

    logger.debug(
        "Computing tint: hue=%s theme=%s style=%s harmony=%s method=%s",
        base_hue,
        theme_type,
        style,
        harmony,
        blend_method,
    )

    direction = None
    if theme_colors and blend_method == "hueShift":
        direction = majority_hue_direction(base_hue, theme_colors)

    context_colors = theme_colors or None
    details = []
    for key in MANAGED_KEYS:
        info = KEY_DEFINITIONS[key]
        context = ResolveContext(base_hue, offset_for(harmony, info.element), context_colors)
        tint, hue_only = resolver(theme_type, key, context)
        tint_hex = oklch_to_hex(tint)

        theme_hex = get_color_for_key(key, theme_colors)
        factor = target_blend_factors.get(info.element)
        if factor is None:
            factor = blend_factor
        factor = clamp_blend_factor(factor)

        if theme_hex and factor > 0:
            final_hex = blend_to_hex(
                blend_method, tint, tint_hex, theme_hex, factor, hue_only, direction
            )
        else:
            final_hex = tint_hex

        details.append(
            TintKeyDetail(
                key=key,
                element=info.element,
                color_type=info.color_type,
                tint_hex=tint_hex,
                theme_hex=theme_hex,
                final_hex=final_hex,
                blend_factor=factor,
                enabled=info.element in enabled_targets,
            )
        )

    return TintResult(base_hue, base_tint_hex, tuple(details))


# === CONVERTERS ===


def tint_result_to_palette(result):
    """Map enabled keys to their final hex colors."""
    return {d.key: d.final_hex for d in result.keys if d.enabled}


def tint_result_to_status_colors(result):
    """Base swatch plus the enabled main background color of each element."""
    element_backgrounds = {bg: element for element, (bg, _) in ELEMENT_KEY_PAIRS.items()}
    colors = {"baseTint": result.base_tint_hex}
    for detail in result.keys:
        if detail.enabled and detail.color_type == BACKGROUND and detail.key in element_backgrounds:
            colors[element_backgrounds[detail.key]] = detail.final_hex
    return colors
