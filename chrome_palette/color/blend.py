"""
Blending a generated tint with an existing theme color.

Two methods are available:

- hueShift: interpolate in OKLCH. The hue travels around the color wheel
  either along the shorter arc or along an explicit direction, so a group
  of elements can be made to rotate the same way toward the theme.
- overlay: alpha-composite the tint over the theme color in linear sRGB.
"""

from .convert import (
    OKLCH,
    clamp_to_gamut,
    hex_to_linear_rgb,
    hex_to_oklch,
    linear_rgb_to_hex,
    oklch_to_hex,
)
from .hue import wrap_hue

CLOCKWISE = "cw"
COUNTER_CLOCKWISE = "ccw"
HUE_DIRECTIONS = (CLOCKWISE, COUNTER_CLOCKWISE)

BLEND_METHOD_DEFINITIONS = {
    "overlay": {
        "label": "Overlay",
        "description": "Alpha compositing in linear sRGB for colors closer to the theme",
        "order": 0,
    },
    "hueShift": {
        "label": "Hue Shift",
        "description": "OKLCH interpolation with directed hue for perceptually uniform blending",
        "order": 1,
    },
}

DEFAULT_BLEND_METHOD = "hueShift"

ALL_BLEND_METHODS = tuple(
    sorted(BLEND_METHOD_DEFINITIONS, key=lambda m: BLEND_METHOD_DEFINITIONS[m]["order"])
)


def _clamp_factor(factor):
    return max(0.0, min(1.0, factor))


def _check_direction(direction):
    if direction is not None and direction not in HUE_DIRECTIONS:
        raise ValueError(f"Invalid hue direction: {direction!r}")


def hue_difference(from_hue, to_hue, direction=None):
    """Signed degrees to travel from one hue to another.

    Args:
        from_hue: Start hue
        to_hue: Target hue
        direction: "cw" (increasing hue), "ccw" (decreasing hue) or None for
            the shorter arc. An exactly opposite hue counts as clockwise.

    Returns:
        float: Positive for clockwise travel, negative for counter-clockwise
    """
    _check_direction(direction)
    diff = wrap_hue(to_hue) - wrap_hue(from_hue)

    if direction == CLOCKWISE:
        if diff < 0:
            diff += 360
    elif direction == COUNTER_CLOCKWISE:
        if diff > 0:
            diff -= 360
    else:
        if diff > 180:
            diff -= 360
        elif diff <= -180:
            diff += 360

    return diff


def blend_hue(from_hue, to_hue, factor, direction=None):
    """Interpolate between two hues around the color wheel."""
    diff = hue_difference(from_hue, to_hue, direction)
    return wrap_hue(wrap_hue(from_hue) + diff * factor)


def hue_blend_direction(from_hue, to_hue):
    """Direction a shortest-arc blend from `from_hue` to `to_hue` would take."""
    return CLOCKWISE if hue_difference(from_hue, to_hue) >= 0 else COUNTER_CLOCKWISE


def effective_hue_direction(from_hue, to_hue, override=None):
    """Resolve the rotation to use when blending from one hue to another.

    Args:
        from_hue: Tint hue
        to_hue: Theme hue
        override: Forced direction, returned as-is when given

    Returns:
        "cw", "ccw", or None when the hues are equal and no rotation is needed
    """
    _check_direction(override)
    if override is not None:
        return override
    if wrap_hue(from_hue) == wrap_hue(to_hue):
        return None
    return hue_blend_direction(from_hue, to_hue)


def blend_directed(tint, theme_hex, factor, hue_only=False, direction=None):
    """Blend an OKLCH tint toward a theme color.

    With `hue_only` the tint keeps its lightness and chroma and only the hue
    moves toward the theme hue; otherwise all three channels are
    interpolated. When `direction` is given the hue follows that rotation
    even if it is the longer arc.

    Args:
        tint: OKLCH tint color
        theme_hex: Theme color as hex
        factor: 0 keeps the tint, 1 gives the theme color (clamped to [0, 1])
        hue_only: Blend the hue channel only
        direction: "cw", "ccw" or None for the shorter arc

    Returns:
        OKLCH: Blended color, clamped to the sRGB gamut

    Raises:
        ValueError: If theme_hex is not a valid hex color
    """
    tint = OKLCH(*tint)
    theme = hex_to_oklch(theme_hex)
    factor = _clamp_factor(factor)
    if factor <= 0:
        return tint

    hue = blend_hue(tint.h, theme.h, factor, direction)
    if hue_only:
        return clamp_to_gamut(OKLCH(tint.l, tint.c, hue))

    return clamp_to_gamut(
        OKLCH(
            tint.l * (1 - factor) + theme.l * factor,
            tint.c * (1 - factor) + theme.c * factor,
            hue,
        )
    )


def blend_with_theme(tint, theme_hex, factor):
    """Shortest-arc blend of all OKLCH channels."""
    return blend_directed(tint, theme_hex, factor)


def blend_hue_only(tint, theme_hex, factor):
    """Shortest-arc blend of the hue channel only."""
    return blend_directed(tint, theme_hex, factor, hue_only=True)


def overlay_blend(tint_hex, theme_hex, factor):
    """Composite the tint over the theme color in linear sRGB.

    factor is the theme's share: 0 returns the tint, 1 the theme color.
    """
    tint_rgb = hex_to_linear_rgb(tint_hex)
    theme_rgb = hex_to_linear_rgb(theme_hex)
    factor = _clamp_factor(factor)
    return linear_rgb_to_hex(tint_rgb * (1 - factor) + theme_rgb * factor)


def blend_to_hex(method, tint, tint_hex, theme_hex, factor, hue_only, direction=None):
    """Blend with the given method and return the final hex color."""
    if method == "hueShift":
        return oklch_to_hex(blend_directed(tint, theme_hex, factor, hue_only, direction))
    if method == "overlay":
        return overlay_blend(tint_hex, theme_hex, factor)
    raise ValueError(f"Unknown blend method: {method!r}")
