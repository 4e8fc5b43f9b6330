"""
Color conversion between hex sRGB and OKLCH.

Pipeline: sRGB (gamma encoded) -> linear sRGB -> CIE XYZ (D65) -> LMS ->
OKLab -> OKLCH, and the exact inverse. The inverse matrices are computed
from the forward ones so a round trip only loses float precision.
"""

import math
import re
from collections import namedtuple

import numpy as np

from .hue import wrap_hue

OKLCH = namedtuple("OKLCH", ["l", "c", "h"])

_HEX_PATTERN = re.compile(r"#?[0-9a-fA-F]{6}")

# Linear sRGB -> CIE XYZ, D65 white
LINEAR_RGB_TO_XYZ = np.array(
    [
        [0.4124564, 0.3575761, 0.1804375],
        [0.2126729, 0.7151522, 0.0721750],
        [0.0193339, 0.1191920, 0.9503041],
    ]
)
XYZ_TO_LINEAR_RGB = np.linalg.inv(LINEAR_RGB_TO_XYZ)

# Ottosson's linear sRGB -> LMS matrix; the XYZ -> LMS step is derived from
# it so D65 white lands exactly on the neutral axis.
_LINEAR_RGB_TO_LMS = np.array(
    [
        [0.4122214708, 0.5363325363, 0.0514459929],
        [0.2119034982, 0.6806995451, 0.1073969566],
        [0.0883024619, 0.2817188376, 0.6299787005],
    ]
)
XYZ_TO_LMS = _LINEAR_RGB_TO_LMS @ XYZ_TO_LINEAR_RGB
LMS_TO_XYZ = np.linalg.inv(XYZ_TO_LMS)

LMS_TO_OKLAB = np.array(
    [
        [0.2104542553, 0.7936177850, -0.0040720468],
        [1.9779984951, -2.4285922050, 0.4505937099],
        [0.0259040371, 0.7827717662, -0.8086757660],
    ]
)
OKLAB_TO_LMS = np.linalg.inv(LMS_TO_OKLAB)

# Upper bound for the chroma search; no sRGB color exceeds ~0.37
MAX_CHROMA_SEARCH = 0.4
MAX_CHROMA_ITERATIONS = 24

# Tolerance on linear channels when testing gamut membership
GAMUT_EPSILON = 1e-6

# Below this chroma a color is treated as neutral gray (hue 0)
ACHROMATIC_CHROMA = 1e-6


def hex_to_rgb(hex_color):
    """Parse a 6-digit hex color (with or without '#') into 0-255 channels.

    Raises:
        ValueError: If the string is not a 6-digit hex color
    """
    if not isinstance(hex_color, str) or not _HEX_PATTERN.fullmatch(hex_color):
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    hex_color = hex_color.lstrip("#")
    return tuple(int(hex_color[i : i + 2], 16) for i in (0, 2, 4))


def rgb_to_hex(r, g, b):
    r, g, b = (max(0, min(255, int(v))) for v in (r, g, b))
    return f"#{r:02X}{g:02X}{b:02X}"


def normalize_hex(hex_color):
    """Return the canonical '#RRGGBB' uppercase form of a hex color."""
    return rgb_to_hex(*hex_to_rgb(hex_color))


def _srgb_to_linear(c):
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def _linear_to_srgb(c):
    if c <= 0.0031308:
        return 12.92 * c
    return 1.055 * (c ** (1 / 2.4)) - 0.055


def hex_to_linear_rgb(hex_color):
    """Convert a hex color to a linear sRGB vector with channels in [0, 1]."""
    r, g, b = hex_to_rgb(hex_color)
    return np.array([_srgb_to_linear(v / 255) for v in (r, g, b)])


def linear_rgb_to_hex(rgb):
    """Convert a linear sRGB vector to hex, clipping channels to [0, 1]."""
    channels = np.clip(np.asarray(rgb, dtype=float), 0.0, 1.0)
    encoded = [round(_linear_to_srgb(float(c)) * 255) for c in channels]
    return rgb_to_hex(*encoded)


def linear_rgb_to_oklch(rgb):
    """Convert a linear sRGB vector to OKLCH via XYZ and OKLab."""
    xyz = LINEAR_RGB_TO_XYZ @ np.asarray(rgb, dtype=float)
    lms = np.cbrt(XYZ_TO_LMS @ xyz)
    lightness, a, b = (float(v) for v in LMS_TO_OKLAB @ lms)

    chroma = math.hypot(a, b)
    if chroma < ACHROMATIC_CHROMA:
        return OKLCH(lightness, 0.0, 0.0)
    return OKLCH(lightness, chroma, wrap_hue(math.degrees(math.atan2(b, a))))


def oklch_to_linear_rgb(l, c, h):
    """Convert OKLCH to an (unclipped) linear sRGB vector.

    Channels outside [0, 1] mean the color is outside the sRGB gamut.
    """
    h_rad = math.radians(h)
    lab = np.array([l, c * math.cos(h_rad), c * math.sin(h_rad)])
    lms = (OKLAB_TO_LMS @ lab) ** 3
    return XYZ_TO_LINEAR_RGB @ (LMS_TO_XYZ @ lms)


def hex_to_oklch(hex_color):
    return linear_rgb_to_oklch(hex_to_linear_rgb(hex_color))


def is_in_gamut(l, c, h):
    """Check whether an OKLCH color maps inside the sRGB gamut."""
    rgb = oklch_to_linear_rgb(l, c, h)
    return bool(np.all(rgb >= -GAMUT_EPSILON) and np.all(rgb <= 1 + GAMUT_EPSILON))


def max_chroma(l, h):
    """Largest chroma at which (l, c, h) is still inside the sRGB gamut.

    Uses a fixed number of bisection steps so the result is deterministic.
    At lightness 0 or 1 the result is a small non-negative number.

    Args:
        l: OKLCH lightness (clamped to [0, 1])
        h: Hue angle in degrees

    Returns:
        float: Maximum in-gamut chroma
    """
    l = max(0.0, min(1.0, l))
    h = wrap_hue(h)

    low, high = 0.0, MAX_CHROMA_SEARCH
    if is_in_gamut(l, high, h):
        return high

    for _ in range(MAX_CHROMA_ITERATIONS):
        mid = (low + high) / 2
        if is_in_gamut(l, mid, h):
            low = mid
        else:
            high = mid

    return low


def clamp_to_gamut(color):
    """Clamp an OKLCH color into the sRGB gamut by reducing chroma only.

    Lightness is clamped to [0, 1], chroma to >= 0 and hue wrapped. In-gamut
    colors are returned unchanged apart from that normalization.
    """
    l, c, h = color
    l = max(0.0, min(1.0, l))
    c = max(0.0, c)
    h = wrap_hue(h)
    if is_in_gamut(l, c, h):
        return OKLCH(l, c, h)
    return OKLCH(l, max_chroma(l, h), h)


def oklch_to_hex(color):
    """Convert an OKLCH color to '#RRGGBB', clamping to gamut first."""
    l, c, h = clamp_to_gamut(color)
    return linear_rgb_to_hex(oklch_to_linear_rgb(l, c, h))


def relative_luminance(r, g, b):
    """Calculate relative luminance per WCAG 2.0"""

    def channel(c):
        c = c / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    return 0.2126 * channel(r) + 0.7152 * channel(g) + 0.0722 * channel(b)


def hex_luminance(hex_color):
    return relative_luminance(*hex_to_rgb(hex_color))


def contrast_ratio(lum1, lum2):
    """Calculate contrast ratio between two luminances"""
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)
