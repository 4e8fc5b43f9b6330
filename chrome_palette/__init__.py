"""Deterministic editor chrome colors from a workspace identifier."""

from .cache import TintCache
from .color import compute_base_hue, hex_to_oklch, max_chroma, oklch_to_hex
from .config import DEFAULT_BLEND_FACTOR, TintSettings, load_settings
from .harmony import ALL_HARMONIES, DEFAULT_HARMONY, offset_for
from .styles import ALL_STYLES, DEFAULT_STYLE, get_style_resolver
from .theme import get_color_for_key, load_theme
from .tint import (
    TintKeyDetail,
    TintResult,
    compute_tint,
    tint_result_to_palette,
    tint_result_to_status_colors,
)

__version__ = "0.1.0"

__all__ = [
    "ALL_HARMONIES",
    "ALL_STYLES",
    "DEFAULT_BLEND_FACTOR",
    "DEFAULT_HARMONY",
    "DEFAULT_STYLE",
    "TintCache",
    "TintKeyDetail",
    "TintResult",
    "TintSettings",
    "compute_base_hue",
    "compute_tint",
    "get_color_for_key",
    "get_style_resolver",
    "hex_to_oklch",
    "load_settings",
    "load_theme",
    "max_chroma",
    "offset_for",
    "oklch_to_hex",
    "tint_result_to_palette",
    "tint_result_to_status_colors",
]
