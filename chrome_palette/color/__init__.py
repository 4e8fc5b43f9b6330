from .blend import (
    ALL_BLEND_METHODS,
    BLEND_METHOD_DEFINITIONS,
    DEFAULT_BLEND_METHOD,
    HUE_DIRECTIONS,
    blend_directed,
    blend_hue,
    blend_hue_only,
    blend_to_hex,
    blend_with_theme,
    effective_hue_direction,
    hue_blend_direction,
    overlay_blend,
)
from .convert import (
    OKLCH,
    clamp_to_gamut,
    contrast_ratio,
    hex_luminance,
    hex_to_oklch,
    hex_to_rgb,
    is_in_gamut,
    max_chroma,
    normalize_hex,
    oklch_to_hex,
    relative_luminance,
    rgb_to_hex,
)
from .hash import compute_base_hue, hash_string
from .hue import apply_hue_offset, wrap_hue

__all__ = [
    "ALL_BLEND_METHODS",
    "BLEND_METHOD_DEFINITIONS",
    "DEFAULT_BLEND_METHOD",
    "HUE_DIRECTIONS",
    "OKLCH",
    "apply_hue_offset",
    "blend_directed",
    "blend_hue",
    "blend_hue_only",
    "blend_to_hex",
    "blend_with_theme",
    "clamp_to_gamut",
    "compute_base_hue",
    "contrast_ratio",
    "effective_hue_direction",
    "hash_string",
    "hex_luminance",
    "hex_to_oklch",
    "hex_to_rgb",
    "hue_blend_direction",
    "is_in_gamut",
    "max_chroma",
    "normalize_hex",
    "oklch_to_hex",
    "overlay_blend",
    "relative_luminance",
    "rgb_to_hex",
    "wrap_hue",
]
