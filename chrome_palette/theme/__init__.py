from .colors import get_color_for_key, normalize_theme_colors
from .keys import (
    BACKGROUND_KEYS,
    ELEMENTS,
    FOREGROUND_KEYS,
    KEY_DEFINITIONS,
    MANAGED_KEYS,
    THEME_TYPES,
    TINT_TARGETS,
    is_dark_theme_type,
    validate_theme_type,
)
from .loader import load_theme

__all__ = [
    "BACKGROUND_KEYS",
    "ELEMENTS",
    "FOREGROUND_KEYS",
    "KEY_DEFINITIONS",
    "MANAGED_KEYS",
    "THEME_TYPES",
    "TINT_TARGETS",
    "get_color_for_key",
    "is_dark_theme_type",
    "load_theme",
    "normalize_theme_colors",
    "validate_theme_type",
]
