from ..color.convert import normalize_hex
from .keys import (
    ALL_THEME_COLOR_KEYS,
    EDITOR_BACKGROUND,
    EDITOR_FOREGROUND,
    FALLBACK_KEYS,
    FOREGROUND,
    key_definition,
)


def get_color_for_key(key, theme_colors):
    """Find the theme color to blend a managed key with.

    Lookup order: the key itself, its mapped fallback key (e.g. the side bar
    for section headers), then editor.foreground or editor.background
    depending on whether the key is a foreground or background color.

    Args:
        key: Managed palette key
        theme_colors: Mapping of theme color key to hex, or None

    Returns:
        str or None: Hex color, or None when the theme has nothing usable
    """
    info = key_definition(key)
    if not theme_colors:
        return None

    if theme_colors.get(key):
        return theme_colors[key]

    fallback = FALLBACK_KEYS.get(key)
    if fallback and theme_colors.get(fallback):
        return theme_colors[fallback]

    if info.color_type == FOREGROUND:
        return theme_colors.get(EDITOR_FOREGROUND)
    return theme_colors.get(EDITOR_BACKGROUND)


def normalize_theme_colors(colors):
    """Validate and canonicalize a theme color mapping.

    Known keys are kept with their hex values uppercased; unknown keys are
    dropped so arbitrary theme files can be passed in whole.

    Raises:
        ValueError: If a known key has a malformed hex value
    """
    normalized = {}
    for key in ALL_THEME_COLOR_KEYS:
        value = colors.get(key)
        if value:
            try:
                normalized[key] = normalize_hex(value)
            except ValueError as e:
                raise ValueError(f"{key}: {e}") from e
    return normalized
