from ..theme.keys import validate_theme_type
from .adaptive import adaptive_resolver
from .definitions import (
    ALL_STYLES,
    DEFAULT_STYLE,
    STYLE_DEFINITIONS,
    STYLE_LABELS,
    StyleEntry,
    StyleResult,
    validate_style,
)
from .muted import MUTED_STYLE
from .neon import NEON_STYLE
from .pastel import PASTEL_STYLE
from .resolvers import ResolveContext, static_resolver
from .tinted import TINTED_STYLE
from .vibrant import VIBRANT_STYLE

# Tables for every style except adaptive, which has none
STATIC_STYLE_CONFIGS = {
    "pastel": PASTEL_STYLE,
    "vibrant": VIBRANT_STYLE,
    "muted": MUTED_STYLE,
    "tinted": TINTED_STYLE,
    "neon": NEON_STYLE,
}

STYLE_RESOLVERS = {name: static_resolver(config) for name, config in STATIC_STYLE_CONFIGS.items()}
STYLE_RESOLVERS["adaptive"] = adaptive_resolver


def get_style_resolver(style):
    """Return the resolver for a style name.

    Raises:
        ValueError: If the style is unknown
    """
    return STYLE_RESOLVERS[validate_style(style)]


def resolve(style, theme_type, key, base_hue, hue_offset=0, theme_colors=None):
    """Resolve the pre-blend tint for one palette key.

    Args:
        style: Style name
        theme_type: dark, light, hcDark or hcLight
        key: Managed palette key
        base_hue: Workspace base hue
        hue_offset: Harmony offset for the key's element
        theme_colors: Optional theme colors (used by adaptive)

    Returns:
        StyleResult: (tint OKLCH, hue_only_blend)
    """
    resolver = get_style_resolver(style)
    validate_theme_type(theme_type)
    return resolver(theme_type, key, ResolveContext(base_hue, hue_offset, theme_colors))


__all__ = [
    "ALL_STYLES",
    "DEFAULT_STYLE",
    "STATIC_STYLE_CONFIGS",
    "STYLE_DEFINITIONS",
    "STYLE_LABELS",
    "ResolveContext",
    "StyleEntry",
    "StyleResult",
    "adaptive_resolver",
    "get_style_resolver",
    "resolve",
    "static_resolver",
    "validate_style",
]
