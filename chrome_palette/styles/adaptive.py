import logging

from ..color.convert import OKLCH, hex_to_oklch
from ..color.hue import apply_hue_offset
from ..theme.colors import get_color_for_key
from .definitions import StyleResult
from .pastel import PASTEL_STYLE
from .resolvers import static_resolver

logger = logging.getLogger(__name__)

# Used whenever the theme has no color for a key
_fallback_resolver = static_resolver(PASTEL_STYLE)


def adaptive_resolver(theme_type, key, context):
    """Keep the theme color's lightness and chroma, replace only its hue.

    Blending for this style moves the hue only, so a blend factor of 1
    restores the theme color and 0 gives the full workspace hue at the
    theme's own lightness and chroma.

    Falls back to the pastel table when no theme color is available.
    """
    theme_hex = get_color_for_key(key, context.theme_colors)
    if not theme_hex:
        logger.debug("No theme color for %s, using pastel values", key)
        return _fallback_resolver(theme_type, key, context)

    theme = hex_to_oklch(theme_hex)
    hue = apply_hue_offset(context.base_hue, context.hue_offset)
    return StyleResult(OKLCH(theme.l, theme.c, hue), True)
