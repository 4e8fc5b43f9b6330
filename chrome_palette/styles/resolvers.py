from collections import namedtuple

from ..color.convert import OKLCH, max_chroma
from ..color.hue import apply_hue_offset
from .definitions import StyleResult

# base_hue: workspace hue before any harmony offset
# hue_offset: harmony offset for the key's element
# theme_colors: theme color mapping, or None when no theme is known
ResolveContext = namedtuple(
    "ResolveContext", ["base_hue", "hue_offset", "theme_colors"], defaults=(0, None)
)


def static_resolver(config):
    """Wrap a static style table as a resolver.

    The element hue is the base hue plus the harmony offset. Chroma is the
    table's chroma factor times the largest in-gamut chroma at the table's
    lightness, so the tint never leaves sRGB.

    Args:
        config: Mapping of theme type -> palette key -> StyleEntry

    Returns:
        Callable (theme_type, key, context) -> StyleResult. A table that
        lacks the requested entry raises KeyError.
    """

    def resolve(theme_type, key, context):
        entry = config[theme_type][key]
        hue = apply_hue_offset(context.base_hue, context.hue_offset)
        chroma = max_chroma(entry.lightness, hue) * entry.chroma_factor
        return StyleResult(OKLCH(entry.lightness, chroma, hue), False)

    return resolve
