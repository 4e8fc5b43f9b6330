from collections import namedtuple

# lightness: OKLCH lightness (0-1)
# chroma_factor: share of the max in-gamut chroma at that lightness and hue
StyleEntry = namedtuple("StyleEntry", ["lightness", "chroma_factor"])

# tint: pre-blend OKLCH color
# hue_only_blend: blending with the theme moves the hue only, keeping L and C
StyleResult = namedtuple("StyleResult", ["tint", "hue_only_blend"])

# Order is the display order, most vivid first
STYLE_DEFINITIONS = {
    "neon": {
        "label": "Neon",
        "description": "Maximum chroma with elevated lightness for vivid glow",
        "order": 0,
    },
    "vibrant": {
        "label": "Vibrant",
        "description": "Higher saturation for bolder, more noticeable colors",
        "order": 1,
    },
    "pastel": {
        "label": "Pastel",
        "description": "Soft, muted tones that blend gently with any theme",
        "order": 2,
    },
    "muted": {
        "label": "Muted",
        "description": "Desaturated, subtle tones for minimal visual impact",
        "order": 3,
    },
    "tinted": {
        "label": "Tinted",
        "description": "Very subtle color hints while retaining hue variation",
        "order": 4,
    },
    "adaptive": {
        "label": "Adaptive",
        "description": "Preserves theme's lightness/chroma, shifts only the hue",
        "order": 5,
    },
}

DEFAULT_STYLE = "pastel"

ALL_STYLES = tuple(sorted(STYLE_DEFINITIONS, key=lambda s: STYLE_DEFINITIONS[s]["order"]))

STYLE_LABELS = {s: STYLE_DEFINITIONS[s]["label"] for s in ALL_STYLES}


def validate_style(style):
    if style not in STYLE_DEFINITIONS:
        raise ValueError(f"Unknown style: {style!r} (expected one of {', '.join(ALL_STYLES)})")
    return style
