"""
Color harmonies: per-element hue offsets applied on top of the base hue.

Ordered from least to most hue variation. The editor element is never
tinted, so every harmony gives it an offset of 0.
"""

from .color.hue import apply_hue_offset
from .theme.keys import ELEMENTS, validate_element

HARMONY_DEFINITIONS = {
    "uniform": {
        "label": "Uniform",
        "description": "Single hue across all elements",
        "order": 0,
    },
    "accent": {
        "label": "Accent",
        "description": "A 60 degree pop on the activity bar",
        "order": 1,
    },
    "gradient": {
        "label": "Gradient",
        "description": "Gentle hue sweep from title bar to status bar",
        "order": 2,
    },
    "analogous": {
        "label": "Analogous",
        "description": "Three adjacent hues spread across elements",
        "order": 3,
    },
    "undercurrent": {
        "label": "Undercurrent",
        "description": "Complementary accent on status bar",
        "order": 4,
    },
    "duotone": {
        "label": "Duotone",
        "description": "Complementary accent on activity and side bar",
        "order": 5,
    },
    "split-complementary": {
        "label": "Split-Complementary",
        "description": "Two hues flanking the complement",
        "order": 6,
    },
    "triadic": {
        "label": "Triadic",
        "description": "Three evenly-spaced hues for maximum variation",
        "order": 7,
    },
    "tetradic": {
        "label": "Tetradic",
        "description": "Four hues at 90 degree intervals",
        "order": 8,
    },
}

DEFAULT_HARMONY = "uniform"

ALL_HARMONIES = tuple(
    sorted(HARMONY_DEFINITIONS, key=lambda h: HARMONY_DEFINITIONS[h]["order"])
)

# Offsets in degrees for (editor, titleBar, statusBar, activityBar, sideBar)
HARMONY_CONFIGS = {
    "uniform": dict(zip(ELEMENTS, (0, 0, 0, 0, 0))),
    "accent": dict(zip(ELEMENTS, (0, 0, 0, 60, 0))),
    "gradient": dict(zip(ELEMENTS, (0, -30, 30, -15, 15))),
    "analogous": dict(zip(ELEMENTS, (0, -25, 25, 0, 0))),
    "undercurrent": dict(zip(ELEMENTS, (0, 0, 180, 0, 0))),
    "duotone": dict(zip(ELEMENTS, (0, 0, 0, 180, 180))),
    "split-complementary": dict(zip(ELEMENTS, (0, -150, 150, 0, 0))),
    "triadic": dict(zip(ELEMENTS, (0, -120, 120, 0, 0))),
    "tetradic": dict(zip(ELEMENTS, (0, 90, 180, 270, 0))),
}


def validate_harmony(harmony):
    if harmony not in HARMONY_CONFIGS:
        raise ValueError(
            f"Unknown harmony: {harmony!r} (expected one of {', '.join(ALL_HARMONIES)})"
        )
    return harmony


def offset_for(harmony, element):
    """Hue offset in degrees for an element under a harmony.

    Raises:
        ValueError: If the harmony or element is unknown
    """
    validate_harmony(harmony)
    validate_element(element)
    return HARMONY_CONFIGS[harmony][element]


def element_hue(base_hue, harmony, element):
    """Base hue with the element's harmony offset applied."""
    return apply_hue_offset(base_hue, offset_for(harmony, element))
