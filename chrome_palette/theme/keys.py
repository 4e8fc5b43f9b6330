"""
Metadata for every theme color key the engine reads or writes.

Keys are the editor's own color customization names. The managed keys are
the ones the engine generates colors for; `editor.*` keys are only read as
a fallback when a theme does not define a more specific color.
"""

from collections import namedtuple

# === THEME CLASSES ===

THEME_TYPES = ("dark", "light", "hcDark", "hcLight")
DARK_THEME_TYPES = ("dark", "hcDark")

# === ELEMENTS ===

ELEMENTS = ("editor", "titleBar", "statusBar", "activityBar", "sideBar")

# Editor is never tinted
TINT_TARGETS = ("titleBar", "statusBar", "activityBar", "sideBar")

BACKGROUND = "background"
FOREGROUND = "foreground"

# === COLOR KEYS ===

ColorKey = namedtuple("ColorKey", ["key", "element", "color_type", "managed"])

COLOR_KEY_DEFINITIONS = (
    ColorKey("editor.background", "editor", BACKGROUND, False),
    ColorKey("editor.foreground", "editor", FOREGROUND, False),
    ColorKey("titleBar.activeBackground", "titleBar", BACKGROUND, True),
    ColorKey("titleBar.activeForeground", "titleBar", FOREGROUND, True),
    ColorKey("titleBar.inactiveBackground", "titleBar", BACKGROUND, True),
    ColorKey("titleBar.inactiveForeground", "titleBar", FOREGROUND, True),
    ColorKey("statusBar.background", "statusBar", BACKGROUND, True),
    ColorKey("statusBar.foreground", "statusBar", FOREGROUND, True),
    ColorKey("activityBar.background", "activityBar", BACKGROUND, True),
    ColorKey("activityBar.foreground", "activityBar", FOREGROUND, True),
    ColorKey("sideBar.background", "sideBar", BACKGROUND, True),
    ColorKey("sideBar.foreground", "sideBar", FOREGROUND, True),
    ColorKey("sideBarSectionHeader.background", "sideBar", BACKGROUND, True),
    ColorKey("sideBarSectionHeader.foreground", "sideBar", FOREGROUND, True),
)

KEY_DEFINITIONS = {d.key: d for d in COLOR_KEY_DEFINITIONS}

ALL_THEME_COLOR_KEYS = tuple(d.key for d in COLOR_KEY_DEFINITIONS)
MANAGED_KEYS = tuple(d.key for d in COLOR_KEY_DEFINITIONS if d.managed)
BACKGROUND_KEYS = tuple(
    k for k in MANAGED_KEYS if KEY_DEFINITIONS[k].color_type == BACKGROUND
)
FOREGROUND_KEYS = tuple(
    k for k in MANAGED_KEYS if KEY_DEFINITIONS[k].color_type == FOREGROUND
)

EDITOR_BACKGROUND = "editor.background"
EDITOR_FOREGROUND = "editor.foreground"

# Keys looked up in place of a managed key the theme does not define
FALLBACK_KEYS = {
    "titleBar.inactiveBackground": "titleBar.activeBackground",
    "sideBarSectionHeader.background": "sideBar.background",
    "sideBarSectionHeader.foreground": "sideBar.foreground",
}

# Background/foreground pair shown for each element in previews and reports
ELEMENT_KEY_PAIRS = {
    "titleBar": ("titleBar.activeBackground", "titleBar.activeForeground"),
    "statusBar": ("statusBar.background", "statusBar.foreground"),
    "activityBar": ("activityBar.background", "activityBar.foreground"),
    "sideBar": ("sideBar.background", "sideBar.foreground"),
}


def validate_theme_type(theme_type):
    if theme_type not in THEME_TYPES:
        raise ValueError(
            f"Unknown theme type: {theme_type!r} (expected one of {', '.join(THEME_TYPES)})"
        )
    return theme_type


def validate_element(element):
    if element not in ELEMENTS:
        raise ValueError(f"Unknown element: {element!r}")
    return element


def is_dark_theme_type(theme_type):
    return validate_theme_type(theme_type) in DARK_THEME_TYPES


def key_definition(key):
    """Return the ColorKey metadata for a key.

    Raises:
        ValueError: If the key is not a known theme color key
    """
    try:
        return KEY_DEFINITIONS[key]
    except KeyError:
        raise ValueError(f"Unknown color key: {key!r}") from None
