"""
Tint settings: defaults, validation, and loading from a JSON file.

Settings files are user-edited, so values are sanitized rather than
rejected: a bad seed becomes 0, blend factors are clamped, and unknown
style or harmony names fall back to the default with a warning.
"""

import json
import logging
from collections import namedtuple

from .color.blend import ALL_BLEND_METHODS, DEFAULT_BLEND_METHOD
from .harmony import ALL_HARMONIES, DEFAULT_HARMONY
from .styles.definitions import ALL_STYLES, DEFAULT_STYLE
from .theme.keys import THEME_TYPES, TINT_TARGETS

logger = logging.getLogger(__name__)

DEFAULT_BLEND_FACTOR = 0.35

TintSettings = namedtuple(
    "TintSettings",
    [
        "identifier",
        "targets",
        "theme_type",
        "style",
        "harmony",
        "blend_method",
        "blend_factor",
        "target_blend_factors",
        "seed",
        "base_hue_override",
    ],
)

DEFAULT_SETTINGS = TintSettings(
    identifier=None,
    targets=TINT_TARGETS,
    theme_type="dark",
    style=DEFAULT_STYLE,
    harmony=DEFAULT_HARMONY,
    blend_method=DEFAULT_BLEND_METHOD,
    blend_factor=DEFAULT_BLEND_FACTOR,
    target_blend_factors={},
    seed=0,
    base_hue_override=None,
)


def validate_blend_method(method):
    if method not in ALL_BLEND_METHODS:
        raise ValueError(
            f"Unknown blend method: {method!r} (expected one of {', '.join(ALL_BLEND_METHODS)})"
        )
    return method


def _as_int(value):
    """Return value as an int if it is integral, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def build_targets(flags):
    """Ordered list of enabled elements from a {element: bool} mapping.

    Order follows the window layout: titleBar, statusBar, activityBar,
    sideBar.
    """
    return [target for target in TINT_TARGETS if flags.get(target)]


def validate_seed(value):
    seed = _as_int(value)
    return seed if seed is not None else 0


def validate_base_hue_override(value):
    """Return the override if it is an integer in [0, 359], else None."""
    hue = _as_int(value)
    if hue is not None and 0 <= hue <= 359:
        return hue
    return None


def clamp_blend_factor(value):
    return max(0.0, min(1.0, float(value)))


def build_target_blend_factors(entries):
    """Per-element blend factors with None dropped and values clamped.

    Args:
        entries: Mapping or iterable of (element, factor or None) pairs

    Returns:
        dict: element -> factor in [0, 1]
    """
    if isinstance(entries, dict):
        entries = entries.items()
    result = {}
    for target, value in entries:
        if target not in TINT_TARGETS:
            logger.warning("Ignoring blend factor for unknown element %r", target)
            continue
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            result[target] = clamp_blend_factor(value)
    return result


def validate_choice(value, valid_values, default, name):
    """Return value if it is one of valid_values, else default (with a warning)."""
    if value in valid_values:
        return value
    logger.warning("Unknown %s %r, using %r", name, value, default)
    return default


def settings_from_dict(data):
    """Build TintSettings from a camelCase mapping, sanitizing every value."""
    defaults = DEFAULT_SETTINGS

    if "elements" in data and isinstance(data["elements"], dict):
        targets = build_targets(data["elements"])
    elif isinstance(data.get("targets"), list):
        targets = [t for t in data["targets"] if t in TINT_TARGETS]
    else:
        if "targets" in data:
            logger.warning("Ignoring targets %r, expected a list", data["targets"])
        targets = list(defaults.targets)

    blend_factor = data.get("blendFactor", defaults.blend_factor)
    if not isinstance(blend_factor, (int, float)) or isinstance(blend_factor, bool):
        blend_factor = defaults.blend_factor

    identifier = data.get("identifier")
    if identifier is not None:
        identifier = str(identifier)

    return TintSettings(
        identifier=identifier,
        targets=targets,
        theme_type=validate_choice(
            data.get("themeType", defaults.theme_type), THEME_TYPES, defaults.theme_type, "theme type"
        ),
        style=validate_choice(data.get("style", defaults.style), ALL_STYLES, defaults.style, "style"),
        harmony=validate_choice(
            data.get("harmony", defaults.harmony), ALL_HARMONIES, defaults.harmony, "harmony"
        ),
        blend_method=validate_choice(
            data.get("blendMethod", defaults.blend_method),
            ALL_BLEND_METHODS,
            defaults.blend_method,
            "blend method",
        ),
        blend_factor=clamp_blend_factor(blend_factor),
        target_blend_factors=build_target_blend_factors(data.get("targetBlendFactors") or {}),
        seed=validate_seed(data.get("seed", 0)),
        base_hue_override=validate_base_hue_override(data.get("baseHueOverride")),
    )


def load_settings(json_path):
    """Load tint settings from a JSON file.

    Args:
        json_path: Path to settings JSON file

    Returns:
        TintSettings

    Raises:
        ValueError: If the file does not contain a JSON object
    """
    with open(json_path) as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"{json_path}: expected a JSON object")

    settings = settings_from_dict(data)
    logger.debug("Loaded settings from %s: %s", json_path, settings)
    return settings
