import json
import logging

from ..color.convert import hex_luminance
from .colors import normalize_theme_colors
from .keys import EDITOR_BACKGROUND, validate_theme_type

logger = logging.getLogger(__name__)


def load_theme(json_path):
    """Load theme colors from JSON.

    Accepts either {"type": "dark", "colors": {...}} or a bare mapping of
    color keys to hex strings. Keys starting with "_" are metadata and are
    skipped.

    Args:
        json_path: Path to theme JSON file

    Returns:
        tuple: (theme colors dict with uppercase hex values, theme type)

    Raises:
        ValueError: If the file has no usable colors or an invalid value
    """
    with open(json_path) as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"{json_path}: expected a JSON object")

    theme_type = data.get("type")
    raw = data.get("colors", data)
    if not isinstance(raw, dict):
        raise ValueError(f"{json_path}: 'colors' must be an object")

    raw = {k: v for k, v in raw.items() if not k.startswith("_") and isinstance(v, str)}
    colors = normalize_theme_colors(raw)
    if not colors:
        raise ValueError(f"{json_path}: no theme colors found")

    if theme_type is not None:
        validate_theme_type(theme_type)
    elif EDITOR_BACKGROUND in colors:
        # Detect dark/light theme from background luminance
        is_dark = hex_luminance(colors[EDITOR_BACKGROUND]) < 0.5
        theme_type = "dark" if is_dark else "light"
    else:
        theme_type = "dark"

    logger.debug("Loaded %d theme colors from %s (%s)", len(colors), json_path, theme_type)
    return colors, theme_type
