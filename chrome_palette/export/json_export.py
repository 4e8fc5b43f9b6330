import json

from ..tint import tint_result_to_palette


def export_color_customizations(
    result,
    filepath,
    identifier=None,
    style=None,
    harmony=None,
    theme_type=None,
):
    """Export the enabled tint colors as editor color customizations.

    Args:
        result: TintResult from compute_tint
        filepath: Output file path
        identifier: Workspace identifier for metadata
        style: Style name for metadata
        harmony: Harmony name for metadata
        theme_type: Theme type for metadata
    """
    data = {"workbench.colorCustomizations": tint_result_to_palette(result)}

    data["_base_hue"] = result.base_hue
    data["_base_tint"] = result.base_tint_hex

    if identifier is not None:
        data["_identifier"] = identifier
    if style:
        data["_style"] = style
    if harmony:
        data["_harmony"] = harmony
    if theme_type:
        data["_theme_type"] = theme_type

    with open(filepath, "w") as f:
        json.dump(data, f, indent=2)
