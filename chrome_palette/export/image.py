import numpy as np
from PIL import Image

from ..color.convert import hex_to_rgb
from ..theme.keys import TINT_TARGETS

CELL_WIDTH = 64
BAND_HEIGHT = 16
GAP = 4
SHEET_BACKGROUND = (32, 32, 32)


def _fill(pixels, top, left, height, width, hex_color):
    pixels[top : top + height, left : left + width] = hex_to_rgb(hex_color)


def create_preview_image(previews, output_path):
    """Render style or harmony previews as a PNG swatch sheet.

    One row per preview, one cell per sample hue. Each cell stacks a band
    per element in its background color, with a short bar in the element's
    foreground color standing in for text.

    Args:
        previews: List of Preview tuples (see preview.py)
        output_path: PNG file path

    Returns:
        tuple: (width, height) of the written image
    """
    if not previews:
        raise ValueError("No previews to render")

    columns = max(len(p.hue_colors) for p in previews)
    cell_height = BAND_HEIGHT * len(TINT_TARGETS)
    width = GAP + columns * (CELL_WIDTH + GAP)
    height = GAP + len(previews) * (cell_height + GAP)

    pixels = np.empty((height, width, 3), dtype=np.uint8)
    pixels[:, :] = SHEET_BACKGROUND

    for row, preview in enumerate(previews):
        top = GAP + row * (cell_height + GAP)
        for column, colors in enumerate(preview.hue_colors):
            left = GAP + column * (CELL_WIDTH + GAP)
            for band, element in enumerate(TINT_TARGETS):
                band_top = top + band * BAND_HEIGHT
                _fill(pixels, band_top, left, BAND_HEIGHT, CELL_WIDTH, colors[element].background)
                _fill(
                    pixels,
                    band_top + BAND_HEIGHT // 2 - 1,
                    left + CELL_WIDTH // 4,
                    3,
                    CELL_WIDTH // 2,
                    colors[element].foreground,
                )

    Image.fromarray(pixels).save(output_path, "PNG")
    return width, height
