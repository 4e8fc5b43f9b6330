from .image import create_preview_image
from .json_export import export_color_customizations
from .report import generate_tint_report, print_tint

__all__ = [
    "create_preview_image",
    "export_color_customizations",
    "generate_tint_report",
    "print_tint",
]
