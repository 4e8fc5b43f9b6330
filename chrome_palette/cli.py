import argparse
import logging
import os

from .color.blend import ALL_BLEND_METHODS, BLEND_METHOD_DEFINITIONS
from .config import (
    DEFAULT_SETTINGS,
    build_target_blend_factors,
    clamp_blend_factor,
    load_settings,
)
from .export import create_preview_image, export_color_customizations, generate_tint_report, print_tint
from .harmony import ALL_HARMONIES, HARMONY_DEFINITIONS
from .preview import HUE_LABELS, SAMPLE_HUES, generate_all_harmony_previews, generate_all_style_previews
from .styles import ALL_STYLES, STYLE_DEFINITIONS
from .theme import THEME_TYPES, TINT_TARGETS, load_theme
from .tint import compute_tint

# Per-element blend flags and the element each one overrides
ELEMENT_BLEND_FLAGS = {
    "blend_title": "titleBar",
    "blend_status": "statusBar",
    "blend_activity": "activityBar",
    "blend_side": "sideBar",
}


def build_parser():
    parser = argparse.ArgumentParser(
        description="Generate deterministic editor chrome colors from a workspace identifier"
    )
    parser.add_argument(
        "identifier",
        nargs="?",
        default=None,
        help="Workspace identifier (e.g. project folder name)",
    )
    parser.add_argument(
        "--hue",
        type=int,
        default=None,
        help="Use this base hue (0-359) instead of hashing the identifier",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed to shift the hue (default: 0)")
    parser.add_argument("--style", choices=ALL_STYLES, default=None, help="Color style")
    parser.add_argument("--harmony", choices=ALL_HARMONIES, default=None, help="Color harmony")
    parser.add_argument(
        "--theme-type",
        choices=THEME_TYPES,
        default=None,
        help="Theme brightness class (default: from --theme, else dark)",
    )
    parser.add_argument(
        "--theme",
        metavar="JSON",
        default=None,
        help="Theme colors to blend with",
    )
    parser.add_argument(
        "--blend",
        type=float,
        default=None,
        help="Share of the theme color in the result (0.0-1.0, default: 0.35)",
    )
    parser.add_argument("--blend-title", type=float, default=None, metavar="F", help="Title bar blend factor")
    parser.add_argument("--blend-status", type=float, default=None, metavar="F", help="Status bar blend factor")
    parser.add_argument(
        "--blend-activity", type=float, default=None, metavar="F", help="Activity bar blend factor"
    )
    parser.add_argument("--blend-side", type=float, default=None, metavar="F", help="Side bar blend factor")
    parser.add_argument("--blend-method", choices=ALL_BLEND_METHODS, default=None, help="Blend method")
    parser.add_argument(
        "--targets",
        nargs="+",
        choices=TINT_TARGETS,
        default=None,
        help="Elements to tint (default: all)",
    )
    parser.add_argument("--settings", metavar="JSON", default=None, help="Load settings from a JSON file")
    parser.add_argument(
        "--output", "-o",
        metavar="DIR",
        default=None,
        help="Write colors.json, report.txt and preview images to this directory",
    )
    parser.add_argument(
        "--preview",
        choices=("styles", "harmonies"),
        default=None,
        help="Show every style or harmony at the sample hues",
    )
    parser.add_argument("--list", action="store_true", help="List styles, harmonies and blend methods")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.list:
        _print_definitions()
        return

    try:
        settings, theme_colors = _resolve_settings(args)

        if settings.identifier is None and settings.base_hue_override is None and not args.preview:
            parser.error("Either an identifier or --hue is required")
        if args.hue is not None and not 0 <= args.hue <= 359:
            parser.error("--hue must be between 0 and 359")

        if args.output:
            os.makedirs(args.output, exist_ok=True)

        if settings.identifier is not None or settings.base_hue_override is not None:
            _run_tint(args, settings, theme_colors)
        if args.preview:
            _run_preview(args, settings)
    except (ValueError, OSError) as e:
        parser.error(str(e))


def _resolve_settings(args):
    """Settings file values overridden by any flags given on the command line."""
    settings = load_settings(args.settings) if args.settings else DEFAULT_SETTINGS

    theme_colors = None
    theme_type = settings.theme_type
    if args.theme:
        theme_colors, theme_type = load_theme(args.theme)
        print(f"Loaded theme: {args.theme} ({theme_type})")

    target_blend_factors = dict(settings.target_blend_factors)
    target_blend_factors.update(
        build_target_blend_factors(
            (element, getattr(args, flag)) for flag, element in ELEMENT_BLEND_FLAGS.items()
        )
    )

    settings = settings._replace(
        identifier=args.identifier if args.identifier is not None else settings.identifier,
        base_hue_override=args.hue if args.hue is not None else settings.base_hue_override,
        seed=args.seed if args.seed is not None else settings.seed,
        style=args.style or settings.style,
        harmony=args.harmony or settings.harmony,
        theme_type=args.theme_type or theme_type,
        blend_method=args.blend_method or settings.blend_method,
        blend_factor=clamp_blend_factor(args.blend) if args.blend is not None else settings.blend_factor,
        target_blend_factors=target_blend_factors,
        targets=args.targets or settings.targets,
    )
    return settings, theme_colors


def _run_tint(args, settings, theme_colors):
    result = compute_tint(
        base_hue=settings.base_hue_override,
        identifier=settings.identifier,
        targets=settings.targets,
        theme_type=settings.theme_type,
        style=settings.style,
        harmony=settings.harmony,
        theme_colors=theme_colors,
        blend_factor=settings.blend_factor,
        target_blend_factors=settings.target_blend_factors,
        seed=settings.seed,
        blend_method=settings.blend_method,
    )

    print_tint(result, settings.theme_type)
    report, issues = generate_tint_report(
        result, theme_type=settings.theme_type, style=settings.style, harmony=settings.harmony
    )
    print("\n" + report)

    if not args.output:
        return

    colors_path = os.path.join(args.output, "colors.json")
    report_path = os.path.join(args.output, "report.txt")

    export_color_customizations(
        result,
        colors_path,
        identifier=settings.identifier,
        style=settings.style,
        harmony=settings.harmony,
        theme_type=settings.theme_type,
    )
    with open(report_path, "w", encoding="utf-8") as f:
        f.write(report)

    print("\n" + "=" * 60)
    print("Exported:")
    print(f"  - {colors_path}")
    print(f"  - {report_path}")
    print("=" * 60)


def _run_preview(args, settings):
    if args.preview == "styles":
        previews = generate_all_style_previews(settings.theme_type)
    else:
        previews = generate_all_harmony_previews(settings.style, settings.theme_type)

    print("\n" + "=" * 60)
    print(f"{args.preview.upper()} PREVIEW ({settings.theme_type})")
    print("=" * 60)
    print(" " * 20 + " ".join(f"{HUE_LABELS[h]:7}" for h in SAMPLE_HUES))
    for preview in previews:
        swatches = " ".join(colors["titleBar"].background for colors in preview.hue_colors)
        print(f"{preview.label:20}{swatches}")

    if args.output:
        image_path = os.path.join(args.output, f"preview-{args.preview}.png")
        create_preview_image(previews, image_path)
        print(f"\nExported: {image_path}")


def _print_definitions():
    print("Styles:")
    for name in ALL_STYLES:
        print(f"  {name:20} {STYLE_DEFINITIONS[name]['description']}")
    print("\nHarmonies:")
    for name in ALL_HARMONIES:
        print(f"  {name:20} {HARMONY_DEFINITIONS[name]['description']}")
    print("\nBlend methods:")
    for name in ALL_BLEND_METHODS:
        print(f"  {name:20} {BLEND_METHOD_DEFINITIONS[name]['description']}")


if __name__ == "__main__":
    main()
