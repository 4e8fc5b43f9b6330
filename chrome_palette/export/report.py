from ..color.convert import contrast_ratio, hex_luminance
from ..theme.keys import ELEMENT_KEY_PAIRS

# WCAG AA for normal text
MIN_TEXT_CONTRAST = 4.5


def _details_by_key(result):
    return {d.key: d for d in result.keys}


def generate_tint_report(result, theme_type=None, style=None, harmony=None):
    """Generate a detailed tint report for inspection.

    Lists every managed key with its theme, tint and final colors, then the
    contrast of each element's foreground against its background.

    Returns:
        tuple: (report text, list of (element, fg hex, bg hex, achieved ratio)
            for enabled elements below MIN_TEXT_CONTRAST)
    """
    report = []
    report.append("=" * 70)
    report.append("TINT REPORT")
    report.append("=" * 70)
    report.append(f"Base hue:  {result.base_hue}")
    report.append(f"Base tint: {result.base_tint_hex}")
    if theme_type:
        report.append(f"Theme:     {theme_type}")
    if style:
        report.append(f"Style:     {style}")
    if harmony:
        report.append(f"Harmony:   {harmony}")
    report.append("")

    report.append(f"{'KEY':34} {'THEME':8} {'TINT':8} {'FINAL':8} {'BLEND':>5}  ON")
    report.append("-" * 70)
    for d in result.keys:
        theme_hex = d.theme_hex.upper() if d.theme_hex else "-"
        enabled = "yes" if d.enabled else "no"
        report.append(
            f"{d.key:34} {theme_hex:8} {d.tint_hex:8} {d.final_hex:8} {d.blend_factor:5.2f}  {enabled}"
        )

    report.append(f"\nCONTRAST (min: {MIN_TEXT_CONTRAST}:1)")
    report.append("-" * 50)

    details = _details_by_key(result)
    issues = []
    for element, (bg_key, fg_key) in ELEMENT_KEY_PAIRS.items():
        bg = details[bg_key]
        fg = details[fg_key]
        ratio = contrast_ratio(hex_luminance(fg.final_hex), hex_luminance(bg.final_hex))

        if ratio >= MIN_TEXT_CONTRAST:
            status = "✓"
        elif bg.enabled:
            status = "✗ FAIL"
            issues.append((element, fg.final_hex, bg.final_hex, ratio))
        else:
            status = "✗ (disabled)"

        report.append(f"  {element:12} {fg.final_hex} on {bg.final_hex}  {ratio:4.1f}:1  {status}")

    report.append("\n" + "=" * 70)
    if issues:
        report.append(f"ISSUES FOUND: {len(issues)}")
        for element, fg_hex, bg_hex, achieved in issues:
            report.append(
                f"  - {element}: {fg_hex} on {bg_hex} has {achieved:.1f}:1, needs {MIN_TEXT_CONTRAST}:1"
            )
    else:
        report.append("ALL ENABLED ELEMENTS PASS CONTRAST REQUIREMENTS ✓")
    report.append("=" * 70)

    return "\n".join(report), issues


def print_tint(result, theme_type=None):
    """Print tint summary"""
    details = _details_by_key(result)

    print("\n" + "=" * 60)
    header = "WORKSPACE TINT"
    if theme_type:
        header += f" ({theme_type.upper()} THEME)"
    print(header)
    print("=" * 60)
    print(f"\nBase hue: {result.base_hue}  swatch: {result.base_tint_hex}")

    for element, (bg_key, fg_key) in ELEMENT_KEY_PAIRS.items():
        bg = details[bg_key]
        fg = details[fg_key]
        state = "" if bg.enabled else "  (disabled)"
        contrast = contrast_ratio(hex_luminance(fg.final_hex), hex_luminance(bg.final_hex))
        print(f"  {element:12} bg {bg.final_hex}  fg {fg.final_hex}  (contrast: {contrast:.1f}:1){state}")
