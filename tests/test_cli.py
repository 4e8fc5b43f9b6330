import json

import pytest

from chrome_palette.cli import build_parser, main
from chrome_palette.styles import ALL_STYLES


def test_identifier_prints_summary(capsys):
    main(["my-project"])
    out = capsys.readouterr().out
    assert "Base hue: 1" in out
    assert "TINT REPORT" in out


def test_hue_flag(capsys):
    main(["--hue", "200", "--style", "neon"])
    out = capsys.readouterr().out
    assert "Base hue: 200" in out
    assert "Style:     neon" in out


def test_seed_flag(capsys):
    main(["my-project", "--seed", "42"])
    assert "Base hue: 26" in capsys.readouterr().out


def test_output_writes_files(tmp_path, capsys):
    out_dir = tmp_path / "out"
    main(["my-project", "--targets", "statusBar", "sideBar", "--output", str(out_dir)])

    data = json.loads((out_dir / "colors.json").read_text())
    assert set(data["workbench.colorCustomizations"]) == {
        "statusBar.background",
        "statusBar.foreground",
        "sideBar.background",
        "sideBar.foreground",
        "sideBarSectionHeader.background",
        "sideBarSectionHeader.foreground",
    }
    assert data["_identifier"] == "my-project"
    assert "TINT REPORT" in (out_dir / "report.txt").read_text(encoding="utf-8")
    assert "Exported:" in capsys.readouterr().out


def test_theme_and_blend_flags(tmp_path):
    theme = tmp_path / "theme.json"
    theme.write_text(json.dumps({"colors": {"editor.background": "#FAFAFA", "editor.foreground": "#383A42"}}))
    out_dir = tmp_path / "out"
    main(["my-project", "--theme", str(theme), "--blend", "0.5", "--blend-status", "0", "--output", str(out_dir)])

    data = json.loads((out_dir / "colors.json").read_text())
    assert data["_theme_type"] == "light"


def test_settings_file(tmp_path, capsys):
    settings = tmp_path / "settings.json"
    settings.write_text(json.dumps({"identifier": "my-project", "seed": -100, "style": "muted"}))
    main(["--settings", str(settings)])
    out = capsys.readouterr().out
    assert "Base hue: 40" in out
    assert "Style:     muted" in out


def test_flags_override_settings_file(tmp_path, capsys):
    settings = tmp_path / "settings.json"
    settings.write_text(json.dumps({"identifier": "my-project", "seed": -100}))
    main(["--settings", str(settings), "--seed", "0"])
    assert "Base hue: 1" in capsys.readouterr().out


def test_requires_identifier_or_hue():
    with pytest.raises(SystemExit):
        main([])


def test_hue_out_of_range():
    with pytest.raises(SystemExit):
        main(["--hue", "400"])


def test_missing_theme_file(tmp_path):
    with pytest.raises(SystemExit):
        main(["my-project", "--theme", str(tmp_path / "missing.json")])


def test_unknown_style_rejected():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["my-project", "--style", "glossy"])


def test_list(capsys):
    main(["--list"])
    out = capsys.readouterr().out
    for style in ALL_STYLES:
        assert style in out
    assert "hueShift" in out


def test_style_preview_image(tmp_path, capsys):
    main(["--preview", "styles", "--output", str(tmp_path)])
    out = capsys.readouterr().out
    assert "STYLES PREVIEW (dark)" in out
    assert (tmp_path / "preview-styles.png").exists()
    assert not (tmp_path / "colors.json").exists()
