"""Tests for the hct-theme command line."""

import json

import pytest
from PIL import Image

from hct_theme.cli import build_parser, main, parse_custom_color
from hct_theme.dynamic_scheme import Variant
from hct_theme.theme import theme_from_source_color, theme_to_dict


class TestParseCustomColor:
    """Tests for NAME=HEX parsing."""

    def test_valid(self):
        color = parse_custom_color("brand=#ff0000")
        assert color.name == "brand"
        assert color.value == 0xFFFF0000
        assert color.blend

    @pytest.mark.parametrize("text", ["brand", "=#ff0000", "brand=#xyz"])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            parse_custom_color(text)


class TestMain:
    """Tests for main()."""

    def test_seed_color(self, capsys):
        assert main(["--color", "#0000ff"]) == 0
        out = capsys.readouterr().out
        assert "#0000ff (source)" in out
        assert "Variant: tonal_spot, contrast level: 0" in out
        assert "#555992" in out

    def test_variant_and_contrast(self, capsys):
        assert main(["-c", "0000ff", "--variant", "content", "--contrast", "1"]) == 0
        assert "Variant: content, contrast level: 1" in capsys.readouterr().out

    def test_writes_json(self, tmp_path, capsys):
        output = tmp_path / "theme.json"
        assert main(["--color", "#0000ff", "--output", str(output)]) == 0
        data = json.loads(output.read_text())
        assert data["schemes"]["light"]["primary"] == "#555992"
        assert data["schemes"]["dark"]["primary"] == "#bec2ff"
        assert "Wrote:" in capsys.readouterr().out

    def test_custom_colors(self, capsys):
        assert main(["--color", "#0000ff", "--custom", "brand=#ff0000", "--custom", "ok=#00ff00"]) == 0
        out = capsys.readouterr().out
        assert "Custom colors:" in out
        assert "brand: #ff0000 -> #fb0057" in out
        assert "ok:" in out

    def test_image_input(self, tmp_path, capsys):
        path = tmp_path / "red.png"
        Image.new("RGB", (16, 16), (255, 0, 0)).save(path)
        assert main(["--input", str(path)]) == 0
        out = capsys.readouterr().out
        assert "Quantizing 256 pixels" in out
        assert "#ff0000 (source)" in out

    def test_palette_overrides_and_color_match(self, tmp_path, capsys):
        output = tmp_path / "theme.json"
        argv = ["--color", "#0000ff", "--color-match", "--neutral-variant", "#ff0000",
                "--output", str(output)]
        assert main(argv) == 0
        assert "Variant: fidelity" in capsys.readouterr().out
        expected = theme_to_dict(theme_from_source_color(
            0xFF0000FF, Variant.FIDELITY, neutral_variant=0xFFFF0000))
        assert json.loads(output.read_text()) == expected

    @pytest.mark.parametrize("argv, message", [
        (["--color", "#0000ff", "--tertiary", "orange"], "Invalid hex color"),
        (["--color", "nothex"], "Invalid hex color"),
        (["--color", "#0000ff", "--variant", "pastel"], "Unknown variant"),
        (["--color", "#0000ff", "--contrast", "2"], "Contrast level"),
        (["--color", "#0000ff", "--custom", "brand"], "NAME=HEX"),
        (["--input", "/nonexistent/photo.png"], "Image not found"),
    ])
    def test_errors_exit_nonzero(self, argv, message, capsys):
        assert main(argv) == 1
        err = capsys.readouterr().err
        assert err.startswith("Error: ")
        assert message in err

    def test_source_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_sources_exclusive(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--color", "#fff", "--input", "a.png"])
