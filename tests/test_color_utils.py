"""Tests for color space conversions and hex parsing."""

import numpy as np
import pytest

from hct_theme.color_utils import (
    ColorParseError,
    alpha_from_argb,
    argb_from_hex,
    argb_from_lab,
    argb_from_lab_array,
    argb_from_lstar,
    argb_from_rgb,
    argb_from_xyz,
    blue_from_argb,
    green_from_argb,
    hex_from_argb,
    is_opaque,
    lab_from_argb,
    lab_from_argb_array,
    lstar_from_argb,
    lstar_from_y,
    red_from_argb,
    xyz_from_argb,
    y_from_lstar,
)
from hct_theme.math_utils import (
    difference_degrees,
    rotation_direction,
    round_half_up,
    sanitize_degrees_double,
    sanitize_degrees_int,
)

SAMPLE_COLORS = [
    0xFF000000, 0xFFFFFFFF, 0xFFFF0000, 0xFF00FF00, 0xFF0000FF,
    0xFFFFFF00, 0xFF4285F4, 0xFF8A2BE2, 0xFF123456, 0xFF7F7F7F,
]


class TestPacking:
    """Tests for ARGB channel packing."""

    def test_rgb_round_trip(self):
        """Channels should unpack to the values they were packed from."""
        argb = argb_from_rgb(0x12, 0x34, 0x56)
        assert argb == 0xFF123456
        assert alpha_from_argb(argb) == 255
        assert red_from_argb(argb) == 0x12
        assert green_from_argb(argb) == 0x34
        assert blue_from_argb(argb) == 0x56

    def test_is_opaque(self):
        assert is_opaque(0xFF000000)
        assert not is_opaque(0x80FF0000)
        assert not is_opaque(0x00FFFFFF)


class TestHex:
    """Tests for hex parsing and formatting."""

    def test_six_digits(self):
        assert argb_from_hex("#4285f4") == 0xFF4285F4
        assert argb_from_hex("4285F4") == 0xFF4285F4

    def test_three_digits_expand(self):
        """#abc should mean #aabbcc."""
        assert argb_from_hex("#abc") == 0xFFAABBCC
        assert argb_from_hex("f00") == 0xFFFF0000

    def test_eight_digits_keep_alpha(self):
        assert argb_from_hex("#80ff0000") == 0x80FF0000

    def test_surrounding_whitespace_ignored(self):
        assert argb_from_hex("  #000000\n") == 0xFF000000

    @pytest.mark.parametrize("text", ["", "#", "#12345", "#1234567", "#gggggg", "#-12345", "#1_2", "red"])
    def test_invalid_raises(self, text):
        """Malformed input should raise ColorParseError."""
        with pytest.raises(ColorParseError):
            argb_from_hex(text)

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            argb_from_hex("nope")

    def test_format_drops_alpha(self):
        assert hex_from_argb(0xFF4285F4) == "#4285f4"
        assert hex_from_argb(0x004285F4) == "#4285f4"

    @pytest.mark.parametrize("argb", SAMPLE_COLORS)
    def test_format_parses_back(self, argb):
        assert argb_from_hex(hex_from_argb(argb)) == argb


class TestLstar:
    """Tests for L* and relative luminance."""

    def test_extremes(self):
        assert lstar_from_argb(0xFF000000) == pytest.approx(0.0, abs=1e-9)
        assert lstar_from_argb(0xFFFFFFFF) == pytest.approx(100.0, abs=1e-6)

    def test_y_and_lstar_are_inverses(self):
        for lstar in (0.0, 0.5, 8.0, 18.4, 50.0, 73.2, 99.9, 100.0):
            assert lstar_from_y(y_from_lstar(lstar)) == pytest.approx(lstar, abs=1e-8)

    def test_mid_gray(self):
        assert y_from_lstar(50.0) == pytest.approx(18.418, abs=1e-3)
        assert argb_from_lstar(50.0) == 0xFF777777

    def test_gray_from_lstar_is_neutral(self):
        argb = argb_from_lstar(73.0)
        assert red_from_argb(argb) == green_from_argb(argb) == blue_from_argb(argb)


class TestXyzAndLab:
    """Tests for XYZ and L*a*b* conversions."""

    @pytest.mark.parametrize("argb", SAMPLE_COLORS)
    def test_xyz_round_trip(self, argb):
        assert argb_from_xyz(*xyz_from_argb(argb)) == argb

    @pytest.mark.parametrize("argb", SAMPLE_COLORS)
    def test_lab_round_trip(self, argb):
        assert argb_from_lab(*lab_from_argb(argb)) == argb

    def test_white_is_neutral_in_lab(self):
        l, a, b = lab_from_argb(0xFFFFFFFF)
        assert l == pytest.approx(100.0, abs=1e-6)
        assert a == pytest.approx(0.0, abs=0.01)
        assert b == pytest.approx(0.0, abs=0.01)

    def test_array_matches_scalar(self):
        """Vectorized conversion should agree with the scalar one."""
        lab = lab_from_argb_array(np.array(SAMPLE_COLORS, dtype=np.int64))
        expected = np.array([lab_from_argb(c) for c in SAMPLE_COLORS])
        np.testing.assert_allclose(lab, expected, atol=1e-9)

    def test_array_round_trip(self):
        argbs = np.array(SAMPLE_COLORS, dtype=np.int64)
        back = argb_from_lab_array(lab_from_argb_array(argbs))
        assert [int(c) for c in back] == SAMPLE_COLORS


class TestMathUtils:
    """Tests for rounding and angle helpers."""

    def test_round_half_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(-0.5) == 0
        assert round_half_up(49.4999) == 49

    def test_sanitize_degrees(self):
        assert sanitize_degrees_int(-1) == 359
        assert sanitize_degrees_int(720) == 0
        assert sanitize_degrees_double(-30.0) == pytest.approx(330.0)
        assert sanitize_degrees_double(360.0) == pytest.approx(0.0)

    def test_difference_degrees_wraps(self):
        assert difference_degrees(350.0, 10.0) == pytest.approx(20.0)
        assert difference_degrees(10.0, 190.0) == pytest.approx(180.0)

    def test_rotation_direction(self):
        assert rotation_direction(350.0, 10.0) == 1.0
        assert rotation_direction(10.0, 350.0) == -1.0
