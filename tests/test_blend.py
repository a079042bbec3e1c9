"""Tests for harmonization, blending and disliked-color fixes."""

import pytest

from hct_theme.blend import cam16_ucs, harmonize, hct_hue
from hct_theme.dislike import fix_if_disliked, is_disliked
from hct_theme.hct import Hct

RED = 0xFFFF0000
GREEN = 0xFF00FF00
BLUE = 0xFF0000FF
YELLOW = 0xFFFFFF00


class TestHarmonize:
    """Tests for harmonize."""

    @pytest.mark.parametrize("design, source, expected", [
        (RED, BLUE, 0xFFFB0057),
        (RED, GREEN, 0xFFD85600),
        (RED, YELLOW, 0xFFD85600),
        (BLUE, GREEN, 0xFF0047A3),
        (BLUE, RED, 0xFF5700DC),
        (BLUE, YELLOW, 0xFF0047A3),
        (GREEN, BLUE, 0xFF00FC94),
        (GREEN, RED, 0xFFB1F000),
        (GREEN, YELLOW, 0xFFB1F000),
        (YELLOW, BLUE, 0xFFEBFFBA),
        (YELLOW, GREEN, 0xFFEBFFBA),
        (YELLOW, RED, 0xFFFFF6E3),
    ])
    def test_known_pairs(self, design, source, expected):
        assert harmonize(design, source) == expected

    def test_same_color_unchanged(self):
        assert harmonize(BLUE, BLUE) == BLUE


class TestBlend:
    """Tests for hue and UCS blending."""

    def test_hct_hue(self):
        assert hct_hue(RED, BLUE, 0.8) == 0xFF905EFF

    def test_ucs_endpoints(self):
        assert cam16_ucs(RED, BLUE, 0.0) == RED
        assert cam16_ucs(RED, BLUE, 1.0) == BLUE

    def test_hct_hue_keeps_tone(self):
        blended = Hct.from_argb(hct_hue(RED, BLUE, 0.5))
        assert blended.tone == pytest.approx(Hct.from_argb(RED).tone, abs=1.0)


class TestDislike:
    """Tests for the disliked dark yellow-green check."""

    @pytest.mark.parametrize("argb", [0xFF897D3E, 0xFFA89A3E, 0xFF6B5E2A])
    def test_dark_yellow_greens_disliked(self, argb):
        assert is_disliked(Hct.from_argb(argb))

    @pytest.mark.parametrize("argb", [0xFFB5A642, RED, BLUE, 0xFFFFFFFF])
    def test_other_colors_liked(self, argb):
        """Light yellow-greens and other hues pass."""
        assert not is_disliked(Hct.from_argb(argb))

    @pytest.mark.parametrize("argb, fixed", [
        (0xFF897D3E, 0xFFB9AC68),
        (0xFFA89A3E, 0xFFBBAC4E),
        (0xFF6B5E2A, 0xFFBBAB6F),
    ])
    def test_fix_lifts_tone(self, argb, fixed):
        result = fix_if_disliked(Hct.from_argb(argb))
        assert result.argb == fixed
        assert result.tone == pytest.approx(70.0, abs=0.5)
        assert not is_disliked(result)

    def test_fix_leaves_liked_colors(self):
        hct = Hct.from_argb(0xFFB5A642)
        assert fix_if_disliked(hct) is hct
