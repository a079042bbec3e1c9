"""Tests for CAM16, the HCT solver and the Hct color type."""

import pytest

from hct_theme.cam16 import DEFAULT_VIEWING_CONDITIONS, Cam16, ViewingConditions
from hct_theme.color_utils import (
    argb_from_lstar,
    blue_from_argb,
    green_from_argb,
    lstar_from_argb,
    red_from_argb,
)
from hct_theme.hct import Hct
from hct_theme.hct_solver import CRITICAL_PLANES, solve_to_argb
from hct_theme.math_utils import difference_degrees

RED = 0xFFFF0000
GREEN = 0xFF00FF00
BLUE = 0xFF0000FF
WHITE = 0xFFFFFFFF
BLACK = 0xFF000000


def _on_gamut_boundary(argb: int) -> bool:
    """Whether any channel is at 0 or 255."""
    channels = (red_from_argb(argb), green_from_argb(argb), blue_from_argb(argb))
    return any(c in (0, 255) for c in channels)


class TestCam16:
    """Tests for forward CAM16 attributes under default viewing conditions."""

    @pytest.mark.parametrize("argb, j, chroma, hue, m, s, q", [
        (RED, 46.445, 113.358, 27.408, 89.494, 91.890, 105.989),
        (GREEN, 79.332, 108.410, 142.140, 85.588, 78.605, 138.520),
        (BLUE, 25.466, 87.231, 282.788, 68.867, 93.675, 78.481),
        (WHITE, 100.000, 2.869, 209.492, 2.265, 12.068, 155.521),
    ])
    def test_known_colors(self, argb, j, chroma, hue, m, s, q):
        cam = Cam16.from_argb(argb)
        assert cam.j == pytest.approx(j, abs=0.01)
        assert cam.chroma == pytest.approx(chroma, abs=0.01)
        assert cam.hue == pytest.approx(hue, abs=0.01)
        assert cam.m == pytest.approx(m, abs=0.01)
        assert cam.s == pytest.approx(s, abs=0.01)
        assert cam.q == pytest.approx(q, abs=0.01)

    def test_black(self):
        cam = Cam16.from_argb(BLACK)
        assert cam.j == pytest.approx(0.0, abs=1e-9)
        assert cam.chroma == pytest.approx(0.0, abs=1e-9)

    @pytest.mark.parametrize("argb", [RED, GREEN, BLUE, WHITE, 0xFF4285F4, 0xFF6B5E2A])
    def test_inverse_returns_color(self, argb):
        assert Cam16.from_argb(argb).to_argb() == argb

    @pytest.mark.parametrize("argb", [RED, 0xFF4285F4, 0xFF123456])
    def test_ucs_round_trip(self, argb):
        cam = Cam16.from_argb(argb)
        assert Cam16.from_ucs(cam.jstar, cam.astar, cam.bstar).to_argb() == argb

    def test_from_jch_at_zero_lightness(self):
        """J = 0 should give zero saturation instead of dividing by zero."""
        cam = Cam16.from_jch(0.0, 10.0, 120.0)
        assert cam.s == 0.0

    def test_distance(self):
        red = Cam16.from_argb(RED)
        assert red.distance(red) == 0.0
        assert red.distance(Cam16.from_argb(BLUE)) > red.distance(Cam16.from_argb(0xFFFF0808))

    def test_default_viewing_conditions_are_shared(self):
        assert ViewingConditions.make() == DEFAULT_VIEWING_CONDITIONS


class TestSolver:
    """Tests for solving HCT coordinates to sRGB."""

    def test_critical_planes_are_increasing(self):
        assert len(CRITICAL_PLANES) == 255
        assert all(a < b for a, b in zip(CRITICAL_PLANES, CRITICAL_PLANES[1:]))

    def test_tone_extremes(self):
        assert solve_to_argb(120.0, 60.0, 0.0) == BLACK
        assert solve_to_argb(120.0, 60.0, 100.0) == WHITE

    def test_zero_chroma_is_gray(self):
        for tone in (10.0, 37.5, 50.0, 90.0):
            assert solve_to_argb(200.0, 0.0, tone) == argb_from_lstar(tone)

    def test_hue_is_wrapped(self):
        assert solve_to_argb(-60.0, 40.0, 50.0) == solve_to_argb(300.0, 40.0, 50.0)
        assert solve_to_argb(420.0, 40.0, 50.0) == solve_to_argb(60.0, 40.0, 50.0)

    @pytest.mark.parametrize("hue", range(15, 360, 30))
    @pytest.mark.parametrize("chroma", [0, 10, 30, 50, 70, 100])
    @pytest.mark.parametrize("tone", [20, 40, 60, 80])
    def test_sufficiently_close(self, hue, chroma, tone):
        """Solved colors keep the tone and never overshoot chroma."""
        color = Hct.from_hct(hue, chroma, tone)
        assert color.tone == pytest.approx(tone, abs=0.5)
        assert color.chroma <= chroma + 2.5
        if color.chroma >= 10.0:
            assert difference_degrees(color.hue, hue) <= 4.0
        if color.chroma < chroma - 2.5:
            # Chroma can only fall short at the edge of the gamut
            assert _on_gamut_boundary(color.argb)


class TestHct:
    """Tests for the Hct color type."""

    def test_preserves_original_color(self):
        """Solving a color's own coordinates gives the same color back."""
        for r in range(0, 256, 51):
            for g in range(0, 256, 51):
                for b in range(0, 256, 51):
                    argb = 0xFF000000 | (r << 16) | (g << 8) | b
                    hct = Hct.from_argb(argb)
                    assert Hct.from_hct(hct.hue, hct.chroma, hct.tone).argb == argb

    def test_tone_is_lstar(self):
        hct = Hct.from_argb(0xFFAAE5A4)
        assert hct.tone == pytest.approx(lstar_from_argb(0xFFAAE5A4))
        assert hct.hue == pytest.approx(146.378, abs=0.01)
        assert hct.chroma == pytest.approx(39.852, abs=0.01)
        assert hct.tone == pytest.approx(85.638, abs=0.01)

    def test_with_tone(self):
        hct = Hct.from_argb(BLUE)
        darker = hct.with_tone(20.0)
        assert darker.tone == pytest.approx(20.0, abs=0.5)
        assert difference_degrees(darker.hue, hct.hue) <= 4.0

    def test_with_chroma_zero_is_gray(self):
        gray = Hct.from_argb(RED).with_chroma(0.0)
        assert red_from_argb(gray.argb) == green_from_argb(gray.argb) == blue_from_argb(gray.argb)

    def test_with_hue_keeps_tone(self):
        hct = Hct.from_argb(0xFF4285F4).with_hue(30.0)
        assert hct.tone == pytest.approx(Hct.from_argb(0xFF4285F4).tone, abs=0.5)

    def test_equality_by_argb(self):
        assert Hct.from_argb(BLUE) == Hct(BLUE)
        assert len({Hct.from_argb(BLUE), Hct(BLUE), Hct(RED)}) == 2
        assert Hct(BLUE) != BLUE

    def test_default_viewing_conditions_keep_color(self):
        hct = Hct.from_argb(0xFF4285F4)
        same = hct.in_viewing_conditions(DEFAULT_VIEWING_CONDITIONS)
        assert abs(red_from_argb(same.argb) - red_from_argb(hct.argb)) <= 1
        assert abs(green_from_argb(same.argb) - green_from_argb(hct.argb)) <= 1
        assert abs(blue_from_argb(same.argb) - blue_from_argb(hct.argb)) <= 1

    def test_darker_background_changes_appearance(self):
        """A dark background should map the color to a different one."""
        vc = ViewingConditions.make(background_lstar=10.0)
        hct = Hct.from_argb(0xFF4285F4)
        assert hct.in_viewing_conditions(vc).argb != hct.argb
