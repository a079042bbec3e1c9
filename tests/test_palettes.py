"""Tests for tonal palettes, key colors and core palettes."""

import pytest

from hct_theme.hct import Hct
from hct_theme.math_utils import difference_degrees
from hct_theme.palettes import COMMON_TONES, STOP_TONES, CorePalette, KeyColor, TonalPalette

BLUE = 0xFF0000FF


class TestTonalPalette:
    """Tests for TonalPalette tone lookup."""

    @pytest.mark.parametrize("tone, expected", [
        (0, 0xFF000000),
        (3, 0xFF00003C),
        (10, 0xFF00006E),
        (20, 0xFF0001AC),
        (30, 0xFF0000EF),
        (40, 0xFF343DFF),
        (50, 0xFF5A64FF),
        (60, 0xFF7C84FF),
        (70, 0xFF9DA3FF),
        (80, 0xFFBEC2FF),
        (90, 0xFFE0E0FF),
        (95, 0xFFF1EFFF),
        (99, 0xFFFFFBFF),
        (100, 0xFFFFFFFF),
    ])
    def test_blue_tones(self, tone, expected):
        blue = Hct.from_argb(BLUE)
        palette = TonalPalette.of(blue.hue, blue.chroma)
        assert palette.tone(tone) == expected

    def test_seed_palette_tones(self):
        """A green seed at chroma 36 should give the expected common tones."""
        seed = Hct.from_argb(0xFFAAE5A4)
        palette = TonalPalette.of(seed.hue, 36.0)
        expected = [
            0x000000, 0x002204, 0x093910, 0x235024, 0x3B693A, 0x538251, 0x6C9C68,
            0x86B881, 0xA0D39A, 0xBCF0B5, 0xC9FFC2, 0xF6FFF0, 0xFFFFFF,
        ]
        assert list(palette.tones().values()) == [0xFF000000 | c for c in expected]

    def test_tones_keys(self):
        palette = TonalPalette.of(120.0, 20.0)
        assert tuple(palette.tones()) == COMMON_TONES
        assert tuple(palette.stops()) == STOP_TONES

    def test_tones_are_monotonic(self):
        """Higher tones should never be darker."""
        palette = TonalPalette.of(270.0, 48.0)
        tones = [Hct.from_argb(palette.tone(t)).tone for t in range(0, 101)]
        assert all(a <= b + 1e-9 for a, b in zip(tones, tones[1:]))

    def test_tone_is_cached(self):
        palette = TonalPalette.of(30.0, 40.0)
        first = palette.tone(42.5)
        assert palette._cache[42.5] == first
        assert palette.tone(42.5) == first

    def test_from_argb_keeps_color_as_key(self):
        palette = TonalPalette.from_argb(BLUE)
        assert palette.key_color.argb == BLUE
        assert palette.hue == pytest.approx(282.788, abs=0.01)

    def test_get_hct(self):
        palette = TonalPalette.of(200.0, 30.0)
        hct = palette.get_hct(60.0)
        assert hct.argb == palette.tone(60.0)
        assert hct.tone == pytest.approx(60.0, abs=0.5)


class TestKeyColor:
    """Tests for the key color search."""

    @pytest.mark.parametrize("hue, chroma, argb", [
        (270.0, 16.0, 0xFF71778B),
        (149.0, 200.0, 0xFF00FE69),
        (50.0, 3.0, 0xFF7D7672),
        (0.0, 0.0, 0xFF777777),
        (100.0, 100.0, 0xFFFCDC00),
    ])
    def test_known_key_colors(self, hue, chroma, argb):
        assert KeyColor(hue, chroma).create().argb == argb

    def test_reachable_chroma_stays_near_tone_50(self):
        key = TonalPalette.of(270.0, 16.0).key_color
        assert key.tone == pytest.approx(50.0, abs=1.0)
        assert key.chroma == pytest.approx(16.0, abs=0.5)

    def test_unreachable_chroma_uses_most_chromatic_tone(self):
        """Chroma 200 is out of gamut, so the key color has the hue's peak chroma."""
        key = TonalPalette.of(149.0, 200.0).key_color
        assert key.tone > 80.0
        assert key.chroma == pytest.approx(89.629, abs=0.01)

    def test_gray_key_color(self):
        key = TonalPalette.of(0.0, 0.0).key_color
        assert key.tone == pytest.approx(50.0, abs=0.1)


class TestCorePalette:
    """Tests for CorePalette.of."""

    def test_default_chromas(self):
        core = CorePalette.of(BLUE)
        source = Hct.from_argb(BLUE)
        assert core.primary.chroma == pytest.approx(max(48.0, source.chroma))
        assert core.secondary.chroma == 16
        assert core.tertiary.chroma == 24
        assert core.neutral.chroma == 4
        assert core.neutral_variant.chroma == 8
        assert core.error.hue == 25
        assert core.error.chroma == 84

    def test_low_chroma_seed_raised_to_48(self):
        core = CorePalette.of(0xFF777777)
        assert core.primary.chroma == 48

    def test_tertiary_is_rotated(self):
        core = CorePalette.of(BLUE)
        assert difference_degrees(core.tertiary.hue, core.primary.hue) == pytest.approx(60.0)

    def test_content_follows_seed_chroma(self):
        source = Hct.from_argb(BLUE)
        core = CorePalette.of(BLUE, content=True)
        assert core.primary.chroma == pytest.approx(source.chroma)
        assert core.secondary.chroma == pytest.approx(source.chroma / 3)
        assert core.tertiary.chroma == pytest.approx(source.chroma / 2)
        assert core.neutral.chroma == 4
        assert core.neutral_variant.chroma == 8
