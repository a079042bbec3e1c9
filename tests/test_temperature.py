"""Tests for color temperature, complements and analogous colors."""

import pytest

from hct_theme.hct import Hct
from hct_theme.temperature import TemperatureCache

RED = 0xFFFF0000
GREEN = 0xFF00FF00
BLUE = 0xFF0000FF
WHITE = 0xFFFFFFFF
BLACK = 0xFF000000


class TestRawTemperature:
    """Tests for the raw temperature formula."""

    @pytest.mark.parametrize("argb, expected", [
        (BLUE, -1.393),
        (RED, 2.351),
        (GREEN, -0.267),
        (WHITE, -0.5),
        (BLACK, -0.5),
    ])
    def test_known_colors(self, argb, expected):
        assert TemperatureCache.raw_temperature(Hct.from_argb(argb)) == pytest.approx(expected, abs=0.001)


class TestTemperatureCache:
    """Tests for queries relative to an input color."""

    def test_hue_samples(self):
        cache = TemperatureCache(Hct.from_argb(BLUE))
        assert len(cache.hcts_by_hue) == 361
        assert len(cache.hcts_by_temp) == 362

    def test_relative_temperature_range(self):
        cache = TemperatureCache(Hct.from_argb(BLUE))
        assert cache.relative_temperature(cache.coldest) == pytest.approx(0.0)
        assert cache.relative_temperature(cache.warmest) == pytest.approx(1.0)
        assert 0.0 <= cache.input_relative_temperature <= 1.0

    def test_gray_relative_temperature(self):
        """Grays have no spread, so every color sits in the middle."""
        cache = TemperatureCache(Hct.from_argb(WHITE))
        assert cache.input_relative_temperature == 0.5

    @pytest.mark.parametrize("argb, expected", [
        (BLUE, 0xFF9D0002),
        (RED, 0xFF007BFC),
        (GREEN, 0xFFFFD2C9),
        (WHITE, 0xFFFFFFFF),
        (BLACK, 0xFF000000),
    ])
    def test_complement(self, argb, expected):
        assert TemperatureCache(Hct.from_argb(argb)).complement().argb == expected

    def test_analogous_blue(self):
        colors = TemperatureCache(Hct.from_argb(BLUE)).analogous()
        assert [c.argb for c in colors] == [
            0xFF00590C, 0xFF00564E, 0xFF0000FF, 0xFF6700CC, 0xFF81009F,
        ]

    def test_analogous_red(self):
        colors = TemperatureCache(Hct.from_argb(RED)).analogous()
        assert [c.argb for c in colors] == [
            0xFFF60082, 0xFFFC004C, 0xFFFF0000, 0xFFD95500, 0xFFAF7200,
        ]

    def test_analogous_input_in_middle(self):
        colors = TemperatureCache(Hct.from_argb(GREEN)).analogous(count=3, divisions=6)
        assert len(colors) == 3
        assert colors[1].argb == GREEN
