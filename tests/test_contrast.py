"""Tests for contrast ratios between tones."""

import pytest

from hct_theme import contrast


class TestRatio:
    """Tests for ratio_of_tones and ratio_of_ys."""

    def test_limits(self):
        assert contrast.ratio_of_tones(50.0, 50.0) == pytest.approx(1.0)
        assert contrast.ratio_of_tones(0.0, 100.0) == pytest.approx(21.0)

    def test_symmetric(self):
        assert contrast.ratio_of_tones(20.0, 80.0) == pytest.approx(contrast.ratio_of_tones(80.0, 20.0))

    def test_out_of_range_tones_clamped(self):
        assert contrast.ratio_of_tones(-10.0, 110.0) == pytest.approx(21.0)

    def test_ratio_of_ys(self):
        assert contrast.ratio_of_ys(100.0, 0.0) == pytest.approx(21.0)
        assert contrast.ratio_of_ys(0.0, 100.0) == pytest.approx(21.0)


class TestLighterDarker:
    """Tests for finding tones that reach a ratio."""

    @pytest.mark.parametrize("tone, ratio", [(0.0, 4.5), (20.0, 3.0), (40.0, 2.0), (10.0, 7.0)])
    def test_lighter_reaches_ratio(self, tone, ratio):
        result = contrast.lighter(tone, ratio)
        assert result > tone
        assert contrast.ratio_of_tones(result, tone) >= ratio

    @pytest.mark.parametrize("tone, ratio", [(100.0, 4.5), (80.0, 3.0), (60.0, 2.0), (90.0, 7.0)])
    def test_darker_reaches_ratio(self, tone, ratio):
        result = contrast.darker(tone, ratio)
        assert result < tone
        assert contrast.ratio_of_tones(result, tone) >= ratio

    def test_unreachable_returns_minus_one(self):
        assert contrast.lighter(60.0, 10.0) == -1.0
        assert contrast.darker(40.0, 10.0) == -1.0

    def test_out_of_range_input(self):
        assert contrast.lighter(-1.0, 3.0) == -1.0
        assert contrast.darker(101.0, 3.0) == -1.0

    def test_unsafe_variants_clamp(self):
        assert contrast.lighter_unsafe(60.0, 10.0) == 100.0
        assert contrast.darker_unsafe(40.0, 10.0) == 0.0

    def test_unsafe_variants_match_when_reachable(self):
        assert contrast.lighter_unsafe(20.0, 3.0) == contrast.lighter(20.0, 3.0)
        assert contrast.darker_unsafe(80.0, 3.0) == contrast.darker(80.0, 3.0)
