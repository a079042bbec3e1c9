"""Tests for ranking quantized colors as theme seeds."""

import pytest

from hct_theme.score import DEFAULT_FALLBACK_COLOR, score


def _populations(*colors, count=1) -> dict:
    return {color: count for color in colors}


class TestScore:
    """Tests for the score function."""

    def test_prioritizes_chroma(self):
        """Of black, white and blue only blue is chromatic enough."""
        ranked = score(_populations(0xFF000000, 0xFFFFFFFF, 0xFF0000FF), desired=4)
        assert ranked == [0xFF0000FF]

    def test_prioritizes_chroma_when_proportions_equal(self):
        ranked = score(_populations(0xFFFF0000, 0xFF00FF00, 0xFF0000FF), desired=4)
        assert ranked == [0xFFFF0000, 0xFF00FF00, 0xFF0000FF]

    def test_falls_back_when_nothing_qualifies(self):
        assert score(_populations(0xFF000000), desired=4) == [DEFAULT_FALLBACK_COLOR]
        assert DEFAULT_FALLBACK_COLOR == 0xFF4285F4

    def test_custom_fallback(self):
        assert score({0xFF000000: 10}, fallback_color=0xFF123456) == [0xFF123456]

    def test_empty_input_falls_back(self):
        assert score({}) == [DEFAULT_FALLBACK_COLOR]

    def test_dedupes_nearby_hues(self):
        """Two colors a few degrees apart in hue yield one seed."""
        ranked = score(_populations(0xFF008772, 0xFF318477), desired=4)
        assert ranked == [0xFF008772]

    def test_maximizes_hue_distance(self):
        ranked = score(_populations(0xFF008772, 0xFF008587, 0xFF007EBC), desired=2)
        assert ranked == [0xFF007EBC, 0xFF008772]

    def test_unfiltered_keeps_order(self):
        colors = {0xFF7EA16D: 67, 0xFFD8CCAE: 67, 0xFF835C0D: 49}
        ranked = score(colors, desired=3, filter=False)
        assert ranked == [0xFF7EA16D, 0xFFD8CCAE, 0xFF835C0D]

    def test_weighted_by_population(self):
        colors = {0xFFD33881: 14, 0xFF3205CC: 77, 0xFF0B48CF: 36, 0xFFA08F5D: 81}
        ranked = score(colors, desired=4)
        assert ranked == [0xFF3205CC, 0xFFA08F5D, 0xFFD33881]

    def test_spreads_hues_before_filling(self):
        colors = {0xFFDF241C: 85, 0xFF685859: 44, 0xFFD06D5F: 34, 0xFF561C54: 27, 0xFF713090: 88}
        ranked = score(colors, desired=5, filter=False)
        assert ranked == [0xFFDF241C, 0xFF561C54]

    def test_never_more_than_desired(self):
        colors = _populations(0xFFFF0000, 0xFF00FF00, 0xFF0000FF, 0xFFFFFF00, count=10)
        assert len(score(colors, desired=2)) == 2

    @pytest.mark.parametrize("desired", [0, -1])
    def test_desired_below_one_raises(self, desired):
        with pytest.raises(ValueError, match="at least 1"):
            score({0xFFFF0000: 10}, desired=desired)
