"""
Image quantization pipeline: Wu boxes refined by weighted k-means.
"""

from .quantizer_map import QuantizerResult, as_argb_array, population_map
from .quantizer_wsmeans import QuantizerWsmeans
from .quantizer_wu import QuantizerWu

__all__ = [
    'MAX_INPUT_COLORS',
    'QuantizerCelebi',
    'QuantizerResult',
    'as_argb_array',
    'population_map',
    'sort_entries',
]


MAX_INPUT_COLORS = 65_536  # Distinct colors fed to the Wu stage


def sort_entries(color_to_count: dict) -> list:
    """Entries by population descending, ties by ascending ARGB."""
    return sorted(color_to_count.items(), key=lambda item: (-item[1], item[0]))


class QuantizerCelebi:
    """
    Wu quantization followed by WSMeans, as proposed by M. Emre Celebi.

    Wu gives fast, well spread starting clusters; k-means then moves them to
    the population-weighted centers of the colors they represent.
    """

    @staticmethod
    def quantize(pixels, max_colors: int,
                 max_input_colors: int = MAX_INPUT_COLORS) -> QuantizerResult:
        """
        Reduce a pixel sequence to at most max_colors representative colors.

        Args:
            pixels: Iterable or numpy array of ARGB integers; pixels that
                are not fully opaque are ignored
            max_colors: Upper bound on the number of colors returned
            max_input_colors: Most populous distinct colors passed to Wu

        Returns:
            QuantizerResult whose populations sum to the opaque pixel count,
            with entries ordered by population descending then ARGB ascending
        """
        counts = population_map(pixels)
        if not counts or max_colors < 1:
            return QuantizerResult(color_to_count={}, entries=[])

        wu_input = counts
        if len(counts) > max_input_colors:
            wu_input = dict(sort_entries(counts)[:max_input_colors])

        wu_result = QuantizerWu().quantize_counts(wu_input, max_colors)
        color_to_count = QuantizerWsmeans.quantize(counts, wu_result.colors, max_colors)

        entries = sort_entries(color_to_count)
        return QuantizerResult(color_to_count=dict(entries), entries=entries)
