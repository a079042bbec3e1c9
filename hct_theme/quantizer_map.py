"""
Population map: distinct opaque colors and how often each occurs.
"""

from dataclasses import dataclass, field

import numpy as np


@dataclass
class QuantizerResult:
    """Output of a quantizer."""
    color_to_count: dict  # argb -> population
    entries: list = field(default_factory=list)  # [(argb, population)], ordered

    @property
    def colors(self) -> list:
        return [argb for argb, _ in self.entries]


def as_argb_array(pixels) -> np.ndarray:
    """Flatten a pixel sequence into an int64 array of unsigned ARGB values."""
    if isinstance(pixels, np.ndarray):
        array = pixels.astype(np.int64, copy=False).ravel()
    else:
        array = np.fromiter((int(p) for p in pixels), dtype=np.int64)
    return array & 0xFFFFFFFF


def population_map(pixels) -> dict:
    """
    Count the distinct opaque colors in a pixel sequence.

    Pixels with alpha below 255 are discarded.

    Args:
        pixels: Iterable of ARGB integers, or a numpy array of them

    Returns:
        Dict of argb -> count, in order of first occurrence
    """
    array = as_argb_array(pixels)
    array = array[(array >> 24) == 255]
    if array.size == 0:
        return {}

    colors, first_index, counts = np.unique(array, return_index=True, return_counts=True)
    order = np.argsort(first_index, kind='stable')
    return {int(colors[i]): int(counts[i]) for i in order}
