"""
Wu's color quantizer.

Colors are binned into a 33x33x33 histogram (5 bits per channel plus a zero
border). Cumulative moments over the cube give the weight, mean and variance
of any box in constant time, so the box of largest variance can be split
repeatedly along the plane that best separates it.
"""

from dataclasses import dataclass

import numpy as np

from .color_utils import argb_from_rgb
from .quantizer_map import QuantizerResult, population_map


# =============================================================================
# Constants
# =============================================================================

INDEX_BITS = 5  # Bits kept per channel
BITS_TO_REMOVE = 8 - INDEX_BITS
SIDE_LENGTH = (1 << INDEX_BITS) + 1  # 33, one zero border cell
MAX_INDEX = SIDE_LENGTH - 1

RED, GREEN, BLUE = 0, 1, 2


@dataclass
class Box:
    """Half-open box of histogram cells, (r0, r1] x (g0, g1] x (b0, b1]."""
    r0: int = 0
    r1: int = 0
    g0: int = 0
    g1: int = 0
    b0: int = 0
    b1: int = 0
    vol: int = 0


# =============================================================================
# Wu Quantizer
# =============================================================================

class QuantizerWu:
    """Splits the color cube into at most max_colors boxes."""

    def __init__(self):
        self.weights = None
        self.moments_r = None
        self.moments_g = None
        self.moments_b = None
        self.moments = None
        self.cubes = []

    def quantize(self, pixels, max_colors: int) -> QuantizerResult:
        """
        Quantize a pixel sequence.

        Args:
            pixels: Iterable or numpy array of ARGB integers
            max_colors: Upper bound on the number of boxes

        Returns:
            QuantizerResult with each box's mean color and population
        """
        return self.quantize_counts(population_map(pixels), max_colors)

    def quantize_counts(self, color_to_count: dict, max_colors: int) -> QuantizerResult:
        """Quantize an already-counted color map."""
        if not color_to_count or max_colors < 1:
            return QuantizerResult(color_to_count={}, entries=[])

        self.construct_histogram(color_to_count)
        self.compute_moments()
        result_count = self.create_boxes(max_colors)

        color_to_count = {}
        for argb, population in self.create_result(result_count):
            color_to_count[argb] = color_to_count.get(argb, 0) + population
        return QuantizerResult(color_to_count=color_to_count,
                               entries=list(color_to_count.items()))

    def construct_histogram(self, color_to_count: dict):
        shape = (SIDE_LENGTH, SIDE_LENGTH, SIDE_LENGTH)
        self.weights = np.zeros(shape, dtype=np.int64)
        self.moments_r = np.zeros(shape, dtype=np.int64)
        self.moments_g = np.zeros(shape, dtype=np.int64)
        self.moments_b = np.zeros(shape, dtype=np.int64)
        self.moments = np.zeros(shape, dtype=np.int64)

        colors = np.fromiter(color_to_count.keys(), dtype=np.int64, count=len(color_to_count))
        counts = np.fromiter(color_to_count.values(), dtype=np.int64, count=len(color_to_count))

        red = (colors >> 16) & 255
        green = (colors >> 8) & 255
        blue = colors & 255

        i_r = (red >> BITS_TO_REMOVE) + 1
        i_g = (green >> BITS_TO_REMOVE) + 1
        i_b = (blue >> BITS_TO_REMOVE) + 1
        index = (i_r, i_g, i_b)

        np.add.at(self.weights, index, counts)
        np.add.at(self.moments_r, index, red * counts)
        np.add.at(self.moments_g, index, green * counts)
        np.add.at(self.moments_b, index, blue * counts)
        np.add.at(self.moments, index, counts * (red * red + green * green + blue * blue))

    def compute_moments(self):
        """Turn the histogram into 3D cumulative sums."""
        for name in ('weights', 'moments_r', 'moments_g', 'moments_b', 'moments'):
            cube = getattr(self, name)
            cube = cube.cumsum(axis=0).cumsum(axis=1).cumsum(axis=2)
            setattr(self, name, cube)

    def create_boxes(self, max_color_count: int) -> int:
        """
        Split boxes until max_color_count exist or none can be split.

        Returns:
            The number of boxes created
        """
        self.cubes = [Box() for _ in range(max_color_count)]
        first_box = self.cubes[0]
        first_box.r1 = MAX_INDEX
        first_box.g1 = MAX_INDEX
        first_box.b1 = MAX_INDEX

        volume_variance = [0.0] * max_color_count
        next_index = 0
        generated_color_count = max_color_count
        i = 1
        while i < max_color_count:
            if self.cut(self.cubes[next_index], self.cubes[i]):
                volume_variance[next_index] = (
                    self.variance(self.cubes[next_index]) if self.cubes[next_index].vol > 1 else 0.0)
                volume_variance[i] = self.variance(self.cubes[i]) if self.cubes[i].vol > 1 else 0.0
            else:
                volume_variance[next_index] = 0.0
                i -= 1

            next_index = 0
            temp = volume_variance[0]
            for j in range(1, i + 1):
                if volume_variance[j] > temp:
                    temp = volume_variance[j]
                    next_index = j

            if temp <= 0.0:
                generated_color_count = i + 1
                break
            i += 1

        return generated_color_count

    def create_result(self, color_count: int) -> list:
        """Mean color and population of each non-empty box."""
        results = []
        for cube in self.cubes[:color_count]:
            weight = volume(cube, self.weights)
            if weight > 0:
                r = volume(cube, self.moments_r) // weight
                g = volume(cube, self.moments_g) // weight
                b = volume(cube, self.moments_b) // weight
                results.append((argb_from_rgb(r, g, b), weight))
        return results

    def variance(self, cube: Box) -> float:
        dr = volume(cube, self.moments_r)
        dg = volume(cube, self.moments_g)
        db = volume(cube, self.moments_b)
        xx = volume(cube, self.moments)
        weight = volume(cube, self.weights)
        if weight == 0:
            return 0.0
        hypotenuse = dr * dr + dg * dg + db * db
        return xx - hypotenuse / weight

    def cut(self, one: Box, two: Box) -> bool:
        """Split box one in place, moving the upper part into box two."""
        whole_r = volume(one, self.moments_r)
        whole_g = volume(one, self.moments_g)
        whole_b = volume(one, self.moments_b)
        whole_w = volume(one, self.weights)
        wholes = (whole_r, whole_g, whole_b, whole_w)

        max_r, cut_r = self.maximize(one, RED, one.r0 + 1, one.r1, *wholes)
        max_g, cut_g = self.maximize(one, GREEN, one.g0 + 1, one.g1, *wholes)
        max_b, cut_b = self.maximize(one, BLUE, one.b0 + 1, one.b1, *wholes)

        if max_r >= max_g and max_r >= max_b:
            if cut_r < 0:
                return False
            direction = RED
        elif max_g >= max_r and max_g >= max_b:
            direction = GREEN
        else:
            direction = BLUE

        two.r1 = one.r1
        two.g1 = one.g1
        two.b1 = one.b1

        if direction == RED:
            one.r1 = cut_r
            two.r0 = one.r1
            two.g0 = one.g0
            two.b0 = one.b0
        elif direction == GREEN:
            one.g1 = cut_g
            two.r0 = one.r0
            two.g0 = one.g1
            two.b0 = one.b0
        else:
            one.b1 = cut_b
            two.r0 = one.r0
            two.g0 = one.g0
            two.b0 = one.b1

        one.vol = (one.r1 - one.r0) * (one.g1 - one.g0) * (one.b1 - one.b0)
        two.vol = (two.r1 - two.r0) * (two.g1 - two.g0) * (two.b1 - two.b0)
        return True

    def maximize(self, cube: Box, direction: int, first: int, last: int,
                 whole_r: int, whole_g: int, whole_b: int, whole_w: int) -> tuple:
        """
        Best cutting plane along one axis.

        Returns:
            Tuple of (between-group variance, plane index or -1)
        """
        bottom_r = bottom(cube, direction, self.moments_r)
        bottom_g = bottom(cube, direction, self.moments_g)
        bottom_b = bottom(cube, direction, self.moments_b)
        bottom_w = bottom(cube, direction, self.weights)

        maximum = 0.0
        cut_location = -1
        for i in range(first, last):
            half_r = bottom_r + top(cube, direction, i, self.moments_r)
            half_g = bottom_g + top(cube, direction, i, self.moments_g)
            half_b = bottom_b + top(cube, direction, i, self.moments_b)
            half_w = bottom_w + top(cube, direction, i, self.weights)
            if half_w == 0:
                continue

            temp = (half_r * half_r + half_g * half_g + half_b * half_b) / half_w

            half_r = whole_r - half_r
            half_g = whole_g - half_g
            half_b = whole_b - half_b
            half_w = whole_w - half_w
            if half_w == 0:
                continue

            temp += (half_r * half_r + half_g * half_g + half_b * half_b) / half_w

            if temp > maximum:
                maximum = temp
                cut_location = i

        return maximum, cut_location


# =============================================================================
# Moment Lookups
# =============================================================================

def volume(cube: Box, moment: np.ndarray) -> int:
    """Sum of a moment over the box."""
    return int(
        moment[cube.r1, cube.g1, cube.b1]
        - moment[cube.r1, cube.g1, cube.b0]
        - moment[cube.r1, cube.g0, cube.b1]
        + moment[cube.r1, cube.g0, cube.b0]
        - moment[cube.r0, cube.g1, cube.b1]
        + moment[cube.r0, cube.g1, cube.b0]
        + moment[cube.r0, cube.g0, cube.b1]
        - moment[cube.r0, cube.g0, cube.b0]
    )


def bottom(cube: Box, direction: int, moment: np.ndarray) -> int:
    """Negated sum of the moment over the box's lower face along direction."""
    if direction == RED:
        return int(
            -moment[cube.r0, cube.g1, cube.b1]
            + moment[cube.r0, cube.g1, cube.b0]
            + moment[cube.r0, cube.g0, cube.b1]
            - moment[cube.r0, cube.g0, cube.b0]
        )
    if direction == GREEN:
        return int(
            -moment[cube.r1, cube.g0, cube.b1]
            + moment[cube.r1, cube.g0, cube.b0]
            + moment[cube.r0, cube.g0, cube.b1]
            - moment[cube.r0, cube.g0, cube.b0]
        )
    return int(
        -moment[cube.r1, cube.g1, cube.b0]
        + moment[cube.r1, cube.g0, cube.b0]
        + moment[cube.r0, cube.g1, cube.b0]
        - moment[cube.r0, cube.g0, cube.b0]
    )


def top(cube: Box, direction: int, position: int, moment: np.ndarray) -> int:
    """Sum of the moment over the box's slab up to plane `position`."""
    if direction == RED:
        return int(
            moment[position, cube.g1, cube.b1]
            - moment[position, cube.g1, cube.b0]
            - moment[position, cube.g0, cube.b1]
            + moment[position, cube.g0, cube.b0]
        )
    if direction == GREEN:
        return int(
            moment[cube.r1, position, cube.b1]
            - moment[cube.r1, position, cube.b0]
            - moment[cube.r0, position, cube.b1]
            + moment[cube.r0, position, cube.b0]
        )
    return int(
        moment[cube.r1, cube.g1, position]
        - moment[cube.r1, cube.g0, position]
        - moment[cube.r0, cube.g1, position]
        + moment[cube.r0, cube.g0, position]
    )
