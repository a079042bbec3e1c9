"""
Ranks quantized colors by how well they would serve as a theme seed.

Colors score higher for being chromatic and for belonging to a hue family
that covers much of the image. The top picks are then spread out in hue.
"""

import math

from .hct import Hct
from .math_utils import difference_degrees, round_half_up, sanitize_degrees_int


# =============================================================================
# Constants
# =============================================================================

TARGET_CHROMA = 48.0  # A1 chroma
WEIGHT_PROPORTION = 0.7
WEIGHT_CHROMA_ABOVE = 0.3
WEIGHT_CHROMA_BELOW = 0.1
CUTOFF_CHROMA = 5.0
CUTOFF_EXCITED_PROPORTION = 0.01
MAX_HUE_DIFFERENCE = 90  # Starting spread between chosen hues, degrees
MIN_HUE_DIFFERENCE = 15  # Smallest spread tried before giving up

DEFAULT_DESIRED = 4
DEFAULT_FALLBACK_COLOR = 0xFF4285F4  # Google Blue


def score(colors_to_population: dict, desired: int = DEFAULT_DESIRED,
          fallback_color: int = DEFAULT_FALLBACK_COLOR, filter: bool = True) -> list:
    """
    Pick up to `desired` seed colors from a quantized image.

    Args:
        colors_to_population: Dict of argb -> pixel count
        desired: Maximum number of colors to return
        fallback_color: Returned alone when no color qualifies
        filter: Drop near-gray colors and hues covering under 1% of the image

    Returns:
        ARGB colors, best first; never empty

    Raises:
        ValueError: If desired is less than 1
    """
    if desired < 1:
        raise ValueError(f"desired must be at least 1, got {desired}")

    colors_hct = []
    hue_population = [0] * 360
    population_sum = 0.0
    for argb, population in colors_to_population.items():
        hct = Hct.from_argb(argb)
        colors_hct.append(hct)
        hue = math.floor(hct.hue)
        hue_population[hue] += population
        population_sum += population

    # Each hue excites its neighbours, 14 degrees below to 15 above
    hue_excited_proportions = [0.0] * 360
    if population_sum > 0:
        for hue in range(360):
            proportion = hue_population[hue] / population_sum
            for i in range(hue - 14, hue + 16):
                hue_excited_proportions[sanitize_degrees_int(i)] += proportion

    scored_hcts = []
    for hct in colors_hct:
        hue = sanitize_degrees_int(round_half_up(hct.hue))
        proportion = hue_excited_proportions[hue]
        if filter and (hct.chroma < CUTOFF_CHROMA or proportion <= CUTOFF_EXCITED_PROPORTION):
            continue

        proportion_score = proportion * 100.0 * WEIGHT_PROPORTION
        chroma_weight = WEIGHT_CHROMA_BELOW if hct.chroma < TARGET_CHROMA else WEIGHT_CHROMA_ABOVE
        chroma_score = (hct.chroma - TARGET_CHROMA) * chroma_weight
        scored_hcts.append((hct, proportion_score + chroma_score))

    scored_hcts.sort(key=lambda item: item[1], reverse=True)

    # Relax the hue spread until enough colors are found
    chosen_colors = []
    for difference in range(MAX_HUE_DIFFERENCE, MIN_HUE_DIFFERENCE - 1, -1):
        chosen_colors = []
        for hct, _ in scored_hcts:
            if not any(difference_degrees(hct.hue, chosen.hue) < difference
                       for chosen in chosen_colors):
                chosen_colors.append(hct)
            if len(chosen_colors) >= desired:
                break
        if len(chosen_colors) >= desired:
            break

    if not chosen_colors:
        return [fallback_color]
    return [hct.argb for hct in chosen_colors]
