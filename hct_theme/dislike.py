"""
Detects and fixes the dark yellow-greens that are widely disliked.
"""

from .hct import Hct
from .math_utils import round_half_up


DISLIKED_HUE_MIN = 90  # Inclusive, rounded degrees
DISLIKED_HUE_MAX = 111  # Inclusive, rounded degrees
DISLIKED_CHROMA_MIN = 16  # Exclusive, rounded
DISLIKED_TONE_MAX = 65  # Exclusive, rounded
FIXED_TONE = 70.0  # Tone a disliked color is lifted to


def is_disliked(hct: Hct) -> bool:
    hue_passes = DISLIKED_HUE_MIN <= round_half_up(hct.hue) <= DISLIKED_HUE_MAX
    chroma_passes = round_half_up(hct.chroma) > DISLIKED_CHROMA_MIN
    tone_passes = round_half_up(hct.tone) < DISLIKED_TONE_MAX
    return hue_passes and chroma_passes and tone_passes


def fix_if_disliked(hct: Hct) -> Hct:
    """Lighten a disliked color to tone 70, keeping hue and chroma."""
    if is_disliked(hct):
        return Hct.from_hct(hct.hue, hct.chroma, FIXED_TONE)
    return hct
