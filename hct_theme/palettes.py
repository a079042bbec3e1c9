"""
Tonal palettes: one hue and chroma, any tone.
"""

from dataclasses import dataclass

from .hct import Hct
from .math_utils import sanitize_degrees_double


# =============================================================================
# Constants
# =============================================================================

COMMON_TONES = (0, 10, 20, 30, 40, 50, 60, 70, 80, 90, 95, 99, 100)
STOP_TONES = tuple(range(0, 101, 5))

KEY_COLOR_MAX_CHROMA = 200.0  # Chroma requested when probing a tone's ceiling
KEY_COLOR_PIVOT_TONE = 50  # Tone the key color search gravitates toward
KEY_COLOR_EPSILON = 0.01  # Chroma shortfall still counted as sufficient


# =============================================================================
# Key Color
# =============================================================================

class KeyColor:
    """
    Finds the color nearest tone 50 that reaches the requested chroma.

    Binary search over integer tones, using the maximum chroma each tone can
    reach at the hue. If no tone reaches it, the most chromatic tone is used.
    """

    def __init__(self, hue: float, requested_chroma: float):
        self.hue = hue
        self.requested_chroma = requested_chroma
        self._chroma_cache = {}

    def create(self) -> Hct:
        lower_tone = 0
        upper_tone = 100
        while lower_tone < upper_tone:
            mid_tone = (lower_tone + upper_tone) // 2
            is_ascending = self._max_chroma(mid_tone) < self._max_chroma(mid_tone + 1)
            sufficient_chroma = self._max_chroma(mid_tone) >= self.requested_chroma - KEY_COLOR_EPSILON

            if sufficient_chroma:
                # Narrow toward the pivot
                if abs(lower_tone - KEY_COLOR_PIVOT_TONE) < abs(upper_tone - KEY_COLOR_PIVOT_TONE):
                    upper_tone = mid_tone
                else:
                    if lower_tone == mid_tone:
                        return Hct.from_hct(self.hue, self.requested_chroma, lower_tone)
                    lower_tone = mid_tone
            else:
                # Follow the slope toward more chroma
                if is_ascending:
                    lower_tone = mid_tone + 1
                else:
                    upper_tone = mid_tone

        return Hct.from_hct(self.hue, self.requested_chroma, lower_tone)

    def _max_chroma(self, tone: int) -> float:
        if tone not in self._chroma_cache:
            self._chroma_cache[tone] = Hct.from_hct(self.hue, KEY_COLOR_MAX_CHROMA, tone).chroma
        return self._chroma_cache[tone]


# =============================================================================
# Tonal Palette
# =============================================================================

class TonalPalette:
    """
    All the tones of a single hue and chroma.

    Tones are solved on first use and cached. The cache only ever grows and
    each entry depends solely on (hue, chroma, tone).
    """

    def __init__(self, hue: float, chroma: float, key_color: Hct):
        self.hue = hue
        self.chroma = chroma
        self.key_color = key_color
        self._cache = {}

    @classmethod
    def from_argb(cls, argb: int) -> 'TonalPalette':
        """Palette with the hue and chroma of argb, keyed on argb itself."""
        return cls.from_hct(Hct.from_argb(argb))

    @classmethod
    def from_hct(cls, hct: Hct) -> 'TonalPalette':
        return cls(hct.hue, hct.chroma, hct)

    @classmethod
    def of(cls, hue: float, chroma: float) -> 'TonalPalette':
        """Palette for a hue and chroma, with a derived key color."""
        key_color = KeyColor(hue, chroma).create()
        return cls(hue, chroma, key_color)

    def tone(self, tone: float) -> int:
        """ARGB color of the given tone (0-100)."""
        color = self._cache.get(tone)
        if color is None:
            color = Hct.from_hct(self.hue, self.chroma, tone).argb
            self._cache[tone] = color
        return color

    def get_hct(self, tone: float) -> Hct:
        return Hct.from_argb(self.tone(tone))

    def tones(self) -> dict:
        """The common tone stops: 0, 10, ..., 90, 95, 99, 100."""
        return {t: self.tone(t) for t in COMMON_TONES}

    def stops(self) -> dict:
        """Every fifth tone from 0 to 100."""
        return {t: self.tone(t) for t in STOP_TONES}

    def __repr__(self):
        return (f"TonalPalette(hue={self.hue:.2f}, chroma={self.chroma:.2f}, "
                f"key_color={self.key_color.argb:#010x})")


# =============================================================================
# Core Palette
# =============================================================================

@dataclass(frozen=True)
class CorePalette:
    """The six key palettes derived from a single color."""
    primary: TonalPalette
    secondary: TonalPalette
    tertiary: TonalPalette
    neutral: TonalPalette
    neutral_variant: TonalPalette
    error: TonalPalette

    @classmethod
    def of(cls, argb: int, content: bool = False) -> 'CorePalette':
        """
        Build the palettes from a seed color.

        Args:
            argb: Seed color
            content: Follow the seed's own chroma instead of fixed chroma levels
        """
        hct = Hct.from_argb(argb)
        hue = hct.hue
        chroma = hct.chroma
        if content:
            return cls(
                primary=TonalPalette.of(hue, chroma),
                secondary=TonalPalette.of(hue, chroma / 3),
                tertiary=TonalPalette.of(sanitize_degrees_double(hue + 60), chroma / 2),
                neutral=TonalPalette.of(hue, min(chroma / 12, 4)),
                neutral_variant=TonalPalette.of(hue, min(chroma / 6, 8)),
                error=TonalPalette.of(25, 84),
            )
        return cls(
            primary=TonalPalette.of(hue, max(48, chroma)),
            secondary=TonalPalette.of(hue, 16),
            tertiary=TonalPalette.of(sanitize_degrees_double(hue + 60), 24),
            neutral=TonalPalette.of(hue, 4),
            neutral_variant=TonalPalette.of(hue, 8),
            error=TonalPalette.of(25, 84),
        )
