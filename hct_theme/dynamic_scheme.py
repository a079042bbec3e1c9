"""
Dynamic schemes: the six tonal palettes a theme variant derives from a seed.
"""

from dataclasses import dataclass
from enum import Enum

from .dislike import fix_if_disliked
from .hct import Hct
from .math_utils import sanitize_degrees_double
from .palettes import TonalPalette
from .temperature import TemperatureCache


class Variant(Enum):
    """Theme styles; each maps the seed to palettes differently."""
    MONOCHROME = 'monochrome'
    NEUTRAL = 'neutral'
    TONAL_SPOT = 'tonal_spot'
    VIBRANT = 'vibrant'
    EXPRESSIVE = 'expressive'
    FIDELITY = 'fidelity'
    CONTENT = 'content'
    RAINBOW = 'rainbow'
    FRUIT_SALAD = 'fruit_salad'

    @classmethod
    def from_name(cls, name: str) -> 'Variant':
        """
        Look up a variant by name, case-insensitively ('tonal-spot' also works).

        Raises:
            ValueError: If no variant has that name
        """
        key = name.strip().lower().replace('-', '_')
        for variant in cls:
            if variant.value == key:
                return variant
        choices = ', '.join(v.value for v in cls)
        raise ValueError(f"Unknown variant: {name!r} (choose from {choices})")


# =============================================================================
# Hue Rotation Tables
# =============================================================================

VIBRANT_HUES = (0, 41, 61, 101, 131, 181, 251, 301, 360)
VIBRANT_SECONDARY_ROTATIONS = (18, 15, 10, 12, 15, 18, 15, 12, 12)
VIBRANT_TERTIARY_ROTATIONS = (35, 30, 20, 25, 30, 35, 30, 25, 25)

EXPRESSIVE_HUES = (0, 21, 51, 121, 151, 191, 271, 321, 360)
EXPRESSIVE_SECONDARY_ROTATIONS = (45, 95, 45, 20, 45, 90, 45, 45, 45)
EXPRESSIVE_TERTIARY_ROTATIONS = (120, 120, 20, 45, 20, 15, 20, 120, 120)

ERROR_HUE = 25.0
ERROR_CHROMA = 84.0

PALETTE_ROLES = ('primary', 'secondary', 'tertiary', 'neutral', 'neutral_variant', 'error')


def get_rotated_hue(source_hue: float, hues, rotations) -> float:
    """
    Rotate a hue by the amount assigned to the segment it falls in.

    Args:
        source_hue: Hue in degrees
        hues: Ascending segment boundaries from 0 to 360
        rotations: Rotation for each segment; a single value applies everywhere

    Returns:
        The rotated hue, or source_hue unchanged if it sits on a boundary
    """
    if len(rotations) == 1:
        return sanitize_degrees_double(source_hue + rotations[0])
    for i in range(len(hues) - 1):
        this_hue = hues[i]
        next_hue = hues[i + 1]
        if this_hue < source_hue < next_hue:
            return sanitize_degrees_double(source_hue + rotations[i])
    return source_hue


# =============================================================================
# Dynamic Scheme
# =============================================================================

@dataclass(frozen=True)
class DynamicScheme:
    """A seed, a variant, a mode and a contrast level, with the palettes they imply."""
    source_color_hct: Hct
    variant: Variant
    is_dark: bool
    contrast_level: float  # -1 (reduced) to 1 (high)
    primary_palette: TonalPalette
    secondary_palette: TonalPalette
    tertiary_palette: TonalPalette
    neutral_palette: TonalPalette
    neutral_variant_palette: TonalPalette
    error_palette: TonalPalette

    @property
    def source_color_argb(self) -> int:
        return self.source_color_hct.argb

    @classmethod
    def from_variant(cls, source_color_hct: Hct, variant: Variant,
                     is_dark: bool, contrast_level: float = 0.0) -> 'DynamicScheme':
        """Build the scheme of a variant for a seed color."""
        palettes = variant_palettes(source_color_hct, variant)
        return cls(
            source_color_hct=source_color_hct,
            variant=variant,
            is_dark=is_dark,
            contrast_level=contrast_level,
            primary_palette=palettes[0],
            secondary_palette=palettes[1],
            tertiary_palette=palettes[2],
            neutral_palette=palettes[3],
            neutral_variant_palette=palettes[4],
            error_palette=palettes[5],
        )


def make_scheme(source_color: int, variant: Variant = Variant.TONAL_SPOT,
                is_dark: bool = False, contrast_level: float = 0.0) -> DynamicScheme:
    """Scheme for an ARGB seed color."""
    return DynamicScheme.from_variant(Hct.from_argb(source_color), variant, is_dark, contrast_level)


# =============================================================================
# Variant Palettes
# =============================================================================

def _palette_specs(variant: Variant, hue: float, chroma: float) -> dict:
    """Hue and chroma of each palette role a variant derives from a seed."""
    if variant == Variant.MONOCHROME:
        return dict.fromkeys(PALETTE_ROLES[:5], (hue, 0.0))

    if variant == Variant.NEUTRAL:
        return {
            'primary': (hue, 12.0),
            'secondary': (hue, 8.0),
            'tertiary': (hue, 16.0),
            'neutral': (hue, 2.0),
            'neutral_variant': (hue, 2.0),
        }

    if variant == Variant.TONAL_SPOT:
        return {
            'primary': (hue, 36.0),
            'secondary': (hue, 16.0),
            'tertiary': (sanitize_degrees_double(hue + 60.0), 24.0),
            'neutral': (hue, 6.0),
            'neutral_variant': (hue, 8.0),
        }

    if variant == Variant.VIBRANT:
        return {
            'primary': (hue, 200.0),
            'secondary': (get_rotated_hue(hue, VIBRANT_HUES, VIBRANT_SECONDARY_ROTATIONS), 24.0),
            'tertiary': (get_rotated_hue(hue, VIBRANT_HUES, VIBRANT_TERTIARY_ROTATIONS), 32.0),
            'neutral': (hue, 10.0),
            'neutral_variant': (hue, 12.0),
        }

    if variant == Variant.EXPRESSIVE:
        return {
            'primary': (sanitize_degrees_double(hue + 240.0), 40.0),
            'secondary': (get_rotated_hue(hue, EXPRESSIVE_HUES, EXPRESSIVE_SECONDARY_ROTATIONS), 24.0),
            'tertiary': (get_rotated_hue(hue, EXPRESSIVE_HUES, EXPRESSIVE_TERTIARY_ROTATIONS), 32.0),
            'neutral': (sanitize_degrees_double(hue + 15.0), 8.0),
            'neutral_variant': (sanitize_degrees_double(hue + 15.0), 12.0),
        }

    # Fidelity and content derive the tertiary palette from temperature
    if variant in (Variant.FIDELITY, Variant.CONTENT):
        return {
            'primary': (hue, chroma),
            'secondary': (hue, max(chroma - 32.0, chroma * 0.5)),
            'neutral': (hue, chroma / 8.0),
            'neutral_variant': (hue, chroma / 8.0 + 4.0),
        }

    if variant == Variant.RAINBOW:
        return {
            'primary': (hue, 48.0),
            'secondary': (hue, 16.0),
            'tertiary': (sanitize_degrees_double(hue + 60.0), 24.0),
            'neutral': (hue, 0.0),
            'neutral_variant': (hue, 0.0),
        }

    if variant == Variant.FRUIT_SALAD:
        return {
            'primary': (sanitize_degrees_double(hue - 50.0), 48.0),
            'secondary': (sanitize_degrees_double(hue - 50.0), 36.0),
            'tertiary': (hue, 36.0),
            'neutral': (hue, 10.0),
            'neutral_variant': (hue, 16.0),
        }

    raise ValueError(f"Unknown variant: {variant!r}")


def variant_palette(source: Hct, variant: Variant, role: str) -> TonalPalette:
    """
    The palette a variant builds for one role from a seed color.

    Args:
        source: Seed color
        variant: Scheme variant
        role: One of PALETTE_ROLES

    Returns:
        TonalPalette for that role; the error role is the same for every seed

    Raises:
        ValueError: If variant is not a Variant or role is unknown
    """
    if role not in PALETTE_ROLES:
        raise ValueError(f"Unknown palette role: {role!r}")
    specs = _palette_specs(variant, source.hue, source.chroma)
    if role == 'error':
        return TonalPalette.of(ERROR_HUE, ERROR_CHROMA)

    if role == 'tertiary' and variant in (Variant.FIDELITY, Variant.CONTENT):
        temperatures = TemperatureCache(source)
        if variant == Variant.FIDELITY:
            tertiary_seed = temperatures.complement()
        else:
            tertiary_seed = temperatures.analogous(count=3, divisions=6)[-1]
        return TonalPalette.from_hct(fix_if_disliked(tertiary_seed))

    hue, chroma = specs[role]
    return TonalPalette.of(hue, chroma)


def variant_palettes(source: Hct, variant: Variant) -> tuple:
    """
    Primary, secondary, tertiary, neutral, neutral variant and error palettes.

    Raises:
        ValueError: If variant is not a Variant
    """
    return tuple(variant_palette(source, variant, role) for role in PALETTE_ROLES)
