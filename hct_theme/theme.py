"""
Themes: light and dark role maps, palettes and custom colors from one seed.
"""

from dataclasses import dataclass, field, replace

from .blend import harmonize
from .color_utils import hex_from_argb
from .dynamic_scheme import ERROR_CHROMA, PALETTE_ROLES, DynamicScheme, Variant, variant_palette
from .hct import Hct
from .image import load_pixels
from .material_colors import resolve_scheme
from .palettes import CorePalette, TonalPalette
from .quantizer import QuantizerCelebi
from .score import score


# =============================================================================
# Constants
# =============================================================================

THEME_MAX_COLORS = 128  # Colors quantized before scoring

# Custom color group tones: color, on_color, color_container, on_color_container
CUSTOM_LIGHT_TONES = (40, 100, 90, 10)
CUSTOM_DARK_TONES = (80, 20, 30, 90)

PALETTE_NAMES = PALETTE_ROLES


# =============================================================================
# Data Structures
# =============================================================================

@dataclass(frozen=True)
class CustomColor:
    """A brand or status color to carry into the theme."""
    name: str
    value: int  # ARGB
    blend: bool = True  # Harmonize toward the theme's source color


@dataclass(frozen=True)
class ColorGroup:
    """A color with its on-color and container pair, for one mode."""
    color: int
    on_color: int
    color_container: int
    on_color_container: int


@dataclass(frozen=True)
class CustomColorGroup:
    """A custom color after harmonization, with light and dark groups."""
    color: CustomColor
    value: int  # ARGB actually used
    light: ColorGroup
    dark: ColorGroup


@dataclass
class Theme:
    """Everything derived from a source color."""
    source: int
    variant: Variant
    contrast_level: float
    schemes: dict  # 'light' / 'dark' -> {role: argb}
    palettes: dict  # palette name -> TonalPalette
    custom_colors: list = field(default_factory=list)  # CustomColorGroup


# =============================================================================
# Construction
# =============================================================================

def custom_color_group(source: int, color: CustomColor) -> CustomColorGroup:
    """Build the light and dark groups of a custom color."""
    value = color.value
    if color.blend:
        value = harmonize(value, source)
    tones = CorePalette.of(value).primary
    return CustomColorGroup(
        color=color,
        value=value,
        light=ColorGroup(*(tones.tone(t) for t in CUSTOM_LIGHT_TONES)),
        dark=ColorGroup(*(tones.tone(t) for t in CUSTOM_DARK_TONES)),
    )


def override_palette(argb: int, variant: Variant, role: str) -> TonalPalette:
    """
    Palette for a role built from its own color instead of the seed.

    The variant's rule for that role is applied to the color. The error rule
    ignores the seed, so an error override keeps the color's hue at the
    error chroma.
    """
    hct = Hct.from_argb(argb)
    if role == 'error':
        return TonalPalette.of(hct.hue, ERROR_CHROMA)
    return variant_palette(hct, variant, role)


def theme_from_source_color(source: int, variant: Variant = Variant.TONAL_SPOT,
                            contrast_level: float = 0.0, custom_colors=(),
                            color_match: bool = False, primary: int = None,
                            secondary: int = None, tertiary: int = None, error: int = None,
                            neutral: int = None, neutral_variant: int = None) -> Theme:
    """
    Build a theme from a seed color.

    Args:
        source: Seed ARGB color
        variant: Scheme variant
        contrast_level: -1 (reduced) to 1 (high)
        custom_colors: CustomColor values to include
        color_match: Stay close to the seed; forces the fidelity variant
        primary, secondary, tertiary, error, neutral, neutral_variant:
            Optional ARGB colors that replace the seed-derived palette of
            that role in both modes

    Returns:
        Theme with both modes resolved
    """
    if color_match:
        variant = Variant.FIDELITY

    source_hct = Hct.from_argb(source)
    light = DynamicScheme.from_variant(source_hct, variant, False, contrast_level)

    overrides = {
        'primary': primary,
        'secondary': secondary,
        'tertiary': tertiary,
        'error': error,
        'neutral': neutral,
        'neutral_variant': neutral_variant,
    }
    replaced = {
        f"{role}_palette": override_palette(argb, variant, role)
        for role, argb in overrides.items() if argb is not None
    }
    light = replace(light, **replaced)
    dark = replace(light, is_dark=True)

    palettes = {name: getattr(light, f"{name}_palette") for name in PALETTE_NAMES}

    return Theme(
        source=source,
        variant=variant,
        contrast_level=contrast_level,
        schemes={'light': resolve_scheme(light), 'dark': resolve_scheme(dark)},
        palettes=palettes,
        custom_colors=[custom_color_group(source, c) for c in custom_colors],
    )


def source_colors_from_pixels(pixels, desired: int = 4) -> list:
    """Quantize pixels and score the result; best seed first."""
    result = QuantizerCelebi.quantize(pixels, THEME_MAX_COLORS)
    return score(result.color_to_count, desired=desired)


def theme_from_pixels(pixels, variant: Variant = Variant.TONAL_SPOT,
                      contrast_level: float = 0.0, custom_colors=(), **options) -> Theme:
    """
    Theme seeded by the highest scoring color of a pixel sequence.

    Keyword options (color_match, palette overrides) pass through to
    theme_from_source_color.
    """
    source = source_colors_from_pixels(pixels)[0]
    return theme_from_source_color(source, variant, contrast_level, custom_colors, **options)


def theme_from_image(image_path, variant: Variant = Variant.TONAL_SPOT,
                     contrast_level: float = 0.0, custom_colors=(), **options) -> Theme:
    """
    Theme seeded from an image file.

    Raises:
        FileNotFoundError: If image file doesn't exist
        ValueError: If file is not a valid image or exceeds size limits
    """
    return theme_from_pixels(load_pixels(image_path), variant, contrast_level, custom_colors,
                             **options)


# =============================================================================
# Serialization
# =============================================================================

def _palette_to_dict(palette: TonalPalette) -> dict:
    return {str(tone): hex_from_argb(argb) for tone, argb in palette.tones().items()}


def _group_to_dict(group: ColorGroup) -> dict:
    return {
        'color': hex_from_argb(group.color),
        'on_color': hex_from_argb(group.on_color),
        'color_container': hex_from_argb(group.color_container),
        'on_color_container': hex_from_argb(group.on_color_container),
    }


def theme_to_dict(theme: Theme) -> dict:
    """JSON-ready view of a theme, colors as #rrggbb strings."""
    return {
        'source': hex_from_argb(theme.source),
        'variant': theme.variant.value,
        'contrast_level': theme.contrast_level,
        'schemes': {
            mode: {role: hex_from_argb(argb) for role, argb in roles.items()}
            for mode, roles in theme.schemes.items()
        },
        'palettes': {name: _palette_to_dict(p) for name, p in theme.palettes.items()},
        'custom_colors': [
            {
                'name': group.color.name,
                'value': hex_from_argb(group.value),
                'blend': group.color.blend,
                'light': _group_to_dict(group.light),
                'dark': _group_to_dict(group.dark),
            }
            for group in theme.custom_colors
        ],
    }
