"""
hct-theme: dominant color extraction and accessible HCT color themes.

Quantize an image to its representative colors, score them for use as a
seed, and resolve a seed into light and dark Material color roles.
"""

from .color_utils import ColorParseError, argb_from_hex, hex_from_argb
from .dynamic_color import RoleGraphError
from .dynamic_scheme import DynamicScheme, Variant, make_scheme
from .hct import Hct
from .material_colors import RESOLUTION_ORDER, ROLES, resolve_scheme, resolve_tones
from .palettes import CorePalette, TonalPalette
from .quantizer import QuantizerCelebi, QuantizerResult, population_map
from .score import score
from .theme import (
    CustomColor,
    Theme,
    theme_from_image,
    theme_from_pixels,
    theme_from_source_color,
    theme_to_dict,
)

__version__ = '0.1.0'

__all__ = [
    'ColorParseError',
    'CorePalette',
    'CustomColor',
    'DynamicScheme',
    'Hct',
    'QuantizerCelebi',
    'QuantizerResult',
    'RESOLUTION_ORDER',
    'ROLES',
    'RoleGraphError',
    'TonalPalette',
    'Theme',
    'Variant',
    'argb_from_hex',
    'hex_from_argb',
    'make_scheme',
    'population_map',
    'resolve_scheme',
    'resolve_tones',
    'score',
    'theme_from_image',
    'theme_from_pixels',
    'theme_from_source_color',
    'theme_to_dict',
]
