"""
The Material role table and scheme resolution.

Every role is declared once in ROLES. The reference graph between roles is
checked when this module is imported, and RESOLUTION_ORDER lists the roles
so each is resolved after the backgrounds it contrasts with.
"""

from .dynamic_color import (
    ByVariant,
    ChromaMatchedTone,
    ContrastCurve,
    DislikeFixedSourceTone,
    DynamicColor,
    ForegroundTone,
    KeyColorTone,
    ModeTone,
    PaletteRole,
    RoleRef,
    SourceTone,
    ToneDeltaPair,
    TonePolarity,
    resolution_order,
)
from .dynamic_scheme import DynamicScheme, Variant


# =============================================================================
# Shared Pieces
# =============================================================================

HIGHEST_SURFACE = RoleRef(light='surface_dim', dark='surface_bright')

MONOCHROME = Variant.MONOCHROME
FIDELITY_VARIANTS = (Variant.FIDELITY, Variant.CONTENT)

# Contrast curves
TEXT_CURVE = ContrastCurve(4.5, 7.0, 11.0, 21.0)  # Body text on its container
VARIANT_TEXT_CURVE = ContrastCurve(3.0, 4.5, 7.0, 11.0)
ACCENT_CURVE = ContrastCurve(3.0, 4.5, 7.0, 7.0)  # Accents on the surface
CONTAINER_CURVE = ContrastCurve(1.0, 1.0, 3.0, 4.5)
BACKGROUND_TEXT_CURVE = ContrastCurve(3.0, 3.0, 4.5, 7.0)
OUTLINE_CURVE = ContrastCurve(1.5, 3.0, 4.5, 7.0)
OUTLINE_VARIANT_CURVE = ContrastCurve(1.0, 1.0, 3.0, 4.5)
INVERSE_PRIMARY_CURVE = ContrastCurve(3.0, 4.5, 7.0, 7.0)

CONTAINER_DELTA = 10.0  # Tones between an accent and its container
FIXED_DELTA = 10.0  # Tones between a fixed role and its dim twin


def _variant_tone(default, monochrome=None, fidelity=None):
    """ByVariant with the monochrome and fidelity/content overrides used below."""
    overrides = {}
    if monochrome is not None:
        overrides[MONOCHROME] = monochrome
    if fidelity is not None:
        for variant in FIDELITY_VARIANTS:
            overrides[variant] = fidelity
    return ByVariant(default=default, overrides=overrides)


def _container_pair(container: str, accent: str) -> ToneDeltaPair:
    return ToneDeltaPair(container, accent, CONTAINER_DELTA, TonePolarity.NEARER, False)


def _fixed_pair(fixed: str, fixed_dim: str) -> ToneDeltaPair:
    return ToneDeltaPair(fixed, fixed_dim, FIXED_DELTA, TonePolarity.LIGHTER, True)


# =============================================================================
# Role Table
# =============================================================================

def _build_roles() -> dict:
    P = PaletteRole
    colors = [
        # Palette key colors
        DynamicColor('primary_palette_key_color', P.PRIMARY, KeyColorTone()),
        DynamicColor('secondary_palette_key_color', P.SECONDARY, KeyColorTone()),
        DynamicColor('tertiary_palette_key_color', P.TERTIARY, KeyColorTone()),
        DynamicColor('neutral_palette_key_color', P.NEUTRAL, KeyColorTone()),
        DynamicColor('neutral_variant_palette_key_color', P.NEUTRAL_VARIANT, KeyColorTone()),

        # Surfaces
        DynamicColor('background', P.NEUTRAL, ModeTone(98.0, 6.0), is_background=True),
        DynamicColor('on_background', P.NEUTRAL, ModeTone(10.0, 90.0),
                     background='background', contrast_curve=BACKGROUND_TEXT_CURVE),
        DynamicColor('surface', P.NEUTRAL, ModeTone(98.0, 6.0), is_background=True),
        DynamicColor('surface_dim', P.NEUTRAL,
                     ModeTone(ContrastCurve(87.0, 87.0, 80.0, 75.0), 6.0), is_background=True),
        DynamicColor('surface_bright', P.NEUTRAL,
                     ModeTone(98.0, ContrastCurve(24.0, 24.0, 29.0, 34.0)), is_background=True),
        DynamicColor('surface_container_lowest', P.NEUTRAL,
                     ModeTone(100.0, ContrastCurve(4.0, 4.0, 2.0, 0.0)), is_background=True),
        DynamicColor('surface_container_low', P.NEUTRAL,
                     ModeTone(ContrastCurve(96.0, 96.0, 96.0, 95.0),
                              ContrastCurve(10.0, 10.0, 11.0, 12.0)), is_background=True),
        DynamicColor('surface_container', P.NEUTRAL,
                     ModeTone(ContrastCurve(94.0, 94.0, 92.0, 90.0),
                              ContrastCurve(12.0, 12.0, 16.0, 20.0)), is_background=True),
        DynamicColor('surface_container_high', P.NEUTRAL,
                     ModeTone(ContrastCurve(92.0, 92.0, 88.0, 85.0),
                              ContrastCurve(17.0, 17.0, 21.0, 25.0)), is_background=True),
        DynamicColor('surface_container_highest', P.NEUTRAL,
                     ModeTone(ContrastCurve(90.0, 90.0, 84.0, 80.0),
                              ContrastCurve(22.0, 22.0, 26.0, 30.0)), is_background=True),
        DynamicColor('on_surface', P.NEUTRAL, ModeTone(10.0, 90.0),
                     background=HIGHEST_SURFACE, contrast_curve=TEXT_CURVE),
        DynamicColor('surface_variant', P.NEUTRAL_VARIANT, ModeTone(90.0, 30.0), is_background=True),
        DynamicColor('on_surface_variant', P.NEUTRAL_VARIANT, ModeTone(30.0, 80.0),
                     background=HIGHEST_SURFACE, contrast_curve=VARIANT_TEXT_CURVE),
        DynamicColor('inverse_surface', P.NEUTRAL, ModeTone(20.0, 90.0)),
        DynamicColor('inverse_on_surface', P.NEUTRAL, ModeTone(95.0, 20.0),
                     background='inverse_surface', contrast_curve=TEXT_CURVE),
        DynamicColor('outline', P.NEUTRAL_VARIANT, ModeTone(50.0, 60.0),
                     background=HIGHEST_SURFACE, contrast_curve=OUTLINE_CURVE),
        DynamicColor('outline_variant', P.NEUTRAL_VARIANT, ModeTone(80.0, 30.0),
                     background=HIGHEST_SURFACE, contrast_curve=OUTLINE_VARIANT_CURVE),
        DynamicColor('shadow', P.NEUTRAL, ModeTone(0.0, 0.0)),
        DynamicColor('scrim', P.NEUTRAL, ModeTone(0.0, 0.0)),
        DynamicColor('surface_tint', P.PRIMARY, ModeTone(40.0, 80.0), is_background=True),

        # Primary
        DynamicColor('primary', P.PRIMARY,
                     _variant_tone(ModeTone(40.0, 80.0), monochrome=ModeTone(0.0, 100.0)),
                     is_background=True, background=HIGHEST_SURFACE, contrast_curve=ACCENT_CURVE,
                     tone_delta_pair=_container_pair('primary_container', 'primary')),
        DynamicColor('on_primary', P.PRIMARY,
                     _variant_tone(ModeTone(100.0, 20.0), monochrome=ModeTone(90.0, 10.0)),
                     background='primary', contrast_curve=TEXT_CURVE),
        DynamicColor('primary_container', P.PRIMARY,
                     _variant_tone(ModeTone(90.0, 30.0), monochrome=ModeTone(25.0, 85.0),
                                   fidelity=SourceTone()),
                     is_background=True, background=HIGHEST_SURFACE, contrast_curve=CONTAINER_CURVE,
                     tone_delta_pair=_container_pair('primary_container', 'primary')),
        DynamicColor('on_primary_container', P.PRIMARY,
                     _variant_tone(ModeTone(10.0, 90.0), monochrome=ModeTone(100.0, 0.0),
                                   fidelity=ForegroundTone('primary_container', 4.5)),
                     background='primary_container', contrast_curve=TEXT_CURVE),
        DynamicColor('inverse_primary', P.PRIMARY, ModeTone(80.0, 40.0),
                     background='inverse_surface', contrast_curve=INVERSE_PRIMARY_CURVE),

        # Secondary
        DynamicColor('secondary', P.SECONDARY, ModeTone(40.0, 80.0),
                     is_background=True, background=HIGHEST_SURFACE, contrast_curve=ACCENT_CURVE,
                     tone_delta_pair=_container_pair('secondary_container', 'secondary')),
        DynamicColor('on_secondary', P.SECONDARY,
                     _variant_tone(ModeTone(100.0, 20.0), monochrome=ModeTone(100.0, 10.0)),
                     background='secondary', contrast_curve=TEXT_CURVE),
        DynamicColor('secondary_container', P.SECONDARY,
                     _variant_tone(ModeTone(90.0, 30.0), monochrome=ModeTone(85.0, 30.0),
                                   fidelity=ChromaMatchedTone(90.0, 30.0)),
                     is_background=True, background=HIGHEST_SURFACE, contrast_curve=CONTAINER_CURVE,
                     tone_delta_pair=_container_pair('secondary_container', 'secondary')),
        DynamicColor('on_secondary_container', P.SECONDARY,
                     _variant_tone(ModeTone(10.0, 90.0),
                                   fidelity=ForegroundTone('secondary_container', 4.5)),
                     background='secondary_container', contrast_curve=TEXT_CURVE),

        # Tertiary
        DynamicColor('tertiary', P.TERTIARY,
                     _variant_tone(ModeTone(40.0, 80.0), monochrome=ModeTone(25.0, 90.0)),
                     is_background=True, background=HIGHEST_SURFACE, contrast_curve=ACCENT_CURVE,
                     tone_delta_pair=_container_pair('tertiary_container', 'tertiary')),
        DynamicColor('on_tertiary', P.TERTIARY,
                     _variant_tone(ModeTone(100.0, 20.0), monochrome=ModeTone(90.0, 10.0)),
                     background='tertiary', contrast_curve=TEXT_CURVE),
        DynamicColor('tertiary_container', P.TERTIARY,
                     _variant_tone(ModeTone(90.0, 30.0), monochrome=ModeTone(49.0, 60.0),
                                   fidelity=DislikeFixedSourceTone()),
                     is_background=True, background=HIGHEST_SURFACE, contrast_curve=CONTAINER_CURVE,
                     tone_delta_pair=_container_pair('tertiary_container', 'tertiary')),
        DynamicColor('on_tertiary_container', P.TERTIARY,
                     _variant_tone(ModeTone(10.0, 90.0), monochrome=ModeTone(100.0, 0.0),
                                   fidelity=ForegroundTone('tertiary_container', 4.5)),
                     background='tertiary_container', contrast_curve=TEXT_CURVE),

        # Error
        DynamicColor('error', P.ERROR, ModeTone(40.0, 80.0),
                     is_background=True, background=HIGHEST_SURFACE, contrast_curve=ACCENT_CURVE,
                     tone_delta_pair=_container_pair('error_container', 'error')),
        DynamicColor('on_error', P.ERROR, ModeTone(100.0, 20.0),
                     background='error', contrast_curve=TEXT_CURVE),
        DynamicColor('error_container', P.ERROR, ModeTone(90.0, 30.0),
                     is_background=True, background=HIGHEST_SURFACE, contrast_curve=CONTAINER_CURVE,
                     tone_delta_pair=_container_pair('error_container', 'error')),
        DynamicColor('on_error_container', P.ERROR, ModeTone(10.0, 90.0),
                     background='error_container', contrast_curve=TEXT_CURVE),
    ]

    # Fixed roles keep their tones in both modes. Each entry holds
    # (default, monochrome) tones for fixed, fixed_dim, on_fixed, on_fixed_variant.
    fixed_tones = {
        ('primary', P.PRIMARY): ((90.0, 40.0), (80.0, 30.0), (10.0, 100.0), (30.0, 90.0)),
        ('secondary', P.SECONDARY): ((90.0, 80.0), (80.0, 70.0), (10.0, 10.0), (30.0, 25.0)),
        ('tertiary', P.TERTIARY): ((90.0, 40.0), (80.0, 30.0), (10.0, 100.0), (30.0, 90.0)),
    }
    for (accent, palette), (fixed, fixed_dim, on_fixed, on_fixed_variant) in fixed_tones.items():
        fixed_name = f'{accent}_fixed'
        dim_name = f'{accent}_fixed_dim'
        colors.extend([
            DynamicColor(fixed_name, palette, _fixed_tone(*fixed),
                         is_background=True, background=HIGHEST_SURFACE,
                         contrast_curve=CONTAINER_CURVE,
                         tone_delta_pair=_fixed_pair(fixed_name, dim_name)),
            DynamicColor(dim_name, palette, _fixed_tone(*fixed_dim),
                         is_background=True, background=HIGHEST_SURFACE,
                         contrast_curve=CONTAINER_CURVE,
                         tone_delta_pair=_fixed_pair(fixed_name, dim_name)),
            DynamicColor(f'on_{accent}_fixed', palette, _fixed_tone(*on_fixed),
                         background=dim_name, second_background=fixed_name,
                         contrast_curve=TEXT_CURVE),
            DynamicColor(f'on_{accent}_fixed_variant', palette, _fixed_tone(*on_fixed_variant),
                         background=dim_name, second_background=fixed_name,
                         contrast_curve=VARIANT_TEXT_CURVE),
        ])

    return {color.name: color for color in colors}


def _fixed_tone(default: float, monochrome: float) -> ByVariant:
    return _variant_tone(ModeTone(default, default), monochrome=ModeTone(monochrome, monochrome))


ROLES = _build_roles()
ROLE_NAMES = tuple(ROLES)
RESOLUTION_ORDER = tuple(resolution_order(ROLES))


# =============================================================================
# Resolution
# =============================================================================

def resolve_tones(scheme: DynamicScheme, roles: dict = None) -> dict:
    """Tone of every role, keyed by role name, in resolution order."""
    if roles is None:
        roles = ROLES
        order = RESOLUTION_ORDER
    else:
        order = resolution_order(roles)
    tones = {}
    for name in order:
        tones[name] = roles[name].get_tone(scheme, tones, roles)
    return tones


def resolve_scheme(scheme: DynamicScheme, roles: dict = None) -> dict:
    """
    ARGB color of every role for a scheme.

    Args:
        scheme: Seed, variant, mode and contrast level
        roles: Role table to resolve; defaults to ROLES

    Returns:
        Dict of role name -> ARGB, in resolution order
    """
    if roles is None:
        roles = ROLES
    tones = resolve_tones(scheme, roles)
    return {name: roles[name].get_argb(scheme, tone) for name, tone in tones.items()}
