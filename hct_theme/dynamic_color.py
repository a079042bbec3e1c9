"""
Dynamic colors: roles whose tone depends on the scheme they are resolved in.

A role names a palette and a tone formula. At resolution time the formula's
tone is adjusted to contrast with the role's background(s), to keep a set
distance from a paired role, and to stay out of the 50-60 band where neither
black nor white text reads well.

Tone formulas are small frozen dataclasses interpreted by formula_tone().
Role references are role names, or RoleRef for a name that differs between
light and dark mode.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from . import contrast
from .dislike import fix_if_disliked
from .dynamic_scheme import DynamicScheme, Variant
from .hct import Hct
from .math_utils import clamp_double, lerp, round_half_up
from .palettes import TonalPalette


# =============================================================================
# Constants
# =============================================================================

AVOIDED_TONE_MIN = 50.0  # Inclusive start of the band tones are moved out of
AVOIDED_TONE_MAX = 60.0  # Exclusive end of the band
DARK_SIDE_TONE = 49.0  # Where a role leaves the band toward black
LIGHT_SIDE_TONE = 60.0  # Where a role leaves the band toward white
CHROMA_MATCH_TOLERANCE = 0.4  # Chroma difference accepted by the tone search


class RoleGraphError(ValueError):
    """Raised when a role table references unknown roles or contains a cycle."""


# =============================================================================
# Contrast Curve and Tone Delta Pair
# =============================================================================

@dataclass(frozen=True)
class ContrastCurve:
    """Contrast ratio targets at contrast levels -1, 0, 0.5 and 1."""
    low: float
    normal: float
    medium: float
    high: float

    def get(self, contrast_level: float) -> float:
        """Ratio for a contrast level, interpolated between the four targets."""
        if contrast_level <= -1.0:
            return self.low
        elif contrast_level < 0.0:
            return lerp(self.low, self.normal, (contrast_level - -1) / 1)
        elif contrast_level < 0.5:
            return lerp(self.normal, self.medium, (contrast_level - 0) / 0.5)
        elif contrast_level < 1.0:
            return lerp(self.medium, self.high, (contrast_level - 0.5) / 0.5)
        else:
            return self.high


class TonePolarity(Enum):
    DARKER = 'darker'
    LIGHTER = 'lighter'
    NEARER = 'nearer'  # Closer to the surface: darker in light mode, lighter in dark
    FARTHER = 'farther'


@dataclass(frozen=True)
class ToneDeltaPair:
    """
    Two roles that must stay at least `delta` tones apart.

    With polarity NEARER, role_a is the one nearer the surface; LIGHTER and
    DARKER say which way role_a sits from role_b.
    """
    role_a: str
    role_b: str
    delta: float
    polarity: TonePolarity
    stay_together: bool


@dataclass(frozen=True)
class RoleRef:
    """A role reference that depends on the mode."""
    light: str
    dark: str

    def resolve(self, scheme: DynamicScheme) -> str:
        return self.dark if scheme.is_dark else self.light


Reference = Union[str, RoleRef]


def resolve_ref(ref: Reference, scheme: DynamicScheme) -> str:
    if isinstance(ref, RoleRef):
        return ref.resolve(scheme)
    return ref


def ref_names(ref: Optional[Reference]) -> tuple:
    """Every role name a reference can point to."""
    if ref is None:
        return ()
    if isinstance(ref, RoleRef):
        return (ref.light, ref.dark)
    return (ref,)


# =============================================================================
# Tone Formulas
# =============================================================================

@dataclass(frozen=True)
class ModeTone:
    """A tone per mode: a constant, or a ContrastCurve read at the scheme's level."""
    light: Union[float, ContrastCurve]
    dark: Union[float, ContrastCurve]


@dataclass(frozen=True)
class KeyColorTone:
    """Tone of the role palette's key color."""


@dataclass(frozen=True)
class SourceTone:
    """Tone of the scheme's source color."""


@dataclass(frozen=True)
class ForegroundTone:
    """Tone contrasting by `ratio` with another role's formula tone."""
    role: str
    ratio: float


@dataclass(frozen=True)
class ChromaMatchedTone:
    """
    Tone nearest the mode's starting tone whose chroma reaches the palette's.

    The search moves toward black in light mode and toward white in dark mode.
    """
    light: float
    dark: float


@dataclass(frozen=True)
class DislikeFixedSourceTone:
    """Tone of the role palette at the source tone, lifted if disliked."""


@dataclass(frozen=True)
class ByVariant:
    """Choose a formula by the scheme's variant."""
    default: object
    overrides: dict = field(default_factory=dict)  # Variant -> formula

    def select(self, variant: Variant):
        return self.overrides.get(variant, self.default)


def formula_refs(formula) -> tuple:
    """Roles a tone formula reads."""
    if isinstance(formula, ForegroundTone):
        return (formula.role,)
    if isinstance(formula, ByVariant):
        names = list(formula_refs(formula.default))
        for override in formula.overrides.values():
            names.extend(formula_refs(override))
        return tuple(names)
    return ()


def formula_tone(formula, color: 'DynamicColor', scheme: DynamicScheme, roles: dict) -> float:
    """
    Evaluate a tone formula for a role.

    Args:
        formula: One of the tone formula dataclasses
        color: Role the formula belongs to; supplies the palette
        scheme: Scheme being resolved
        roles: Role table, for formulas that read other roles

    Raises:
        TypeError: If formula is not a known formula kind
    """
    if isinstance(formula, ByVariant):
        return formula_tone(formula.select(scheme.variant), color, scheme, roles)

    if isinstance(formula, ModeTone):
        value = formula.dark if scheme.is_dark else formula.light
        if isinstance(value, ContrastCurve):
            return value.get(scheme.contrast_level)
        return float(value)

    if isinstance(formula, KeyColorTone):
        return color.palette.of(scheme).key_color.tone

    if isinstance(formula, SourceTone):
        return scheme.source_color_hct.tone

    if isinstance(formula, ForegroundTone):
        other = roles[formula.role]
        return foreground_tone(formula_tone(other.tone, other, scheme, roles), formula.ratio)

    if isinstance(formula, ChromaMatchedTone):
        palette = color.palette.of(scheme)
        initial_tone = formula.dark if scheme.is_dark else formula.light
        return find_desired_chroma_by_tone(palette.hue, palette.chroma, initial_tone,
                                           by_decreasing_tone=not scheme.is_dark)

    if isinstance(formula, DislikeFixedSourceTone):
        palette = color.palette.of(scheme)
        return fix_if_disliked(palette.get_hct(scheme.source_color_hct.tone)).tone

    raise TypeError(f"Unknown tone formula: {formula!r}")


def find_desired_chroma_by_tone(hue: float, chroma: float, tone: float,
                                by_decreasing_tone: bool) -> float:
    """Step tone by 1 until the color reaches the chroma or chroma stops rising."""
    answer = tone
    closest_to_chroma = Hct.from_hct(hue, chroma, tone)
    if closest_to_chroma.chroma < chroma:
        chroma_peak = closest_to_chroma.chroma
        while closest_to_chroma.chroma < chroma:
            answer += -1.0 if by_decreasing_tone else 1.0
            potential_solution = Hct.from_hct(hue, chroma, answer)
            if chroma_peak > potential_solution.chroma:
                break
            if abs(potential_solution.chroma - chroma) < CHROMA_MATCH_TOLERANCE:
                break

            potential_delta = abs(potential_solution.chroma - chroma)
            current_delta = abs(closest_to_chroma.chroma - chroma)
            if potential_delta < current_delta:
                closest_to_chroma = potential_solution
            chroma_peak = max(chroma_peak, potential_solution.chroma)
    return answer


# =============================================================================
# Foreground Helpers
# =============================================================================

def tone_prefers_light_foreground(tone: float) -> bool:
    """Whether text on this tone reads better light than dark."""
    return round_half_up(tone) < 60


def tone_allows_light_foreground(tone: float) -> bool:
    return round_half_up(tone) <= 49


def enable_light_foreground(tone: float) -> float:
    """Darken tones in the avoided band so a light foreground works."""
    if tone_prefers_light_foreground(tone) and not tone_allows_light_foreground(tone):
        return DARK_SIDE_TONE
    return tone


def foreground_tone(bg_tone: float, ratio: float) -> float:
    """
    Tone that contrasts with bg_tone by ratio, if possible.

    Light foregrounds are preferred on tones below 60 and dark ones above,
    unless the other direction contrasts more. Always within 0-100.
    """
    lighter_tone = contrast.lighter_unsafe(bg_tone, ratio)
    darker_tone = contrast.darker_unsafe(bg_tone, ratio)
    lighter_ratio = contrast.ratio_of_tones(lighter_tone, bg_tone)
    darker_ratio = contrast.ratio_of_tones(darker_tone, bg_tone)
    prefer_lighter = tone_prefers_light_foreground(bg_tone)

    if prefer_lighter:
        # Near-equal failures on both sides still go light
        negligible_difference = (abs(lighter_ratio - darker_ratio) < 0.1
                                 and lighter_ratio < ratio and darker_ratio < ratio)
        if lighter_ratio >= ratio or lighter_ratio >= darker_ratio or negligible_difference:
            return lighter_tone
        return darker_tone
    if darker_ratio >= ratio or darker_ratio >= lighter_ratio:
        return darker_tone
    return lighter_tone


# =============================================================================
# Dynamic Color
# =============================================================================

class PaletteRole(Enum):
    PRIMARY = 'primary'
    SECONDARY = 'secondary'
    TERTIARY = 'tertiary'
    NEUTRAL = 'neutral'
    NEUTRAL_VARIANT = 'neutral_variant'
    ERROR = 'error'

    def of(self, scheme: DynamicScheme) -> TonalPalette:
        return getattr(scheme, f"{self.value}_palette")


@dataclass(frozen=True)
class DynamicColor:
    """A named role: palette, tone formula and contrast constraints."""
    name: str
    palette: PaletteRole
    tone: object  # Tone formula
    is_background: bool = False
    background: Optional[Reference] = None
    second_background: Optional[Reference] = None
    contrast_curve: Optional[ContrastCurve] = None
    tone_delta_pair: Optional[ToneDeltaPair] = None

    def dependencies(self, roles: dict) -> list:
        """Roles that must be resolved before this one."""
        names = list(ref_names(self.background))
        names.extend(ref_names(self.second_background))
        names.extend(formula_refs(self.tone))
        pair = self.tone_delta_pair
        if pair is not None:
            for partner in (pair.role_a, pair.role_b):
                partner_color = roles.get(partner)
                if partner != self.name and partner_color is not None:
                    names.extend(ref_names(partner_color.background))
        return list(dict.fromkeys(names))

    def get_tone(self, scheme: DynamicScheme, tones: dict, roles: dict) -> float:
        """
        Resolve this role's tone.

        Args:
            scheme: Scheme being resolved
            tones: Tones of roles resolved so far; must hold this role's backgrounds
            roles: Role table
        """
        decreasing_contrast = scheme.contrast_level < 0

        if self.tone_delta_pair is not None:
            return self._pair_tone(scheme, tones, roles, decreasing_contrast)

        answer = formula_tone(self.tone, self, scheme, roles)
        if self.background is None or self.contrast_curve is None:
            return answer

        bg_tone = tones[resolve_ref(self.background, scheme)]
        desired_ratio = self.contrast_curve.get(scheme.contrast_level)

        if contrast.ratio_of_tones(bg_tone, answer) < desired_ratio:
            answer = foreground_tone(bg_tone, desired_ratio)
        if decreasing_contrast:
            answer = foreground_tone(bg_tone, desired_ratio)

        if self.is_background and AVOIDED_TONE_MIN <= answer < AVOIDED_TONE_MAX:
            if contrast.ratio_of_tones(DARK_SIDE_TONE, bg_tone) >= desired_ratio:
                answer = DARK_SIDE_TONE
            else:
                answer = LIGHT_SIDE_TONE

        if self.second_background is not None:
            bg_tone_1 = bg_tone
            bg_tone_2 = tones[resolve_ref(self.second_background, scheme)]
            upper = max(bg_tone_1, bg_tone_2)
            lower = min(bg_tone_1, bg_tone_2)

            if (contrast.ratio_of_tones(upper, answer) >= desired_ratio
                    and contrast.ratio_of_tones(lower, answer) >= desired_ratio):
                return answer

            # No tone between the two backgrounds works; go outside them
            light_option = contrast.lighter(upper, desired_ratio)
            dark_option = contrast.darker(lower, desired_ratio)
            availables = [t for t in (light_option, dark_option) if t != -1]

            prefers_light = (tone_prefers_light_foreground(bg_tone_1)
                             or tone_prefers_light_foreground(bg_tone_2))
            if prefers_light:
                return 100.0 if light_option < 0 else light_option
            if len(availables) == 1:
                return availables[0]
            return 0.0 if dark_option < 0 else dark_option

        return answer

    def _pair_tone(self, scheme: DynamicScheme, tones: dict, roles: dict,
                   decreasing_contrast: bool) -> float:
        pair = self.tone_delta_pair
        role_a = roles[pair.role_a]
        role_b = roles[pair.role_b]
        delta = pair.delta
        stay_together = pair.stay_together

        bg_tone = tones[resolve_ref(self.background, scheme)]

        a_is_nearer = (pair.polarity == TonePolarity.NEARER
                       or (pair.polarity == TonePolarity.LIGHTER and not scheme.is_dark)
                       or (pair.polarity == TonePolarity.DARKER and scheme.is_dark))
        nearer = role_a if a_is_nearer else role_b
        farther = role_b if a_is_nearer else role_a
        am_nearer = self.name == nearer.name
        expansion_dir = 1 if scheme.is_dark else -1

        n_contrast = nearer.contrast_curve.get(scheme.contrast_level)
        f_contrast = farther.contrast_curve.get(scheme.contrast_level)

        # Contrast with the background comes first
        n_initial_tone = formula_tone(nearer.tone, nearer, scheme, roles)
        if contrast.ratio_of_tones(bg_tone, n_initial_tone) >= n_contrast:
            n_tone = n_initial_tone
        else:
            n_tone = foreground_tone(bg_tone, n_contrast)
        f_initial_tone = formula_tone(farther.tone, farther, scheme, roles)
        if contrast.ratio_of_tones(bg_tone, f_initial_tone) >= f_contrast:
            f_tone = f_initial_tone
        else:
            f_tone = foreground_tone(bg_tone, f_contrast)

        if decreasing_contrast:
            n_tone = foreground_tone(bg_tone, n_contrast)
            f_tone = foreground_tone(bg_tone, f_contrast)

        # Then the delta; pull the nearer tone back if the farther one clamps
        if (f_tone - n_tone) * expansion_dir < delta:
            f_tone = clamp_double(0, 100, n_tone + delta * expansion_dir)
            if (f_tone - n_tone) * expansion_dir < delta:
                n_tone = clamp_double(0, 100, f_tone - delta * expansion_dir)

        # Finally leave the avoided band
        if AVOIDED_TONE_MIN <= n_tone < AVOIDED_TONE_MAX:
            if expansion_dir > 0:
                n_tone = LIGHT_SIDE_TONE
                f_tone = max(f_tone, n_tone + delta * expansion_dir)
            else:
                n_tone = DARK_SIDE_TONE
                f_tone = min(f_tone, n_tone + delta * expansion_dir)
        elif AVOIDED_TONE_MIN <= f_tone < AVOIDED_TONE_MAX:
            if stay_together:
                if expansion_dir > 0:
                    n_tone = LIGHT_SIDE_TONE
                    f_tone = max(f_tone, n_tone + delta * expansion_dir)
                else:
                    n_tone = DARK_SIDE_TONE
                    f_tone = min(f_tone, n_tone + delta * expansion_dir)
            else:
                f_tone = LIGHT_SIDE_TONE if expansion_dir > 0 else DARK_SIDE_TONE

        return n_tone if am_nearer else f_tone

    def get_argb(self, scheme: DynamicScheme, tone: float) -> int:
        return self.palette.of(scheme).tone(tone)


# =============================================================================
# Role Graph
# =============================================================================

def resolution_order(roles: dict) -> list:
    """
    Order roles so every role comes after the roles it depends on.

    Roles are placed in rounds: each round takes every role whose
    dependencies are already placed, in declaration order. Roles without
    references therefore come first.

    Raises:
        RoleGraphError: On a reference to an unknown role, or a cycle
    """
    dependencies = {}
    for name, color in roles.items():
        deps = color.dependencies(roles)
        referenced = list(deps)
        if color.tone_delta_pair is not None:
            referenced.extend((color.tone_delta_pair.role_a, color.tone_delta_pair.role_b))
        for ref in referenced:
            if ref not in roles:
                raise RoleGraphError(f"Role {name!r} references unknown role {ref!r}")
        dependencies[name] = set(deps)

    order = []
    placed = set()
    pending = list(roles)
    while pending:
        ready = [name for name in pending if dependencies[name] <= placed]
        if not ready:
            raise RoleGraphError(f"Role graph has a cycle through: {', '.join(pending)}")
        order.extend(ready)
        placed.update(ready)
        pending = [name for name in pending if name not in placed]
    return order
