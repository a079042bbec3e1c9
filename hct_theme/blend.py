"""
Blending colors: hue harmonization and CAM16-UCS interpolation.
"""

from .cam16 import Cam16
from .hct import Hct
from .math_utils import difference_degrees, rotation_direction, sanitize_degrees_double


MAX_HARMONIZE_ROTATION = 15.0  # Degrees


def harmonize(design_color: int, source_color: int) -> int:
    """
    Shift the hue of design_color toward source_color.

    The rotation is half the hue difference, at most 15 degrees. Chroma and
    tone are kept.
    """
    from_hct = Hct.from_argb(design_color)
    to_hct = Hct.from_argb(source_color)
    difference = difference_degrees(from_hct.hue, to_hct.hue)
    rotation = min(difference * 0.5, MAX_HARMONIZE_ROTATION)
    output_hue = sanitize_degrees_double(
        from_hct.hue + rotation * rotation_direction(from_hct.hue, to_hct.hue))
    return Hct.from_hct(output_hue, from_hct.chroma, from_hct.tone).argb


def hct_hue(from_color: int, to_color: int, amount: float) -> int:
    """Blend the hue of from_color toward to_color, keeping its chroma and tone."""
    ucs = cam16_ucs(from_color, to_color, amount)
    ucs_cam = Cam16.from_argb(ucs)
    from_cam = Cam16.from_argb(from_color)
    blended = Hct.from_hct(ucs_cam.hue, from_cam.chroma, Hct.from_argb(from_color).tone)
    return blended.argb


def cam16_ucs(from_color: int, to_color: int, amount: float) -> int:
    """Linear blend in CAM16-UCS; amount 0 gives from_color, 1 gives to_color."""
    from_cam = Cam16.from_argb(from_color)
    to_cam = Cam16.from_argb(to_color)
    jstar = from_cam.jstar + (to_cam.jstar - from_cam.jstar) * amount
    astar = from_cam.astar + (to_cam.astar - from_cam.astar) * amount
    bstar = from_cam.bstar + (to_cam.bstar - from_cam.bstar) * amount
    return Cam16.from_ucs(jstar, astar, bstar).to_argb()
