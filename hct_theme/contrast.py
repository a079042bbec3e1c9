"""
Contrast ratios between tones, and tones that reach a target ratio.

Ratios follow WCAG: (Y_lighter + 5) / (Y_darker + 5), with Y in 0-100.
"""

from .color_utils import lstar_from_y, y_from_lstar
from .math_utils import clamp_double


RATIO_MIN = 1.0
RATIO_MAX = 21.0
CONTRAST_RATIO_EPSILON = 0.04  # Shortfall tolerated when a target is hit
LUMINANCE_GAMUT_MAP_TOLERANCE = 0.4  # L* nudge that absorbs rounding to sRGB


def ratio_of_ys(y1: float, y2: float) -> float:
    lighter_y = max(y1, y2)
    darker_y = y1 if lighter_y == y2 else y2
    return (lighter_y + 5.0) / (darker_y + 5.0)


def ratio_of_tones(tone_a: float, tone_b: float) -> float:
    """Contrast ratio of two tones; out of range tones are clamped."""
    tone_a = clamp_double(0.0, 100.0, tone_a)
    tone_b = clamp_double(0.0, 100.0, tone_b)
    return ratio_of_ys(y_from_lstar(tone_a), y_from_lstar(tone_b))


def lighter(tone: float, ratio: float) -> float:
    """
    Tone at or above `tone` that contrasts with it by `ratio`.

    Returns:
        The tone, or -1 if no tone up to 100 reaches the ratio
    """
    if tone < 0.0 or tone > 100.0:
        return -1.0
    dark_y = y_from_lstar(tone)
    light_y = ratio * (dark_y + 5.0) - 5.0
    real_contrast = ratio_of_ys(light_y, dark_y)
    delta = abs(real_contrast - ratio)
    if real_contrast < ratio and delta > CONTRAST_RATIO_EPSILON:
        return -1.0

    return_value = lstar_from_y(light_y) + LUMINANCE_GAMUT_MAP_TOLERANCE
    if return_value < 0 or return_value > 100:
        return -1.0
    return return_value


def darker(tone: float, ratio: float) -> float:
    """
    Tone at or below `tone` that contrasts with it by `ratio`.

    Returns:
        The tone, or -1 if no tone down to 0 reaches the ratio
    """
    if tone < 0.0 or tone > 100.0:
        return -1.0
    light_y = y_from_lstar(tone)
    dark_y = ((light_y + 5.0) / ratio) - 5.0
    real_contrast = ratio_of_ys(light_y, dark_y)
    delta = abs(real_contrast - ratio)
    if real_contrast < ratio and delta > CONTRAST_RATIO_EPSILON:
        return -1.0

    return_value = lstar_from_y(dark_y) - LUMINANCE_GAMUT_MAP_TOLERANCE
    if return_value < 0 or return_value > 100:
        return -1.0
    return return_value


def lighter_unsafe(tone: float, ratio: float) -> float:
    """Like lighter(), but 100 when the ratio cannot be reached."""
    lighter_safe = lighter(tone, ratio)
    return 100.0 if lighter_safe < 0.0 else lighter_safe


def darker_unsafe(tone: float, ratio: float) -> float:
    """Like darker(), but 0 when the ratio cannot be reached."""
    darker_safe = darker(tone, ratio)
    return 0.0 if darker_safe < 0.0 else darker_safe
