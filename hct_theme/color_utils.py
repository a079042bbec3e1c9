"""
Color space conversions between ARGB, linear RGB, XYZ, L*a*b* and L*.

Scalar functions work on single ARGB integers. The *_array variants take
numpy arrays of packed ARGB values and are used by the quantizers.
"""

import math
import string

import numpy as np

from .math_utils import matrix_multiply


# =============================================================================
# Constants
# =============================================================================

SRGB_TO_XYZ = (
    (0.41233895, 0.35762064, 0.18051042),
    (0.2126, 0.7152, 0.0722),
    (0.01932141, 0.11916382, 0.95034478),
)

XYZ_TO_SRGB = (
    (3.2413774792388685, -1.5376652402851851, -0.49885366846268053),
    (-0.9691452513005321, 1.8758853451067872, 0.04156585616912061),
    (0.05562093689691305, -0.20395524564742123, 1.0571799111220335),
)

WHITE_POINT_D65 = (95.047, 100.0, 108.883)

LAB_EPSILON = 216.0 / 24389.0
LAB_KAPPA = 24389.0 / 27.0


class ColorParseError(ValueError):
    """Raised when a hex color string cannot be parsed."""


# =============================================================================
# ARGB Packing
# =============================================================================

def argb_from_rgb(red: int, green: int, blue: int) -> int:
    """Pack opaque RGB components (0-255) into an ARGB integer."""
    return (255 << 24) | ((red & 255) << 16) | ((green & 255) << 8) | (blue & 255)


def argb_from_linrgb(linrgb) -> int:
    """Convert linear RGB components (0-100) to ARGB."""
    r = delinearized(linrgb[0])
    g = delinearized(linrgb[1])
    b = delinearized(linrgb[2])
    return argb_from_rgb(r, g, b)


def alpha_from_argb(argb: int) -> int:
    return (argb >> 24) & 255


def red_from_argb(argb: int) -> int:
    return (argb >> 16) & 255


def green_from_argb(argb: int) -> int:
    return (argb >> 8) & 255


def blue_from_argb(argb: int) -> int:
    return argb & 255


def is_opaque(argb: int) -> bool:
    return alpha_from_argb(argb) >= 255


def argb_from_hex(text: str) -> int:
    """
    Parse a hex color string.

    Accepts 3, 6 or 8 hex digits with an optional leading '#'. Three digits
    are expanded (#abc -> #aabbcc) and missing alpha is treated as opaque.

    Raises:
        ColorParseError: If the text is not a valid hex color
    """
    digits = text.strip()
    if digits.startswith('#'):
        digits = digits[1:]
    if len(digits) not in (3, 6, 8) or not all(c in string.hexdigits for c in digits):
        raise ColorParseError(f"Invalid hex color: {text!r}")
    value = int(digits, 16)
    if len(digits) == 3:
        r = (value >> 8) & 15
        g = (value >> 4) & 15
        b = value & 15
        return argb_from_rgb(r * 17, g * 17, b * 17)
    if len(digits) == 6:
        return 0xFF000000 | value
    return value


def hex_from_argb(argb: int) -> str:
    """Format an ARGB color as #rrggbb (alpha dropped)."""
    return f"#{red_from_argb(argb):02x}{green_from_argb(argb):02x}{blue_from_argb(argb):02x}"


# =============================================================================
# Linearization
# =============================================================================

def linearized(rgb_component: int) -> float:
    """Linearize an sRGB component (0-255) to 0-100."""
    normalized = rgb_component / 255.0
    if normalized <= 0.040449936:
        return normalized / 12.92 * 100.0
    return math.pow((normalized + 0.055) / 1.055, 2.4) * 100.0


def delinearized(rgb_component: float) -> int:
    """Delinearize a linear component (0-100) to an sRGB integer (0-255)."""
    normalized = rgb_component / 100.0
    if normalized <= 0.0031308:
        delinearized_value = normalized * 12.92
    else:
        delinearized_value = 1.055 * math.pow(normalized, 1.0 / 2.4) - 0.055
    return min(max(math.floor(delinearized_value * 255.0 + 0.5), 0), 255)


# =============================================================================
# XYZ and L*a*b*
# =============================================================================

def argb_from_xyz(x: float, y: float, z: float) -> int:
    linear_r, linear_g, linear_b = matrix_multiply((x, y, z), XYZ_TO_SRGB)
    return argb_from_linrgb((linear_r, linear_g, linear_b))


def xyz_from_argb(argb: int) -> tuple:
    r = linearized(red_from_argb(argb))
    g = linearized(green_from_argb(argb))
    b = linearized(blue_from_argb(argb))
    return matrix_multiply((r, g, b), SRGB_TO_XYZ)


def lab_f(t: float) -> float:
    if t > LAB_EPSILON:
        return math.pow(t, 1.0 / 3.0)
    return (LAB_KAPPA * t + 16) / 116


def lab_invf(ft: float) -> float:
    ft3 = ft * ft * ft
    if ft3 > LAB_EPSILON:
        return ft3
    return (116 * ft - 16) / LAB_KAPPA


def lab_from_argb(argb: int) -> tuple:
    """Convert an ARGB color to L*a*b* (D65)."""
    x, y, z = xyz_from_argb(argb)
    fx = lab_f(x / WHITE_POINT_D65[0])
    fy = lab_f(y / WHITE_POINT_D65[1])
    fz = lab_f(z / WHITE_POINT_D65[2])
    return (116.0 * fy - 16, 500.0 * (fx - fy), 200.0 * (fy - fz))


def argb_from_lab(l: float, a: float, b: float) -> int:
    """Convert L*a*b* (D65) to the nearest ARGB color."""
    fy = (l + 16.0) / 116.0
    fx = a / 500.0 + fy
    fz = fy - b / 200.0
    x = lab_invf(fx) * WHITE_POINT_D65[0]
    y = lab_invf(fy) * WHITE_POINT_D65[1]
    z = lab_invf(fz) * WHITE_POINT_D65[2]
    return argb_from_xyz(x, y, z)


# =============================================================================
# L* and Y
# =============================================================================

def y_from_lstar(lstar: float) -> float:
    """Convert L* (0-100) to relative luminance Y (0-100)."""
    return 100.0 * lab_invf((lstar + 16.0) / 116.0)


def lstar_from_y(y: float) -> float:
    """Convert relative luminance Y (0-100) to L* (0-100)."""
    return lab_f(y / 100.0) * 116.0 - 16.0


def lstar_from_argb(argb: int) -> float:
    y = xyz_from_argb(argb)[1]
    return 116.0 * lab_f(y / 100.0) - 16.0


def argb_from_lstar(lstar: float) -> int:
    """Gray ARGB color with the given L*."""
    y = y_from_lstar(lstar)
    component = delinearized(y)
    return argb_from_rgb(component, component, component)


# =============================================================================
# Array Conversions
# =============================================================================

def rgb_from_argb_array(argbs: np.ndarray) -> np.ndarray:
    """Unpack an array of ARGB integers into an (N, 3) uint8 array."""
    argbs = np.asarray(argbs, dtype=np.int64)
    return np.column_stack([
        (argbs >> 16) & 255,
        (argbs >> 8) & 255,
        argbs & 255,
    ]).astype(np.uint8)


def argb_from_rgb_array(rgb: np.ndarray) -> np.ndarray:
    """Pack an (N, 3) RGB array (0-255) into opaque ARGB integers."""
    rgb = np.asarray(rgb, dtype=np.int64)
    return (np.int64(0xFF000000) | (rgb[:, 0] << 16) | (rgb[:, 1] << 8) | rgb[:, 2])


def lab_from_argb_array(argbs: np.ndarray) -> np.ndarray:
    """Convert ARGB integers to an (N, 3) L*a*b* array."""
    rgb = rgb_from_argb_array(argbs).astype(np.float64) / 255.0

    # Apply gamma correction
    mask = rgb > 0.040449936
    rgb_linear = np.where(mask, ((rgb + 0.055) / 1.055) ** 2.4, rgb / 12.92) * 100.0

    xyz = rgb_linear @ np.array(SRGB_TO_XYZ).T
    xyz = xyz / np.array(WHITE_POINT_D65)

    f = np.where(xyz > LAB_EPSILON, np.cbrt(xyz), (LAB_KAPPA * xyz + 16) / 116)
    fx, fy, fz = f[:, 0], f[:, 1], f[:, 2]

    L = 116 * fy - 16
    a = 500 * (fx - fy)
    b = 200 * (fy - fz)

    return np.column_stack([L, a, b])


def argb_from_lab_array(lab: np.ndarray) -> np.ndarray:
    """Convert an (N, 3) L*a*b* array to ARGB integers."""
    lab = np.asarray(lab, dtype=np.float64).reshape(-1, 3)
    L, a, b = lab[:, 0], lab[:, 1], lab[:, 2]

    fy = (L + 16) / 116
    fx = a / 500 + fy
    fz = fy - b / 200
    f = np.column_stack([fx, fy, fz])
    f3 = f ** 3
    xyz = np.where(f3 > LAB_EPSILON, f3, (116 * f - 16) / LAB_KAPPA)
    xyz = xyz * np.array(WHITE_POINT_D65)

    linear = (xyz @ np.array(XYZ_TO_SRGB).T) / 100.0
    mask = linear > 0.0031308
    srgb = np.where(mask, 1.055 * np.power(np.clip(linear, 0, None), 1 / 2.4) - 0.055, 12.92 * linear)

    rgb = np.clip(np.floor(srgb * 255.0 + 0.5), 0, 255).astype(np.int64)
    return argb_from_rgb_array(rgb)
