"""
Scalar math helpers shared by the color modules.
"""

import math


def signum(num: float) -> int:
    """Sign of a number: -1, 0 or 1."""
    if num < 0:
        return -1
    if num == 0:
        return 0
    return 1


def lerp(start: float, stop: float, amount: float) -> float:
    """Linear interpolation between start and stop."""
    return (1.0 - amount) * start + amount * stop


def clamp_int(low: int, high: int, value: int) -> int:
    return min(max(value, low), high)


def clamp_double(low: float, high: float, value: float) -> float:
    return min(max(value, low), high)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (not banker's rounding)."""
    return math.floor(value + 0.5)


def sanitize_degrees_int(degrees: int) -> int:
    """Wrap an integer angle into [0, 360)."""
    return degrees % 360


def sanitize_degrees_double(degrees: float) -> float:
    """Wrap an angle into [0, 360)."""
    degrees = math.fmod(degrees, 360.0)
    if degrees < 0:
        degrees += 360.0
    return degrees


def rotation_direction(from_degrees: float, to_degrees: float) -> float:
    """
    Sign of the shortest rotation between two angles.

    Returns:
        1.0 to rotate clockwise (increasing degrees), -1.0 otherwise.
    """
    increasing_difference = sanitize_degrees_double(to_degrees - from_degrees)
    return 1.0 if increasing_difference <= 180.0 else -1.0


def difference_degrees(a: float, b: float) -> float:
    """Distance between two angles, in [0, 180]."""
    return 180.0 - abs(abs(a - b) - 180.0)


def matrix_multiply(row: tuple, matrix: tuple) -> tuple:
    """Multiply a 3x3 matrix by a length-3 vector."""
    a = row[0] * matrix[0][0] + row[1] * matrix[0][1] + row[2] * matrix[0][2]
    b = row[0] * matrix[1][0] + row[1] * matrix[1][1] + row[2] * matrix[1][2]
    c = row[0] * matrix[2][0] + row[1] * matrix[2][1] + row[2] * matrix[2][2]
    return (a, b, c)
