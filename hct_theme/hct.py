"""
HCT: hue and chroma from CAM16, tone from L*.
"""

from . import color_utils
from .cam16 import Cam16, ViewingConditions
from .hct_solver import solve_to_argb


class Hct:
    """
    A color expressed as hue, chroma and tone.

    Values are immutable; the with_* methods return a new color solved to the
    nearest sRGB match. Two values are equal when they map to the same ARGB.
    """

    __slots__ = ('_hue', '_chroma', '_tone', '_argb')

    def __init__(self, argb: int):
        cam = Cam16.from_argb(argb)
        self._hue = cam.hue
        self._chroma = cam.chroma
        self._tone = color_utils.lstar_from_argb(argb)
        self._argb = argb

    @classmethod
    def from_hct(cls, hue: float, chroma: float, tone: float) -> 'Hct':
        """Closest sRGB color to the requested hue, chroma and tone."""
        return cls(solve_to_argb(hue, chroma, tone))

    @classmethod
    def from_argb(cls, argb: int) -> 'Hct':
        return cls(argb)

    @property
    def hue(self) -> float:
        return self._hue

    @property
    def chroma(self) -> float:
        return self._chroma

    @property
    def tone(self) -> float:
        return self._tone

    @property
    def argb(self) -> int:
        return self._argb

    def to_argb(self) -> int:
        return self._argb

    def with_hue(self, hue: float) -> 'Hct':
        return Hct.from_hct(hue, self._chroma, self._tone)

    def with_chroma(self, chroma: float) -> 'Hct':
        return Hct.from_hct(self._hue, chroma, self._tone)

    def with_tone(self, tone: float) -> 'Hct':
        return Hct.from_hct(self._hue, self._chroma, tone)

    def in_viewing_conditions(self, vc: ViewingConditions) -> 'Hct':
        """
        The color that looks, under default viewing conditions, the way this
        color looks under vc.
        """
        cam = Cam16.from_argb(self._argb)
        x, y, z = cam.xyz_in_viewing_conditions(vc)
        recast = Cam16.from_xyz(x, y, z)
        return Hct.from_hct(recast.hue, recast.chroma, color_utils.lstar_from_y(y))

    def __eq__(self, other):
        if not isinstance(other, Hct):
            return NotImplemented
        return self._argb == other._argb

    def __hash__(self):
        return hash(self._argb)

    def __repr__(self):
        return (f"Hct(hue={self._hue:.2f}, chroma={self._chroma:.2f}, "
                f"tone={self._tone:.2f}, argb={self._argb:#010x})")
