"""
CAM16 color appearance model.

Computes hue, chroma, lightness and the CAM16-UCS coordinates of a color as
seen under a set of viewing conditions, and converts back to ARGB.
"""

from dataclasses import dataclass
import math

from . import color_utils
from .math_utils import lerp, signum


# =============================================================================
# Constants
# =============================================================================

# Hunt-Pointer-Estevez cone response, as used by CAM16
XYZ_TO_CAM16RGB = (
    (0.401288, 0.650173, -0.051461),
    (-0.250268, 1.204414, 0.045854),
    (-0.002079, 0.048952, 0.953127),
)

CAM16RGB_TO_XYZ = (
    (1.86206786, -1.01125463, 0.14918677),
    (0.38752654, 0.62144744, -0.00897398),
    (-0.01584150, -0.03412294, 1.04996444),
)

UCS_C1 = 0.007  # Lightness compression for J*
UCS_C2 = 0.0228  # Colorfulness compression for M*


# =============================================================================
# Viewing Conditions
# =============================================================================

@dataclass(frozen=True)
class ViewingConditions:
    """Precomputed parameters of the environment a color is seen in."""
    n: float  # Background luminance relative to white
    aw: float  # Achromatic response of white
    nbb: float  # Background induction factor
    ncb: float  # Chromatic induction factor
    c: float  # Exponential nonlinearity from the surround
    nc: float  # Chromatic induction from the surround
    rgb_d: tuple  # Per-channel discounting factors
    fl: float  # Luminance-level adaptation factor
    fl_root: float  # fl ** 0.25
    z: float  # Base exponential nonlinearity

    @classmethod
    def make(cls, white_point: tuple = color_utils.WHITE_POINT_D65,
             adapting_luminance: float = -1.0,
             background_lstar: float = 50.0,
             surround: float = 2.0,
             discounting_luminance: bool = False) -> 'ViewingConditions':
        """
        Build viewing conditions from their physical description.

        Args:
            white_point: XYZ of the white point
            adapting_luminance: Luminance of the adapting field in lux; a
                non-positive value selects that of a 50% gray (about 11.7)
            background_lstar: L* of the background, at least 0.1
            surround: 0 (dark) to 2 (average)
            discounting_luminance: Whether the eye fully discounts the illuminant
        """
        if adapting_luminance <= 0.0:
            adapting_luminance = (200.0 / math.pi) * color_utils.y_from_lstar(50.0) / 100.0
        background_lstar = max(0.1, background_lstar)

        r_w, g_w, b_w = _cone_response(white_point)

        f = 0.8 + surround / 10.0
        if f >= 0.9:
            c = lerp(0.59, 0.69, (f - 0.9) * 10.0)
        else:
            c = lerp(0.525, 0.59, (f - 0.8) * 10.0)

        if discounting_luminance:
            d = 1.0
        else:
            d = f * (1.0 - (1.0 / 3.6) * math.exp((-adapting_luminance - 42.0) / 92.0))
        d = min(max(d, 0.0), 1.0)
        nc = f

        rgb_d = (
            d * (100.0 / r_w) + 1.0 - d,
            d * (100.0 / g_w) + 1.0 - d,
            d * (100.0 / b_w) + 1.0 - d,
        )

        k = 1.0 / (5.0 * adapting_luminance + 1.0)
        k4 = k * k * k * k
        k4f = 1.0 - k4
        fl = k4 * adapting_luminance + 0.1 * k4f * k4f * math.pow(5.0 * adapting_luminance, 1.0 / 3.0)

        n = color_utils.y_from_lstar(background_lstar) / white_point[1]
        z = 1.48 + math.sqrt(n)
        nbb = 0.725 / math.pow(n, 0.2)
        ncb = nbb

        rgb_a_factors = [
            math.pow(fl * rgb_d[0] * r_w / 100.0, 0.42),
            math.pow(fl * rgb_d[1] * g_w / 100.0, 0.42),
            math.pow(fl * rgb_d[2] * b_w / 100.0, 0.42),
        ]
        rgb_a = [400.0 * factor / (factor + 27.13) for factor in rgb_a_factors]
        aw = (2.0 * rgb_a[0] + rgb_a[1] + 0.05 * rgb_a[2]) * nbb

        return cls(n=n, aw=aw, nbb=nbb, ncb=ncb, c=c, nc=nc, rgb_d=rgb_d,
                   fl=fl, fl_root=math.pow(fl, 0.25), z=z)


def _cone_response(xyz: tuple) -> tuple:
    x, y, z = xyz
    m = XYZ_TO_CAM16RGB
    return (
        x * m[0][0] + y * m[0][1] + z * m[0][2],
        x * m[1][0] + y * m[1][1] + z * m[1][2],
        x * m[2][0] + y * m[2][1] + z * m[2][2],
    )


DEFAULT_VIEWING_CONDITIONS = ViewingConditions.make()


# =============================================================================
# CAM16
# =============================================================================

@dataclass(frozen=True)
class Cam16:
    """Appearance attributes of a color under given viewing conditions."""
    hue: float  # Degrees, 0 <= hue < 360
    chroma: float
    j: float  # Lightness
    q: float  # Brightness
    m: float  # Colorfulness
    s: float  # Saturation
    jstar: float  # CAM16-UCS J*
    astar: float  # CAM16-UCS a*
    bstar: float  # CAM16-UCS b*

    def distance(self, other: 'Cam16') -> float:
        """Perceptual distance in CAM16-UCS."""
        d_j = self.jstar - other.jstar
        d_a = self.astar - other.astar
        d_b = self.bstar - other.bstar
        d_e_prime = math.sqrt(d_j * d_j + d_a * d_a + d_b * d_b)
        return 1.41 * math.pow(d_e_prime, 0.63)

    @classmethod
    def from_argb(cls, argb: int,
                  vc: ViewingConditions = DEFAULT_VIEWING_CONDITIONS) -> 'Cam16':
        return cls.from_xyz(*color_utils.xyz_from_argb(argb), vc=vc)

    @classmethod
    def from_xyz(cls, x: float, y: float, z: float,
                 vc: ViewingConditions = DEFAULT_VIEWING_CONDITIONS) -> 'Cam16':
        """Forward CAM16 transform of an XYZ color (Y in 0-100)."""
        r_c, g_c, b_c = _cone_response((x, y, z))

        # Chromatic adaptation
        r_d = vc.rgb_d[0] * r_c
        g_d = vc.rgb_d[1] * g_c
        b_d = vc.rgb_d[2] * b_c

        # Post-adaptation compression
        r_af = math.pow(vc.fl * abs(r_d) / 100.0, 0.42)
        g_af = math.pow(vc.fl * abs(g_d) / 100.0, 0.42)
        b_af = math.pow(vc.fl * abs(b_d) / 100.0, 0.42)
        r_a = signum(r_d) * 400.0 * r_af / (r_af + 27.13)
        g_a = signum(g_d) * 400.0 * g_af / (g_af + 27.13)
        b_a = signum(b_d) * 400.0 * b_af / (b_af + 27.13)

        # Opponent coordinates
        a = (11.0 * r_a + -12.0 * g_a + b_a) / 11.0
        b = (r_a + g_a - 2.0 * b_a) / 9.0
        u = (20.0 * r_a + 20.0 * g_a + 21.0 * b_a) / 20.0
        p2 = (40.0 * r_a + 20.0 * g_a + b_a) / 20.0

        atan_degrees = math.degrees(math.atan2(b, a))
        if atan_degrees < 0:
            hue = atan_degrees + 360.0
        elif atan_degrees >= 360:
            hue = atan_degrees - 360.0
        else:
            hue = atan_degrees
        hue_radians = math.radians(hue)

        ac = p2 * vc.nbb
        j = 100.0 * math.pow(ac / vc.aw, vc.c * vc.z)
        q = 4.0 / vc.c * math.sqrt(j / 100.0) * (vc.aw + 4.0) * vc.fl_root

        hue_prime = hue + 360 if hue < 20.14 else hue
        e_hue = 0.25 * (math.cos(math.radians(hue_prime) + 2.0) + 3.8)
        p1 = 50000.0 / 13.0 * e_hue * vc.nc * vc.ncb
        t = p1 * math.hypot(a, b) / (u + 0.305)
        alpha = math.pow(1.64 - math.pow(0.29, vc.n), 0.73) * math.pow(t, 0.9)
        c = alpha * math.sqrt(j / 100.0)
        m = c * vc.fl_root
        s = 50.0 * math.sqrt((alpha * vc.c) / (vc.aw + 4.0))

        jstar = (1.0 + 100.0 * UCS_C1) * j / (1.0 + UCS_C1 * j)
        mstar = math.log1p(UCS_C2 * m) / UCS_C2
        astar = mstar * math.cos(hue_radians)
        bstar = mstar * math.sin(hue_radians)

        return cls(hue=hue, chroma=c, j=j, q=q, m=m, s=s,
                   jstar=jstar, astar=astar, bstar=bstar)

    @classmethod
    def from_jch(cls, j: float, c: float, h: float,
                 vc: ViewingConditions = DEFAULT_VIEWING_CONDITIONS) -> 'Cam16':
        """Build attributes from lightness J, chroma C and hue h."""
        q = 4.0 / vc.c * math.sqrt(j / 100.0) * (vc.aw + 4.0) * vc.fl_root
        m = c * vc.fl_root
        alpha = c / math.sqrt(j / 100.0) if j > 0 else 0.0
        s = 50.0 * math.sqrt((alpha * vc.c) / (vc.aw + 4.0))

        hue_radians = math.radians(h)
        jstar = (1.0 + 100.0 * UCS_C1) * j / (1.0 + UCS_C1 * j)
        mstar = math.log1p(UCS_C2 * m) / UCS_C2
        astar = mstar * math.cos(hue_radians)
        bstar = mstar * math.sin(hue_radians)
        return cls(hue=h, chroma=c, j=j, q=q, m=m, s=s,
                   jstar=jstar, astar=astar, bstar=bstar)

    @classmethod
    def from_ucs(cls, jstar: float, astar: float, bstar: float,
                 vc: ViewingConditions = DEFAULT_VIEWING_CONDITIONS) -> 'Cam16':
        """Build attributes from CAM16-UCS coordinates."""
        m = math.hypot(astar, bstar)
        big_m = math.expm1(m * UCS_C2) / UCS_C2
        c = big_m / vc.fl_root
        h = math.degrees(math.atan2(bstar, astar))
        if h < 0.0:
            h += 360.0
        j = jstar / (1.0 - (jstar - 100.0) * UCS_C1)
        return cls.from_jch(j, c, h, vc)

    def xyz_in_viewing_conditions(self, vc: ViewingConditions = DEFAULT_VIEWING_CONDITIONS) -> tuple:
        """Inverse CAM16 transform to XYZ under the given viewing conditions."""
        if self.chroma == 0.0 or self.j == 0.0:
            alpha = 0.0
        else:
            alpha = self.chroma / math.sqrt(self.j / 100.0)

        t = math.pow(alpha / math.pow(1.64 - math.pow(0.29, vc.n), 0.73), 1.0 / 0.9)
        h_rad = math.radians(self.hue)

        e_hue = 0.25 * (math.cos(h_rad + 2.0) + 3.8)
        ac = vc.aw * math.pow(self.j / 100.0, 1.0 / vc.c / vc.z)
        p1 = e_hue * (50000.0 / 13.0) * vc.nc * vc.ncb
        p2 = ac / vc.nbb

        h_sin = math.sin(h_rad)
        h_cos = math.cos(h_rad)

        gamma = 23.0 * (p2 + 0.305) * t / (23.0 * p1 + 11.0 * t * h_cos + 108.0 * t * h_sin)
        a = gamma * h_cos
        b = gamma * h_sin
        r_a = (460.0 * p2 + 451.0 * a + 288.0 * b) / 1403.0
        g_a = (460.0 * p2 - 891.0 * a - 261.0 * b) / 1403.0
        b_a = (460.0 * p2 - 220.0 * a - 6300.0 * b) / 1403.0

        r_c = _inverse_compression(r_a, vc.fl)
        g_c = _inverse_compression(g_a, vc.fl)
        b_c = _inverse_compression(b_a, vc.fl)
        r_f = r_c / vc.rgb_d[0]
        g_f = g_c / vc.rgb_d[1]
        b_f = b_c / vc.rgb_d[2]

        m = CAM16RGB_TO_XYZ
        x = r_f * m[0][0] + g_f * m[0][1] + b_f * m[0][2]
        y = r_f * m[1][0] + g_f * m[1][1] + b_f * m[1][2]
        z = r_f * m[2][0] + g_f * m[2][1] + b_f * m[2][2]
        return (x, y, z)

    def to_argb(self, vc: ViewingConditions = DEFAULT_VIEWING_CONDITIONS) -> int:
        return color_utils.argb_from_xyz(*self.xyz_in_viewing_conditions(vc))


def _inverse_compression(component: float, fl: float) -> float:
    base = max(0.0, (27.13 * abs(component)) / (400.0 - abs(component)))
    return signum(component) * (100.0 / fl) * math.pow(base, 1.0 / 0.42)
