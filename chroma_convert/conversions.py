"""
Numeric color space conversions.
RGB <-> HSL/HSV, RGB -> XYZ (sRGB, D65) -> CIE Lab.
Out-of-range input is not clamped or rejected. In the RGB -> XYZ/Lab/HSL/HSV
direction, values too large for a float saturate to infinities instead of raising.
"""

import math
from typing import Optional

from .hex_codec import round_half_up
from .models import HSLA, HSVA, RGBA, XYZ, Lab

# D65 reference white
XN, YN, ZN = 95.047, 100.0, 108.883

# sRGB -> XYZ matrix rows
SRGB_TO_XYZ = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)

SRGB_LINEAR_THRESHOLD = 0.04045
LAB_EPSILON = 0.008856
LAB_KAPPA_SLOPE = 7.787


def hsl_to_rgb(h: float, s: float, l: float, alpha: Optional[float] = None) -> RGBA:
    """Convert HSL to RGB. h in degrees, s and l in [0,1].

    Hues outside [0, 360) match no sector and collapse to the lightness
    offset, they are not wrapped. Inputs must keep the channels finite,
    which parse_color guarantees by bounding the digits it accepts.
    """
    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs(((h / 60) % 2) - 1))
    m = l - c / 2

    r = g = b = 0.0
    if 0 <= h < 60:
        r, g = c, x
    elif 60 <= h < 120:
        r, g = x, c
    elif 120 <= h < 180:
        g, b = c, x
    elif 180 <= h < 240:
        g, b = x, c
    elif 240 <= h < 300:
        r, b = x, c
    elif 300 <= h < 360:
        r, b = c, x

    return RGBA(
        r=round_half_up((r + m) * 255),
        g=round_half_up((g + m) * 255),
        b=round_half_up((b + m) * 255),
        alpha=alpha,
    )


def _ratio(v: float, d: float) -> float:
    """v / d, saturating to an infinity when v is too large for a float."""
    try:
        return v / d
    except OverflowError:
        return math.inf if v > 0 else -math.inf


def _srgb_to_linear(v: float) -> float:
    if v >= SRGB_LINEAR_THRESHOLD:
        try:
            return ((v + 0.055) / 1.055) ** 2.4
        except OverflowError:
            return math.inf
    return v / 12.92


def rgb_to_xyz(r: float, g: float, b: float) -> XYZ:
    """Convert sRGB channels (0-255) to XYZ scaled to the D65 white (Y=100)."""
    lin = tuple(_srgb_to_linear(_ratio(v, 255)) for v in (r, g, b))
    x, y, z = (sum(k * v for k, v in zip(row, lin)) * 100 for row in SRGB_TO_XYZ)
    return XYZ(x=x, y=y, z=z)


def _lab_f(t: float) -> float:
    if t >= LAB_EPSILON:
        return t ** (1 / 3)
    return LAB_KAPPA_SLOPE * t + 16 / 116


def xyz_to_lab(x: float, y: float, z: float) -> Lab:
    """Convert D65-scaled XYZ to CIE Lab."""
    fx, fy, fz = _lab_f(_ratio(x, XN)), _lab_f(_ratio(y, YN)), _lab_f(_ratio(z, ZN))
    return Lab(l=116 * fy - 16, a=500 * (fx - fy), b=200 * (fy - fz))


def rgb_to_lab(r: float, g: float, b: float) -> Lab:
    """Convert sRGB channels to CIE Lab via XYZ."""
    xyz = rgb_to_xyz(r, g, b)
    return xyz_to_lab(xyz.x, xyz.y, xyz.z)


def _hue(r: float, g: float, b: float, cmax: float, delta: float) -> float:
    if delta == 0:
        return 0.0
    if cmax == r:
        h = 60 * (((g - b) / delta) % 6)
    elif cmax == g:
        h = 60 * ((b - r) / delta + 2)
    else:
        h = 60 * ((r - g) / delta + 4)
    return h % 360


def rgb_to_hsl(r: float, g: float, b: float, alpha: Optional[float] = None) -> HSLA:
    """Convert RGB to HSL."""
    r_f, g_f, b_f = _ratio(r, 255), _ratio(g, 255), _ratio(b, 255)
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    delta = cmax - cmin
    l = (cmax + cmin) / 2
    denom = 1 - abs(2 * l - 1)
    s = 0.0 if delta == 0 or denom == 0 else delta / denom
    return HSLA(h=_hue(r_f, g_f, b_f, cmax, delta), s=s, l=l, alpha=alpha)


def rgb_to_hsv(r: float, g: float, b: float, alpha: Optional[float] = None) -> HSVA:
    """Convert RGB to HSV."""
    r_f, g_f, b_f = _ratio(r, 255), _ratio(g, 255), _ratio(b, 255)
    cmax = max(r_f, g_f, b_f)
    delta = cmax - min(r_f, g_f, b_f)
    s = 0.0 if cmax == 0 else delta / cmax
    return HSVA(h=_hue(r_f, g_f, b_f, cmax, delta), s=s, v=cmax, alpha=alpha)
