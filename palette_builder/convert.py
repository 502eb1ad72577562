"""Conversions between hex, RGB, HSV, HSL, CMYK and CIE LAB.

Every ``hex_to_*`` function is total: input that is not a valid hex color
falls back to black rather than raising, since results are only used for
display and export.
"""

import colorsys
import math
import random
from collections import namedtuple

from .color import InvalidColor, parse_hex

HSVValue = namedtuple("HSVValue", ["h", "s", "v"])
ColorFormats = namedtuple("ColorFormats", ["hex", "rgb", "hsl", "cmyk", "lab"])

NEUTRAL_FORMATS = ColorFormats(
    hex="#000000",
    rgb="rgb(0, 0, 0)",
    hsl="hsl(0, 0%, 0%)",
    cmyk="cmyk(0%, 0%, 0%, 100%)",
    lab="lab(0, 0, 0)",
)

# D65 reference white
_XN, _YN, _ZN = 0.95047, 1.0, 1.08883
_LAB_DELTA = 6 / 29


def round_half_up(x):
    """Round to the nearest integer, halves away from negative infinity"""
    return int(math.floor(x + 0.5))


def _clamp(x, low, high):
    return max(low, min(high, x))


def rgb_to_hex(r, g, b):
    r, g, b = (_clamp(round_half_up(c), 0, 255) for c in (r, g, b))
    return f"#{r:02X}{g:02X}{b:02X}"


def hex_to_rgb(hex_color):
    try:
        digits = parse_hex(hex_color)[1:]
    except InvalidColor:
        return (0, 0, 0)
    return tuple(int(digits[i : i + 2], 16) for i in (0, 2, 4))


def rgb_to_hsl(r, g, b):
    r, g, b = r / 255, g / 255, b / 255
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    return (h * 360, s * 100, l * 100)


def hsl_to_rgb(h, s, l):
    h, s, l = (h % 360) / 360, _clamp(s, 0, 100) / 100, _clamp(l, 0, 100) / 100
    r, g, b = colorsys.hls_to_rgb(h, l, s)
    return (round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255))


def rgb_to_hsv(r, g, b):
    h, s, v = colorsys.rgb_to_hsv(r / 255, g / 255, b / 255)
    return HSVValue(h * 360, s * 100, v * 100)


def hsv_to_rgb(h, s, v):
    """Convert HSV to an RGB tuple.

    Hue wraps modulo 360; saturation and value are clamped to [0, 100].
    Non-finite input gives black.
    """
    if not all(math.isfinite(x) for x in (h, s, v)):
        return (0, 0, 0)
    h = (h % 360) / 360
    s = _clamp(s, 0, 100) / 100
    v = _clamp(v, 0, 100) / 100
    r, g, b = colorsys.hsv_to_rgb(h, s, v)
    return (round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255))


def hsv_to_hex(h, s, v):
    return rgb_to_hex(*hsv_to_rgb(h, s, v))


def rgb_to_cmyk(r, g, b):
    r, g, b = r / 255, g / 255, b / 255
    k = 1 - max(r, g, b)
    if k >= 1:
        return (0.0, 0.0, 0.0, 1.0)
    c = (1 - r - k) / (1 - k)
    m = (1 - g - k) / (1 - k)
    y = (1 - b - k) / (1 - k)
    return (c, m, y, k)


def _srgb_to_linear(c):
    c = c / 255
    return c / 12.92 if c <= 0.04045 else ((c + 0.055) / 1.055) ** 2.4


def _lab_f(t):
    if t > _LAB_DELTA**3:
        return t ** (1 / 3)
    return t / (3 * _LAB_DELTA**2) + 4 / 29


def rgb_to_lab(r, g, b):
    """sRGB to CIE L*a*b* under the D65 white point"""
    r, g, b = _srgb_to_linear(r), _srgb_to_linear(g), _srgb_to_linear(b)

    x = 0.4124564 * r + 0.3575761 * g + 0.1804375 * b
    y = 0.2126729 * r + 0.7151522 * g + 0.0721750 * b
    z = 0.0193339 * r + 0.1191920 * g + 0.9503041 * b

    fx, fy, fz = _lab_f(x / _XN), _lab_f(y / _YN), _lab_f(z / _ZN)
    return (116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz))


def hex_to_hsl(hex_color):
    return rgb_to_hsl(*hex_to_rgb(hex_color))


def hex_to_hsv(hex_color):
    return rgb_to_hsv(*hex_to_rgb(hex_color))


def hex_to_cmyk(hex_color):
    return rgb_to_cmyk(*hex_to_rgb(hex_color))


def hex_to_lab(hex_color):
    return rgb_to_lab(*hex_to_rgb(hex_color))


def random_color(rng=None):
    """Return a uniformly sampled ``#RRGGBB`` color.

    Args:
        rng: Optional ``random.Random`` instance, the module generator otherwise
    """
    rng = rng or random
    return f"#{rng.randint(0, 0xFFFFFF):06X}"


def format_rgb(rgb):
    r, g, b = (round_half_up(c) for c in rgb)
    return f"rgb({r}, {g}, {b})"


def format_hsl(hsl):
    h, s, l = (round_half_up(c) for c in hsl)
    return f"hsl({h}, {s}%, {l}%)"


def format_cmyk(cmyk):
    c, m, y, k = (round_half_up(v * 100) for v in cmyk)
    return f"cmyk({c}%, {m}%, {y}%, {k}%)"


def format_lab(lab):
    l, a, b = (round_half_up(v) for v in lab)
    return f"lab({l}, {a}, {b})"


def convert_color(hex_color):
    """Return every display format of a color.

    Args:
        hex_color: Hex string, 3 or 6 digits

    Returns:
        ColorFormats of hex/rgb/hsl/cmyk/lab strings, or the neutral
        black formats when the input is not a valid color
    """
    try:
        canonical = parse_hex(hex_color)
    except InvalidColor:
        return NEUTRAL_FORMATS

    rgb = hex_to_rgb(canonical)
    return ColorFormats(
        hex=canonical,
        rgb=format_rgb(rgb),
        hsl=format_hsl(rgb_to_hsl(*rgb)),
        cmyk=format_cmyk(rgb_to_cmyk(*rgb)),
        lab=format_lab(rgb_to_lab(*rgb)),
    )
