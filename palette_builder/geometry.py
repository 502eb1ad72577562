"""Polar geometry for the color wheel and brightness slider.

Angles are in degrees, measured clockwise from the top of the wheel, in
screen coordinates (y grows downwards).
"""

import math
from collections import namedtuple

from .convert import HSVValue, hsv_to_hex

Point = namedtuple("Point", ["x", "y"])
Polar = namedtuple("Polar", ["radius", "angle"])


def polar_to_cartesian(center_x, center_y, radius, angle_degrees):
    angle = math.radians(angle_degrees - 90)
    return Point(
        center_x + radius * math.cos(angle),
        center_y + radius * math.sin(angle),
    )


def cartesian_to_polar(center_x, center_y, x, y):
    dx = x - center_x
    dy = y - center_y
    radius = math.hypot(dx, dy)
    angle = math.degrees(math.atan2(dy, dx)) + 90
    if angle < 0:
        angle += 360
    return Polar(radius, angle)


def wheel_hsv_at(center_x, center_y, radius, x, y, value=100):
    """HSV under a point of the wheel, None if the point is outside it"""
    distance, angle = cartesian_to_polar(center_x, center_y, x, y)
    if distance > radius:
        return None
    saturation = min(distance / radius * 100, 100) if radius > 0 else 0
    return HSVValue(angle, saturation, value)


def wheel_position(hsv, center_x, center_y, radius):
    """Where the selection marker for ``hsv`` sits on the wheel"""
    return polar_to_cartesian(center_x, center_y, hsv.s / 100 * radius, hsv.h)


def slider_value(x, width):
    """Brightness (0-100) for a pointer at ``x`` along a slider of ``width``"""
    if width <= 0:
        return 0.0
    return max(0, min(width, x)) / width * 100


def brightness_gradient(hsv, steps=10):
    """Hex stops from zero to full brightness at the hue and saturation of ``hsv``"""
    return [hsv_to_hex(hsv.h, hsv.s, i / steps * 100) for i in range(steps + 1)]
