"""Color value model and hex validation."""

import re
import uuid
from collections import namedtuple

ColorValue = namedtuple("ColorValue", ["id", "hex", "name"], defaults=(None,))

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class InvalidColor(ValueError):
    """Raised when a color string is not a 3- or 6-digit hex value."""

    def __init__(self, value):
        super().__init__(f"Invalid color: {value!r}")
        self.value = value


def parse_hex(value):
    """Normalize a hex color string to canonical ``#RRGGBB``.

    Accepts 3- or 6-digit hex with or without the leading ``#``.

    Raises:
        InvalidColor: for any other input
    """
    if not isinstance(value, str):
        raise InvalidColor(value)
    match = _HEX_RE.match(value.strip())
    if match is None:
        raise InvalidColor(value)
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return "#" + digits.upper()


def is_valid_hex(value):
    try:
        parse_hex(value)
    except InvalidColor:
        return False
    return True


def new_color_id():
    return uuid.uuid4().hex


def create_color_value(hex_color, name=None, color_id=None):
    """Create a ColorValue, validating the hex and assigning a fresh id if needed"""
    return ColorValue(
        id=color_id if color_id is not None else new_color_id(),
        hex=parse_hex(hex_color),
        name=name,
    )


def display_name(color, index):
    """Name shown for a color, falling back to its 1-based position"""
    return color.name or f"Color {index}"
