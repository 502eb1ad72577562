"""Palette building with color conversion, WCAG scoring and CVD simulation."""

from .accessibility import (
    ContrastResult,
    accessibility_score,
    best_contrast,
    check_accessibility,
    classify,
    contrast_ratio,
    generate_accessible_palette,
)
from .color import ColorValue, InvalidColor, is_valid_hex, parse_hex
from .convert import ColorFormats, HSVValue, convert_color, hex_to_hsv, hsv_to_hex
from .history import HistoryManager
from .palette import PaletteSession
from .vision import describe, simulate

__version__ = "0.1.0"

__all__ = [
    "ColorFormats",
    "ColorValue",
    "ContrastResult",
    "HSVValue",
    "HistoryManager",
    "InvalidColor",
    "PaletteSession",
    "accessibility_score",
    "best_contrast",
    "check_accessibility",
    "classify",
    "contrast_ratio",
    "convert_color",
    "describe",
    "generate_accessible_palette",
    "hex_to_hsv",
    "hsv_to_hex",
    "is_valid_hex",
    "parse_hex",
    "simulate",
]
