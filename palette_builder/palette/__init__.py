from .extract import extract_palette
from .loader import load_palette_from_json
from .session import PaletteSession, default_palette

__all__ = [
    "PaletteSession",
    "default_palette",
    "extract_palette",
    "load_palette_from_json",
]
