"""Defaults shared across the palette builder."""

# Undo/redo depth
HISTORY_CAPACITY = 50

# Recently used hex values kept by the store
RECENT_COLORS_LIMIT = 10
RECENT_COLORS_KEY = "recentColors"

# WCAG thresholds (inclusive)
AAA_CONTRAST = 7.0
AA_CONTRAST = 4.5

# Luminance above which card text switches to black
TEXT_LUMINANCE_THRESHOLD = 0.4

# Accessible palette generation
DEFAULT_ACCESSIBLE_COUNT = 5
ACCESSIBLE_MIN_LIGHTNESS = 0.2
ACCESSIBLE_MAX_LIGHTNESS = 0.8

DEFAULT_CONTRAST_CANDIDATES = ("#000000", "#FFFFFF")

DEFAULT_PALETTE_NAME = "My Color Palette"
DEFAULT_PALETTE = (
    ("1", "#FF6B6B", "Coral Red"),
    ("2", "#4ECDC4", "Turquoise"),
    ("3", "#45B7D1", "Sky Blue"),
    ("4", "#96CEB4", "Mint Green"),
    ("5", "#FFEAA7", "Banana Yellow"),
)

CARD_SIZES = ("small", "medium", "large")
DEFAULT_CARD_SIZE = "medium"

# Image extraction
EXTRACT_THUMBNAIL = (300, 300)
EXTRACT_MIN_SUM = 30  # Drop near-black pixels
EXTRACT_MAX_SUM = 735  # Drop near-white pixels
