"""WCAG contrast scoring and accessible palette generation."""

from collections import namedtuple
from itertools import combinations

from . import config
from .color import (
    InvalidColor,
    create_color_value,
    display_name,
    new_color_id,
    parse_hex,
)
from .convert import hex_to_rgb, hsl_to_rgb, rgb_to_hex, rgb_to_hsl, round_half_up

ContrastResult = namedtuple("ContrastResult", ["ratio", "level", "score"])

LEVEL_AAA = "AAA"
LEVEL_AA = "AA"
LEVEL_FAIL = "fail"
SCORE_PASS = "pass"
SCORE_FAIL = "fail"


def relative_luminance(r, g, b):
    """Calculate relative luminance per WCAG 2.0"""

    def channel(c):
        c = c / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    return 0.2126 * channel(r) + 0.7152 * channel(g) + 0.0722 * channel(b)


def luminance_contrast(lum1, lum2):
    """Calculate contrast ratio between two luminances"""
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def contrast_ratio(hex_a, hex_b):
    """WCAG contrast ratio of two colors, 1.0 if either is not a valid color"""
    try:
        rgb_a = hex_to_rgb(parse_hex(hex_a))
        rgb_b = hex_to_rgb(parse_hex(hex_b))
    except InvalidColor:
        return 1.0
    return luminance_contrast(relative_luminance(*rgb_a), relative_luminance(*rgb_b))


def classify(ratio):
    """Grade a contrast ratio against the WCAG AA and AAA thresholds"""
    if ratio >= config.AAA_CONTRAST:
        return ContrastResult(ratio, LEVEL_AAA, SCORE_PASS)
    if ratio >= config.AA_CONTRAST:
        return ContrastResult(ratio, LEVEL_AA, SCORE_PASS)
    return ContrastResult(ratio, LEVEL_FAIL, SCORE_FAIL)


def check_accessibility(foreground, background):
    return classify(contrast_ratio(foreground, background))


def best_contrast(background, candidates=config.DEFAULT_CONTRAST_CANDIDATES):
    """Pick the candidate with the highest contrast against the background.

    Ties go to the earliest candidate. Returns None when there are no candidates.
    """
    best_color = None
    best_ratio = 0.0
    for color in candidates:
        ratio = contrast_ratio(color, background)
        if best_color is None or ratio > best_ratio:
            best_color = color
            best_ratio = ratio
    return best_color


def contrast_text_color(hex_color):
    """Text color for a swatch: black on light colors, white on dark ones"""
    try:
        rgb = hex_to_rgb(parse_hex(hex_color))
    except InvalidColor:
        return "#000000"
    if relative_luminance(*rgb) > config.TEXT_LUMINANCE_THRESHOLD:
        return "#000000"
    return "#FFFFFF"


def accessible_lightness(index, count):
    """Lightness (0-1) of sample ``index`` in a sweep of ``count`` samples"""
    low = config.ACCESSIBLE_MIN_LIGHTNESS
    high = config.ACCESSIBLE_MAX_LIGHTNESS
    if count == 1:
        return low
    return low + (index / (count - 1)) * (high - low)


def generate_accessible_palette(
    base_hex, count=config.DEFAULT_ACCESSIBLE_COUNT, id_factory=None
):
    """Generate a lightness ramp of a base color.

    Hue and saturation are taken from the base color; lightness is swept
    linearly across the accessible range.

    Args:
        base_hex: Base color hex string
        count: Number of colors, at least 1
        id_factory: Optional callable returning a fresh color id

    Returns:
        list of ColorValue named "Accessible 1", "Accessible 2", ...

    Raises:
        ValueError: if count is below 1
        InvalidColor: if base_hex is not a valid color
    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")

    id_factory = id_factory or new_color_id
    h, s, _ = rgb_to_hsl(*hex_to_rgb(parse_hex(base_hex)))

    colors = []
    for i in range(count):
        lightness = accessible_lightness(i, count)
        colors.append(
            create_color_value(
                rgb_to_hex(*hsl_to_rgb(h, s, lightness * 100)),
                name=f"Accessible {i + 1}",
                color_id=id_factory(),
            )
        )
    return colors


def accessibility_score(palette):
    """Percentage of color pairs in the palette that pass WCAG AA.

    Every unordered pair of distinct entries is checked once. Palettes with
    fewer than two colors score 0.
    """
    pairs = list(combinations(palette, 2))
    if not pairs:
        return 0
    passing = sum(
        1 for a, b in pairs if check_accessibility(a.hex, b.hex).score == SCORE_PASS
    )
    return round_half_up(passing / len(pairs) * 100)


def contrast_matrix(palette):
    """Grid of ContrastResult for every (row, column) pair of colors"""
    return [
        [check_accessibility(row.hex, col.hex) for col in palette] for row in palette
    ]


def readability_report(palette, palette_name=config.DEFAULT_PALETTE_NAME):
    """Generate a pairwise readability report for inspection.

    Returns:
        tuple: (report text, list of failing pairs as
        (name_a, hex_a, name_b, hex_b, ratio))
    """
    report = []
    report.append("=" * 70)
    report.append("READABILITY REPORT")
    report.append("=" * 70)
    report.append(f"Palette: {palette_name}")
    report.append(f"Colors:  {len(palette)}")
    report.append("")

    names = [display_name(c, i) for i, c in enumerate(palette, start=1)]

    report.append(
        f"\nBEST TEXT COLOR (min: {config.AA_CONTRAST}:1 for AA, "
        f"{config.AAA_CONTRAST}:1 for AAA)"
    )
    report.append("-" * 50)
    for name, color in zip(names, palette):
        text = best_contrast(color.hex)
        result = check_accessibility(text, color.hex)
        report.append(
            f"  {name:18} {color.hex}  text {text}  "
            f"{result.ratio:4.1f}:1  {result.level}"
        )

    issues = []
    report.append("\nPAIRS")
    report.append("-" * 50)
    indexed = list(zip(names, palette))
    for (name_a, a), (name_b, b) in combinations(indexed, 2):
        result = check_accessibility(a.hex, b.hex)
        status = "✓" if result.score == SCORE_PASS else "✗ FAIL"
        if result.score == SCORE_FAIL:
            issues.append((name_a, a.hex, name_b, b.hex, result.ratio))
        report.append(
            f"  {name_a:14} {a.hex} / {name_b:14} {b.hex}  "
            f"{result.ratio:4.1f}:1  {result.level:4}  {status}"
        )

    report.append("\n" + "=" * 70)
    report.append(f"ACCESSIBILITY SCORE: {accessibility_score(palette)}%")
    if issues:
        report.append(f"LOW CONTRAST PAIRS: {len(issues)}")
        for name_a, hex_a, name_b, hex_b, ratio in issues:
            report.append(
                f"  - {name_a} ({hex_a}) on {name_b} ({hex_b}): "
                f"{ratio:.1f}:1, needs {config.AA_CONTRAST}:1"
            )
    elif len(palette) >= 2:
        report.append("ALL PAIRS PASS CONTRAST REQUIREMENTS ✓")
    report.append("=" * 70)

    return "\n".join(report), issues
