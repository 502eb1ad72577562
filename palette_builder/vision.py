"""Color vision deficiency simulation.

Each deficiency is approximated by a fixed 3x3 matrix applied to the
gamma-encoded 0-255 RGB channels of a color. The coefficients are the widely
published approximation set; no linearization is done before the transform.
"""

import logging

import numpy as np

from .color import InvalidColor, parse_hex
from .convert import hex_to_rgb, rgb_to_hex

logger = logging.getLogger(__name__)

BLINDNESS_MATRICES = {
    "protanopia": np.array(
        [[0.567, 0.433, 0.0], [0.558, 0.442, 0.0], [0.0, 0.242, 0.758]]
    ),
    "deuteranopia": np.array(
        [[0.625, 0.375, 0.0], [0.7, 0.3, 0.0], [0.0, 0.3, 0.7]]
    ),
    "tritanopia": np.array(
        [[0.95, 0.05, 0.0], [0.0, 0.433, 0.567], [0.0, 0.475, 0.525]]
    ),
    "protanomaly": np.array(
        [[0.817, 0.183, 0.0], [0.333, 0.667, 0.0], [0.0, 0.125, 0.875]]
    ),
    "deuteranomaly": np.array(
        [[0.8, 0.2, 0.0], [0.258, 0.742, 0.0], [0.0, 0.142, 0.858]]
    ),
    "tritanomaly": np.array(
        [[0.967, 0.033, 0.0], [0.0, 0.733, 0.267], [0.0, 0.183, 0.817]]
    ),
    "achromatopsia": np.array(
        [[0.299, 0.587, 0.114], [0.299, 0.587, 0.114], [0.299, 0.587, 0.114]]
    ),
    "achromatomaly": np.array(
        [[0.618, 0.320, 0.062], [0.163, 0.775, 0.062], [0.163, 0.320, 0.516]]
    ),
}

BLINDNESS_TYPES = tuple(BLINDNESS_MATRICES)

BLINDNESS_INFO = {
    "protanopia": {
        "name": "Protanopia",
        "description": "Missing long-wavelength (red) photopigments",
        "prevalence": "~1% of males",
    },
    "deuteranopia": {
        "name": "Deuteranopia",
        "description": "Missing medium-wavelength (green) photopigments",
        "prevalence": "~1% of males",
    },
    "tritanopia": {
        "name": "Tritanopia",
        "description": "Missing short-wavelength (blue) photopigments",
        "prevalence": "~0.002% of population",
    },
    "protanomaly": {
        "name": "Protanomaly",
        "description": "Shifted long-wavelength (red) photopigments",
        "prevalence": "~1% of males",
    },
    "deuteranomaly": {
        "name": "Deuteranomaly",
        "description": "Shifted medium-wavelength (green) photopigments",
        "prevalence": "~5% of males, ~0.4% of females",
    },
    "tritanomaly": {
        "name": "Tritanomaly",
        "description": "Shifted short-wavelength (blue) photopigments",
        "prevalence": "~0.01% of population",
    },
    "achromatopsia": {
        "name": "Achromatopsia",
        "description": "Complete absence of color vision",
        "prevalence": "~0.003% of population",
    },
    "achromatomaly": {
        "name": "Achromatomaly",
        "description": "Partial absence of color vision",
        "prevalence": "~0.001% of population",
    },
}


def _matrix(blindness_type):
    if blindness_type not in BLINDNESS_MATRICES:
        raise ValueError(
            f"Unknown color blindness type: {blindness_type}. "
            f"Available: {', '.join(BLINDNESS_TYPES)}"
        )
    return BLINDNESS_MATRICES[blindness_type]


def simulate(hex_color, blindness_type):
    """Simulate how a color appears with the given deficiency.

    Input that is not a valid color, or an unknown deficiency type, is
    returned unchanged.
    """
    matrix = BLINDNESS_MATRICES.get(blindness_type)
    if matrix is None:
        logger.warning("Unknown color blindness type: %s", blindness_type)
        return hex_color
    try:
        canonical = parse_hex(hex_color)
    except InvalidColor:
        return hex_color

    rgb = np.array(hex_to_rgb(canonical), dtype=float)
    out = np.clip(np.floor(matrix @ rgb + 0.5), 0, 255)
    return rgb_to_hex(*(int(c) for c in out))


def simulate_palette(palette, blindness_type):
    """Return the palette with every color passed through ``simulate``"""
    return [c._replace(hex=simulate(c.hex, blindness_type)) for c in palette]


def describe(blindness_type):
    _matrix(blindness_type)
    return dict(BLINDNESS_INFO[blindness_type])
