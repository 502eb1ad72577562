import json
import logging
from datetime import date

from ..accessibility import accessibility_score
from ..convert import convert_color

logger = logging.getLogger(__name__)


def export_json(palette, filepath, palette_name, generated_on=None):
    """Export palette as JSON with every color format and metadata.

    Args:
        palette: Sequence of ColorValue
        filepath: Output file path
        palette_name: Palette display name
        generated_on: Export date, today if None
    """
    colors = []
    for color in palette:
        formats = convert_color(color.hex)
        colors.append(
            {
                "id": color.id,
                "hex": formats.hex,
                "name": color.name,
                "rgb": formats.rgb,
                "hsl": formats.hsl,
                "cmyk": formats.cmyk,
                "lab": formats.lab,
            }
        )

    data = {
        "name": palette_name,
        "colors": colors,
        "_count": len(colors),
        "_accessibility_score": accessibility_score(palette),
        "_generated_on": (generated_on or date.today()).isoformat(),
    }

    with open(filepath, "w") as f:
        json.dump(data, f, indent=2)
    logger.info("Palette saved to JSON: %s", filepath)
