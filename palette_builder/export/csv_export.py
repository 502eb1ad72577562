import logging
from datetime import date

import pandas as pd

from ..color import display_name
from ..convert import convert_color

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "Palette Name",
    "Color Index",
    "Color Name",
    "HEX",
    "RGB",
    "HSL",
    "CMYK",
    "LAB",
    "Generated On",
]


def palette_rows(palette, palette_name, generated_on=None):
    """One dict per color, keyed by the CSV column names"""
    generated_on = generated_on or date.today()
    rows = []
    for index, color in enumerate(palette, start=1):
        formats = convert_color(color.hex)
        rows.append(
            {
                "Palette Name": palette_name,
                "Color Index": index,
                "Color Name": display_name(color, index),
                "HEX": formats.hex,
                "RGB": formats.rgb,
                "HSL": formats.hsl,
                "CMYK": formats.cmyk,
                "LAB": formats.lab,
                "Generated On": generated_on.strftime("%x"),
            }
        )
    return rows


def export_csv(palette, palette_name, filepath=None, generated_on=None):
    """Export a palette as CSV.

    Args:
        palette: Sequence of ColorValue
        palette_name: Name written in every row
        filepath: Optional output path
        generated_on: Date written in the "Generated On" column, today if None

    Returns:
        The CSV text
    """
    df = pd.DataFrame(
        palette_rows(palette, palette_name, generated_on), columns=CSV_COLUMNS
    )
    text = df.to_csv(index=False, lineterminator="\n")
    if filepath:
        with open(filepath, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        logger.info("Palette saved to CSV: %s", filepath)
    return text
