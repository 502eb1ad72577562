"""Printable palette document.

The layout is computed in millimetres on an A4 page, then rendered with
Pillow and written as a multi-page PDF. One block per color: a swatch, the
color name, and its HEX / RGB / HSL / CMYK / LAB strings. A new page starts
once a block would begin within ``BOTTOM_RESERVE`` of the page bottom.
"""

import logging
from datetime import date

from PIL import Image, ImageDraw, ImageFont

from ..color import display_name
from ..convert import convert_color, hex_to_rgb

logger = logging.getLogger(__name__)

PAGE_WIDTH = 210
PAGE_HEIGHT = 297
MARGIN = 20
SWATCH_SIZE = 30
SPACING = 10
BOTTOM_RESERVE = 80
LINE_STEP = 6

PX_PER_MM = 4
MM_PER_PT = 0.3528

TITLE_PT = 20
META_PT = 12
NAME_PT = 14
FORMAT_PT = 10


def _text(x, y, pt, text):
    return {"kind": "text", "x": x, "y": y, "pt": pt, "text": text}


def layout_document(
    palette, palette_name, generated_on=None, page_height=PAGE_HEIGHT
):
    """Place the title, metadata and color blocks on pages.

    Returns:
        list of pages, each a list of dicts with a ``kind`` of "text" or
        "swatch" and positions in millimetres
    """
    generated_on = generated_on or date.today()
    pages = [[]]
    y = MARGIN

    pages[0].append(_text(MARGIN, y, TITLE_PT, palette_name))
    y += 15
    pages[0].append(
        _text(MARGIN, y, META_PT, f"Generated on: {generated_on.strftime('%x')}")
    )
    y += 10
    pages[0].append(_text(MARGIN, y, META_PT, f"Colors: {len(palette)}"))
    y += 20

    for index, color in enumerate(palette, start=1):
        if y > page_height - BOTTOM_RESERVE:
            pages.append([])
            y = MARGIN

        page = pages[-1]
        formats = convert_color(color.hex)
        page.append(
            {
                "kind": "swatch",
                "x": MARGIN,
                "y": y,
                "size": SWATCH_SIZE,
                "hex": color.hex,
            }
        )

        text_x = MARGIN + SWATCH_SIZE + SPACING
        page.append(_text(text_x, y + 10, NAME_PT, display_name(color, index)))
        text_y = y + 20
        for label, value in (
            ("HEX", formats.hex),
            ("RGB", formats.rgb),
            ("HSL", formats.hsl),
            ("CMYK", formats.cmyk),
            ("LAB", formats.lab),
        ):
            page.append(_text(text_x, text_y, FORMAT_PT, f"{label}: {value}"))
            text_y += LINE_STEP

        y += SWATCH_SIZE + SPACING + 10

    return pages


def _px(mm):
    return int(round(mm * PX_PER_MM))


def _font(pt):
    return ImageFont.load_default(size=max(1, _px(pt * MM_PER_PT)))


def render_page(items):
    image = Image.new("RGB", (_px(PAGE_WIDTH), _px(PAGE_HEIGHT)), "white")
    draw = ImageDraw.Draw(image)
    for item in items:
        if item["kind"] == "swatch":
            x, y, size = _px(item["x"]), _px(item["y"]), _px(item["size"])
            draw.rectangle(
                [x, y, x + size, y + size],
                fill=hex_to_rgb(item["hex"]),
                outline=(200, 200, 200),
            )
        else:
            # y is the text baseline
            height = _px(item["pt"] * MM_PER_PT)
            draw.text(
                (_px(item["x"]), _px(item["y"]) - height),
                item["text"],
                fill=(0, 0, 0),
                font=_font(item["pt"]),
            )
    return image


def export_pdf(palette, palette_name, filepath, generated_on=None):
    """Render the palette document and save it as PDF.

    Returns:
        Number of pages written
    """
    layout = layout_document(palette, palette_name, generated_on)
    pages = [render_page(items) for items in layout]
    pages[0].save(
        filepath,
        "PDF",
        save_all=True,
        append_images=pages[1:],
        resolution=25.4 * PX_PER_MM,
    )
    logger.info("Palette saved to PDF: %s (%d pages)", filepath, len(pages))
    return len(pages)
