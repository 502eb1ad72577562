import re

from .csv_export import export_csv, palette_rows
from .json_export import export_json
from .pdf_export import export_pdf, layout_document


def palette_filename(palette_name, ext):
    """File name for an exported palette, e.g. ``my_color_palette_palette.csv``"""
    stem = re.sub(r"[^a-z0-9]", "_", palette_name, flags=re.IGNORECASE).lower()
    return f"{stem}_palette.{ext}"


__all__ = [
    "export_csv",
    "export_json",
    "export_pdf",
    "layout_document",
    "palette_filename",
    "palette_rows",
]
