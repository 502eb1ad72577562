"""Tests for palette_builder.export and the palette JSON loader."""

import csv
import io
import json
from datetime import date
from pathlib import Path

import pytest

from palette_builder.color import ColorValue
from palette_builder.export import (
    export_csv,
    export_json,
    export_pdf,
    layout_document,
    palette_filename,
)
from palette_builder.export.csv_export import CSV_COLUMNS
from palette_builder.palette import load_palette_from_json

PALETTE = [
    ColorValue("1", "#000000", "Ink"),
    ColorValue("2", "#FFFFFF", None),
]
DAY = date(2024, 3, 9)


def _many(n):
    return [ColorValue(str(i), "#45B7D1", f"Blue {i}") for i in range(n)]


class TestFilename:
    def test_sanitized(self):
        assert palette_filename("My Color Palette", "csv") == "my_color_palette_palette.csv"

    def test_symbols(self):
        assert palette_filename("Sunset #2!", "pdf") == "sunset__2__palette.pdf"


class TestCsv:
    def test_header(self):
        text = export_csv(PALETTE, "Mono", generated_on=DAY)
        assert text.splitlines()[0] == ",".join(CSV_COLUMNS)

    def test_rows(self):
        text = export_csv(PALETTE, "Mono", generated_on=DAY)
        rows = list(csv.DictReader(io.StringIO(text)))
        assert len(rows) == 2
        assert rows[0]["Palette Name"] == "Mono"
        assert rows[0]["Color Index"] == "1"
        assert rows[0]["Color Name"] == "Ink"
        assert rows[0]["HEX"] == "#000000"
        assert rows[0]["RGB"] == "rgb(0, 0, 0)"
        assert rows[0]["CMYK"] == "cmyk(0%, 0%, 0%, 100%)"
        assert rows[0]["Generated On"] == DAY.strftime("%x")
        assert rows[1]["Color Name"] == "Color 2"
        assert rows[1]["LAB"] == "lab(100, 0, 0)"

    def test_writes_file(self, tmp_path: Path) -> None:
        path = tmp_path / "out.csv"
        text = export_csv(PALETTE, "Mono", str(path), generated_on=DAY)
        assert path.read_text(encoding="utf-8") == text


class TestJson:
    def test_content(self, tmp_path: Path) -> None:
        path = tmp_path / "palette.json"
        export_json(PALETTE, str(path), "Mono", generated_on=DAY)
        data = json.loads(path.read_text())
        assert data["name"] == "Mono"
        assert data["_count"] == 2
        assert data["_accessibility_score"] == 100
        assert data["_generated_on"] == "2024-03-09"
        assert data["colors"][0]["hsl"] == "hsl(0, 0%, 0%)"

    def test_loader_round_trip(self, tmp_path: Path) -> None:
        path = tmp_path / "palette.json"
        export_json(PALETTE, str(path), "Mono")
        palette, name = load_palette_from_json(str(path))
        assert name == "Mono"
        assert palette == PALETTE


class TestLoader:
    def test_plain_list(self, tmp_path: Path) -> None:
        path = tmp_path / "list.json"
        path.write_text(json.dumps(["#fff", "000000"]))
        palette, name = load_palette_from_json(str(path))
        assert [c.hex for c in palette] == ["#FFFFFF", "#000000"]
        assert name == "My Color Palette"

    def test_skips_invalid(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(
            json.dumps({"name": "Bad", "colors": [{"hex": "nope"}, 42, {"hex": "#123456"}]})
        )
        palette, _ = load_palette_from_json(str(path))
        assert [c.hex for c in palette] == ["#123456"]

    def test_rejects_non_palette_payload(self, tmp_path: Path) -> None:
        path = tmp_path / "number.json"
        path.write_text("42")
        with pytest.raises(ValueError, match="Not a palette file"):
            load_palette_from_json(str(path))

    def test_rejects_non_list_colors(self, tmp_path: Path) -> None:
        path = tmp_path / "string.json"
        path.write_text(json.dumps({"colors": "#FFFFFF"}))
        with pytest.raises(ValueError, match="must be a list"):
            load_palette_from_json(str(path))

    def test_duplicate_ids_replaced(self, tmp_path: Path) -> None:
        path = tmp_path / "dupes.json"
        path.write_text(
            json.dumps({"colors": [{"id": "a", "hex": "#000"}, {"id": "a", "hex": "#fff"}]})
        )
        palette, _ = load_palette_from_json(str(path))
        assert palette[0].id == "a"
        assert palette[1].id != "a"


class TestPdfLayout:
    def test_header_lines(self):
        (page,) = layout_document(PALETTE, "Mono", generated_on=DAY)
        texts = [item["text"] for item in page if item["kind"] == "text"]
        assert texts[0] == "Mono"
        assert texts[1] == f"Generated on: {DAY.strftime('%x')}"
        assert texts[2] == "Colors: 2"
        assert "HEX: #000000" in texts
        assert "Color 2" in texts

    def test_paginates(self):
        pages = layout_document(_many(10), "Blues", generated_on=DAY)
        swatches = [sum(1 for i in p if i["kind"] == "swatch") for p in pages]
        assert swatches == [4, 4, 2]

    def test_empty_palette(self):
        pages = layout_document([], "Empty", generated_on=DAY)
        assert len(pages) == 1
        assert not any(i["kind"] == "swatch" for i in pages[0])


class TestPdf:
    def test_writes_pdf(self, tmp_path: Path) -> None:
        path = tmp_path / "palette.pdf"
        pages = export_pdf(_many(6), "Blues", str(path), generated_on=DAY)
        assert pages == 2
        assert path.read_bytes().startswith(b"%PDF")
