"""Tests for the palette-builder command line."""

import json
from pathlib import Path

import pytest
from PIL import Image

from palette_builder.cli import main
from palette_builder.color import ColorValue
from palette_builder.export import export_json


def _palette_file(tmp_path: Path) -> str:
    path = tmp_path / "mono.json"
    export_json(
        [ColorValue("1", "#000000", "Ink"), ColorValue("2", "#FFFFFF", "Paper")],
        str(path),
        "Mono",
    )
    return str(path)


class TestConvert:
    def test_prints_formats(self, capsys):
        assert main(["convert", "#f00"]) == 0
        out = capsys.readouterr().out
        assert "HEX:  #FF0000" in out
        assert "RGB:  rgb(255, 0, 0)" in out
        assert "HSV:  hsv(0, 100%, 100%)" in out
        assert "Best text color: #000000" in out

    def test_invalid_color_exits(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["convert", "nope"])
        assert exc.value.code == 2
        assert "Invalid color" in capsys.readouterr().err


class TestContrast:
    def test_black_on_white(self, capsys):
        main(["contrast", "#000", "#fff"])
        out = capsys.readouterr().out
        assert "21.00:1" in out
        assert "Level: AAA" in out
        assert "✓ Passes" in out


class TestSimulate:
    def test_single_type(self, capsys):
        main(["simulate", "#FF0000", "--type", "protanopia"])
        out = capsys.readouterr().out
        assert "Protanopia" in out
        assert "#918E00" in out

    def test_all_types(self, capsys):
        main(["simulate", "#FF0000"])
        out = capsys.readouterr().out
        assert "Achromatomaly" in out
        assert "Tritanopia" in out


class TestAccessible:
    def test_writes_output(self, tmp_path: Path, capsys) -> None:
        out_path = tmp_path / "ramp.json"
        main(["accessible", "#45B7D1", "--count", "3", "--output", str(out_path)])
        data = json.loads(out_path.read_text())
        assert [c["name"] for c in data["colors"]] == [
            "Accessible 1",
            "Accessible 2",
            "Accessible 3",
        ]
        assert "Accessible 3" in capsys.readouterr().out

    def test_zero_count_rejected(self):
        with pytest.raises(SystemExit):
            main(["accessible", "#45B7D1", "--count", "0"])


class TestRandom:
    def test_count(self, capsys):
        main(["random", "-n", "3"])
        assert len(capsys.readouterr().out.split()) == 3


class TestReport:
    def test_report(self, tmp_path: Path, capsys) -> None:
        main(["report", _palette_file(tmp_path)])
        out = capsys.readouterr().out
        assert "Palette: Mono" in out
        assert "ACCESSIBILITY SCORE: 100%" in out


class TestExport:
    def test_everything_by_default(self, tmp_path: Path, capsys) -> None:
        out_dir = tmp_path / "out"
        main(["export", _palette_file(tmp_path), "--output", str(out_dir)])
        assert (out_dir / "mono_palette.csv").exists()
        assert (out_dir / "mono_palette.pdf").exists()
        assert (out_dir / "mono_palette.json").exists()
        assert "Accessibility score: 100%" in capsys.readouterr().out

    def test_csv_only(self, tmp_path: Path) -> None:
        main(["export", _palette_file(tmp_path), "--csv", "--name", "Renamed"])
        assert (tmp_path / "renamed_palette.csv").exists()
        assert not (tmp_path / "renamed_palette.pdf").exists()


class TestExtract:
    def test_extract_to_json(self, tmp_path: Path) -> None:
        image_path = tmp_path / "sunset.png"
        Image.new("RGB", (8, 8), (200, 100, 50)).save(image_path)
        main(["extract", str(image_path), "--count", "3"])
        data = json.loads((tmp_path / "sunset_palette.json").read_text())
        assert data["name"] == "sunset"
        assert [c["hex"] for c in data["colors"]] == ["#C86432"]
