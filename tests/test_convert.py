"""Tests for palette_builder.color and palette_builder.convert."""

import random
import re

import pytest

from palette_builder.color import InvalidColor, create_color_value, is_valid_hex, parse_hex
from palette_builder.convert import (
    NEUTRAL_FORMATS,
    convert_color,
    hex_to_cmyk,
    hex_to_hsl,
    hex_to_hsv,
    hex_to_lab,
    hex_to_rgb,
    hsv_to_hex,
    hsv_to_rgb,
    random_color,
    rgb_to_hex,
    round_half_up,
)


class TestParseHex:
    def test_six_digits_with_hash(self):
        assert parse_hex("#ff6b6b") == "#FF6B6B"

    def test_six_digits_without_hash(self):
        assert parse_hex("4ecdc4") == "#4ECDC4"

    def test_short_form_expands(self):
        assert parse_hex("#abc") == "#AABBCC"
        assert parse_hex("fff") == "#FFFFFF"

    def test_surrounding_whitespace(self):
        assert parse_hex("  #000000 ") == "#000000"

    @pytest.mark.parametrize(
        "value", ["", "#", "#ff", "#ffff", "#fffffff", "#ffffffff", "red", "#gg0000", None, 255]
    )
    def test_invalid_rejected(self, value):
        with pytest.raises(InvalidColor):
            parse_hex(value)

    def test_invalid_color_is_value_error(self):
        assert issubclass(InvalidColor, ValueError)

    def test_is_valid_hex(self):
        assert is_valid_hex("#123456")
        assert not is_valid_hex("#12345")


class TestCreateColorValue:
    def test_canonical_hex_and_name(self):
        color = create_color_value("#abc", name="Pale", color_id="x")
        assert color.hex == "#AABBCC"
        assert color.name == "Pale"
        assert color.id == "x"

    def test_fresh_ids(self):
        a = create_color_value("#000000")
        b = create_color_value("#000000")
        assert a.id != b.id

    def test_invalid_rejected(self):
        with pytest.raises(InvalidColor):
            create_color_value("#12")


class TestChannels:
    def test_rgb(self):
        assert hex_to_rgb("#2563eb") == (37, 99, 235)

    def test_invalid_rgb_is_black(self):
        assert hex_to_rgb("invalid") == (0, 0, 0)

    def test_rgb_to_hex_clamps(self):
        assert rgb_to_hex(-10, 300, 127.5) == "#00FF80"

    def test_hsl_of_red(self):
        h, s, l = hex_to_hsl("#FF0000")
        assert h == pytest.approx(0)
        assert s == pytest.approx(100)
        assert l == pytest.approx(50)

    def test_hsv_of_grey(self):
        h, s, v = hex_to_hsv("#808080")
        assert h == 0
        assert s == 0
        assert v == pytest.approx(128 / 255 * 100)

    def test_invalid_fallbacks(self):
        assert hex_to_hsv("nope") == (0, 0, 0)
        assert hex_to_hsl("nope") == (0, 0, 0)
        assert hex_to_cmyk("nope") == (0.0, 0.0, 0.0, 1.0)
        assert hex_to_lab("nope") == pytest.approx((0, 0, 0))

    def test_cmyk_of_cyan(self):
        assert hex_to_cmyk("#00FFFF") == pytest.approx((1, 0, 0, 0))

    def test_lab_of_red(self):
        l, a, b = hex_to_lab("#FF0000")
        assert l == pytest.approx(53.24, abs=0.1)
        assert a == pytest.approx(80.09, abs=0.1)
        assert b == pytest.approx(67.20, abs=0.1)


class TestHsvToHex:
    def test_primaries(self):
        assert hsv_to_hex(0, 100, 100) == "#FF0000"
        assert hsv_to_hex(120, 100, 100) == "#00FF00"
        assert hsv_to_hex(240, 100, 100) == "#0000FF"

    def test_hue_wraps(self):
        assert hsv_to_hex(360, 100, 100) == "#FF0000"
        assert hsv_to_hex(-120, 100, 100) == "#0000FF"
        assert hsv_to_hex(480, 100, 100) == "#00FF00"

    def test_saturation_and_value_clamped(self):
        assert hsv_to_hex(0, 150, 120) == "#FF0000"
        assert hsv_to_hex(0, -5, -5) == "#000000"

    def test_non_finite_is_black(self):
        assert hsv_to_rgb(float("nan"), 50, 50) == (0, 0, 0)

    @pytest.mark.parametrize(
        "hex_color", ["#FF6B6B", "#4ECDC4", "#45B7D1", "#96CEB4", "#FFEAA7", "#010203"]
    )
    def test_round_trip_within_one(self, hex_color):
        back = hex_to_rgb(hsv_to_hex(*hex_to_hsv(hex_color)))
        for original, recovered in zip(hex_to_rgb(hex_color), back):
            assert abs(original - recovered) <= 1


class TestRandomColor:
    def test_format(self):
        assert re.fullmatch(r"#[0-9A-F]{6}", random_color())

    def test_seeded_generator(self):
        assert random_color(random.Random(7)) == random_color(random.Random(7))


class TestFormats:
    def test_red(self):
        formats = convert_color("#ff0000")
        assert formats.hex == "#FF0000"
        assert formats.rgb == "rgb(255, 0, 0)"
        assert formats.hsl == "hsl(0, 100%, 50%)"
        assert formats.cmyk == "cmyk(0%, 100%, 100%, 0%)"
        assert formats.lab == "lab(53, 80, 67)"

    def test_black(self):
        formats = convert_color("#000")
        assert formats.cmyk == "cmyk(0%, 0%, 0%, 100%)"
        assert formats.lab == "lab(0, 0, 0)"
        assert formats.hsl == "hsl(0, 0%, 0%)"

    def test_white(self):
        formats = convert_color("#FFFFFF")
        assert formats.rgb == "rgb(255, 255, 255)"
        assert formats.hsl == "hsl(0, 0%, 100%)"
        assert formats.cmyk == "cmyk(0%, 0%, 0%, 0%)"
        assert formats.lab == "lab(100, 0, 0)"

    def test_invalid_gives_neutral(self):
        assert convert_color("#zzzzzz") == NEUTRAL_FORMATS

    def test_round_half_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(-0.4) == 0
