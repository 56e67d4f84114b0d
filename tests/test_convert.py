# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""Tests for parsing and converting between color encodings."""

import logging

import numpy as np
import pytest

from huekit.formats.convert import (
    convert,
    convert_raw_values_to,
    parse_color,
    parse_hex_color,
    parse_hsl_color,
    parse_rgb_color,
    triplet_to_hex,
    triplet_to_hsl,
    triplet_to_rgb,
)
from huekit.formats.normalize import normalize_hex_color
from huekit.schema import ColorType, InvalidColorFormatError

from color_samples import (
    BASIC_HEX_COLOR,
    INVALID_COLORS,
    INVALID_HEX_COLORS,
    INVALID_HSL_COLORS,
    INVALID_RGB_COLORS,
    VALID_HEX_COLORS,
)


class TestParseColor:

    @pytest.mark.parametrize("color, expected", [
        ("#FFF", (255, 255, 255)),
        ("#FFFFFF", (255, 255, 255)),
        ("#000000", (0, 0, 0)),
        ("#ffa500", (255, 165, 0)),
        (BASIC_HEX_COLOR, (255, 165, 0)),
        ("rgb(0, 0, 0)", (0, 0, 0)),
        ("rgb(1, 2, 100)", (1, 2, 100)),
        ("rgb(255, 165, 0)", (255, 165, 0)),
        ("RGB( 255,255 , 255 )", (255, 255, 255)),
        ("hsl(0, 0%, 0%)", (0, 0, 0)),
        ("hsl(0, 0%, 100%)", (255, 255, 255)),
        ("hsl(39, 100%, 50%)", (255, 166, 0)),
    ])
    def test_valid(self, color, expected):
        assert parse_color(color) == expected

    def test_returns_tuple(self):
        assert isinstance(parse_color("#FFF"), tuple)

    @pytest.mark.parametrize("color", INVALID_COLORS + ["", None])
    def test_invalid_raises(self, color):
        with pytest.raises(InvalidColorFormatError):
            parse_color(color)

    def test_missing_hash_is_rejected(self):
        """Only normalization is lenient about the #."""
        with pytest.raises(InvalidColorFormatError):
            parse_color("FFFFFF")


class TestParseHex:

    def test_values(self):
        assert parse_hex_color("#FFF") == (255, 255, 255)
        assert parse_hex_color("#000000") == (0, 0, 0)
        assert parse_hex_color(BASIC_HEX_COLOR) == (255, 165, 0)

    def test_shorthand_matches_full_form(self):
        assert parse_hex_color("#FFF") == parse_hex_color("#FFFFFF")

    def test_case_insensitive(self):
        assert parse_hex_color("#ffffff") == parse_hex_color("#FFFFFF")

    @pytest.mark.parametrize("color", VALID_HEX_COLORS)
    def test_idempotent_under_normalization(self, color):
        assert parse_hex_color(normalize_hex_color(color)) == parse_hex_color(color)

    @pytest.mark.parametrize("color", INVALID_HEX_COLORS)
    def test_invalid_raises(self, color):
        with pytest.raises(InvalidColorFormatError):
            parse_hex_color(color)


class TestParseRgbAndHsl:

    def test_rgb_values(self):
        assert parse_rgb_color("rgb(0, 0, 0)") == (0, 0, 0)
        assert parse_rgb_color("rgb(1, 2, 100)") == (1, 2, 100)
        assert parse_rgb_color(" rgb  (   12,    12,1   )   ") == (12, 12, 1)

    @pytest.mark.parametrize("color", INVALID_RGB_COLORS)
    def test_rgb_invalid_raises(self, color):
        with pytest.raises(InvalidColorFormatError):
            parse_rgb_color(color)

    def test_hsl_values(self):
        assert parse_hsl_color("hsl(120, 100%, 50%)") == (0, 255, 0)
        assert parse_hsl_color("HSL(360, 100%, 50%)") == (255, 0, 0)

    @pytest.mark.parametrize("color", INVALID_HSL_COLORS)
    def test_hsl_invalid_raises(self, color):
        with pytest.raises(InvalidColorFormatError):
            parse_hsl_color(color)


class TestFormatters:

    def test_to_hex_is_zero_padded_and_uppercase(self):
        assert triplet_to_hex((255, 165, 0)) == "#FFA500"
        assert triplet_to_hex((1, 2, 3)) == "#010203"
        assert triplet_to_hex((171, 205, 239)) == "#ABCDEF"

    def test_to_rgb(self):
        assert triplet_to_rgb((255, 165, 0)) == "rgb(255, 165, 0)"

    def test_to_hsl(self):
        assert triplet_to_hsl((255, 165, 0)) == "hsl(39, 100%, 50%)"
        assert triplet_to_hsl((0, 0, 0)) == "hsl(0, 0%, 0%)"

    def test_hex_roundtrip_is_exact(self):
        rng = np.random.RandomState(42)
        for values in rng.randint(0, 256, size=(200, 3)):
            rgb = tuple(int(v) for v in values)
            assert parse_color(triplet_to_hex(rgb)) == rgb

    def test_rgb_roundtrip_is_exact(self):
        rng = np.random.RandomState(7)
        for values in rng.randint(0, 256, size=(200, 3)):
            rgb = tuple(int(v) for v in values)
            assert parse_color(triplet_to_rgb(rgb)) == rgb

    def test_extremes_roundtrip(self):
        for rgb in [(0, 0, 0), (255, 255, 255), (0, 255, 0)]:
            assert parse_color(triplet_to_hex(rgb)) == rgb
            assert parse_color(triplet_to_rgb(rgb)) == rgb

    def test_accepts_lists(self):
        assert triplet_to_hex([255, 165, 0]) == "#FFA500"
        assert triplet_to_rgb([1, 2, 3]) == "rgb(1, 2, 3)"
        assert triplet_to_hsl([0, 0, 0]) == "hsl(0, 0%, 0%)"

    @pytest.mark.parametrize("formatter", [triplet_to_hex, triplet_to_rgb, triplet_to_hsl])
    @pytest.mark.parametrize("values", [
        (300, -5, 1), (256, 0, 0), (-1, 0, 0), (0.5, 0, 0), (True, 0, 0), (0, 0),
    ])
    def test_invalid_values_raise(self, formatter, values):
        with pytest.raises(InvalidColorFormatError, match="three integers"):
            formatter(values)


class TestConvert:

    def test_hex_to_hsl(self):
        assert convert("#F03402", ColorType.HSL) == "hsl(13, 98%, 47%)"

    def test_hsl_to_rgb(self):
        assert convert("hsl(39, 100%, 50%)", ColorType.RGB) == "rgb(255, 166, 0)"

    def test_rgb_to_hex(self):
        assert convert("rgb(255, 165, 0)", ColorType.HEX) == "#FFA500"

    def test_same_encoding_normalizes(self):
        assert convert("#fa5", ColorType.HEX) == "#FFAA55"
        assert convert("RGB(1,2,3)", ColorType.RGB) == "rgb(1, 2, 3)"

    def test_hsl_roundtrip_drift_is_bounded(self):
        assert convert(convert("#F03402", ColorType.HSL), ColorType.HSL) == "hsl(13, 98%, 47%)"

    @pytest.mark.parametrize("color", INVALID_COLORS + [""])
    def test_invalid_source_raises(self, color):
        with pytest.raises(InvalidColorFormatError):
            convert(color, ColorType.RGB)

    @pytest.mark.parametrize("target", [ColorType.INVALID, "hex", None])
    def test_invalid_target_raises(self, target):
        with pytest.raises(InvalidColorFormatError, match="ColorType"):
            convert("#FFF", target)

    def test_logs_conversion(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="huekit.formats.convert"):
            convert("#FFF", ColorType.RGB)
        assert "Converting" in caplog.text


class TestConvertRawValues:

    @pytest.mark.parametrize("target, expected", [
        (ColorType.HEX, "#FFA500"),
        (ColorType.RGB, "rgb(255, 165, 0)"),
        (ColorType.HSL, "hsl(39, 100%, 50%)"),
    ])
    def test_targets(self, target, expected):
        assert convert_raw_values_to((255, 165, 0), target) == expected

    def test_accepts_lists(self):
        assert convert_raw_values_to([1, 2, 3], ColorType.RGB) == "rgb(1, 2, 3)"

    def test_invalid_target_raises(self):
        with pytest.raises(InvalidColorFormatError):
            convert_raw_values_to((0, 0, 0), ColorType.INVALID)

    @pytest.mark.parametrize("values", [(256, 0, 0), (-1, 0, 0), (0, 0), (0.5, 0, 0), (True, 0, 0)])
    def test_invalid_values_raise(self, values):
        with pytest.raises(InvalidColorFormatError):
            convert_raw_values_to(values, ColorType.HEX)
