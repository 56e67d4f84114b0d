# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Component extraction from color strings.

Splitters do not re-check component ranges. Run the validators (or a
normalizer) first when the input is untrusted.
"""

from __future__ import annotations

import re

from huekit.formats.colorspace import hsl_to_rgb
from huekit.formats.grammar import HSL_EXPECTED, RGB_EXPECTED
from huekit.formats.normalize import normalize_hex_color
from huekit.schema.color_types import HexGroups, InvalidColorFormatError, RGBTriplet


_DIGITS_RE = re.compile(r"[0-9]+")


def _three_numbers(color: str, expected: str) -> tuple[int, int, int]:
    groups = _DIGITS_RE.findall(color) if isinstance(color, str) else []
    if len(groups) != 3:
        raise InvalidColorFormatError(color, expected)
    first, second, third = (int(group) for group in groups)
    return (first, second, third)


def split_hex_color(hex_color: str) -> HexGroups:
    """
    Split a hex color into its three uppercase digit pairs.

    "#ffa500" -> ("FF", "A5", "00")

    Shorthand and #-less input is normalized first.
    """
    normalized = normalize_hex_color(hex_color)
    return (normalized[1:3], normalized[3:5], normalized[5:7])


def split_rgb_color(rgb_color: str) -> RGBTriplet:
    """
    Extract the three components of an rgb() color.

    Only the digit groups matter, so "rgb(0, 1, 3" still yields (0, 1, 3).

    Raises:
        InvalidColorFormatError: Unless exactly three numbers are present
    """
    return _three_numbers(rgb_color, RGB_EXPECTED)


def split_hsl_color(hsl_color: str) -> RGBTriplet:
    """Extract hue, saturation and lightness and convert them to RGB."""
    hue, saturation, lightness = _three_numbers(hsl_color, HSL_EXPECTED)
    return hsl_to_rgb(hue, saturation, lightness)
