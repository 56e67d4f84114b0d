# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Parsing and conversion between color encodings.

Every conversion goes through an RGB triplet:

    parse(source) -> (r, g, b) -> format(target)

hex and rgb() round trips are exact. hsl() round trips may drift by one
unit per component because HSL is stored as integers.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from huekit.formats.colorspace import rgb_to_hsl
from huekit.formats.grammar import resolve_color_type
from huekit.formats.normalize import (
    normalize_hex_color,
    normalize_hsl_color,
    normalize_rgb_color,
)
from huekit.formats.split import split_hex_color, split_hsl_color, split_rgb_color
from huekit.schema.color_types import (
    TARGET_TYPES,
    ColorType,
    InvalidColorFormatError,
    RGBTriplet,
    as_triplet,
)

logger = logging.getLogger(__name__)

_ANY_COLOR_EXPECTED = "a hex, rgb() or hsl() color"
_TARGET_EXPECTED = "one of ColorType.HEX, ColorType.RGB, ColorType.HSL"


# =============================================================================
# Parsers
# =============================================================================


def parse_hex_color(hex_color: str) -> RGBTriplet:
    """
    Parse a hex color into base 10 RGB values.

    "#FFA500" -> (255, 165, 0)
    """
    r, g, b = (int(group, 16) for group in split_hex_color(hex_color))
    return (r, g, b)


def parse_rgb_color(rgb_color: str) -> RGBTriplet:
    """Parse an rgb() color into an RGB triplet."""
    return split_rgb_color(normalize_rgb_color(rgb_color))


def parse_hsl_color(hsl_color: str) -> RGBTriplet:
    """Parse an hsl() color into an RGB triplet (rounded to integers)."""
    return split_hsl_color(normalize_hsl_color(hsl_color))


_PARSERS: dict[ColorType, Callable[[str], RGBTriplet]] = {
    ColorType.HEX: parse_hex_color,
    ColorType.RGB: parse_rgb_color,
    ColorType.HSL: parse_hsl_color,
}


def parse_color(color: str) -> RGBTriplet:
    """
    Parse a color in any supported encoding.

    Raises:
        InvalidColorFormatError: If the encoding cannot be resolved
    """
    color_type = resolve_color_type(color)
    if color_type is ColorType.INVALID:
        raise InvalidColorFormatError(color, _ANY_COLOR_EXPECTED)
    logger.debug("Parsing %r as %s", color, color_type.value)
    return _PARSERS[color_type](color)


# =============================================================================
# Formatters
# =============================================================================


def triplet_to_hex(rgb: RGBTriplet) -> str:
    """(255, 165, 0) -> "#FFA500"."""
    rgb = as_triplet(rgb)
    return normalize_hex_color("".join(f"{channel:02x}" for channel in rgb))


def triplet_to_rgb(rgb: RGBTriplet) -> str:
    """(255, 165, 0) -> "rgb(255, 165, 0)"."""
    r, g, b = as_triplet(rgb)
    return f"rgb({r}, {g}, {b})"


def triplet_to_hsl(rgb: RGBTriplet) -> str:
    """(255, 165, 0) -> "hsl(39, 100%, 50%)"."""
    hue, saturation, lightness = rgb_to_hsl(as_triplet(rgb))
    return f"hsl({hue}, {saturation}%, {lightness}%)"


_FORMATTERS: dict[ColorType, Callable[[RGBTriplet], str]] = {
    ColorType.HEX: triplet_to_hex,
    ColorType.RGB: triplet_to_rgb,
    ColorType.HSL: triplet_to_hsl,
}


# =============================================================================
# Conversion
# =============================================================================


def convert_raw_values_to(values: Any, target: ColorType) -> str:
    """
    Format raw RGB values in the target encoding.

    Args:
        values: Three integers in [0, 255]
        target: ColorType.HEX, ColorType.RGB or ColorType.HSL

    Raises:
        InvalidColorFormatError: On an unsupported target or invalid values
    """
    if target not in TARGET_TYPES:
        raise InvalidColorFormatError(target, _TARGET_EXPECTED)
    return _FORMATTERS[target](values)


def convert(color: str, target: ColorType) -> str:
    """
    Convert a color string to another encoding.

    Example::

        convert("#F03402", ColorType.HSL)            -> "hsl(13, 98%, 47%)"
        convert("hsl(39, 100%, 50%)", ColorType.RGB) -> "rgb(255, 166, 0)"

    Raises:
        InvalidColorFormatError: On an invalid source or unsupported target
    """
    if target not in TARGET_TYPES:
        raise InvalidColorFormatError(target, _TARGET_EXPECTED)
    rgb = parse_color(color)
    logger.debug("Converting %r to %s via %s", color, target.value, rgb)
    return _FORMATTERS[target](rgb)
