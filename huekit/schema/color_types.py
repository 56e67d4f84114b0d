# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Core color types shared by the format engine and the Color value object.

RGB triplets are the interchange format: every parser produces one and every
formatter consumes one. They are plain tuples, so they cannot be mutated
after parsing.
"""

from __future__ import annotations

from enum import Enum
from numbers import Integral
from types import MappingProxyType
from typing import Any

RGBTriplet = tuple[int, int, int]
HexGroups = tuple[str, str, str]


class ColorType(Enum):
    """Textual color encodings recognized by the engine."""

    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    INVALID = "invalid"


# Encodings a color can be converted to.
TARGET_TYPES = (ColorType.HEX, ColorType.RGB, ColorType.HSL)


class InvalidColorFormatError(TypeError, ValueError):
    """
    A string does not match the color grammar an operation expects.

    Also raised for conversion targets outside HEX/RGB/HSL and for raw
    triplets that are not three integers in [0, 255].

    Attributes:
        value: The offending raw value, unchanged
        expected: Human-readable description of the accepted shape
    """

    def __init__(self, value: Any, expected: str) -> None:
        self.value = value
        self.expected = expected
        super().__init__(
            f'Invalid color value "{value}". Expected {expected}.'
        )


NAMED_COLORS = MappingProxyType({
    "black": "#000000",
    "white": "#FFFFFF",
    "red": "#FF0000",
    "green": "#00FF00",
    "blue": "#0000FF",
})


def is_valid_triplet(values: Any) -> bool:
    """True if values holds exactly three integers in [0, 255] (bools excluded)."""
    try:
        if len(values) != 3:
            return False
    except TypeError:
        return False
    return all(
        isinstance(v, Integral) and not isinstance(v, bool) and 0 <= v <= 255
        for v in values
    )


def as_triplet(values: Any) -> RGBTriplet:
    """
    Return values as an RGB triplet tuple.

    Raises:
        InvalidColorFormatError: If values is not three ints in [0, 255]
    """
    if not is_valid_triplet(values):
        raise InvalidColorFormatError(
            values, "three integers in the [0, 255] range"
        )
    r, g, b = (int(v) for v in values)
    return (r, g, b)
