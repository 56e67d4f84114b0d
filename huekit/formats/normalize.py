# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Canonical forms for each color encoding.

- hex: `#RRGGBB`, uppercase
- rgb: `rgb(r, g, b)`, lowercase, one space after each comma
- hsl: `hsl(h, s%, l%)`, same spacing

Every normalizer validates first and raises InvalidColorFormatError
otherwise. Numbers are never clamped or coerced.
"""

from __future__ import annotations

from huekit.formats.grammar import (
    HEX_EXPECTED,
    HSL_EXPECTED,
    RGB_EXPECTED,
    compact,
    is_valid_hex_color,
    is_valid_hsl_color,
    is_valid_rgb_color,
)
from huekit.schema.color_types import InvalidColorFormatError


def normalize_hex_color(hex_color: str) -> str:
    """
    Expand and uppercase a hex color.

    A missing leading `#` is added before validation. This is the only
    lenient spot in the engine: is_valid_hex_color still rejects such input.

    Examples::

        "#fff"    -> "#FFFFFF"
        "#fa5"    -> "#FFAA55"
        "123"     -> "#112233"
        "#ffa500" -> "#FFA500"

    Raises:
        InvalidColorFormatError: If the (#-completed) value is not valid hex
    """
    candidate = hex_color
    if isinstance(candidate, str) and not candidate.startswith("#"):
        candidate = "#" + candidate

    if not is_valid_hex_color(candidate):
        raise InvalidColorFormatError(hex_color, HEX_EXPECTED)

    if len(candidate) == 4:
        candidate = "#" + "".join(digit * 2 for digit in candidate[1:])
    return candidate.upper()


def _normalize_functional(color: str) -> str:
    return compact(color).replace(",", ", ")


def normalize_rgb_color(rgb_color: str) -> str:
    """
    Normalize spacing and case of an rgb() color.

    "   RGB  (  1,    2,3  )  " -> "rgb(1, 2, 3)"
    """
    if not is_valid_rgb_color(rgb_color):
        raise InvalidColorFormatError(rgb_color, RGB_EXPECTED)
    return _normalize_functional(rgb_color)


def normalize_hsl_color(hsl_color: str) -> str:
    """Normalize spacing and case of an hsl() color to `hsl(h, s%, l%)`."""
    if not is_valid_hsl_color(hsl_color):
        raise InvalidColorFormatError(hsl_color, HSL_EXPECTED)
    return _normalize_functional(hsl_color)
