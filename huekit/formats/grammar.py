# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Format grammars for hex, rgb() and hsl() color strings.

The three grammars need different prefixes (`#`, `rgb(`, `hsl(`), so at most
one of them can match a given string.

Hex is strict: no surrounding whitespace and a mandatory `#`. The functional
notations are case-insensitive and tolerate any whitespace, which is removed
before matching.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from huekit.schema.color_types import ColorType


HEX_PATTERN = re.compile(r"#(?:[0-9A-Fa-f]{6}|[0-9A-Fa-f]{3})")
RGB_PATTERN = re.compile(r"rgb\(([0-9]{1,3}),([0-9]{1,3}),([0-9]{1,3})\)")
HSL_PATTERN = re.compile(r"hsl\(([0-9]{1,3}),([0-9]{1,3})%,([0-9]{1,3})%\)")

# Human-readable shapes, used in error messages.
HEX_EXPECTED = "#RGB or #RRGGBB"
RGB_EXPECTED = "rgb(R, G, B) with R, G, B in [0, 255]"
HSL_EXPECTED = "hsl(H, S%, L%) with H in [0, 360] and S, L in [0, 100]"

# ASCII whitespace only; \s would also drop control and Unicode separators.
_WHITESPACE_RE = re.compile(r"[ \t\n\r\f\v]+")

# Upper bound of each captured component, in capture order.
_RGB_LIMITS = (255, 255, 255)
_HSL_LIMITS = (360, 100, 100)


def compact(color: str) -> str:
    """Lowercase a functional color string and drop all whitespace."""
    return _WHITESPACE_RE.sub("", color.lower())


def _is_decimal(digits: str, limit: int) -> bool:
    # "0" is fine, "00" or "07" are not.
    if len(digits) > 1 and digits.startswith("0"):
        return False
    return int(digits) <= limit


def _matches_functional(
    color: Any,
    pattern: re.Pattern[str],
    limits: tuple[int, int, int],
) -> bool:
    if not color or not isinstance(color, str):
        return False
    match = pattern.fullmatch(compact(color))
    if match is None:
        return False
    return all(
        _is_decimal(digits, limit)
        for digits, limit in zip(match.groups(), limits)
    )


def is_valid_hex_color(color: Optional[str]) -> bool:
    """
    Check whether color is a `#RGB` or `#RRGGBB` hex string.

    Examples::

        "#FFA500" -> True
        "#fff"    -> True
        "FFA500"  -> False  (the # is required here)
        "#GGG"    -> False
        ""        -> False
    """
    if not color or not isinstance(color, str):
        return False
    return HEX_PATTERN.fullmatch(color) is not None


def is_valid_rgb_color(color: Optional[str]) -> bool:
    """Check whether color is an `rgb(r, g, b)` string with components in [0, 255]."""
    return _matches_functional(color, RGB_PATTERN, _RGB_LIMITS)


def is_valid_hsl_color(color: Optional[str]) -> bool:
    """Check whether color is an `hsl(h, s%, l%)` string within range."""
    return _matches_functional(color, HSL_PATTERN, _HSL_LIMITS)


def is_valid_color(color: Optional[str]) -> bool:
    """Check whether color is valid in any supported encoding."""
    return (
        is_valid_hex_color(color)
        or is_valid_rgb_color(color)
        or is_valid_hsl_color(color)
    )


def resolve_color_type(color: Optional[str]) -> ColorType:
    """
    Classify color as HEX, RGB or HSL.

    Returns ColorType.INVALID if no grammar matches. Never raises.
    """
    if is_valid_hex_color(color):
        return ColorType.HEX
    if is_valid_rgb_color(color):
        return ColorType.RGB
    if is_valid_hsl_color(color):
        return ColorType.HSL
    return ColorType.INVALID
