# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Color value object.

A Color holds one RGB triplet for its whole lifetime. The hex, rgb and hsl
views are recomputed from that triplet on every access; all format work is
delegated to huekit.formats.

Example::

    orange = Color.create("#FFA500")
    orange.rgb                     # "rgb(255, 165, 0)"
    orange.contrast_to("#000000")  # ~10.63
    Color.create(255, 165, 0) == orange
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from typing import Any, Optional, Union

from huekit.schema.color_types import (
    NAMED_COLORS,
    ColorType,
    InvalidColorFormatError,
    RGBTriplet,
    is_valid_triplet,
)


@dataclass(frozen=True, slots=True)
class Color:
    """
    An immutable sRGB color.

    Attributes:
        values: (red, green, blue), each an integer in [0, 255]
    """
    values: RGBTriplet

    def __post_init__(self) -> None:
        """Validate and freeze the RGB values."""
        if not is_valid_triplet(self.values):
            raise ValueError(
                f"RGB values must be three integers in [0, 255], got {self.values!r}"
            )
        object.__setattr__(self, "values", tuple(int(v) for v in self.values))

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def create(
        cls,
        color_or_red: Union[Color, str, int, None] = None,
        green: Optional[int] = None,
        blue: Optional[int] = None,
    ) -> Color:
        """
        Create a Color from raw values, a color string or another Color.

        - Three ints: used as the RGB values.
        - Another Color: returned as is (a color is its value).
        - Nothing (None or ""): white.
        - A hex, rgb() or hsl() string: parsed.

        Raises:
            ValueError: If raw values are missing or out of range
            InvalidColorFormatError: If a string is not a recognized color
        """
        if isinstance(color_or_red, Integral) and not isinstance(color_or_red, bool):
            return cls((color_or_red, green, blue))
        if isinstance(color_or_red, Color):
            return color_or_red
        if not color_or_red:
            return Color.WHITE

        from huekit.formats.convert import parse_color
        from huekit.formats.grammar import is_valid_color

        if not is_valid_color(color_or_red):
            raise InvalidColorFormatError(
                color_or_red, "a hex, rgb() or hsl() color"
            )
        return cls(parse_color(color_or_red))

    @classmethod
    def named(cls, name: str) -> Color:
        """Look up a color by name ("black", "white", "red", "green", "blue")."""
        try:
            hex_color = NAMED_COLORS[name.lower()]
        except KeyError:
            raise KeyError(f"No color named '{name}'") from None
        return cls.create(hex_color)

    @staticmethod
    def is_color(obj: Any) -> bool:
        """True if obj is a Color instance."""
        return isinstance(obj, Color)

    # -------------------------------------------------------------------------
    # Views
    # -------------------------------------------------------------------------

    def _format(self, target: ColorType) -> str:
        from huekit.formats.convert import convert_raw_values_to
        return convert_raw_values_to(self.values, target)

    @property
    def hex(self) -> str:
        """Normalized hex string like "#FFA500"."""
        return self._format(ColorType.HEX)

    @property
    def rgb(self) -> str:
        """Normalized string like "rgb(255, 165, 0)"."""
        return self._format(ColorType.RGB)

    @property
    def hsl(self) -> str:
        """Normalized string like "hsl(39, 100%, 50%)". May be lossy."""
        return self._format(ColorType.HSL)

    @property
    def R(self) -> int:
        return self.values[0]

    @property
    def G(self) -> int:
        return self.values[1]

    @property
    def B(self) -> int:
        return self.values[2]

    @property
    def luminance(self) -> float:
        """W3C relative luminance in [0, 1]."""
        from huekit.formats.photometry import relative_luminance
        return float(relative_luminance(self.values))

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def set(self, color: Union[Color, str]) -> Color:
        """
        Return a Color for a new value. This instance is left untouched.

        Unlike create(), an empty value is rejected instead of meaning white.

        Raises:
            InvalidColorFormatError: If color is not a Color or valid string
        """
        if not isinstance(color, Color):
            from huekit.formats.grammar import is_valid_color
            if not is_valid_color(color):
                raise InvalidColorFormatError(
                    color, "a Color or a hex, rgb() or hsl() color"
                )
        return Color.create(color)

    def contrast_to(self, color: Union[Color, str]) -> float:
        """Contrast ratio against another Color or color string."""
        from huekit.formats.photometry import calculate_contrast_ratio
        other = color.hex if isinstance(color, Color) else color
        return calculate_contrast_ratio(self.hex, other)

    def equals(self, color: Union[Color, str]) -> bool:
        """
        Compare by value with another Color or a color string.

        Strings that are not valid colors compare unequal.
        """
        if isinstance(color, Color):
            return self.values == color.values

        from huekit.formats.convert import parse_color
        from huekit.formats.grammar import is_valid_color

        if not is_valid_color(color):
            return False
        return self.values == parse_color(color)

    def __str__(self) -> str:
        return self.hex

    def to_dict(self, include_formats: bool = False) -> dict:
        """
        Serialize to dictionary.

        Args:
            include_formats: If True, include hex, rgb and hsl strings
        """
        d: dict = {"values": list(self.values)}
        if include_formats:
            d["hex"] = self.hex
            d["rgb"] = self.rgb
            d["hsl"] = self.hsl
        return d

    @classmethod
    def from_dict(cls, data: dict) -> Color:
        """Deserialize from dictionary."""
        return cls(tuple(data["values"]))


Color.BLACK = Color((0, 0, 0))
Color.WHITE = Color((255, 255, 255))
Color.RED = Color((255, 0, 0))
Color.GREEN = Color((0, 255, 0))
Color.BLUE = Color((0, 0, 255))
