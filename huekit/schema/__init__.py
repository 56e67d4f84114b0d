# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Color types and the immutable Color value object.

Triplets are plain tuples and Color is a frozen dataclass, so nothing
in this package is mutated after it is created.
"""

from huekit.schema.color import Color
from huekit.schema.color_types import (
    NAMED_COLORS,
    TARGET_TYPES,
    ColorType,
    HexGroups,
    InvalidColorFormatError,
    RGBTriplet,
    as_triplet,
    is_valid_triplet,
)

__all__ = [
    # Types
    "ColorType",
    "RGBTriplet",
    "HexGroups",
    "TARGET_TYPES",
    "NAMED_COLORS",
    # Errors
    "InvalidColorFormatError",
    # Triplet helpers
    "as_triplet",
    "is_valid_triplet",
    # Value object
    "Color",
]
