# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Huekit -- Parsing, conversion and contrast math for CSS-style color strings.

Understands hex (`#RGB`, `#RRGGBB`), `rgb(r, g, b)` and `hsl(h, s%, l%)`,
converts between them through an RGB triplet, and computes W3C relative
luminance and contrast ratios.

Quick start::

    from huekit import ColorType, convert, calculate_contrast_ratio, Color

    convert("#F03402", ColorType.HSL)                # "hsl(13, 98%, 47%)"
    calculate_contrast_ratio("#FFFFFF", "#000000")   # 21.0
    Color.create("rgb(255, 165, 0)").hex             # "#FFA500"
"""

from __future__ import annotations

__version__ = "1.0.0"

from huekit.formats import (
    calculate_contrast_ratio,
    calculate_luminance_of,
    contrast_ratio,
    contrast_ratio_batch,
    convert,
    convert_raw_values_to,
    is_valid_color,
    is_valid_hex_color,
    is_valid_hsl_color,
    is_valid_rgb_color,
    normalize_hex_color,
    normalize_hsl_color,
    normalize_rgb_color,
    parse_color,
    parse_hex_color,
    parse_hsl_color,
    parse_rgb_color,
    relative_luminance,
    resolve_color_type,
    split_hex_color,
    split_hsl_color,
    split_rgb_color,
    triplet_to_hex,
    triplet_to_hsl,
    triplet_to_rgb,
)
from huekit.schema import (
    NAMED_COLORS,
    Color,
    ColorType,
    InvalidColorFormatError,
    RGBTriplet,
)

__all__ = [
    # Types
    "Color",
    "ColorType",
    "RGBTriplet",
    "NAMED_COLORS",
    "InvalidColorFormatError",
    # Validation
    "is_valid_color",
    "is_valid_hex_color",
    "is_valid_rgb_color",
    "is_valid_hsl_color",
    "resolve_color_type",
    # Normalization
    "normalize_hex_color",
    "normalize_rgb_color",
    "normalize_hsl_color",
    # Splitting
    "split_hex_color",
    "split_rgb_color",
    "split_hsl_color",
    # Parsing and conversion
    "parse_color",
    "parse_hex_color",
    "parse_rgb_color",
    "parse_hsl_color",
    "triplet_to_hex",
    "triplet_to_rgb",
    "triplet_to_hsl",
    "convert",
    "convert_raw_values_to",
    # Photometry
    "relative_luminance",
    "contrast_ratio",
    "contrast_ratio_batch",
    "calculate_luminance_of",
    "calculate_contrast_ratio",
    # Version
    "__version__",
]
