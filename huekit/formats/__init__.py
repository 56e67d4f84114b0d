# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Color format engine.

Validation → normalization → splitting turns a color string into an RGB
triplet; conversion and photometry work from that triplet.
All operations are pure functions.
"""

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
from huekit.formats.grammar import (
    is_valid_color,
    is_valid_hex_color,
    is_valid_hsl_color,
    is_valid_rgb_color,
    resolve_color_type,
)
from huekit.formats.normalize import (
    normalize_hex_color,
    normalize_hsl_color,
    normalize_rgb_color,
)
from huekit.formats.photometry import (
    calculate_contrast_ratio,
    calculate_luminance_of,
    contrast_ratio,
    contrast_ratio_batch,
    relative_luminance,
)
from huekit.formats.split import split_hex_color, split_hsl_color, split_rgb_color

__all__ = [
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
]
