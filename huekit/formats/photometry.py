# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Relative luminance and contrast ratio, per WCAG 2.0.

- Relative luminance: https://www.w3.org/TR/2008/REC-WCAG20-20081211/#relativeluminancedef
- Contrast ratio: https://www.w3.org/TR/2008/REC-WCAG20-20081211/#contrast-ratiodef

The array functions accept anything of shape (..., 3) holding 0-255 sRGB
components, so a single triplet and a whole batch go through the same code.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import ArrayLike, NDArray

from huekit.formats.colorspace import srgb_to_linear
from huekit.formats.convert import parse_color

logger = logging.getLogger(__name__)

# Rec. 709 coefficients for R, G, B
LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)

# Flare term added to both luminances before dividing.
CONTRAST_OFFSET = 0.05


def relative_luminance(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Relative luminance of sRGB triplets.

    Args:
        rgb: Array of shape (..., 3) with components in [0, 255]

    Returns:
        Array of shape (...,) with luminance in [0, 1]
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    if rgb.shape[-1:] != (3,):
        raise ValueError(f"Expected RGB values of shape (..., 3), got {rgb.shape}")
    linear = srgb_to_linear(rgb / 255.0)
    return np.sum(linear * LUMINANCE_WEIGHTS, axis=-1)


def contrast_ratio(luminance1: float, luminance2: float) -> float:
    """
    Contrast ratio of two luminances, from 1 (same) to 21 (black on white).

    Argument order does not matter.
    """
    lighter = max(luminance1, luminance2)
    darker = min(luminance1, luminance2)
    return (lighter + CONTRAST_OFFSET) / (darker + CONTRAST_OFFSET)


def contrast_ratio_batch(rgb1: ArrayLike, rgb2: ArrayLike) -> NDArray[np.float64]:
    """
    Vectorized contrast ratio for two arrays of sRGB triplets.

    Args:
        rgb1: Array of shape (N, 3) with components in [0, 255]
        rgb2: Array broadcastable against rgb1

    Returns:
        Array of shape (N,) with contrast ratios
    """
    lum1 = relative_luminance(rgb1)
    lum2 = relative_luminance(rgb2)
    lighter = np.maximum(lum1, lum2)
    darker = np.minimum(lum1, lum2)
    return (lighter + CONTRAST_OFFSET) / (darker + CONTRAST_OFFSET)


def calculate_luminance_of(color: str) -> float:
    """
    Relative luminance of a hex, rgb() or hsl() color.

    "#FFFFFF" -> 1.0, "#000000" -> 0.0, "#FFA500" -> ~0.4817

    Raises:
        InvalidColorFormatError: If color cannot be parsed
    """
    return float(relative_luminance(parse_color(color)))


def calculate_contrast_ratio(color1: str, color2: str) -> float:
    """
    Contrast ratio of two colors in any supported encoding.

    Raises:
        InvalidColorFormatError: If either color cannot be parsed
    """
    ratio = contrast_ratio(
        calculate_luminance_of(color1),
        calculate_luminance_of(color2),
    )
    logger.debug("Contrast ratio of %r and %r: %.4f", color1, color2, ratio)
    return ratio
