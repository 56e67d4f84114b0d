# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Color space math.

- sRGB ↔ HSL on integer triplets (hue in degrees, S and L in percent)
- sRGB → linear RGB (W3C relative luminance transfer curve)

References:
- HSL: https://www.w3.org/TR/css-color-3/#hsl-color
- Relative luminance: https://www.w3.org/TR/2008/REC-WCAG20-20081211/#relativeluminancedef

HSL values are integers, so RGB → HSL → RGB is not exact in general: each
component may drift by one unit after a full cycle.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

from huekit.schema.color_types import RGBTriplet


# WCAG 2.0 uses 0.03928 (not the IEC 61966-2-1 value of 0.04045).
SRGB_LINEAR_THRESHOLD = 0.03928


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 always going up (never to even)."""
    return int(math.floor(value + 0.5))


# =============================================================================
# sRGB → Linear RGB
# =============================================================================


def srgb_to_linear(srgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    - For values <= 0.03928: value/12.92
    - Otherwise: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= SRGB_LINEAR_THRESHOLD,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4),
    )


# =============================================================================
# HSL ↔ RGB
# =============================================================================


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> RGBTriplet:
    """
    Convert HSL to an RGB triplet.

    Args:
        hue: Degrees, 360 is the same as 0
        saturation: Percent [0, 100]
        lightness: Percent [0, 100]

    Returns:
        (r, g, b) with each component rounded to the nearest integer
    """
    sat = saturation / 100
    light = lightness / 100
    h = hue / 60

    chroma = (1 - abs(2 * light - 1)) * sat
    x = chroma * (1 - abs(h % 2 - 1))
    m = light - chroma / 2

    sextant = int(h) % 6
    if sextant == 0:
        rgb = (chroma, x, 0.0)
    elif sextant == 1:
        rgb = (x, chroma, 0.0)
    elif sextant == 2:
        rgb = (0.0, chroma, x)
    elif sextant == 3:
        rgb = (0.0, x, chroma)
    elif sextant == 4:
        rgb = (x, 0.0, chroma)
    else:
        rgb = (chroma, 0.0, x)

    r, g, b = (round_half_up((c + m) * 255) for c in rgb)
    return (r, g, b)


def rgb_to_hsl(rgb: RGBTriplet) -> tuple[int, int, int]:
    """
    Convert an RGB triplet to integer HSL.

    Returns:
        (hue, saturation, lightness): hue in degrees [0, 359], saturation
        and lightness in percent [0, 100]
    """
    r, g, b = (channel / 255 for channel in rgb)
    c_max = max(r, g, b)
    c_min = min(r, g, b)
    chroma = c_max - c_min

    if chroma == 0:
        hue = 0.0
    elif c_max == r:
        hue = math.fmod((g - b) / chroma, 6)
    elif c_max == g:
        hue = (b - r) / chroma + 2
    else:
        hue = (r - g) / chroma + 4

    # Round before wrapping so -52.5 goes to -53 (307), not 307.5 (308).
    degrees = round_half_up(hue * 60)
    if degrees < 0:
        degrees += 360
    # Rounding can push 359.5+ up to 360, which is 0.
    degrees %= 360

    lightness = (c_max + c_min) / 2
    if lightness == 0:
        saturation = 0.0
    elif lightness == 1:
        saturation = 1.0
    else:
        saturation = chroma / (1 - abs(2 * lightness - 1))

    return (
        degrees,
        round_half_up(saturation * 100),
        round_half_up(lightness * 100),
    )
