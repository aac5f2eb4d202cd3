# -*- coding: utf-8 -*-
"""
Color Space Conversions
=======================

Pure numeric conversions between hex, RGB and HSL.

- hex: "#rgb" or "#rrggbb" ("#" optional on input)
- RGB: ints in [0, 255]
- HSL: hue in degrees [0, 360), saturation and lightness in [0, 1]
"""

import math
import re
from typing import Tuple

RGB = Tuple[int, int, int]
HSL = Tuple[float, float, float]

_HEX_DIGITS = re.compile(r"^[0-9a-fA-F]{6}$")


class ColorParseError(ValueError):
    """Raised when a hex color string cannot be parsed."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid hex color: {value!r}")


def _round(value: float) -> int:
    """Round half up, like the browser's Math.round."""
    return int(math.floor(value + 0.5))


def _expand_hex(hex_color) -> str:
    if not isinstance(hex_color, str):
        raise ColorParseError(hex_color)

    cleaned = hex_color.strip()
    if cleaned.startswith("#"):
        cleaned = cleaned[1:]
    if len(cleaned) == 3:
        cleaned = "".join(c + c for c in cleaned)

    if not _HEX_DIGITS.match(cleaned):
        raise ColorParseError(hex_color)
    return cleaned


def is_valid_hex(hex_color) -> bool:
    """True if hex_color parses as #rgb or #rrggbb."""
    try:
        _expand_hex(hex_color)
    except ColorParseError:
        return False
    return True


def hex_to_rgb(hex_color: str) -> RGB:
    """
    Parse hex color to RGB.

    Raises:
        ColorParseError: wrong length or non-hex characters
    """
    num = int(_expand_hex(hex_color), 16)
    return (num >> 16) & 255, (num >> 8) & 255, num & 255


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB to lowercase #rrggbb, clamping each channel to [0, 255]."""
    return "#" + "".join(
        f"{_round(max(0, min(255, c))):02x}" for c in (r, g, b)
    )


def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    """Convert RGB to HSL. Grey (max == min) returns (0, 0, l)."""
    r, g, b = r / 255, g / 255, b / 255
    mx = max(r, g, b)
    mn = min(r, g, b)
    lightness = (mx + mn) / 2

    if mx == mn:
        return 0.0, 0.0, lightness

    d = mx - mn
    s = d / (2 - mx - mn) if lightness > 0.5 else d / (mx + mn)

    if mx == r:
        h = ((g - b) / d + (6 if g < b else 0)) / 6
    elif mx == g:
        h = ((b - r) / d + 2) / 6
    else:
        h = ((r - g) / d + 4) / 6

    return h * 360, s, lightness


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, lightness: float) -> RGB:
    """Convert HSL to RGB. Zero saturation short-circuits to grey."""
    h = h / 360

    if s == 0:
        v = _round(lightness * 255)
        return v, v, v

    if lightness < 0.5:
        q = lightness * (1 + s)
    else:
        q = lightness + s - lightness * s
    p = 2 * lightness - q

    return (
        _round(_hue_to_rgb(p, q, h + 1 / 3) * 255),
        _round(_hue_to_rgb(p, q, h) * 255),
        _round(_hue_to_rgb(p, q, h - 1 / 3) * 255),
    )


__all__ = [
    "ColorParseError",
    "is_valid_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
]
