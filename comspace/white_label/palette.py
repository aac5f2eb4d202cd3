# -*- coding: utf-8 -*-
"""
Palette Generator
=================

Derives an 11-shade palette (50-950) from a single brand color.

Hue and saturation come from the base color; lightness comes from a fixed
Tailwind-like table, so shade 500 is normalized to lightness 0.50 rather than
echoing the input.
"""

from typing import Dict

from .colors import hex_to_rgb, hsl_to_rgb, rgb_to_hex, rgb_to_hsl

Palette = Dict[str, str]

# Target lightness for each shade
SHADE_LIGHTNESS: Dict[str, float] = {
    "50": 0.97,
    "100": 0.94,
    "200": 0.87,
    "300": 0.77,
    "400": 0.63,
    "500": 0.50,
    "600": 0.42,
    "700": 0.35,
    "800": 0.28,
    "900": 0.22,
    "950": 0.14,
}

SHADES = tuple(SHADE_LIGHTNESS)

# Desaturation applied to near-white and near-black shades
EXTREME_SATURATION_FACTOR = 0.6


def generate_palette(base_hex: str) -> Palette:
    """
    Generate the full shade palette from a base hex color.

    Raises:
        ColorParseError: base_hex is not a valid hex color
    """
    h, s, _ = rgb_to_hsl(*hex_to_rgb(base_hex))

    palette: Palette = {}
    for shade, lightness in SHADE_LIGHTNESS.items():
        if lightness > 0.9 or lightness < 0.2:
            sat = s * EXTREME_SATURATION_FACTOR
        else:
            sat = s
        palette[shade] = rgb_to_hex(*hsl_to_rgb(h, sat, lightness))

    return palette


def palette_to_css(palette: Palette, prefix: str = "brand") -> str:
    """
    CSS custom properties for a palette, one per line.

    e.g. --brand-500: #a855f7;
    """
    return "\n".join(
        f"--{prefix}-{shade}: {hex_color};" for shade, hex_color in palette.items()
    )


__all__ = [
    "Palette",
    "SHADES",
    "SHADE_LIGHTNESS",
    "generate_palette",
    "palette_to_css",
]
