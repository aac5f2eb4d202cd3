# -*- coding: utf-8 -*-
"""
White Label - Temas por Tenant
==============================

Modulos:
- colors: conversoes hex/RGB/HSL
- palette: paleta de 11 tons a partir de uma cor
- css_sanitizer: filtragem de CSS customizado
- theme_service: aplicacao do tema na pagina
- config_fetcher: carga da configuracao do tenant
"""

from .colors import (
    ColorParseError,
    is_valid_hex,
    hex_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
    hsl_to_rgb,
)
from .palette import SHADES, SHADE_LIGHTNESS, generate_palette, palette_to_css
from .css_sanitizer import CSSSanitizer, sanitize_css
from .models import BrandingConfig, WhiteLabelConfig
from .style_sink import StyleSink, DocumentStyleSink
from .theme_service import ThemeService
from .config_fetcher import TenantConfigFetcher

__all__ = [
    "ColorParseError",
    "is_valid_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "SHADES",
    "SHADE_LIGHTNESS",
    "generate_palette",
    "palette_to_css",
    "CSSSanitizer",
    "sanitize_css",
    "BrandingConfig",
    "WhiteLabelConfig",
    "StyleSink",
    "DocumentStyleSink",
    "ThemeService",
    "TenantConfigFetcher",
]
