# -*- coding: utf-8 -*-
"""
Theme Service
=============

Applies a tenant white-label config to the page's style state.

Per apply():
- palettes for primary/secondary/accent -> :root CSS variables
- sanitized custom CSS (region removed when absent)
- body font, plus a Google Fonts link for non-system fonts
- favicon (explicit favicon, else uploaded logo)
- document title (platform name replaced by the store name)

Every step is best-effort: a missing field is skipped, a malformed color
only drops that color's palette and an invalid config is logged and ignored.
"""

import re
import logging
import threading
from typing import Any, Dict, List, Mapping, Optional, Union
from urllib.parse import quote

from pydantic import ValidationError

from comspace import config
from comspace.logging_config import get_tenant_logger

from .colors import ColorParseError, hex_to_rgb, rgb_to_hex
from .css_sanitizer import CSSSanitizer
from .models import BrandingConfig, WhiteLabelConfig
from .palette import Palette, generate_palette
from .style_sink import StyleSink

logger = logging.getLogger(__name__)

# Palette role -> CSS variable prefix
COLOR_ROLES = (
    ("primary_color", "wl-brand"),
    ("secondary_color", "wl-secondary"),
    ("accent_color", "wl-accent"),
)

_FONT_UNSAFE_CHARS = re.compile(r"[{};<>]")


def first_font_name(font_family: str) -> str:
    """First family in a CSS font-family list, unquoted."""
    return re.sub(r"['\"]", "", font_family.split(",")[0].strip())


def font_css_url(font_name: str) -> str:
    """Google Fonts stylesheet URL for a font name."""
    return config.FONT_CSS_URL.format(family=quote(font_name, safe=""))


class ThemeService:
    """
    Servico de aplicacao de tema White Label.

    One instance per page/session, holding the sink it writes into. Calls to
    apply() are serialized; each call replaces the variables and custom CSS
    regions wholesale, so the last call wins.

    Uso:
        sink = DocumentStyleSink(title="ComSpace")
        service = ThemeService(sink)
        service.apply({"name": "Acme", "branding": {"primaryColor": "#9333ea"}})
    """

    def __init__(
        self,
        sink: StyleSink,
        sanitizer: Optional[CSSSanitizer] = None,
        platform_name: Optional[str] = None,
        bundled_font: Optional[str] = None,
        system_fonts: Optional[List[str]] = None,
    ):
        self.sink = sink
        self.sanitizer = sanitizer or CSSSanitizer()
        self.platform_name = platform_name or config.PLATFORM_NAME
        self.bundled_font = bundled_font or config.BUNDLED_FONT
        self.system_fonts = [f.lower() for f in (system_fonts or config.SYSTEM_FONTS)]
        self._lock = threading.Lock()

    # =========================================================================
    # APPLY
    # =========================================================================

    def apply(self, white_label: Union[WhiteLabelConfig, Mapping[str, Any]]) -> List[str]:
        """
        Apply a tenant config to the sink.

        Args:
            white_label: WhiteLabelConfig or its JSON dict

        Returns:
            Aspects written: variables, custom_css, font, favicon, title
        """
        if not isinstance(white_label, WhiteLabelConfig):
            try:
                white_label = WhiteLabelConfig.model_validate(white_label)
            except ValidationError as e:
                logger.warning(
                    f"Invalid tenant config, keeping current theme: {e.error_count()} error(s)"
                )
                return []

        branding = white_label.branding
        if branding is None:
            logger.debug("No branding in tenant config, keeping default theme")
            return []

        tenant_id = white_label.tenant_id or "unknown"
        log = get_tenant_logger(__name__, tenant_id=tenant_id)
        applied = []

        with self._lock:
            self.sink.set_variables(self.build_variables_css(branding, log=log))
            applied.append("variables")

            if white_label.custom_css:
                self.sink.set_custom_css(
                    self.sanitizer.sanitize(white_label.custom_css, tenant_id=tenant_id)
                )
                applied.append("custom_css")
            else:
                self.sink.set_custom_css(None)

            if branding.font_family:
                self.apply_font(branding.font_family, log=log)
                applied.append("font")

            favicon = branding.favicon_url
            if favicon:
                self.sink.set_favicon(favicon)
                applied.append("favicon")

            if white_label.name and self.apply_title(white_label.name):
                applied.append("title")

            log.info(f"Theme applied for tenant {tenant_id}: {', '.join(applied)}")

        return applied

    # =========================================================================
    # VARIABLES
    # =========================================================================

    def build_palettes(self, branding: BrandingConfig, log=None) -> Dict[str, Palette]:
        """Palette per configured color role, keyed by CSS prefix."""
        log = log or logger
        palettes = {}
        for attr, prefix in COLOR_ROLES:
            color = getattr(branding, attr)
            if not color:
                continue
            try:
                palettes[prefix] = generate_palette(color)
            except ColorParseError as e:
                log.warning(f"Skipping {attr}: {e}")
        return palettes

    def build_variables_css(self, branding: BrandingConfig, log=None) -> str:
        """:root rule with palette shades and brand aliases."""
        palettes = self.build_palettes(branding, log=log)
        declarations = []

        for prefix, palette in palettes.items():
            for shade, hex_color in palette.items():
                declarations.append(f"--{prefix}-{shade}: {hex_color};")
            if prefix == "wl-brand":
                declarations.append(f"--brand: {rgb_to_hex(*hex_to_rgb(branding.primary_color))};")
                declarations.append(f"--brand-light: {palette['400']};")
                declarations.append(f"--brand-dark: {palette['700']};")

        if branding.font_family:
            declarations.append(f"--wl-font-family: {self.clean_font_family(branding.font_family)};")

        return ":root {\n  " + "\n  ".join(declarations) + "\n}"

    # =========================================================================
    # SIDE EFFECTS
    # =========================================================================

    @staticmethod
    def clean_font_family(font_family: str) -> str:
        return _FONT_UNSAFE_CHARS.sub("", font_family).strip()

    def is_web_font(self, font_family: str) -> bool:
        """False for system fonts and the font the platform already bundles."""
        name = first_font_name(font_family)
        if not name or name.lower() in self.system_fonts:
            return False
        return name != self.bundled_font

    def apply_font(self, font_family: str, log=None) -> Optional[str]:
        """
        Set the body font and point the web font link at Google Fonts.

        Returns:
            Font stylesheet URL, or None for system/bundled fonts
        """
        font_family = self.clean_font_family(font_family)
        self.sink.set_body_font(font_family)

        if not self.is_web_font(font_family):
            return None

        href = font_css_url(first_font_name(font_family))
        if self.sink.set_font_link(href):
            (log or logger).debug(f"Web font link set: {href}")
        return href

    def apply_title(self, store_name: str) -> bool:
        """Swap the platform name in the title for the store name."""
        current = self.sink.title
        if self.platform_name not in current:
            return False
        self.sink.title = current.replace(self.platform_name, store_name, 1)
        return True


__all__ = [
    "ThemeService",
    "first_font_name",
    "font_css_url",
]
