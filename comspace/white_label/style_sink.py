# -*- coding: utf-8 -*-
"""
Style Sinks
===========

Targets the theme service writes into. A sink owns the page's live style
state: the brand variables region, the custom CSS region, the web font link,
the favicon, the body font and the document title.

DocumentStyleSink keeps that state in memory, keyed by stable element ids,
and renders it as a <head> fragment for server-side rendering.
"""

import re
import html
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional

BRAND_STYLE_ID = "wl-dynamic-brand"
CUSTOM_STYLE_ID = "wl-custom-css"
FONT_LINK_ID = "wl-google-font"
FAVICON_KEY = "icon"

_STYLE_CLOSE = re.compile(r"</(style)", re.IGNORECASE)


class StyleSink(ABC):
    """Page style state written by ThemeService."""

    @abstractmethod
    def set_variables(self, css: str) -> None:
        """Replace the brand variables region."""

    @abstractmethod
    def set_custom_css(self, css: Optional[str]) -> None:
        """Replace the custom CSS region, removing it when css is None."""

    @abstractmethod
    def set_font_link(self, href: str) -> bool:
        """Point the web font link at href. Returns False if already there."""

    @abstractmethod
    def set_body_font(self, font_family: str) -> None:
        """Set the document-wide font."""

    @abstractmethod
    def set_favicon(self, url: str) -> None:
        """Update or create the <link rel="icon"> element."""

    @property
    @abstractmethod
    def title(self) -> str:
        """Current document title."""

    @title.setter
    @abstractmethod
    def title(self, value: str) -> None:
        pass


@dataclass
class HeadElement:
    """Element managed in the document head"""
    tag: str
    attrs: Dict[str, str] = field(default_factory=dict)
    text: str = ""

    def render(self) -> str:
        attrs = "".join(
            f' {name}="{html.escape(value, quote=True)}"'
            for name, value in self.attrs.items()
        )
        if self.tag == "link":
            return f"<link{attrs}>"
        # Keep tenant text from closing the <style> element early
        text = _STYLE_CLOSE.sub(r"<\\/\1", self.text)
        return f"<{self.tag}{attrs}>{text}</{self.tag}>"


class DocumentStyleSink(StyleSink):
    """
    In-memory document head.

    Elements are created lazily on first write and kept in insertion order,
    like nodes appended to document.head.

    Uso:
        sink = DocumentStyleSink(title="ComSpace | Shop")
        ThemeService(sink).apply(config)
        html_head = sink.render_head()
    """

    def __init__(self, title: str = ""):
        self._title = title
        self.body_font: Optional[str] = None
        self._head: Dict[str, HeadElement] = {}

    # =========================================================================
    # ELEMENTS
    # =========================================================================

    def get_element(self, key: str) -> Optional[HeadElement]:
        return self._head.get(key)

    @property
    def elements(self) -> List[HeadElement]:
        return list(self._head.values())

    def _get_or_create(self, key: str, tag: str, attrs: Dict[str, str]) -> HeadElement:
        element = self._head.get(key)
        if element is None:
            element = HeadElement(tag=tag, attrs=dict(attrs))
            self._head[key] = element
        return element

    # =========================================================================
    # STYLE SINK
    # =========================================================================

    def set_variables(self, css: str) -> None:
        element = self._get_or_create(BRAND_STYLE_ID, "style", {"id": BRAND_STYLE_ID})
        element.text = css

    def set_custom_css(self, css: Optional[str]) -> None:
        if not css:
            self._head.pop(CUSTOM_STYLE_ID, None)
            return
        element = self._get_or_create(CUSTOM_STYLE_ID, "style", {"id": CUSTOM_STYLE_ID})
        element.text = css

    def set_font_link(self, href: str) -> bool:
        element = self._head.get(FONT_LINK_ID)
        if element is not None and element.attrs.get("href") == href:
            return False
        element = self._get_or_create(
            FONT_LINK_ID, "link", {"id": FONT_LINK_ID, "rel": "stylesheet"}
        )
        element.attrs["href"] = href
        return True

    def set_body_font(self, font_family: str) -> None:
        self.body_font = font_family

    def set_favicon(self, url: str) -> None:
        element = self._get_or_create(FAVICON_KEY, "link", {"rel": "icon"})
        element.attrs["href"] = url

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str) -> None:
        self._title = value

    # =========================================================================
    # RENDER
    # =========================================================================

    @property
    def variables(self) -> Optional[str]:
        element = self._head.get(BRAND_STYLE_ID)
        return element.text if element else None

    @property
    def custom_css(self) -> Optional[str]:
        element = self._head.get(CUSTOM_STYLE_ID)
        return element.text if element else None

    @property
    def font_href(self) -> Optional[str]:
        element = self._head.get(FONT_LINK_ID)
        return element.attrs.get("href") if element else None

    @property
    def favicon(self) -> Optional[str]:
        element = self._head.get(FAVICON_KEY)
        return element.attrs.get("href") if element else None

    def render_head(self) -> str:
        """Render title, managed elements and the body font rule."""
        parts = []
        if self._title:
            parts.append(f"<title>{html.escape(self._title)}</title>")
        parts.extend(element.render() for element in self._head.values())
        if self.body_font:
            body = HeadElement(
                tag="style",
                attrs={"id": "wl-body-font"},
                text=f"body {{ font-family: {self.body_font}; }}",
            )
            parts.append(body.render())
        return "\n".join(parts)


__all__ = [
    "StyleSink",
    "DocumentStyleSink",
    "HeadElement",
    "BRAND_STYLE_ID",
    "CUSTOM_STYLE_ID",
    "FONT_LINK_ID",
]
