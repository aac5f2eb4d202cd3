# -*- coding: utf-8 -*-
"""
Theme Routes - White Label API
==============================

API para derivar paletas, sanitizar CSS e renderizar o tema de um tenant.

Endpoints:
- GET  /api/theme/palette?color=#9333ea - Paleta de 11 tons
- POST /api/theme/sanitize - Sanitizar CSS customizado
- POST /api/theme/render - Renderizar o <head> do tema
- GET  /api/theme/suspicious - CSS suspeito para revisao manual
"""

import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from comspace import config
from comspace.white_label.colors import ColorParseError
from comspace.white_label.css_sanitizer import CSSSanitizer, get_suspicious_css
from comspace.white_label.models import WhiteLabelConfig
from comspace.white_label.palette import generate_palette, palette_to_css
from comspace.white_label.style_sink import DocumentStyleSink
from comspace.white_label.theme_service import ThemeService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/theme", tags=["Theme"])

_sanitizer = CSSSanitizer()


class PaletteResponse(BaseModel):
    base: str
    palette: Dict[str, str]
    css: str


class SanitizeRequest(BaseModel):
    css: Optional[str] = None
    tenant_id: Optional[str] = None


class SanitizeResponse(BaseModel):
    css: str
    changed: bool
    rules: List[str] = []
    warnings: List[str] = []


class RenderRequest(BaseModel):
    white_label: WhiteLabelConfig
    title: Optional[str] = None


class RenderResponse(BaseModel):
    applied: List[str]
    variables: Optional[str] = None
    custom_css: Optional[str] = None
    font_href: Optional[str] = None
    body_font: Optional[str] = None
    favicon: Optional[str] = None
    title: str
    head: str


@router.get("/palette", response_model=PaletteResponse)
async def get_palette(
    color: str = Query(..., description="Base hex color, e.g. #9333ea"),
    prefix: str = Query("brand", pattern=r"^[a-zA-Z][a-zA-Z0-9-]*$"),
):
    """Derive the 50-950 palette for a base color."""
    try:
        palette = generate_palette(color)
    except ColorParseError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return PaletteResponse(base=color, palette=palette, css=palette_to_css(palette, prefix))


@router.post("/sanitize", response_model=SanitizeResponse)
async def sanitize_custom_css(request: SanitizeRequest):
    """Sanitize tenant custom CSS and report what was rewritten."""
    original = request.css or ""
    cleaned = _sanitizer.sanitize(original, tenant_id=request.tenant_id)

    return SanitizeResponse(
        css=cleaned,
        changed=cleaned != original,
        rules=_sanitizer.matched_rules(original) if cleaned != original else [],
        warnings=_sanitizer.find_suspicious_patterns(cleaned),
    )


@router.post("/render", response_model=RenderResponse)
async def render_theme(request: RenderRequest):
    """
    Apply a tenant config to a fresh document head.
    Used for server-side rendering of the storefront shell.
    """
    sink = DocumentStyleSink(title=request.title or config.PLATFORM_NAME)
    applied = ThemeService(sink, sanitizer=_sanitizer).apply(request.white_label)

    return RenderResponse(
        applied=applied,
        variables=sink.variables,
        custom_css=sink.custom_css,
        font_href=sink.font_href,
        body_font=sink.body_font,
        favicon=sink.favicon,
        title=sink.title,
        head=sink.render_head(),
    )


@router.get("/suspicious")
async def list_suspicious_css(
    limit: int = Query(100, ge=1, le=1000),
    tenant_id: Optional[str] = None,
):
    """Custom CSS flagged for manual review."""
    return {"items": get_suspicious_css(limit=limit, tenant_id=tenant_id)}


def register_theme_routes(app):
    """Register theme routes"""
    app.include_router(router)
    logger.info("[Theme] Routes registered: /api/theme")
