# -*- coding: utf-8 -*-
"""
ComSpace Theme API
==================

Usage:
    uvicorn comspace.api:create_app --factory
"""

from fastapi import FastAPI

from comspace import __version__
from comspace.logging_config import setup_logging

from .theme_routes import register_theme_routes


def create_app() -> FastAPI:
    """Build the theme API application."""
    setup_logging()
    app = FastAPI(title="ComSpace Theme API", version=__version__)
    register_theme_routes(app)
    return app


__all__ = ["create_app"]
