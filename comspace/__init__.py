# -*- coding: utf-8 -*-
"""
ComSpace - White Label Theming Engine
=====================================

Tenant brand derivation and custom CSS sanitization for the ComSpace
multi-tenant storefront.

Modulos:
- white_label: palette generation, CSS sanitizer, theme service
- api: FastAPI routes exposing the theming engine
"""

__version__ = "1.0.0"
