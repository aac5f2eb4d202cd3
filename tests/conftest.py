# -*- coding: utf-8 -*-
"""
Pytest Configuration and Fixtures
=================================

Shared fixtures for the ComSpace theming engine test suite.
"""

import os
import sys
import pytest
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

# Set test environment
os.environ["TESTING"] = "1"

from comspace.white_label.css_sanitizer import clear_suspicious_css
from comspace.white_label.style_sink import DocumentStyleSink
from comspace.white_label.theme_service import ThemeService


def pytest_configure(config):
    """Configuracao inicial do pytest - registra markers customizados"""
    config.addinivalue_line("markers", "unit: marca testes unitarios")
    config.addinivalue_line("markers", "integration: marca testes de integracao")


# =============================================================================
# THEME FIXTURES
# =============================================================================

@pytest.fixture
def sink():
    """Fresh document head with the platform default title"""
    return DocumentStyleSink(title="ComSpace | Online Store")


@pytest.fixture
def theme_service(sink):
    """Theme service writing into the sink fixture"""
    return ThemeService(sink, platform_name="ComSpace", bundled_font="Inter")


@pytest.fixture
def sample_white_label():
    """Tenant config as served by /white-label/config"""
    return {
        "tenantId": "acme",
        "name": "Acme Salon",
        "domain": "acme.example.com",
        "branding": {
            "primaryColor": "#9333ea",
            "secondaryColor": "#10B981",
            "accentColor": "#ec4899",
            "fontFamily": "Poppins, sans-serif",
            "favicon": "/uploads/acme/favicon.png",
            "assets": {"logo": {"url": "/uploads/acme/logo.png", "alt": "Acme"}},
        },
        "customCSS": ".hero { position: fixed; z-index: 9999; }",
        "features": {"booking": True, "salon": True},
    }


@pytest.fixture(autouse=True)
def clean_suspicious_log():
    """Clean the suspicious CSS log around each test"""
    clear_suspicious_css()
    yield
    clear_suspicious_css()
