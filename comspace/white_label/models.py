# -*- coding: utf-8 -*-
"""
White Label Config Models
=========================

Pydantic models for the tenant config envelope served by
GET /white-label/config. Field names follow the JSON (camelCase);
snake_case names are accepted too.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from comspace import config


class AssetRef(BaseModel):
    """Uploaded asset reference"""
    model_config = ConfigDict(extra="ignore")

    url: Optional[str] = None
    alt: Optional[str] = None


class BrandAssets(BaseModel):
    """Branding assets"""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    logo: Optional[AssetRef] = None
    hero_image: Optional[AssetRef] = Field(None, alias="heroImage")


class BrandingConfig(BaseModel):
    """
    Tenant branding.

    Every field is optional: an absent field leaves that aspect of the theme
    untouched.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    logo: Optional[str] = None
    favicon: Optional[str] = None
    primary_color: Optional[str] = Field(None, alias="primaryColor")
    secondary_color: Optional[str] = Field(None, alias="secondaryColor")
    accent_color: Optional[str] = Field(None, alias="accentColor")
    font_family: Optional[str] = Field(None, alias="fontFamily")
    assets: Optional[BrandAssets] = None

    @property
    def asset_logo_url(self) -> Optional[str]:
        if self.assets and self.assets.logo:
            return self.assets.logo.url or None
        return None

    @property
    def favicon_url(self) -> Optional[str]:
        """Explicit favicon, falling back to the uploaded logo."""
        return self.favicon or self.asset_logo_url


class WhiteLabelConfig(BaseModel):
    """Tenant config envelope"""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    tenant_id: Optional[str] = Field(None, alias="tenantId")
    name: Optional[str] = None
    domain: Optional[str] = None
    branding: Optional[BrandingConfig] = None
    custom_css: Optional[str] = Field(None, alias="customCSS")
    features: Optional[Dict[str, Any]] = None
    contact: Optional[Dict[str, Any]] = None
    social: Optional[Dict[str, Any]] = None

    @property
    def logo_url(self) -> Optional[str]:
        """Uploaded logo asset, then branding logo."""
        if not self.branding:
            return None
        return self.branding.asset_logo_url or self.branding.logo or None

    @property
    def store_name(self) -> str:
        return self.name or config.PLATFORM_NAME

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


__all__ = [
    "AssetRef",
    "BrandAssets",
    "BrandingConfig",
    "WhiteLabelConfig",
]
