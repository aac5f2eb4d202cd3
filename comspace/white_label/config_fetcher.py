# -*- coding: utf-8 -*-
"""
Tenant Config Fetcher
=====================

Loads the tenant white-label config from GET {API_URL}/white-label/config.

Failures never propagate: the caller gets None and keeps the default
platform branding.
"""

import logging
from typing import Any, Dict, Optional

import requests
from pydantic import ValidationError

from comspace import config

from .models import WhiteLabelConfig

logger = logging.getLogger(__name__)


def extract_config(payload: Any) -> Optional[Dict[str, Any]]:
    """Config from either {"data": {"config": ...}} or {"config": ...}."""
    if not isinstance(payload, dict):
        return None
    data = payload.get("data")
    if isinstance(data, dict) and data.get("config"):
        return data["config"]
    return payload.get("config") or None


class TenantConfigFetcher:
    """
    Cliente HTTP da configuracao White Label.

    Uso:
        fetcher = TenantConfigFetcher(tenant_id="acme")
        white_label = fetcher.fetch()
        if white_label:
            theme_service.apply(white_label)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        tenant_id: Optional[str] = None,
        timeout: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or config.API_URL).rstrip("/")
        self.tenant_id = tenant_id or config.TENANT_ID
        self.timeout = timeout or config.CONFIG_FETCH_TIMEOUT
        self._session = session or requests.Session()
        self._session.headers.update({
            "User-Agent": "ComSpaceTheme/1.0",
            "Accept": "application/json",
        })

    @property
    def url(self) -> str:
        return f"{self.base_url}/white-label/config"

    def fetch(self) -> Optional[WhiteLabelConfig]:
        """
        Fetch and parse the tenant config.

        Returns:
            WhiteLabelConfig, or None on any failure
        """
        try:
            response = self._session.get(
                self.url,
                headers={"x-tenant-id": self.tenant_id},
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout:
            logger.warning(f"Timeout fetching white-label config for {self.tenant_id}")
            return None
        except requests.exceptions.RequestException as e:
            logger.warning(f"Error fetching white-label config for {self.tenant_id}: {e}")
            return None

        if not response.ok:
            logger.warning(
                f"White-label config for {self.tenant_id} returned HTTP {response.status_code}"
            )
            return None

        try:
            payload = response.json()
        except ValueError:
            logger.warning(f"White-label config for {self.tenant_id} is not valid JSON")
            return None

        raw = extract_config(payload)
        if raw is None:
            logger.info(f"No white-label config for {self.tenant_id}")
            return None

        try:
            return WhiteLabelConfig.model_validate(raw)
        except ValidationError as e:
            logger.warning(f"Invalid white-label config for {self.tenant_id}: {e.error_count()} errors")
            return None


__all__ = [
    "TenantConfigFetcher",
    "extract_config",
]
