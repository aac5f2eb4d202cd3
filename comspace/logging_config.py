# -*- coding: utf-8 -*-
"""
JSON Logging Configuration
==========================
Structured logging for the theming engine.

Readable output in development, JSON (python-json-logger) in
staging/production for collection by Fluentd/Loki.

Usage:
    from comspace.logging_config import setup_logging

    setup_logging()
"""

import sys
import logging
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

from comspace import config


def build_formatter(
    json_format: bool,
    service_name: str,
    environment: str
) -> logging.Formatter:
    """Formatter for the stdout handler."""
    if json_format:
        return JsonFormatter(
            fmt="%(levelname)s %(name)s %(message)s",
            rename_fields={"levelname": "level", "name": "logger"},
            static_fields={"service": service_name, "environment": environment},
            timestamp=True,
        )

    return logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )


def setup_logging(
    level: Optional[str] = None,
    service_name: Optional[str] = None,
    json_format: Optional[bool] = None
) -> None:
    """
    Setup structured logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        service_name: Service name for log entries
        json_format: Force JSON format (auto-detected if None)
    """
    level = level or config.LOG_LEVEL
    service_name = service_name or config.SERVICE_NAME
    environment = config.ENVIRONMENT

    # JSON in production, readable in dev
    if json_format is None:
        json_format = environment in ("production", "staging")

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(build_formatter(json_format, service_name, environment))
    root_logger.addHandler(handler)

    # Reduce noise from libraries
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured: level={level}, json={json_format}, env={environment}")


def get_tenant_logger(name: str, tenant_id: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get logger with tenant context.

    Context is passed per record via ``extra``; the global record factory
    is not replaced.

    Usage:
        logger = get_tenant_logger(__name__, tenant_id="acme")
        logger.info("Applying theme")
    """
    logger = logging.getLogger(name)

    class ContextAdapter(logging.LoggerAdapter):
        def process(self, msg, kwargs):
            extra = kwargs.get("extra", {})
            extra.update(self.extra)
            kwargs["extra"] = extra
            return msg, kwargs

    return ContextAdapter(logger, {"tenant_id": tenant_id})
