# -*- coding: utf-8 -*-
"""
Custom CSS Sanitizer
====================
Best-effort filtering of tenant-supplied CSS before it reaches the page.

Rules (applied in order, case-insensitive):
- @import rules removed
- url(javascript:...) rewritten to about:blank
- url(data:...) rewritten to about:blank unless it is an inline image
- expression(), -moz-binding and behavior neutralized
- position: fixed rewritten to relative
- z-index capped

This is textual matching, not a CSS parser. Constructs the rules do not
rewrite but that look like evasion attempts are logged for manual review.
"""

import re
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Pattern, Tuple, Union

from comspace import config

logger = logging.getLogger(__name__)


# =============================================================================
# RULES
# =============================================================================

Replacement = Union[str, Callable[..., str]]

SANITIZE_RULES: List[Tuple[str, str, Replacement]] = [
    ("import", r"@import\s+[^;]+;?", "/* import removed */"),
    ("javascript_url", r"url\s*\(\s*['\"]?\s*javascript\s*:", "url(about:blank"),
    (
        "data_url",
        r"url\s*\(\s*['\"]?\s*data\s*:(?!image/(png|jpeg|gif|svg|webp))",
        "url(about:blank",
    ),
    ("expression", r"expression\s*\(", "/* expression removed */("),
    ("moz_binding", r"-moz-binding\s*:", "/* binding removed */:"),
    ("behavior", r"behavior\s*:", "/* behavior removed */:"),
    ("position_fixed", r"position\s*:\s*fixed", "position: relative /* fixed removed */"),
]

Z_INDEX_PATTERN = r"z-index\s*:\s*(\d+)"

# Reported, never rewritten
SUSPICIOUS_PATTERNS: List[Tuple[str, str]] = [
    ("comment_in_keyword", r"[a-z]/\*.*?\*/[a-z]"),
    ("css_escape", r"\\[0-9a-f]{1,6}|\\[g-z]"),
    ("vbscript", r"vbscript\s*:"),
    ("o_link", r"-o-link"),
    ("style_breakout", r"<\s*/\s*style"),
    ("html_tag", r"<\s*(script|iframe|object|embed|svg)\b"),
]


# =============================================================================
# SUSPICIOUS CSS LOG
# =============================================================================

@dataclass
class SuspiciousCSS:
    """Record of custom CSS flagged for review."""
    timestamp: datetime
    tenant_id: str
    pattern_type: str
    input_sample: str


_suspicious_css: List[SuspiciousCSS] = []


def log_suspicious_css(tenant_id: str, pattern_type: str, input_sample: str):
    """Record a suspicious custom CSS submission."""
    _suspicious_css.append(SuspiciousCSS(
        timestamp=datetime.now(timezone.utc),
        tenant_id=tenant_id,
        pattern_type=pattern_type,
        input_sample=input_sample[:200]
    ))

    if len(_suspicious_css) > config.SUSPICIOUS_CSS_LOG_SIZE:
        _suspicious_css.pop(0)

    logger.warning(f"Suspicious custom CSS detected: {pattern_type} for tenant {tenant_id}")


def get_suspicious_css(
    limit: int = 100,
    tenant_id: Optional[str] = None
) -> List[Dict[str, Any]]:
    """Get the suspicious CSS log, newest last."""
    records = _suspicious_css
    if tenant_id:
        records = [r for r in records if r.tenant_id == tenant_id]

    return [
        {
            "timestamp": r.timestamp.isoformat(),
            "tenant_id": r.tenant_id,
            "pattern_type": r.pattern_type,
            "input_sample": r.input_sample,
        }
        for r in records[-limit:]
    ]


def clear_suspicious_css():
    _suspicious_css.clear()


# =============================================================================
# SANITIZER
# =============================================================================

class CSSSanitizer:
    """
    Sanitizes untrusted tenant CSS.

    Uso:
        sanitizer = CSSSanitizer()
        safe = sanitizer.sanitize(".hero { position: fixed; z-index: 9999; }")
    """

    def __init__(self, z_index_max: Optional[int] = None):
        self.z_index_max = config.CSS_Z_INDEX_MAX if z_index_max is None else z_index_max
        self._rules: List[Tuple[str, Pattern, Replacement]] = [
            (name, re.compile(pattern, re.IGNORECASE), replacement)
            for name, pattern, replacement in SANITIZE_RULES
        ]
        self._rules.append(
            ("z_index", re.compile(Z_INDEX_PATTERN, re.IGNORECASE), self._clamp_z_index)
        )
        self._suspicious = [
            (name, re.compile(pattern, re.IGNORECASE | re.DOTALL))
            for name, pattern in SUSPICIOUS_PATTERNS
        ]

    def _clamp_z_index(self, match) -> str:
        return f"z-index: {min(int(match.group(1)), self.z_index_max)}"

    def sanitize(self, css: Any, tenant_id: Optional[str] = None) -> str:
        """
        Sanitize custom CSS. Never raises.

        Args:
            css: Raw tenant CSS (None or non-str yields "")
            tenant_id: Tenant for suspicious-pattern logging

        Returns:
            Sanitized CSS string
        """
        if not css or not isinstance(css, str):
            return ""

        cleaned = css
        for _name, pattern, replacement in self._rules:
            cleaned = pattern.sub(replacement, cleaned)

        for pattern_type in self.find_suspicious_patterns(cleaned):
            log_suspicious_css(tenant_id or "unknown", pattern_type, css)

        return cleaned

    def matched_rules(self, css: Any) -> List[str]:
        """Names of the rewrite rules that would fire on css."""
        if not css or not isinstance(css, str):
            return []
        return [name for name, pattern, _ in self._rules if pattern.search(css)]

    def find_suspicious_patterns(self, css: Any) -> List[str]:
        """Names of suspicious constructs the rewrite rules leave alone."""
        if not css or not isinstance(css, str):
            return []
        return [name for name, pattern in self._suspicious if pattern.search(css)]


_default_sanitizer = CSSSanitizer()


def sanitize_css(css: Any, tenant_id: Optional[str] = None) -> str:
    """Sanitize custom CSS with the default rule set."""
    return _default_sanitizer.sanitize(css, tenant_id=tenant_id)


__all__ = [
    "CSSSanitizer",
    "sanitize_css",
    "get_suspicious_css",
    "clear_suspicious_css",
    "SANITIZE_RULES",
]
