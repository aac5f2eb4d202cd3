# -*- coding: utf-8 -*-
"""
Unit Tests for Custom CSS Sanitizer

Tests for comspace.white_label.css_sanitizer - rule rewrites, null safety,
idempotence and suspicious pattern logging.
"""

import re
import pytest

from comspace.white_label.css_sanitizer import (
    CSSSanitizer,
    sanitize_css,
    get_suspicious_css,
)

TRICKY_INPUTS = [
    "",
    ".safe { color: red; }",
    '@import url("evil.css"); .safe { color: red; }',
    "@import 'a.css'",
    '@IMPORT "b.css"; @import url(c.css);',
    'background: url("javascript:alert(1)")',
    "background: url( ' JavaScript : alert(1)')",
    "background: url(data:text/html;base64,PHNjcmlwdD4=)",
    'background: url("data:image/png;base64,abc")',
    "width: expression(document.body.clientWidth)",
    "width:EXPRESSION (1)",
    "-moz-binding: url(evil.xml#xss)",
    "behavior: url(evil.htc); BEHAVIOR :x",
    ".o { position: fixed; top: 0 }",
    ".o{POSITION:FIXED}",
    ".m { z-index: 99999; } .n{z-index:5} .p{Z-INDEX : 0100}",
    ".x{position:fixed;z-index:2147483647;background:url(javascript:x);width:expression(1)}",
    "a{color:\\72 ed} </style><script>alert(1)</script>",
]


class TestSanitizeRules:
    """Tests for each rewrite rule"""

    @pytest.mark.unit
    def test_removes_import(self):
        result = sanitize_css('@import url("evil.css"); .safe { color: red; }')
        assert "@import" not in result
        assert ".safe" in result

    @pytest.mark.unit
    def test_removes_import_case_insensitive(self):
        result = sanitize_css('@IMPORT "b.css"; .a{}')
        assert "import" not in result.replace("/* import removed */", "")
        assert ".a{}" in result

    @pytest.mark.unit
    def test_neutralizes_javascript_url(self):
        result = sanitize_css('background: url("javascript:alert(1)")')
        assert "javascript:" not in result
        assert "url(about:blank" in result

    @pytest.mark.unit
    def test_neutralizes_javascript_url_with_spacing(self):
        result = sanitize_css("background: url( ' JavaScript : alert(1)')")
        assert not re.search(r"javascript\s*:", result, re.IGNORECASE)

    @pytest.mark.unit
    def test_neutralizes_non_image_data_url(self):
        result = sanitize_css("background: url(data:text/html;base64,PHNjcmlwdD4=)")
        assert "data:text" not in result
        assert "about:blank" in result

    @pytest.mark.unit
    @pytest.mark.parametrize("mime", ["png", "jpeg", "gif", "svg", "webp"])
    def test_allows_inline_images(self, mime):
        css = f'background: url("data:image/{mime};base64,abc")'
        assert sanitize_css(css) == css

    @pytest.mark.unit
    def test_neutralizes_expression(self):
        result = sanitize_css("width: expression(document.body.clientWidth)")
        assert not re.search(r"expression\s*\(", result, re.IGNORECASE)
        assert "/* expression removed */(" in result

    @pytest.mark.unit
    def test_neutralizes_moz_binding_and_behavior(self):
        result = sanitize_css("-moz-binding: url(evil.xml#xss); behavior: url(evil.htc)")
        assert not re.search(r"-moz-binding\s*:", result, re.IGNORECASE)
        assert not re.search(r"behavior\s*:", result, re.IGNORECASE)

    @pytest.mark.unit
    def test_rewrites_position_fixed(self):
        result = sanitize_css(".overlay { position: fixed; }")
        assert "position: relative" in result
        assert not re.search(r"position\s*:\s*fixed", result, re.IGNORECASE)

    @pytest.mark.unit
    def test_position_absolute_untouched(self):
        css = ".badge { position: absolute; }"
        assert sanitize_css(css) == css

    @pytest.mark.unit
    def test_caps_z_index(self):
        result = sanitize_css(".modal { z-index: 99999; }")
        assert "z-index: 100" in result
        assert "99999" not in result

    @pytest.mark.unit
    def test_small_z_index_kept(self):
        assert sanitize_css(".n{z-index:5}") == ".n{z-index: 5}"

    @pytest.mark.unit
    def test_custom_z_index_cap(self):
        sanitizer = CSSSanitizer(z_index_max=10)
        assert sanitizer.sanitize(".n{z-index:50}") == ".n{z-index: 10}"

    @pytest.mark.unit
    def test_rules_are_independent(self):
        result = sanitize_css(
            ".x{position:fixed;z-index:5000;background:url(javascript:x);width:expression(1)}"
        )
        assert "position: relative" in result
        assert "z-index: 100" in result
        assert "javascript:" not in result
        assert "/* expression removed */" in result

    @pytest.mark.unit
    def test_safe_css_unchanged(self):
        css = ".btn { color: var(--wl-brand-500); border-radius: 8px; }"
        assert sanitize_css(css) == css


class TestSanitizeInputs:
    """Tests for null safety"""

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["", None, 0, 123, ["a{}"], {"css": "a{}"}])
    def test_empty_or_non_string_returns_empty(self, value):
        assert sanitize_css(value) == ""

    @pytest.mark.unit
    @pytest.mark.parametrize("css", TRICKY_INPUTS)
    def test_idempotent(self, css):
        once = sanitize_css(css)
        assert sanitize_css(once) == once

    @pytest.mark.unit
    def test_matched_rules(self):
        sanitizer = CSSSanitizer()
        rules = sanitizer.matched_rules("@import x; .a{position:fixed}")
        assert rules == ["import", "position_fixed"]
        assert sanitizer.matched_rules(None) == []


class TestSuspiciousPatterns:
    """Tests for review logging of constructs the rules leave alone"""

    @pytest.mark.unit
    def test_flags_css_escape(self):
        sanitizer = CSSSanitizer()
        assert "css_escape" in sanitizer.find_suspicious_patterns("a{color:\\72 ed}")

    @pytest.mark.unit
    def test_flags_style_breakout_and_html(self):
        found = CSSSanitizer().find_suspicious_patterns("</style><script>alert(1)</script>")
        assert "style_breakout" in found
        assert "html_tag" in found

    @pytest.mark.unit
    def test_flags_comment_split_keyword(self):
        found = CSSSanitizer().find_suspicious_patterns("width: expr/**/ession(1)")
        assert "comment_in_keyword" in found

    @pytest.mark.unit
    def test_sanitizer_markers_not_flagged(self):
        """The rewrite markers themselves never look suspicious"""
        cleaned = sanitize_css(
            "@import x; .a{width:expression(1);position:fixed;behavior:y;-moz-binding:z}"
        )
        assert CSSSanitizer().find_suspicious_patterns(cleaned) == []

    @pytest.mark.unit
    def test_suspicious_input_is_logged_not_rewritten(self, caplog):
        css = "a{color:\\72 ed}"
        with caplog.at_level("WARNING"):
            result = sanitize_css(css, tenant_id="acme")

        assert result == css
        records = get_suspicious_css(tenant_id="acme")
        assert len(records) == 1
        assert records[0]["pattern_type"] == "css_escape"
        assert records[0]["timestamp"].endswith("+00:00")
        assert "Suspicious custom CSS" in caplog.text

    @pytest.mark.unit
    def test_clean_css_not_logged(self):
        sanitize_css(".a { color: red; }", tenant_id="acme")
        assert get_suspicious_css() == []
