"""
Unit Tests for HTML Escaping Utilities

Tests HTML injection prevention for customer-controllable attribute data.
"""

import pytest
from utils.html_escape import format_text, safe_html, safe_url


class TestSafeHtml:
    """Test safe_html() function"""

    def test_escape_script_injection(self):
        """Test blocking script tag injection"""
        malicious = "Red</b><script>alert('XSS')</script>"
        result = safe_html(malicious)
        assert "<script>" not in result
        assert "&lt;script&gt;" in result
        assert "</b>" not in result

    def test_escape_quote_injection(self):
        """Test escaping quote injection (attribute breakout)"""
        malicious = 'Red" onclick="alert(1)'
        result = safe_html(malicious)
        assert '&quot;' in result

    def test_preserve_normal_text(self):
        """Test normal text is preserved"""
        assert safe_html("Color: Red (+€5.00)") == "Color: Red (+€5.00)"

    def test_handle_none(self):
        """Test None input returns empty string"""
        assert safe_html(None) == ""

    def test_escape_ampersand(self):
        """Test ampersand escaping"""
        assert safe_html("Tom & Jerry") == "Tom &amp; Jerry"


class TestSafeUrl:
    """Test safe_url() function"""

    def test_allow_https(self):
        """Test HTTPS URLs are allowed"""
        url = "https://shop.example.com/download/getfileupload/?downloadId=1"
        assert safe_url(url) == url

    def test_block_javascript_protocol(self):
        """Test javascript: protocol is blocked"""
        assert safe_url("javascript:alert(1)") == ""

    def test_block_data_protocol(self):
        """Test data: protocol is blocked"""
        assert safe_url("data:text/html,<script>alert(1)</script>") == ""

    def test_handle_none(self):
        """Test None input returns empty string"""
        assert safe_url(None) == ""


class TestFormatText:
    """Test format_text() multiline rendering"""

    @pytest.mark.parametrize("text,expected", [
        ("Happy\nBirthday", "Happy<br />Birthday"),
        ("Happy\r\nBirthday", "Happy<br />Birthday"),
        ("Happy\rBirthday", "Happy<br />Birthday"),
        ("a\tb", "a&nbsp;&nbsp;b"),
        ("a  b", "a&nbsp;&nbsp;b"),
    ])
    def test_layout_preserved(self, text, expected):
        """Test line breaks, tabs and double spaces survive as HTML"""
        assert format_text(text) == expected

    def test_markup_escaped_once(self):
        """Test HTML in the text is escaped"""
        assert format_text("<b>Hi</b>") == "&lt;b&gt;Hi&lt;/b&gt;"

    @pytest.mark.parametrize("text", [None, ""])
    def test_empty(self, text):
        """Test empty input returns empty string"""
        assert format_text(text) == ""
