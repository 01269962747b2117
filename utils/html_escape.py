"""
HTML Escaping Utilities for Cart and Order Summaries

Prevents HTML injection by escaping customer-controllable data
(free-text attribute input, uploaded file names, gift card names)
before embedding it in the formatted attribute markup.

Security Note:
- ALWAYS use safe_html() for customer-provided data
- NEVER escape localized templates or pre-formatted HTML (links, format_text() output)
- Escapes: < > & " ' to prevent tag injection and attribute breakout
"""

import html
from typing import Optional


def safe_html(text: Optional[str]) -> str:
    """
    Escapes HTML special characters in customer-provided text.

    Args:
        text: Customer-provided string (attribute input, file name, etc.)

    Returns:
        HTML-escaped string safe to embed in HTML

    Examples:
        >>> safe_html("Red</b><script>alert(1)</script>")
        "Red&lt;/b&gt;&lt;script&gt;alert(1)&lt;/script&gt;"

        >>> safe_html(None)
        ""
    """
    if text is None:
        return ""
    return html.escape(str(text), quote=True)


def safe_url(url: Optional[str]) -> str:
    """
    Sanitizes URLs for use in <a> tags.

    Basic validation to prevent javascript: and data: URI injection.

    Args:
        url: URL built from store configuration

    Returns:
        Sanitized URL or empty string if invalid

    Examples:
        >>> safe_url("https://shop.example.com/download/getfileupload/?downloadId=1")
        "https://shop.example.com/download/getfileupload/?downloadId=1"

        >>> safe_url("javascript:alert(1)")
        ""
    """
    if not url:
        return ""

    url_str = str(url).strip()

    # Only allow safe protocols
    safe_protocols = ["http://", "https://"]
    if not any(url_str.startswith(proto) for proto in safe_protocols):
        return ""

    return html.escape(url_str, quote=True)


def format_text(text: Optional[str]) -> str:
    """
    Renders multiline plain text as HTML.

    The text is escaped first (no HTML allowed), then line breaks become
    <br /> and tabs/double spaces become non-breaking spaces so the layout
    the customer typed survives in the browser.

    Examples:
        >>> format_text("Happy\\nBirthday")
        "Happy<br />Birthday"

        >>> format_text("<b>hi</b>")
        "&lt;b&gt;hi&lt;/b&gt;"
    """
    if not text:
        return ""

    text = safe_html(text)
    text = text.replace("\r\n", "<br />")
    text = text.replace("\r", "<br />")
    text = text.replace("\n", "<br />")
    text = text.replace("\t", "&nbsp;&nbsp;")
    text = text.replace("  ", "&nbsp;&nbsp;")
    return text
