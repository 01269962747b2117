"""
Rendering of FormattedAttribute records into display lines.

Shared by the product and checkout attribute formatters.
"""

from typing import Iterable

from models.formatted_attribute import FormattedAttribute
from utils.html_escape import safe_html


def render_formatted_attribute(template: str, attribute: FormattedAttribute, html_encode: bool) -> str:
    """
    Render one attribute/value record through a positional resource template.

    Args:
        template: Resource template with slots {0} name, {1} value,
                  {2} price adjustment and optionally {3} quantity
        attribute: Record to render
        html_encode: Escape every field (except a value flagged dont_encode_value)

    Returns:
        Rendered line with surrounding whitespace stripped, "" for empty records

    Examples:
        >>> render_formatted_attribute("{0}: {1}{2}{3}", FormattedAttribute(name="Color", value="Red"), True)
        'Color: Red'
    """
    if attribute.is_empty:
        return ""

    name = attribute.name
    value = attribute.value
    price_adjustment = attribute.price_adjustment
    quantity = attribute.quantity

    if html_encode:
        name = safe_html(name)
        price_adjustment = safe_html(price_adjustment)
        quantity = safe_html(quantity)
        if not attribute.dont_encode_value:
            value = safe_html(value)

    return template.format(name, value, price_adjustment, quantity).strip()


def join_lines(lines: Iterable[str], separator: str) -> str:
    """Join rendered lines with separator, skipping empty ones."""
    return separator.join(line for line in lines if line)
