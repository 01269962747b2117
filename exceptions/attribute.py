"""
Attribute-related exceptions.
"""

from .base import StoreException


class AttributeException(StoreException):
    """Base exception for attribute-related errors."""
    pass


class InvalidAttributesXmlException(AttributeException):
    """Raised when the selected-attributes XML cannot be parsed."""

    def __init__(self, reason: str):
        super().__init__(
            f"Invalid attributes XML: {reason}",
            details={'reason': reason}
        )
        self.reason = reason
