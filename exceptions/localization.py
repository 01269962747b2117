"""
Localization-related exceptions.
"""

from .base import StoreException


class LocalizationException(StoreException):
    """Base exception for localization errors."""
    pass


class ResourceNotFoundException(LocalizationException):
    """Raised when a resource string or language file is missing."""

    def __init__(self, key: str, lang: str, section: str | None = None):
        if section:
            message = f"Resource '{section}.{key}' not found for language '{lang}'"
        else:
            message = f"Resource '{key}' not found for language '{lang}'"

        super().__init__(message, details={'key': key, 'lang': lang, 'section': section})
        self.key = key
        self.lang = lang
        self.section = section
