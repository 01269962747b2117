"""
Custom exceptions for the attribute formatter.

Exception Hierarchy:
--------------------
StoreException (base)
├── AttributeException
│   └── InvalidAttributesXmlException
├── LocalizationException
│   └── ResourceNotFoundException
└── ProductException
    └── ProductNotFoundException

Usage:
------
Collaborators raise specific exceptions:
    raise ResourceNotFoundException(key="formatted_attribute", lang="fr")

Formatters let them propagate; only missing downloads and unknown
attribute values are skipped silently.
"""

from .base import StoreException
from .attribute import AttributeException, InvalidAttributesXmlException
from .localization import LocalizationException, ResourceNotFoundException
from .product import ProductException, ProductNotFoundException

__all__ = [
    # Base
    'StoreException',

    # Attribute
    'AttributeException',
    'InvalidAttributesXmlException',

    # Localization
    'LocalizationException',
    'ResourceNotFoundException',

    # Product
    'ProductException',
    'ProductNotFoundException',
]
