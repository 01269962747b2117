"""
Models Package

This file ensures all SQLAlchemy models are imported and registered,
which is required for relationships to work correctly.
"""

from models.base import Base
from models.product import Product
from models.product_attribute import ProductAttributeMapping, ProductAttributeValue
from models.checkout_attribute import CheckoutAttribute, CheckoutAttributeValue
from models.download import Download

__all__ = [
    'Base',
    'Product',
    'ProductAttributeMapping',
    'ProductAttributeValue',
    'CheckoutAttribute',
    'CheckoutAttributeValue',
    'Download',
]
