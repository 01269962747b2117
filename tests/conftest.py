"""
Pytest configuration and fixtures for tests.

This file is automatically loaded by pytest and provides shared fixtures
and configuration for all tests.
"""

import sys
import os
import uuid
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

# Add parent directory to Python path so tests can import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from enums.currency import Currency

# Mock config module completely before any imports
config_mock = MagicMock()
config_mock.STORE_LANGUAGE = "en"  # For Localizator
config_mock.CURRENCY = Currency.EUR
config_mock.STORE_URL = "https://shop.example.com/"
config_mock.RENDER_ASSOCIATED_ATTRIBUTE_VALUE_QUANTITY = True
config_mock.DISPLAY_PRICES_INCLUDING_TAX = False  # Plain amounts unless a test enables tax
config_mock.TAX_RATE_PERCENT = Decimal("0")
config_mock.DB_NAME = "test.db"
config_mock.LOG_LEVEL = "INFO"
config_mock.LOG_RETENTION_DAYS = 7
config_mock.LOG_MASK_SECRETS = True

sys.modules['config'] = config_mock

import models  # noqa: E402  registers all tables
from models.base import Base  # noqa: E402
from models.checkout_attribute import CheckoutAttribute, CheckoutAttributeValue  # noqa: E402
from models.customer import CustomerDTO, WorkContextDTO  # noqa: E402
from models.download import Download  # noqa: E402
from models.product import Product, ProductDTO  # noqa: E402
from models.product_attribute import ProductAttributeMapping, ProductAttributeValue  # noqa: E402

DOWNLOAD_GUID = uuid.UUID("3f2b8c1e-5d4a-4e6f-9a7b-1c2d3e4f5a6b")


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest.fixture
def engine():
    """Create in-memory SQLite database"""
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    """Create database session"""
    session = Session(engine)
    yield session
    session.rollback()
    session.close()


# ============================================================================
# Catalog Fixtures
# ============================================================================

@pytest.fixture
def catalog(session):
    """
    Products, attribute mappings and values used across formatter tests.

    Product 1 "T-Shirt" (€40.00):
        10 Color (dropdown, de: Farbe): 100 Red +5 (de: Rot), 101 Blue 0, 102 Green -2.50
        11 Size (radio): 110 Large +10%, 111 Small -10%, 112 Medium 0%
        12 Engraving (textbox)
        13 Message (multiline textbox)
        14 Artwork (file upload)
        15 Extras (checkboxes): 150 Batteries associated x3, 151 Charger associated x1
        16 "" (textbox, renders nothing for an empty value)
    Product 2 "Gift Card" (virtual), product 3 "Gift Box" (physical gift card).
    Download DOWNLOAD_GUID → "logo.png".
    """
    session.add_all([
        Product(id=1, name="T-Shirt", price=Decimal("40.00")),
        Product(id=2, name="Gift Card", price=Decimal("25.00"), is_gift_card=True, gift_card_type="VIRTUAL"),
        Product(id=3, name="Gift Box", price=Decimal("25.00"), is_gift_card=True, gift_card_type="PHYSICAL"),
    ])
    session.flush()

    session.add_all([
        ProductAttributeMapping(id=10, product_id=1, name="Color", localized_names={"de": "Farbe"},
                                control_type="DROPDOWN_LIST"),
        ProductAttributeMapping(id=11, product_id=1, name="Size", control_type="RADIO_LIST"),
        ProductAttributeMapping(id=12, product_id=1, name="Engraving", control_type="TEXTBOX"),
        ProductAttributeMapping(id=13, product_id=1, name="Message", control_type="MULTILINE_TEXTBOX"),
        ProductAttributeMapping(id=14, product_id=1, name="Artwork", control_type="FILE_UPLOAD"),
        ProductAttributeMapping(id=15, product_id=1, name="Extras", control_type="CHECKBOXES"),
        ProductAttributeMapping(id=16, product_id=1, name="", control_type="TEXTBOX"),
    ])
    session.flush()

    session.add_all([
        ProductAttributeValue(id=100, mapping_id=10, name="Red", localized_names={"de": "Rot"},
                              price_adjustment=Decimal("5.00")),
        ProductAttributeValue(id=101, mapping_id=10, name="Blue", price_adjustment=Decimal("0")),
        ProductAttributeValue(id=102, mapping_id=10, name="Green", price_adjustment=Decimal("-2.50")),
        ProductAttributeValue(id=110, mapping_id=11, name="Large", price_adjustment=Decimal("10"),
                              price_adjustment_use_percentage=True),
        ProductAttributeValue(id=111, mapping_id=11, name="Small", price_adjustment=Decimal("-10"),
                              price_adjustment_use_percentage=True),
        ProductAttributeValue(id=112, mapping_id=11, name="Medium", price_adjustment=Decimal("0"),
                              price_adjustment_use_percentage=True),
        ProductAttributeValue(id=150, mapping_id=15, name="Batteries", value_type="ASSOCIATED_TO_PRODUCT",
                              quantity=3),
        ProductAttributeValue(id=151, mapping_id=15, name="Charger", value_type="ASSOCIATED_TO_PRODUCT",
                              quantity=1),
        Download(id=1, download_guid=DOWNLOAD_GUID, filename="logo", extension=".png"),
    ])
    session.commit()
    return session


@pytest.fixture
def checkout_catalog(session):
    """
    Checkout attributes and values.

    1 Gift wrapping (dropdown): 10 Yes +3, 11 No 0, 12 Recycled -1
    2 Delivery notes (multiline textbox)
    3 Invoice copy (file upload)
    4 Reference (textbox)
    5 Insurance (dropdown, tax exempt, de: Versicherung): 50 Full +10 (de: Voll)
    Download DOWNLOAD_GUID → "logo.png".
    """
    session.add_all([
        CheckoutAttribute(id=1, name="Gift wrapping", control_type="DROPDOWN_LIST"),
        CheckoutAttribute(id=2, name="Delivery notes", control_type="MULTILINE_TEXTBOX"),
        CheckoutAttribute(id=3, name="Invoice copy", control_type="FILE_UPLOAD"),
        CheckoutAttribute(id=4, name="Reference", control_type="TEXTBOX"),
        CheckoutAttribute(id=5, name="Insurance", localized_names={"de": "Versicherung"},
                          control_type="DROPDOWN_LIST", is_tax_exempt=True),
    ])
    session.flush()

    session.add_all([
        CheckoutAttributeValue(id=10, checkout_attribute_id=1, name="Yes", price_adjustment=Decimal("3.00")),
        CheckoutAttributeValue(id=11, checkout_attribute_id=1, name="No", price_adjustment=Decimal("0")),
        CheckoutAttributeValue(id=12, checkout_attribute_id=1, name="Recycled", price_adjustment=Decimal("-1.00")),
        CheckoutAttributeValue(id=50, checkout_attribute_id=5, name="Full", localized_names={"de": "Voll"},
                               price_adjustment=Decimal("10.00")),
        Download(id=1, download_guid=DOWNLOAD_GUID, filename="logo", extension=".png"),
    ])
    session.commit()
    return session


# ============================================================================
# Context Fixtures
# ============================================================================

@pytest.fixture
def customer():
    return CustomerDTO(id=1, is_tax_exempt=False)


@pytest.fixture
def work_context():
    return WorkContextDTO(language="en", currency=Currency.EUR, currency_rate=Decimal("1"))


@pytest.fixture
def t_shirt():
    return ProductDTO(id=1, name="T-Shirt", price=Decimal("40.00"))


@pytest.fixture
def download_guid():
    return DOWNLOAD_GUID
