"""
Unit tests for Localizator.

Tests cover:
- Resource templates per section and language
- Missing keys and languages
- Localized entity names with fallback
- Currency symbols
"""

import pytest
from unittest.mock import patch

from enums.currency import Currency
from enums.localization_entity import LocalizationEntity
from exceptions.localization import ResourceNotFoundException
from models.product_attribute import ProductAttributeValueDTO
from utils.localizator import Localizator


class TestGetText:
    """Test resource template lookup."""

    def test_english_template(self):
        """Test catalog template in English."""
        result = Localizator.get_text(LocalizationEntity.CATALOG, "formatted_attribute", lang="en")
        assert result == "{0}: {1}{2}{3}"

    def test_german_gift_card_template(self):
        """Test German gift card template."""
        result = Localizator.get_text(LocalizationEntity.CATALOG, "gift_card_from_physical", lang="de")
        assert result.format("Jane") == "Von: Jane"

    @patch('config.STORE_LANGUAGE', 'de')
    def test_default_language_from_config(self):
        """Test config.STORE_LANGUAGE is used when lang is omitted."""
        result = Localizator.get_text(LocalizationEntity.CATALOG, "gift_card_for_physical")
        assert result.format("John") == "Für: John"

    def test_missing_key_raises(self):
        """Test unknown key raises ResourceNotFoundException."""
        with pytest.raises(ResourceNotFoundException) as exc_info:
            Localizator.get_text(LocalizationEntity.CHECKOUT, "no_such_key", lang="en")
        assert exc_info.value.details["section"] == "checkout"

    def test_missing_language_raises(self):
        """Test unknown language raises ResourceNotFoundException."""
        with pytest.raises(ResourceNotFoundException):
            Localizator.get_text(LocalizationEntity.CATALOG, "formatted_attribute", lang="xx")


class TestGetLocalizedName:
    """Test per-entity localized names."""

    def test_translation_used(self):
        """Test translation for requested language."""
        value = ProductAttributeValueDTO(name="Red", localized_names={"de": "Rot"})
        assert Localizator.get_localized_name(value, "de") == "Rot"

    def test_fallback_to_default_name(self):
        """Test default name when no translation exists."""
        value = ProductAttributeValueDTO(name="Red", localized_names={"de": "Rot"})
        assert Localizator.get_localized_name(value, "fr") == "Red"

    def test_empty_translation_falls_back(self):
        """Test empty translation is ignored."""
        value = ProductAttributeValueDTO(name="Red", localized_names={"de": ""})
        assert Localizator.get_localized_name(value, "de") == "Red"


class TestCurrencySymbol:
    """Test currency symbols."""

    @pytest.mark.parametrize("currency,expected", [
        (Currency.EUR, "€"),
        (Currency.USD, "$"),
        (Currency.GBP, "£"),
    ])
    def test_symbols(self, currency, expected):
        """Test symbol per currency."""
        assert Localizator.get_currency_symbol(currency, lang="en") == expected

    def test_default_currency_from_config(self):
        """Test config.CURRENCY is used when currency is omitted."""
        assert Localizator.get_currency_symbol(lang="en") == "€"
