import json
from pathlib import Path
from typing import Optional, Protocol

import config
from enums.currency import Currency
from enums.localization_entity import LocalizationEntity
from exceptions.localization import ResourceNotFoundException


class LocalizedEntity(Protocol):
    """Anything with a default name and per-language overrides (attributes, attribute values)."""
    name: str
    localized_names: dict[str, str]


class Localizator:
    localization_dir = Path(__file__).resolve().parent.parent / "l10n"

    @staticmethod
    def get_text(entity: LocalizationEntity, key: str, lang: Optional[str] = None) -> str:
        """
        Get localized text (resource template) for given entity and key.

        Args:
            entity: Resource section (CATALOG, CHECKOUT, COMMON)
            key: Localization key
            lang: Optional language code (e.g., "de", "en").
                  If None, uses config.STORE_LANGUAGE (default).

        Returns:
            Localized text string

        Raises:
            ResourceNotFoundException: If the language file or key does not exist

        Example:
            template = Localizator.get_text(LocalizationEntity.CATALOG, "formatted_attribute", lang="en")
            template.format("Color", "Red", "", "")  # "Color: Red"
        """
        # Use provided lang or fall back to global config
        language = lang if lang is not None else config.STORE_LANGUAGE
        localization_file = Localizator.localization_dir / f"{language}.json"

        try:
            with open(localization_file, "r", encoding="UTF-8") as f:
                data = json.loads(f.read())
        except FileNotFoundError:
            raise ResourceNotFoundException(key=key, lang=language)

        try:
            return data[entity.value][key]
        except KeyError:
            raise ResourceNotFoundException(key=key, lang=language, section=entity.value)

    @staticmethod
    def get_localized_name(entity: LocalizedEntity, lang: Optional[str] = None) -> str:
        """
        Get the name of an attribute or attribute value in the given language.

        Falls back to the default name when no translation exists.

        Examples:
            >>> value = ProductAttributeValueDTO(name="Red", localized_names={"de": "Rot"})
            >>> Localizator.get_localized_name(value, "de")
            'Rot'
            >>> Localizator.get_localized_name(value, "fr")
            'Red'
        """
        language = lang if lang is not None else config.STORE_LANGUAGE
        localized = entity.localized_names.get(language) if entity.localized_names else None
        return localized or entity.name

    @staticmethod
    def get_currency_symbol(currency: Optional[Currency] = None, lang: Optional[str] = None) -> str:
        currency = currency if currency is not None else config.CURRENCY
        return Localizator.get_text(LocalizationEntity.COMMON, f"{currency.value.lower()}_symbol", lang=lang)
