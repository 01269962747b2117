"""
Selected-Attributes XML Parsing

Reads the XML stored on cart items and orders:

    <Attributes>
      <ProductAttribute ID="1">
        <ProductAttributeValue><Value>2</Value></ProductAttributeValue>
      </ProductAttribute>
      <GiftCardInfo>
        <RecipientName>Jane</RecipientName>
        ...
      </GiftCardInfo>
    </Attributes>

Checkout attributes use <CheckoutAttribute ID="..."> / <CheckoutAttributeValue>.
Attribute and value ids are resolved through the repositories.
"""

import logging
import re

from bs4 import BeautifulSoup, Tag
from sqlalchemy.orm import Session

from exceptions.attribute import InvalidAttributesXmlException
from models.checkout_attribute import CheckoutAttributeDTO
from models.gift_card import GiftCardAttributesDTO
from models.product_attribute import ProductAttributeMappingDTO, ProductAttributeValueDTO
from repositories.checkout_attribute import CheckoutAttributeRepository
from repositories.product_attribute import ProductAttributeRepository

ID_PATTERN = re.compile(r"[+-]?[0-9]+")


class AttributesXmlParser:
    """Shared element lookups; subclasses name the attribute/value elements."""

    attribute_tag: str = ""
    value_tag: str = ""

    @staticmethod
    def _load(attributes_xml: str | None) -> Tag | None:
        """
        Parse the XML and return the <Attributes> root.

        Returns:
            Root element, or None for empty input

        Raises:
            InvalidAttributesXmlException: If the document has no <Attributes> root
        """
        if not attributes_xml or not attributes_xml.strip():
            return None

        soup = BeautifulSoup(attributes_xml, "xml")
        root = soup.find("Attributes", recursive=False)
        if root is None:
            raise InvalidAttributesXmlException("missing <Attributes> root element")
        return root

    @staticmethod
    def parse_id(raw_id: str | None) -> int | None:
        """
        Parse an attribute, value or quantity id.

        Only an optional sign and ASCII digits are accepted; int() alone would
        also take "1_0" or non-ASCII digits.
        """
        if raw_id is None:
            return None
        raw_id = raw_id.strip()
        if not ID_PATTERN.fullmatch(raw_id):
            return None
        return int(raw_id)

    @classmethod
    def _attribute_elements(cls, attributes_xml: str | None) -> list[Tag]:
        root = cls._load(attributes_xml)
        if root is None:
            return []
        return root.find_all(cls.attribute_tag, recursive=False)

    @classmethod
    def _value_elements(cls, attributes_xml: str | None, attribute_id: int) -> list[Tag]:
        value_elements = []
        for element in cls._attribute_elements(attributes_xml):
            if cls.parse_id(element.get("ID")) != attribute_id:
                continue
            value_elements.extend(element.find_all(cls.value_tag, recursive=False))
        return value_elements

    @classmethod
    def parse_attribute_ids(cls, attributes_xml: str | None) -> list[int]:
        """
        Get attribute ids in document order, without duplicates.

        Elements with a missing or non-numeric ID are skipped.
        """
        ids = []
        for element in cls._attribute_elements(attributes_xml):
            attribute_id = cls.parse_id(element.get("ID"))
            if attribute_id is None:
                logging.warning(f"Skipping <{cls.attribute_tag}> with invalid ID: {element.get('ID')!r}")
                continue
            if attribute_id not in ids:
                ids.append(attribute_id)
        return ids

    @classmethod
    def parse_values(cls, attributes_xml: str | None, attribute_id: int) -> list[str]:
        """
        Get the raw selected values of one attribute.

        Args:
            attributes_xml: Selected-attributes XML
            attribute_id: Attribute (mapping) id

        Returns:
            Raw strings in document order: free text, a value id or a download guid
        """
        values = []
        for value_element in cls._value_elements(attributes_xml, attribute_id):
            value = value_element.find("Value", recursive=False)
            if value is not None:
                values.append(value.get_text())
        return values


class ProductAttributeParser(AttributesXmlParser):
    attribute_tag = "ProductAttribute"
    value_tag = "ProductAttributeValue"

    @classmethod
    def parse_product_attribute_mappings(
        cls,
        attributes_xml: str | None,
        session: Session
    ) -> list[ProductAttributeMappingDTO]:
        """
        Get the product attribute mappings referenced by the XML.

        Returns:
            Mappings in document order; ids unknown to the database are left out
        """
        mapping_ids = cls.parse_attribute_ids(attributes_xml)
        mappings = ProductAttributeRepository.get_mappings_by_ids(mapping_ids, session)
        return [mappings[mapping_id] for mapping_id in mapping_ids if mapping_id in mappings]

    @classmethod
    def parse_product_attribute_values(
        cls,
        attributes_xml: str | None,
        mapping_id: int,
        session: Session
    ) -> list[ProductAttributeValueDTO]:
        """
        Get the selected attribute values of one mapping.

        A <Quantity> element next to <Value> overrides the stored quantity
        (customer-entered quantity of an associated product).
        Non-numeric ids, unknown ids and values of another mapping are skipped.
        """
        values = []
        for value_element in cls._value_elements(attributes_xml, mapping_id):
            value = value_element.find("Value", recursive=False)
            value_id = cls.parse_id(value.get_text() if value is not None else None)
            if value_id is None:
                continue

            attribute_value = ProductAttributeRepository.get_value_by_id(value_id, session)
            if attribute_value is None or attribute_value.mapping_id != mapping_id:
                logging.debug(f"Attribute value {value_id} not found for mapping {mapping_id}")
                continue

            quantity_element = value_element.find("Quantity", recursive=False)
            quantity = cls.parse_id(quantity_element.get_text() if quantity_element is not None else None)
            if quantity is not None and quantity > 0:
                attribute_value = attribute_value.model_copy(update={"quantity": quantity})

            values.append(attribute_value)
        return values

    @classmethod
    def get_gift_card_attributes(cls, attributes_xml: str | None) -> GiftCardAttributesDTO:
        """Get gift card sender/recipient fields; missing fields are empty strings."""
        root = cls._load(attributes_xml)
        gift_card_info = root.find("GiftCardInfo", recursive=False) if root is not None else None
        if gift_card_info is None:
            return GiftCardAttributesDTO()

        def field(tag_name: str) -> str:
            element = gift_card_info.find(tag_name, recursive=False)
            return element.get_text() if element is not None else ""

        return GiftCardAttributesDTO(
            recipient_name=field("RecipientName"),
            recipient_email=field("RecipientEmail"),
            sender_name=field("SenderName"),
            sender_email=field("SenderEmail"),
            message=field("Message"),
        )


class CheckoutAttributeParser(AttributesXmlParser):
    attribute_tag = "CheckoutAttribute"
    value_tag = "CheckoutAttributeValue"

    @classmethod
    def parse_checkout_attributes(cls, attributes_xml: str | None, session: Session) -> list[CheckoutAttributeDTO]:
        """Get the checkout attributes referenced by the XML, in document order."""
        attribute_ids = cls.parse_attribute_ids(attributes_xml)
        attributes = CheckoutAttributeRepository.get_by_ids(attribute_ids, session)
        return [attributes[attribute_id] for attribute_id in attribute_ids if attribute_id in attributes]
