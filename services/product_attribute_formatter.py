"""
Product Attribute Formatter

Renders the attributes selected for a cart item or order item as text,
one line per attribute value, e.g.:

    Color: Red (+€5.00)<br />Engraving: Happy Birthday<br />From: Jane <jane@example.com>

Used for the shopping cart, order summary and order e-mails.
"""

from decimal import Decimal

from sqlalchemy.orm import Session

import config
from enums.attribute_control_type import AttributeControlType
from enums.attribute_value_type import AttributeValueType
from enums.gift_card_type import GiftCardType
from enums.localization_entity import LocalizationEntity
from models.customer import CustomerDTO, WorkContextDTO
from models.formatted_attribute import FormattedAttribute
from models.product import ProductDTO
from models.product_attribute import ProductAttributeMappingDTO, ProductAttributeValueDTO
from services.attribute_parser import ProductAttributeParser
from services.currency import CurrencyService
from services.download import DownloadService
from services.pricing import PriceCalculationService, PriceFormatter
from services.tax import TaxService
from utils.attribute_rendering import join_lines, render_formatted_attribute
from utils.html_escape import format_text, safe_html
from utils.localizator import Localizator


class ProductAttributeFormatter:
    """Formats selected product attributes and gift card info."""

    @staticmethod
    def _build_text_attribute(
        mapping: ProductAttributeMappingDTO,
        raw_value: str,
        work_context: WorkContextDTO,
        session: Session,
        html_encode: bool,
        allow_hyperlinks: bool
    ) -> FormattedAttribute | None:
        """
        Build the record of a free-text or file attribute value.

        Returns:
            FormattedAttribute, or None when a file upload points to no download
        """
        attribute_name = Localizator.get_localized_name(mapping, work_context.language)

        match mapping.control_type:
            case AttributeControlType.MULTILINE_TEXTBOX:
                # Never re-encode, format_text() escapes and adds <br />
                return FormattedAttribute(
                    name=attribute_name,
                    value=format_text(raw_value),
                    dont_encode_value=True
                )
            case AttributeControlType.FILE_UPLOAD:
                download = DownloadService.get_download_by_guid(raw_value, session)
                if download is None:
                    return None
                return FormattedAttribute(
                    name=attribute_name,
                    value=DownloadService.format_file_upload(download, html_encode, allow_hyperlinks),
                    dont_encode_value=True
                )
            case _:
                # Textbox, datepicker
                return FormattedAttribute(name=attribute_name, value=raw_value)

    @staticmethod
    def _format_price_adjustment(
        product: ProductDTO,
        value: ProductAttributeValueDTO,
        customer: CustomerDTO,
        work_context: WorkContextDTO
    ) -> str:
        """
        Format the price adjustment of a value, e.g. " (+€5.00)" or " (+10%)".

        Percentages: "+" prefix when positive; negative ones keep the minus sign
        of the number itself. Amounts: sign is decided before currency conversion,
        negative amounts are negated and prefixed with "-". Zero renders nothing.
        """
        template = Localizator.get_text(
            LocalizationEntity.CATALOG, "formatted_attribute_price_adjustment", lang=work_context.language
        )

        if value.price_adjustment_use_percentage:
            percentage = PriceFormatter.format_percentage(value.price_adjustment)
            if value.price_adjustment > Decimal("0"):
                return template.format("+", percentage, "%")
            elif value.price_adjustment < Decimal("0"):
                return template.format("", percentage, "%")
            return ""

        adjustment = PriceCalculationService.get_attribute_value_price_adjustment(value, product, customer)
        adjustment_base = TaxService.get_product_price(product, adjustment, customer)
        adjustment_converted = CurrencyService.convert_from_primary_store_currency(adjustment_base, work_context)
        if adjustment_base > Decimal("0"):
            return template.format("+", PriceFormatter.format_price(adjustment_converted, work_context), "")
        elif adjustment_base < Decimal("0"):
            return template.format("-", PriceFormatter.format_price(-adjustment_converted, work_context), "")
        return ""

    @staticmethod
    def _format_quantity(value: ProductAttributeValueDTO, work_context: WorkContextDTO) -> str:
        # Only associated products bought more than once
        if not config.RENDER_ASSOCIATED_ATTRIBUTE_VALUE_QUANTITY:
            return ""
        if value.value_type != AttributeValueType.ASSOCIATED_TO_PRODUCT or value.quantity <= 1:
            return ""
        return Localizator.get_text(
            LocalizationEntity.CATALOG, "attribute_quantity", lang=work_context.language
        ).format(value.quantity)

    @staticmethod
    def _build_value_attribute(
        product: ProductDTO,
        mapping: ProductAttributeMappingDTO,
        value: ProductAttributeValueDTO,
        customer: CustomerDTO,
        work_context: WorkContextDTO,
        render_prices: bool
    ) -> FormattedAttribute:
        price_adjustment = ""
        if render_prices:
            price_adjustment = ProductAttributeFormatter._format_price_adjustment(
                product, value, customer, work_context
            )

        return FormattedAttribute(
            name=Localizator.get_localized_name(mapping, work_context.language),
            value=Localizator.get_localized_name(value, work_context.language),
            price_adjustment=price_adjustment,
            quantity=ProductAttributeFormatter._format_quantity(value, work_context)
        )

    @staticmethod
    def _build_attributes(
        product: ProductDTO,
        attributes_xml: str,
        customer: CustomerDTO,
        work_context: WorkContextDTO,
        session: Session,
        html_encode: bool,
        render_prices: bool,
        allow_hyperlinks: bool
    ) -> list[FormattedAttribute]:
        attributes = []
        for mapping in ProductAttributeParser.parse_product_attribute_mappings(attributes_xml, session):
            if not mapping.should_have_values:
                for raw_value in ProductAttributeParser.parse_values(attributes_xml, mapping.id):
                    attribute = ProductAttributeFormatter._build_text_attribute(
                        mapping, raw_value, work_context, session, html_encode, allow_hyperlinks
                    )
                    if attribute is not None:
                        attributes.append(attribute)
            else:
                for value in ProductAttributeParser.parse_product_attribute_values(attributes_xml, mapping.id, session):
                    attributes.append(ProductAttributeFormatter._build_value_attribute(
                        product, mapping, value, customer, work_context, render_prices
                    ))
        return attributes

    @staticmethod
    def _format_gift_card_lines(
        product: ProductDTO,
        attributes_xml: str,
        work_context: WorkContextDTO,
        html_encode: bool
    ) -> tuple[str, str]:
        """Return the (sender, recipient) lines of a gift card."""
        gift_card = ProductAttributeParser.get_gift_card_attributes(attributes_xml)
        lang = work_context.language

        if product.gift_card_type == GiftCardType.VIRTUAL:
            gift_card_from = Localizator.get_text(LocalizationEntity.CATALOG, "gift_card_from_virtual", lang=lang)\
                .format(gift_card.sender_name, gift_card.sender_email)
            gift_card_for = Localizator.get_text(LocalizationEntity.CATALOG, "gift_card_for_virtual", lang=lang)\
                .format(gift_card.recipient_name, gift_card.recipient_email)
        else:
            gift_card_from = Localizator.get_text(LocalizationEntity.CATALOG, "gift_card_from_physical", lang=lang)\
                .format(gift_card.sender_name)
            gift_card_for = Localizator.get_text(LocalizationEntity.CATALOG, "gift_card_for_physical", lang=lang)\
                .format(gift_card.recipient_name)

        if html_encode:
            gift_card_from = safe_html(gift_card_from)
            gift_card_for = safe_html(gift_card_for)

        return gift_card_from, gift_card_for

    @staticmethod
    def format_attributes(
        product: ProductDTO,
        attributes_xml: str,
        customer: CustomerDTO,
        work_context: WorkContextDTO,
        session: Session,
        separator: str = "<br />",
        html_encode: bool = True,
        render_prices: bool = True,
        render_product_attributes: bool = True,
        render_gift_card_attributes: bool = True,
        allow_hyperlinks: bool = True
    ) -> str:
        """
        Format the selected attributes of a product.

        Args:
            product: Product the attributes belong to
            attributes_xml: Selected-attributes XML of the cart/order item
            customer: Customer prices are calculated for
            work_context: Language and currency to render in
            session: Database session for attribute/download lookups
            separator: Placed between lines
            html_encode: HTML-escape names, values and prices
            render_prices: Append price adjustments of selected values
            render_product_attributes: Render the attribute lines
            render_gift_card_attributes: Append gift card sender/recipient lines
            allow_hyperlinks: Render file uploads as download links

        Returns:
            Formatted attributes, "" when nothing was selected

        Raises:
            InvalidAttributesXmlException: If attributes_xml is not valid
            ResourceNotFoundException: If a resource template is missing
        """
        result = ""

        if render_product_attributes:
            template = Localizator.get_text(
                LocalizationEntity.CATALOG, "formatted_attribute", lang=work_context.language
            )
            attributes = ProductAttributeFormatter._build_attributes(
                product, attributes_xml, customer, work_context, session,
                html_encode, render_prices, allow_hyperlinks
            )
            result = join_lines(
                (render_formatted_attribute(template, attribute, html_encode) for attribute in attributes),
                separator
            )

        if not render_gift_card_attributes or not product.is_gift_card:
            return result

        gift_card_from, gift_card_for = ProductAttributeFormatter._format_gift_card_lines(
            product, attributes_xml, work_context, html_encode
        )
        if result:
            result += separator
        result += gift_card_from
        result += separator
        result += gift_card_for

        return result
