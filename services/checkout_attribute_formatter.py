"""
Checkout Attribute Formatter

Renders order-level checkout attributes (gift wrapping, delivery notes, ...)
for the order summary, one line per selected value.
"""

import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from enums.attribute_control_type import AttributeControlType
from enums.localization_entity import LocalizationEntity
from models.checkout_attribute import CheckoutAttributeDTO
from models.customer import CustomerDTO, WorkContextDTO
from models.formatted_attribute import FormattedAttribute
from repositories.checkout_attribute import CheckoutAttributeRepository
from services.attribute_parser import CheckoutAttributeParser
from services.currency import CurrencyService
from services.download import DownloadService
from services.pricing import PriceFormatter
from services.tax import TaxService
from utils.attribute_rendering import join_lines, render_formatted_attribute
from utils.html_escape import format_text
from utils.localizator import Localizator


class CheckoutAttributeFormatter:
    """Formats selected checkout attributes."""

    @staticmethod
    def _build_text_attribute(
        attribute: CheckoutAttributeDTO,
        raw_value: str,
        work_context: WorkContextDTO,
        session: Session,
        html_encode: bool,
        allow_hyperlinks: bool
    ) -> FormattedAttribute | None:
        attribute_name = Localizator.get_localized_name(attribute, work_context.language)

        match attribute.control_type:
            case AttributeControlType.MULTILINE_TEXTBOX:
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
                return FormattedAttribute(name=attribute_name, value=raw_value)

    @staticmethod
    def _build_value_attribute(
        attribute: CheckoutAttributeDTO,
        raw_value: str,
        customer: CustomerDTO,
        work_context: WorkContextDTO,
        session: Session,
        render_prices: bool
    ) -> FormattedAttribute | None:
        """
        Build the record of a selected checkout attribute value.

        Returns:
            FormattedAttribute, or None when raw_value is not the id of a value of this attribute
        """
        value_id = CheckoutAttributeParser.parse_id(raw_value)
        if value_id is None:
            logging.debug(f"Checkout attribute {attribute.id} value is not an id: {raw_value!r}")
            return None

        value = CheckoutAttributeRepository.get_value_by_id(value_id, session)
        if value is None or value.checkout_attribute_id != attribute.id:
            logging.debug(f"Checkout attribute value {value_id} not found for attribute {attribute.id}")
            return None

        price_adjustment = ""
        if render_prices:
            # Always a flat amount, only surcharges are shown
            adjustment_base = TaxService.get_checkout_attribute_price(attribute, value, customer)
            adjustment = CurrencyService.convert_from_primary_store_currency(adjustment_base, work_context)
            if adjustment_base > Decimal("0"):
                price_adjustment = Localizator.get_text(
                    LocalizationEntity.CHECKOUT, "formatted_attribute_price_adjustment", lang=work_context.language
                ).format("+", PriceFormatter.format_price(adjustment, work_context), "")

        return FormattedAttribute(
            name=Localizator.get_localized_name(attribute, work_context.language),
            value=Localizator.get_localized_name(value, work_context.language),
            price_adjustment=price_adjustment
        )

    @staticmethod
    def format_attributes(
        attributes_xml: str,
        customer: CustomerDTO,
        work_context: WorkContextDTO,
        session: Session,
        separator: str = "<br />",
        html_encode: bool = True,
        render_prices: bool = True,
        allow_hyperlinks: bool = True
    ) -> str:
        """
        Format the selected checkout attributes of a cart or order.

        Args:
            attributes_xml: Checkout-attributes XML
            customer: Customer prices are calculated for
            work_context: Language and currency to render in
            session: Database session for attribute/download lookups
            separator: Placed between lines
            html_encode: HTML-escape names, values and prices
            render_prices: Append price adjustments of selected values
            allow_hyperlinks: Render file uploads as download links

        Returns:
            Formatted attributes, "" when nothing was selected
        """
        template = Localizator.get_text(
            LocalizationEntity.CHECKOUT, "checkout_formatted_attribute", lang=work_context.language
        )

        lines = []
        for attribute in CheckoutAttributeParser.parse_checkout_attributes(attributes_xml, session):
            for raw_value in CheckoutAttributeParser.parse_values(attributes_xml, attribute.id):
                if attribute.should_have_values:
                    formatted_attribute = CheckoutAttributeFormatter._build_value_attribute(
                        attribute, raw_value, customer, work_context, session, render_prices
                    )
                else:
                    formatted_attribute = CheckoutAttributeFormatter._build_text_attribute(
                        attribute, raw_value, work_context, session, html_encode, allow_hyperlinks
                    )

                if formatted_attribute is not None:
                    lines.append(render_formatted_attribute(template, formatted_attribute, html_encode))

        return join_lines(lines, separator)
