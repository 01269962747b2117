import logging
from decimal import Decimal

import config
from models.checkout_attribute import CheckoutAttributeDTO, CheckoutAttributeValueDTO
from models.customer import CustomerDTO
from models.product import ProductDTO


class TaxService:
    """
    Applies the store tax rate to displayed prices.

    Store prices are kept excluding tax. When config.DISPLAY_PRICES_INCLUDING_TAX
    is enabled, config.TAX_RATE_PERCENT is added unless the customer (or the
    checkout attribute) is tax exempt.
    """

    @staticmethod
    def _apply_tax(price: Decimal, is_exempt: bool) -> Decimal:
        if is_exempt or not config.DISPLAY_PRICES_INCLUDING_TAX:
            return price
        return price * (Decimal("100") + config.TAX_RATE_PERCENT) / Decimal("100")

    @staticmethod
    def get_product_price(product: ProductDTO, price: Decimal, customer: CustomerDTO) -> Decimal:
        """
        Get a product-related price (e.g. an attribute price adjustment) as displayed to the customer.

        Args:
            product: Product the price belongs to
            price: Price excluding tax, in primary store currency
            customer: Customer the price is displayed to

        Returns:
            Price with tax applied according to store settings
        """
        if customer.is_tax_exempt:
            logging.debug(f"Customer {customer.id} is tax exempt, product {product.id} price shown without tax")
        return TaxService._apply_tax(price, customer.is_tax_exempt)

    @staticmethod
    def get_checkout_attribute_price(
        checkout_attribute: CheckoutAttributeDTO,
        value: CheckoutAttributeValueDTO,
        customer: CustomerDTO
    ) -> Decimal:
        """Get the price adjustment of a checkout attribute value as displayed to the customer."""
        is_exempt = customer.is_tax_exempt or checkout_attribute.is_tax_exempt
        return TaxService._apply_tax(value.price_adjustment, is_exempt)
