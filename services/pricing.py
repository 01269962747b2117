from decimal import Decimal, ROUND_HALF_UP

from models.customer import CustomerDTO, WorkContextDTO
from models.product import ProductDTO
from models.product_attribute import ProductAttributeValueDTO
from utils.localizator import Localizator


class PriceCalculationService:
    """Service for attribute value price adjustments."""

    @staticmethod
    def get_attribute_value_price_adjustment(
        value: ProductAttributeValueDTO,
        product: ProductDTO,
        customer: CustomerDTO
    ) -> Decimal:
        """
        Calculate the price delta of a selected attribute value.

        Flat adjustments are returned as stored. Percentage adjustments
        are applied to the product base price.

        Example with product price €40.00:
            - value "+€5" flat       → 5
            - value "+10%" percentage → 4.00
            - value "-25%" percentage → -10.00

        Args:
            value: Selected attribute value
            product: Product the value belongs to
            customer: Customer the price is calculated for

        Returns:
            Price adjustment excluding tax, in primary store currency
        """
        if value.price_adjustment_use_percentage:
            return product.price * value.price_adjustment / Decimal("100")
        return value.price_adjustment


class PriceFormatter:
    """Formats amounts for display in the working currency."""

    @staticmethod
    def format_price(amount: Decimal, work_context: WorkContextDTO) -> str:
        """
        Format an amount with the currency symbol of the work context.

        Args:
            amount: Amount already converted to the working currency
            work_context: Current language/currency

        Returns:
            Formatted price, e.g. "€5.00"
        """
        currency_symbol = Localizator.get_currency_symbol(work_context.currency, lang=work_context.language)
        rounded = amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        return f"{currency_symbol}{rounded:.2f}"

    @staticmethod
    def format_percentage(amount: Decimal) -> str:
        """
        Format a percentage without trailing zeros.

        Examples:
            >>> PriceFormatter.format_percentage(Decimal("10.00"))
            '10'
            >>> PriceFormatter.format_percentage(Decimal("-2.50"))
            '-2.5'
        """
        if amount == amount.to_integral_value():
            return f"{amount.to_integral_value():f}"
        return f"{amount.normalize():f}"
