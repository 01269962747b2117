from decimal import Decimal

from models.customer import WorkContextDTO


class CurrencyService:
    """Conversion between the primary store currency and the working currency."""

    @staticmethod
    def convert_from_primary_store_currency(amount: Decimal, work_context: WorkContextDTO) -> Decimal:
        """
        Convert an amount from the primary store currency (config.CURRENCY)
        into the work context currency.

        Args:
            amount: Amount in primary store currency
            work_context: Current language/currency; currency_rate is primary → working

        Returns:
            Converted amount (unrounded)

        Example:
            >>> CurrencyService.convert_from_primary_store_currency(
            ...     Decimal("10"), WorkContextDTO(currency=Currency.USD, currency_rate=Decimal("1.1")))
            Decimal('11.0')
        """
        return amount * work_context.currency_rate
