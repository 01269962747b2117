from decimal import Decimal

from pydantic import BaseModel

from enums.currency import Currency


class CustomerDTO(BaseModel):
    id: int | None = None
    is_tax_exempt: bool = False


class WorkContextDTO(BaseModel):
    """
    Language and currency the current request is rendered in.

    currency_rate converts amounts from the primary store currency
    (config.CURRENCY) into the working currency.
    """
    language: str = "en"
    currency: Currency = Currency.EUR
    currency_rate: Decimal = Decimal("1")
