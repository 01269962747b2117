from enum import Enum


class Currency(str, Enum):
    """
    Store currencies.

    Symbols are localized via l10n ("<code>_symbol" keys in the common section).
    """
    EUR = "EUR"
    USD = "USD"
    GBP = "GBP"
    CHF = "CHF"
