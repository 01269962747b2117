from enum import Enum


class GiftCardType(Enum):
    VIRTUAL = "VIRTUAL"     # Sent by e-mail, sender/recipient e-mails are shown
    PHYSICAL = "PHYSICAL"   # Shipped, only names are shown
