from enum import Enum


class AttributeValueType(Enum):
    SIMPLE = "SIMPLE"                                   # Plain option (e.g. "Red")
    ASSOCIATED_TO_PRODUCT = "ASSOCIATED_TO_PRODUCT"     # Option that adds another product (carries a quantity)
