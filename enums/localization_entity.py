from enum import Enum


class LocalizationEntity(Enum):
    """Top-level sections of the l10n/<lang>.json resource files."""

    CATALOG = "catalog"
    CHECKOUT = "checkout"
    COMMON = "common"
