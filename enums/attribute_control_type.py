from enum import Enum


class AttributeControlType(Enum):
    """
    How an attribute is presented to the customer.

    Free-text and file controls carry the raw customer input in the
    attributes XML; every other control selects one or more predefined values.
    """

    DROPDOWN_LIST = "DROPDOWN_LIST"
    RADIO_LIST = "RADIO_LIST"
    CHECKBOXES = "CHECKBOXES"
    TEXTBOX = "TEXTBOX"
    MULTILINE_TEXTBOX = "MULTILINE_TEXTBOX"
    DATEPICKER = "DATEPICKER"
    FILE_UPLOAD = "FILE_UPLOAD"
    COLOR_SQUARES = "COLOR_SQUARES"
    IMAGE_SQUARES = "IMAGE_SQUARES"
    READONLY_CHECKBOXES = "READONLY_CHECKBOXES"

    @property
    def should_have_values(self) -> bool:
        """
        Whether this control selects predefined attribute values.

        Examples:
            >>> AttributeControlType.DROPDOWN_LIST.should_have_values
            True
            >>> AttributeControlType.FILE_UPLOAD.should_have_values
            False
        """
        return self not in (
            AttributeControlType.TEXTBOX,
            AttributeControlType.MULTILINE_TEXTBOX,
            AttributeControlType.DATEPICKER,
            AttributeControlType.FILE_UPLOAD,
        )
