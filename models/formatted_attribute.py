from pydantic import BaseModel, ConfigDict


class FormattedAttribute(BaseModel):
    """
    One attribute/value pair ready to be rendered into a single line.

    dont_encode_value marks values that already contain intentional markup
    (multiline text, file upload links) and must not be HTML-escaped again.
    """
    model_config = ConfigDict(frozen=True)

    name: str = ""
    value: str = ""
    price_adjustment: str = ""
    quantity: str = ""
    dont_encode_value: bool = False

    @property
    def is_empty(self) -> bool:
        return not (self.name or self.value or self.price_adjustment or self.quantity)
