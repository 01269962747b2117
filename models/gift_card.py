from pydantic import BaseModel


class GiftCardAttributesDTO(BaseModel):
    """Sender/recipient data stored in the <GiftCardInfo> element of the attributes XML."""
    recipient_name: str = ""
    recipient_email: str = ""
    sender_name: str = ""
    sender_email: str = ""
    message: str = ""
