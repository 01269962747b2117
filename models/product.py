from decimal import Decimal

from pydantic import BaseModel
from sqlalchemy import Column, Integer, String, Numeric, Boolean, CheckConstraint
from sqlalchemy.orm import relationship

from enums.gift_card_type import GiftCardType
from models.base import Base


class Product(Base):
    __tablename__ = 'products'

    id = Column(Integer, primary_key=True, unique=True)
    name = Column(String, nullable=False)
    price = Column(Numeric(18, 4), nullable=False, default=Decimal("0"))

    # Gift cards render sender/recipient info next to the attributes
    is_gift_card = Column(Boolean, nullable=False, default=False)
    gift_card_type = Column(String(10), nullable=False, default=GiftCardType.VIRTUAL.value)

    attribute_mappings = relationship("ProductAttributeMapping", back_populates="product",
                                      cascade="all, delete-orphan")

    __table_args__ = (
        CheckConstraint('price >= 0', name='check_product_price_non_negative'),
    )


class ProductDTO(BaseModel):
    id: int | None = None
    name: str = ""
    price: Decimal = Decimal("0")
    is_gift_card: bool = False
    gift_card_type: GiftCardType = GiftCardType.VIRTUAL
