from decimal import Decimal

from pydantic import BaseModel, Field
from sqlalchemy import Column, Integer, String, Numeric, Boolean, ForeignKey, JSON
from sqlalchemy.orm import relationship

from enums.attribute_control_type import AttributeControlType
from models.base import Base


class CheckoutAttribute(Base):
    """Order-level option chosen during checkout (e.g. "Gift wrapping")."""
    __tablename__ = 'checkout_attributes'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    localized_names = Column(JSON, nullable=False, default=dict)
    control_type = Column(String(20), nullable=False, default=AttributeControlType.DROPDOWN_LIST.value)
    is_tax_exempt = Column(Boolean, nullable=False, default=False)
    display_order = Column(Integer, nullable=False, default=0)

    values = relationship("CheckoutAttributeValue", back_populates="checkout_attribute",
                          cascade="all, delete-orphan")


class CheckoutAttributeValue(Base):
    __tablename__ = 'checkout_attribute_values'

    id = Column(Integer, primary_key=True, autoincrement=True)
    checkout_attribute_id = Column(Integer, ForeignKey("checkout_attributes.id", ondelete="CASCADE"),
                                   nullable=False)
    name = Column(String, nullable=False)
    localized_names = Column(JSON, nullable=False, default=dict)
    price_adjustment = Column(Numeric(18, 4), nullable=False, default=Decimal("0"))

    checkout_attribute = relationship("CheckoutAttribute", back_populates="values")


class CheckoutAttributeDTO(BaseModel):
    id: int | None = None
    name: str = ""
    localized_names: dict[str, str] = Field(default_factory=dict)
    control_type: AttributeControlType = AttributeControlType.DROPDOWN_LIST
    is_tax_exempt: bool = False

    @property
    def should_have_values(self) -> bool:
        return self.control_type.should_have_values


class CheckoutAttributeValueDTO(BaseModel):
    id: int | None = None
    checkout_attribute_id: int | None = None
    name: str = ""
    localized_names: dict[str, str] = Field(default_factory=dict)
    price_adjustment: Decimal = Decimal("0")
