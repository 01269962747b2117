from decimal import Decimal

from pydantic import BaseModel, Field
from sqlalchemy import Column, Integer, String, Numeric, Boolean, ForeignKey, JSON, CheckConstraint
from sqlalchemy.orm import relationship

from enums.attribute_control_type import AttributeControlType
from enums.attribute_value_type import AttributeValueType
from models.base import Base


class ProductAttributeMapping(Base):
    """
    Attribute attached to a product (e.g. "Color" on a T-shirt).

    The mapping id is what the attributes XML references
    (<ProductAttribute ID="...">).
    """
    __tablename__ = 'product_attribute_mappings'

    id = Column(Integer, primary_key=True, autoincrement=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    name = Column(String, nullable=False)
    localized_names = Column(JSON, nullable=False, default=dict)
    control_type = Column(String(20), nullable=False, default=AttributeControlType.DROPDOWN_LIST.value)
    display_order = Column(Integer, nullable=False, default=0)

    product = relationship("Product", back_populates="attribute_mappings")
    values = relationship("ProductAttributeValue", back_populates="mapping", cascade="all, delete-orphan")


class ProductAttributeValue(Base):
    __tablename__ = 'product_attribute_values'

    id = Column(Integer, primary_key=True, autoincrement=True)
    mapping_id = Column(Integer, ForeignKey("product_attribute_mappings.id", ondelete="CASCADE"), nullable=False)
    name = Column(String, nullable=False)
    localized_names = Column(JSON, nullable=False, default=dict)
    price_adjustment = Column(Numeric(18, 4), nullable=False, default=Decimal("0"))
    price_adjustment_use_percentage = Column(Boolean, nullable=False, default=False)
    value_type = Column(String(25), nullable=False, default=AttributeValueType.SIMPLE.value)
    quantity = Column(Integer, nullable=False, default=1)

    mapping = relationship("ProductAttributeMapping", back_populates="values")

    __table_args__ = (
        CheckConstraint('quantity > 0', name='check_attribute_value_quantity_positive'),
    )


class ProductAttributeMappingDTO(BaseModel):
    id: int | None = None
    product_id: int | None = None
    name: str = ""
    localized_names: dict[str, str] = Field(default_factory=dict)
    control_type: AttributeControlType = AttributeControlType.DROPDOWN_LIST

    @property
    def should_have_values(self) -> bool:
        return self.control_type.should_have_values


class ProductAttributeValueDTO(BaseModel):
    id: int | None = None
    mapping_id: int | None = None
    name: str = ""
    localized_names: dict[str, str] = Field(default_factory=dict)
    price_adjustment: Decimal = Decimal("0")
    price_adjustment_use_percentage: bool = False
    value_type: AttributeValueType = AttributeValueType.SIMPLE
    quantity: int = 1
