from sqlalchemy import select
from sqlalchemy.orm import Session

from db import session_execute
from models.checkout_attribute import (
    CheckoutAttribute,
    CheckoutAttributeDTO,
    CheckoutAttributeValue,
    CheckoutAttributeValueDTO,
)


class CheckoutAttributeRepository:
    """Repository for checkout attributes and their values."""

    @staticmethod
    def get_by_ids(attribute_ids: list[int], session: Session) -> dict[int, CheckoutAttributeDTO]:
        if not attribute_ids:
            return {}

        stmt = select(CheckoutAttribute).where(CheckoutAttribute.id.in_(attribute_ids))
        attributes = session_execute(stmt, session).scalars().all()
        return {
            attribute.id: CheckoutAttributeDTO.model_validate(attribute, from_attributes=True)
            for attribute in attributes
        }

    @staticmethod
    def get_value_by_id(value_id: int, session: Session) -> CheckoutAttributeValueDTO | None:
        stmt = select(CheckoutAttributeValue).where(CheckoutAttributeValue.id == value_id)
        value = session_execute(stmt, session).scalar()
        if value is None:
            return None
        return CheckoutAttributeValueDTO.model_validate(value, from_attributes=True)
