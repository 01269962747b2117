from sqlalchemy import select
from sqlalchemy.orm import Session

from db import session_execute
from models.product_attribute import (
    ProductAttributeMapping,
    ProductAttributeMappingDTO,
    ProductAttributeValue,
    ProductAttributeValueDTO,
)


class ProductAttributeRepository:
    """Repository for product attribute mappings and their values."""

    @staticmethod
    def get_mappings_by_ids(
        mapping_ids: list[int],
        session: Session
    ) -> dict[int, ProductAttributeMappingDTO]:
        """
        Get product attribute mappings by id.

        Args:
            mapping_ids: Mapping ids referenced by the attributes XML
            session: Database session

        Returns:
            Dict of {mapping_id: ProductAttributeMappingDTO}; unknown ids are absent
        """
        if not mapping_ids:
            return {}

        stmt = select(ProductAttributeMapping).where(ProductAttributeMapping.id.in_(mapping_ids))
        mappings = session_execute(stmt, session).scalars().all()
        return {
            mapping.id: ProductAttributeMappingDTO.model_validate(mapping, from_attributes=True)
            for mapping in mappings
        }

    @staticmethod
    def get_value_by_id(value_id: int, session: Session) -> ProductAttributeValueDTO | None:
        stmt = select(ProductAttributeValue).where(ProductAttributeValue.id == value_id)
        value = session_execute(stmt, session).scalar()
        if value is None:
            return None
        return ProductAttributeValueDTO.model_validate(value, from_attributes=True)
