from sqlalchemy import select
from sqlalchemy.orm import Session

from db import session_execute
from models.product import Product, ProductDTO


class ProductRepository:

    @staticmethod
    def get_by_id(product_id: int, session: Session) -> ProductDTO | None:
        stmt = select(Product).where(Product.id == product_id)
        product = session_execute(stmt, session).scalar()
        if product is None:
            return None
        return ProductDTO.model_validate(product, from_attributes=True)
