# app/db/repositories/variation_attribute_repository.py
from typing import List
from uuid import UUID
from sqlalchemy.orm import Session
from app.db.models.variation_attribute import ProductVariationAttribute
from app.schemas.variation_attribute import VariationAttributeCreate


class VariationAttributeRepository:
    """Repository for ProductVariationAttribute rows"""

    def __init__(self, db_session: Session):
        self.db_session = db_session

    def create(
        self, attribute_data: VariationAttributeCreate, commit: bool = True
    ) -> ProductVariationAttribute:
        """Insert one variation attribute row"""
        db_attribute = ProductVariationAttribute(**attribute_data.model_dump())
        self.db_session.add(db_attribute)
        if commit:
            self.db_session.commit()
            self.db_session.refresh(db_attribute)
        else:
            self.db_session.flush()
        return db_attribute

    def list_by_product(self, product_id: UUID) -> List[ProductVariationAttribute]:
        """List attribute rows for one product"""
        return (
            self.db_session.query(ProductVariationAttribute)
            .filter(ProductVariationAttribute.product_id == product_id)
            .order_by(ProductVariationAttribute.sort_order, ProductVariationAttribute.name)
            .all()
        )
