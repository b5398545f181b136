# app/db/models/variation_attribute.py
from sqlalchemy import Column, String, ForeignKey, Integer, Uuid, func
from sqlalchemy.orm import relationship
from sqlalchemy.dialects.postgresql import TIMESTAMP
from app.db.base import Base
import uuid


class ProductVariationAttribute(Base):
    """
    One attribute (e.g. Volume = "4 OZ") describing a single product of a
    merged variation set. Rows are written by the merge engine only.
    """

    __tablename__ = "product_variation_attributes"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    product_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String, nullable=False, comment="Attribute category, e.g. Size")
    value = Column(String, nullable=False, comment="Extracted literal, e.g. 4 OZ")
    sort_order = Column(Integer, nullable=False, default=0)

    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    # Relationships
    product = relationship("Product", back_populates="variation_attributes")

    def __repr__(self):
        return (
            f"<ProductVariationAttribute(product_id={self.product_id}, "
            f"name='{self.name}', value='{self.value}')>"
        )
