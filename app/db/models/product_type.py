# app/db/models/product_type.py
from sqlalchemy import Column, String, Uuid, func
from sqlalchemy.orm import relationship
from sqlalchemy.dialects.postgresql import TIMESTAMP
from app.db.base import Base
import uuid


class ProductType(Base):
    """
    Product type (e.g. "Lubricant", "Massager"). Part of the variation grouping key.
    """

    __tablename__ = "product_types"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False, index=True)

    # Timestamps
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    products = relationship("Product", back_populates="product_type")

    def __repr__(self):
        return f"<ProductType(id={self.id}, name='{self.name}')>"
