# app/db/models/product.py
from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Uuid,
    func,
)
from sqlalchemy.orm import relationship
from sqlalchemy.dialects.postgresql import TIMESTAMP
from app.db.base import Base
import uuid


class Product(Base):
    """
    Product model representing one independently listed catalog item.

    A product with ``parent_product_id`` set is a variation of that parent;
    a parent has ``is_variable_product`` set and no parent of its own.
    """

    __tablename__ = "products"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    sku = Column(
        String, unique=True, nullable=False, index=True, comment="Stock keeping unit"
    )
    name = Column(String, nullable=False, index=True)
    manufacturer_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("manufacturers.id", ondelete="SET NULL"),
        nullable=True,
    )
    product_type_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("product_types.id", ondelete="SET NULL"),
        nullable=True,
    )
    price = Column(Numeric(10, 2), nullable=True)
    stock_status = Column(String, nullable=False, default="instock")
    stock_quantity = Column(Integer, nullable=False, default=0)
    active = Column(Boolean, nullable=False, default=True, index=True)
    parent_product_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("products.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
        comment="Set when this product is a variation of another product",
    )
    is_variable_product = Column(Boolean, nullable=False, default=False)

    # Timestamps
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    manufacturer = relationship("Manufacturer", back_populates="products")
    product_type = relationship("ProductType", back_populates="products")
    parent = relationship(
        "Product", remote_side=[id], back_populates="variations"
    )
    variations = relationship("Product", back_populates="parent")
    variation_attributes = relationship(
        "ProductVariationAttribute",
        back_populates="product",
        cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', sku='{self.sku}')>"
