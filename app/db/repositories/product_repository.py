# app/db/repositories/product_repository.py
from typing import Iterable, List, Optional
from uuid import UUID
from sqlalchemy.orm import Session
from app.db.models.product import Product
from app.schemas.product import ProductCreate, ProductUpdate


class ProductRepository:
    """Repository for CRUD operations on Product model"""

    def __init__(self, db_session: Session):
        self.db_session = db_session

    def get_by_id(self, product_id: UUID) -> Optional[Product]:
        """Get product by ID"""
        return self.db_session.query(Product).filter(Product.id == product_id).first()

    def get_by_sku(self, sku: str) -> Optional[Product]:
        """Get product by SKU"""
        return self.db_session.query(Product).filter(Product.sku == sku).first()

    def list_active_top_level(
        self,
        manufacturer_id: Optional[UUID] = None,
        exclude_ids: Optional[Iterable[UUID]] = None,
    ) -> List[Product]:
        """
        List active products that are not variations of another product.

        These are the variation-detection candidates, returned in discovery
        order (creation time, then SKU).
        """
        query = self.db_session.query(Product).filter(
            Product.active.is_(True),
            Product.parent_product_id.is_(None),
        )
        if manufacturer_id:
            query = query.filter(Product.manufacturer_id == manufacturer_id)
        if exclude_ids:
            query = query.filter(Product.id.not_in(list(exclude_ids)))
        return query.order_by(Product.created_at, Product.sku).all()

    def list_variations(self, parent_id: UUID) -> List[Product]:
        """List products attached to a variable parent product"""
        return (
            self.db_session.query(Product)
            .filter(Product.parent_product_id == parent_id)
            .order_by(Product.sku)
            .all()
        )

    def create(self, product_data: ProductCreate) -> Product:
        """Create a new product"""
        db_product = Product(**product_data.model_dump())
        self.db_session.add(db_product)
        self.db_session.commit()
        self.db_session.refresh(db_product)
        return db_product

    def update(
        self, product_id: UUID, product_data: ProductUpdate, commit: bool = True
    ) -> Optional[Product]:
        """
        Update the fields set on ``product_data``.

        With ``commit=False`` the change is only flushed and the caller owns
        the transaction.
        """
        db_product = self.get_by_id(product_id)
        if not db_product:
            return None
        for key, value in product_data.model_dump(exclude_unset=True).items():
            setattr(db_product, key, value)
        if commit:
            self.db_session.commit()
            self.db_session.refresh(db_product)
        else:
            self.db_session.flush()
        return db_product
