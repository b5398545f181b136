# app/schemas/product.py
from pydantic import BaseModel, Field
from typing import Optional
from uuid import UUID
from decimal import Decimal
from datetime import datetime


class ProductBase(BaseModel):
    """Base Pydantic model for Product data"""

    sku: str = Field(..., description="Stock keeping unit")
    name: str
    manufacturer_id: Optional[UUID] = Field(
        None, description="Manufacturer this product belongs to"
    )
    product_type_id: Optional[UUID] = Field(
        None, description="Product type this product belongs to"
    )
    price: Optional[Decimal] = None
    stock_status: str = Field("instock", description="e.g. 'instock', 'outofstock'")
    stock_quantity: int = 0
    active: bool = True
    parent_product_id: Optional[UUID] = Field(
        None, description="Parent product when this product is a variation"
    )
    is_variable_product: bool = False


class ProductCreate(ProductBase):
    """Schema for creating a new Product"""

    pass


class ProductUpdate(BaseModel):
    """Schema for updating a Product (all fields optional)"""

    sku: Optional[str] = None
    name: Optional[str] = None
    manufacturer_id: Optional[UUID] = None
    product_type_id: Optional[UUID] = None
    price: Optional[Decimal] = None
    stock_status: Optional[str] = None
    stock_quantity: Optional[int] = None
    active: Optional[bool] = None
    parent_product_id: Optional[UUID] = None
    is_variable_product: Optional[bool] = None


class ProductInDB(ProductBase):
    """Schema for Product as stored in DB (includes DB fields)"""

    id: UUID
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ProductResponse(ProductInDB):
    """Schema for API responses"""

    pass
