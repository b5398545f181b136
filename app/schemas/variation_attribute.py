# app/schemas/variation_attribute.py
from pydantic import BaseModel, Field
from typing import Optional
from uuid import UUID
from datetime import datetime


class VariationAttributeBase(BaseModel):
    """Base Pydantic model for a product's variation attribute"""

    product_id: UUID = Field(..., description="Product this attribute describes")
    name: str = Field(..., description="Attribute category, e.g. 'Size'")
    value: str = Field(..., description="Extracted literal, e.g. '4 OZ'")
    sort_order: int = 0


class VariationAttributeCreate(VariationAttributeBase):
    """Schema for creating a variation attribute row"""

    pass


class VariationAttributeInDB(VariationAttributeBase):
    """Schema for a variation attribute as stored in DB"""

    id: UUID
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
