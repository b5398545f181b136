# app/schemas/__init__.py
from app.schemas.product import (
    ProductBase,
    ProductCreate,
    ProductUpdate,
    ProductInDB,
    ProductResponse,
)
from app.schemas.variation_attribute import (
    VariationAttributeBase,
    VariationAttributeCreate,
    VariationAttributeInDB,
)
