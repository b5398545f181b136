from app.db.repositories.product_repository import ProductRepository
from app.db.repositories.variation_attribute_repository import (
    VariationAttributeRepository,
)

__all__ = [
    "ProductRepository",
    "VariationAttributeRepository",
]
