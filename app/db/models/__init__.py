# app/db/models/__init__.py
from app.db.models.manufacturer import Manufacturer
from app.db.models.product_type import ProductType
from app.db.models.product import Product
from app.db.models.variation_attribute import ProductVariationAttribute
