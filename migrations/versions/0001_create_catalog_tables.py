"""create_catalog_tables

Revision ID: 0001
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def timestamps():
    return [
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.TIMESTAMP(timezone=True), server_default=sa.func.now()),
    ]


def upgrade() -> None:
    """Create manufacturers, product types, products and variation attributes."""
    op.create_table(
        'manufacturers',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        *timestamps(),
    )
    op.create_index('ix_manufacturers_name', 'manufacturers', ['name'])

    op.create_table(
        'product_types',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        *timestamps(),
    )
    op.create_index('ix_product_types_name', 'product_types', ['name'])

    op.create_table(
        'products',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('sku', sa.String(), nullable=False, comment='Stock keeping unit'),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('manufacturer_id', sa.Uuid(),
                  sa.ForeignKey('manufacturers.id', ondelete='SET NULL'), nullable=True),
        sa.Column('product_type_id', sa.Uuid(),
                  sa.ForeignKey('product_types.id', ondelete='SET NULL'), nullable=True),
        sa.Column('price', sa.Numeric(10, 2), nullable=True),
        sa.Column('stock_status', sa.String(), nullable=False, server_default='instock'),
        sa.Column('stock_quantity', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('parent_product_id', sa.Uuid(),
                  sa.ForeignKey('products.id', ondelete='SET NULL'), nullable=True,
                  comment='Set when this product is a variation of another product'),
        sa.Column('is_variable_product', sa.Boolean(), nullable=False, server_default=sa.false()),
        *timestamps(),
    )
    op.create_index('ix_products_sku', 'products', ['sku'], unique=True)
    op.create_index('ix_products_name', 'products', ['name'])
    op.create_index('ix_products_active', 'products', ['active'])
    op.create_index('ix_products_parent_product_id', 'products', ['parent_product_id'])

    op.create_table(
        'product_variation_attributes',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('product_id', sa.Uuid(),
                  sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(), nullable=False, comment='Attribute category, e.g. Size'),
        sa.Column('value', sa.String(), nullable=False, comment='Extracted literal, e.g. 4 OZ'),
        sa.Column('sort_order', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), server_default=sa.func.now()),
    )
    op.create_index(
        'ix_product_variation_attributes_product_id',
        'product_variation_attributes',
        ['product_id'],
    )


def downgrade() -> None:
    """Drop the catalog tables."""
    op.drop_index('ix_product_variation_attributes_product_id', table_name='product_variation_attributes')
    op.drop_table('product_variation_attributes')
    op.drop_index('ix_products_parent_product_id', table_name='products')
    op.drop_index('ix_products_active', table_name='products')
    op.drop_index('ix_products_name', table_name='products')
    op.drop_index('ix_products_sku', table_name='products')
    op.drop_table('products')
    op.drop_index('ix_product_types_name', table_name='product_types')
    op.drop_table('product_types')
    op.drop_index('ix_manufacturers_name', table_name='manufacturers')
    op.drop_table('manufacturers')
