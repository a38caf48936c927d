"""create users, shops, email_template, products and wishlists tables

Revision ID: 3a91c0d4b7e2
Revises:
Create Date: 2026-10-18 10:12:44.310562

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
import sqlmodel

# revision identifiers, used by Alembic.
revision: str = '3a91c0d4b7e2'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

CATEGORIES = (
    'ELECTRONICS', 'FASHION', 'HOME', 'BEAUTY', 'SPORTS', 'TOYS',
    'BOOKS', 'GROCERY', 'HEALTH', 'AUTOMOTIVE', 'OTHER',
)


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table('users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=191), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=191), nullable=False),
        sa.Column('is_root', sa.Boolean(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_email', 'users', ['email'])

    op.create_table('shops',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('owner_id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=191), nullable=True),
        sa.Column('slug', sqlmodel.sql.sqltypes.AutoString(length=191), nullable=True),
        sa.Column('description', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['owner_id'], ['users.id'], name='fk_shops_owner_id'),
        sa.UniqueConstraint('name'),
    )
    op.create_index('ix_shops_slug', 'shops', ['slug'], unique=True)

    op.create_table('email_template',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=191), nullable=False),
        sa.Column('slug', sqlmodel.sql.sqltypes.AutoString(length=191), nullable=False),
        sa.Column('subject', sqlmodel.sql.sqltypes.AutoString(length=300), nullable=False),
        sa.Column('html_content', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('language', sqlmodel.sql.sqltypes.AutoString(length=191), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_email_template_slug', 'email_template', ['slug'], unique=True)

    op.create_table('products',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('source_type', sa.Enum('WEBSITE', 'SHOP', name='productsourcetype'), nullable=False),
        sa.Column('shop_id', sa.Integer(), nullable=True),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=191), nullable=False),
        sa.Column('description', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('category', sa.Enum(*CATEGORIES, name='productcategory'), nullable=False),
        sa.Column('brand', sqlmodel.sql.sqltypes.AutoString(length=191), nullable=False),
        sa.Column('material', sqlmodel.sql.sqltypes.AutoString(length=191), nullable=False),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('discount', sa.Float(), nullable=False),
        sa.Column('discount_codes', sa.JSON(), nullable=True),
        sa.Column('stock_quantity', sa.Integer(), nullable=False),
        sa.Column('images', sa.JSON(), nullable=True),
        sa.Column('videos', sa.JSON(), nullable=True),
        sa.Column('color', sqlmodel.sql.sqltypes.AutoString(length=191), nullable=True),
        sa.Column('manufacturer', sqlmodel.sql.sqltypes.AutoString(length=191), nullable=True),
        sa.Column('supplier', sqlmodel.sql.sqltypes.AutoString(length=191), nullable=True),
        sa.Column('average_rating', sa.Float(), nullable=False),
        sa.Column('total_reviews', sa.Integer(), nullable=False),
        sa.Column('shipping_cost', sa.Float(), nullable=True),
        sa.Column('shipping_methods', sa.JSON(), nullable=True),
        sa.Column(
            'availability_status',
            sa.Enum('AVAILABLE', 'UNAVAILABLE', 'PRE_ORDER', 'DISCONTINUED', name='availabilitystatus'),
            nullable=False,
        ),
        sa.Column('freezed', sa.Boolean(), nullable=False),
        sa.Column('return_policy', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),

        # Primary Key
        sa.PrimaryKeyConstraint('id'),

        # Foreign Key Constraints
        sa.ForeignKeyConstraint(['shop_id'], ['shops.id'], name='fk_products_shop_id'),
    )

    # Indexes for catalog filtering
    op.create_index('ix_products_category', 'products', ['category'])
    op.create_index('ix_products_brand', 'products', ['brand'])
    op.create_index('ix_products_price', 'products', ['price'])
    op.create_index('ix_products_availability_status', 'products', ['availability_status'])
    op.create_index('ix_products_shop_id', 'products', ['shop_id'])

    op.create_table('wishlists',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('product_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),

        # Primary Key
        sa.PrimaryKeyConstraint('id'),

        # Foreign Key Constraints
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name='fk_wishlists_user_id'),
        sa.ForeignKeyConstraint(['product_id'], ['products.id'], name='fk_wishlists_product_id'),
    )
    # no unique (user_id, product_id) index: duplicate entries are allowed
    op.create_index('ix_wishlists_user_id', 'wishlists', ['user_id'])
    op.create_index('ix_wishlists_product_id', 'wishlists', ['product_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_wishlists_product_id', table_name='wishlists')
    op.drop_index('ix_wishlists_user_id', table_name='wishlists')
    op.drop_table('wishlists')

    for index in ('shop_id', 'availability_status', 'price', 'brand', 'category'):
        op.drop_index(f'ix_products_{index}', table_name='products')
    op.drop_table('products')

    op.drop_index('ix_email_template_slug', table_name='email_template')
    op.drop_table('email_template')
    op.drop_index('ix_shops_slug', table_name='shops')
    op.drop_table('shops')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')

    sa.Enum(name='availabilitystatus').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='productcategory').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='productsourcetype').drop(op.get_bind(), checkfirst=True)
