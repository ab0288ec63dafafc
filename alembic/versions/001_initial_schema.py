"""Initial schema - tenants, stock and recipes

Revision ID: 001
Revises:
Create Date: 2026-09-02

Creates the tables read by the feasibility and costing endpoints:
- clients
- categories
- raw_materials
- recipes
- intermediate_products
- recipe_ingredients
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # === CLIENTS ===
    op.create_table(
        "clients",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("slug", sa.String(50), nullable=False, unique=True),
        sa.Column("is_active", sa.Boolean, server_default="true"),
        sa.Column("created_at", sa.TIMESTAMP, server_default=sa.func.now()),
    )

    # === CATEGORIES ===
    op.create_table(
        "categories",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("client_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("clients.id"), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("category_type", sa.String(20), nullable=False, server_default="RECIPE"),
        sa.Column("created_at", sa.TIMESTAMP, server_default=sa.func.now()),
        sa.UniqueConstraint("client_id", "name", "category_type", name="uq_categories_client_name_type"),
    )

    # === RAW_MATERIALS ===
    op.create_table(
        "raw_materials",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("client_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("clients.id"), nullable=False),
        sa.Column("category_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("categories.id")),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("batch_number", sa.String(100)),
        sa.Column("quantity", sa.Numeric(12, 3), nullable=False, server_default="0"),
        sa.Column("unit", sa.String(20), nullable=False),
        sa.Column("unit_cost", sa.Numeric(12, 4)),
        sa.Column("reorder_level", sa.Numeric(12, 3), server_default="0"),
        sa.Column("expiration_date", sa.TIMESTAMP),
        sa.Column("is_contaminated", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("created_at", sa.TIMESTAMP, server_default=sa.func.now()),
        sa.Column("updated_at", sa.TIMESTAMP, server_default=sa.func.now()),
    )
    op.create_index("idx_raw_materials_client", "raw_materials", ["client_id"])

    # === RECIPES ===
    op.create_table(
        "recipes",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("client_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("clients.id"), nullable=False),
        sa.Column("category_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("categories.id")),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text),
        sa.Column("yield_quantity", sa.Numeric(10, 2), nullable=False),
        sa.Column("yield_unit", sa.String(20), nullable=False),
        sa.Column("prep_time_minutes", sa.Integer),
        sa.Column("cook_time_minutes", sa.Integer),
        sa.Column("is_active", sa.Boolean, server_default="true"),
        sa.Column("created_at", sa.TIMESTAMP, server_default=sa.func.now()),
        sa.Column("updated_at", sa.TIMESTAMP, server_default=sa.func.now()),
    )
    op.create_index("idx_recipes_client", "recipes", ["client_id"])

    # === INTERMEDIATE_PRODUCTS ===
    op.create_table(
        "intermediate_products",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("client_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("clients.id"), nullable=False),
        sa.Column("category_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("categories.id")),
        sa.Column("recipe_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("recipes.id", ondelete="SET NULL")),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("batch_number", sa.String(100)),
        sa.Column("quantity", sa.Numeric(12, 3), nullable=False, server_default="0"),
        sa.Column("unit", sa.String(20), nullable=False),
        sa.Column("unit_cost", sa.Numeric(12, 4)),
        sa.Column("status", sa.String(20), server_default="IN_PRODUCTION"),
        sa.Column("production_date", sa.TIMESTAMP),
        sa.Column("expiration_date", sa.TIMESTAMP),
        sa.Column("is_contaminated", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("created_at", sa.TIMESTAMP, server_default=sa.func.now()),
        sa.Column("updated_at", sa.TIMESTAMP, server_default=sa.func.now()),
    )
    op.create_index("idx_intermediate_products_client", "intermediate_products", ["client_id"])

    # === RECIPE_INGREDIENTS ===
    op.create_table(
        "recipe_ingredients",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "recipe_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("recipes.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("raw_material_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("raw_materials.id")),
        sa.Column(
            "intermediate_product_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("intermediate_products.id"),
        ),
        sa.Column("quantity", sa.Numeric(12, 3), nullable=False),
        sa.Column("unit", sa.String(20), nullable=False),
        sa.Column("notes", sa.String(255)),
        sa.Column("position", sa.Integer, nullable=False, server_default="0"),
        # Exactly one stock source per line
        sa.CheckConstraint(
            "(raw_material_id IS NULL) != (intermediate_product_id IS NULL)",
            name="ck_recipe_ingredients_one_source",
        ),
        sa.CheckConstraint("quantity > 0", name="ck_recipe_ingredients_quantity_positive"),
    )
    op.create_index("idx_recipe_ingredients_recipe", "recipe_ingredients", ["recipe_id"])


def downgrade() -> None:
    op.drop_table("recipe_ingredients")
    op.drop_table("intermediate_products")
    op.drop_table("recipes")
    op.drop_table("raw_materials")
    op.drop_table("categories")
    op.drop_table("clients")
