"""Recipe and RecipeIngredient models."""
import uuid
from datetime import datetime

from sqlalchemy import (
    Column, String, Integer, Boolean, Text, TIMESTAMP,
    ForeignKey, Numeric, CheckConstraint, Index
)
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from . import Base


class Recipe(Base):
    """Production recipes with yields."""

    __tablename__ = "recipes"
    __table_args__ = (
        Index("idx_recipes_client", "client_id"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    client_id = Column(UUID(as_uuid=True), ForeignKey("clients.id"), nullable=False)
    category_id = Column(UUID(as_uuid=True), ForeignKey("categories.id"))
    name = Column(String(100), nullable=False)
    description = Column(Text)
    yield_quantity = Column(Numeric(10, 2), nullable=False)
    yield_unit = Column(String(20), nullable=False)  # 'loaves', 'pcs', 'kg'
    prep_time_minutes = Column(Integer)
    cook_time_minutes = Column(Integer)
    difficulty = Column(String(10), default="MEDIUM")  # 'EASY', 'MEDIUM', 'HARD'
    emoji = Column(String(16))
    is_active = Column(Boolean, default=True)
    created_at = Column(TIMESTAMP, default=datetime.utcnow)
    updated_at = Column(TIMESTAMP, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    category = relationship("Category")
    ingredients = relationship(
        "RecipeIngredient",
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="[RecipeIngredient.position, RecipeIngredient.id]",
    )

    def __repr__(self):
        return f"<Recipe(name='{self.name}')>"


class RecipeIngredient(Base):
    """One ingredient line of a recipe, sourced from a raw material or an intermediate product."""

    __tablename__ = "recipe_ingredients"
    __table_args__ = (
        CheckConstraint(
            "(raw_material_id IS NULL) != (intermediate_product_id IS NULL)",
            name="ck_recipe_ingredients_one_source",
        ),
        CheckConstraint("quantity > 0", name="ck_recipe_ingredients_quantity_positive"),
        Index("idx_recipe_ingredients_recipe", "recipe_id"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    recipe_id = Column(UUID(as_uuid=True), ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False)
    raw_material_id = Column(UUID(as_uuid=True), ForeignKey("raw_materials.id"))
    intermediate_product_id = Column(UUID(as_uuid=True), ForeignKey("intermediate_products.id"))
    quantity = Column(Numeric(12, 3), nullable=False)  # Per batch, in `unit`
    unit = Column(String(20), nullable=False)
    notes = Column(String(255))
    position = Column(Integer, nullable=False, default=0)

    # Relationships
    recipe = relationship("Recipe", back_populates="ingredients")
    raw_material = relationship("RawMaterial", back_populates="recipe_ingredients")
    intermediate_product = relationship("IntermediateProduct", back_populates="recipe_ingredients")

    def __repr__(self):
        return f"<RecipeIngredient(recipe_id={self.recipe_id}, quantity={self.quantity} {self.unit})>"
