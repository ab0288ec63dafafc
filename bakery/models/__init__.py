"""SQLAlchemy models for the bakery service."""
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Import all models to register them with Base.metadata
from .client import Client
from .category import Category
from .inventory import RawMaterial, IntermediateProduct
from .recipe import Recipe, RecipeIngredient

__all__ = [
    "Base",
    "Client",
    "Category",
    "RawMaterial",
    "IntermediateProduct",
    "Recipe",
    "RecipeIngredient",
]
