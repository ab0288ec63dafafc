"""Tenant-scoped read layer that builds engine snapshots from the database."""
import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload, selectinload

from bakery.models.inventory import IntermediateProduct, RawMaterial
from bakery.models.recipe import Recipe, RecipeIngredient
from bakery.services.exceptions import DataUnavailable, RecipeNotFound
from bakery.services.recipe_feasibility import (
    IngredientRef,
    IntermediateProductRef,
    InventorySnapshot,
    RawMaterialRef,
    RecipeLine,
    RecipeSnapshot,
    StockItem,
)

logger = logging.getLogger(__name__)


def _to_float(value) -> Optional[float]:
    return float(value) if value is not None else None


def ingredient_ref_for(ri: RecipeIngredient) -> IngredientRef:
    """Map the two nullable source columns onto a single reference."""
    if ri.raw_material_id is not None and ri.intermediate_product_id is None:
        return RawMaterialRef(ri.raw_material_id)
    if ri.intermediate_product_id is not None and ri.raw_material_id is None:
        return IntermediateProductRef(ri.intermediate_product_id)
    logger.error(
        f"Recipe ingredient {ri.id} must reference exactly one raw material or intermediate product"
    )
    raise DataUnavailable("Failed to load recipes")


def _stock_item(row, ref: IngredientRef) -> StockItem:
    return StockItem(
        ref=ref,
        name=row.name,
        quantity=_to_float(row.quantity) or 0.0,
        unit=row.unit,
        unit_cost=_to_float(row.unit_cost),
        expiration_date=row.expiration_date,
        is_contaminated=bool(row.is_contaminated),
    )


def _recipe_snapshot(recipe: Recipe) -> RecipeSnapshot:
    lines = [
        RecipeLine(
            id=ri.id,
            ref=ingredient_ref_for(ri),
            quantity=float(ri.quantity),
            unit=ri.unit,
            notes=ri.notes,
        )
        for ri in recipe.ingredients
    ]
    return RecipeSnapshot(
        id=recipe.id,
        name=recipe.name,
        yield_quantity=_to_float(recipe.yield_quantity) or 0.0,
        yield_unit=recipe.yield_unit,
        ingredients=lines,
        category=recipe.category.name if recipe.category else None,
        is_active=bool(recipe.is_active),
        description=recipe.description,
        prep_time=recipe.prep_time_minutes,
        cook_time=recipe.cook_time_minutes,
        difficulty=recipe.difficulty,
        emoji=recipe.emoji,
    )


class TenantSnapshot:
    """Read-only view of one client's recipes and stock.

    Every query is filtered by client_id, so a recipe line pointing at
    another client's stock resolves to "not found".
    """

    def __init__(self, db: Session, client_id: UUID):
        self.db = db
        self.client_id = client_id

    def _recipe_query(self):
        return (
            self.db.query(Recipe)
            .options(
                joinedload(Recipe.category),
                selectinload(Recipe.ingredients),
            )
            .filter(Recipe.client_id == self.client_id)
        )

    def load_inventory(self) -> InventorySnapshot:
        """Load every raw material and intermediate product of the client."""
        try:
            raw_materials = (
                self.db.query(RawMaterial)
                .filter(RawMaterial.client_id == self.client_id)
                .all()
            )
            intermediates = (
                self.db.query(IntermediateProduct)
                .filter(IntermediateProduct.client_id == self.client_id)
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to load inventory for client {self.client_id}: {e}")
            raise DataUnavailable("Failed to load inventory") from e

        items = [_stock_item(rm, RawMaterialRef(rm.id)) for rm in raw_materials]
        items += [_stock_item(ip, IntermediateProductRef(ip.id)) for ip in intermediates]
        return InventorySnapshot.from_items(items)

    def load_active_recipes(self) -> list[RecipeSnapshot]:
        """Load active recipes ordered by name, then id."""
        try:
            recipes = (
                self._recipe_query()
                .filter(Recipe.is_active == True)
                .order_by(Recipe.name, Recipe.id)
                .all()
            )
            return [_recipe_snapshot(r) for r in recipes]
        except SQLAlchemyError as e:
            logger.error(f"Failed to load recipes for client {self.client_id}: {e}")
            raise DataUnavailable("Failed to load recipes") from e

    def load_recipe(self, recipe_id: UUID) -> RecipeSnapshot:
        """Load one recipe whether or not it is active."""
        try:
            recipe = self._recipe_query().filter(Recipe.id == recipe_id).first()
            if not recipe:
                raise RecipeNotFound("Recipe not found")
            return _recipe_snapshot(recipe)
        except SQLAlchemyError as e:
            logger.error(f"Failed to load recipe {recipe_id} for client {self.client_id}: {e}")
            raise DataUnavailable("Failed to load recipe") from e
