"""Recipe feasibility ("what can I make") and recipe cost analysis.

Both operations are pure functions over a snapshot of one client's recipes
and stock. Loading that snapshot is the job of
``bakery.services.inventory_snapshot``; nothing here touches the database.

The two operations apply different eligibility rules: feasibility treats
expired or contaminated stock as unavailable, while cost analysis compares
against the raw on-hand ledger quantity.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, localcontext
from typing import Iterable, Optional, Union
from uuid import UUID

from bakery.schemas.recipe import (
    FeasibilityReport,
    IngredientCost,
    IngredientType,
    MissingIngredient,
    MissingReason,
    RecipeCostAnalysis,
    RecipeFeasibility,
)

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "Uncategorized"
DEFAULT_EMOJI = "🍞"


# ============================================================================
# Snapshot types
# ============================================================================


@dataclass(frozen=True)
class RawMaterialRef:
    """Ingredient line sourced from a purchased raw material."""
    id: UUID

    ingredient_type = IngredientType.RAW_MATERIAL
    unknown_name = "Unknown raw material"


@dataclass(frozen=True)
class IntermediateProductRef:
    """Ingredient line sourced from an in-house intermediate product."""
    id: UUID

    ingredient_type = IngredientType.INTERMEDIATE_PRODUCT
    unknown_name = "Unknown intermediate product"


IngredientRef = Union[RawMaterialRef, IntermediateProductRef]


@dataclass(frozen=True)
class StockItem:
    """A raw material or intermediate product as it stands in inventory."""
    ref: IngredientRef
    name: str
    quantity: float
    unit: str
    unit_cost: Optional[float] = None
    expiration_date: Optional[datetime] = None  # naive UTC
    is_contaminated: bool = False

    def is_expired(self, now: datetime) -> bool:
        return self.expiration_date is not None and self.expiration_date < now


@dataclass(frozen=True)
class RecipeLine:
    """One ingredient line of a recipe."""
    id: UUID
    ref: IngredientRef
    quantity: float
    unit: str
    notes: Optional[str] = None


@dataclass(frozen=True)
class RecipeSnapshot:
    """A recipe with its ordered ingredient lines."""
    id: UUID
    name: str
    yield_quantity: float
    yield_unit: str
    ingredients: list[RecipeLine] = field(default_factory=list)
    category: Optional[str] = None
    is_active: bool = True
    description: Optional[str] = None
    prep_time: Optional[int] = None
    cook_time: Optional[int] = None
    difficulty: Optional[str] = None
    emoji: Optional[str] = None


@dataclass
class InventorySnapshot:
    """Stock items of one client keyed by ingredient reference."""
    items: dict[IngredientRef, StockItem] = field(default_factory=dict)

    @classmethod
    def from_items(cls, items: Iterable[StockItem]) -> "InventorySnapshot":
        return cls(items={item.ref: item for item in items})

    def get(self, ref: IngredientRef) -> Optional[StockItem]:
        return self.items.get(ref)


# ============================================================================
# What Can I Make
# ============================================================================


def _assess_line(
    line: RecipeLine,
    item: Optional[StockItem],
    now: datetime,
) -> tuple[float, Optional[MissingReason]]:
    """Return (usable quantity, blocking reason or None) for an ingredient line."""
    if item is None:
        return 0.0, MissingReason.NOT_FOUND
    if item.is_contaminated:
        return 0.0, MissingReason.CONTAMINATED
    if item.is_expired(now):
        return 0.0, MissingReason.EXPIRED

    available = item.quantity
    if available < line.quantity:
        return available, MissingReason.INSUFFICIENT
    return available, None


def _batches_for(available: float, required: float) -> int:
    """Whole batches a single line supports.

    Divides the decimal string forms so 0.3 / 0.1 gives 3 rather than 2.
    Precision is widened to hold every integer digit of the quotient.
    """
    a = Decimal(str(available))
    b = Decimal(str(required))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, a.adjusted() - b.adjusted() + 2)
        return int(a // b)


def _analyze_recipe(
    recipe: RecipeSnapshot,
    inventory: InventorySnapshot,
    now: datetime,
) -> RecipeFeasibility:
    missing: list[MissingIngredient] = []
    batch_limits: list[int] = []

    for line in recipe.ingredients:
        item = inventory.get(line.ref)
        available, reason = _assess_line(line, item, now)

        if reason is not None:
            missing.append(MissingIngredient(
                name=item.name if item else line.ref.unknown_name,
                needed=line.quantity,
                available=available,
                shortage=max(line.quantity - available, 0.0),
                reason=reason,
            ))
        elif line.quantity > 0:
            batch_limits.append(_batches_for(available, line.quantity))

    can_make = not missing

    if not can_make:
        max_batches = 0
    elif batch_limits:
        max_batches = min(batch_limits)
    else:
        # Empty recipe, or only zero-quantity lines
        logger.warning(
            f"Recipe '{recipe.name}' ({recipe.id}) has no constraining ingredients; "
            f"reporting max_batches=0"
        )
        max_batches = 0

    return RecipeFeasibility(
        recipe_id=recipe.id,
        recipe_name=recipe.name,
        category=recipe.category or DEFAULT_CATEGORY,
        yield_quantity=recipe.yield_quantity or 0.0,
        yield_unit=recipe.yield_unit or "",
        can_make=can_make,
        max_batches=max_batches,
        missing_ingredients=missing,
        description=recipe.description,
        prep_time=recipe.prep_time,
        cook_time=recipe.cook_time,
        difficulty=recipe.difficulty or "MEDIUM",
        emoji=recipe.emoji or DEFAULT_EMOJI,
    )


def analyze_feasibility(
    recipes: Iterable[RecipeSnapshot],
    inventory: InventorySnapshot,
    now: Optional[datetime] = None,
) -> FeasibilityReport:
    """
    Work out which active recipes can be produced from current stock.

    Each ingredient line is checked on its own against the full on-hand
    quantity of its stock item. Lines sharing a stock item are not deducted
    from each other, and neither are recipes sharing stock.

    Args:
        recipes: Recipe snapshots; inactive ones are skipped.
        inventory: Stock items of the same client.
        now: Reference time for expiry checks (naive UTC). Defaults to utcnow.
    """
    if now is None:
        now = datetime.utcnow()

    results = [
        _analyze_recipe(recipe, inventory, now)
        for recipe in recipes
        if recipe.is_active
    ]
    can_make_count = sum(1 for r in results if r.can_make)

    logger.info(f"Feasibility analysis: can make {can_make_count} of {len(results)} recipes")

    return FeasibilityReport(
        total_recipes=len(results),
        can_make_count=can_make_count,
        recipes=results,
    )


# ============================================================================
# Recipe Cost Analysis
# ============================================================================


def compute_recipe_cost(
    recipe: RecipeSnapshot,
    inventory: InventorySnapshot,
) -> RecipeCostAnalysis:
    """
    Calculate the itemized ingredient cost of one batch of a recipe.

    Line cost is quantity * unit cost, with unit cost 0 when the stock item
    or its cost is unknown. Availability is the raw on-hand quantity with no
    expiry or contamination zeroing.

    cost_per_unit is None when yield_quantity is not positive; the rest of
    the breakdown is still returned.
    """
    ingredient_costs: list[IngredientCost] = []
    total_cost = 0.0

    for line in recipe.ingredients:
        item = inventory.get(line.ref)

        unit_cost = 0.0
        available = 0.0
        if item is not None:
            available = item.quantity
            if item.unit_cost is not None:
                unit_cost = item.unit_cost

        line_cost = line.quantity * unit_cost
        total_cost += line_cost

        ingredient_costs.append(IngredientCost(
            ingredient_id=line.id,
            stock_item_id=line.ref.id,
            ingredient_type=line.ref.ingredient_type,
            name=item.name if item else line.ref.unknown_name,
            quantity=line.quantity,
            unit=line.unit,
            unit_cost=unit_cost,
            total_cost=line_cost,
            available_quantity=available,
            can_make=available >= line.quantity,
        ))

    cost_per_unit = None
    if recipe.yield_quantity and recipe.yield_quantity > 0:
        cost_per_unit = total_cost / recipe.yield_quantity
    else:
        logger.warning(
            f"Recipe '{recipe.name}' ({recipe.id}) has yield_quantity={recipe.yield_quantity}; "
            f"cost per unit left empty"
        )

    return RecipeCostAnalysis(
        recipe_id=recipe.id,
        recipe_name=recipe.name,
        total_cost=total_cost,
        cost_per_unit=cost_per_unit,
        yield_quantity=recipe.yield_quantity or 0.0,
        yield_unit=recipe.yield_unit or "",
        can_make_recipe=all(c.can_make for c in ingredient_costs),
        ingredient_costs=ingredient_costs,
    )
