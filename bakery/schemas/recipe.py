"""Pydantic schemas for recipe feasibility and cost analysis responses."""
from enum import Enum
from typing import Generic, Optional, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Serializes field names as camelCase for the dashboard; accepts either form."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# Response Envelopes
# ============================================================================


class ApiResponse(BaseModel, Generic[T]):
    """Successful response envelope."""

    success: bool = True
    data: T


class ErrorResponse(BaseModel):
    """Failed response envelope."""

    success: bool = False
    error: str


# ============================================================================
# What Can I Make
# ============================================================================


class MissingReason(str, Enum):
    """Why an ingredient line blocks production."""

    INSUFFICIENT = "insufficient"
    EXPIRED = "expired"
    CONTAMINATED = "contaminated"
    NOT_FOUND = "not_found"


class MissingIngredient(CamelModel):
    """An ingredient line that cannot be covered by current stock."""

    name: str
    needed: float
    available: float
    shortage: float = Field(..., ge=0, description="needed - available, never negative")
    reason: MissingReason


class RecipeFeasibility(CamelModel):
    """Whether a single recipe can be produced right now, and how many times."""

    recipe_id: UUID
    recipe_name: str
    category: str
    yield_quantity: float
    yield_unit: str
    can_make: bool
    max_batches: int = Field(..., ge=0)
    missing_ingredients: list[MissingIngredient] = []
    description: Optional[str] = None
    prep_time: Optional[int] = Field(None, description="Minutes")
    cook_time: Optional[int] = Field(None, description="Minutes")
    difficulty: str = "MEDIUM"
    emoji: Optional[str] = None


class FeasibilityReport(CamelModel):
    """'What can I make' across all active recipes."""

    total_recipes: int
    can_make_count: int
    recipes: list[RecipeFeasibility]


# ============================================================================
# Recipe Cost Analysis
# ============================================================================


class IngredientType(str, Enum):
    """Which kind of stock item an ingredient line draws from."""

    RAW_MATERIAL = "RAW_MATERIAL"
    INTERMEDIATE_PRODUCT = "INTERMEDIATE_PRODUCT"


class IngredientCost(CamelModel):
    """Cost and raw availability of one recipe ingredient line."""

    ingredient_id: UUID
    stock_item_id: UUID
    ingredient_type: IngredientType
    name: str
    quantity: float
    unit: str
    unit_cost: float
    total_cost: float
    available_quantity: float
    can_make: bool


class RecipeCostAnalysis(CamelModel):
    """Itemized cost breakdown for a recipe."""

    recipe_id: UUID
    recipe_name: str
    total_cost: float
    cost_per_unit: Optional[float] = Field(
        None, description="total_cost / yield_quantity; null when yield_quantity <= 0"
    )
    yield_quantity: float
    yield_unit: str
    can_make_recipe: bool
    ingredient_costs: list[IngredientCost] = []
