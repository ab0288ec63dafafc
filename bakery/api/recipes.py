"""Recipe feasibility and cost analysis endpoints."""
from uuid import UUID

from fastapi import APIRouter, Depends

from bakery.api.dependencies import get_tenant_snapshot
from bakery.schemas.recipe import (
    ApiResponse,
    ErrorResponse,
    FeasibilityReport,
    RecipeCostAnalysis,
)
from bakery.services.inventory_snapshot import TenantSnapshot
from bakery.services.recipe_feasibility import analyze_feasibility, compute_recipe_cost

router = APIRouter(
    prefix="/recipes",
    tags=["recipes"],
    responses={500: {"model": ErrorResponse}},
)


@router.get("/what-can-i-make", response_model=ApiResponse[FeasibilityReport])
def what_can_i_make(
    snapshot: TenantSnapshot = Depends(get_tenant_snapshot),
):
    """
    Report which active recipes can be produced from current stock.

    Expired and contaminated stock counts as unavailable. Blocked recipes
    list each missing ingredient with a reason: insufficient, expired,
    contaminated or not_found.
    """
    recipes = snapshot.load_active_recipes()
    inventory = snapshot.load_inventory()
    return ApiResponse[FeasibilityReport](data=analyze_feasibility(recipes, inventory))


@router.get(
    "/{recipe_id}/cost",
    response_model=ApiResponse[RecipeCostAnalysis],
    responses={404: {"model": ErrorResponse}},
)
def get_recipe_cost(
    recipe_id: UUID,
    snapshot: TenantSnapshot = Depends(get_tenant_snapshot),
):
    """
    Get the itemized ingredient cost of one batch of a recipe.

    - costPerUnit is null when the recipe's yield quantity is not positive
    - availableQuantity is the on-hand ledger quantity, ignoring expiry and contamination
    """
    recipe = snapshot.load_recipe(recipe_id)
    inventory = snapshot.load_inventory()
    return ApiResponse[RecipeCostAnalysis](data=compute_recipe_cost(recipe, inventory))
