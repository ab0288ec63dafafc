#!/usr/bin/env python3
"""
Print the "what can I make" report, or a recipe cost breakdown, for one client.

Reads the database configured through DATABASE_URL / DB_* variables.

Usage:
    python3 scripts/production_report.py --client-id <uuid>
    python3 scripts/production_report.py --client-id <uuid> --recipe-id <uuid>
"""
import argparse
import os
import sys
from uuid import UUID

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def print_feasibility(snapshot):
    from bakery.services.recipe_feasibility import analyze_feasibility

    report = analyze_feasibility(snapshot.load_active_recipes(), snapshot.load_inventory())

    print(f"\n{'='*60}")
    print(f"Can make {report.can_make_count} of {report.total_recipes} recipes")
    print('='*60)

    for r in report.recipes:
        status = "✅" if r.can_make else "❌"
        print(f"{status} {r.recipe_name:30} [{r.category}] x{r.max_batches} batches "
              f"({r.yield_quantity:g} {r.yield_unit} each)")
        for m in r.missing_ingredients:
            print(f"      ↳ {m.name}: need {m.needed:g}, have {m.available:g} ({m.reason.value})")


def print_cost(snapshot, recipe_id: UUID):
    from bakery.services.recipe_feasibility import compute_recipe_cost

    analysis = compute_recipe_cost(snapshot.load_recipe(recipe_id), snapshot.load_inventory())

    print(f"\n{'='*60}")
    print(f"Cost breakdown: {analysis.recipe_name}")
    print('='*60)

    for c in analysis.ingredient_costs:
        flag = "  " if c.can_make else "⚠️"
        print(f"{flag} {c.name:30} {c.quantity:8.3f} {c.unit:5} @ {c.unit_cost:8.4f} = {c.total_cost:9.4f}")

    print("-" * 60)
    print(f"Total: {analysis.total_cost:.4f}")
    if analysis.cost_per_unit is None:
        print(f"Per {analysis.yield_unit}: n/a (yield is {analysis.yield_quantity:g})")
    else:
        print(f"Per {analysis.yield_unit}: {analysis.cost_per_unit:.4f}")
    print(f"Enough stock on hand: {'yes' if analysis.can_make_recipe else 'no'}")


def main():
    parser = argparse.ArgumentParser(description="Bakery production report")
    parser.add_argument("--client-id", type=UUID, required=True, help="Tenant id")
    parser.add_argument("--recipe-id", type=UUID, help="Show the cost breakdown of this recipe")
    args = parser.parse_args()

    from bakery.database import get_session
    from bakery.services.exceptions import BakeryServiceError
    from bakery.services.inventory_snapshot import TenantSnapshot

    db = get_session()
    try:
        snapshot = TenantSnapshot(db, args.client_id)
        if args.recipe_id:
            print_cost(snapshot, args.recipe_id)
        else:
            print_feasibility(snapshot)
    except BakeryServiceError as e:
        print(f"\n❌ {e.message}")
        sys.exit(1)
    finally:
        db.close()


if __name__ == "__main__":
    main()
