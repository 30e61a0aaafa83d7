"""Pantry matching and stock rules."""

from collections.abc import Collection, Iterable
from dataclasses import dataclass, replace
from datetime import date
from uuid import UUID, uuid4

from meal_planner.domain.models import Pantry, PantryItem


@dataclass(frozen=True)
class PantryMatch:
    """How much of a recipe a pantry already covers."""

    match_percentage: float
    missing_count: int


def match_pantry(
    recipe_ingredient_ids: Iterable[UUID], pantry_ingredient_ids: Collection[UUID]
) -> PantryMatch:
    """Compare recipe ingredients against stocked ingredients by presence."""
    recipe_ids = list(dict.fromkeys(recipe_ingredient_ids))
    if not recipe_ids:
        return PantryMatch(match_percentage=0.0, missing_count=0)
    matching = sum(
        1 for ingredient_id in recipe_ids if ingredient_id in pantry_ingredient_ids
    )
    return PantryMatch(
        match_percentage=matching / len(recipe_ids) * 100,
        missing_count=len(recipe_ids) - matching,
    )


def find_item(pantry: Pantry, ingredient_id: UUID) -> PantryItem | None:
    """Return the pantry item stocking an ingredient, if any."""
    for item in pantry.items:
        if item.ingredient_id == ingredient_id:
            return item
    return None


def has_ingredient(
    pantry: Pantry, ingredient_id: UUID, required_quantity: float = 0
) -> bool:
    """Return True when the ingredient is stocked in the required quantity."""
    item = find_item(pantry, ingredient_id)
    if item is None:
        return False
    if required_quantity > 0:
        return item.quantity_grams >= required_quantity
    return True


def add_ingredient(
    pantry: Pantry,
    ingredient_id: UUID,
    quantity_grams: float,
    expiry_date: date | None = None,
) -> tuple[PantryItem, bool]:
    """Apply the additive stock rule.

    Returns the resulting item and whether it already existed. An existing
    item keeps its expiry date unless a new one is given.
    """
    existing = find_item(pantry, ingredient_id)
    if existing is not None:
        return (
            replace(
                existing,
                quantity_grams=existing.quantity_grams + quantity_grams,
                expiry_date=expiry_date or existing.expiry_date,
            ),
            True,
        )
    return (
        PantryItem(
            id=uuid4(),
            ingredient_id=ingredient_id,
            quantity_grams=quantity_grams,
            expiry_date=expiry_date,
        ),
        False,
    )
