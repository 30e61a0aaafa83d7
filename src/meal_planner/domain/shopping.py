"""Shopping list generation from planned meals."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from uuid import UUID

from meal_planner.domain.models import (
    Ingredient,
    IngredientCategory,
    MealPlanEntry,
    Pantry,
    Recipe,
)
from meal_planner.domain.nutrition import round_to_int


@dataclass(frozen=True)
class ShoppingItem:
    """An ingredient to buy and how much."""

    ingredient: Ingredient
    quantity_grams: int


@dataclass(frozen=True)
class ShoppingList:
    """Items to buy grouped by ingredient category."""

    groups: dict[IngredientCategory, list[ShoppingItem]] = field(default_factory=dict)

    @property
    def total_items(self) -> int:
        """Return the number of items across all groups."""
        return sum(len(items) for items in self.groups.values())


def required_quantities(
    entries: list[MealPlanEntry],
    recipes: Mapping[UUID, Recipe],
    ingredients: Mapping[UUID, Ingredient],
) -> dict[UUID, float]:
    """Sum grams needed per ingredient, scaled by planned servings."""
    needed: dict[UUID, float] = {}
    for entry in entries:
        recipe = recipes.get(entry.recipe_id)
        if recipe is None:
            continue
        for item in recipe.ingredients:
            if item.ingredient_id not in ingredients:
                continue
            needed[item.ingredient_id] = (
                needed.get(item.ingredient_id, 0.0)
                + item.quantity_grams * entry.servings
            )
    return needed


def generate_shopping_list(
    entries: list[MealPlanEntry],
    recipes: Mapping[UUID, Recipe],
    ingredients: Mapping[UUID, Ingredient],
    pantry: Pantry | None,
) -> ShoppingList:
    """Net required quantities against pantry stock and group by category."""
    on_hand: dict[UUID, float] = {}
    if pantry is not None:
        for pantry_item in pantry.items:
            on_hand.setdefault(pantry_item.ingredient_id, pantry_item.quantity_grams)

    groups: dict[IngredientCategory, list[ShoppingItem]] = {}
    for ingredient_id, needed in required_quantities(
        entries, recipes, ingredients
    ).items():
        to_buy = max(0.0, needed - on_hand.get(ingredient_id, 0.0))
        if to_buy <= 0:
            continue
        ingredient = ingredients[ingredient_id]
        category = ingredient.category or IngredientCategory.OTHER
        groups.setdefault(category, []).append(
            ShoppingItem(ingredient=ingredient, quantity_grams=round_to_int(to_buy))
        )
    return ShoppingList(groups=groups)
