"""Recipe nutrition calculation."""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from uuid import UUID

from meal_planner.domain.models import Ingredient, Recipe


@dataclass(frozen=True)
class MacroProfile:
    """Calories and macronutrients in grams."""

    calories: float
    protein: float
    fat: float
    carbs: float


@dataclass(frozen=True)
class NutritionalInfo:
    """Recipe totals with a per-serving breakdown."""

    calories: float
    protein: float
    fat: float
    carbs: float
    per_serving: MacroProfile

    @property
    def total(self) -> MacroProfile:
        """Return the recipe totals as a macro profile."""
        return MacroProfile(
            calories=self.calories,
            protein=self.protein,
            fat=self.fat,
            carbs=self.carbs,
        )


def round_half_away(value: float, digits: int = 0) -> float:
    """Round to ``digits`` decimals, sending halves away from zero."""
    factor = 10**digits
    rounded = math.floor(abs(value) * factor + 0.5) / factor
    return math.copysign(rounded, value) if rounded else 0.0


def round_to_int(value: float) -> int:
    """Round to the nearest integer, sending halves away from zero."""
    return int(round_half_away(value))


def calculate_nutrition(
    recipe: Recipe, ingredients: Mapping[UUID, Ingredient]
) -> NutritionalInfo:
    """Compute total and per-serving macros for a recipe.

    Recipe ingredients missing from ``ingredients`` contribute nothing.
    Every value is rounded to one decimal place.
    """
    calories = protein = fat = carbs = 0.0
    for item in recipe.ingredients:
        ingredient = ingredients.get(item.ingredient_id)
        if ingredient is None:
            continue
        quantity = item.quantity_grams
        calories += ingredient.calories_per_gram * quantity
        protein += ingredient.protein_per_gram * quantity
        fat += ingredient.fat_per_gram * quantity
        carbs += ingredient.carbs_per_gram * quantity

    servings = recipe.servings
    return NutritionalInfo(
        calories=round_half_away(calories, 1),
        protein=round_half_away(protein, 1),
        fat=round_half_away(fat, 1),
        carbs=round_half_away(carbs, 1),
        per_serving=MacroProfile(
            calories=round_half_away(calories / servings, 1),
            protein=round_half_away(protein / servings, 1),
            fat=round_half_away(fat / servings, 1),
            carbs=round_half_away(carbs / servings, 1),
        ),
    )
