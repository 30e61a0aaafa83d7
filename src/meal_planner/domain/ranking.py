"""Recipe ranking against a user's pantry and preferences.

Two rankings exist side by side. ``find_recipes`` backs plain recipe
browsing: it filters on dietary restrictions and cooking time and orders
by pantry coverage. ``suggest_recipes`` backs suggestions: it scores each
recipe, penalising dietary mismatches and disliked ingredients, removing
anything containing an allergen, and rewarding full pantry coverage.
"""

import logging
from collections.abc import Collection, Mapping
from dataclasses import dataclass
from uuid import UUID

from meal_planner.domain.models import (
    DietaryTag,
    Ingredient,
    MealSlot,
    Recipe,
    UserPreferences,
)
from meal_planner.domain.nutrition import round_to_int
from meal_planner.domain.pantry import match_pantry

DIETARY_MISMATCH_PENALTY = 50
DISLIKED_INGREDIENT_PENALTY = 30
FULL_PANTRY_BONUS = 20
ALLERGEN_SCORE = -1000
EXCLUSION_THRESHOLD = -100

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RankedRecipe:
    """Recipe with its pantry coverage."""

    recipe: Recipe
    match_percentage: float
    missing_count: int


@dataclass(frozen=True)
class SuggestedRecipe:
    """Scored recipe suggestion."""

    recipe: Recipe
    match_percentage: int
    missing_count: int
    score: float
    dietary_match: bool
    has_allergens: bool
    has_disliked_ingredients: bool


def suggest_recipes(  # noqa: PLR0913
    recipes: list[Recipe],
    ingredients: Mapping[UUID, Ingredient],
    preferences: UserPreferences,
    pantry_ingredient_ids: Collection[UUID],
    *,
    max_cooking_time: int | None = None,
    meal_type: MealSlot | None = None,
    limit: int | None = None,
) -> list[SuggestedRecipe]:
    """Score, filter and order recipes for a user.

    ``meal_type`` is accepted for callers that track it but does not
    filter. ``limit`` is applied after the full sort.
    """
    allergies = _normalise(preferences.allergies)
    dislikes = _normalise(preferences.disliked_ingredients)
    suggestions: list[SuggestedRecipe] = []
    for recipe in _within_cooking_time(recipes, max_cooking_time):
        suggestion = _score_recipe(
            recipe,
            ingredients,
            preferences.dietary_restrictions,
            allergies,
            dislikes,
            pantry_ingredient_ids,
        )
        if suggestion.has_allergens:
            continue
        if suggestion.score <= EXCLUSION_THRESHOLD:
            _logger.warning(
                "Recipe %s excluded by score %s without allergens",
                recipe.id,
                suggestion.score,
            )
            continue
        suggestions.append(suggestion)

    ordered = sorted(suggestions, key=lambda item: (-item.score, item.missing_count))
    if limit is not None:
        return ordered[:limit]
    return ordered


def find_recipes(
    recipes: list[Recipe],
    preferences: UserPreferences,
    pantry_ingredient_ids: Collection[UUID],
    *,
    max_cooking_time: int | None = None,
) -> list[RankedRecipe]:
    """Filter by dietary restrictions and order by pantry coverage."""
    restrictions = set(preferences.dietary_restrictions)
    ranked: list[RankedRecipe] = []
    for recipe in _within_cooking_time(recipes, max_cooking_time):
        if restrictions and not restrictions.intersection(recipe.dietary_category):
            continue
        match = match_pantry(recipe.ingredient_ids(), pantry_ingredient_ids)
        ranked.append(
            RankedRecipe(
                recipe=recipe,
                match_percentage=match.match_percentage,
                missing_count=match.missing_count,
            )
        )
    return sorted(
        ranked, key=lambda item: (-item.match_percentage, item.missing_count)
    )


def cookable_recipes(
    recipes: list[Recipe], pantry_ingredient_ids: Collection[UUID]
) -> list[Recipe]:
    """Return recipes whose every ingredient is stocked."""
    return [
        recipe
        for recipe in recipes
        if all(
            ingredient_id in pantry_ingredient_ids
            for ingredient_id in recipe.ingredient_ids()
        )
    ]


def _score_recipe(  # noqa: PLR0913
    recipe: Recipe,
    ingredients: Mapping[UUID, Ingredient],
    restrictions: list[DietaryTag],
    allergies: set[str],
    dislikes: set[str],
    pantry_ingredient_ids: Collection[UUID],
) -> SuggestedRecipe:
    match = match_pantry(recipe.ingredient_ids(), pantry_ingredient_ids)
    names = _ingredient_names(recipe, ingredients)

    dietary_match = (
        not restrictions
        or any(tag in recipe.dietary_category for tag in restrictions)
        or DietaryTag.NONE in recipe.dietary_category
    )
    has_disliked = any(name in dislikes for name in names)
    has_allergens = any(name in allergies for name in names)

    score = match.match_percentage
    if not dietary_match:
        score -= DIETARY_MISMATCH_PENALTY
    if has_disliked:
        score -= DISLIKED_INGREDIENT_PENALTY
    if has_allergens:
        score = ALLERGEN_SCORE
    if match.missing_count == 0:
        score += FULL_PANTRY_BONUS

    return SuggestedRecipe(
        recipe=recipe,
        match_percentage=round_to_int(match.match_percentage),
        missing_count=match.missing_count,
        score=score,
        dietary_match=dietary_match,
        has_allergens=has_allergens,
        has_disliked_ingredients=has_disliked,
    )


def _ingredient_names(
    recipe: Recipe, ingredients: Mapping[UUID, Ingredient]
) -> list[str]:
    names = []
    for item in recipe.ingredients:
        ingredient = ingredients.get(item.ingredient_id)
        if ingredient is not None:
            names.append(ingredient.name.lower())
    return names


def _normalise(values: list[str]) -> set[str]:
    return {value.strip().lower() for value in values if value.strip()}


def _within_cooking_time(
    recipes: list[Recipe], max_cooking_time: int | None
) -> list[Recipe]:
    if max_cooking_time is None:
        return list(recipes)
    return [
        recipe for recipe in recipes if recipe.cooking_time_minutes <= max_cooking_time
    ]
