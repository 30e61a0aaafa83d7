"""Recipe browsing, suggestion and management services."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from meal_planner.domain.models import (
    DietaryTag,
    Ingredient,
    Recipe,
    RecipeIngredient,
)
from meal_planner.domain.nutrition import NutritionalInfo, calculate_nutrition
from meal_planner.domain.ranking import (
    RankedRecipe,
    SuggestedRecipe,
    cookable_recipes,
    find_recipes,
    suggest_recipes,
)
from meal_planner.services.errors import NotFoundError, PermissionDeniedError
from meal_planner.services.ingredients import IngredientService
from meal_planner.services.pantry import PantryRepository
from meal_planner.services.users import UserService

_logger = logging.getLogger(__name__)


class RecipeRepository(Protocol):
    """Persistence interface for recipes."""

    def list_recipes(self, max_cooking_time: int | None = None) -> list[Recipe]:
        """Return recipes, optionally bounded by cooking time."""

    def list_recent_recipes(self, limit: int) -> list[Recipe]:
        """Return the most recently created recipes."""

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        """Return a recipe by id, if present."""

    def get_recipes(self, recipe_ids: list[UUID]) -> dict[UUID, Recipe]:
        """Return the recipes that exist among the given ids."""

    def create_recipe(self, user_id: UUID, payload: dict[str, object]) -> Recipe:
        """Create a recipe owned by a user and return it."""

    def update_recipe(self, recipe_id: UUID, payload: dict[str, object]) -> Recipe:
        """Update a recipe and return it."""

    def delete_recipe(self, recipe_id: UUID) -> None:
        """Delete a recipe."""


@dataclass(frozen=True)
class RecipeDetail:
    """Recipe with populated ingredients and nutrition."""

    recipe: Recipe
    ingredients: list[tuple[RecipeIngredient, Ingredient | None]]
    nutritional_info: NutritionalInfo


@dataclass
class RecipeService:
    """Application service for recipes."""

    repository: RecipeRepository
    ingredient_service: IngredientService
    pantry_repository: PantryRepository
    user_service: UserService

    def find(
        self,
        user_id: UUID,
        search: str | None = None,
        max_cooking_time: int | None = None,
    ) -> list[tuple[RankedRecipe, RecipeDetail]]:
        """Browse recipes ranked by pantry coverage, filtered by name."""
        preferences = self.user_service.get_preferences(user_id)
        pantry = self.pantry_repository.get_pantry(user_id)
        recipes = self.repository.list_recipes(max_cooking_time)
        ranked = find_recipes(
            recipes,
            preferences,
            pantry.ingredient_ids(),
            max_cooking_time=max_cooking_time,
        )
        if search:
            needle = search.lower()
            ranked = [item for item in ranked if needle in item.recipe.name.lower()]
        details = self.describe_many([item.recipe for item in ranked])
        return list(zip(ranked, details, strict=True))

    def suggest(
        self,
        user_id: UUID,
        max_cooking_time: int | None = None,
        limit: int = 10,
    ) -> list[tuple[SuggestedRecipe, RecipeDetail]]:
        """Return scored suggestions for a user."""
        preferences = self.user_service.get_preferences(user_id)
        pantry = self.pantry_repository.get_pantry(user_id)
        recipes = self.repository.list_recipes(max_cooking_time)
        ingredients = self._resolve_ingredients(recipes)
        suggestions = suggest_recipes(
            recipes,
            ingredients,
            preferences,
            pantry.ingredient_ids(),
            max_cooking_time=max_cooking_time,
            limit=limit,
        )
        _logger.info(
            "Suggested %s of %s recipes for user %s",
            len(suggestions),
            len(recipes),
            user_id,
        )
        return [
            (item, _describe(item.recipe, ingredients)) for item in suggestions
        ]

    def cookable(self, user_id: UUID) -> list[RecipeDetail]:
        """Return recipes the user's pantry fully covers."""
        pantry = self.pantry_repository.get_pantry(user_id)
        recipes = cookable_recipes(
            self.repository.list_recipes(), pantry.ingredient_ids()
        )
        return self.describe_many(recipes)

    def recent(self, limit: int = 10) -> list[RecipeDetail]:
        """Return the most recently created recipes."""
        return self.describe_many(self.repository.list_recent_recipes(limit))

    def get(self, recipe_id: UUID) -> RecipeDetail:
        """Return a recipe with nutrition or raise NotFoundError."""
        return self.describe(self._require(recipe_id))

    def create(self, user_id: UUID, payload: dict[str, object]) -> RecipeDetail:
        """Create a recipe owned by the user; untagged recipes are tagged none."""
        if not payload.get("dietary_category"):
            payload = {**payload, "dietary_category": [DietaryTag.NONE]}
        return self.describe(self.repository.create_recipe(user_id, payload))

    def update(
        self, user_id: UUID, recipe_id: UUID, payload: dict[str, object]
    ) -> RecipeDetail:
        """Update a recipe the user owns."""
        recipe = self._require(recipe_id)
        _check_owner(recipe, user_id, "update")
        return self.describe(self.repository.update_recipe(recipe_id, payload))

    def delete(self, user_id: UUID, recipe_id: UUID) -> None:
        """Delete a recipe the user owns."""
        recipe = self._require(recipe_id)
        _check_owner(recipe, user_id, "delete")
        self.repository.delete_recipe(recipe_id)

    def describe(self, recipe: Recipe) -> RecipeDetail:
        """Populate a recipe's ingredients and compute its nutrition."""
        return _describe(recipe, self._resolve_ingredients([recipe]))

    def describe_many(self, recipes: list[Recipe]) -> list[RecipeDetail]:
        """Populate several recipes with one ingredient lookup."""
        ingredients = self._resolve_ingredients(recipes)
        return [_describe(recipe, ingredients) for recipe in recipes]

    def _resolve_ingredients(self, recipes: list[Recipe]) -> dict[UUID, Ingredient]:
        return self.ingredient_service.resolve(
            item.ingredient_id for recipe in recipes for item in recipe.ingredients
        )

    def _require(self, recipe_id: UUID) -> Recipe:
        recipe = self.repository.get_recipe(recipe_id)
        if recipe is None:
            raise NotFoundError("Recipe not found")
        return recipe


def _describe(recipe: Recipe, ingredients: dict[UUID, Ingredient]) -> RecipeDetail:
    return RecipeDetail(
        recipe=recipe,
        ingredients=[
            (item, ingredients.get(item.ingredient_id)) for item in recipe.ingredients
        ],
        nutritional_info=calculate_nutrition(recipe, ingredients),
    )


def _check_owner(recipe: Recipe, user_id: UUID, action: str) -> None:
    if recipe.created_by is not None and recipe.created_by != user_id:
        raise PermissionDeniedError(f"Not authorized to {action} this recipe")
