"""Meal plan scheduling services."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from meal_planner.domain.meal_plan import (
    DayMeals,
    PlannedMeal,
    group_meal_plan,
    meals_for_day,
    plan_meal,
)
from meal_planner.domain.models import Ingredient, MealPlanEntry, Recipe
from meal_planner.services.errors import NotFoundError, PermissionDeniedError
from meal_planner.services.ingredients import IngredientService
from meal_planner.services.recipes import RecipeRepository


class MealPlanRepository(Protocol):
    """Persistence interface for meal plan entries."""

    def list_entries(
        self, user_id: UUID, start: date, end: date
    ) -> list[MealPlanEntry]:
        """Return entries in an inclusive date range ordered by date and slot."""

    def get_entry(self, entry_id: UUID) -> MealPlanEntry | None:
        """Return an entry by id, if present."""

    def create_entry(self, user_id: UUID, payload: dict[str, object]) -> MealPlanEntry:
        """Create an entry for a user and return it."""

    def update_entry(
        self, entry_id: UUID, payload: dict[str, object]
    ) -> MealPlanEntry:
        """Update an entry and return it."""

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete an entry."""


@dataclass
class PlanResolver:
    """Resolves recipes and ingredients referenced by meal plan entries."""

    recipe_repository: RecipeRepository
    ingredient_service: IngredientService

    def resolve(
        self, entries: list[MealPlanEntry]
    ) -> tuple[dict[UUID, Recipe], dict[UUID, Ingredient]]:
        """Return id mappings for every recipe and ingredient in ``entries``.

        Missing recipes or ingredients are simply absent from the mappings.
        """
        recipe_ids = list(dict.fromkeys(entry.recipe_id for entry in entries))
        recipes = self.recipe_repository.get_recipes(recipe_ids) if recipe_ids else {}
        ingredients = self.ingredient_service.resolve(
            item.ingredient_id
            for recipe in recipes.values()
            for item in recipe.ingredients
        )
        return recipes, ingredients


@dataclass
class MealPlanService:
    """Application service for the weekly planner."""

    repository: MealPlanRepository
    resolver: PlanResolver

    def get_range(self, user_id: UUID, start: date, end: date) -> list[DayMeals]:
        """Return planned meals grouped by day and slot."""
        entries = self.repository.list_entries(user_id, start, end)
        recipes, ingredients = self.resolver.resolve(entries)
        return group_meal_plan(entries, recipes, ingredients)

    def get_day(self, user_id: UUID, day: date) -> DayMeals:
        """Return a single day's slots."""
        entries = self.repository.list_entries(user_id, day, day)
        recipes, ingredients = self.resolver.resolve(entries)
        return meals_for_day(day, entries, recipes, ingredients)

    def add_meal(self, user_id: UUID, payload: dict[str, object]) -> PlannedMeal:
        """Schedule a recipe into a slot."""
        recipe_id = payload["recipe_id"]
        recipes = self.resolver.recipe_repository
        if not isinstance(recipe_id, UUID) or recipes.get_recipe(recipe_id) is None:
            raise NotFoundError("Recipe not found")
        entry = self.repository.create_entry(user_id, payload)
        return self._plan(entry)

    def update_meal(
        self, user_id: UUID, entry_id: UUID, payload: dict[str, object]
    ) -> PlannedMeal:
        """Update an entry the user owns."""
        self._require_owned(user_id, entry_id, "update")
        entry = self.repository.update_entry(entry_id, payload)
        return self._plan(entry)

    def remove_meal(self, user_id: UUID, entry_id: UUID) -> None:
        """Delete an entry the user owns."""
        self._require_owned(user_id, entry_id, "delete")
        self.repository.delete_entry(entry_id)

    def _plan(self, entry: MealPlanEntry) -> PlannedMeal:
        recipes, ingredients = self.resolver.resolve([entry])
        return plan_meal(entry, recipes, ingredients)

    def _require_owned(
        self, user_id: UUID, entry_id: UUID, action: str
    ) -> MealPlanEntry:
        entry = self.repository.get_entry(entry_id)
        if entry is None:
            raise NotFoundError("Meal plan not found")
        if entry.user_id != user_id:
            raise PermissionDeniedError(f"Not authorized to {action} this meal plan")
        return entry
