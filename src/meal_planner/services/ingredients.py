"""Ingredient catalogue services."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from meal_planner.domain.models import Ingredient, IngredientCategory
from meal_planner.services.errors import NotFoundError


class IngredientRepository(Protocol):
    """Persistence interface for ingredients."""

    def list_ingredients(
        self, search: str | None, category: IngredientCategory | None
    ) -> list[Ingredient]:
        """Return ingredients matching an optional name search and category."""

    def get_ingredient(self, ingredient_id: UUID) -> Ingredient | None:
        """Return an ingredient by id, if present."""

    def get_ingredients(self, ingredient_ids: list[UUID]) -> dict[UUID, Ingredient]:
        """Return the ingredients that exist among the given ids."""

    def create_ingredient(self, payload: dict[str, object]) -> Ingredient:
        """Create an ingredient and return it."""


@dataclass
class IngredientService:
    """Application service for the ingredient catalogue."""

    repository: IngredientRepository

    def search(
        self, search: str | None = None, category: IngredientCategory | None = None
    ) -> list[Ingredient]:
        """Search ingredients by partial name and category."""
        return self.repository.list_ingredients(search or None, category)

    def get(self, ingredient_id: UUID) -> Ingredient:
        """Return an ingredient or raise NotFoundError."""
        ingredient = self.repository.get_ingredient(ingredient_id)
        if ingredient is None:
            raise NotFoundError("Ingredient not found")
        return ingredient

    def create(self, payload: dict[str, object]) -> Ingredient:
        """Create a new ingredient."""
        return self.repository.create_ingredient(payload)

    def resolve(self, ingredient_ids: Iterable[UUID]) -> dict[UUID, Ingredient]:
        """Return an id to ingredient mapping for the ids that exist."""
        unique_ids = list(dict.fromkeys(ingredient_ids))
        if not unique_ids:
            return {}
        return self.repository.get_ingredients(unique_ids)
