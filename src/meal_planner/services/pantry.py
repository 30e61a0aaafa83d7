"""Pantry inventory services."""

from dataclasses import dataclass, replace
from datetime import date
from typing import Protocol
from uuid import UUID

from meal_planner.domain.models import Ingredient, Pantry, PantryItem
from meal_planner.domain.pantry import add_ingredient, has_ingredient
from meal_planner.services.errors import NotFoundError
from meal_planner.services.ingredients import IngredientService


class PantryRepository(Protocol):
    """Persistence interface for pantry items."""

    def get_pantry(self, user_id: UUID) -> Pantry:
        """Return the user's pantry, empty when nothing is stocked."""

    def create_item(self, user_id: UUID, item: PantryItem) -> PantryItem:
        """Insert a pantry item and return it."""

    def update_item(self, user_id: UUID, item: PantryItem) -> PantryItem:
        """Replace a pantry item's quantity and expiry and return it."""

    def remove_item(self, user_id: UUID, item_id: UUID) -> None:
        """Remove a pantry item if present."""


@dataclass(frozen=True)
class PantryContents:
    """Pantry with its ingredients populated."""

    pantry: Pantry
    ingredients: dict[UUID, Ingredient]


@dataclass
class PantryService:
    """Application service for pantry inventory."""

    repository: PantryRepository
    ingredient_service: IngredientService

    def get_contents(self, user_id: UUID) -> PantryContents:
        """Return the pantry with ingredient records."""
        pantry = self.repository.get_pantry(user_id)
        ingredients = self.ingredient_service.resolve(
            item.ingredient_id for item in pantry.items
        )
        return PantryContents(pantry=pantry, ingredients=ingredients)

    def add(
        self,
        user_id: UUID,
        ingredient_id: UUID,
        quantity_grams: float,
        expiry_date: date | None = None,
    ) -> PantryContents:
        """Stock an ingredient, adding to an existing row when present."""
        self.ingredient_service.get(ingredient_id)
        pantry = self.repository.get_pantry(user_id)
        item, existed = add_ingredient(
            pantry, ingredient_id, quantity_grams, expiry_date
        )
        if existed:
            self.repository.update_item(user_id, item)
        else:
            self.repository.create_item(user_id, item)
        return self.get_contents(user_id)

    def update_quantity(
        self, user_id: UUID, item_id: UUID, quantity_grams: float
    ) -> PantryContents:
        """Overwrite the stocked quantity of a pantry item."""
        pantry = self.repository.get_pantry(user_id)
        item = next((entry for entry in pantry.items if entry.id == item_id), None)
        if item is None:
            raise NotFoundError("Item not found in pantry")
        self.repository.update_item(
            user_id, replace(item, quantity_grams=quantity_grams)
        )
        return self.get_contents(user_id)

    def remove(self, user_id: UUID, item_id: UUID) -> PantryContents:
        """Remove a pantry item by id."""
        self.repository.remove_item(user_id, item_id)
        return self.get_contents(user_id)

    def has_ingredient(
        self, user_id: UUID, ingredient_id: UUID, required_quantity: float = 0
    ) -> bool:
        """Return True when the pantry stocks enough of an ingredient."""
        pantry = self.repository.get_pantry(user_id)
        return has_ingredient(pantry, ingredient_id, required_quantity)
