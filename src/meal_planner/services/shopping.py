"""Shopping list service."""

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from meal_planner.domain.shopping import ShoppingList, generate_shopping_list
from meal_planner.services.meal_plan import MealPlanRepository, PlanResolver
from meal_planner.services.pantry import PantryRepository

_logger = logging.getLogger(__name__)


@dataclass
class ShoppingListService:
    """Builds shopping lists from planned meals and pantry stock."""

    meal_plan_repository: MealPlanRepository
    pantry_repository: PantryRepository
    resolver: PlanResolver

    def generate(self, user_id: UUID, start: date, end: date) -> ShoppingList:
        """Return what to buy for meals planned between ``start`` and ``end``."""
        entries = self.meal_plan_repository.list_entries(user_id, start, end)
        recipes, ingredients = self.resolver.resolve(entries)
        pantry = self.pantry_repository.get_pantry(user_id)
        shopping_list = generate_shopping_list(entries, recipes, ingredients, pantry)
        _logger.info(
            "Shopping list for user %s (%s to %s): %s entries, %s items",
            user_id,
            start,
            end,
            len(entries),
            shopping_list.total_items,
        )
        return shopping_list
