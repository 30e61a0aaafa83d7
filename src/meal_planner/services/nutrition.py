"""Daily and weekly nutrition tracking against planned meals."""

from dataclasses import dataclass
from datetime import date, timedelta
from uuid import UUID

from meal_planner.domain.meal_plan import (
    DAYS_IN_WEEK,
    DayNutrition,
    WeekNutrition,
    day_nutrition,
    week_nutrition,
)
from meal_planner.services.meal_plan import MealPlanRepository, PlanResolver
from meal_planner.services.users import UserService


@dataclass
class NutritionService:
    """Service computing nutrition from a user's meal plan."""

    meal_plan_repository: MealPlanRepository
    resolver: PlanResolver
    user_service: UserService

    def get_day(self, user_id: UUID, day: date) -> DayNutrition:
        """Return one day's totals and target percentages."""
        targets = self.user_service.get_preferences(user_id).targets
        entries = self.meal_plan_repository.list_entries(user_id, day, day)
        recipes, ingredients = self.resolver.resolve(entries)
        return day_nutrition(day, entries, recipes, ingredients, targets)

    def get_week(self, user_id: UUID, start: date) -> WeekNutrition:
        """Return seven days of totals from ``start`` with averages."""
        targets = self.user_service.get_preferences(user_id).targets
        end = start + timedelta(days=DAYS_IN_WEEK - 1)
        entries = self.meal_plan_repository.list_entries(user_id, start, end)
        recipes, ingredients = self.resolver.resolve(entries)
        return week_nutrition(start, entries, recipes, ingredients, targets)
