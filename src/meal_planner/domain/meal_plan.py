"""Meal plan grouping and nutrition aggregation."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, timedelta
from uuid import UUID

from meal_planner.domain.models import (
    Ingredient,
    MacroTargets,
    MealPlanEntry,
    MealSlot,
    Recipe,
)
from meal_planner.domain.nutrition import (
    MacroProfile,
    NutritionalInfo,
    calculate_nutrition,
    round_to_int,
)

DAYS_IN_WEEK = 7


@dataclass(frozen=True)
class PlannedMeal:
    """A meal plan entry with its resolved recipe, if any."""

    entry: MealPlanEntry
    recipe: Recipe | None
    nutritional_info: NutritionalInfo | None


@dataclass(frozen=True)
class DayMeals:
    """Planned meals for one day, bucketed by slot."""

    date: str
    slots: dict[MealSlot, list[PlannedMeal]] = field(
        default_factory=lambda: {slot: [] for slot in MealSlot}
    )


@dataclass(frozen=True)
class DayNutrition:
    """Nutrition eaten on a day against the user's targets."""

    date: date
    nutrition: MacroProfile
    targets: MacroTargets
    percentages: MacroProfile


@dataclass(frozen=True)
class WeekNutrition:
    """Seven consecutive days of nutrition with averages."""

    days: list[DayNutrition]
    averages: MacroProfile
    targets: MacroTargets


def day_key(value: date) -> str:
    """Return the calendar key used to group a day."""
    return value.isoformat()


def plan_meal(
    entry: MealPlanEntry,
    recipes: Mapping[UUID, Recipe],
    ingredients: Mapping[UUID, Ingredient],
) -> PlannedMeal:
    """Resolve an entry's recipe and nutrition."""
    recipe = recipes.get(entry.recipe_id)
    info = calculate_nutrition(recipe, ingredients) if recipe is not None else None
    return PlannedMeal(entry=entry, recipe=recipe, nutritional_info=info)


def group_meal_plan(
    entries: list[MealPlanEntry],
    recipes: Mapping[UUID, Recipe],
    ingredients: Mapping[UUID, Ingredient],
) -> list[DayMeals]:
    """Group entries by day then slot, keeping query order.

    Entries whose recipe no longer exists stay in their slot with no
    nutritional info.
    """
    days: dict[str, DayMeals] = {}
    for entry in entries:
        key = day_key(entry.plan_date)
        if key not in days:
            days[key] = DayMeals(date=key)
        days[key].slots[entry.meal_type].append(plan_meal(entry, recipes, ingredients))
    return list(days.values())


def meals_for_day(
    day: date,
    entries: list[MealPlanEntry],
    recipes: Mapping[UUID, Recipe],
    ingredients: Mapping[UUID, Ingredient],
) -> DayMeals:
    """Return one day's slots, present even when empty."""
    meals = DayMeals(date=day_key(day))
    for entry in entries:
        if entry.plan_date == day:
            meals.slots[entry.meal_type].append(plan_meal(entry, recipes, ingredients))
    return meals


def day_nutrition(
    day: date,
    entries: list[MealPlanEntry],
    recipes: Mapping[UUID, Recipe],
    ingredients: Mapping[UUID, Ingredient],
    targets: MacroTargets,
) -> DayNutrition:
    """Sum per-serving macros scaled by planned servings for a day."""
    calories = protein = fat = carbs = 0.0
    for entry in entries:
        if entry.plan_date != day:
            continue
        recipe = recipes.get(entry.recipe_id)
        if recipe is None:
            continue
        per_serving = calculate_nutrition(recipe, ingredients).per_serving
        calories += per_serving.calories * entry.servings
        protein += per_serving.protein * entry.servings
        fat += per_serving.fat * entry.servings
        carbs += per_serving.carbs * entry.servings

    nutrition = MacroProfile(
        calories=round_to_int(calories),
        protein=round_to_int(protein),
        fat=round_to_int(fat),
        carbs=round_to_int(carbs),
    )
    return DayNutrition(
        date=day,
        nutrition=nutrition,
        targets=targets,
        percentages=MacroProfile(
            calories=_percentage(nutrition.calories, targets.calories),
            protein=_percentage(nutrition.protein, targets.protein),
            fat=_percentage(nutrition.fat, targets.fat),
            carbs=_percentage(nutrition.carbs, targets.carbs),
        ),
    )


def week_nutrition(
    start: date,
    entries: list[MealPlanEntry],
    recipes: Mapping[UUID, Recipe],
    ingredients: Mapping[UUID, Ingredient],
    targets: MacroTargets,
) -> WeekNutrition:
    """Return day nutrition for seven days from ``start`` with averages."""
    days = [
        day_nutrition(
            start + timedelta(days=offset), entries, recipes, ingredients, targets
        )
        for offset in range(DAYS_IN_WEEK)
    ]
    return WeekNutrition(
        days=days,
        averages=MacroProfile(
            calories=round_to_int(
                sum(day.nutrition.calories for day in days) / DAYS_IN_WEEK
            ),
            protein=round_to_int(
                sum(day.nutrition.protein for day in days) / DAYS_IN_WEEK
            ),
            fat=round_to_int(sum(day.nutrition.fat for day in days) / DAYS_IN_WEEK),
            carbs=round_to_int(sum(day.nutrition.carbs for day in days) / DAYS_IN_WEEK),
        ),
        targets=targets,
    )


def _percentage(actual: float, target: float) -> int:
    if target <= 0:
        return 0
    return round_to_int(actual / target * 100)


def monday_week_start(day: date) -> date:
    """Return the Monday on or before ``day``."""
    return day - timedelta(days=day.weekday())


def sunday_week_start(day: date) -> date:
    """Return the Sunday on or before ``day``."""
    return day - timedelta(days=(day.weekday() + 1) % DAYS_IN_WEEK)
