"""Tests for meal plan grouping and nutrition aggregation."""

from datetime import date, timedelta
from uuid import uuid4

from meal_planner.domain.meal_plan import (
    day_nutrition,
    group_meal_plan,
    meals_for_day,
    monday_week_start,
    sunday_week_start,
    week_nutrition,
)
from meal_planner.domain.models import MacroTargets, MealSlot
from tests.conftest import make_entry, make_ingredient, make_recipe

PASTA = make_ingredient("Pasta", 3.5, 0.125, 0.0625, 0.75)
SAUCE = make_ingredient("Tomato sauce", 0.5, 0.25, 0.0, 0.125)
INGREDIENTS = {PASTA.id: PASTA, SAUCE.id: SAUCE}
# Per serving: 400 kcal, 37.5 g protein, 6.3 g fat, 87.5 g carbs
DINNER = make_recipe("Pasta", [(PASTA, 200), (SAUCE, 200)], servings=2)
MONDAY = date(2024, 3, 4)


def test_groups_by_day_with_all_slots() -> None:
    user_id = uuid4()
    entries = [
        make_entry(user_id, DINNER, MONDAY, MealSlot.DINNER),
        make_entry(user_id, DINNER, MONDAY, MealSlot.LUNCH),
        make_entry(user_id, DINNER, MONDAY + timedelta(days=2), MealSlot.DINNER),
    ]

    days = group_meal_plan(entries, {DINNER.id: DINNER}, INGREDIENTS)

    assert [day.date for day in days] == ["2024-03-04", "2024-03-06"]
    assert list(days[0].slots) == [
        MealSlot.BREAKFAST,
        MealSlot.LUNCH,
        MealSlot.DINNER,
        MealSlot.SNACK,
    ]
    assert days[0].slots[MealSlot.BREAKFAST] == []
    assert len(days[0].slots[MealSlot.LUNCH]) == 1
    assert days[1].slots[MealSlot.DINNER][0].recipe == DINNER


def test_deleted_recipe_stays_in_slot_without_nutrition() -> None:
    user_id = uuid4()
    orphan = make_recipe("Gone", [(PASTA, 100)])
    entry = make_entry(user_id, orphan, MONDAY, MealSlot.SNACK)

    day = meals_for_day(MONDAY, [entry], {}, INGREDIENTS)

    (meal,) = day.slots[MealSlot.SNACK]
    assert meal.entry == entry
    assert meal.recipe is None
    assert meal.nutritional_info is None


def test_empty_day_has_every_slot() -> None:
    day = meals_for_day(MONDAY, [], {}, {})

    assert day.date == "2024-03-04"
    assert all(meals == [] for meals in day.slots.values())
    assert len(day.slots) == 4


def test_day_nutrition_scales_by_planned_servings() -> None:
    user_id = uuid4()
    entries = [
        make_entry(user_id, DINNER, MONDAY, MealSlot.DINNER, servings=2),
        make_entry(user_id, DINNER, MONDAY, MealSlot.LUNCH, servings=1),
        make_entry(user_id, DINNER, MONDAY + timedelta(days=1)),
    ]
    targets = MacroTargets(calories=2000, protein=50, carbs=250, fat=70)

    result = day_nutrition(
        MONDAY, entries, {DINNER.id: DINNER}, INGREDIENTS, targets
    )

    assert result.nutrition.calories == 1200
    assert result.nutrition.protein == 113
    assert result.nutrition.fat == 19
    assert result.nutrition.carbs == 263
    assert result.percentages.calories == 60
    assert result.percentages.protein == 226
    assert result.percentages.carbs == 105
    assert result.percentages.fat == 27
    assert result.targets == targets


def test_zero_target_gives_zero_percentage() -> None:
    user_id = uuid4()
    entries = [make_entry(user_id, DINNER, MONDAY)]
    targets = MacroTargets(calories=2000, protein=0, carbs=250, fat=70)

    result = day_nutrition(
        MONDAY, entries, {DINNER.id: DINNER}, INGREDIENTS, targets
    )

    assert result.percentages.protein == 0


def test_unresolved_recipe_contributes_nothing() -> None:
    user_id = uuid4()
    orphan = make_recipe("Gone", [(PASTA, 100)])
    entries = [make_entry(user_id, orphan, MONDAY)]

    result = day_nutrition(MONDAY, entries, {}, INGREDIENTS, MacroTargets())

    assert result.nutrition.calories == 0
    assert result.percentages.calories == 0


def test_week_nutrition_averages_over_seven_days() -> None:
    user_id = uuid4()
    entries = [
        make_entry(user_id, DINNER, MONDAY),
        make_entry(user_id, DINNER, MONDAY + timedelta(days=3), servings=2),
        make_entry(user_id, DINNER, MONDAY + timedelta(days=7)),
    ]

    week = week_nutrition(
        MONDAY, entries, {DINNER.id: DINNER}, INGREDIENTS, MacroTargets()
    )

    assert [day.date for day in week.days] == [
        MONDAY + timedelta(days=offset) for offset in range(7)
    ]
    assert [day.nutrition.calories for day in week.days] == [
        400,
        0,
        0,
        800,
        0,
        0,
        0,
    ]
    assert week.averages.calories == round(1200 / 7)
    assert week.averages.protein == round((38 + 75) / 7)
    assert week.targets == MacroTargets()


def test_week_start_helpers() -> None:
    wednesday = date(2024, 3, 6)

    assert monday_week_start(wednesday) == date(2024, 3, 4)
    assert sunday_week_start(wednesday) == date(2024, 3, 3)
    assert sunday_week_start(date(2024, 3, 3)) == date(2024, 3, 3)
    assert monday_week_start(date(2024, 3, 3)) == date(2024, 2, 26)
