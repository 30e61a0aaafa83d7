"""Wire representations of domain objects."""

from datetime import date

from meal_planner.domain.meal_plan import (
    DayMeals,
    DayNutrition,
    PlannedMeal,
    WeekNutrition,
)
from meal_planner.domain.models import (
    Ingredient,
    MacroTargets,
    PantryItem,
    Recipe,
    UserPreferences,
)
from meal_planner.domain.nutrition import MacroProfile, NutritionalInfo
from meal_planner.domain.ranking import RankedRecipe, SuggestedRecipe
from meal_planner.domain.shopping import ShoppingList
from meal_planner.services.pantry import PantryContents
from meal_planner.services.recipes import RecipeDetail


def ingredient_to_dict(ingredient: Ingredient) -> dict[str, object]:
    return {
        "id": str(ingredient.id),
        "name": ingredient.name,
        "calories_per_gram": ingredient.calories_per_gram,
        "protein_per_gram": ingredient.protein_per_gram,
        "fat_per_gram": ingredient.fat_per_gram,
        "carbs_per_gram": ingredient.carbs_per_gram,
        "category": ingredient.category.value,
    }


def macros_to_dict(profile: MacroProfile) -> dict[str, float]:
    return {
        "calories": profile.calories,
        "protein": profile.protein,
        "fat": profile.fat,
        "carbs": profile.carbs,
    }


def nutritional_info_to_dict(info: NutritionalInfo) -> dict[str, object]:
    """Return recipe totals with the nested per-serving breakdown."""
    return {
        **macros_to_dict(info.total),
        "per_serving": macros_to_dict(info.per_serving),
    }


def targets_to_dict(targets: MacroTargets) -> dict[str, float]:
    return {
        "calories": targets.calories,
        "protein": targets.protein,
        "carbs": targets.carbs,
        "fat": targets.fat,
    }


def recipe_to_dict(recipe: Recipe) -> dict[str, object]:
    return {
        "id": str(recipe.id),
        "name": recipe.name,
        "instructions": recipe.instructions,
        "cooking_time_minutes": recipe.cooking_time_minutes,
        "servings": recipe.servings,
        "dietary_category": [tag.value for tag in recipe.dietary_category],
        "image_url": recipe.image_url,
        "created_by": str(recipe.created_by) if recipe.created_by else None,
        "created_at": recipe.created_at.isoformat() if recipe.created_at else None,
    }


def recipe_detail_to_dict(detail: RecipeDetail) -> dict[str, object]:
    """Return a recipe with populated ingredients and nutrition."""
    return {
        **recipe_to_dict(detail.recipe),
        "ingredients": [
            {
                "ingredient_id": str(item.ingredient_id),
                "ingredient": ingredient_to_dict(ingredient) if ingredient else None,
                "quantity_grams": item.quantity_grams,
            }
            for item, ingredient in detail.ingredients
        ],
        "nutritionalInfo": nutritional_info_to_dict(detail.nutritional_info),
    }


def ranked_recipe_to_dict(
    ranked: RankedRecipe, detail: RecipeDetail
) -> dict[str, object]:
    return {
        **recipe_detail_to_dict(detail),
        "matchPercentage": ranked.match_percentage,
        "missingCount": ranked.missing_count,
    }


def suggestion_to_dict(
    suggestion: SuggestedRecipe, detail: RecipeDetail
) -> dict[str, object]:
    """Return a suggestion with its score breakdown."""
    return {
        **recipe_detail_to_dict(detail),
        "matchPercentage": suggestion.match_percentage,
        "missingCount": suggestion.missing_count,
        "score": suggestion.score,
        "dietaryMatch": suggestion.dietary_match,
        "hasAllergens": suggestion.has_allergens,
        "hasDislikedIngredients": suggestion.has_disliked_ingredients,
    }


def pantry_item_to_dict(
    item: PantryItem, ingredient: Ingredient | None
) -> dict[str, object]:
    return {
        "id": str(item.id),
        "ingredient_id": str(item.ingredient_id),
        "ingredient": ingredient_to_dict(ingredient) if ingredient else None,
        "quantity_grams": item.quantity_grams,
        "expiry_date": item.expiry_date.isoformat() if item.expiry_date else None,
        "added_at": item.added_at.isoformat() if item.added_at else None,
    }


def pantry_to_dict(contents: PantryContents) -> dict[str, object]:
    return {
        "items": [
            pantry_item_to_dict(item, contents.ingredients.get(item.ingredient_id))
            for item in contents.pantry.items
        ]
    }


def planned_meal_to_dict(meal: PlannedMeal) -> dict[str, object]:
    """Return a meal plan entry; recipe and nutrition are None if it was deleted."""
    recipe: dict[str, object] | None = None
    nutrition: dict[str, object] | None = None
    if meal.recipe is not None and meal.nutritional_info is not None:
        nutrition = nutritional_info_to_dict(meal.nutritional_info)
        recipe = {**recipe_to_dict(meal.recipe), "nutritionalInfo": nutrition}
    return {
        "id": str(meal.entry.id),
        "recipe_id": str(meal.entry.recipe_id),
        "recipe": recipe,
        "plan_date": meal.entry.plan_date.isoformat(),
        "meal_type": meal.entry.meal_type.value,
        "servings": meal.entry.servings,
        "notes": meal.entry.notes,
        "nutritionalInfo": nutrition,
    }


def day_meals_to_dict(day: DayMeals) -> dict[str, object]:
    return {
        "date": day.date,
        **{
            slot.value: [planned_meal_to_dict(meal) for meal in meals]
            for slot, meals in day.slots.items()
        },
    }


def day_nutrition_to_dict(day: DayNutrition) -> dict[str, object]:
    return {
        "date": day.date.isoformat(),
        "nutrition": macros_to_dict(day.nutrition),
        "targets": targets_to_dict(day.targets),
        "percentages": macros_to_dict(day.percentages),
    }


def week_nutrition_to_dict(week: WeekNutrition) -> dict[str, object]:
    return {
        "weeklyData": [day_nutrition_to_dict(day) for day in week.days],
        "weeklyAverages": macros_to_dict(week.averages),
        "targets": targets_to_dict(week.targets),
    }


def shopping_list_to_dict(
    shopping_list: ShoppingList, start: date, end: date
) -> dict[str, object]:
    """Return a shopping list grouped by category name."""
    return {
        "startDate": start.isoformat(),
        "endDate": end.isoformat(),
        "shoppingList": {
            category.value: [
                {
                    "ingredient": ingredient_to_dict(item.ingredient),
                    "quantity_grams": item.quantity_grams,
                }
                for item in items
            ]
            for category, items in shopping_list.groups.items()
        },
        "totalItems": shopping_list.total_items,
    }


def preferences_to_dict(preferences: UserPreferences) -> dict[str, object]:
    return {
        "dietary_restrictions": [
            tag.value for tag in preferences.dietary_restrictions
        ],
        "allergies": list(preferences.allergies),
        "disliked_ingredients": list(preferences.disliked_ingredients),
        "daily_calorie_target": preferences.targets.calories,
        "daily_protein_target": preferences.targets.protein,
        "daily_carbs_target": preferences.targets.carbs,
        "daily_fat_target": preferences.targets.fat,
    }
