"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from meal_planner.adapters.supabase_ingredient_repository import (
    SupabaseIngredientRepository,
)
from meal_planner.adapters.supabase_meal_plan_repository import (
    SupabaseMealPlanRepository,
)
from meal_planner.adapters.supabase_pantry_repository import SupabasePantryRepository
from meal_planner.adapters.supabase_recipe_repository import SupabaseRecipeRepository
from meal_planner.adapters.supabase_user_repository import SupabaseUserRepository
from meal_planner.config import Settings
from meal_planner.services.ingredients import IngredientRepository, IngredientService
from meal_planner.services.meal_plan import (
    MealPlanRepository,
    MealPlanService,
    PlanResolver,
)
from meal_planner.services.nutrition import NutritionService
from meal_planner.services.pantry import PantryRepository, PantryService
from meal_planner.services.recipes import RecipeRepository, RecipeService
from meal_planner.services.shopping import ShoppingListService
from meal_planner.services.users import UserRepository, UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    ingredient_service: IngredientService
    pantry_service: PantryService
    recipe_service: RecipeService
    meal_plan_service: MealPlanService
    nutrition_service: NutritionService
    shopping_list_service: ShoppingListService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    ingredient_repository = SupabaseIngredientRepository(supabase_client)
    pantry_repository = SupabasePantryRepository(supabase_client)
    recipe_repository = SupabaseRecipeRepository(supabase_client)
    meal_plan_repository = SupabaseMealPlanRepository(supabase_client)
    return wire_services(
        settings=resolved_settings,
        user_repository=user_repository,
        ingredient_repository=ingredient_repository,
        pantry_repository=pantry_repository,
        recipe_repository=recipe_repository,
        meal_plan_repository=meal_plan_repository,
    )


def wire_services(  # noqa: PLR0913
    *,
    settings: Settings,
    user_repository: UserRepository,
    ingredient_repository: IngredientRepository,
    pantry_repository: PantryRepository,
    recipe_repository: RecipeRepository,
    meal_plan_repository: MealPlanRepository,
) -> AppContainer:
    """Build services on top of the given repositories."""
    user_service = UserService(user_repository)
    ingredient_service = IngredientService(ingredient_repository)
    pantry_service = PantryService(
        repository=pantry_repository,
        ingredient_service=ingredient_service,
    )
    recipe_service = RecipeService(
        repository=recipe_repository,
        ingredient_service=ingredient_service,
        pantry_repository=pantry_repository,
        user_service=user_service,
    )
    resolver = PlanResolver(
        recipe_repository=recipe_repository,
        ingredient_service=ingredient_service,
    )
    meal_plan_service = MealPlanService(
        repository=meal_plan_repository,
        resolver=resolver,
    )
    nutrition_service = NutritionService(
        meal_plan_repository=meal_plan_repository,
        resolver=resolver,
        user_service=user_service,
    )
    shopping_list_service = ShoppingListService(
        meal_plan_repository=meal_plan_repository,
        pantry_repository=pantry_repository,
        resolver=resolver,
    )
    return AppContainer(
        settings=settings,
        user_service=user_service,
        ingredient_service=ingredient_service,
        pantry_service=pantry_service,
        recipe_service=recipe_service,
        meal_plan_service=meal_plan_service,
        nutrition_service=nutrition_service,
        shopping_list_service=shopping_list_service,
    )
