"""Tests for container wiring."""

from meal_planner.adapters.supabase_meal_plan_repository import (
    SupabaseMealPlanRepository,
)
from meal_planner.adapters.supabase_recipe_repository import SupabaseRecipeRepository
from meal_planner.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.settings is settings
    assert isinstance(container.recipe_service.repository, SupabaseRecipeRepository)
    assert isinstance(
        container.meal_plan_service.repository, SupabaseMealPlanRepository
    )
    assert (
        container.nutrition_service.resolver is container.meal_plan_service.resolver
    )
    assert container.shopping_list_service is not None


def test_wired_services_share_repositories(container, pantry_repository) -> None:
    assert container.pantry_service.repository is pantry_repository
    assert container.recipe_service.pantry_repository is pantry_repository
    assert container.shopping_list_service.pantry_repository is pantry_repository
