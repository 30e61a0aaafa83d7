"""Recipe endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status

from meal_planner.api.dependencies import current_user_id
from meal_planner.api.schemas import RecipeCreate, RecipeUpdate
from meal_planner.api.serializers import (
    ranked_recipe_to_dict,
    recipe_detail_to_dict,
    suggestion_to_dict,
)
from meal_planner.containers import AppContainer

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


@router.get("")
def list_recipes(
    request: Request,
    search: str | None = None,
    max_cooking_time: int | None = Query(default=None, ge=0),
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Browse recipes ranked by how much of each the pantry covers."""
    container: AppContainer = request.app.state.container
    results = container.recipe_service.find(user_id, search, max_cooking_time)
    recipes = [ranked_recipe_to_dict(ranked, detail) for ranked, detail in results]
    return {"success": True, "data": {"recipes": recipes, "count": len(recipes)}}


@router.get("/suggest")
def suggest_recipes(
    request: Request,
    max_cooking_time: int | None = Query(default=None, ge=0),
    limit: int | None = Query(default=None, ge=1),
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Return scored recipe suggestions for the caller."""
    container: AppContainer = request.app.state.container
    results = container.recipe_service.suggest(
        user_id,
        max_cooking_time=max_cooking_time,
        limit=limit or container.settings.suggestion_limit,
    )
    suggestions = [suggestion_to_dict(item, detail) for item, detail in results]
    return {
        "success": True,
        "data": {"suggestions": suggestions, "count": len(suggestions)},
    }


@router.get("/cookable")
def cookable_recipes(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Return recipes whose every ingredient is in the caller's pantry."""
    container: AppContainer = request.app.state.container
    recipes = [
        recipe_detail_to_dict(detail)
        for detail in container.recipe_service.cookable(user_id)
    ]
    return {"success": True, "data": {"recipes": recipes, "count": len(recipes)}}


@router.get("/recent", dependencies=[Depends(current_user_id)])
def recent_recipes(
    request: Request, limit: int | None = Query(default=None, ge=1)
) -> dict[str, object]:
    """Return the most recently created recipes."""
    container: AppContainer = request.app.state.container
    details = container.recipe_service.recent(
        limit or container.settings.recent_recipes_limit
    )
    recipes = [recipe_detail_to_dict(detail) for detail in details]
    return {"success": True, "data": {"recipes": recipes, "count": len(recipes)}}


@router.get("/{recipe_id}", dependencies=[Depends(current_user_id)])
def get_recipe(recipe_id: UUID, request: Request) -> dict[str, object]:
    """Return one recipe with its ingredients and nutrition."""
    container: AppContainer = request.app.state.container
    detail = container.recipe_service.get(recipe_id)
    return {"success": True, "data": {"recipe": recipe_detail_to_dict(detail)}}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_recipe(
    body: RecipeCreate,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Create a recipe owned by the caller."""
    container: AppContainer = request.app.state.container
    detail = container.recipe_service.create(user_id, body.model_dump())
    return {"success": True, "data": {"recipe": recipe_detail_to_dict(detail)}}


@router.put("/{recipe_id}")
def update_recipe(
    recipe_id: UUID,
    body: RecipeUpdate,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Update a recipe; only its creator may change it."""
    container: AppContainer = request.app.state.container
    detail = container.recipe_service.update(
        user_id, recipe_id, body.model_dump(exclude_unset=True)
    )
    return {"success": True, "data": {"recipe": recipe_detail_to_dict(detail)}}


@router.delete("/{recipe_id}")
def delete_recipe(
    recipe_id: UUID,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Delete a recipe; only its creator may remove it."""
    container: AppContainer = request.app.state.container
    container.recipe_service.delete(user_id, recipe_id)
    return {"success": True, "message": "Recipe deleted successfully"}
