"""Ingredient catalogue endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from meal_planner.api.dependencies import current_user_id
from meal_planner.api.schemas import IngredientCreate
from meal_planner.api.serializers import ingredient_to_dict
from meal_planner.containers import AppContainer
from meal_planner.domain.models import IngredientCategory

router = APIRouter(
    prefix="/api/ingredients",
    tags=["ingredients"],
    dependencies=[Depends(current_user_id)],
)


@router.get("")
def list_ingredients(
    request: Request,
    search: str | None = None,
    category: IngredientCategory | None = None,
) -> dict[str, object]:
    """Search the catalogue by partial name and category."""
    container: AppContainer = request.app.state.container
    ingredients = container.ingredient_service.search(search, category)
    return {
        "success": True,
        "data": {
            "ingredients": [ingredient_to_dict(item) for item in ingredients],
            "count": len(ingredients),
        },
    }


@router.get("/{ingredient_id}")
def get_ingredient(ingredient_id: UUID, request: Request) -> dict[str, object]:
    """Return one catalogue ingredient."""
    container: AppContainer = request.app.state.container
    ingredient = container.ingredient_service.get(ingredient_id)
    return {"success": True, "data": {"ingredient": ingredient_to_dict(ingredient)}}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_ingredient(body: IngredientCreate, request: Request) -> dict[str, object]:
    """Add an ingredient to the catalogue."""
    container: AppContainer = request.app.state.container
    ingredient = container.ingredient_service.create(body.model_dump())
    return {"success": True, "data": {"ingredient": ingredient_to_dict(ingredient)}}
