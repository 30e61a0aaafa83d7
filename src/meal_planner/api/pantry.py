"""Pantry endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status

from meal_planner.api.dependencies import current_user_id
from meal_planner.api.schemas import PantryAdd, PantryUpdate
from meal_planner.api.serializers import pantry_to_dict
from meal_planner.containers import AppContainer

router = APIRouter(prefix="/api/pantry", tags=["pantry"])


@router.get("")
def get_pantry(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Return the caller's pantry with ingredient details."""
    container: AppContainer = request.app.state.container
    contents = container.pantry_service.get_contents(user_id)
    return {"success": True, "data": {"pantry": pantry_to_dict(contents)}}


@router.post("", status_code=status.HTTP_201_CREATED)
def add_to_pantry(
    body: PantryAdd,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Stock an ingredient; an existing row has its quantity increased."""
    container: AppContainer = request.app.state.container
    contents = container.pantry_service.add(
        user_id, body.ingredient_id, body.quantity_grams, body.expiry_date
    )
    return {"success": True, "data": {"pantry": pantry_to_dict(contents)}}


@router.get("/has/{ingredient_id}")
def has_ingredient(
    ingredient_id: UUID,
    request: Request,
    quantity: float = Query(default=0, ge=0),
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Report whether the pantry stocks at least ``quantity`` grams."""
    container: AppContainer = request.app.state.container
    available = container.pantry_service.has_ingredient(
        user_id, ingredient_id, quantity
    )
    return {"success": True, "data": {"available": available}}


@router.put("/{item_id}")
def update_pantry_item(
    item_id: UUID,
    body: PantryUpdate,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Overwrite the stocked quantity of a pantry item."""
    container: AppContainer = request.app.state.container
    contents = container.pantry_service.update_quantity(
        user_id, item_id, body.quantity_grams
    )
    return {"success": True, "data": {"pantry": pantry_to_dict(contents)}}


@router.delete("/{item_id}")
def remove_pantry_item(
    item_id: UUID,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Remove an item from the caller's pantry."""
    container: AppContainer = request.app.state.container
    contents = container.pantry_service.remove(user_id, item_id)
    return {"success": True, "data": {"pantry": pantry_to_dict(contents)}}
