"""User preference endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request

from meal_planner.api.dependencies import current_user_id
from meal_planner.api.schemas import PreferencesUpdate
from meal_planner.api.serializers import preferences_to_dict
from meal_planner.containers import AppContainer

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/me/preferences")
def get_preferences(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Return the caller's dietary preferences and targets."""
    container: AppContainer = request.app.state.container
    preferences = container.user_service.get_preferences(user_id)
    return {"success": True, "data": {"preferences": preferences_to_dict(preferences)}}


@router.put("/me/preferences")
def update_preferences(
    body: PreferencesUpdate,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Merge the given fields into the caller's preferences."""
    container: AppContainer = request.app.state.container
    preferences = container.user_service.update_preferences(
        user_id, body.model_dump(exclude_none=True)
    )
    return {"success": True, "data": {"preferences": preferences_to_dict(preferences)}}
