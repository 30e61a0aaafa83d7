"""Shopping list endpoints."""

from datetime import date, timedelta
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, status

from meal_planner.api.dependencies import current_user_id, utc_today
from meal_planner.api.schemas import ShoppingListRequest
from meal_planner.api.serializers import shopping_list_to_dict
from meal_planner.containers import AppContainer
from meal_planner.domain.meal_plan import DAYS_IN_WEEK, sunday_week_start

router = APIRouter(prefix="/api/shopping-list", tags=["shopping-list"])


@router.get("")
def get_shopping_list(
    request: Request,
    start_date: date | None = None,
    end_date: date | None = None,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Return what to buy for a date range; defaults to the current week."""
    container: AppContainer = request.app.state.container
    start = start_date or sunday_week_start(utc_today())
    end = end_date or start + timedelta(days=DAYS_IN_WEEK - 1)
    _check_range(start, end)
    shopping_list = container.shopping_list_service.generate(user_id, start, end)
    return {"success": True, "data": shopping_list_to_dict(shopping_list, start, end)}


@router.post("/generate")
def generate_shopping_list(
    body: ShoppingListRequest,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Return what to buy for an explicit date range."""
    container: AppContainer = request.app.state.container
    _check_range(body.start_date, body.end_date)
    shopping_list = container.shopping_list_service.generate(
        user_id, body.start_date, body.end_date
    )
    return {
        "success": True,
        "data": shopping_list_to_dict(shopping_list, body.start_date, body.end_date),
    }


def _check_range(start: date, end: date) -> None:
    if end < start:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="end_date must not be before start_date",
        )
