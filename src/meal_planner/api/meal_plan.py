"""Meal plan endpoints."""

from datetime import date, timedelta
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from meal_planner.api.dependencies import current_user_id, utc_today
from meal_planner.api.schemas import MealPlanCreate, MealPlanUpdate
from meal_planner.api.serializers import day_meals_to_dict, planned_meal_to_dict
from meal_planner.containers import AppContainer
from meal_planner.domain.meal_plan import DAYS_IN_WEEK, monday_week_start

router = APIRouter(prefix="/api/meal-plan", tags=["meal-plan"])


@router.get("")
def get_meal_plan(
    request: Request,
    start_date: date | None = None,
    end_date: date | None = None,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Return planned meals grouped by day; defaults to the current week."""
    container: AppContainer = request.app.state.container
    start = start_date or monday_week_start(utc_today())
    end = end_date or start + timedelta(days=DAYS_IN_WEEK - 1)
    days = container.meal_plan_service.get_range(user_id, start, end)
    return {
        "success": True,
        "data": {
            "startDate": start.isoformat(),
            "endDate": end.isoformat(),
            "mealPlan": [day_meals_to_dict(day) for day in days],
        },
    }


@router.get("/date/{plan_date}")
def get_day(
    plan_date: date,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Return every slot for one day, empty slots included."""
    container: AppContainer = request.app.state.container
    meals = container.meal_plan_service.get_day(user_id, plan_date)
    return {"success": True, "data": {"meals": day_meals_to_dict(meals)}}


@router.post("", status_code=status.HTTP_201_CREATED)
def add_meal(
    body: MealPlanCreate,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Schedule a recipe into a meal slot."""
    container: AppContainer = request.app.state.container
    meal = container.meal_plan_service.add_meal(user_id, body.model_dump())
    return {"success": True, "data": {"mealPlan": planned_meal_to_dict(meal)}}


@router.put("/{entry_id}")
def update_meal(
    entry_id: UUID,
    body: MealPlanUpdate,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Change a planned meal the caller owns."""
    container: AppContainer = request.app.state.container
    meal = container.meal_plan_service.update_meal(
        user_id, entry_id, body.model_dump(exclude_unset=True)
    )
    return {"success": True, "data": {"mealPlan": planned_meal_to_dict(meal)}}


@router.delete("/{entry_id}")
def remove_meal(
    entry_id: UUID,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Remove a planned meal the caller owns."""
    container: AppContainer = request.app.state.container
    container.meal_plan_service.remove_meal(user_id, entry_id)
    return {"success": True, "message": "Meal removed from plan"}
