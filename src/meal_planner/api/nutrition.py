"""Nutrition tracking endpoints."""

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request

from meal_planner.api.dependencies import current_user_id, utc_today
from meal_planner.api.serializers import (
    day_nutrition_to_dict,
    week_nutrition_to_dict,
)
from meal_planner.containers import AppContainer
from meal_planner.domain.meal_plan import sunday_week_start

router = APIRouter(prefix="/api/nutrition", tags=["nutrition"])


@router.get("")
def daily_nutrition(
    request: Request,
    day: date | None = Query(default=None, alias="date"),
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Return planned intake for a day against the caller's targets."""
    container: AppContainer = request.app.state.container
    nutrition = container.nutrition_service.get_day(user_id, day or utc_today())
    return {"success": True, "data": day_nutrition_to_dict(nutrition)}


@router.get("/week")
def weekly_nutrition(
    request: Request,
    start_date: date | None = None,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Return seven days of intake with averages."""
    container: AppContainer = request.app.state.container
    start = start_date or sunday_week_start(utc_today())
    week = container.nutrition_service.get_week(user_id, start)
    return {"success": True, "data": week_nutrition_to_dict(week)}
