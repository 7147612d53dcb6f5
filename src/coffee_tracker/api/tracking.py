"""Coffee log, health stats and caffeine goal endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status

from coffee_tracker.api.dependencies import get_container, require_user
from coffee_tracker.api.models import (
    CaffeineGoalRequest,
    CaffeineGoalResponse,
    CoffeeLogRequest,
    CoffeeLogResponse,
    HealthStatsResponse,
)
from coffee_tracker.containers import AppContainer
from coffee_tracker.domain.models import UserRecord

router = APIRouter(prefix="/api", tags=["tracking"])


@router.get("/coffee-log")
async def list_coffee_log(
    day: date | None = Query(default=None, alias="date"),
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> list[CoffeeLogResponse]:
    """Return logged drinks, optionally for a single calendar day."""
    entries = container.coffee_log_service.list_entries(user.id, day)
    return [CoffeeLogResponse.from_entry(entry) for entry in entries]


@router.post("/coffee-log")
async def log_coffee(
    payload: CoffeeLogRequest,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> CoffeeLogResponse:
    """Log a drink with the server's current time."""
    entry = container.coffee_log_service.log_coffee(
        user.id,
        caffeine_amount=payload.caffeine_amount,
        calories=payload.calories,
        recipe_id=payload.recipe_id,
    )
    return CoffeeLogResponse.from_entry(entry)


@router.post("/recipes/{recipe_id}/log")
async def log_recipe(
    recipe_id: int,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> CoffeeLogResponse:
    """Log a saved recipe using its stored totals."""
    entry = container.coffee_log_service.log_recipe(user.id, recipe_id)
    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found"
        )
    return CoffeeLogResponse.from_entry(entry)


@router.get("/health-stats")
async def health_stats(
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> HealthStatsResponse:
    """Return today's caffeine and the rolling weekly summary."""
    stats = container.health_stats_service.health_stats(user)
    return HealthStatsResponse(
        todays_caffeine=stats.todays_caffeine,
        daily_goal=stats.daily_goal,
        avg_caffeine=stats.avg_caffeine,
        total_cups=stats.total_cups,
        goal_adherence=stats.goal_adherence,
    )


@router.put("/caffeine-goal")
async def update_caffeine_goal(
    payload: CaffeineGoalRequest,
    user: UserRecord = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> CaffeineGoalResponse:
    """Change the user's daily caffeine goal."""
    updated = container.user_service.set_caffeine_goal(user.id, payload.goal)
    if updated is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="User not found"
        )
    return CaffeineGoalResponse(daily_caffeine_goal=updated.daily_caffeine_goal)
