"""Profile, statistics and gamification endpoints."""

from dataclasses import replace

from fastapi import APIRouter, Query

from health_tracker.api.auth import CurrentUserId
from health_tracker.api.dependencies import Container, TimezoneName
from health_tracker.api.schemas import ProfileUpdateRequest
from health_tracker.domain.models import UserProfile, level_progress
from health_tracker.services.achievements import summarize
from health_tracker.services.leaderboard import DEFAULT_LIMIT
from health_tracker.services.stats import (
    build_predictions,
    calculate_correlations,
    water_progress,
)

router = APIRouter(tags=["progress"])


@router.get("/profile")
async def get_profile(user_id: CurrentUserId, container: Container) -> dict[str, object]:
    """Return the profile, creating it on first access."""
    profile = container.profile_service.get_profile(user_id)
    return {"profile": profile, "level_progress": level_progress(profile.points)}


@router.patch("/profile")
async def update_profile(
    payload: ProfileUpdateRequest, user_id: CurrentUserId, container: Container
) -> UserProfile:
    current = container.profile_service.get_profile(user_id)
    changes = payload.model_dump(exclude_unset=True, exclude={"goals"})
    if payload.goals is not None:
        changes["goals"] = replace(
            current.goals, **payload.goals.model_dump(exclude_none=True)
        )
    return container.profile_service.update_profile(user_id, changes)


@router.get("/progress/stats")
async def progress_stats(
    user_id: CurrentUserId,
    container: Container,
    timezone: TimezoneName,
    days: int = Query(default=7, ge=1, le=90),
) -> dict[str, object]:
    """Daily totals with trends, predictions, correlations and the streak."""
    profile = container.profile_service.get_profile(user_id)
    daily = container.stats_service.get_daily(user_id, days, timezone)
    return {
        "daily": daily,
        "today": daily[-1],
        "trends": container.stats_service.get_trends(user_id, timezone),
        "predictions": build_predictions(profile, daily),
        "correlations": calculate_correlations(daily),
        "streak": container.stats_service.get_streak(user_id, timezone),
    }


@router.get("/progress/achievements")
async def progress_achievements(
    user_id: CurrentUserId, container: Container, timezone: TimezoneName
) -> dict[str, object]:
    achievements = container.achievement_service.get_achievements(user_id, timezone)
    return {"achievements": achievements, "summary": summarize(achievements)}


@router.get("/progress/leaderboard")
async def progress_leaderboard(
    user_id: CurrentUserId,
    container: Container,
    limit: int = Query(default=DEFAULT_LIMIT, ge=1, le=100),
) -> dict[str, object]:
    return {"leaderboard": container.leaderboard_service.top(user_id, limit)}


@router.get("/progress/water")
async def progress_water(
    user_id: CurrentUserId, container: Container, timezone: TimezoneName
) -> dict[str, object]:
    """Today's water intake against the daily goal."""
    profile = container.profile_service.get_profile(user_id)
    today = container.stats_service.get_today(user_id, timezone)
    return {"water": water_progress(today.water_ml, profile.goals.water)}
