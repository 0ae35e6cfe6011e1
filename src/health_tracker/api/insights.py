"""Insight and coaching feed endpoints."""

from fastapi import APIRouter, Query

from health_tracker.api.auth import CurrentUserId
from health_tracker.api.dependencies import Container, TimezoneName
from health_tracker.services.coaching import COACHING_WINDOW_DAYS

router = APIRouter(prefix="/insights", tags=["insights"])


@router.get("")
async def list_insights(user_id: CurrentUserId, container: Container) -> dict[str, object]:
    """Return rule-based insights over the last seven days."""
    return {"insights": container.insight_service.generate(user_id)}


@router.get("/coaching")
async def coaching_feed(
    user_id: CurrentUserId,
    container: Container,
    timezone: TimezoneName,
    days: int = Query(default=COACHING_WINDOW_DAYS, ge=1, le=90),
) -> dict[str, object]:
    """Return nutrition, fitness and sleep coaching tips by priority."""
    insights = container.coaching_service.generate(
        user_id, days=days, timezone_name=timezone
    )
    return {"insights": insights}
