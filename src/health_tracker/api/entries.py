"""Health entry logging endpoints."""

import logging
from typing import Literal
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, Response, status

from health_tracker.api.auth import CurrentUserId
from health_tracker.api.dependencies import Container, TimezoneName
from health_tracker.api.schemas import CatalogFoodEntryRequest
from health_tracker.containers import AppContainer
from health_tracker.domain.entries import (
    EXERCISE_ENTRY,
    FOOD_ENTRY,
    MOOD_ENTRY,
    SLEEP_ENTRY,
    WATER_ENTRY,
    ExerciseEntry,
    FoodEntry,
    HealthEntry,
    MoodEntry,
    SleepEntry,
    WaterEntry,
)
from health_tracker.services.exercise import estimate_logged_calories
from health_tracker.services.nutrition import food_entry_from_item, get_food
from health_tracker.services.profiles import PointsAward

_logger = logging.getLogger(__name__)

router = APIRouter(prefix="/entries", tags=["entries"])

EntryKind = Literal["food", "water", "exercise", "sleep", "mood"]

DATA_TYPES: dict[str, str] = {
    "food": FOOD_ENTRY,
    "water": WATER_ENTRY,
    "exercise": EXERCISE_ENTRY,
    "sleep": SLEEP_ENTRY,
    "mood": MOOD_ENTRY,
}


@router.get("/summary")
async def entries_summary(
    user_id: CurrentUserId,
    container: Container,
    days: int = Query(default=7, ge=1, le=365),
) -> dict[str, object]:
    """Return the user's entries for the last N days grouped by type."""
    summary = container.health_data_service.get_summary(user_id, days=days)
    return {
        "days": days,
        "counts": summary.counts(),
        "food": summary.food,
        "water": summary.water,
        "exercise": summary.exercise,
        "sleep": summary.sleep,
        "mood": summary.mood,
    }


@router.post("/food", status_code=status.HTTP_201_CREATED)
async def add_food(
    entry: FoodEntry, user_id: CurrentUserId, container: Container, timezone: TimezoneName
) -> dict[str, object]:
    return _save(container, user_id, entry, timezone)


@router.post("/food/catalog", status_code=status.HTTP_201_CREATED)
async def add_catalog_food(
    payload: CatalogFoodEntryRequest,
    user_id: CurrentUserId,
    container: Container,
    timezone: TimezoneName,
) -> dict[str, object]:
    """Log a catalog food scaled by quantity."""
    item = get_food(payload.food_id)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Unknown food")
    entry = food_entry_from_item(item, payload.quantity, payload.meal)
    return _save(container, user_id, entry, timezone)


@router.post("/water", status_code=status.HTTP_201_CREATED)
async def add_water(
    entry: WaterEntry, user_id: CurrentUserId, container: Container, timezone: TimezoneName
) -> dict[str, object]:
    return _save(container, user_id, entry, timezone)


@router.post("/exercise", status_code=status.HTTP_201_CREATED)
async def add_exercise(
    entry: ExerciseEntry,
    user_id: CurrentUserId,
    container: Container,
    timezone: TimezoneName,
) -> dict[str, object]:
    """Log a workout, estimating calories when none were given."""
    if not entry.calories:
        entry = entry.model_copy(
            update={
                "calories": estimate_logged_calories(
                    entry.type, entry.duration, entry.intensity
                )
            }
        )
    return _save(container, user_id, entry, timezone)


@router.post("/sleep", status_code=status.HTTP_201_CREATED)
async def add_sleep(
    entry: SleepEntry, user_id: CurrentUserId, container: Container, timezone: TimezoneName
) -> dict[str, object]:
    return _save(container, user_id, entry, timezone)


@router.post("/mood", status_code=status.HTTP_201_CREATED)
async def add_mood(
    entry: MoodEntry, user_id: CurrentUserId, container: Container, timezone: TimezoneName
) -> dict[str, object]:
    return _save(container, user_id, entry, timezone)


@router.get("/{kind}")
async def list_entries(
    kind: EntryKind,
    user_id: CurrentUserId,
    container: Container,
    limit: int = Query(default=100, ge=1, le=500),
) -> dict[str, object]:
    """Return the most recent entries of one kind."""
    entries = container.health_data_service.list_entries(
        user_id, DATA_TYPES[kind], limit=limit
    )
    return {"entries": entries}


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(
    entry_id: UUID, user_id: CurrentUserId, container: Container
) -> Response:
    container.health_data_service.delete_entry(user_id, entry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def _save(
    container: AppContainer, user_id: UUID, entry: HealthEntry, timezone: str
) -> dict[str, object]:
    saved = container.health_data_service.save_entry(user_id, entry)
    _logger.info(
        "Saved health entry",
        extra={"user_id": str(user_id), "data_type": saved.DATA_TYPE},
    )
    return {"entry": saved, "award": _register_entry(container, user_id, timezone)}


def _register_entry(
    container: AppContainer, user_id: UUID, timezone: str
) -> PointsAward | None:
    """Award points and refresh the streak; failures never fail the save."""
    try:
        streak = container.stats_service.get_streak(user_id, timezone)
        return container.profile_service.register_entry(user_id, streak)
    except Exception:
        _logger.exception(
            "Failed to update gamification counters",
            extra={"user_id": str(user_id)},
        )
        return None
