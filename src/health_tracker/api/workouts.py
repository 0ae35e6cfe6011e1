"""GPS workout endpoints."""

from fastapi import APIRouter, Query, status

from health_tracker.api.auth import CurrentUserId
from health_tracker.api.dependencies import Container
from health_tracker.api.schemas import GpsWorkoutRequest
from health_tracker.domain.workouts import GpsWorkout

router = APIRouter(prefix="/workouts", tags=["workouts"])


@router.post("/gps", status_code=status.HTTP_201_CREATED)
async def record_gps_workout(
    payload: GpsWorkoutRequest, user_id: CurrentUserId, container: Container
) -> GpsWorkout:
    """Summarise a recorded route and store it."""
    return container.gps_service.record(
        user_id, payload.type, payload.route, payload.name
    )


@router.get("/gps")
async def list_gps_workouts(
    user_id: CurrentUserId,
    container: Container,
    limit: int = Query(default=50, ge=1, le=200),
) -> dict[str, object]:
    return {"workouts": container.gps_service.list_workouts(user_id, limit)}
