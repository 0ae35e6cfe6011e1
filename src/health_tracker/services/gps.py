"""GPS workout summaries from recorded route points."""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from statistics import fmean
from uuid import UUID

from health_tracker.domain.entries import GPS_WORKOUT
from health_tracker.domain.workouts import GpsPoint, GpsWorkout, GpsWorkoutType
from health_tracker.services.health_data import HealthDataService

EARTH_RADIUS_KM = 6371.0
CALORIES_PER_MINUTE: dict[str, float] = {
    "running": 12,
    "cycling": 8,
    "walking": 5,
    "hiking": 7,
}


def haversine_km(a: GpsPoint, b: GpsPoint) -> float:
    """Great-circle distance between two points in kilometres."""
    lat1, lat2 = math.radians(a.latitude), math.radians(b.latitude)
    d_lat = lat2 - lat1
    d_lon = math.radians(b.longitude - a.longitude)
    h = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(h))


def summarize_route(
    workout_type: GpsWorkoutType,
    points: Sequence[GpsPoint],
    name: str | None = None,
) -> GpsWorkout:
    """Build a workout record from a route, ordering points by timestamp."""
    if not points:
        raise ValueError("A GPS workout needs at least one route point")
    points = sorted(points, key=lambda point: point.timestamp)

    distance = sum(haversine_km(a, b) for a, b in zip(points, points[1:], strict=False))
    duration = (points[-1].timestamp - points[0].timestamp).total_seconds()
    minutes = duration / 60
    elevation_gain = sum(
        max(0.0, b.elevation - a.elevation)
        for a, b in zip(points, points[1:], strict=False)
    )
    paces = [point.pace for point in points if point.pace is not None]
    heart_rates = [point.heart_rate for point in points if point.heart_rate is not None]

    return GpsWorkout(
        name=name or f"{workout_type.capitalize()} Workout",
        type=workout_type,
        duration=duration,
        distance=round(distance, 3),
        calories=round(CALORIES_PER_MINUTE[workout_type] * minutes),
        avg_pace=round(minutes / distance, 2) if distance > 0 else 0,
        max_pace=max(paces, default=0),
        elevation_gain=round(elevation_gain, 1),
        heart_rate_avg=round(fmean(heart_rates)) if heart_rates else None,
        heart_rate_max=max(heart_rates) if heart_rates else None,
        route=list(points),
        timestamp=points[0].timestamp,
    )


@dataclass
class GpsWorkoutService:
    """Stores GPS workouts alongside the other health data."""

    health_data: HealthDataService

    def record(
        self,
        user_id: UUID,
        workout_type: GpsWorkoutType,
        points: Sequence[GpsPoint],
        name: str | None = None,
    ) -> GpsWorkout:
        workout = summarize_route(workout_type, points, name)
        return self.health_data.save_entry(user_id, workout)

    def list_workouts(self, user_id: UUID, limit: int = 50) -> list[GpsWorkout]:
        return self.health_data.list_entries(user_id, GPS_WORKOUT, limit=limit)
