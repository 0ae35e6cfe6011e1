"""Domain models for GPS-tracked workouts."""

from datetime import datetime
from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from health_tracker.domain.entries import GPS_WORKOUT, HealthEntry

GpsWorkoutType = Literal["running", "cycling", "walking", "hiking"]


class GpsPoint(BaseModel):
    """A single recorded route sample."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    elevation: float = 0
    timestamp: datetime
    heart_rate: float | None = None
    pace: float | None = None


class GpsWorkout(HealthEntry):
    """A completed GPS workout with route summary."""

    DATA_TYPE: ClassVar[str] = GPS_WORKOUT

    name: str
    type: GpsWorkoutType
    duration: float
    distance: float
    calories: float
    avg_pace: float
    max_pace: float
    elevation_gain: float
    heart_rate_avg: float | None = None
    heart_rate_max: float | None = None
    route: list[GpsPoint] = Field(default_factory=list)
    timestamp: datetime

    @property
    def logged_at(self) -> datetime:
        return self.timestamp
