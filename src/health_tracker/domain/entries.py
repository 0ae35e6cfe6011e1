"""Domain models for logged health entries."""

from abc import abstractmethod
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import ClassVar, Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

FOOD_ENTRY = "food_entry"
WATER_ENTRY = "water_entry"
EXERCISE_ENTRY = "exercise_entry"
SLEEP_ENTRY = "sleep_entry"
MOOD_ENTRY = "mood_entry"
GPS_WORKOUT = "gps_workout"

ML_PER_GLASS = 250

MealType = Literal["breakfast", "lunch", "dinner", "snack"]
ExerciseType = Literal["cardio", "strength", "flexibility", "sports"]
Intensity = Literal["low", "moderate", "high"]

_CLOCK_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


class HealthEntry(BaseModel):
    """Base class for entries stored as generic health data rows."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    DATA_TYPE: ClassVar[str]

    id: UUID | None = None

    @property
    @abstractmethod
    def logged_at(self) -> datetime:
        """Return the moment the entry applies to."""


class FoodEntry(HealthEntry):
    """A logged food item; nutrient values are per serving."""

    DATA_TYPE: ClassVar[str] = FOOD_ENTRY

    name: str = Field(min_length=1)
    brand: str | None = None
    calories: float = Field(ge=0)
    protein: float = Field(default=0, ge=0)
    carbs: float = Field(default=0, ge=0)
    fat: float = Field(default=0, ge=0)
    fiber: float = Field(default=0, ge=0)
    sugar: float = Field(default=0, ge=0)
    sodium: float = Field(default=0, ge=0)
    serving: str = "1 serving"
    quantity: float = Field(default=1, gt=0)
    meal: MealType
    timestamp: datetime = Field(default_factory=_utc_now)

    @property
    def logged_at(self) -> datetime:
        return self.timestamp

    @property
    def total_calories(self) -> float:
        return self.calories * self.quantity

    @property
    def total_protein(self) -> float:
        return self.protein * self.quantity

    @property
    def total_carbs(self) -> float:
        return self.carbs * self.quantity

    @property
    def total_fat(self) -> float:
        return self.fat * self.quantity

    @property
    def total_fiber(self) -> float:
        return self.fiber * self.quantity


class WaterEntry(HealthEntry):
    """A logged drink, in millilitres."""

    DATA_TYPE: ClassVar[str] = WATER_ENTRY

    amount: float = Field(gt=0)
    timestamp: datetime = Field(default_factory=_utc_now)

    @property
    def logged_at(self) -> datetime:
        return self.timestamp


class ExerciseEntry(HealthEntry):
    """A logged workout session."""

    DATA_TYPE: ClassVar[str] = EXERCISE_ENTRY

    name: str = Field(min_length=1)
    type: ExerciseType
    duration: float = Field(gt=0)
    calories: float = Field(default=0, ge=0)
    intensity: Intensity = "moderate"
    timestamp: datetime = Field(default_factory=_utc_now)

    @property
    def logged_at(self) -> datetime:
        return self.timestamp


class SleepEntry(HealthEntry):
    """A night of sleep, keyed by the date the user went to bed."""

    DATA_TYPE: ClassVar[str] = SLEEP_ENTRY

    sleep_date: date = Field(alias="date")
    bedtime: str = Field(pattern=_CLOCK_PATTERN)
    wake_time: str = Field(pattern=_CLOCK_PATTERN)
    duration: float = Field(ge=0, le=24)
    quality: int = Field(ge=1, le=5)
    notes: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _fill_duration(cls, data: object) -> object:
        if not isinstance(data, dict) or data.get("duration") is not None:
            return data
        bedtime = data.get("bedtime")
        wake_time = data.get("wake_time", data.get("wakeTime"))
        if isinstance(bedtime, str) and isinstance(wake_time, str):
            try:
                hours = sleep_duration_hours(bedtime, wake_time)
            except ValueError:
                return data
            return {**data, "duration": hours}
        return data

    @property
    def logged_at(self) -> datetime:
        return datetime(
            self.sleep_date.year,
            self.sleep_date.month,
            self.sleep_date.day,
            tzinfo=UTC,
        )


class MoodEntry(HealthEntry):
    """A mood check-in on a 1-10 scale."""

    DATA_TYPE: ClassVar[str] = MOOD_ENTRY

    rating: int = Field(ge=1, le=10)
    factors: list[str] = Field(default_factory=list)
    notes: str | None = None
    timestamp: datetime = Field(default_factory=_utc_now)

    @property
    def logged_at(self) -> datetime:
        return self.timestamp


@dataclass(frozen=True)
class HealthDataRow:
    """Generic persisted row in the health_data table."""

    id: UUID
    user_id: UUID
    data_type: str
    data_value: dict[str, object]
    created_at: datetime


def sleep_duration_hours(bedtime: str, wake_time: str) -> float:
    """Return hours between two HH:MM clock times, wrapping past midnight."""
    bed_hour, bed_minute = (int(part) for part in bedtime.split(":"))
    wake_hour, wake_minute = (int(part) for part in wake_time.split(":"))
    start = bed_hour * 60 + bed_minute
    end = wake_hour * 60 + wake_minute
    if end <= start:
        end += 24 * 60
    return round((end - start) / 60, 2)


def to_data_value(entry: HealthEntry) -> dict[str, object]:
    """Serialize an entry into the JSON stored in data_value."""
    return entry.model_dump(
        mode="json", by_alias=True, exclude={"id"}, exclude_none=True
    )
