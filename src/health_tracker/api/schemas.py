"""Pydantic models for API request payloads."""

from datetime import date
from typing import Annotated

from pydantic import (
    AwareDatetime,
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    field_validator,
)
from pydantic.alias_generators import to_camel

from health_tracker.domain.catalog import Difficulty, Sex, WorkoutGoal
from health_tracker.domain.entries import MealType
from health_tracker.domain.medications import Frequency
from health_tracker.domain.workouts import GpsPoint, GpsWorkoutType
from health_tracker.services.exercise import WorkoutType

ClockTime = Annotated[str, StringConstraints(pattern=r"^([01]\d|2[0-3]):[0-5]\d$")]


class ApiModel(BaseModel):
    """Base model accepting camelCase or snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CatalogFoodEntryRequest(ApiModel):
    """Log a food straight from the nutrition catalog."""

    food_id: str
    quantity: float = Field(default=1, gt=0)
    meal: MealType


class MedicationCreateRequest(ApiModel):
    medication_name: str = Field(min_length=1)
    dosage: str = Field(min_length=1)
    frequency: Frequency = "daily"
    time_of_day: list[ClockTime] = Field(default_factory=lambda: ["08:00"], min_length=1)
    start_date: date
    end_date: date | None = None
    notes: str | None = None


class MedicationUpdateRequest(ApiModel):
    """Partial update; only fields present in the payload are changed."""

    medication_name: str | None = Field(default=None, min_length=1)
    dosage: str | None = Field(default=None, min_length=1)
    frequency: Frequency | None = None
    time_of_day: list[ClockTime] | None = Field(default=None, min_length=1)
    start_date: date | None = None
    end_date: date | None = None
    notes: str | None = None

    @field_validator(
        "medication_name",
        "dosage",
        "frequency",
        "time_of_day",
        "start_date",
        mode="before",
    )
    @classmethod
    def _reject_null(cls, value: object) -> object:
        if value is None:
            raise ValueError("field cannot be cleared")
        return value


class GoalsUpdateRequest(ApiModel):
    weight: float | None = Field(default=None, gt=0)
    calories: float | None = Field(default=None, gt=0)
    water: int | None = Field(default=None, gt=0)
    exercise: float | None = Field(default=None, gt=0)


class ProfileUpdateRequest(ApiModel):
    name: str | None = Field(default=None, min_length=1)
    age: int | None = Field(default=None, gt=0, lt=150)
    weight: float | None = Field(default=None, gt=0)
    height: float | None = Field(default=None, gt=0)
    goals: GoalsUpdateRequest | None = None


class CoachChatRequest(ApiModel):
    message: str = Field(min_length=1, max_length=2000)


class GpsWorkoutRequest(ApiModel):
    type: GpsWorkoutType
    name: str | None = None
    route: list[GpsPoint] = Field(min_length=1)


class FoodPortion(ApiModel):
    food_id: str
    multiplier: float = Field(default=1, gt=0)


class NutritionTotalRequest(ApiModel):
    items: list[FoodPortion] = Field(min_length=1)


class WorkoutGenerateRequest(ApiModel):
    type: WorkoutType
    duration: int = Field(gt=0, le=240)
    difficulty: Difficulty = "Beginner"
    weight_kg: float = Field(default=70, gt=0)


class MealPlanGenerateRequest(ApiModel):
    target_calories: float = Field(gt=0)
    preferences: list[str] = Field(default_factory=list)
    restrictions: list[str] = Field(default_factory=list)


class CustomWorkoutPlanRequest(ApiModel):
    goal: WorkoutGoal
    level: Difficulty
    frequency: int = Field(ge=1, le=7)
    equipment: list[str] = Field(default_factory=list)


class MedicationInteractionRequest(ApiModel):
    medication_ids: list[str] = Field(min_length=2)


class MedicationScheduleRequest(ApiModel):
    """Dosing schedule, e.g. "Twice daily" or "Once daily" + "Morning"."""

    dosage: str = Field(min_length=1)
    frequency: str = Field(min_length=1)
    timing: str | None = None


class MetricReading(ApiModel):
    metric_id: str
    value: float
    weight: float = Field(default=1, gt=0)


class HealthAssessmentRequest(ApiModel):
    readings: list[MetricReading] = Field(min_length=1)
    sex: Sex | None = None


class MetricValue(ApiModel):
    value: float
    measured_at: AwareDatetime = Field(alias="date")


class MetricHistory(ApiModel):
    metric_id: str
    values: list[MetricValue]


class HealthTrendRequest(ApiModel):
    metrics: list[MetricHistory] = Field(min_length=1)
    timeframe_days: int = Field(default=30, ge=1, le=365)
