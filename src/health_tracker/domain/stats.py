"""Domain models for statistics."""

from dataclasses import dataclass
from datetime import date

from health_tracker.domain.entries import ML_PER_GLASS


@dataclass(frozen=True)
class DailyStats:
    """Per-day totals across every entry type."""

    day: date
    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0
    water_ml: float = 0
    exercise_minutes: float = 0
    calories_burned: float = 0
    sleep_hours: float | None = None
    sleep_quality: float | None = None
    mood: float | None = None
    food_entries: int = 0
    exercise_entries: int = 0

    @property
    def glasses(self) -> int:
        return int(self.water_ml // ML_PER_GLASS)


@dataclass(frozen=True)
class WaterProgress:
    """Progress toward the daily water goal."""

    total_ml: float
    glasses: int
    goal_glasses: int
    remaining_ml: float
    percentage: float


@dataclass(frozen=True)
class Predictions:
    """Forward-looking metrics derived from recent history."""

    weight_goal_weeks: int | None
    calorie_consistency: float
    exercise_streak: int


@dataclass(frozen=True)
class Trends:
    """Week-over-week percentage changes."""

    calories: float
    water: float
    exercise: float
    sleep: float
    mood: float
