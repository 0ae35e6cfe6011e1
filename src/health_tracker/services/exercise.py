"""Exercise database queries and calorie maths."""

import random
from collections.abc import Iterable
from datetime import UTC, datetime
from typing import Literal

from health_tracker.catalogs.exercises import EXERCISES, EXERCISES_BY_ID
from health_tracker.domain.catalog import (
    BODYWEIGHT,
    Difficulty,
    ExerciseData,
    GeneratedWorkout,
    GeneratedWorkoutItem,
)
from health_tracker.domain.entries import ExerciseType, Intensity

WorkoutType = Literal["strength", "cardio", "hiit", "flexibility"]

WORKOUT_CATEGORIES: dict[str, str] = {
    "strength": "Strength Training",
    "cardio": "Cardiovascular",
    "hiit": "High Intensity",
    "flexibility": "Flexibility",
}
MAX_GENERATED_EXERCISES = 6
STRENGTH_SETS = 3
STRENGTH_REPS = 12
STRENGTH_REST_SECONDS = 60
STRENGTH_MINUTES = 5
INTERVAL_REST_SECONDS = 30

LOG_CALORIES_PER_MINUTE: dict[str, float] = {
    "cardio": 10,
    "strength": 6,
    "flexibility": 3,
    "sports": 8,
}
INTENSITY_MULTIPLIERS: dict[str, float] = {"low": 0.8, "moderate": 1.0, "high": 1.3}


def calculate_calories_burned(exercise_id: str, minutes: float, weight_kg: float) -> int:
    """Calories = MET x kg x hours; 0 for unknown exercises."""
    exercise = EXERCISES_BY_ID.get(exercise_id)
    if exercise is None:
        return 0
    return round(exercise.met * weight_kg * minutes / 60)


def estimate_logged_calories(
    exercise_type: ExerciseType, minutes: float, intensity: Intensity
) -> int:
    """Quick estimate used when the user logs a workout without a calorie count."""
    per_minute = LOG_CALORIES_PER_MINUTE[exercise_type]
    return round(per_minute * minutes * INTENSITY_MULTIPLIERS[intensity])


def search_exercises(
    query: str, exercises: Iterable[ExerciseData] = EXERCISES
) -> list[ExerciseData]:
    needle = query.strip().lower()
    return [
        exercise
        for exercise in exercises
        if needle in exercise.name.lower()
        or needle in exercise.category.lower()
        or (exercise.subcategory is not None and needle in exercise.subcategory.lower())
        or any(needle in muscle.lower() for muscle in exercise.muscle_groups)
    ]


def exercises_by_category(category: str) -> list[ExerciseData]:
    return [exercise for exercise in EXERCISES if exercise.category == category]


def exercises_by_muscle_group(muscle_group: str) -> list[ExerciseData]:
    return [exercise for exercise in EXERCISES if muscle_group in exercise.muscle_groups]


def exercises_by_difficulty(difficulty: Difficulty) -> list[ExerciseData]:
    return [exercise for exercise in EXERCISES if exercise.difficulty == difficulty]


def exercises_by_equipment(equipment: str) -> list[ExerciseData]:
    """Exercises using a piece of equipment; BODYWEIGHT selects equipment-free ones."""
    if equipment == BODYWEIGHT:
        return [exercise for exercise in EXERCISES if not exercise.equipment]
    return [exercise for exercise in EXERCISES if equipment in exercise.equipment]


def get_exercise(exercise_id: str) -> ExerciseData | None:
    return EXERCISES_BY_ID.get(exercise_id)


def generate_workout_plan(  # noqa: PLR0913
    workout_type: WorkoutType,
    duration: int,
    difficulty: Difficulty,
    weight_kg: float,
    rng: random.Random | None = None,
    now: datetime | None = None,
) -> GeneratedWorkout:
    """Pick up to six matching exercises and split the session between them."""
    category = WORKOUT_CATEGORIES[workout_type]
    candidates = [
        exercise
        for exercise in EXERCISES
        if exercise.category == category and exercise.difficulty == difficulty
    ]
    (rng or random.Random()).shuffle(candidates)
    selected = candidates[:MAX_GENERATED_EXERCISES]

    items = []
    for exercise in selected:
        if workout_type == "strength":
            items.append(
                GeneratedWorkoutItem(
                    exercise=exercise,
                    duration=STRENGTH_MINUTES,
                    rest=STRENGTH_REST_SECONDS,
                    sets=STRENGTH_SETS,
                    reps=STRENGTH_REPS,
                )
            )
        else:
            items.append(
                GeneratedWorkoutItem(
                    exercise=exercise,
                    duration=duration // len(selected),
                    rest=INTERVAL_REST_SECONDS,
                )
            )

    total_calories = sum(
        calculate_calories_burned(item.exercise.id, item.duration, weight_kg)
        for item in items
    )
    created = now or datetime.now(tz=UTC)
    return GeneratedWorkout(
        id=f"workout-{int(created.timestamp() * 1000)}",
        name=f"{workout_type.capitalize()} Workout",
        description=(
            f"A {difficulty.lower()} {workout_type} workout lasting {duration} minutes"
        ),
        duration=duration,
        difficulty=difficulty,
        exercises=items,
        total_calories=total_calories,
    )
