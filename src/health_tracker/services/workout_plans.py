"""Workout plan lookups, customisation and scheduling."""

from collections.abc import Sequence
from dataclasses import replace
from datetime import UTC, datetime

from health_tracker.catalogs.exercises import EXERCISES
from health_tracker.catalogs.workout_plans import WORKOUT_PLANS
from health_tracker.domain.catalog import (
    Difficulty,
    ExerciseData,
    PlannedWorkout,
    ScheduleDay,
    WorkoutExercise,
    WorkoutGoal,
    WorkoutPlan,
)

WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
REST_DAY_INDEXES = frozenset({2, 6})
SPREAD_FREQUENCY_LIMIT = 3
SECONDS_PER_REP = 3
SECONDS_PER_UNTIMED_SET = 30


def get_workout_plan(plan_id: str) -> WorkoutPlan | None:
    return next((plan for plan in WORKOUT_PLANS if plan.id == plan_id), None)


def plans_by_goal(goal: WorkoutGoal) -> list[WorkoutPlan]:
    return [plan for plan in WORKOUT_PLANS if plan.goal == goal]


def plans_by_level(level: Difficulty) -> list[WorkoutPlan]:
    return [plan for plan in WORKOUT_PLANS if plan.level == level]


def generate_custom_workout_plan(
    goal: WorkoutGoal,
    level: Difficulty,
    frequency: int,
    equipment: Sequence[str] = (),
    now: datetime | None = None,
) -> WorkoutPlan:
    """Tailor a template to the requested frequency and available equipment.

    Without a template for both goal and level, the first plan for the goal
    (or the first plan overall) is returned unchanged.
    """
    matches = [plan for plan in WORKOUT_PLANS if plan.goal == goal and plan.level == level]
    if not matches:
        return next((plan for plan in WORKOUT_PLANS if plan.goal == goal), WORKOUT_PLANS[0])

    base = matches[0]
    workouts = base.workouts
    if frequency != base.frequency:
        workouts = _resize_workouts(base.workouts, frequency)
    plan_equipment = base.equipment
    if equipment:
        available = set(equipment)
        workouts = {
            day: replace(
                workout,
                exercises=tuple(
                    _substitute(item, available) for item in workout.exercises
                ),
            )
            for day, workout in workouts.items()
        }
        plan_equipment = tuple(equipment)

    created = now or datetime.now(tz=UTC)
    return replace(
        base,
        id=f"custom-{int(created.timestamp() * 1000)}",
        name=f"Custom {goal} Plan",
        description=(
            f"Personalized {level.lower()} {goal.lower()} plan with {frequency} "
            "workouts per week"
        ),
        frequency=frequency,
        workouts=workouts,
        equipment=plan_equipment,
    )


def calculate_workout_calories(workout: PlannedWorkout, weight_kg: float) -> int:
    """Estimate calories from MET values; untimed sets are timed from reps and rest."""
    total = 0.0
    for item in workout.exercises:
        hours = 0.0
        if item.duration:
            hours = item.duration / 60
        elif item.sets and item.rest:
            set_seconds = item.reps * SECONDS_PER_REP if item.reps else SECONDS_PER_UNTIMED_SET
            hours = (set_seconds * item.sets + item.rest * (item.sets - 1)) / 3600
        total += item.exercise.met * weight_kg * hours
    return round(total)


def generate_weekly_schedule(plan: WorkoutPlan) -> list[ScheduleDay]:
    """Lay the plan's workouts over Monday..Sunday, always seven days."""
    workout_days = list(plan.workouts)
    if plan.frequency <= 0:
        return [ScheduleDay(day=day, workout=None) for day in WEEKDAYS]

    if plan.frequency <= SPREAD_FREQUENCY_LIMIT:
        gap = len(WEEKDAYS) // plan.frequency
        slots = [index * gap for index in range(plan.frequency)]
    else:
        slots = [
            index for index in range(len(WEEKDAYS)) if index not in REST_DAY_INDEXES
        ]

    assigned = dict(zip(slots, workout_days, strict=False))
    return [
        ScheduleDay(day=day, workout=assigned.get(index))
        for index, day in enumerate(WEEKDAYS)
    ]


def _resize_workouts(
    workouts: dict[str, PlannedWorkout], frequency: int
) -> dict[str, PlannedWorkout]:
    sources = list(workouts.values())
    resized: dict[str, PlannedWorkout] = {}
    for index in range(frequency):
        source = sources[index % len(sources)]
        if index >= len(sources):
            source = replace(
                source,
                name=f"{source.name} (Variation)",
                exercises=tuple(_vary(item) for item in source.exercises),
            )
        resized[f"Day {index + 1}"] = source
    return resized


def _vary(item: WorkoutExercise) -> WorkoutExercise:
    return replace(
        item,
        sets=max(1, item.sets - 1) if item.sets else None,
        reps=item.reps + 2 if item.reps else None,
    )


def _substitute(item: WorkoutExercise, available: set[str]) -> WorkoutExercise:
    if all(equipment in available for equipment in item.exercise.equipment):
        return item
    replacement = _find_replacement(item.exercise, available)
    if replacement is None:
        return item
    return replace(
        item,
        exercise=replacement,
        notes=f"Substitution for {item.exercise.name}",
    )


def _find_replacement(
    exercise: ExerciseData, available: set[str]
) -> ExerciseData | None:
    muscles = set(exercise.muscle_groups)
    return next(
        (
            candidate
            for candidate in EXERCISES
            if muscles.intersection(candidate.muscle_groups)
            and all(equipment in available for equipment in candidate.equipment)
        ),
        None,
    )
