"""Workout plan templates."""

from health_tracker.catalogs.exercises import EXERCISES_BY_ID
from health_tracker.domain.catalog import PlannedWorkout, WorkoutExercise, WorkoutPlan


def _ex(  # noqa: PLR0913
    exercise_id: str,
    *,
    sets: int | None = None,
    reps: int | None = None,
    duration: float | None = None,
    rest: int | None = None,
    notes: str | None = None,
) -> WorkoutExercise:
    return WorkoutExercise(
        exercise=EXERCISES_BY_ID[exercise_id],
        sets=sets,
        reps=reps,
        duration=duration,
        rest=rest,
        notes=notes,
    )


_WARM_UP = _ex("walking-3mph", duration=5, notes="Warm-up")
_COOL_DOWN_WALK = _ex("walking-3mph", duration=5, notes="Cool down")
_COOL_DOWN_STRETCH = _ex("stretching-general", duration=5, notes="Cool down")

WORKOUT_PLANS: tuple[WorkoutPlan, ...] = (
    WorkoutPlan(
        id="beginner-strength",
        name="Beginner Strength Foundations",
        description=(
            "A progressive strength training program for beginners focusing on "
            "fundamental movement patterns and proper form."
        ),
        level="Beginner",
        goal="Strength",
        duration=8,
        frequency=3,
        workouts={
            "Day 1": PlannedWorkout(
                name="Full Body Basics A",
                focus="Push and Legs",
                exercises=(
                    _ex(
                        "squats",
                        sets=3,
                        reps=10,
                        rest=90,
                        notes="Focus on form, keep knees behind toes",
                    ),
                    _ex(
                        "push-ups",
                        sets=3,
                        reps=8,
                        rest=60,
                        notes="Modify on knees if needed",
                    ),
                    _ex(
                        "deadlifts",
                        sets=3,
                        reps=8,
                        rest=120,
                        notes="Start with light weight to learn form",
                    ),
                    _ex(
                        "stretching-general",
                        duration=10,
                        notes="Focus on legs and chest",
                    ),
                ),
                duration=45,
                calories=300,
            ),
            "Day 2": PlannedWorkout(
                name="Full Body Basics B",
                focus="Pull and Core",
                exercises=(
                    _ex("walking-3mph", duration=10, notes="Warm-up"),
                    _ex(
                        "weight-lifting-general",
                        sets=3,
                        reps=10,
                        rest=90,
                        notes="Dumbbell rows",
                    ),
                    _ex("squats", sets=3, reps=12, rest=60, notes="Bodyweight only"),
                    _ex(
                        "stretching-general",
                        duration=10,
                        notes="Focus on back and core",
                    ),
                ),
                duration=45,
                calories=280,
            ),
            "Day 3": PlannedWorkout(
                name="Full Body Basics C",
                focus="Functional Movement",
                exercises=(
                    _ex("walking-3mph", duration=10, notes="Warm-up"),
                    _ex(
                        "weight-lifting-general",
                        sets=3,
                        reps=10,
                        rest=90,
                        notes="Shoulder press",
                    ),
                    _ex(
                        "deadlifts",
                        sets=3,
                        reps=8,
                        rest=120,
                        notes="Focus on hip hinge movement",
                    ),
                    _ex(
                        "stretching-general",
                        duration=10,
                        notes="Full body stretching",
                    ),
                ),
                duration=45,
                calories=320,
            ),
        },
        equipment=("Dumbbells", "Bench", "Exercise mat"),
        notes=(
            "Rest at least one day between workouts. Focus on form before "
            "increasing weight."
        ),
    ),
    WorkoutPlan(
        id="weight-loss",
        name="Fat Loss Accelerator",
        description=(
            "High-intensity interval training combined with strength circuits "
            "for maximum calorie burn and metabolic boost."
        ),
        level="Intermediate",
        goal="Weight Loss",
        duration=8,
        frequency=4,
        workouts={
            "Day 1": PlannedWorkout(
                name="HIIT Cardio",
                focus="Cardiovascular and Fat Burning",
                exercises=(
                    _WARM_UP,
                    _ex(
                        "hiit-general",
                        sets=8,
                        duration=1,
                        rest=90,
                        notes="Sprint intervals (30 sec sprint, 90 sec walk)",
                    ),
                    _ex("burpees", sets=3, reps=10, rest=60, notes="Full body movement"),
                    _ex(
                        "jumping-rope", sets=3, duration=2, rest=60, notes="Moderate pace"
                    ),
                    _COOL_DOWN_STRETCH,
                ),
                duration=45,
                calories=450,
            ),
            "Day 2": PlannedWorkout(
                name="Full Body Circuit",
                focus="Strength and Metabolic Conditioning",
                exercises=(
                    _WARM_UP,
                    _ex(
                        "squats",
                        sets=3,
                        reps=15,
                        rest=30,
                        notes="Bodyweight or light weight",
                    ),
                    _ex("push-ups", sets=3, reps=12, rest=30, notes="Modify as needed"),
                    _ex(
                        "weight-lifting-general",
                        sets=3,
                        reps=15,
                        rest=30,
                        notes="Dumbbell rows",
                    ),
                    _ex(
                        "weight-lifting-general",
                        sets=3,
                        reps=15,
                        rest=30,
                        notes="Lunges",
                    ),
                    _COOL_DOWN_STRETCH,
                ),
                duration=50,
                calories=400,
            ),
            "Day 3": PlannedWorkout(
                name="Tabata Intervals",
                focus="High Intensity Metabolic Boost",
                exercises=(
                    _WARM_UP,
                    _ex(
                        "hiit-general",
                        sets=8,
                        duration=0.33,
                        rest=10,
                        notes="Jumping jacks (20 sec on, 10 sec off)",
                    ),
                    _ex(
                        "hiit-general",
                        sets=8,
                        duration=0.33,
                        rest=10,
                        notes="Mountain climbers (20 sec on, 10 sec off)",
                    ),
                    _ex(
                        "hiit-general",
                        sets=8,
                        duration=0.33,
                        rest=10,
                        notes="Squat jumps (20 sec on, 10 sec off)",
                    ),
                    _COOL_DOWN_STRETCH,
                ),
                duration=40,
                calories=500,
            ),
            "Day 4": PlannedWorkout(
                name="Active Recovery",
                focus="Low Intensity Steady State",
                exercises=(
                    _ex("walking-3mph", duration=30, notes="Brisk walking"),
                    _ex("yoga-hatha", duration=20, notes="Gentle yoga flow"),
                ),
                duration=50,
                calories=250,
            ),
        },
        equipment=("Dumbbells", "Jump rope", "Exercise mat"),
        notes=(
            "Pair with a moderate calorie deficit (300-500 calories below "
            "maintenance) for sustainable fat loss."
        ),
    ),
    WorkoutPlan(
        id="endurance-training",
        name="Endurance Builder",
        description=(
            "Progressive cardiovascular training plan to improve stamina, "
            "endurance, and aerobic capacity."
        ),
        level="Intermediate",
        goal="Endurance",
        duration=12,
        frequency=4,
        workouts={
            "Day 1": PlannedWorkout(
                name="Long Slow Distance",
                focus="Aerobic Base Building",
                exercises=(
                    _WARM_UP,
                    _ex(
                        "running-6mph",
                        duration=40,
                        notes="Steady pace at 60-70% max heart rate",
                    ),
                    _COOL_DOWN_WALK,
                    _ex("stretching-general", duration=10, notes="Focus on legs"),
                ),
                duration=60,
                calories=550,
            ),
            "Day 2": PlannedWorkout(
                name="Interval Training",
                focus="Lactate Threshold",
                exercises=(
                    _WARM_UP,
                    _ex("running-6mph", duration=5, notes="Easy pace"),
                    _ex(
                        "running-8mph",
                        sets=6,
                        duration=3,
                        rest=90,
                        notes="3 min at 80-85% max heart rate, 90 sec recovery",
                    ),
                    _COOL_DOWN_WALK,
                    _ex(
                        "stretching-general",
                        duration=10,
                        notes="Full body stretching",
                    ),
                ),
                duration=50,
                calories=600,
            ),
            "Day 3": PlannedWorkout(
                name="Cross Training",
                focus="Active Recovery",
                exercises=(
                    _ex("cycling-moderate", duration=30, notes="Moderate pace"),
                    _ex("swimming-moderate", duration=20, notes="Easy pace"),
                    _ex(
                        "stretching-general",
                        duration=10,
                        notes="Full body stretching",
                    ),
                ),
                duration=60,
                calories=450,
            ),
            "Day 4": PlannedWorkout(
                name="Tempo Run",
                focus="Sustained Effort",
                exercises=(
                    _WARM_UP,
                    _ex("running-6mph", duration=5, notes="Easy pace"),
                    _ex(
                        "running-8mph",
                        duration=20,
                        notes="Comfortably hard pace (75-80% max heart rate)",
                    ),
                    _ex("running-6mph", duration=5, notes="Easy pace"),
                    _COOL_DOWN_WALK,
                    _ex("stretching-general", duration=10, notes="Focus on legs"),
                ),
                duration=50,
                calories=580,
            ),
        },
        equipment=("Running shoes", "Heart rate monitor (optional)"),
        notes=(
            "Increase the duration of your long run by 5-10% each week and the "
            "intensity of your intervals gradually."
        ),
    ),
)
