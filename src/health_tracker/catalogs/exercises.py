"""Exercise database with MET values."""

from health_tracker.domain.catalog import ExerciseData

MUSCLE_GROUPS = (
    "Chest",
    "Back",
    "Shoulders",
    "Arms",
    "Triceps",
    "Core",
    "Legs",
    "Quadriceps",
    "Hamstrings",
    "Glutes",
    "Full body",
    "Cardiovascular",
)

EXERCISES: tuple[ExerciseData, ...] = (
    ExerciseData(
        id="running-6mph",
        name="Running (6 mph)",
        category="Cardiovascular",
        subcategory="Running",
        met=9.8,
        description="Moderate pace running, approximately 10-minute mile",
        equipment=("Running shoes",),
        muscle_groups=("Legs", "Glutes", "Core", "Cardiovascular"),
        difficulty="Intermediate",
    ),
    ExerciseData(
        id="running-8mph",
        name="Running (8 mph)",
        category="Cardiovascular",
        subcategory="Running",
        met=13.5,
        description="Fast pace running, approximately 7.5-minute mile",
        equipment=("Running shoes",),
        muscle_groups=("Legs", "Glutes", "Core", "Cardiovascular"),
        difficulty="Advanced",
    ),
    ExerciseData(
        id="walking-3mph",
        name="Walking (3 mph)",
        category="Cardiovascular",
        subcategory="Walking",
        met=3.5,
        description="Brisk walking pace",
        equipment=("Comfortable shoes",),
        muscle_groups=("Legs", "Glutes", "Cardiovascular"),
        difficulty="Beginner",
    ),
    ExerciseData(
        id="cycling-moderate",
        name="Cycling (moderate)",
        category="Cardiovascular",
        subcategory="Cycling",
        met=8.0,
        description="Moderate effort cycling on flat terrain",
        equipment=("Bicycle", "Helmet"),
        muscle_groups=("Legs", "Glutes", "Core", "Cardiovascular"),
        difficulty="Intermediate",
    ),
    ExerciseData(
        id="swimming-moderate",
        name="Swimming (moderate)",
        category="Cardiovascular",
        subcategory="Swimming",
        met=8.3,
        description="Freestyle swimming at moderate pace",
        equipment=("Swimsuit", "Goggles"),
        muscle_groups=("Full body", "Cardiovascular"),
        difficulty="Intermediate",
    ),
    ExerciseData(
        id="jumping-rope",
        name="Jumping Rope",
        category="Cardiovascular",
        subcategory="High Intensity",
        met=12.3,
        description="Continuous jumping rope at moderate pace",
        equipment=("Jump rope",),
        muscle_groups=("Legs", "Arms", "Core", "Cardiovascular"),
        difficulty="Intermediate",
    ),
    ExerciseData(
        id="weight-lifting-general",
        name="Weight Lifting",
        category="Strength Training",
        subcategory="Free Weights",
        met=6.0,
        description="General weight lifting with moderate effort",
        equipment=("Dumbbells", "Barbells", "Weight plates"),
        muscle_groups=("Full body",),
        difficulty="Intermediate",
    ),
    ExerciseData(
        id="push-ups",
        name="Push-ups",
        category="Strength Training",
        subcategory="Bodyweight",
        met=3.8,
        description="Standard push-ups using body weight",
        muscle_groups=("Chest", "Shoulders", "Triceps", "Core"),
        difficulty="Beginner",
    ),
    ExerciseData(
        id="squats",
        name="Squats",
        category="Strength Training",
        subcategory="Bodyweight",
        met=5.0,
        description="Bodyweight squats",
        muscle_groups=("Quadriceps", "Glutes", "Hamstrings", "Core"),
        difficulty="Beginner",
    ),
    ExerciseData(
        id="deadlifts",
        name="Deadlifts",
        category="Strength Training",
        subcategory="Free Weights",
        met=6.0,
        description="Conventional deadlift with barbell",
        equipment=("Barbell", "Weight plates"),
        muscle_groups=("Hamstrings", "Glutes", "Back", "Core"),
        difficulty="Advanced",
    ),
    ExerciseData(
        id="yoga-hatha",
        name="Hatha Yoga",
        category="Flexibility",
        subcategory="Yoga",
        met=2.5,
        description="Gentle yoga focusing on basic postures",
        equipment=("Yoga mat",),
        muscle_groups=("Full body", "Core"),
        difficulty="Beginner",
    ),
    ExerciseData(
        id="yoga-vinyasa",
        name="Vinyasa Yoga",
        category="Flexibility",
        subcategory="Yoga",
        met=3.0,
        description="Dynamic yoga with flowing movements",
        equipment=("Yoga mat",),
        muscle_groups=("Full body", "Core"),
        difficulty="Intermediate",
    ),
    ExerciseData(
        id="stretching-general",
        name="General Stretching",
        category="Flexibility",
        subcategory="Stretching",
        met=2.3,
        description="Static stretching routine",
        muscle_groups=("Full body",),
        difficulty="Beginner",
    ),
    ExerciseData(
        id="hiit-general",
        name="HIIT Workout",
        category="High Intensity",
        subcategory="HIIT",
        met=8.0,
        description="High intensity interval training",
        muscle_groups=("Full body", "Cardiovascular"),
        difficulty="Advanced",
    ),
    ExerciseData(
        id="burpees",
        name="Burpees",
        category="High Intensity",
        subcategory="Bodyweight",
        met=8.0,
        description="Full body explosive movement",
        muscle_groups=("Full body", "Cardiovascular"),
        difficulty="Advanced",
    ),
    ExerciseData(
        id="basketball-game",
        name="Basketball",
        category="Sports",
        subcategory="Team Sports",
        met=8.0,
        description="Playing basketball game",
        equipment=("Basketball", "Court"),
        muscle_groups=("Legs", "Core", "Arms", "Cardiovascular"),
        difficulty="Intermediate",
    ),
    ExerciseData(
        id="tennis-singles",
        name="Tennis (singles)",
        category="Sports",
        subcategory="Racquet Sports",
        met=8.0,
        description="Playing singles tennis",
        equipment=("Tennis racquet", "Tennis balls", "Court"),
        muscle_groups=("Full body", "Cardiovascular"),
        difficulty="Intermediate",
    ),
    ExerciseData(
        id="soccer-casual",
        name="Soccer (casual)",
        category="Sports",
        subcategory="Team Sports",
        met=7.0,
        description="Casual soccer game",
        equipment=("Soccer ball", "Field"),
        muscle_groups=("Legs", "Core", "Cardiovascular"),
        difficulty="Intermediate",
    ),
)

EXERCISES_BY_ID: dict[str, ExerciseData] = {
    exercise.id: exercise for exercise in EXERCISES
}
