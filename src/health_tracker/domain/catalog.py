"""Domain models for static reference catalogs."""

from dataclasses import dataclass, field
from typing import Literal

Difficulty = Literal["Beginner", "Intermediate", "Advanced"]
WorkoutGoal = Literal[
    "Strength", "Hypertrophy", "Endurance", "Weight Loss", "General Fitness"
]

BODYWEIGHT = "None (Bodyweight)"


@dataclass(frozen=True)
class Serving:
    """Reference serving size."""

    amount: float
    unit: str
    grams: float


@dataclass(frozen=True)
class Nutrients:
    """Nutrient amounts for one serving."""

    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0
    fiber: float = 0
    sugar: float = 0
    sodium: float = 0


@dataclass(frozen=True)
class NutritionItem:
    """A food in the nutrition database."""

    id: str
    name: str
    category: str
    serving: Serving
    nutrition: Nutrients
    brand: str | None = None
    glycemic_index: int | None = None
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class ExerciseData:
    """An exercise with its MET value."""

    id: str
    name: str
    category: str
    met: float
    description: str
    muscle_groups: tuple[str, ...]
    difficulty: Difficulty
    subcategory: str | None = None
    equipment: tuple[str, ...] = ()


@dataclass(frozen=True)
class Meal:
    """A meal suggestion with macros."""

    name: str
    calories: float
    protein: float
    carbs: float
    fat: float
    ingredients: tuple[str, ...]
    prep_time: int


@dataclass(frozen=True)
class MacroRatio:
    """Percent of calories from each macronutrient."""

    protein: int
    carbs: int
    fat: int


@dataclass(frozen=True)
class MealSlots:
    """Meals grouped by time of day."""

    breakfast: tuple[Meal, ...]
    lunch: tuple[Meal, ...]
    dinner: tuple[Meal, ...]
    snacks: tuple[Meal, ...]


@dataclass(frozen=True)
class MealPlan:
    """A day-plan template targeting a calorie level."""

    id: str
    name: str
    description: str
    target_calories: float
    macro_ratio: MacroRatio
    dietary_preferences: tuple[str, ...]
    meals: MealSlots


@dataclass(frozen=True)
class WorkoutExercise:
    """A prescribed exercise inside a planned workout."""

    exercise: ExerciseData
    sets: int | None = None
    reps: int | None = None
    duration: float | None = None
    rest: int | None = None
    notes: str | None = None


@dataclass(frozen=True)
class PlannedWorkout:
    """A single day's session in a workout plan."""

    name: str
    focus: str
    exercises: tuple[WorkoutExercise, ...]
    duration: int
    calories: int


@dataclass(frozen=True)
class WorkoutPlan:
    """A multi-week training program."""

    id: str
    name: str
    description: str
    level: Difficulty
    goal: WorkoutGoal
    duration: int
    frequency: int
    workouts: dict[str, PlannedWorkout]
    equipment: tuple[str, ...]
    notes: str | None = None


@dataclass(frozen=True)
class GeneratedWorkoutItem:
    """An exercise slot in a generated single workout."""

    exercise: ExerciseData
    duration: int
    rest: int
    sets: int | None = None
    reps: int | None = None


@dataclass(frozen=True)
class GeneratedWorkout:
    """A single generated workout session."""

    id: str
    name: str
    description: str
    duration: int
    difficulty: Difficulty
    exercises: list[GeneratedWorkoutItem] = field(default_factory=list)
    total_calories: int = 0


@dataclass(frozen=True)
class ScheduleDay:
    """One day in a weekly schedule; workout is None on rest days."""

    day: str
    workout: str | None


Sex = Literal["male", "female"]
RiskLevel = Literal["low", "moderate", "high", "unknown"]
InteractionSeverity = Literal["Moderate", "None"]


@dataclass(frozen=True)
class MedicationInfo:
    """A reference drug with its uses, side effects and interactions.

    ``interaction_terms`` are class names other drugs use to refer to this
    one in their interaction lists (e.g. "NSAIDs" for ibuprofen).
    """

    id: str
    name: str
    generic_name: str
    drug_class: str
    category: str
    description: str
    used_for: tuple[str, ...]
    dosage_forms: tuple[str, ...]
    typical_dosage: str
    common_side_effects: tuple[str, ...]
    serious_side_effects: tuple[str, ...]
    requires_prescription: bool
    brand_names: tuple[str, ...] = ()
    interacting_drugs: tuple[str, ...] = ()
    interacting_foods: tuple[str, ...] = ()
    interacting_conditions: tuple[str, ...] = ()
    precautions: tuple[str, ...] = ()
    contraindications: tuple[str, ...] = ()
    pregnancy_category: str | None = None
    mechanism: str | None = None
    half_life: str | None = None
    interaction_terms: tuple[str, ...] = ()


@dataclass(frozen=True)
class MedicationInteraction:
    """Result of checking one pair of medications."""

    medication_a: str
    medication_b: str
    severity: InteractionSeverity
    description: str
    recommendation: str


@dataclass(frozen=True)
class DoseReminder:
    time: str
    instruction: str


@dataclass(frozen=True)
class ValueRange:
    """Inclusive numeric range."""

    min: float
    max: float

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


@dataclass(frozen=True)
class HealthMetric:
    """A clinical measurement with normal ranges and risk bands."""

    id: str
    name: str
    category: str
    unit: str
    description: str
    low_risk: ValueRange
    moderate_risk: ValueRange
    high_risk: ValueRange
    general_range: ValueRange | None = None
    male_range: ValueRange | None = None
    female_range: ValueRange | None = None
    lower_is_better: bool = False
    factors: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()


@dataclass(frozen=True)
class MetricTrend:
    """Direction of change for one metric over a timeframe."""

    metric_id: str
    trend: Literal["improving", "stable", "declining"]
    change_percent: float
    recommendation: str
