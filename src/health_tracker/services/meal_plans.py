"""Meal plan lookups and personalisation."""

from collections.abc import Sequence
from dataclasses import dataclass, replace
from datetime import UTC, datetime

from health_tracker.catalogs.meal_plans import MEAL_PLANS
from health_tracker.domain.catalog import Meal, MealPlan, MealSlots

BREAKFAST_TOLERANCE = 0.2


@dataclass(frozen=True)
class DailyNutrients:
    """Macro totals for a day of meals."""

    calories: float
    protein: float
    carbs: float
    fat: float


def get_meal_plan(plan_id: str) -> MealPlan | None:
    return next((plan for plan in MEAL_PLANS if plan.id == plan_id), None)


def plans_by_preference(preference: str) -> list[MealPlan]:
    return [plan for plan in MEAL_PLANS if preference in plan.dietary_preferences]


def plans_by_calorie_range(minimum: float, maximum: float) -> list[MealPlan]:
    return [
        plan for plan in MEAL_PLANS if minimum <= plan.target_calories <= maximum
    ]


def generate_meal_plan(
    target_calories: float,
    preferences: Sequence[str] = (),
    restrictions: Sequence[str] = (),
    now: datetime | None = None,
) -> MealPlan:
    """Adapt the closest template to a calorie target and preferences.

    Restrictions are accepted for API compatibility; templates are not yet
    filtered by them.
    """
    base = MEAL_PLANS[0]
    for plan in MEAL_PLANS[1:]:
        if abs(plan.target_calories - target_calories) < abs(
            base.target_calories - target_calories
        ):
            base = plan

    ratio = base.macro_ratio
    tags = list(base.dietary_preferences)
    if "high-protein" in preferences:
        ratio = replace(
            ratio, protein=min(40, ratio.protein + 10), carbs=max(20, ratio.carbs - 10)
        )
        tags.append("high-protein")
    if "low-carb" in preferences:
        ratio = replace(
            ratio, carbs=max(20, ratio.carbs - 15), fat=min(50, ratio.fat + 15)
        )
        tags.append("low-carb")
    if "vegetarian" in preferences and "vegetarian" not in tags:
        tags.append("vegetarian")

    factor = target_calories / base.target_calories
    created = now or datetime.now(tz=UTC)
    return replace(
        base,
        id=f"custom-{int(created.timestamp() * 1000)}",
        name="Custom Meal Plan",
        description=f"Personalized meal plan targeting {target_calories:g} calories",
        target_calories=target_calories,
        macro_ratio=ratio,
        dietary_preferences=tuple(tags),
        meals=MealSlots(
            breakfast=_scale_meals(base.meals.breakfast, factor),
            lunch=_scale_meals(base.meals.lunch, factor),
            dinner=_scale_meals(base.meals.dinner, factor),
            snacks=_scale_meals(base.meals.snacks, factor),
        ),
    )


def recommend_breakfast_options(
    calorie_target: float, preferences: Sequence[str] = ()
) -> list[Meal]:
    """Breakfasts within 20% of the target, closest first."""
    options = [
        meal
        for plan in MEAL_PLANS
        if not preferences
        or any(pref in plan.dietary_preferences for pref in preferences)
        for meal in plan.meals.breakfast
    ]
    low = calorie_target * (1 - BREAKFAST_TOLERANCE)
    high = calorie_target * (1 + BREAKFAST_TOLERANCE)
    return sorted(
        (meal for meal in options if low <= meal.calories <= high),
        key=lambda meal: abs(meal.calories - calorie_target),
    )


def calculate_daily_nutrients(
    breakfast: Meal, lunch: Meal, dinner: Meal, snacks: Sequence[Meal] = ()
) -> DailyNutrients:
    meals = [breakfast, lunch, dinner, *snacks]
    return DailyNutrients(
        calories=sum(meal.calories for meal in meals),
        protein=sum(meal.protein for meal in meals),
        carbs=sum(meal.carbs for meal in meals),
        fat=sum(meal.fat for meal in meals),
    )


def _scale_meals(meals: tuple[Meal, ...], factor: float) -> tuple[Meal, ...]:
    return tuple(
        replace(
            meal,
            calories=round(meal.calories * factor),
            protein=round(meal.protein * factor),
            carbs=round(meal.carbs * factor),
            fat=round(meal.fat * factor),
        )
        for meal in meals
    )
