"""Tests for the food, exercise, meal plan and workout plan catalogs."""

import random
from datetime import UTC, datetime

from health_tracker.catalogs.exercises import EXERCISES
from health_tracker.catalogs.meal_plans import MEAL_PLANS
from health_tracker.domain.catalog import BODYWEIGHT
from health_tracker.services.exercise import (
    calculate_calories_burned,
    estimate_logged_calories,
    exercises_by_equipment,
    generate_workout_plan,
    search_exercises,
)
from health_tracker.services.meal_plans import (
    calculate_daily_nutrients,
    generate_meal_plan,
    plans_by_calorie_range,
    plans_by_preference,
    recommend_breakfast_options,
)
from health_tracker.services.nutrition import (
    food_entry_from_item,
    foods_by_category,
    get_food,
    nutrition_for_serving,
    search_foods,
    total_nutrition,
)
from health_tracker.services.workout_plans import (
    calculate_workout_calories,
    generate_custom_workout_plan,
    generate_weekly_schedule,
    get_workout_plan,
    plans_by_goal,
)

NOW = datetime(2024, 6, 15, 12, tzinfo=UTC)


def test_search_foods_matches_name_category_and_tags() -> None:
    assert "apple-medium" in [item.id for item in search_foods("APPLE")]
    assert {item.category for item in search_foods("fruits")} == {"Fruits"}
    assert all("potassium-rich" in item.tags for item in search_foods("potassium"))
    assert search_foods("zzz-no-such-food") == []


def test_foods_by_category() -> None:
    fruits = foods_by_category("Fruits")

    assert fruits
    assert all(item.category == "Fruits" for item in fruits)


def test_nutrition_for_serving_scales_and_rounds() -> None:
    apple = get_food("apple-medium")
    assert apple is not None

    doubled = nutrition_for_serving(apple, 2)

    assert doubled.calories == 190
    assert doubled.protein == 1.0
    assert doubled.carbs == 50
    assert doubled.sodium == 4


def test_total_nutrition_sums_portions() -> None:
    apple = get_food("apple-medium")
    banana = get_food("banana-medium")
    assert apple is not None and banana is not None

    total = total_nutrition([(apple, 1), (banana, 2)])

    assert total.calories == 305
    assert total.carbs == 79


def test_food_entry_from_item_keeps_serving_label() -> None:
    apple = get_food("apple-medium")
    assert apple is not None

    entry = food_entry_from_item(apple, 2, "snack")

    assert entry.name == "Apple"
    assert entry.serving == "1 medium"
    assert entry.quantity == 2
    assert entry.meal == "snack"


def test_calculate_calories_burned_uses_met() -> None:
    assert calculate_calories_burned("running-6mph", 60, 70) == 686
    assert calculate_calories_burned("unknown", 60, 70) == 0


def test_estimate_logged_calories_applies_intensity() -> None:
    assert estimate_logged_calories("cardio", 30, "moderate") == 300
    assert estimate_logged_calories("strength", 10, "high") == 78


def test_exercise_filters() -> None:
    bodyweight = exercises_by_equipment(BODYWEIGHT)
    assert {"push-ups", "squats", "burpees"} <= {exercise.id for exercise in bodyweight}
    assert all(not exercise.equipment for exercise in bodyweight)
    assert {exercise.id for exercise in search_exercises("yoga")} == {
        "yoga-hatha",
        "yoga-vinyasa",
    }
    assert len(EXERCISES) == 18


def test_generate_strength_workout_uses_fixed_sets() -> None:
    workout = generate_workout_plan(
        "strength", 30, "Beginner", 70, rng=random.Random(1), now=NOW
    )

    assert {item.exercise.id for item in workout.exercises} == {"push-ups", "squats"}
    assert all(item.sets == 3 and item.reps == 12 for item in workout.exercises)
    assert workout.total_calories == 51
    assert workout.id == f"workout-{int(NOW.timestamp() * 1000)}"
    assert workout.name == "Strength Workout"


def test_generate_interval_workout_splits_duration() -> None:
    flexibility = generate_workout_plan(
        "flexibility", 30, "Beginner", 70, rng=random.Random(3), now=NOW
    )
    cardio = generate_workout_plan("cardio", 40, "Beginner", 70, now=NOW)

    assert [item.duration for item in flexibility.exercises] == [15, 15]
    assert [item.exercise.id for item in cardio.exercises] == ["walking-3mph"]
    assert cardio.total_calories == 163


def test_generate_workout_without_matches_is_empty() -> None:
    workout = generate_workout_plan("hiit", 20, "Beginner", 70, now=NOW)

    assert workout.exercises == []
    assert workout.total_calories == 0


def test_meal_plan_lookups() -> None:
    assert [plan.id for plan in plans_by_preference("vegan")] == ["plant-based"]
    assert {plan.id for plan in plans_by_calorie_range(1850, 2100)} == {
        "balanced-nutrition",
        "plant-based",
    }


def test_generate_meal_plan_adjusts_ratio_and_tags() -> None:
    plan = generate_meal_plan(2000, ["high-protein"], now=NOW)

    assert plan.id == f"custom-{int(NOW.timestamp() * 1000)}"
    assert plan.macro_ratio.protein == 35
    assert plan.macro_ratio.carbs == 40
    assert "high-protein" in plan.dietary_preferences
    assert plan.meals == MEAL_PLANS[0].meals


def test_generate_meal_plan_scales_closest_template() -> None:
    plan = generate_meal_plan(1100, now=NOW)
    base = MEAL_PLANS[2]

    assert base.id == "low-carb"
    assert plan.meals.breakfast[0].calories == round(
        base.meals.breakfast[0].calories * 1100 / 1800
    )


def test_breakfast_options_within_tolerance_closest_first() -> None:
    options = recommend_breakfast_options(350)

    assert options
    assert all(280 <= meal.calories <= 420 for meal in options)
    distances = [abs(meal.calories - 350) for meal in options]
    assert distances == sorted(distances)


def test_calculate_daily_nutrients() -> None:
    meals = MEAL_PLANS[0].meals
    totals = calculate_daily_nutrients(
        meals.breakfast[0], meals.lunch[0], meals.dinner[0], meals.snacks
    )

    assert totals.calories == sum(
        meal.calories
        for meal in (meals.breakfast[0], meals.lunch[0], meals.dinner[0], *meals.snacks)
    )


def test_weekly_schedule_spreads_three_workouts() -> None:
    plan = get_workout_plan("beginner-strength")
    assert plan is not None

    schedule = generate_weekly_schedule(plan)

    assert len(schedule) == 7
    assert [day.workout for day in schedule] == [
        "Day 1",
        None,
        "Day 2",
        None,
        "Day 3",
        None,
        None,
    ]


def test_weekly_schedule_rests_wednesday_and_sunday_for_frequent_plans() -> None:
    plan = get_workout_plan("weight-loss")
    assert plan is not None

    schedule = generate_weekly_schedule(plan)

    assert len(schedule) == 7
    assert schedule[2].workout is None
    assert schedule[6].workout is None
    assert [day.day for day in schedule if day.workout] == [
        "Monday",
        "Tuesday",
        "Thursday",
        "Friday",
    ]


def test_custom_plan_adds_variations_and_substitutes_equipment() -> None:
    plan = generate_custom_workout_plan(
        "Strength", "Beginner", 4, equipment=["Dumbbells"], now=NOW
    )

    assert list(plan.workouts) == ["Day 1", "Day 2", "Day 3", "Day 4"]
    assert plan.workouts["Day 4"].name == "Full Body Basics A (Variation)"
    assert plan.frequency == 4
    assert plan.equipment == ("Dumbbells",)
    day_one = plan.workouts["Day 1"].exercises
    assert "deadlifts" not in [item.exercise.id for item in day_one]
    assert day_one[2].notes == "Substitution for Deadlifts"


def test_custom_plan_falls_back_to_goal_template() -> None:
    plan = generate_custom_workout_plan("Strength", "Advanced", 5, now=NOW)

    assert plan == plans_by_goal("Strength")[0]


def test_workout_calories_time_untimed_sets() -> None:
    plan = get_workout_plan("beginner-strength")
    assert plan is not None

    calories = calculate_workout_calories(plan.workouts["Day 1"], 70)

    assert calories > 0
