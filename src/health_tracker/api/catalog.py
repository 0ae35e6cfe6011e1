"""Public reference catalog endpoints."""

import logging

import httpx
from fastapi import APIRouter, HTTPException, Query, status

from health_tracker.api.dependencies import Container
from health_tracker.api.schemas import (
    CustomWorkoutPlanRequest,
    HealthAssessmentRequest,
    HealthTrendRequest,
    MealPlanGenerateRequest,
    MedicationInteractionRequest,
    MedicationScheduleRequest,
    NutritionTotalRequest,
    WorkoutGenerateRequest,
)
from health_tracker.catalogs.exercises import EXERCISES
from health_tracker.catalogs.foods import FOODS
from health_tracker.catalogs.health_metrics import HEALTH_METRICS
from health_tracker.catalogs.meal_plans import MEAL_PLANS
from health_tracker.catalogs.medications import MEDICATIONS
from health_tracker.catalogs.workout_plans import WORKOUT_PLANS
from health_tracker.containers import AppContainer
from health_tracker.domain.catalog import (
    Difficulty,
    GeneratedWorkout,
    HealthMetric,
    MealPlan,
    MedicationInfo,
    NutritionItem,
    WorkoutGoal,
    WorkoutPlan,
)
from health_tracker.domain.nutrition import RemoteFood
from health_tracker.services import (
    exercise,
    health_metrics,
    meal_plans,
    medication_catalog,
    nutrition,
    workout_plans,
)
from health_tracker.services.nutrition import NutritionService

_logger = logging.getLogger(__name__)

router = APIRouter(prefix="/catalog", tags=["catalog"])


def _not_found(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


@router.get("/foods")
async def list_foods(
    q: str | None = None,
    category: str | None = None,
    tag: str | None = None,
) -> dict[str, object]:
    """Search the local nutrition database."""
    foods = list(FOODS)
    if q:
        foods = nutrition.search_foods(q, foods)
    if category:
        foods = nutrition.foods_by_category(category, foods)
    if tag:
        foods = nutrition.foods_by_tag(tag, foods)
    return {"foods": foods}


@router.get("/foods/remote")
async def search_remote_foods(
    container: Container,
    q: str = Query(min_length=1),
    limit: int = Query(default=5, ge=1, le=25),
) -> dict[str, object]:
    """Search USDA FoodData Central when an API key is configured."""
    service = _remote_service(container)
    try:
        foods = await service.search_remote(q, limit)
    except Exception as exc:
        _logger.exception("FDC search failed", extra={"query": q})
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Remote food search failed",
        ) from exc
    return {"foods": foods}


@router.get("/foods/remote/{fdc_id}")
async def get_remote_food(container: Container, fdc_id: int) -> RemoteFood:
    """Fetch one FoodData Central food by its FDC id."""
    service = _remote_service(container)
    try:
        return await service.get_remote_food(fdc_id)
    except Exception as exc:
        if (
            isinstance(exc, httpx.HTTPStatusError)
            and exc.response.status_code == status.HTTP_404_NOT_FOUND
        ):
            raise _not_found(f"Unknown FDC food: {fdc_id}") from exc
        _logger.exception("FDC food lookup failed", extra={"fdc_id": fdc_id})
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Remote food lookup failed",
        ) from exc


def _remote_service(container: AppContainer) -> NutritionService:
    if container.nutrition_service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Remote food search is not configured",
        )
    return container.nutrition_service


@router.post("/foods/nutrition")
async def total_food_nutrition(payload: NutritionTotalRequest) -> dict[str, object]:
    """Sum nutrients over catalog foods and serving multipliers."""
    portions = []
    for portion in payload.items:
        item = nutrition.get_food(portion.food_id)
        if item is None:
            raise _not_found(f"Unknown food: {portion.food_id}")
        portions.append((item, portion.multiplier))
    return {"nutrition": nutrition.total_nutrition(portions)}


@router.get("/foods/{food_id}")
async def get_food(food_id: str) -> NutritionItem:
    item = nutrition.get_food(food_id)
    if item is None:
        raise _not_found("Unknown food")
    return item


@router.get("/exercises")
async def list_exercises(  # noqa: PLR0913
    q: str | None = None,
    category: str | None = None,
    muscle_group: str | None = None,
    difficulty: Difficulty | None = None,
    equipment: str | None = None,
) -> dict[str, object]:
    """Search and filter the exercise database."""
    matches = exercise.search_exercises(q) if q else list(EXERCISES)
    if category:
        allowed = {item.id for item in exercise.exercises_by_category(category)}
        matches = [item for item in matches if item.id in allowed]
    if muscle_group:
        allowed = {item.id for item in exercise.exercises_by_muscle_group(muscle_group)}
        matches = [item for item in matches if item.id in allowed]
    if difficulty:
        allowed = {item.id for item in exercise.exercises_by_difficulty(difficulty)}
        matches = [item for item in matches if item.id in allowed]
    if equipment:
        allowed = {item.id for item in exercise.exercises_by_equipment(equipment)}
        matches = [item for item in matches if item.id in allowed]
    return {"exercises": matches}


@router.get("/exercises/{exercise_id}/calories")
async def exercise_calories(
    exercise_id: str,
    minutes: float = Query(gt=0, le=600),
    weight_kg: float = Query(default=70, gt=0),
) -> dict[str, object]:
    """Calories burned for a session: MET x kg x hours."""
    if exercise.get_exercise(exercise_id) is None:
        raise _not_found("Unknown exercise")
    return {
        "exercise_id": exercise_id,
        "calories": exercise.calculate_calories_burned(exercise_id, minutes, weight_kg),
    }


@router.post("/workouts/generate")
async def generate_workout(payload: WorkoutGenerateRequest) -> GeneratedWorkout:
    return exercise.generate_workout_plan(
        payload.type, payload.duration, payload.difficulty, payload.weight_kg
    )


@router.get("/meal-plans")
async def list_meal_plans(
    preference: str | None = None,
    min_calories: float | None = Query(default=None, ge=0),
    max_calories: float | None = Query(default=None, ge=0),
) -> dict[str, object]:
    plans = list(MEAL_PLANS)
    if preference:
        allowed = {plan.id for plan in meal_plans.plans_by_preference(preference)}
        plans = [plan for plan in plans if plan.id in allowed]
    if min_calories is not None or max_calories is not None:
        allowed = {
            plan.id
            for plan in meal_plans.plans_by_calorie_range(
                min_calories or 0, max_calories or float("inf")
            )
        }
        plans = [plan for plan in plans if plan.id in allowed]
    return {"meal_plans": plans}


@router.post("/meal-plans/generate")
async def generate_meal_plan(payload: MealPlanGenerateRequest) -> MealPlan:
    return meal_plans.generate_meal_plan(
        payload.target_calories, payload.preferences, payload.restrictions
    )


@router.get("/meal-plans/breakfast")
async def breakfast_options(
    calories: float = Query(gt=0),
    preference: list[str] | None = Query(default=None),
) -> dict[str, object]:
    """Breakfasts within 20% of a calorie target, closest first."""
    meals = meal_plans.recommend_breakfast_options(calories, preference or [])
    return {"meals": meals}


@router.get("/meal-plans/{plan_id}")
async def get_meal_plan(plan_id: str) -> MealPlan:
    plan = meal_plans.get_meal_plan(plan_id)
    if plan is None:
        raise _not_found("Unknown meal plan")
    return plan


@router.get("/workout-plans")
async def list_workout_plans(
    goal: WorkoutGoal | None = None, level: Difficulty | None = None
) -> dict[str, object]:
    plans = list(WORKOUT_PLANS)
    if goal:
        allowed = {plan.id for plan in workout_plans.plans_by_goal(goal)}
        plans = [plan for plan in plans if plan.id in allowed]
    if level:
        allowed = {plan.id for plan in workout_plans.plans_by_level(level)}
        plans = [plan for plan in plans if plan.id in allowed]
    return {"workout_plans": plans}


@router.post("/workout-plans/custom")
async def custom_workout_plan(payload: CustomWorkoutPlanRequest) -> WorkoutPlan:
    return workout_plans.generate_custom_workout_plan(
        payload.goal, payload.level, payload.frequency, payload.equipment
    )


@router.get("/workout-plans/{plan_id}/schedule")
async def workout_schedule(plan_id: str) -> dict[str, object]:
    """Seven-day schedule with rest days for a plan."""
    plan = workout_plans.get_workout_plan(plan_id)
    if plan is None:
        raise _not_found("Unknown workout plan")
    return {"plan_id": plan.id, "schedule": workout_plans.generate_weekly_schedule(plan)}


@router.get("/medications")
async def list_medications(
    q: str | None = None,
    category: str | None = None,
    drug_class: str | None = None,
    condition: str | None = None,
) -> dict[str, object]:
    """Search the medication reference database."""
    matches = medication_catalog.search_medications(q) if q else list(MEDICATIONS)
    if category:
        allowed = {
            item.id for item in medication_catalog.medications_by_category(category)
        }
        matches = [item for item in matches if item.id in allowed]
    if drug_class:
        allowed = {
            item.id for item in medication_catalog.medications_by_drug_class(drug_class)
        }
        matches = [item for item in matches if item.id in allowed]
    if condition:
        allowed = {
            item.id for item in medication_catalog.medications_for_condition(condition)
        }
        matches = [item for item in matches if item.id in allowed]
    return {"medications": matches}


@router.post("/medications/interactions")
async def medication_interactions(
    payload: MedicationInteractionRequest,
) -> dict[str, object]:
    """Pairwise interaction check across the given medications."""
    for medication_id in payload.medication_ids:
        if medication_catalog.get_medication(medication_id) is None:
            raise _not_found(f"Unknown medication: {medication_id}")
    return {
        "interactions": medication_catalog.check_medication_interactions(
            payload.medication_ids
        )
    }


@router.get("/medications/{medication_id}")
async def get_medication(medication_id: str) -> MedicationInfo:
    medication = medication_catalog.get_medication(medication_id)
    if medication is None:
        raise _not_found("Unknown medication")
    return medication


@router.post("/medications/{medication_id}/schedule")
async def medication_schedule(
    medication_id: str, payload: MedicationScheduleRequest
) -> dict[str, object]:
    """Daily reminder times for a dosing schedule."""
    if medication_catalog.get_medication(medication_id) is None:
        raise _not_found("Unknown medication")
    reminders = medication_catalog.generate_medication_reminders(
        medication_id, payload.dosage, payload.frequency, payload.timing
    )
    return {"medication_id": medication_id, "reminders": reminders}


@router.get("/health-metrics")
async def list_health_metrics(category: str | None = None) -> dict[str, object]:
    if category:
        return {"health_metrics": health_metrics.metrics_by_category(category)}
    return {"health_metrics": list(HEALTH_METRICS)}


@router.post("/health-metrics/assess")
async def assess_health_metrics(payload: HealthAssessmentRequest) -> dict[str, object]:
    """Risk level per reading plus a weighted overall health score."""
    readings = []
    for reading in payload.readings:
        if health_metrics.get_metric(reading.metric_id) is None:
            raise _not_found(f"Unknown health metric: {reading.metric_id}")
        readings.append(
            {
                "metric_id": reading.metric_id,
                "value": reading.value,
                "risk_level": health_metrics.assess_risk_level(
                    reading.metric_id, reading.value
                ),
                "in_normal_range": health_metrics.is_in_normal_range(
                    reading.metric_id, reading.value, payload.sex
                ),
                "recommendations": health_metrics.metric_recommendations(
                    reading.metric_id
                ),
            }
        )
    score = health_metrics.calculate_health_score(
        (reading.metric_id, reading.value, reading.weight)
        for reading in payload.readings
    )
    return {"score": score, "readings": readings}


@router.post("/health-metrics/trends")
async def health_metric_trends(payload: HealthTrendRequest) -> dict[str, object]:
    history = {
        metric.metric_id: [(item.measured_at, item.value) for item in metric.values]
        for metric in payload.metrics
    }
    return {
        "trends": health_metrics.analyze_health_trends(history, payload.timeframe_days)
    }


@router.get("/health-metrics/{metric_id}")
async def get_health_metric(metric_id: str) -> HealthMetric:
    metric = health_metrics.get_metric(metric_id)
    if metric is None:
        raise _not_found("Unknown health metric")
    return metric
