"""Tests for the rule-based insight engine."""

from datetime import UTC, date, datetime, timedelta
from uuid import uuid4

from health_tracker.domain.entries import (
    ExerciseEntry,
    FoodEntry,
    MoodEntry,
    SleepEntry,
    WaterEntry,
)
from health_tracker.domain.models import Goals, UserProfile
from health_tracker.services.health_data import HealthDataService, HealthSummary
from health_tracker.services.insights import (
    InsightService,
    exercise_insights,
    generate_insights,
    hydration_insights,
    mood_insights,
    nutrition_insights,
    predictive_insights,
    sleep_insights,
)
from health_tracker.services.profiles import ProfileService
from tests.conftest import InMemoryHealthDataRepository, InMemoryProfileRepository

NOW = datetime(2024, 6, 15, 20, tzinfo=UTC)


def _ago(days: int) -> datetime:
    return NOW - timedelta(days=days)


def _profile(**kwargs) -> UserProfile:  # type: ignore[no-untyped-def]
    return UserProfile(id=uuid4(), name="Sam", **kwargs)


def _slugs(insights) -> list[str]:  # type: ignore[no-untyped-def]
    return [insight.id.rsplit("-", 1)[0] for insight in insights]


def test_empty_summary_yields_no_data_prompts_in_order() -> None:
    insights = generate_insights(HealthSummary(), _profile(), NOW)

    assert _slugs(insights) == [
        "nutrition-no-data",
        "hydration-no-data",
        "exercise-no-data",
        "sleep-no-data",
        "mood-no-data",
    ]
    assert all(insight.actionable for insight in insights)
    assert insights[0].id == f"nutrition-no-data-{int(NOW.timestamp() * 1000)}"


def test_protein_thresholds_use_body_weight() -> None:
    high = [
        FoodEntry(name="Chicken", calories=500, protein=120, meal="dinner", timestamp=_ago(day))
        for day in range(7)
    ]
    low = [FoodEntry(name="Toast", calories=300, protein=10, meal="breakfast", timestamp=_ago(0))]

    high_insights = nutrition_insights(high, _profile(), NOW)
    assert _slugs(high_insights)[0] == "nutrition-protein-excellent"
    low_insights = nutrition_insights(low, _profile(weight=80), NOW)
    assert _slugs(low_insights) == ["nutrition-protein-low"]
    assert low_insights[0].data_points["recommended_g"] == 96


def test_consistent_calories_need_three_days() -> None:
    entries = [
        FoodEntry(name="Meal", calories=calories, protein=80, meal="lunch", timestamp=_ago(day))
        for day, calories in enumerate((1900, 2000, 2100))
    ]

    slugs = _slugs(nutrition_insights(entries, _profile(), NOW))
    assert "nutrition-consistency-good" in slugs
    assert "nutrition-consistency-good" not in _slugs(
        nutrition_insights(entries[:2], _profile(), NOW)
    )


def test_hydration_warning_after_three_low_days() -> None:
    entries = [WaterEntry(amount=1000, timestamp=_ago(day)) for day in range(3)]

    insights = hydration_insights(entries, _profile(), NOW)

    assert _slugs(insights) == ["hydration-warning"]
    assert insights[0].priority == "high"
    assert insights[0].data_points == {
        "average_glasses": 4,
        "goal_glasses": 8,
        "achievement_percent": 50,
    }


def test_hydration_excellent_when_goal_met() -> None:
    entries = [WaterEntry(amount=2000, timestamp=_ago(day)) for day in range(3)]

    assert _slugs(hydration_insights(entries, _profile(), NOW)) == ["hydration-excellent"]


def test_hydration_only_checks_recent_days() -> None:
    entries = [WaterEntry(amount=500, timestamp=_ago(day)) for day in (3, 4, 5)]
    entries.append(WaterEntry(amount=2500, timestamp=_ago(0)))

    assert _slugs(hydration_insights(entries, _profile(), NOW)) == []


def test_exercise_rules() -> None:
    goal = _profile(goals=Goals(exercise=30))
    excellent = [
        ExerciseEntry(name="Run", type="cardio", duration=60, timestamp=_ago(day))
        for day in range(4)
    ]
    frequent = [
        ExerciseEntry(name="Lift", type="strength", duration=20, timestamp=_ago(0)),
        ExerciseEntry(name="Yoga", type="flexibility", duration=20, timestamp=_ago(1)),
        ExerciseEntry(name="Tennis", type="sports", duration=20, timestamp=_ago(2)),
    ]

    assert _slugs(exercise_insights(excellent, goal, NOW)) == ["exercise-excellent"]
    assert _slugs(exercise_insights(frequent, goal, NOW)) == [
        "exercise-good-frequency",
        "exercise-variety",
    ]


def _sleep(duration: float, quality: int, day: int = 0) -> SleepEntry:
    return SleepEntry(
        sleep_date=date(2024, 6, 10 + day),
        bedtime="23:00",
        wake_time="07:00",
        duration=duration,
        quality=quality,
    )


def test_sleep_rules() -> None:
    assert _slugs(sleep_insights([_sleep(8, 4)], NOW)) == [
        "sleep-duration-good",
        "sleep-quality-good",
    ]
    assert _slugs(sleep_insights([_sleep(6, 3)], NOW)) == ["sleep-duration-low"]
    assert _slugs(sleep_insights([_sleep(9.5, 3)], NOW)) == []


def test_mood_rules_and_trend() -> None:
    improving = [
        MoodEntry(rating=rating, timestamp=_ago(day))
        for day, rating in enumerate((6, 5, 4))
    ]
    low = [MoodEntry(rating=3, timestamp=_ago(0))]

    assert _slugs(mood_insights(improving, NOW)) == ["mood-improving"]
    assert _slugs(mood_insights(low, NOW)) == ["mood-concern"]
    assert _slugs(mood_insights(improving[:2], NOW)) == []


def test_predictive_weight_forecast() -> None:
    profile = _profile(weight=80, goals=Goals(weight=75, calories=2000))
    summary = HealthSummary(
        food=[
            FoodEntry(name="Meal", calories=1500, meal="lunch", timestamp=_ago(day))
            for day in range(5)
        ]
    )

    insights = predictive_insights(summary, profile, NOW)

    assert _slugs(insights) == ["prediction-weight-goal"]
    assert insights[0].data_points["projected_weeks"] == 5


def test_predictive_exercise_consistency_needs_five_days() -> None:
    summary = HealthSummary(
        exercise=[
            ExerciseEntry(name="Walk", type="cardio", duration=20, timestamp=_ago(day))
            for day in range(5)
        ]
    )

    insights = predictive_insights(summary, _profile(), NOW)

    assert _slugs(insights) == ["prediction-exercise-consistency"]
    assert insights[0].data_points["weekly_consistency_percent"] == 71


def test_insight_service_reads_last_week(user_id) -> None:
    repository = InMemoryHealthDataRepository()
    repository.add_entry(user_id, WaterEntry(amount=2000, timestamp=_ago(1)))
    repository.add_entry(user_id, WaterEntry(amount=100, timestamp=_ago(10)))
    service = InsightService(
        HealthDataService(repository), ProfileService(InMemoryProfileRepository())
    )

    insights = service.generate(user_id, now=NOW)

    assert "hydration-excellent" in _slugs(insights)
