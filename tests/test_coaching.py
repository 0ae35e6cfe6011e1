"""Tests for coaching insight generators."""

from datetime import UTC, date, datetime, timedelta

from health_tracker.domain.entries import ExerciseEntry, FoodEntry, SleepEntry
from health_tracker.domain.stats import DailyStats
from health_tracker.services.coaching import (
    CoachingService,
    fitness_coaching,
    generate_health_insights,
    nutrition_coaching,
    sleep_coaching,
)
from health_tracker.services.health_data import HealthDataService
from health_tracker.services.profiles import ProfileService
from health_tracker.services.stats import StatsService
from tests.conftest import InMemoryHealthDataRepository, InMemoryProfileRepository

NOW = datetime(2024, 6, 15, 20, tzinfo=UTC)


def _ids(insights) -> list[str]:  # type: ignore[no-untyped-def]
    return [insight.id for insight in insights]


def _days(count: int, **totals: float) -> list[DailyStats]:
    return [
        DailyStats(day=date(2024, 6, 1) + timedelta(days=offset), food_entries=3, **totals)
        for offset in range(count)
    ]


def _workouts(durations: list[float], **fields) -> list[ExerciseEntry]:  # type: ignore[no-untyped-def]
    fields.setdefault("type", "cardio")
    return [
        ExerciseEntry(
            name="Session",
            duration=duration,
            timestamp=NOW - timedelta(days=index),
            **fields,
        )
        for index, duration in enumerate(durations)
    ]


def _nights(durations: list[float], quality: int) -> list[SleepEntry]:
    return [
        SleepEntry(
            sleep_date=date(2024, 6, 1) + timedelta(days=index),
            bedtime="23:00",
            wake_time="07:00",
            duration=duration,
            quality=quality,
        )
        for index, duration in enumerate(durations)
    ]


def test_nutrition_needs_three_logged_days() -> None:
    assert _ids(nutrition_coaching(_days(2, calories=2000), 70, 2000, NOW)) == [
        "not-enough-data"
    ]


def test_nutrition_balanced_days() -> None:
    days = _days(3, calories=2000, protein=120, carbs=200, fat=80)

    assert _ids(nutrition_coaching(days, 70, 2000, NOW)) == [
        "optimal-protein",
        "calorie-on-target",
    ]


def test_nutrition_imbalances() -> None:
    days = _days(3, calories=3000, protein=40, carbs=500, fat=30)

    insights = nutrition_coaching(days, 70, 2000, NOW)

    assert _ids(insights) == ["low-protein", "calorie-imbalance", "high-carb", "low-fat"]
    assert "above your target" in insights[1].description


def test_fitness_needs_three_entries() -> None:
    assert _ids(fitness_coaching(_workouts([30, 30]), 30, NOW)) == [
        "not-enough-exercise-data"
    ]


def test_fitness_variety_and_consistency() -> None:
    entries = _workouts([30, 30, 30, 30, 30])

    insights = fitness_coaching(entries, 30, NOW)

    assert _ids(insights) == ["exercise-variety", "exercise-consistency-good"]
    assert insights[0].description.startswith("Almost all of your workouts are cardio")


def test_fitness_duration_and_intensity() -> None:
    short = _workouts([10, 10, 10], intensity="high")
    long = [
        *_workouts([60], type="strength"),
        *_workouts([60], type="cardio"),
        *_workouts([60], type="sports"),
    ]

    assert "exercise-duration" in _ids(fitness_coaching(short, 30, NOW))
    assert "high-intensity-balance" in _ids(fitness_coaching(short, 30, NOW))
    assert "exercise-overtraining" in _ids(fitness_coaching(long, 30, NOW))


def test_fitness_trend_needs_seven_entries() -> None:
    rising = _workouts([60, 60, 60, 40, 30, 30, 30])
    falling = _workouts([20, 20, 20, 40, 60, 60, 60])

    assert "exercise-progress" in _ids(fitness_coaching(rising, 45, NOW))
    assert "exercise-decline" in _ids(fitness_coaching(falling, 45, NOW))
    assert "exercise-progress" not in _ids(fitness_coaching(rising[:6], 45, NOW))


def test_sleep_coaching_ranges() -> None:
    assert _ids(sleep_coaching(_nights([6, 6, 6], 2), NOW)) == [
        "sleep-duration-low",
        "sleep-quality-low",
    ]
    assert _ids(sleep_coaching(_nights([8, 8, 8], 4), NOW)) == [
        "sleep-duration-optimal",
        "sleep-quality-high",
    ]
    assert _ids(sleep_coaching(_nights([10, 10, 10], 3), NOW)) == ["sleep-duration-high"]


def test_combined_feed_is_sorted_by_priority() -> None:
    insights = generate_health_insights(
        nutrition=_days(3, calories=3000, protein=40, carbs=500, fat=30),
        exercise=_workouts([30, 30, 30]),
        sleep=_nights([6, 6, 6], 3),
        mood_count=2,
        weight=70,
        calorie_goal=2000,
        exercise_goal=30,
        now=NOW,
    )

    ids = _ids(insights)
    priorities = [insight.priority for insight in insights]
    assert priorities == sorted(priorities, key=["high", "medium", "low"].index)
    assert {
        "recovery-optimization",
        "pre-workout-nutrition",
        "mood-exercise-correlation",
    } <= set(ids)
    assert ids[0] == "calorie-imbalance"


def test_coaching_buckets_days_in_user_timezone(user_id) -> None:
    repository = InMemoryHealthDataRepository()
    health_data = HealthDataService(repository)
    profiles = ProfileService(InMemoryProfileRepository())
    service = CoachingService(health_data, StatsService(health_data), profiles)
    # 18:00 UTC is 08:00 the next day in Kiritimati (UTC+14).
    for offset in range(3):
        repository.add_entry(
            user_id,
            FoodEntry(
                name="Lunch",
                calories=2000,
                protein=120,
                meal="lunch",
                timestamp=datetime(2024, 6, 15, 18, tzinfo=UTC) - timedelta(days=offset),
            ),
        )

    local = _ids(service.generate(user_id, timezone_name="Pacific/Kiritimati", now=NOW))

    assert "not-enough-data" not in local
    assert "optimal-protein" in local
