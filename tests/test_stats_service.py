"""Tests for stats aggregation."""

from datetime import UTC, date, datetime, timedelta
from uuid import uuid4
from zoneinfo import ZoneInfo

import pytest

from health_tracker.domain.entries import ExerciseEntry, FoodEntry, SleepEntry, WaterEntry
from health_tracker.domain.models import Goals, UserProfile
from health_tracker.domain.stats import DailyStats
from health_tracker.services.health_data import HealthDataService, HealthSummary
from health_tracker.services.stats import (
    StatsService,
    build_daily_stats,
    build_predictions,
    calculate_correlations,
    calculate_trend,
    current_streak,
    longest_run,
    water_progress,
    weeks_to_weight_goal,
)
from tests.conftest import InMemoryHealthDataRepository


def test_daily_stats_bucket_by_user_timezone() -> None:
    tz = ZoneInfo("America/New_York")
    summary = HealthSummary(
        food=[
            # 02:00 UTC on the 2nd is still the 1st in New York.
            FoodEntry(
                name="Late snack",
                calories=200,
                protein=4,
                quantity=2,
                meal="snack",
                timestamp=datetime(2024, 3, 2, 2, tzinfo=UTC),
            )
        ],
        water=[WaterEntry(amount=500, timestamp=datetime(2024, 3, 2, 15, tzinfo=UTC))],
    )

    daily = build_daily_stats(summary, 2, date(2024, 3, 2), tz)

    assert [day.day for day in daily] == [date(2024, 3, 1), date(2024, 3, 2)]
    assert daily[0].calories == 400
    assert daily[0].protein == 8
    assert daily[0].food_entries == 1
    assert daily[1].water_ml == 500
    assert daily[1].glasses == 2
    assert daily[1].calories == 0


def test_sleep_is_bucketed_by_sleep_date() -> None:
    summary = HealthSummary(
        sleep=[
            SleepEntry(
                sleep_date=date(2024, 3, 1),
                bedtime="23:00",
                wake_time="07:00",
                duration=8,
                quality=4,
            )
        ]
    )

    daily = build_daily_stats(summary, 2, date(2024, 3, 2), ZoneInfo("UTC"))

    assert daily[0].sleep_hours == 8
    assert daily[0].sleep_quality == 4
    assert daily[1].sleep_hours is None


def test_calculate_trend_handles_empty_and_zero_baseline() -> None:
    assert calculate_trend([]) == 0.0
    assert calculate_trend([0] * 7 + [100] * 7) == 0.0
    assert calculate_trend([100] * 7 + [150] * 7) == pytest.approx(50.0)


def test_current_streak_allows_empty_today() -> None:
    today = date(2024, 3, 10)
    days = {date(2024, 3, 9), date(2024, 3, 8), date(2024, 3, 6)}

    assert current_streak(days, today) == 2
    assert current_streak(days | {today}, today) == 3
    assert current_streak(set(), today) == 0


def test_longest_run_finds_best_sequence() -> None:
    days = {date(2024, 1, day) for day in (1, 2, 3, 10, 11)}

    assert longest_run(days) == 3
    assert longest_run(set()) == 0


def test_weeks_to_weight_goal() -> None:
    assert weeks_to_weight_goal(80, 75, 500) == 5
    assert weeks_to_weight_goal(75, 80, 500) is None
    assert weeks_to_weight_goal(80, 75, 0) is None
    assert weeks_to_weight_goal(None, 75, 500) is None


def test_build_predictions_uses_logged_days_only() -> None:
    profile = UserProfile(
        id=uuid4(),
        name="Sam",
        weight=80,
        goals=Goals(weight=75, calories=2000, exercise=30),
    )
    daily = [
        DailyStats(day=date(2024, 3, 1), calories=1500, food_entries=2, exercise_minutes=40),
        DailyStats(day=date(2024, 3, 2), calories=1900, food_entries=3),
        DailyStats(day=date(2024, 3, 3)),
    ]

    predictions = build_predictions(profile, daily)

    assert predictions.calorie_consistency == 50.0
    # Average intake 1700 gives a 300 kcal daily deficit.
    assert predictions.weight_goal_weeks == 9
    assert predictions.exercise_streak == 1


def test_water_progress_caps_percentage() -> None:
    progress = water_progress(2500, 8)

    assert progress.glasses == 10
    assert progress.percentage == 100.0
    assert progress.remaining_ml == 0
    assert water_progress(0, 0).percentage == 0.0


def test_stats_service_today_and_streak(user_id) -> None:
    repository = InMemoryHealthDataRepository()
    service = StatsService(HealthDataService(repository))
    now = datetime.now(tz=UTC)
    repository.add_entry(
        user_id,
        ExerciseEntry(name="Run", type="cardio", duration=30, calories=300, timestamp=now),
    )
    repository.add_entry(user_id, WaterEntry(amount=250, timestamp=now - timedelta(days=1)))

    today = service.get_today(user_id)
    streak = service.get_streak(user_id)

    assert today.exercise_minutes == 30
    assert today.calories_burned == 300
    assert streak == 2


def test_stats_service_today_follows_injected_clock(user_id) -> None:
    repository = InMemoryHealthDataRepository()
    service = StatsService(HealthDataService(repository))
    now = datetime(2024, 6, 15, 20, tzinfo=UTC)
    repository.add_entry(
        user_id,
        FoodEntry(
            name="Breakfast",
            calories=400,
            meal="breakfast",
            timestamp=datetime(2024, 6, 15, 19, tzinfo=UTC),
        ),
    )

    utc_today = service.get_today(user_id, now=now)
    local_today = service.get_today(user_id, "Pacific/Kiritimati", now=now)

    assert utc_today.day == date(2024, 6, 15)
    assert local_today.day == date(2024, 6, 16)
    assert local_today.calories == 400


def test_correlations_over_days_tracking_both_metrics() -> None:
    daily = [
        DailyStats(
            day=date(2024, 6, 1) + timedelta(days=offset),
            exercise_minutes=minutes,
            sleep_quality=quality,
            sleep_hours=7,
            mood=mood,
        )
        for offset, (minutes, quality, mood) in enumerate(
            [(0, 2, 6), (30, 3, 4), (60, 4, 8), (90, 5, 5)]
        )
    ]
    daily.append(DailyStats(day=date(2024, 6, 5), exercise_minutes=120))

    correlations = {
        (item.metric_a, item.metric_b): item for item in calculate_correlations(daily)
    }

    exercise_sleep = correlations[("exercise_minutes", "sleep_quality")]
    assert exercise_sleep.coefficient == 1.0
    assert exercise_sleep.strength == "strong"
    assert exercise_sleep.days == 4
    assert correlations[("exercise_minutes", "mood")].strength == "weak"
    # Sleep hours and water never vary, so they have no correlation.
    assert ("sleep_hours", "mood") not in correlations
    assert ("water_ml", "mood") not in correlations


def test_correlations_need_three_days() -> None:
    daily = [
        DailyStats(day=date(2024, 6, 1), exercise_minutes=10, sleep_quality=2),
        DailyStats(day=date(2024, 6, 2), exercise_minutes=40, sleep_quality=4),
    ]

    assert calculate_correlations(daily) == []
