"""Statistics over logged health entries."""

import math
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from statistics import StatisticsError, correlation, fmean
from uuid import UUID
from zoneinfo import ZoneInfo

from health_tracker.domain.entries import ML_PER_GLASS, HealthEntry, SleepEntry
from health_tracker.domain.insights import HealthCorrelation, correlation_strength
from health_tracker.domain.models import UserProfile
from health_tracker.domain.stats import DailyStats, Predictions, Trends, WaterProgress
from health_tracker.services.health_data import HealthDataService, HealthSummary

CALORIE_TOLERANCE = 200
CALORIES_PER_POUND = 3500
TREND_WINDOW = 7
MIN_CORRELATION_DAYS = 3
CORRELATION_PAIRS = (
    ("exercise_minutes", "sleep_quality"),
    ("exercise_minutes", "mood"),
    ("sleep_hours", "mood"),
    ("water_ml", "mood"),
)


@dataclass
class StatsService:
    """Service for computing user stats by timezone."""

    health_data: HealthDataService

    def get_daily(  # noqa: PLR0913
        self,
        user_id: UUID,
        days: int = 7,
        timezone_name: str = "UTC",
        today: date | None = None,
        now: datetime | None = None,
    ) -> list[DailyStats]:
        """Return per-day totals for the last N days, oldest first.

        ``today`` defaults to the date of ``now`` in the user's timezone.
        """
        tz = ZoneInfo(timezone_name)
        resolved_now = now or datetime.now(tz=UTC)
        resolved_today = today or resolved_now.astimezone(tz).date()
        summary = self.health_data.get_summary(user_id, days=days + 1, now=resolved_now)
        return build_daily_stats(summary, days, resolved_today, tz)

    def get_today(
        self,
        user_id: UUID,
        timezone_name: str = "UTC",
        today: date | None = None,
        now: datetime | None = None,
    ) -> DailyStats:
        """Return today's totals in the user's timezone."""
        return self.get_daily(user_id, 1, timezone_name, today, now)[-1]

    def get_trends(
        self,
        user_id: UUID,
        timezone_name: str = "UTC",
        today: date | None = None,
        now: datetime | None = None,
    ) -> Trends:
        """Return week-over-week changes in percent."""
        daily = self.get_daily(user_id, TREND_WINDOW * 2, timezone_name, today, now)
        return Trends(
            calories=calculate_trend([day.calories for day in daily]),
            water=calculate_trend([day.water_ml for day in daily]),
            exercise=calculate_trend([day.exercise_minutes for day in daily]),
            sleep=calculate_trend([day.sleep_hours or 0 for day in daily]),
            mood=calculate_trend([day.mood or 0 for day in daily]),
        )

    def get_streak(
        self, user_id: UUID, timezone_name: str = "UTC", today: date | None = None
    ) -> int:
        """Return the current consecutive-day logging streak."""
        tz = ZoneInfo(timezone_name)
        resolved_today = today or datetime.now(tz=tz).date()
        summary = self.health_data.get_summary(user_id, days=None)
        return current_streak(active_days(summary, tz), resolved_today)


def entry_day(entry: HealthEntry, tz: ZoneInfo) -> date:
    """Return the calendar day an entry belongs to."""
    if isinstance(entry, SleepEntry):
        return entry.sleep_date
    return entry.logged_at.astimezone(tz).date()


def active_days(summary: HealthSummary, tz: ZoneInfo) -> set[date]:
    """Return the set of days with at least one entry."""
    entries: list[HealthEntry] = [
        *summary.food,
        *summary.water,
        *summary.exercise,
        *summary.sleep,
        *summary.mood,
    ]
    return {entry_day(entry, tz) for entry in entries}


def build_daily_stats(
    summary: HealthSummary, days: int, today: date, tz: ZoneInfo
) -> list[DailyStats]:
    """Bucket entries into per-day totals, oldest day first."""
    buckets: dict[date, dict[str, object]] = {}
    for offset in range(days - 1, -1, -1):
        buckets[today - timedelta(days=offset)] = {
            "calories": 0.0,
            "protein": 0.0,
            "carbs": 0.0,
            "fat": 0.0,
            "water_ml": 0.0,
            "exercise_minutes": 0.0,
            "calories_burned": 0.0,
            "sleep": [],
            "quality": [],
            "mood": [],
            "food_entries": 0,
            "exercise_entries": 0,
        }

    for food in summary.food:
        bucket = buckets.get(entry_day(food, tz))
        if bucket is None:
            continue
        bucket["calories"] += food.total_calories
        bucket["protein"] += food.total_protein
        bucket["carbs"] += food.total_carbs
        bucket["fat"] += food.total_fat
        bucket["food_entries"] += 1
    for water in summary.water:
        bucket = buckets.get(entry_day(water, tz))
        if bucket is not None:
            bucket["water_ml"] += water.amount
    for exercise in summary.exercise:
        bucket = buckets.get(entry_day(exercise, tz))
        if bucket is None:
            continue
        bucket["exercise_minutes"] += exercise.duration
        bucket["calories_burned"] += exercise.calories
        bucket["exercise_entries"] += 1
    for sleep in summary.sleep:
        bucket = buckets.get(entry_day(sleep, tz))
        if bucket is not None:
            bucket["sleep"].append(sleep.duration)
            bucket["quality"].append(sleep.quality)
    for mood in summary.mood:
        bucket = buckets.get(entry_day(mood, tz))
        if bucket is not None:
            bucket["mood"].append(mood.rating)

    return [
        DailyStats(
            day=day,
            calories=bucket["calories"],
            protein=bucket["protein"],
            carbs=bucket["carbs"],
            fat=bucket["fat"],
            water_ml=bucket["water_ml"],
            exercise_minutes=bucket["exercise_minutes"],
            calories_burned=bucket["calories_burned"],
            sleep_hours=sum(bucket["sleep"]) if bucket["sleep"] else None,
            sleep_quality=fmean(bucket["quality"]) if bucket["quality"] else None,
            mood=fmean(bucket["mood"]) if bucket["mood"] else None,
            food_entries=bucket["food_entries"],
            exercise_entries=bucket["exercise_entries"],
        )
        for day, bucket in buckets.items()
    ]


def calculate_trend(values: list[float]) -> float:
    """Percent change of the last week's average over the week before."""
    recent = values[-TREND_WINDOW:]
    previous = values[-TREND_WINDOW * 2 : -TREND_WINDOW]
    if not recent or not previous:
        return 0.0
    previous_avg = fmean(previous)
    if previous_avg == 0:
        return 0.0
    return (fmean(recent) - previous_avg) / previous_avg * 100


def weeks_to_weight_goal(
    weight: float | None, goal_weight: float | None, daily_deficit: float
) -> int | None:
    """Weeks needed to reach the goal weight at a steady daily calorie deficit."""
    if weight is None or goal_weight is None or weight <= goal_weight:
        return None
    weekly_loss = daily_deficit * 7 / CALORIES_PER_POUND
    if weekly_loss <= 0:
        return None
    return math.ceil((weight - goal_weight) / weekly_loss)


def build_predictions(profile: UserProfile, daily: list[DailyStats]) -> Predictions:
    """Derive goal forecasts from daily totals."""
    goals = profile.goals
    logged = [day for day in daily if day.food_entries]
    weeks = None
    consistency = 0.0
    if logged:
        avg_calories = fmean(day.calories for day in logged)
        weeks = weeks_to_weight_goal(
            profile.weight, goals.weight, goals.calories - avg_calories
        )
        within = [
            day
            for day in logged
            if abs(day.calories - goals.calories) < CALORIE_TOLERANCE
        ]
        consistency = round(len(within) / len(logged) * 100, 1)
    exercise_days = sum(1 for day in daily if day.exercise_minutes >= goals.exercise)
    return Predictions(
        weight_goal_weeks=weeks,
        calorie_consistency=consistency,
        exercise_streak=exercise_days,
    )


def current_streak(days: set[date], today: date) -> int:
    """Count consecutive active days ending today, or yesterday if today is empty."""
    cursor = today if today in days else today - timedelta(days=1)
    streak = 0
    while cursor in days:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def longest_run(days: set[date]) -> int:
    """Return the length of the longest run of consecutive days."""
    best = 0
    for day in days:
        if day - timedelta(days=1) in days:
            continue
        length = 1
        while day + timedelta(days=length) in days:
            length += 1
        best = max(best, length)
    return best


def water_progress(total_ml: float, goal_glasses: int) -> WaterProgress:
    """Return progress toward the daily water goal."""
    goal_ml = goal_glasses * ML_PER_GLASS
    percentage = min(total_ml / goal_ml * 100, 100.0) if goal_ml > 0 else 0.0
    return WaterProgress(
        total_ml=total_ml,
        glasses=int(total_ml // ML_PER_GLASS),
        goal_glasses=goal_glasses,
        remaining_ml=max(0.0, goal_ml - total_ml),
        percentage=round(percentage, 1),
    )


def calculate_correlations(daily: list[DailyStats]) -> list[HealthCorrelation]:
    """Pearson correlations between daily metrics over days that track both."""
    correlations = []
    for metric_a, metric_b in CORRELATION_PAIRS:
        pairs = [
            (getattr(day, metric_a), getattr(day, metric_b))
            for day in daily
            if getattr(day, metric_a) is not None and getattr(day, metric_b) is not None
        ]
        if len(pairs) < MIN_CORRELATION_DAYS:
            continue
        values_a, values_b = zip(*pairs, strict=True)
        try:
            coefficient = correlation(values_a, values_b)
        except StatisticsError:
            # A constant series has no defined correlation.
            continue
        correlations.append(
            HealthCorrelation(
                metric_a=metric_a,
                metric_b=metric_b,
                coefficient=round(coefficient, 2),
                days=len(pairs),
                strength=correlation_strength(coefficient),
            )
        )
    return correlations
