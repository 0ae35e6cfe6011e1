"""Rule-based insight engine over the last week of entries."""

import logging
from collections import defaultdict
from dataclasses import dataclass
from datetime import UTC, date, datetime
from statistics import fmean, pstdev
from uuid import UUID

from health_tracker.domain.entries import (
    ML_PER_GLASS,
    ExerciseEntry,
    FoodEntry,
    HealthEntry,
    MoodEntry,
    SleepEntry,
    WaterEntry,
)
from health_tracker.domain.insights import Insight
from health_tracker.domain.models import UserProfile
from health_tracker.services.health_data import HealthDataService, HealthSummary
from health_tracker.services.profiles import ProfileService
from health_tracker.services.stats import CALORIES_PER_POUND

_logger = logging.getLogger(__name__)

WINDOW_DAYS = 7
DEFAULT_WEIGHT_KG = 70
DEFAULT_EXERCISE_GOAL = 45
EXCELLENT_PROTEIN_PER_KG = 1.6
LOW_PROTEIN_PER_KG = 1.0
RECOMMENDED_PROTEIN_PER_KG = 1.2
CONSISTENT_CALORIE_STDDEV = 200
LOW_HYDRATION_RATIO = 0.8
MIN_DEFICIT = 100
MAX_FORECAST_WEEKS = 52
CONSISTENCY_FORECAST_RATE = 0.6


@dataclass
class InsightService:
    """Generates insights for a user from the last seven days of data."""

    health_data: HealthDataService
    profiles: ProfileService

    def generate(self, user_id: UUID, now: datetime | None = None) -> list[Insight]:
        resolved_now = now or datetime.now(tz=UTC)
        profile = self.profiles.get_profile(user_id)
        summary = self.health_data.get_summary(
            user_id, days=WINDOW_DAYS, now=resolved_now
        )
        insights = generate_insights(summary, profile, resolved_now)
        _logger.info(
            "Generated insights",
            extra={"user_id": str(user_id), "count": len(insights)},
        )
        return insights


def generate_insights(
    summary: HealthSummary, profile: UserProfile, now: datetime
) -> list[Insight]:
    """Run every rule group in order and concatenate the results."""
    return [
        *nutrition_insights(summary.food, profile, now),
        *hydration_insights(summary.water, profile, now),
        *exercise_insights(summary.exercise, profile, now),
        *sleep_insights(summary.sleep, now),
        *mood_insights(summary.mood, now),
        *predictive_insights(summary, profile, now),
    ]


def nutrition_insights(
    entries: list[FoodEntry], profile: UserProfile, now: datetime
) -> list[Insight]:
    if not entries:
        return [
            Insight(
                id=_insight_id("nutrition-no-data", now),
                type="recommendation",
                category="nutrition",
                title="Start Tracking Your Nutrition",
                description=(
                    "Begin logging your meals to receive personalized nutrition "
                    "insights and recommendations."
                ),
                actionable=True,
                recommendation="Log your next meal to get started with nutrition tracking.",
                timestamp=now,
            )
        ]

    insights = []
    weight = profile.weight or DEFAULT_WEIGHT_KG
    avg_daily_protein = sum(entry.total_protein for entry in entries) / WINDOW_DAYS
    protein_per_kg = avg_daily_protein / weight
    if protein_per_kg >= EXCELLENT_PROTEIN_PER_KG:
        insights.append(
            Insight(
                id=_insight_id("nutrition-protein-excellent", now),
                type="positive",
                category="nutrition",
                title="Excellent Protein Intake",
                description=(
                    f"Your protein intake is outstanding at {protein_per_kg:.1f}g per "
                    "kg body weight. This supports muscle maintenance and recovery."
                ),
                priority="low",
                data_points={
                    "daily_average_g": round(avg_daily_protein),
                    "per_kg": round(protein_per_kg, 1),
                },
                timestamp=now,
            )
        )
    elif protein_per_kg < LOW_PROTEIN_PER_KG:
        insights.append(
            Insight(
                id=_insight_id("nutrition-protein-low", now),
                type="warning",
                category="nutrition",
                title="Low Protein Intake Detected",
                description=(
                    "Your protein intake is below recommended levels at "
                    f"{protein_per_kg:.1f}g per kg body weight."
                ),
                actionable=True,
                recommendation=(
                    "Consider adding lean proteins like chicken, fish, eggs, or "
                    "plant-based options to your meals."
                ),
                data_points={
                    "daily_average_g": round(avg_daily_protein),
                    "recommended_g": round(weight * RECOMMENDED_PROTEIN_PER_KG),
                },
                timestamp=now,
            )
        )

    daily_calories = _daily_totals(entries, lambda entry: entry.total_calories)
    if len(daily_calories) >= 3:
        values = list(daily_calories.values())
        if pstdev(values) < CONSISTENT_CALORIE_STDDEV:
            insights.append(
                Insight(
                    id=_insight_id("nutrition-consistency-good", now),
                    type="positive",
                    category="nutrition",
                    title="Consistent Calorie Intake",
                    description=(
                        "Your calorie intake has been very consistent, which helps "
                        "maintain steady energy levels and supports your goals."
                    ),
                    priority="low",
                    data_points={"average_calories": round(fmean(values))},
                    timestamp=now,
                )
            )
    return insights


def hydration_insights(
    entries: list[WaterEntry], profile: UserProfile, now: datetime
) -> list[Insight]:
    if not entries:
        return [
            Insight(
                id=_insight_id("hydration-no-data", now),
                type="recommendation",
                category="hydration",
                title="Start Tracking Your Hydration",
                description=(
                    "Begin logging your water intake to ensure you stay properly "
                    "hydrated throughout the day."
                ),
                actionable=True,
                recommendation=(
                    "Log your next glass of water to start tracking your hydration."
                ),
                timestamp=now,
            )
        ]

    daily_water = _daily_totals(entries, lambda entry: entry.amount)
    avg_glasses = round(fmean(daily_water.values()) / ML_PER_GLASS)
    goal_glasses = profile.goals.water or 8
    achievement = round(avg_glasses / goal_glasses * 100)
    recent = [daily_water[day] for day in sorted(daily_water)[-3:]]
    low_days = [
        amount
        for amount in recent
        if amount / ML_PER_GLASS < goal_glasses * LOW_HYDRATION_RATIO
    ]

    if len(low_days) >= 3:
        return [
            Insight(
                id=_insight_id("hydration-warning", now),
                type="warning",
                category="hydration",
                title="Hydration Below Target",
                description=(
                    f"Your water intake has been below target for {len(low_days)} "
                    "consecutive days. This may affect your energy levels and "
                    "overall health."
                ),
                priority="high",
                actionable=True,
                recommendation=(
                    "Set hourly reminders to drink water and keep a water bottle "
                    "visible throughout the day."
                ),
                data_points={
                    "average_glasses": avg_glasses,
                    "goal_glasses": goal_glasses,
                    "achievement_percent": achievement,
                },
                timestamp=now,
            )
        ]
    if avg_glasses >= goal_glasses:
        return [
            Insight(
                id=_insight_id("hydration-excellent", now),
                type="positive",
                category="hydration",
                title="Excellent Hydration",
                description=(
                    "You're consistently meeting your hydration goals with an "
                    f"average of {avg_glasses} glasses per day."
                ),
                priority="low",
                data_points={
                    "average_glasses": avg_glasses,
                    "achievement_percent": achievement,
                },
                timestamp=now,
            )
        ]
    return []


def exercise_insights(
    entries: list[ExerciseEntry], profile: UserProfile, now: datetime
) -> list[Insight]:
    if not entries:
        return [
            Insight(
                id=_insight_id("exercise-no-data", now),
                type="recommendation",
                category="fitness",
                title="Start Your Fitness Journey",
                description=(
                    "Begin tracking your workouts to monitor your progress and "
                    "receive personalized fitness insights."
                ),
                actionable=True,
                recommendation=(
                    "Log your next workout or physical activity to get started."
                ),
                timestamp=now,
            )
        ]

    insights = []
    total_minutes = sum(entry.duration for entry in entries)
    avg_daily_minutes = total_minutes / WINDOW_DAYS
    exercise_days = len(_distinct_days(entries))
    goal_minutes = profile.goals.exercise or DEFAULT_EXERCISE_GOAL

    if avg_daily_minutes >= goal_minutes:
        insights.append(
            Insight(
                id=_insight_id("exercise-excellent", now),
                type="positive",
                category="fitness",
                title="Outstanding Exercise Consistency",
                description=(
                    "You're exceeding your exercise goals with an average of "
                    f"{round(avg_daily_minutes)} minutes per day across "
                    f"{exercise_days} days."
                ),
                priority="low",
                data_points={
                    "weekly_minutes": total_minutes,
                    "active_days": exercise_days,
                    "goal_percent": round(avg_daily_minutes / goal_minutes * 100),
                },
                timestamp=now,
            )
        )
    elif exercise_days >= 3:
        insights.append(
            Insight(
                id=_insight_id("exercise-good-frequency", now),
                type="positive",
                category="fitness",
                title="Good Exercise Frequency",
                description=(
                    f"You've been active on {exercise_days} days this week. Consider "
                    "increasing duration to reach your daily goal."
                ),
                actionable=True,
                recommendation=(
                    f"Try to add {round(goal_minutes - avg_daily_minutes)} more "
                    "minutes to your daily routine."
                ),
                data_points={
                    "active_days": exercise_days,
                    "average_minutes": round(avg_daily_minutes),
                },
                timestamp=now,
            )
        )

    exercise_types = sorted({entry.type for entry in entries})
    if len(exercise_types) >= 3:
        insights.append(
            Insight(
                id=_insight_id("exercise-variety", now),
                type="positive",
                category="fitness",
                title="Great Exercise Variety",
                description=(
                    f"You're incorporating {len(exercise_types)} different types of "
                    "exercise, which is excellent for overall fitness."
                ),
                priority="low",
                data_points={"exercise_types": exercise_types},
                timestamp=now,
            )
        )
    return insights


def sleep_insights(entries: list[SleepEntry], now: datetime) -> list[Insight]:
    if not entries:
        return [
            Insight(
                id=_insight_id("sleep-no-data", now),
                type="recommendation",
                category="sleep",
                title="Track Your Sleep Quality",
                description=(
                    "Start logging your sleep to understand your rest patterns and "
                    "improve your recovery."
                ),
                actionable=True,
                recommendation="Log your sleep duration and quality for tonight.",
                timestamp=now,
            )
        ]

    insights = []
    avg_duration = fmean(entry.duration for entry in entries)
    avg_quality = fmean(entry.quality for entry in entries)
    if 7 <= avg_duration <= 9:
        insights.append(
            Insight(
                id=_insight_id("sleep-duration-good", now),
                type="positive",
                category="sleep",
                title="Optimal Sleep Duration",
                description=(
                    f"Your average sleep duration of {avg_duration:.1f} hours is "
                    "within the recommended range for adults."
                ),
                priority="low",
                data_points={
                    "average_hours": round(avg_duration, 1),
                    "average_quality": round(avg_quality, 1),
                },
                timestamp=now,
            )
        )
    elif avg_duration < 7:
        insights.append(
            Insight(
                id=_insight_id("sleep-duration-low", now),
                type="warning",
                category="sleep",
                title="Insufficient Sleep Duration",
                description=(
                    f"Your average sleep of {avg_duration:.1f} hours is below the "
                    "recommended 7-9 hours for adults."
                ),
                priority="high",
                actionable=True,
                recommendation=(
                    "Try to establish a consistent bedtime routine and aim for 7-9 "
                    "hours of sleep nightly."
                ),
                data_points={"average_hours": round(avg_duration, 1)},
                timestamp=now,
            )
        )

    if avg_quality >= 4:
        insights.append(
            Insight(
                id=_insight_id("sleep-quality-good", now),
                type="positive",
                category="sleep",
                title="High Sleep Quality",
                description=(
                    f"Your sleep quality rating of {avg_quality:.1f}/5 indicates "
                    "you're getting restorative rest."
                ),
                priority="low",
                timestamp=now,
            )
        )
    return insights


def mood_insights(entries: list[MoodEntry], now: datetime) -> list[Insight]:
    """Mood rules; entries are expected newest first."""
    if not entries:
        return [
            Insight(
                id=_insight_id("mood-no-data", now),
                type="recommendation",
                category="mood",
                title="Track Your Mood",
                description=(
                    "Start logging your daily mood to identify patterns and factors "
                    "that affect your well-being."
                ),
                actionable=True,
                recommendation="Log your current mood and any factors influencing it.",
                timestamp=now,
            )
        ]

    insights = []
    avg_mood = fmean(entry.rating for entry in entries)
    recent = [entry.rating for entry in entries[:3]]
    trend = (recent[0] - recent[-1]) / (len(recent) - 1) if len(recent) >= 3 else 0

    if avg_mood >= 7:
        insights.append(
            Insight(
                id=_insight_id("mood-positive", now),
                type="positive",
                category="mood",
                title="Positive Mood Trend",
                description=(
                    f"Your average mood rating of {avg_mood:.1f}/10 indicates you're "
                    "feeling good overall."
                ),
                priority="low",
                data_points={
                    "average_mood": round(avg_mood, 1),
                    "entries": len(entries),
                },
                timestamp=now,
            )
        )
    elif avg_mood < 5:
        insights.append(
            Insight(
                id=_insight_id("mood-concern", now),
                type="warning",
                category="mood",
                title="Mood Monitoring",
                description=(
                    "Your recent mood ratings suggest you might be experiencing some "
                    "challenges. Consider what factors might be affecting your "
                    "well-being."
                ),
                actionable=True,
                recommendation=(
                    "Consider talking to a healthcare provider if low mood persists, "
                    "and focus on activities that typically improve your mood."
                ),
                data_points={"average_mood": round(avg_mood, 1)},
                timestamp=now,
            )
        )

    if trend > 0.5:
        insights.append(
            Insight(
                id=_insight_id("mood-improving", now),
                type="positive",
                category="mood",
                title="Improving Mood Trend",
                description=(
                    "Your mood has been trending upward recently, which is a great sign!"
                ),
                priority="low",
                timestamp=now,
            )
        )
    return insights


def predictive_insights(
    summary: HealthSummary, profile: UserProfile, now: datetime
) -> list[Insight]:
    insights = []
    goal_weight = profile.goals.weight
    if len(summary.food) >= 5 and goal_weight and profile.weight:
        daily_calories = _daily_totals(summary.food, lambda entry: entry.total_calories)
        avg_daily_calories = fmean(daily_calories.values())
        deficit = (profile.goals.calories or 2000) - avg_daily_calories
        if abs(deficit) > MIN_DEFICIT:
            weekly_change = deficit * 7 / CALORIES_PER_POUND
            weeks = (profile.weight - goal_weight) / weekly_change
            if 0 < weeks < MAX_FORECAST_WEEKS:
                insights.append(
                    Insight(
                        id=_insight_id("prediction-weight-goal", now),
                        type="prediction",
                        category="general",
                        title="Weight Goal Forecast",
                        description=(
                            "Based on your current calorie intake trend, you're "
                            "projected to reach your weight goal in approximately "
                            f"{round(weeks)} weeks."
                        ),
                        actionable=True,
                        recommendation=(
                            "Continue your current approach for steady progress "
                            "toward your goal."
                        ),
                        data_points={
                            "current_weight": profile.weight,
                            "goal_weight": goal_weight,
                            "average_daily_calories": round(avg_daily_calories),
                            "projected_weeks": round(weeks),
                        },
                        timestamp=now,
                    )
                )

    if len(summary.exercise) >= 3:
        exercise_days = len(_distinct_days(summary.exercise))
        rate = exercise_days / WINDOW_DAYS
        if rate >= CONSISTENCY_FORECAST_RATE:
            insights.append(
                Insight(
                    id=_insight_id("prediction-exercise-consistency", now),
                    type="prediction",
                    category="fitness",
                    title="Exercise Consistency Forecast",
                    description=(
                        "With your current exercise frequency of "
                        f"{exercise_days} days per week, you're building a strong "
                        "foundation for long-term fitness success."
                    ),
                    data_points={
                        "weekly_consistency_percent": round(rate * 100),
                        "active_days": exercise_days,
                    },
                    timestamp=now,
                )
            )
    return insights


def _insight_id(slug: str, now: datetime) -> str:
    return f"{slug}-{int(now.timestamp() * 1000)}"


def _distinct_days(entries: list[HealthEntry]) -> set[date]:
    return {entry.logged_at.astimezone(UTC).date() for entry in entries}


def _daily_totals(entries, value) -> dict[date, float]:
    totals: dict[date, float] = defaultdict(float)
    for entry in entries:
        totals[entry.logged_at.astimezone(UTC).date()] += value(entry)
    return dict(totals)
