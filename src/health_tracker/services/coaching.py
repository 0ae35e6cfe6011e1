"""Coaching insights computed over daily aggregates."""

from collections import Counter
from dataclasses import dataclass
from datetime import UTC, datetime
from statistics import fmean
from uuid import UUID

from health_tracker.domain.entries import ExerciseEntry, SleepEntry
from health_tracker.domain.insights import Insight, sort_by_priority
from health_tracker.domain.stats import DailyStats
from health_tracker.services.health_data import HealthDataService
from health_tracker.services.profiles import ProfileService
from health_tracker.services.stats import StatsService

MIN_ENTRIES = 3
PROTEIN_PER_KG = 1.6
DEFAULT_WEIGHT_KG = 70
COACHING_WINDOW_DAYS = 14


@dataclass
class CoachingService:
    """Builds the combined coaching feed for a user."""

    health_data: HealthDataService
    stats: StatsService
    profiles: ProfileService

    def generate(
        self,
        user_id: UUID,
        days: int = COACHING_WINDOW_DAYS,
        timezone_name: str = "UTC",
        now: datetime | None = None,
    ) -> list[Insight]:
        resolved_now = now or datetime.now(tz=UTC)
        profile = self.profiles.get_profile(user_id)
        daily = self.stats.get_daily(user_id, days, timezone_name, now=resolved_now)
        summary = self.health_data.get_summary(user_id, days=days, now=resolved_now)
        goals = profile.goals
        return generate_health_insights(
            nutrition=[day for day in daily if day.food_entries],
            exercise=summary.exercise,
            sleep=summary.sleep,
            mood_count=len(summary.mood),
            weight=profile.weight or DEFAULT_WEIGHT_KG,
            calorie_goal=goals.calories,
            exercise_goal=goals.exercise,
            now=resolved_now,
        )


def nutrition_coaching(
    days: list[DailyStats], weight: float, calorie_goal: float, now: datetime
) -> list[Insight]:
    """Insights over days that have food logged."""
    if len(days) < MIN_ENTRIES:
        return [
            Insight(
                id="not-enough-data",
                type="recommendation",
                category="nutrition",
                title="Keep Logging Your Meals",
                description=(
                    "Continue tracking your nutrition to receive personalized insights."
                ),
                actionable=True,
                recommendation="Log a meal",
                timestamp=now,
            )
        ]

    insights = []
    avg_calories = fmean(day.calories for day in days)
    avg_protein = fmean(day.protein for day in days)
    avg_carbs = fmean(day.carbs for day in days)
    avg_fat = fmean(day.fat for day in days)

    recommended_protein = weight * PROTEIN_PER_KG
    if avg_protein < recommended_protein * 0.8:
        insights.append(
            Insight(
                id="low-protein",
                type="recommendation",
                category="nutrition",
                title="Increase Protein Intake",
                description=(
                    f"Your average protein intake ({round(avg_protein)}g) is below "
                    "the recommended amount for your weight. Consider adding more "
                    "lean protein sources to support muscle recovery and maintenance."
                ),
                actionable=True,
                recommendation="View protein-rich foods",
                data_points={"average_protein_g": round(avg_protein)},
                timestamp=now,
            )
        )
    elif avg_protein >= recommended_protein:
        insights.append(
            Insight(
                id="optimal-protein",
                type="achievement",
                category="nutrition",
                title="Optimal Protein Intake",
                description=(
                    "Great job maintaining adequate protein intake "
                    f"({round(avg_protein)}g daily). This supports muscle recovery "
                    "and maintenance."
                ),
                priority="low",
                data_points={"average_protein_g": round(avg_protein)},
                timestamp=now,
            )
        )

    if calorie_goal > 0:
        deviation = abs(avg_calories - calorie_goal) / calorie_goal
        if deviation > 0.2:
            direction = "above" if avg_calories > calorie_goal else "below"
            insights.append(
                Insight(
                    id="calorie-imbalance",
                    type="warning",
                    category="nutrition",
                    title="Calorie Target Adjustment Needed",
                    description=(
                        f"Your average calorie intake ({round(avg_calories)}) is "
                        f"significantly {direction} your target of "
                        f"{calorie_goal:g}. This may affect your weight management "
                        "goals."
                    ),
                    priority="high",
                    actionable=True,
                    recommendation="Adjust calorie targets",
                    data_points={"average_calories": round(avg_calories)},
                    timestamp=now,
                )
            )
        elif deviation < 0.1:
            insights.append(
                Insight(
                    id="calorie-on-target",
                    type="achievement",
                    category="nutrition",
                    title="Consistent Calorie Management",
                    description=(
                        "You're consistently staying close to your calorie target of "
                        f"{calorie_goal:g}, which is excellent for your goals."
                    ),
                    priority="low",
                    timestamp=now,
                )
            )

    if avg_calories > 0:
        carb_share = avg_carbs * 4 / avg_calories
        fat_share = avg_fat * 9 / avg_calories
        if carb_share > 0.6:
            insights.append(
                Insight(
                    id="high-carb",
                    type="recommendation",
                    category="nutrition",
                    title="High Carbohydrate Intake",
                    description=(
                        "Your diet is very high in carbohydrates "
                        f"({round(carb_share * 100)}% of calories). Consider "
                        "balancing with more protein and healthy fats."
                    ),
                    actionable=True,
                    recommendation="View balanced meal plans",
                    timestamp=now,
                )
            )
        if fat_share < 0.2:
            insights.append(
                Insight(
                    id="low-fat",
                    type="recommendation",
                    category="nutrition",
                    title="Low Fat Intake",
                    description=(
                        f"Your fat intake ({round(fat_share * 100)}% of calories) may "
                        "be too low for optimal hormone production and nutrient "
                        "absorption. Consider adding healthy fats like avocados, "
                        "nuts, and olive oil."
                    ),
                    actionable=True,
                    recommendation="View healthy fat sources",
                    timestamp=now,
                )
            )
    return insights


def fitness_coaching(
    entries: list[ExerciseEntry], exercise_goal: float, now: datetime
) -> list[Insight]:
    """Insights over exercise entries, newest first."""
    if len(entries) < MIN_ENTRIES:
        return [
            Insight(
                id="not-enough-exercise-data",
                type="recommendation",
                category="fitness",
                title="Track Your Workouts",
                description=(
                    "Log your exercise activities to receive personalized fitness "
                    "insights."
                ),
                actionable=True,
                recommendation="Log an exercise",
                timestamp=now,
            )
        ]

    insights = []
    count = len(entries)
    avg_duration = fmean(entry.duration for entry in entries)
    active_days = len({entry.logged_at.date() for entry in entries})
    top_type, top_count = Counter(entry.type for entry in entries).most_common(1)[0]

    if top_count > count * 0.7:
        share = "Almost all" if top_count > count * 0.9 else "Most"
        insights.append(
            Insight(
                id="exercise-variety",
                type="recommendation",
                category="fitness",
                title="Increase Exercise Variety",
                description=(
                    f"{share} of your workouts are {top_type} exercises. Consider "
                    "adding variety for balanced fitness and to prevent plateaus."
                ),
                actionable=True,
                recommendation="Explore workout types",
                timestamp=now,
            )
        )

    if active_days < count * 0.4:
        insights.append(
            Insight(
                id="exercise-consistency",
                type="recommendation",
                category="fitness",
                title="Improve Exercise Consistency",
                description=(
                    "You're exercising sporadically. A more consistent schedule, even "
                    "with shorter sessions, may improve results."
                ),
                priority="high",
                actionable=True,
                recommendation="View exercise planner",
                timestamp=now,
            )
        )
    elif active_days > count * 0.8:
        insights.append(
            Insight(
                id="exercise-consistency-good",
                type="achievement",
                category="fitness",
                title="Excellent Exercise Consistency",
                description=(
                    "You've been consistently active, which is great for your "
                    "fitness progress and overall health."
                ),
                priority="low",
                timestamp=now,
            )
        )

    if avg_duration < exercise_goal * 0.7:
        insights.append(
            Insight(
                id="exercise-duration",
                type="warning",
                category="fitness",
                title="Below Exercise Duration Goal",
                description=(
                    f"Your average exercise duration ({round(avg_duration)} min) is "
                    f"below your goal of {exercise_goal:g} min. Consider gradually "
                    "increasing your workout time."
                ),
                actionable=True,
                recommendation="View shorter workout options",
                timestamp=now,
            )
        )
    elif avg_duration > exercise_goal * 1.5:
        insights.append(
            Insight(
                id="exercise-overtraining",
                type="warning",
                category="fitness",
                title="Potential Overtraining",
                description=(
                    f"Your average exercise duration ({round(avg_duration)} min) is "
                    "significantly above your goal. Ensure you're allowing adequate "
                    "recovery time."
                ),
                actionable=True,
                recommendation="Learn about recovery",
                timestamp=now,
            )
        )

    high_intensity = sum(1 for entry in entries if entry.intensity == "high")
    if high_intensity > count * 0.7:
        insights.append(
            Insight(
                id="high-intensity-balance",
                type="recommendation",
                category="fitness",
                title="Balance Workout Intensity",
                description=(
                    "Most of your workouts are high intensity. Consider adding low "
                    "and moderate intensity sessions for better recovery and "
                    "sustainability."
                ),
                actionable=True,
                recommendation="View balanced workout plan",
                timestamp=now,
            )
        )

    if count >= 7:
        recent_avg = fmean(entry.duration for entry in entries[:3])
        earlier_avg = fmean(entry.duration for entry in entries[-3:])
        trend = (recent_avg - earlier_avg) / earlier_avg
        if trend > 0.2:
            insights.append(
                Insight(
                    id="exercise-progress",
                    type="prediction",
                    category="fitness",
                    title="Positive Fitness Trajectory",
                    description=(
                        "Your exercise duration is trending upward, which should lead "
                        "to improved fitness outcomes if maintained."
                    ),
                    priority="low",
                    timestamp=now,
                )
            )
        elif trend < -0.2:
            insights.append(
                Insight(
                    id="exercise-decline",
                    type="warning",
                    category="fitness",
                    title="Declining Exercise Trend",
                    description=(
                        "Your exercise duration has been decreasing. Consider "
                        "adjusting your schedule or finding more enjoyable activities."
                    ),
                    priority="high",
                    actionable=True,
                    recommendation="Explore new workouts",
                    timestamp=now,
                )
            )
    return insights


def sleep_coaching(entries: list[SleepEntry], now: datetime) -> list[Insight]:
    if len(entries) < MIN_ENTRIES:
        return [
            Insight(
                id="not-enough-sleep-data",
                type="recommendation",
                category="sleep",
                title="Track Your Sleep",
                description="Log your sleep patterns to receive personalized sleep insights.",
                actionable=True,
                recommendation="Log sleep",
                timestamp=now,
            )
        ]

    insights = []
    avg_duration = fmean(entry.duration for entry in entries)
    avg_quality = fmean(entry.quality for entry in entries)

    if avg_duration < 7:
        insights.append(
            Insight(
                id="sleep-duration-low",
                type="warning",
                category="sleep",
                title="Insufficient Sleep",
                description=(
                    f"Your average sleep duration ({avg_duration:.1f} hours) is below "
                    "the recommended 7-9 hours for adults. This may affect recovery, "
                    "cognitive function, and overall health."
                ),
                priority="high",
                actionable=True,
                recommendation="View sleep improvement tips",
                timestamp=now,
            )
        )
    elif avg_duration > 9:
        insights.append(
            Insight(
                id="sleep-duration-high",
                type="recommendation",
                category="sleep",
                title="Extended Sleep Duration",
                description=(
                    f"Your average sleep duration ({avg_duration:.1f} hours) is above "
                    "typical recommendations. While individual needs vary, "
                    "consistently long sleep may indicate other health factors worth "
                    "discussing with a healthcare provider."
                ),
                actionable=True,
                recommendation="Learn about optimal sleep",
                timestamp=now,
            )
        )
    else:
        insights.append(
            Insight(
                id="sleep-duration-optimal",
                type="achievement",
                category="sleep",
                title="Optimal Sleep Duration",
                description=(
                    f"Your average sleep duration ({avg_duration:.1f} hours) is within "
                    "the recommended range for adults."
                ),
                priority="low",
                timestamp=now,
            )
        )

    if avg_quality < 3:
        insights.append(
            Insight(
                id="sleep-quality-low",
                type="warning",
                category="sleep",
                title="Poor Sleep Quality",
                description=(
                    "Your reported sleep quality is consistently low. Consider factors "
                    "that may be affecting your sleep quality, such as environment, "
                    "stress, or screen time before bed."
                ),
                priority="high",
                actionable=True,
                recommendation="View sleep quality tips",
                timestamp=now,
            )
        )
    elif avg_quality >= 4:
        insights.append(
            Insight(
                id="sleep-quality-high",
                type="achievement",
                category="sleep",
                title="Excellent Sleep Quality",
                description=(
                    "You're consistently reporting high sleep quality, which is "
                    "excellent for recovery and overall health."
                ),
                priority="low",
                timestamp=now,
            )
        )
    return insights


def generate_health_insights(  # noqa: PLR0913
    nutrition: list[DailyStats],
    exercise: list[ExerciseEntry],
    sleep: list[SleepEntry],
    mood_count: int,
    weight: float,
    calorie_goal: float,
    exercise_goal: float,
    now: datetime,
) -> list[Insight]:
    """Combine every generator with the cross-category tips, highest priority first."""
    insights = [
        *nutrition_coaching(nutrition, weight, calorie_goal, now),
        *fitness_coaching(exercise, exercise_goal, now),
        *sleep_coaching(sleep, now),
    ]
    if sleep and exercise:
        insights.append(
            Insight(
                id="recovery-optimization",
                type="recommendation",
                category="fitness",
                title="Recovery Optimization",
                description=(
                    "Consider scheduling your high-intensity workouts on days "
                    "following your best sleep quality for optimal performance and "
                    "results."
                ),
                actionable=True,
                recommendation="View recovery plan",
                timestamp=now,
            )
        )
    if nutrition and exercise:
        insights.append(
            Insight(
                id="pre-workout-nutrition",
                type="recommendation",
                category="nutrition",
                title="Pre-Workout Nutrition",
                description=(
                    "For optimal performance, try consuming a balanced meal with carbs "
                    "and protein 2-3 hours before your workout, or a small carb-rich "
                    "snack 30-60 minutes before."
                ),
                actionable=True,
                recommendation="View pre-workout meals",
                timestamp=now,
            )
        )
    if mood_count and exercise:
        insights.append(
            Insight(
                id="mood-exercise-correlation",
                type="prediction",
                category="mood",
                title="Exercise-Mood Connection",
                description=(
                    "Your mood ratings are consistently higher on days when you "
                    "exercise. Even short sessions appear to have a positive impact "
                    "on your well-being."
                ),
                actionable=True,
                recommendation="View mood-boosting workouts",
                timestamp=now,
            )
        )
    return sort_by_priority(insights)
