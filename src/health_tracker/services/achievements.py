"""Achievement progress computed from a user's full history."""

from collections import defaultdict
from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID
from zoneinfo import ZoneInfo

from health_tracker.domain.achievements import (
    ACHIEVEMENTS,
    POINTS_PER_ACHIEVEMENT,
    Achievement,
    AchievementSummary,
)
from health_tracker.domain.entries import ML_PER_GLASS
from health_tracker.domain.models import UserProfile
from health_tracker.services.health_data import HealthDataService, HealthSummary
from health_tracker.services.profiles import ProfileService
from health_tracker.services.stats import (
    CALORIE_TOLERANCE,
    active_days,
    current_streak,
    entry_day,
    longest_run,
)

FANATIC_MINUTES = 45


@dataclass
class AchievementService:
    """Evaluates achievements for a user."""

    health_data: HealthDataService
    profiles: ProfileService

    def get_achievements(
        self, user_id: UUID, timezone_name: str = "UTC", today: date | None = None
    ) -> list[Achievement]:
        tz = ZoneInfo(timezone_name)
        profile = self.profiles.get_profile(user_id)
        summary = self.health_data.get_summary(user_id, days=None)
        return evaluate(profile, summary, today or datetime.now(tz=tz).date(), tz)


def measure_progress(
    profile: UserProfile, summary: HealthSummary, today: date, tz: ZoneInfo
) -> dict[str, int]:
    """Return the raw measure behind every achievement."""
    daily_calories: dict[date, float] = defaultdict(float)
    for food in summary.food:
        daily_calories[entry_day(food, tz)] += food.total_calories

    daily_water: dict[date, float] = defaultdict(float)
    for water in summary.water:
        daily_water[entry_day(water, tz)] += water.amount

    daily_minutes: dict[date, float] = defaultdict(float)
    for exercise in summary.exercise:
        daily_minutes[entry_day(exercise, tz)] += exercise.duration

    goal = profile.goals.calories
    return {
        "first-meal": len(summary.food),
        "hydration-hero": int(max(daily_water.values(), default=0) // ML_PER_GLASS),
        "week-warrior": current_streak(active_days(summary, tz), today),
        "calorie-champion": sum(
            1
            for calories in daily_calories.values()
            if abs(calories - goal) < CALORIE_TOLERANCE
        ),
        "exercise-explorer": len(
            {exercise.name.strip().casefold() for exercise in summary.exercise}
        ),
        "consistency-king": longest_run(set(daily_calories)),
        "fitness-fanatic": longest_run(
            {day for day, minutes in daily_minutes.items() if minutes >= FANATIC_MINUTES}
        ),
    }


def evaluate(
    profile: UserProfile, summary: HealthSummary, today: date, tz: ZoneInfo
) -> list[Achievement]:
    """Return every achievement with progress capped at its target."""
    measures = measure_progress(profile, summary, today, tz)
    achievements = []
    for definition in ACHIEVEMENTS:
        progress = min(measures[definition.id], definition.target)
        achievements.append(
            Achievement(
                id=definition.id,
                title=definition.title,
                description=definition.description,
                icon=definition.icon,
                earned=progress >= definition.target,
                progress=progress,
                target=definition.target,
            )
        )
    return achievements


def summarize(achievements: list[Achievement]) -> AchievementSummary:
    earned = [item for item in achievements if item.earned]
    in_progress = [item for item in achievements if not item.earned and item.progress > 0]
    locked = [item for item in achievements if not item.earned and item.progress == 0]
    completion = len(earned) / len(achievements) if achievements else 0.0
    return AchievementSummary(
        earned=earned,
        in_progress=in_progress,
        locked=locked,
        completion_rate=completion,
        points=len(earned) * POINTS_PER_ACHIEVEMENT,
    )
