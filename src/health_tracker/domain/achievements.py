"""Domain models for achievements."""

from dataclasses import dataclass
from datetime import date

POINTS_PER_ACHIEVEMENT = 100


@dataclass(frozen=True)
class AchievementDefinition:
    """Static description of an achievement and its threshold."""

    id: str
    title: str
    description: str
    icon: str
    target: int


@dataclass(frozen=True)
class Achievement:
    """Achievement progress for a specific user."""

    id: str
    title: str
    description: str
    icon: str
    earned: bool
    progress: int
    target: int
    earned_date: date | None = None


@dataclass(frozen=True)
class AchievementSummary:
    """Achievements grouped by state."""

    earned: list[Achievement]
    in_progress: list[Achievement]
    locked: list[Achievement]
    completion_rate: float
    points: int


ACHIEVEMENTS: tuple[AchievementDefinition, ...] = (
    AchievementDefinition(
        id="first-meal",
        title="First Steps",
        description="Log your first meal",
        icon="🍽️",
        target=1,
    ),
    AchievementDefinition(
        id="hydration-hero",
        title="Hydration Hero",
        description="Drink 8 glasses of water in a day",
        icon="💧",
        target=8,
    ),
    AchievementDefinition(
        id="week-warrior",
        title="Week Warrior",
        description="Maintain a 7-day logging streak",
        icon="🔥",
        target=7,
    ),
    AchievementDefinition(
        id="calorie-champion",
        title="Calorie Champion",
        description="Stay within your calorie goal for 5 days",
        icon="🎯",
        target=5,
    ),
    AchievementDefinition(
        id="exercise-explorer",
        title="Exercise Explorer",
        description="Try 10 different exercises",
        icon="🏃",
        target=10,
    ),
    AchievementDefinition(
        id="consistency-king",
        title="Consistency King",
        description="Log food for 30 consecutive days",
        icon="👑",
        target=30,
    ),
    AchievementDefinition(
        id="fitness-fanatic",
        title="Fitness Fanatic",
        description="Exercise 45 minutes a day for 7 days in a row",
        icon="💪",
        target=7,
    ),
)
