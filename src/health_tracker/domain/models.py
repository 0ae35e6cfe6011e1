"""Core user domain models."""

from dataclasses import dataclass, field
from uuid import UUID

POINTS_PER_LEVEL = 1000


@dataclass(frozen=True)
class Goals:
    """Daily targets set by the user."""

    weight: float | None = None
    calories: float = 2000
    water: int = 8
    exercise: float = 30


@dataclass(frozen=True)
class UserProfile:
    """Profile, goals and gamification counters for a user."""

    id: UUID
    name: str
    email: str | None = None
    age: int | None = None
    weight: float | None = None
    height: float | None = None
    goals: Goals = field(default_factory=Goals)
    streak: int = 0
    points: int = 0
    level: int = 1


def level_for_points(points: int) -> int:
    """Return the level reached with the given number of points."""
    return max(points, 0) // POINTS_PER_LEVEL + 1


def level_progress(points: int) -> float:
    """Return progress through the current level as a 0-1 fraction."""
    return (max(points, 0) % POINTS_PER_LEVEL) / POINTS_PER_LEVEL
