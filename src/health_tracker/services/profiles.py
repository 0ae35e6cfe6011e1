"""Profile and gamification counter service."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from health_tracker.domain.models import UserProfile, level_for_points

EDITABLE_FIELDS = frozenset({"name", "age", "weight", "height", "goals"})


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the user's profile, if present."""

    def create_profile(self, user_id: UUID, email: str | None) -> UserProfile:
        """Create a default profile and return it."""

    def update_profile(
        self, user_id: UUID, changes: dict[str, object]
    ) -> UserProfile | None:
        """Apply changes and return the profile, or None if missing."""

    def list_top(self, limit: int) -> list[UserProfile]:
        """Return profiles ordered by points then streak, descending."""


@dataclass(frozen=True)
class PointsAward:
    """Result of awarding points to a user."""

    points: int
    level: int
    leveled_up: bool


@dataclass
class ProfileService:
    """Application service for profiles and their counters."""

    repository: ProfileRepository
    points_per_entry: int = 10

    def get_profile(self, user_id: UUID, email: str | None = None) -> UserProfile:
        """Return the profile, creating a default one on first access."""
        existing = self.repository.get_profile(user_id)
        if existing:
            return existing
        return self.repository.create_profile(user_id, email)

    def update_profile(
        self, user_id: UUID, changes: dict[str, object]
    ) -> UserProfile:
        """Update editable profile fields."""
        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"Unsupported profile fields: {sorted(unknown)}")
        return self._update(user_id, changes)

    def award_points(self, user_id: UUID, points: int) -> PointsAward:
        """Add points and recompute the level."""
        profile = self.get_profile(user_id)
        total = profile.points + points
        level = level_for_points(total)
        self._update(user_id, {"points": total, "level": level})
        return PointsAward(points=total, level=level, leveled_up=level > profile.level)

    def record_activity(self, user_id: UUID, streak: int) -> UserProfile:
        """Store the user's current logging streak."""
        self.get_profile(user_id)
        return self._update(user_id, {"streak": streak})

    def register_entry(self, user_id: UUID, streak: int) -> PointsAward:
        """Apply the rewards for logging one entry."""
        award = self.award_points(user_id, self.points_per_entry)
        self.record_activity(user_id, streak)
        return award

    def _update(self, user_id: UUID, changes: dict[str, object]) -> UserProfile:
        updated = self.repository.update_profile(user_id, changes)
        if updated is None:
            raise RuntimeError("Failed to update profile")
        return updated
