"""Points leaderboard."""

from dataclasses import dataclass
from uuid import UUID

from health_tracker.services.profiles import ProfileRepository

DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class LeaderboardRow:
    """One ranked leaderboard position."""

    rank: int
    user_id: UUID
    name: str
    level: int
    points: int
    streak: int
    is_current_user: bool


@dataclass
class LeaderboardService:
    """Ranks users by points, then streak."""

    repository: ProfileRepository

    def top(self, current_user_id: UUID, limit: int = DEFAULT_LIMIT) -> list[LeaderboardRow]:
        profiles = sorted(
            self.repository.list_top(limit),
            key=lambda profile: (profile.points, profile.streak),
            reverse=True,
        )
        return [
            LeaderboardRow(
                rank=index,
                user_id=profile.id,
                name=profile.name,
                level=profile.level,
                points=profile.points,
                streak=profile.streak,
                is_current_user=profile.id == current_user_id,
            )
            for index, profile in enumerate(profiles[:limit], start=1)
        ]
