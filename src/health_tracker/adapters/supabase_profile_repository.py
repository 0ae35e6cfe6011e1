"""Supabase repository for user profiles."""

from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from health_tracker.domain.models import Goals, UserProfile
from health_tracker.services.profiles import ProfileRepository

_COLUMNS = "id, email, full_name, age, weight, height, goals, streak, points, level"


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation over the profiles table."""

    client: Client

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        response = (
            self.client.table("profiles")
            .select(_COLUMNS)
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def create_profile(self, user_id: UUID, email: str | None) -> UserProfile:
        now = datetime.now(tz=UTC).isoformat()
        response = (
            self.client.table("profiles")
            .insert(
                {
                    "id": str(user_id),
                    "email": email,
                    "full_name": _default_name(email),
                    "goals": asdict(Goals()),
                    "streak": 0,
                    "points": 0,
                    "level": 1,
                    "created_at": now,
                    "updated_at": now,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create profile")
        return _parse_row(response.data[0])

    def update_profile(
        self, user_id: UUID, changes: dict[str, object]
    ) -> UserProfile | None:
        payload: dict[str, object] = {"updated_at": datetime.now(tz=UTC).isoformat()}
        for key, value in changes.items():
            if key == "name":
                payload["full_name"] = value
            elif isinstance(value, Goals):
                payload[key] = asdict(value)
            else:
                payload[key] = value
        response = (
            self.client.table("profiles")
            .update(payload)
            .eq("id", str(user_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def list_top(self, limit: int) -> list[UserProfile]:
        response = (
            self.client.table("profiles")
            .select(_COLUMNS)
            .order("points", desc=True)
            .order("streak", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def _default_name(email: str | None) -> str:
    if email:
        return email.split("@", 1)[0]
    return "New user"


def _parse_goals(raw: object) -> Goals:
    if not isinstance(raw, dict):
        return Goals()
    defaults = Goals()
    return Goals(
        weight=raw.get("weight"),
        calories=raw.get("calories") or defaults.calories,
        water=raw.get("water") or defaults.water,
        exercise=raw.get("exercise") or defaults.exercise,
    )


def _parse_row(row: dict[str, object]) -> UserProfile:
    return UserProfile(
        id=UUID(str(row["id"])),
        name=str(row.get("full_name") or _default_name(row.get("email"))),
        email=row.get("email"),
        age=row.get("age"),
        weight=row.get("weight"),
        height=row.get("height"),
        goals=_parse_goals(row.get("goals")),
        streak=int(row.get("streak") or 0),
        points=int(row.get("points") or 0),
        level=int(row.get("level") or 1),
    )
