"""Shared test fixtures."""

from dataclasses import asdict, dataclass, field, replace
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import jwt
import pytest

from health_tracker.config import Settings
from health_tracker.containers import AppContainer
from health_tracker.domain.entries import HealthDataRow, HealthEntry, to_data_value
from health_tracker.domain.medications import MedicationDraft, MedicationReminder
from health_tracker.domain.models import Goals, UserProfile
from health_tracker.services.achievements import AchievementService
from health_tracker.services.analytics import AnalyticsService
from health_tracker.services.cache import InMemoryCache
from health_tracker.services.coach import CoachService
from health_tracker.services.coaching import CoachingService
from health_tracker.services.gps import GpsWorkoutService
from health_tracker.services.health_data import HealthDataRepository, HealthDataService
from health_tracker.services.insights import InsightService
from health_tracker.services.leaderboard import LeaderboardService
from health_tracker.services.medications import MedicationRepository, MedicationService
from health_tracker.services.nutrition import NutritionService
from health_tracker.services.profiles import ProfileRepository, ProfileService
from health_tracker.services.stats import StatsService

JWT_SECRET = "test-jwt-secret-that-is-long-enough-for-hs256"


@dataclass
class InMemoryHealthDataRepository(HealthDataRepository):
    """In-memory health_data table for tests."""

    rows: list[HealthDataRow] = field(default_factory=list)

    def insert_row(
        self,
        user_id: UUID,
        data_type: str,
        data_value: dict[str, object],
        created_at: datetime,
    ) -> HealthDataRow:
        row = HealthDataRow(
            id=uuid4(),
            user_id=user_id,
            data_type=data_type,
            data_value=data_value,
            created_at=created_at,
        )
        self.rows.append(row)
        return row

    def add_entry(
        self, user_id: UUID, entry: HealthEntry, created_at: datetime | None = None
    ) -> HealthDataRow:
        """Seed an entry as if it had been saved at its own moment."""
        return self.insert_row(
            user_id,
            entry.DATA_TYPE,
            to_data_value(entry),
            created_at or entry.logged_at,
        )

    def list_rows(
        self,
        user_id: UUID,
        data_type: str | None = None,
        since: datetime | None = None,
        limit: int | None = None,
    ) -> list[HealthDataRow]:
        rows = [
            row
            for row in self.rows
            if row.user_id == user_id
            and (data_type is None or row.data_type == data_type)
            and (since is None or row.created_at >= since)
        ]
        rows.sort(key=lambda row: row.created_at, reverse=True)
        return rows[:limit] if limit is not None else rows

    def list_rows_between(self, start: datetime, end: datetime) -> list[HealthDataRow]:
        return [row for row in self.rows if start <= row.created_at < end]

    def delete_row(self, user_id: UUID, row_id: UUID) -> bool:
        before = len(self.rows)
        self.rows = [
            row
            for row in self.rows
            if not (row.id == row_id and row.user_id == user_id)
        ]
        return len(self.rows) < before


@dataclass
class InMemoryMedicationRepository(MedicationRepository):
    """In-memory medication_reminders table for tests."""

    reminders: dict[UUID, MedicationReminder] = field(default_factory=dict)

    def list_reminders(self, user_id: UUID) -> list[MedicationReminder]:
        owned = [item for item in self.reminders.values() if item.user_id == user_id]
        return sorted(owned, key=lambda item: item.created_at, reverse=True)

    def insert_reminder(
        self, user_id: UUID, draft: MedicationDraft
    ) -> MedicationReminder:
        now = datetime.now(tz=UTC)
        reminder = MedicationReminder(
            id=uuid4(),
            user_id=user_id,
            created_at=now,
            updated_at=now,
            **asdict(draft),
        )
        self.reminders[reminder.id] = reminder
        return reminder

    def update_reminder(
        self, user_id: UUID, reminder_id: UUID, changes: dict[str, object]
    ) -> MedicationReminder | None:
        existing = self.reminders.get(reminder_id)
        if existing is None or existing.user_id != user_id:
            return None
        updated = replace(existing, **changes)
        self.reminders[reminder_id] = updated
        return updated

    def delete_reminder(self, user_id: UUID, reminder_id: UUID) -> bool:
        existing = self.reminders.get(reminder_id)
        if existing is None or existing.user_id != user_id:
            return False
        del self.reminders[reminder_id]
        return True


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profiles table for tests."""

    profiles: dict[UUID, UserProfile] = field(default_factory=dict)
    fail_updates: bool = False

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        return self.profiles.get(user_id)

    def create_profile(self, user_id: UUID, email: str | None) -> UserProfile:
        name = email.split("@", 1)[0] if email else "New user"
        profile = UserProfile(id=user_id, name=name, email=email, goals=Goals())
        self.profiles[user_id] = profile
        return profile

    def update_profile(
        self, user_id: UUID, changes: dict[str, object]
    ) -> UserProfile | None:
        if self.fail_updates:
            raise RuntimeError("Failed to update profile")
        existing = self.profiles.get(user_id)
        if existing is None:
            return None
        updated = replace(existing, **changes)
        self.profiles[user_id] = updated
        return updated

    def list_top(self, limit: int) -> list[UserProfile]:
        ranked = sorted(
            self.profiles.values(),
            key=lambda profile: (profile.points, profile.streak),
            reverse=True,
        )
        return ranked[:limit]


@dataclass
class FakeFdcClient:
    foods: list[dict[str, object]] = field(default_factory=list)
    calls: list[str] = field(default_factory=list)

    async def search_foods(self, query: str, page_size: int = 10) -> dict[str, object]:
        self.calls.append(f"search:{query}")
        return {"foods": self.foods[:page_size]}

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        self.calls.append(f"food:{fdc_id}")
        for food in self.foods:
            if food.get("fdcId") == fdc_id:
                return food
        raise LookupError(fdc_id)


@dataclass
class FakeCoachClient:
    reply_text: str = "Keep it up!"
    error: Exception | None = None
    calls: list[dict[str, object]] = field(default_factory=list)

    async def reply(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        instructions: str,
        message: str,
    ) -> str:
        self.calls.append({"model": model, "instructions": instructions, "message": message})
        if self.error is not None:
            raise self.error
        return self.reply_text


@dataclass
class FakeStorageClient:
    uploads: list[tuple[str, str, dict[str, str]]] = field(default_factory=list)

    def upload_json(self, path: str, payload: str, metadata: dict[str, str]) -> None:
        self.uploads.append((path, payload, metadata))


@dataclass
class FakeWarehouseClient:
    inserted: dict[str, list[dict[str, object]]] = field(default_factory=dict)
    queries: list[tuple[str, dict[str, int]]] = field(default_factory=list)
    rows: list[dict[str, object]] = field(default_factory=list)

    def insert_rows(self, table: str, rows: list[dict[str, object]]) -> None:
        self.inserted.setdefault(table, []).extend(rows)

    def query(self, sql: str, parameters: dict[str, int]) -> list[dict[str, object]]:
        self.queries.append((sql, parameters))
        return self.rows


def make_token(user_id: UUID, secret: str = JWT_SECRET, **claims: object) -> str:
    payload: dict[str, object] = {
        "sub": str(user_id),
        "aud": "authenticated",
        "exp": datetime.now(tz=UTC) + timedelta(hours=1),
        **claims,
    }
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
        supabase_jwt_secret=JWT_SECRET,
        admin_token="admin-token",
        openai_api_key="openai-key",
        fdc_api_key="fdc-key",
    )


@pytest.fixture
def user_id() -> UUID:
    return uuid4()


@pytest.fixture
def auth_headers(user_id: UUID) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(user_id)}"}


@pytest.fixture
def health_data_repository() -> InMemoryHealthDataRepository:
    return InMemoryHealthDataRepository()


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def medication_repository() -> InMemoryMedicationRepository:
    return InMemoryMedicationRepository()


@pytest.fixture
def container(
    settings: Settings,
    health_data_repository: InMemoryHealthDataRepository,
    profile_repository: InMemoryProfileRepository,
    medication_repository: InMemoryMedicationRepository,
) -> AppContainer:
    health_data_service = HealthDataService(health_data_repository)
    profile_service = ProfileService(profile_repository)
    stats_service = StatsService(health_data_service)
    analytics_service = AnalyticsService(
        repository=health_data_repository,
        storage=FakeStorageClient(),
        warehouse=FakeWarehouseClient(),
        dataset_id="cht_analytics",
        salt="salt",
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        health_data_service=health_data_service,
        medication_service=MedicationService(medication_repository),
        profile_service=profile_service,
        stats_service=stats_service,
        insight_service=InsightService(health_data_service, profile_service),
        coaching_service=CoachingService(
            health_data_service, stats_service, profile_service
        ),
        achievement_service=AchievementService(health_data_service, profile_service),
        leaderboard_service=LeaderboardService(profile_repository),
        gps_service=GpsWorkoutService(health_data_service),
        coach_service=CoachService(stats=stats_service, profiles=profile_service),
        nutrition_service=NutritionService(
            fdc_client=FakeFdcClient(), cache=InMemoryCache()
        ),
        analytics_service=analytics_service,
        close_resources=close_resources,
    )
