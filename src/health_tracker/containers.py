"""Dependency container wiring for the application."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from health_tracker.adapters.bigquery_client import BigQueryWarehouseClient
from health_tracker.adapters.fdc_client import HttpxFdcClient
from health_tracker.adapters.gcs_storage_client import GcsStorageClient
from health_tracker.adapters.openai_coach_client import OpenAICoachClient
from health_tracker.adapters.supabase_health_data_repository import (
    SupabaseHealthDataRepository,
)
from health_tracker.adapters.supabase_medication_repository import (
    SupabaseMedicationRepository,
)
from health_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from health_tracker.config import Settings, parse_service_account_info
from health_tracker.services.achievements import AchievementService
from health_tracker.services.analytics import AnalyticsService
from health_tracker.services.cache import InMemoryCache
from health_tracker.services.coach import CoachService
from health_tracker.services.coaching import CoachingService
from health_tracker.services.gps import GpsWorkoutService
from health_tracker.services.health_data import HealthDataService
from health_tracker.services.insights import InsightService
from health_tracker.services.leaderboard import LeaderboardService
from health_tracker.services.medications import MedicationService
from health_tracker.services.nutrition import NutritionService
from health_tracker.services.profiles import ProfileService
from health_tracker.services.stats import StatsService

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    health_data_service: HealthDataService
    medication_service: MedicationService
    profile_service: ProfileService
    stats_service: StatsService
    insight_service: InsightService
    coaching_service: CoachingService
    achievement_service: AchievementService
    leaderboard_service: LeaderboardService
    gps_service: GpsWorkoutService
    coach_service: CoachService
    nutrition_service: NutritionService | None
    analytics_service: AnalyticsService | None
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    health_data_repository = SupabaseHealthDataRepository(supabase_client)
    medication_repository = SupabaseMedicationRepository(supabase_client)
    profile_repository = SupabaseProfileRepository(supabase_client)

    health_data_service = HealthDataService(health_data_repository)
    profile_service = ProfileService(
        profile_repository, points_per_entry=resolved_settings.points_per_entry
    )
    stats_service = StatsService(health_data_service)

    coach_client = None
    if resolved_settings.openai_api_key:
        coach_client = OpenAICoachClient.create(resolved_settings.openai_api_key)
    coach_service = CoachService(
        stats=stats_service,
        profiles=profile_service,
        client=coach_client,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
    )

    fdc_client = None
    nutrition_service = None
    if resolved_settings.fdc_api_key:
        fdc_client = HttpxFdcClient.create(
            api_key=resolved_settings.fdc_api_key,
            base_url=resolved_settings.fdc_base_url,
        )
        nutrition_service = NutritionService(fdc_client=fdc_client, cache=InMemoryCache())

    analytics_service = None
    if resolved_settings.google_application_credentials_json:
        analytics_service = _build_analytics_service(
            resolved_settings, health_data_repository
        )

    async def close_resources() -> None:
        if coach_client is not None:
            await coach_client.close()
        if fdc_client is not None:
            await fdc_client.close()

    return AppContainer(
        settings=resolved_settings,
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
        coach_service=coach_service,
        nutrition_service=nutrition_service,
        analytics_service=analytics_service,
        close_resources=close_resources,
    )


def _build_analytics_service(
    settings: Settings, repository: SupabaseHealthDataRepository
) -> AnalyticsService:
    credentials_info = parse_service_account_info(
        settings.google_application_credentials_json
    )
    storage = GcsStorageClient.create(credentials_info, settings.gcs_analytics_bucket)
    warehouse = BigQueryWarehouseClient.create(
        credentials_info, settings.bigquery_dataset_id, settings.gcp_location
    )
    _logger.info(
        "Analytics export enabled",
        extra={
            "bucket": settings.gcs_analytics_bucket,
            "dataset": settings.bigquery_dataset_id,
        },
    )
    return AnalyticsService(
        repository=repository,
        storage=storage,
        warehouse=warehouse,
        dataset_id=settings.bigquery_dataset_id,
        salt=settings.analytics_salt,
    )
