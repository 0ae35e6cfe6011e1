"""Tests for the anonymised analytics export."""

import hashlib
import json
from datetime import UTC, date, datetime

import pytest

from health_tracker.domain.entries import FoodEntry, MoodEntry, WaterEntry
from health_tracker.domain.workouts import GpsPoint, GpsWorkout
from health_tracker.services.analytics import AnalyticsService, anonymous_user_id
from tests.conftest import (
    FakeStorageClient,
    FakeWarehouseClient,
    InMemoryHealthDataRepository,
)

NOW = datetime(2024, 6, 15, 3, tzinfo=UTC)
YESTERDAY_NOON = datetime(2024, 6, 14, 12, tzinfo=UTC)


def _service(
    repository: InMemoryHealthDataRepository,
) -> tuple[AnalyticsService, FakeStorageClient, FakeWarehouseClient]:
    storage = FakeStorageClient()
    warehouse = FakeWarehouseClient()
    service = AnalyticsService(
        repository=repository,
        storage=storage,
        warehouse=warehouse,
        dataset_id="cht_analytics",
        salt="salt",
    )
    return service, storage, warehouse


def test_anonymous_user_id_is_salted_sha256(user_id) -> None:
    expected = hashlib.sha256(f"salt{user_id}".encode()).hexdigest()

    assert anonymous_user_id(user_id, "salt") == expected
    assert anonymous_user_id(user_id, "other") != expected


def test_export_daily_uploads_and_streams_yesterday(user_id) -> None:
    repository = InMemoryHealthDataRepository()
    repository.add_entry(
        user_id,
        FoodEntry(
            name="Oats",
            calories=300,
            protein=10,
            meal="breakfast",
            timestamp=YESTERDAY_NOON,
        ),
    )
    repository.add_entry(
        user_id, MoodEntry(rating=7, factors=["sleep"], timestamp=YESTERDAY_NOON)
    )
    repository.add_entry(
        user_id, WaterEntry(amount=250, timestamp=datetime(2024, 6, 13, 12, tzinfo=UTC))
    )
    point = GpsPoint(latitude=0, longitude=0, timestamp=YESTERDAY_NOON)
    repository.add_entry(
        user_id,
        GpsWorkout(
            name="Run",
            type="running",
            duration=0,
            distance=0,
            calories=0,
            avg_pace=0,
            max_pace=0,
            elevation_gain=0,
            route=[point],
            timestamp=YESTERDAY_NOON,
        ),
    )
    service, storage, warehouse = _service(repository)

    result = service.export_daily(now=NOW)

    assert result.export_date == date(2024, 6, 14)
    assert result.file_name == "daily-export-2024-06-14.json"
    assert result.record_counts == {
        "food_entries": 1,
        "exercise_entries": 0,
        "water_entries": 0,
        "sleep_entries": 0,
        "mood_entries": 1,
    }

    path, payload, metadata = storage.uploads[0]
    assert path == "daily-exports/daily-export-2024-06-14.json"
    assert metadata == {
        "exportedAt": NOW.isoformat(),
        "dataClassification": "anonymized_phi",
        "purpose": "analytics_ml_training",
    }
    exported = json.loads(payload)
    assert str(user_id) not in payload
    assert exported["food_entries"][0]["anonymousUserId"] == anonymous_user_id(
        user_id, "salt"
    )
    assert exported["food_entries"][0]["calories"] == 300

    assert set(warehouse.inserted) == {"food_entries", "mood_entries"}
    mood_row = warehouse.inserted["mood_entries"][0]
    assert mood_row["rating"] == 7
    assert mood_row["factors"] == ["sleep"]
    assert mood_row["exportedAt"] == NOW.isoformat()
    assert mood_row["timestamp"] == YESTERDAY_NOON.isoformat()


def test_export_with_no_rows_uploads_empty_tables() -> None:
    service, storage, warehouse = _service(InMemoryHealthDataRepository())

    result = service.export_daily(now=NOW)

    assert sum(result.record_counts.values()) == 0
    assert len(storage.uploads) == 1
    assert warehouse.inserted == {}


def test_trends_query_dataset_with_days_parameter() -> None:
    service, _, warehouse = _service(InMemoryHealthDataRepository())
    warehouse.rows = [{"date": "2024-06-14", "avg_calories": 1900.0}]

    rows = service.nutrition_trends(days=14)
    service.sleep_trends()

    assert rows == warehouse.rows
    sql, parameters = warehouse.queries[0]
    assert "`cht_analytics.food_entries`" in sql
    assert parameters == {"days": 14}
    assert "`cht_analytics.sleep_entries`" in warehouse.queries[1][0]
    assert warehouse.queries[1][1] == {"days": 30}


@pytest.mark.parametrize("days", [0, 366])
def test_trends_reject_out_of_range_days(days: int) -> None:
    service, _, warehouse = _service(InMemoryHealthDataRepository())

    with pytest.raises(ValueError):
        service.exercise_trends(days=days)
    assert warehouse.queries == []
