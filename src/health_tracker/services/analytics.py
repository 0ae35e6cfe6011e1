"""Anonymised analytics export and population trend queries."""

import hashlib
import json
import logging
from dataclasses import dataclass
from datetime import UTC, datetime, time, timedelta
from typing import Protocol

from health_tracker.domain.analytics import (
    ANALYTICS_TABLES,
    TABLE_FOR_DATA_TYPE,
    ExportResult,
)
from health_tracker.domain.entries import (
    ExerciseEntry,
    FoodEntry,
    HealthDataRow,
    HealthEntry,
    MoodEntry,
    SleepEntry,
    WaterEntry,
)
from health_tracker.services.health_data import HealthDataRepository, entry_from_row

_logger = logging.getLogger(__name__)

EXPORT_PREFIX = "daily-exports"
MAX_TREND_DAYS = 365

EXPORT_METADATA = {
    "dataClassification": "anonymized_phi",
    "purpose": "analytics_ml_training",
}

NUTRITION_TRENDS_SQL = """
SELECT
  DATE(timestamp) AS date,
  COUNT(DISTINCT anonymousUserId) AS active_users,
  AVG(calories) AS avg_calories,
  AVG(protein) AS avg_protein,
  AVG(carbs) AS avg_carbs,
  AVG(fat) AS avg_fat
FROM `{dataset}.food_entries`
WHERE timestamp >= TIMESTAMP_SUB(CURRENT_TIMESTAMP(), INTERVAL @days DAY)
GROUP BY date
ORDER BY date DESC
"""

EXERCISE_TRENDS_SQL = """
SELECT
  DATE(timestamp) AS date,
  type AS exercise_type,
  COUNT(*) AS session_count,
  AVG(duration) AS avg_duration,
  AVG(calories) AS avg_calories_burned
FROM `{dataset}.exercise_entries`
WHERE timestamp >= TIMESTAMP_SUB(CURRENT_TIMESTAMP(), INTERVAL @days DAY)
GROUP BY date, exercise_type
ORDER BY date DESC, session_count DESC
"""

SLEEP_TRENDS_SQL = """
SELECT
  DATE(timestamp) AS date,
  AVG(duration) AS avg_sleep_duration,
  AVG(quality) AS avg_sleep_quality,
  COUNT(DISTINCT anonymousUserId) AS users_tracked
FROM `{dataset}.sleep_entries`
WHERE timestamp >= TIMESTAMP_SUB(CURRENT_TIMESTAMP(), INTERVAL @days DAY)
GROUP BY date
ORDER BY date DESC
"""


class StorageClient(Protocol):
    """Object storage for export files."""

    def upload_json(self, path: str, payload: str, metadata: dict[str, str]) -> None:
        """Upload a JSON document with custom metadata."""


class WarehouseClient(Protocol):
    """Analytics warehouse access."""

    def insert_rows(self, table: str, rows: list[dict[str, object]]) -> None:
        """Stream rows into a table."""

    def query(self, sql: str, parameters: dict[str, int]) -> list[dict[str, object]]:
        """Run a parameterised query and return rows as dicts."""


@dataclass
class AnalyticsService:
    """Exports yesterday's data and reads population trends."""

    repository: HealthDataRepository
    storage: StorageClient
    warehouse: WarehouseClient
    dataset_id: str
    salt: str

    def export_daily(self, now: datetime | None = None) -> ExportResult:
        """Export the previous UTC day of health data."""
        resolved_now = now or datetime.now(tz=UTC)
        export_date = resolved_now.astimezone(UTC).date() - timedelta(days=1)
        start = datetime.combine(export_date, time.min, tzinfo=UTC)
        rows = self.repository.list_rows_between(start, start + timedelta(days=1))

        tables = anonymize_rows(rows, self.salt)
        exported_at = resolved_now.isoformat()
        file_name = f"daily-export-{export_date.isoformat()}.json"
        self.storage.upload_json(
            f"{EXPORT_PREFIX}/{file_name}",
            json.dumps(tables, indent=2),
            {"exportedAt": exported_at, **EXPORT_METADATA},
        )
        for table, records in tables.items():
            if not records:
                continue
            self.warehouse.insert_rows(
                table, [{**record, "exportedAt": exported_at} for record in records]
            )

        counts = {table: len(records) for table, records in tables.items()}
        _logger.info(
            "Daily analytics export complete",
            extra={"export_date": export_date.isoformat(), "record_counts": counts},
        )
        return ExportResult(export_date=export_date, file_name=file_name, record_counts=counts)

    def nutrition_trends(self, days: int = 30) -> list[dict[str, object]]:
        return self._trend(NUTRITION_TRENDS_SQL, days)

    def exercise_trends(self, days: int = 30) -> list[dict[str, object]]:
        return self._trend(EXERCISE_TRENDS_SQL, days)

    def sleep_trends(self, days: int = 30) -> list[dict[str, object]]:
        return self._trend(SLEEP_TRENDS_SQL, days)

    def _trend(self, template: str, days: int) -> list[dict[str, object]]:
        if not 1 <= days <= MAX_TREND_DAYS:
            raise ValueError(f"days must be between 1 and {MAX_TREND_DAYS}")
        return self.warehouse.query(
            template.format(dataset=self.dataset_id), {"days": days}
        )


def anonymous_user_id(user_id: object, salt: str) -> str:
    return hashlib.sha256(f"{salt}{user_id}".encode()).hexdigest()


def anonymize_rows(
    rows: list[HealthDataRow], salt: str
) -> dict[str, list[dict[str, object]]]:
    """Group rows by warehouse table, replacing user ids with salted hashes."""
    tables: dict[str, list[dict[str, object]]] = {name: [] for name in ANALYTICS_TABLES}
    for row in rows:
        table = TABLE_FOR_DATA_TYPE.get(row.data_type)
        if table is None:
            continue
        entry = entry_from_row(row)
        if entry is None:
            continue
        tables[table].append(
            {
                "anonymousUserId": anonymous_user_id(row.user_id, salt),
                **project_entry(entry),
                "timestamp": entry.logged_at.isoformat(),
            }
        )
    return tables


def project_entry(entry: HealthEntry) -> dict[str, object]:
    """Return the warehouse columns for an entry, excluding user and time."""
    if isinstance(entry, FoodEntry):
        return {
            "name": entry.name,
            "calories": entry.calories,
            "protein": entry.protein,
            "carbs": entry.carbs,
            "fat": entry.fat,
            "fiber": entry.fiber,
            "meal": entry.meal,
            "quantity": entry.quantity,
        }
    if isinstance(entry, ExerciseEntry):
        return {
            "name": entry.name,
            "type": entry.type,
            "duration": round(entry.duration),
            "calories": entry.calories,
            "intensity": entry.intensity,
        }
    if isinstance(entry, WaterEntry):
        return {"amount": entry.amount}
    if isinstance(entry, SleepEntry):
        return {
            "duration": entry.duration,
            "quality": entry.quality,
            "bedtime": entry.bedtime,
            "wakeTime": entry.wake_time,
        }
    if isinstance(entry, MoodEntry):
        return {"rating": entry.rating, "factors": list(entry.factors)}
    raise TypeError(f"Unsupported entry type: {type(entry).__name__}")
