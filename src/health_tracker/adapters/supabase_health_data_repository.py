"""Supabase repository for generic health data rows."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from health_tracker.domain.entries import HealthDataRow
from health_tracker.services.health_data import HealthDataRepository

_COLUMNS = "id, user_id, data_type, data_value, created_at"


@dataclass
class SupabaseHealthDataRepository(HealthDataRepository):
    """Supabase implementation over the health_data table."""

    client: Client

    def insert_row(
        self,
        user_id: UUID,
        data_type: str,
        data_value: dict[str, object],
        created_at: datetime,
    ) -> HealthDataRow:
        response = (
            self.client.table("health_data")
            .insert(
                {
                    "user_id": str(user_id),
                    "data_type": data_type,
                    "data_value": data_value,
                    "created_at": created_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save health data")
        return _parse_row(response.data[0])

    def list_rows(
        self,
        user_id: UUID,
        data_type: str | None = None,
        since: datetime | None = None,
        limit: int | None = None,
    ) -> list[HealthDataRow]:
        query = (
            self.client.table("health_data")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
        )
        if data_type is not None:
            query = query.eq("data_type", data_type)
        if since is not None:
            query = query.gte("created_at", since.isoformat())
        query = query.order("created_at", desc=True)
        if limit is not None:
            query = query.limit(limit)
        response = query.execute()
        return [_parse_row(row) for row in response.data or []]

    def list_rows_between(self, start: datetime, end: datetime) -> list[HealthDataRow]:
        response = (
            self.client.table("health_data")
            .select(_COLUMNS)
            .gte("created_at", start.isoformat())
            .lt("created_at", end.isoformat())
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def delete_row(self, user_id: UUID, row_id: UUID) -> bool:
        response = (
            self.client.table("health_data")
            .delete()
            .eq("id", str(row_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)


def _parse_row(row: dict[str, object]) -> HealthDataRow:
    return HealthDataRow(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        data_type=str(row["data_type"]),
        data_value=dict(row.get("data_value") or {}),
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )
