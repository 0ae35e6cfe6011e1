"""Supabase repository for medication reminders."""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from uuid import UUID

from supabase import Client

from health_tracker.domain.medications import MedicationDraft, MedicationReminder
from health_tracker.services.medications import MedicationRepository

_COLUMNS = (
    "id, user_id, medication_name, dosage, frequency, time_of_day, start_date, "
    "end_date, notes, created_at, updated_at"
)


@dataclass
class SupabaseMedicationRepository(MedicationRepository):
    """Supabase implementation over the medication_reminders table."""

    client: Client

    def list_reminders(self, user_id: UUID) -> list[MedicationReminder]:
        response = (
            self.client.table("medication_reminders")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def insert_reminder(
        self, user_id: UUID, draft: MedicationDraft
    ) -> MedicationReminder:
        now = datetime.now(tz=UTC).isoformat()
        response = (
            self.client.table("medication_reminders")
            .insert(
                {
                    "user_id": str(user_id),
                    "medication_name": draft.medication_name,
                    "dosage": draft.dosage,
                    "frequency": draft.frequency,
                    "time_of_day": list(draft.time_of_day),
                    "start_date": draft.start_date.isoformat(),
                    "end_date": draft.end_date.isoformat() if draft.end_date else None,
                    "notes": draft.notes,
                    "created_at": now,
                    "updated_at": now,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create medication reminder")
        return _parse_row(response.data[0])

    def update_reminder(
        self, user_id: UUID, reminder_id: UUID, changes: dict[str, object]
    ) -> MedicationReminder | None:
        response = (
            self.client.table("medication_reminders")
            .update({key: _to_column(value) for key, value in changes.items()})
            .eq("id", str(reminder_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def delete_reminder(self, user_id: UUID, reminder_id: UUID) -> bool:
        response = (
            self.client.table("medication_reminders")
            .delete()
            .eq("id", str(reminder_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)


def _to_column(value: object) -> object:
    if isinstance(value, date | datetime):
        return value.isoformat()
    return value


def _parse_row(row: dict[str, object]) -> MedicationReminder:
    end_date = row.get("end_date")
    return MedicationReminder(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        medication_name=str(row["medication_name"]),
        dosage=str(row["dosage"]),
        frequency=str(row.get("frequency") or "daily"),
        time_of_day=list(row.get("time_of_day") or ["08:00"]),
        start_date=date.fromisoformat(str(row["start_date"])),
        end_date=date.fromisoformat(str(end_date)) if end_date else None,
        notes=row.get("notes"),
        created_at=datetime.fromisoformat(str(row["created_at"])),
        updated_at=datetime.fromisoformat(str(row["updated_at"])),
    )
