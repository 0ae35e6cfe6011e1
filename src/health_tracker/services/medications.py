"""Medication reminder service."""

from dataclasses import dataclass
from datetime import UTC, date, datetime, time
from typing import Protocol
from uuid import UUID

from health_tracker.domain.errors import NotFoundError
from health_tracker.domain.medications import MedicationDraft, MedicationReminder

UPDATABLE_FIELDS = frozenset(
    {
        "medication_name",
        "dosage",
        "frequency",
        "time_of_day",
        "start_date",
        "end_date",
        "notes",
    }
)
REQUIRED_FIELDS = frozenset(
    {"medication_name", "dosage", "frequency", "time_of_day", "start_date"}
)


class ReminderNotFoundError(NotFoundError):
    """Raised when a reminder does not exist for the user."""


class MedicationRepository(Protocol):
    """Persistence interface for medication reminders."""

    def list_reminders(self, user_id: UUID) -> list[MedicationReminder]:
        """Return the user's reminders, newest first."""

    def insert_reminder(
        self, user_id: UUID, draft: MedicationDraft
    ) -> MedicationReminder:
        """Insert a reminder and return it."""

    def update_reminder(
        self, user_id: UUID, reminder_id: UUID, changes: dict[str, object]
    ) -> MedicationReminder | None:
        """Apply changes to a reminder and return it, or None if missing."""

    def delete_reminder(self, user_id: UUID, reminder_id: UUID) -> bool:
        """Delete a reminder; return whether anything was deleted."""


@dataclass
class MedicationService:
    """Application service for medication reminders."""

    repository: MedicationRepository

    def list_reminders(self, user_id: UUID) -> list[MedicationReminder]:
        return self.repository.list_reminders(user_id)

    def create_reminder(
        self, user_id: UUID, draft: MedicationDraft
    ) -> MedicationReminder:
        check_date_range(draft.start_date, draft.end_date)
        return self.repository.insert_reminder(user_id, draft)

    def update_reminder(
        self, user_id: UUID, reminder_id: UUID, changes: dict[str, object]
    ) -> MedicationReminder:
        """Apply a partial update and refresh updated_at.

        Date changes are checked against the stored range before writing.
        """
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Unsupported reminder fields: {sorted(unknown)}")
        missing = sorted(
            name for name in REQUIRED_FIELDS if name in changes and changes[name] is None
        )
        if missing:
            raise ValueError(f"Reminder fields cannot be cleared: {missing}")
        if "start_date" in changes or "end_date" in changes:
            current = self._get(user_id, reminder_id)
            check_date_range(
                changes.get("start_date", current.start_date),
                changes.get("end_date", current.end_date),
            )
        updated = self.repository.update_reminder(
            user_id,
            reminder_id,
            {**changes, "updated_at": datetime.now(tz=UTC)},
        )
        if updated is None:
            raise ReminderNotFoundError(str(reminder_id))
        return updated

    def delete_reminder(self, user_id: UUID, reminder_id: UUID) -> None:
        if not self.repository.delete_reminder(user_id, reminder_id):
            raise ReminderNotFoundError(str(reminder_id))

    def _get(self, user_id: UUID, reminder_id: UUID) -> MedicationReminder:
        for reminder in self.repository.list_reminders(user_id):
            if reminder.id == reminder_id:
                return reminder
        raise ReminderNotFoundError(str(reminder_id))


def check_date_range(start_date: date, end_date: date | None) -> None:
    """Raise ValueError when a reminder would end before it starts."""
    if end_date is not None and end_date < start_date:
        raise ValueError("end_date must not be before start_date")


def is_active(reminder: MedicationReminder, now: datetime) -> bool:
    """Return True while the reminder's date range covers the moment."""
    start = datetime.combine(reminder.start_date, time.min, tzinfo=now.tzinfo)
    if now < start:
        return False
    if reminder.end_date is None:
        return True
    end = datetime.combine(reminder.end_date, time.max, tzinfo=now.tzinfo)
    return now <= end


def split_active(
    reminders: list[MedicationReminder], today: date
) -> tuple[list[MedicationReminder], list[MedicationReminder]]:
    """Partition reminders into active and inactive for a day."""
    moment = datetime.combine(today, time(12, 0))
    active = [reminder for reminder in reminders if is_active(reminder, moment)]
    inactive = [reminder for reminder in reminders if not is_active(reminder, moment)]
    return active, inactive
