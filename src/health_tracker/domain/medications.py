"""Domain models for medication reminders."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Literal
from uuid import UUID

Frequency = Literal["daily", "twice-daily", "weekly", "monthly", "as-needed"]


@dataclass(frozen=True)
class MedicationReminder:
    """Persisted medication reminder."""

    id: UUID
    user_id: UUID
    medication_name: str
    dosage: str
    frequency: str
    time_of_day: list[str]
    start_date: date
    end_date: date | None
    notes: str | None
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class MedicationDraft:
    """Fields supplied when creating a reminder."""

    medication_name: str
    dosage: str
    start_date: date
    frequency: Frequency = "daily"
    time_of_day: list[str] = field(default_factory=lambda: ["08:00"])
    end_date: date | None = None
    notes: str | None = None
