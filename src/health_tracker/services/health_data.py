"""Service storing typed entries as generic health data rows."""

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Protocol, TypeVar
from uuid import UUID

from pydantic import ValidationError

from health_tracker.domain.entries import (
    EXERCISE_ENTRY,
    FOOD_ENTRY,
    MOOD_ENTRY,
    SLEEP_ENTRY,
    WATER_ENTRY,
    ExerciseEntry,
    FoodEntry,
    HealthDataRow,
    HealthEntry,
    MoodEntry,
    SleepEntry,
    WaterEntry,
    to_data_value,
)
from health_tracker.domain.errors import NotFoundError
from health_tracker.domain.workouts import GpsWorkout

_logger = logging.getLogger(__name__)

ENTRY_MODELS: dict[str, type[HealthEntry]] = {
    model.DATA_TYPE: model
    for model in (
        FoodEntry,
        WaterEntry,
        ExerciseEntry,
        SleepEntry,
        MoodEntry,
        GpsWorkout,
    )
}

EntryT = TypeVar("EntryT", bound=HealthEntry)


class EntryNotFoundError(NotFoundError):
    """Raised when an entry does not exist for the user."""


class HealthDataRepository(Protocol):
    """Persistence interface for the generic health_data table."""

    def insert_row(
        self,
        user_id: UUID,
        data_type: str,
        data_value: dict[str, object],
        created_at: datetime,
    ) -> HealthDataRow:
        """Insert a row and return it."""

    def list_rows(
        self,
        user_id: UUID,
        data_type: str | None = None,
        since: datetime | None = None,
        limit: int | None = None,
    ) -> list[HealthDataRow]:
        """Return a user's rows, newest first."""

    def list_rows_between(self, start: datetime, end: datetime) -> list[HealthDataRow]:
        """Return rows for every user created in [start, end)."""

    def delete_row(self, user_id: UUID, row_id: UUID) -> bool:
        """Delete a user's row; return whether anything was deleted."""


@dataclass
class HealthSummary:
    """Entries grouped by type, newest first."""

    food: list[FoodEntry] = field(default_factory=list)
    water: list[WaterEntry] = field(default_factory=list)
    exercise: list[ExerciseEntry] = field(default_factory=list)
    sleep: list[SleepEntry] = field(default_factory=list)
    mood: list[MoodEntry] = field(default_factory=list)

    def add(self, entry: HealthEntry) -> None:
        """Append an entry to the matching group."""
        if isinstance(entry, FoodEntry):
            self.food.append(entry)
        elif isinstance(entry, WaterEntry):
            self.water.append(entry)
        elif isinstance(entry, ExerciseEntry):
            self.exercise.append(entry)
        elif isinstance(entry, SleepEntry):
            self.sleep.append(entry)
        elif isinstance(entry, MoodEntry):
            self.mood.append(entry)

    def counts(self) -> dict[str, int]:
        return {
            FOOD_ENTRY: len(self.food),
            WATER_ENTRY: len(self.water),
            EXERCISE_ENTRY: len(self.exercise),
            SLEEP_ENTRY: len(self.sleep),
            MOOD_ENTRY: len(self.mood),
        }


@dataclass
class HealthDataService:
    """Typed facade over the generic health data store."""

    repository: HealthDataRepository

    def save_entry(self, user_id: UUID, entry: EntryT) -> EntryT:
        """Persist an entry and return it with its assigned id."""
        row = self.repository.insert_row(
            user_id=user_id,
            data_type=entry.DATA_TYPE,
            data_value=to_data_value(entry),
            created_at=datetime.now(tz=UTC),
        )
        return entry.model_copy(update={"id": row.id})

    def list_entries(
        self, user_id: UUID, data_type: str, limit: int = 100
    ) -> list[HealthEntry]:
        """Return the most recent entries of one type."""
        rows = self.repository.list_rows(user_id, data_type=data_type, limit=limit)
        return _parse_rows(rows)

    def list_since(
        self, user_id: UUID, data_type: str, since: datetime
    ) -> list[HealthEntry]:
        """Return entries of one type created since a moment."""
        rows = self.repository.list_rows(user_id, data_type=data_type, since=since)
        return _parse_rows(rows)

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> None:
        """Delete an entry owned by the user."""
        if not self.repository.delete_row(user_id, entry_id):
            raise EntryNotFoundError(str(entry_id))

    def get_summary(
        self, user_id: UUID, days: int | None = 7, now: datetime | None = None
    ) -> HealthSummary:
        """Return the user's entries for the last N days (all history if None)."""
        since = None
        if days is not None:
            since = (now or datetime.now(tz=UTC)) - timedelta(days=days)
        rows = self.repository.list_rows(user_id, since=since)
        summary = HealthSummary()
        for entry in _parse_rows(rows):
            summary.add(entry)
        return summary


def entry_from_row(row: HealthDataRow) -> HealthEntry | None:
    """Rebuild a typed entry from a stored row, or None if it can't be parsed."""
    model = ENTRY_MODELS.get(row.data_type)
    if model is None:
        _logger.warning(
            "Skipping health data row with unknown type",
            extra={"row_id": str(row.id), "data_type": row.data_type},
        )
        return None
    try:
        return model.model_validate(
            {"timestamp": row.created_at, **row.data_value, "id": row.id}
        )
    except ValidationError:
        _logger.warning(
            "Skipping malformed health data row",
            extra={"row_id": str(row.id), "data_type": row.data_type},
        )
        return None


def _parse_rows(rows: list[HealthDataRow]) -> list[HealthEntry]:
    entries = []
    for row in rows:
        entry = entry_from_row(row)
        if entry is not None:
            entries.append(entry)
    return entries
