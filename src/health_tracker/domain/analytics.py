"""Analytics warehouse table layout."""

from dataclasses import dataclass
from datetime import date

from health_tracker.domain.entries import (
    EXERCISE_ENTRY,
    FOOD_ENTRY,
    MOOD_ENTRY,
    SLEEP_ENTRY,
    WATER_ENTRY,
)

PARTITION_FIELD = "timestamp"
CLUSTERING_FIELDS = ("anonymousUserId",)


@dataclass(frozen=True)
class Column:
    """A warehouse column."""

    name: str
    type: str
    mode: str = "NULLABLE"


_USER = Column("anonymousUserId", "STRING", "REQUIRED")
_TIMESTAMP = Column("timestamp", "TIMESTAMP")
_EXPORTED_AT = Column("exportedAt", "TIMESTAMP")

ANALYTICS_TABLES: dict[str, tuple[Column, ...]] = {
    "food_entries": (
        _USER,
        Column("name", "STRING"),
        Column("calories", "FLOAT"),
        Column("protein", "FLOAT"),
        Column("carbs", "FLOAT"),
        Column("fat", "FLOAT"),
        Column("fiber", "FLOAT"),
        Column("meal", "STRING"),
        Column("quantity", "FLOAT"),
        _TIMESTAMP,
        _EXPORTED_AT,
    ),
    "exercise_entries": (
        _USER,
        Column("name", "STRING"),
        Column("type", "STRING"),
        Column("duration", "INTEGER"),
        Column("calories", "FLOAT"),
        Column("intensity", "STRING"),
        _TIMESTAMP,
        _EXPORTED_AT,
    ),
    "water_entries": (
        _USER,
        Column("amount", "FLOAT"),
        _TIMESTAMP,
        _EXPORTED_AT,
    ),
    "sleep_entries": (
        _USER,
        Column("duration", "FLOAT"),
        Column("quality", "INTEGER"),
        Column("bedtime", "STRING"),
        Column("wakeTime", "STRING"),
        _TIMESTAMP,
        _EXPORTED_AT,
    ),
    "mood_entries": (
        _USER,
        Column("rating", "INTEGER"),
        Column("factors", "STRING", "REPEATED"),
        _TIMESTAMP,
        _EXPORTED_AT,
    ),
}

TABLE_FOR_DATA_TYPE: dict[str, str] = {
    FOOD_ENTRY: "food_entries",
    EXERCISE_ENTRY: "exercise_entries",
    WATER_ENTRY: "water_entries",
    SLEEP_ENTRY: "sleep_entries",
    MOOD_ENTRY: "mood_entries",
}


@dataclass(frozen=True)
class ExportResult:
    """Outcome of one daily export."""

    export_date: date
    file_name: str
    record_counts: dict[str, int]
