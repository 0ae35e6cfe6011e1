"""Domain models for generated health insights."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Literal

InsightType = Literal["recommendation", "warning", "achievement", "prediction", "positive"]
InsightCategory = Literal["nutrition", "fitness", "sleep", "hydration", "mood", "general"]
Priority = Literal["low", "medium", "high"]

PRIORITY_ORDER: dict[str, int] = {"high": 0, "medium": 1, "low": 2}

STRONG_CORRELATION = 0.7
MODERATE_CORRELATION = 0.4


@dataclass(frozen=True)
class Insight:
    """A rule-based observation about the user's data."""

    id: str
    type: InsightType
    category: InsightCategory
    title: str
    description: str
    priority: Priority = "medium"
    actionable: bool = False
    recommendation: str | None = None
    data_points: dict[str, object] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))


@dataclass(frozen=True)
class HealthCorrelation:
    """Correlation coefficient between two tracked daily metrics."""

    metric_a: str
    metric_b: str
    coefficient: float
    days: int
    strength: str


def correlation_strength(coefficient: float) -> str:
    magnitude = abs(coefficient)
    if magnitude >= STRONG_CORRELATION:
        return "strong"
    if magnitude >= MODERATE_CORRELATION:
        return "moderate"
    return "weak"


def sort_by_priority(insights: list[Insight]) -> list[Insight]:
    """Return insights ordered high, medium, low, keeping input order otherwise."""
    return sorted(insights, key=lambda insight: PRIORITY_ORDER[insight.priority])
