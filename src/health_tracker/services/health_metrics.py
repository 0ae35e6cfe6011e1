"""Risk assessment, health score and trend analysis for clinical metrics."""

from collections.abc import Iterable, Sequence
from datetime import UTC, datetime, timedelta

from health_tracker.catalogs.health_metrics import HEALTH_METRICS, HEALTH_METRICS_BY_ID
from health_tracker.domain.catalog import HealthMetric, MetricTrend, RiskLevel, Sex

RISK_SCORES: dict[str, int] = {"low": 100, "moderate": 60, "high": 20, "unknown": 50}
STABLE_CHANGE_PERCENT = 5
DEFAULT_TREND_DAYS = 30
MIN_TREND_READINGS = 2


def get_metric(metric_id: str) -> HealthMetric | None:
    return HEALTH_METRICS_BY_ID.get(metric_id)


def metrics_by_category(category: str) -> list[HealthMetric]:
    return [metric for metric in HEALTH_METRICS if metric.category == category]


def metric_recommendations(metric_id: str) -> list[str]:
    metric = HEALTH_METRICS_BY_ID.get(metric_id)
    return list(metric.recommendations) if metric else []


def assess_risk_level(metric_id: str, value: float) -> RiskLevel:
    """Classify a reading into the first risk band that contains it."""
    metric = HEALTH_METRICS_BY_ID.get(metric_id)
    if metric is None:
        return "unknown"
    if metric.low_risk.contains(value):
        return "low"
    if metric.moderate_risk.contains(value):
        return "moderate"
    if metric.high_risk.contains(value):
        return "high"
    return "unknown"


def is_in_normal_range(metric_id: str, value: float, sex: Sex | None = None) -> bool:
    """Check a reading against the sex-specific range, else the general one."""
    metric = HEALTH_METRICS_BY_ID.get(metric_id)
    if metric is None:
        return False
    value_range = metric.general_range
    if sex == "male" and metric.male_range:
        value_range = metric.male_range
    elif sex == "female" and metric.female_range:
        value_range = metric.female_range
    return value_range is not None and value_range.contains(value)


def calculate_health_score(readings: Iterable[tuple[str, float, float]]) -> int:
    """Weighted average of per-reading risk scores; 0 when there are none.

    Each reading is ``(metric_id, value, weight)``.
    """
    total_score = 0.0
    total_weight = 0.0
    for metric_id, value, weight in readings:
        total_score += RISK_SCORES[assess_risk_level(metric_id, value)] * weight
        total_weight += weight
    if total_weight == 0:
        return 0
    return round(total_score / total_weight)


def analyze_health_trends(
    history: dict[str, Sequence[tuple[datetime, float]]],
    timeframe_days: int = DEFAULT_TREND_DAYS,
    now: datetime | None = None,
) -> list[MetricTrend]:
    """Compare the first and last reading of each metric inside the timeframe."""
    cutoff = (now or datetime.now(tz=UTC)) - timedelta(days=timeframe_days)
    trends = []
    for metric_id, values in history.items():
        recent = sorted(
            (item for item in values if item[0] >= cutoff), key=lambda item: item[0]
        )
        if len(recent) < MIN_TREND_READINGS:
            trends.append(
                MetricTrend(
                    metric_id=metric_id,
                    trend="stable",
                    change_percent=0,
                    recommendation="Need more data points for trend analysis",
                )
            )
            continue
        trends.append(_trend(metric_id, recent[0][1], recent[-1][1]))
    return trends


def _trend(metric_id: str, first: float, last: float) -> MetricTrend:
    change = (last - first) / first * 100 if first else 0.0
    metric = HEALTH_METRICS_BY_ID.get(metric_id)
    lower_is_better = metric is not None and metric.lower_is_better
    if abs(change) < STABLE_CHANGE_PERCENT:
        trend, recommendation = "stable", "Maintain current lifestyle habits"
    elif (change > 0) != lower_is_better:
        trend = "improving"
        recommendation = (
            "Excellent improvement! Keep up the good work"
            if lower_is_better
            else "Great progress! Continue current healthy habits"
        )
    else:
        trend = "declining"
        recommendation = (
            "Consider lifestyle modifications to improve this metric"
            if lower_is_better
            else "Focus on improving this metric through targeted interventions"
        )
    return MetricTrend(
        metric_id=metric_id,
        trend=trend,
        change_percent=round(abs(change), 2),
        recommendation=recommendation,
    )
