"""Series filters - date window and metric selection."""

from collections.abc import Sequence
from datetime import date, timedelta
from typing import Any

from loguru import logger

from app.models.metrics.catalog import (
    DEFAULT_METRICS,
    METRIC_BY_ALIAS,
    METRIC_BY_ID,
    MOBILE_FIELD_PREFIX,
)
from app.models.metrics.entities import ChartDataPoint

DATE_RANGES = {"7d": 7, "30d": 30, "90d": 90}
DEFAULT_RANGE = "90d"


def filter_by_range(points: Sequence[ChartDataPoint], date_range: str = DEFAULT_RANGE) -> list[ChartDataPoint]:
    """Keep points within ``date_range`` days of the most recent point."""
    if date_range not in DATE_RANGES:
        raise ValueError(f"Unknown date range: {date_range}")
    if not points:
        return []

    newest = max(date.fromisoformat(p.date) for p in points)
    start = newest - timedelta(days=DATE_RANGES[date_range])
    return [p for p in points if date.fromisoformat(p.date) >= start]


def parse_metric_selection(value: str | None) -> list[str]:
    """Comma-separated metric ids (snake or camel case) to catalog ids."""
    if not value or not value.strip():
        return list(DEFAULT_METRICS)

    selected: list[str] = []
    for token in value.split(","):
        token = token.strip()
        if not token:
            continue
        metric = METRIC_BY_ID.get(token) or METRIC_BY_ALIAS.get(token)
        if metric is None:
            logger.debug("Ignoring unknown metric: {}", token)
        elif metric.id not in selected:
            selected.append(metric.id)

    return selected or list(DEFAULT_METRICS)


def select_metrics(point: ChartDataPoint, metric_ids: Sequence[str]) -> dict[str, Any]:
    """Project a point onto its date, layout and the selected metrics."""
    result: dict[str, Any] = {"date": point.date, "layout": point.layout}
    for metric_id in metric_ids:
        result[metric_id] = getattr(point, metric_id)
        mobile = getattr(point, f"{MOBILE_FIELD_PREFIX}{metric_id}")
        if mobile is not None:
            result[f"{MOBILE_FIELD_PREFIX}{metric_id}"] = mobile
    return result
