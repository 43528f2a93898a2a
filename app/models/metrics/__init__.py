"""Metrics models - catalog and entities."""

from app.models.metrics.catalog import (
    DEFAULT_METRICS,
    METRIC_BY_ALIAS,
    METRIC_BY_ID,
    METRICS,
    Layout,
    MetricKind,
    MetricDefinition,
)
from app.models.metrics.entities import (
    ChartDataPoint,
    LatestMetrics,
    MetricValues,
    SheetMetadata,
    UrlMetrics,
)

__all__ = [
    # Catalog
    "METRICS",
    "METRIC_BY_ID",
    "METRIC_BY_ALIAS",
    "DEFAULT_METRICS",
    "Layout",
    "MetricKind",
    "MetricDefinition",
    # Entities
    "SheetMetadata",
    "MetricValues",
    "ChartDataPoint",
    "LatestMetrics",
    "UrlMetrics",
]
