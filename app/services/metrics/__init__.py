"""Metrics services - parsing, series building, filtering, aggregation."""

from app.services.metrics.builder import build_series
from app.services.metrics.filters import (
    DATE_RANGES,
    DEFAULT_RANGE,
    filter_by_range,
    parse_metric_selection,
    select_metrics,
)
from app.services.metrics.parser import coerce_number, parse_row, parse_timestamp
from app.services.metrics.service import (
    SHEETS_METADATA_KEY,
    MetricsService,
    sheet_data_key,
)

__all__ = [
    "parse_row",
    "coerce_number",
    "parse_timestamp",
    "build_series",
    "filter_by_range",
    "parse_metric_selection",
    "select_metrics",
    "DATE_RANGES",
    "DEFAULT_RANGE",
    "MetricsService",
    "SHEETS_METADATA_KEY",
    "sheet_data_key",
]
