"""Metrics API."""

from web.api.metrics.views import get_all_metrics, get_all_sheets, get_metrics_for_sheet

__all__ = [
    "get_all_sheets",
    "get_metrics_for_sheet",
    "get_all_metrics",
]
