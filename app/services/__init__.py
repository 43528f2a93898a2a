"""Services package - service class exports."""

from app.services.metrics.service import MetricsService

__all__ = [
    "MetricsService",
]
