"""Models package - DDL and entities for all domains."""

from app.models.common import CACHE_DDL, BaseEntity
from app.models.metrics import (
    ChartDataPoint,
    LatestMetrics,
    SheetMetadata,
    UrlMetrics,
)

ALL_DDL = [
    CACHE_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    "CACHE_DDL",
    # Metrics
    "SheetMetadata",
    "ChartDataPoint",
    "LatestMetrics",
    "UrlMetrics",
    # All DDL
    "ALL_DDL",
]
