"""Metrics domain entities - sheet listing and per-URL time series."""

from dataclasses import dataclass, fields
from typing import Any

from app.models.common import BaseEntity
from app.models.metrics.catalog import Layout


@dataclass
class SheetMetadata(BaseEntity):
    """One monitored URL's sheet."""

    id: int
    title: str
    row_count: int


@dataclass(kw_only=True)
class MetricValues(BaseEntity):
    """Numeric metric fields shared by data points and latest snapshots.

    Unprefixed fields hold the combined run, or the desktop run for split sheets.
    ``mobile_*`` fields are only set for split sheets.
    """

    layout: Layout = Layout.COMBINED
    performance: float = 0.0
    accessibility: float = 0.0
    best_practices: float = 0.0
    seo: float = 0.0
    fcp: float = 0.0
    lcp: float = 0.0
    fid: float = 0.0
    cls: float = 0.0
    speed_index: float = 0.0
    tbt: float = 0.0
    mobile_performance: float | None = None
    mobile_accessibility: float | None = None
    mobile_best_practices: float | None = None
    mobile_seo: float | None = None
    mobile_fcp: float | None = None
    mobile_lcp: float | None = None
    mobile_fid: float | None = None
    mobile_cls: float | None = None
    mobile_speed_index: float | None = None
    mobile_tbt: float | None = None

    def __post_init__(self):
        self.layout = Layout(self.layout)

    def metric_values(self) -> dict[str, Any]:
        """Layout plus every metric field, without the subclass extras."""
        return {f.name: getattr(self, f.name) for f in fields(MetricValues)}


@dataclass(kw_only=True)
class ChartDataPoint(MetricValues):
    """One daily sample, ``date`` is an ISO calendar day."""

    date: str


@dataclass(kw_only=True)
class LatestMetrics(MetricValues):
    """Most recent sample with its full timestamp."""

    url: str
    timestamp: str


@dataclass
class UrlMetrics(BaseEntity):
    """Series for one sheet, ``data`` ascending by date."""

    url: str
    name: str
    data: list[ChartDataPoint]
    latest_metrics: LatestMetrics

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UrlMetrics":
        return cls(
            url=data["url"],
            name=data["name"],
            data=[ChartDataPoint(**p) for p in data["data"]],
            latest_metrics=LatestMetrics(**data["latest_metrics"]),
        )
