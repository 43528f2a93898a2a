"""Metrics API response schemas."""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from app.models.metrics.catalog import Layout


class CamelModel(BaseModel):
    """Serializes field names as camelCase."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class SheetItem(CamelModel):
    """Sheet info."""

    id: int
    title: str
    row_count: int


class SheetsResponse(CamelModel):
    """Available sheets response."""

    items: list[SheetItem]


class MetricFields(CamelModel):
    """Metric values; unselected metrics are left out of the JSON."""

    layout: Layout
    performance: float | None = None
    accessibility: float | None = None
    best_practices: float | None = None
    seo: float | None = None
    fcp: float | None = None
    lcp: float | None = None
    fid: float | None = None
    cls: float | None = None
    speed_index: float | None = None
    tbt: float | None = None
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


class ChartPointItem(MetricFields):
    """One daily sample."""

    date: str


class LatestMetricsItem(MetricFields):
    """Most recent sample."""

    url: str
    timestamp: str


class UrlMetricsResponse(CamelModel):
    """Series for one sheet."""

    url: str
    name: str
    range: str
    metrics: list[str]
    data: list[ChartPointItem]
    latest_metrics: LatestMetricsItem


class AllMetricsResponse(CamelModel):
    """Series for every sheet that could be loaded."""

    items: list[UrlMetricsResponse]
