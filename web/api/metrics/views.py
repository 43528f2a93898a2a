"""Metrics API views - thin layer over services."""

from app.container import container
from app.models.metrics.entities import UrlMetrics
from app.services.metrics.filters import (
    DEFAULT_RANGE,
    filter_by_range,
    parse_metric_selection,
    select_metrics,
)
from web.api.errors import validate_date_range, validate_sheet_title

from .schemas import (
    AllMetricsResponse,
    ChartPointItem,
    LatestMetricsItem,
    SheetItem,
    SheetsResponse,
    UrlMetricsResponse,
)


def _url_metrics_response(data: UrlMetrics, date_range: str, metric_ids: list[str]) -> UrlMetricsResponse:
    points = filter_by_range(data.data, date_range)
    latest = data.latest_metrics

    return UrlMetricsResponse(
        url=data.url,
        name=data.name,
        range=date_range,
        metrics=metric_ids,
        data=[ChartPointItem(**select_metrics(p, metric_ids)) for p in points],
        latest_metrics=LatestMetricsItem(url=latest.url, timestamp=latest.timestamp, **latest.metric_values()),
    )


async def get_all_sheets() -> SheetsResponse:
    """Get available sheets."""
    data = await container.metrics.list_sheets()

    items = [SheetItem(id=s.id, title=s.title, row_count=s.row_count) for s in data]
    return SheetsResponse(items=items)


async def get_metrics_for_sheet(
    sheet_title: str,
    date_range: str = DEFAULT_RANGE,
    metrics: str | None = None,
) -> UrlMetricsResponse:
    """Get one sheet's series, windowed and projected."""
    validate_sheet_title(sheet_title)
    validate_date_range(date_range)
    metric_ids = parse_metric_selection(metrics)

    data = await container.metrics.get_metrics_for_sheet(sheet_title)
    return _url_metrics_response(data, date_range, metric_ids)


async def get_all_metrics(date_range: str = DEFAULT_RANGE, metrics: str | None = None) -> AllMetricsResponse:
    """Get every sheet's series; may be partial when rate limited."""
    validate_date_range(date_range)
    metric_ids = parse_metric_selection(metrics)

    data = await container.metrics.get_all_metrics()
    return AllMetricsResponse(items=[_url_metrics_response(d, date_range, metric_ids) for d in data])
