"""Series builder - one sheet's rows to a sorted time series."""

from collections.abc import Mapping, Sequence
from typing import Any

from loguru import logger

from app.errors import NoValidDataError
from app.models.metrics.catalog import TIMESTAMP_COLUMNS, URL_COLUMNS
from app.models.metrics.entities import LatestMetrics, UrlMetrics
from app.services.metrics.parser import column_value, parse_row, parse_timestamp


def build_series(sheet_title: str, raw_rows: Sequence[Any]) -> UrlMetrics:
    """Parse, filter and sort rows; raise NoValidDataError if none survive.

    The latest snapshot takes the values of the newest day but the full
    timestamp of the first raw row, which keeps sub-day precision.
    """
    points = [p for p in map(parse_row, raw_rows) if p is not None]
    if not points:
        raise NoValidDataError(sheet_title)

    dropped = len(raw_rows) - len(points)
    if dropped:
        logger.info("Sheet {}: dropped {} of {} rows", sheet_title, dropped, len(raw_rows))

    points.sort(key=lambda p: p.date)

    first = raw_rows[0] if isinstance(raw_rows[0], Mapping) else {}
    url = column_value(first, URL_COLUMNS)
    url = url.strip() if isinstance(url, str) and url.strip() else sheet_title

    timestamp = parse_timestamp(column_value(first, TIMESTAMP_COLUMNS))
    latest = LatestMetrics(url=url, timestamp=timestamp.isoformat(), **points[-1].metric_values())

    return UrlMetrics(url=url, name=sheet_title, data=points, latest_metrics=latest)
