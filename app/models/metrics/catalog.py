"""Tracked metrics and the spreadsheet columns they come from."""

from dataclasses import dataclass
from enum import StrEnum


class MetricKind(StrEnum):
    """Metric family, as grouped on the dashboard."""

    LIGHTHOUSE = "lighthouse"
    WEBVITAL = "webvital"


class Layout(StrEnum):
    """Sheet column layout.

    COMBINED has one column per metric, SPLIT has a Desktop and a Mobile column per metric.
    """

    COMBINED = "combined"
    SPLIT = "split"


@dataclass(frozen=True)
class MetricDefinition:
    """One tracked metric."""

    id: str
    alias: str
    label: str
    column: str
    kind: MetricKind
    timed: bool = False
    required: bool = True


METRICS: tuple[MetricDefinition, ...] = (
    MetricDefinition("performance", "performance", "Performance", "Performance", MetricKind.LIGHTHOUSE),
    MetricDefinition("accessibility", "accessibility", "Accessibility", "Accessibility", MetricKind.LIGHTHOUSE),
    MetricDefinition("best_practices", "bestPractices", "Best Practices", "Best Practices", MetricKind.LIGHTHOUSE),
    MetricDefinition("seo", "seo", "SEO", "SEO", MetricKind.LIGHTHOUSE),
    MetricDefinition("fcp", "fcp", "First Contentful Paint", "First Contentful Paint", MetricKind.WEBVITAL, timed=True),
    MetricDefinition("lcp", "lcp", "Largest Contentful Paint", "Largest Contentful Paint", MetricKind.WEBVITAL, timed=True),
    # FID was retired from Lighthouse; newer sheets no longer carry the column
    MetricDefinition(
        "fid", "fid", "First Input Delay", "First Input Delay", MetricKind.WEBVITAL, timed=True, required=False
    ),
    MetricDefinition("cls", "cls", "Cumulative Layout Shift", "Cumulative Layout Shift", MetricKind.WEBVITAL),
    MetricDefinition("speed_index", "speedIndex", "Speed Index", "Speed Index", MetricKind.WEBVITAL, timed=True),
    MetricDefinition("tbt", "tbt", "Total Blocking Time", "Total Blocking Time", MetricKind.WEBVITAL, timed=True),
)

METRIC_BY_ID = {m.id: m for m in METRICS}
METRIC_BY_ALIAS = {m.alias: m for m in METRICS}

DEFAULT_METRICS = ("performance", "accessibility", "best_practices", "seo")

# Shared optional columns, first match wins
URL_COLUMNS = ("URL", "Website")
TIMESTAMP_COLUMNS = ("Timestamp", "Date")

# Split layout column prefixes, and the field prefix of the mobile twins
DESKTOP_COLUMN_PREFIX = "Desktop "
MOBILE_COLUMN_PREFIX = "Mobile "
MOBILE_FIELD_PREFIX = "mobile_"
