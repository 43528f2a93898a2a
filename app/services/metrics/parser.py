"""Row parser - loosely-typed spreadsheet rows to normalized data points.

Field-level problems never fail a row: numbers fall back to 0 and timestamps
to the current time. Only a row that does not match any column layout is
dropped.
"""

import math
import re
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from loguru import logger
from pydantic import ValidationError

from app.errors import MalformedValueError
from app.models.metrics.catalog import (
    METRIC_BY_ID,
    MOBILE_FIELD_PREFIX,
    TIMESTAMP_COLUMNS,
    Layout,
)
from app.models.metrics.entities import ChartDataPoint
from app.models.metrics.rows import CombinedRowSchema, SplitRowSchema

# Values that mean "no measurement"
_EMPTY_MARKERS = {"", "n/a"}

# Sheets export times as "14.30" or "14.30.15"; only a standalone group qualifies
_DOTTED_TIME = re.compile(r"(?<![\d.])(\d{1,2})\.(\d{2})(?:\.(\d{2}))?(?![\d.])")

_TIME_VALUE = re.compile(r"^(?P<number>.+?)\s*(?P<unit>ms|s)$", re.IGNORECASE)

# Leading number of a cell; trailing text such as "%" or a unit is ignored
_NUMBER_PREFIX = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

_DATE_FORMATS = (
    "%m/%d/%Y, %H:%M:%S",
    "%m/%d/%Y, %H:%M",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
)

# Split is tried first so a sheet carrying both column sets keeps its mobile values
_LAYOUTS = (
    (Layout.SPLIT, SplitRowSchema),
    (Layout.COMBINED, CombinedRowSchema),
)


def _to_float(text: str) -> float:
    match = _NUMBER_PREFIX.match(text.replace(",", "").strip())
    if match is None:
        raise MalformedValueError(text)
    number = float(match[0])
    if not math.isfinite(number):
        raise MalformedValueError(text)
    return number


def coerce_number(value: int | float | str, timed: bool = False) -> float:
    """Normalize a cell to a finite float.

    Strings are read up to the end of their leading number, so ``"95%"`` is
    95. For time-valued metrics an ``s`` suffix means seconds and is scaled to
    milliseconds; an ``ms`` suffix is dropped.
    """
    if isinstance(value, (int, float)):
        number = float(value)
        return number if math.isfinite(number) else 0.0

    text = value.strip()
    if text.lower() in _EMPTY_MARKERS:
        return 0.0

    try:
        if timed and (match := _TIME_VALUE.match(text)):
            number = _to_float(match["number"])
            return number * 1000 if match["unit"].lower() == "s" else number
        return _to_float(text)
    except MalformedValueError:
        logger.warning("Unparseable number {!r}, using 0", value)
        return 0.0


def normalize_time_separator(text: str) -> str:
    """Rewrite the last ``HH.MM`` or ``HH.MM.SS`` in ``text`` with colons."""
    matches = list(_DOTTED_TIME.finditer(text))
    if not matches:
        return text
    last = matches[-1]
    time = ":".join(group for group in last.groups() if group is not None)
    return f"{text[: last.start()]}{time}{text[last.end():]}"


def _parse_datetime(text: str) -> datetime:
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    raise MalformedValueError(text)


def parse_timestamp(value: Any) -> datetime:
    """Parse a sheet timestamp, falling back to now."""
    if isinstance(value, str) and value.strip():
        try:
            return _parse_datetime(normalize_time_separator(value.strip()))
        except MalformedValueError:
            pass
    logger.warning("Unparseable timestamp {!r}, using current time", value)
    return datetime.now()


def column_value(row: Mapping[str, Any], columns: Iterable[str]) -> Any:
    """First present, non-empty value among candidate columns."""
    for column in columns:
        value = row.get(column)
        if value not in (None, ""):
            return value
    return None


def parse_row(raw_row: Any) -> ChartDataPoint | None:
    """Parse one sheet row, or None if it matches no column layout."""
    if not isinstance(raw_row, Mapping):
        logger.debug("Dropping non-mapping row: {!r}", raw_row)
        return None

    for layout, schema in _LAYOUTS:
        try:
            row = schema.model_validate(raw_row)
        except ValidationError:
            continue
        break
    else:
        logger.debug("Dropping malformed row with columns {}", sorted(map(str, raw_row)))
        return None

    values = {}
    for name, value in row.model_dump().items():
        metric = METRIC_BY_ID[name.removeprefix(MOBILE_FIELD_PREFIX)]
        values[name] = 0.0 if value is None else coerce_number(value, timed=metric.timed)

    timestamp = parse_timestamp(column_value(raw_row, TIMESTAMP_COLUMNS))
    return ChartDataPoint(date=timestamp.date().isoformat(), layout=layout, **values)
