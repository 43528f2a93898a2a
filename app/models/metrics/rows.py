"""Spreadsheet row schemas, one per column layout.

Models are generated from the metric catalog. Values must be a number or a
string (bools, None and nested values are rejected); numeric coercion
happens later, in the row parser.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, create_model

from app.models.metrics.catalog import (
    DESKTOP_COLUMN_PREFIX,
    METRICS,
    MOBILE_COLUMN_PREFIX,
    MOBILE_FIELD_PREFIX,
)

RawValue = StrictInt | StrictFloat | StrictStr


def _metric_fields(column_prefix: str = "", field_prefix: str = "") -> dict:
    result = {}
    for m in METRICS:
        alias = f"{column_prefix}{m.column}"
        if m.required:
            result[f"{field_prefix}{m.id}"] = (RawValue, Field(alias=alias))
        else:
            result[f"{field_prefix}{m.id}"] = (RawValue | None, Field(default=None, alias=alias))
    return result


_CONFIG = ConfigDict(extra="ignore", populate_by_name=True)

CombinedRowSchema: type[BaseModel] = create_model(
    "CombinedRowSchema",
    __config__=_CONFIG,
    **_metric_fields(),
)

SplitRowSchema: type[BaseModel] = create_model(
    "SplitRowSchema",
    __config__=_CONFIG,
    **_metric_fields(DESKTOP_COLUMN_PREFIX),
    **_metric_fields(MOBILE_COLUMN_PREFIX, MOBILE_FIELD_PREFIX),
)
