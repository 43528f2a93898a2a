"""Domain errors.

Gateway errors come from ``sheets_client`` and are re-exported here so callers
have one import point for the whole taxonomy.
"""

from sheets_client.errors import (
    AuthenticationError,
    RateLimitedError,
    SheetNotFoundError,
    SheetsError,
    UpstreamError,
)


class MetricsError(Exception):
    """Base class for pipeline errors raised outside the gateway."""

    def __init__(self, message: str = "Metrics error"):
        self.message = message
        super().__init__(self.message)


class NoValidDataError(MetricsError):
    """Every row of a sheet failed validation."""

    def __init__(self, sheet_title: str):
        self.sheet_title = sheet_title
        super().__init__(f'No valid data found in sheet "{sheet_title}"')


class CacheUnavailableError(MetricsError):
    """Cache backend could not be reached or answered with an error."""


class ConfigurationError(MetricsError):
    """Required settings are missing or invalid."""


class MalformedValueError(ValueError):
    """A single field could not be parsed. Always recovered inside the parser."""


__all__ = [
    "MetricsError",
    "NoValidDataError",
    "CacheUnavailableError",
    "ConfigurationError",
    "MalformedValueError",
    "SheetsError",
    "SheetNotFoundError",
    "RateLimitedError",
    "UpstreamError",
    "AuthenticationError",
]
