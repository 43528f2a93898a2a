"""Google Sheets API client package."""

from sheets_client.auth import ServiceAccountAuth
from sheets_client.base import BaseClient
from sheets_client.client import SheetsClient, rows_to_dicts
from sheets_client.errors import (
    AuthenticationError,
    RateLimitedError,
    SheetNotFoundError,
    SheetsError,
    UpstreamError,
)
from sheets_client.schemas import SheetPropertiesSchema, ValueRangeSchema

__all__ = [
    # Base
    "BaseClient",
    "ServiceAccountAuth",
    # Clients
    "SheetsClient",
    "rows_to_dicts",
    # Schemas
    "SheetPropertiesSchema",
    "ValueRangeSchema",
    # Errors
    "SheetsError",
    "SheetNotFoundError",
    "RateLimitedError",
    "UpstreamError",
    "AuthenticationError",
]
