"""Shared fixtures - sample rows and in-memory collaborators."""

import pytest

from app.errors import CacheUnavailableError, SheetNotFoundError
from app.models.metrics.catalog import DESKTOP_COLUMN_PREFIX, METRICS, MOBILE_COLUMN_PREFIX
from sheets_client.schemas import SheetPropertiesSchema


def _make_row(timestamp: str | None = "12/25/2024, 14.30", **overrides) -> dict:
    row = {
        "URL": "https://example.com",
        "Timestamp": timestamp,
        "Performance": 95,
        "Accessibility": "88",
        "Best Practices": 100,
        "SEO": "92",
        "First Contentful Paint": "1.2 s",
        "Largest Contentful Paint": 2400,
        "Cumulative Layout Shift": "0.05",
        "Speed Index": "3.1 s",
        "Total Blocking Time": "150 ms",
    }
    if timestamp is None:
        del row["Timestamp"]
    row.update(overrides)
    return row


def _make_split_row(timestamp: str = "12/25/2024, 14.30", desktop=90, mobile="70") -> dict:
    row = {"URL": "https://example.com", "Timestamp": timestamp}
    for m in METRICS:
        if m.required:
            row[f"{DESKTOP_COLUMN_PREFIX}{m.column}"] = desktop
            row[f"{MOBILE_COLUMN_PREFIX}{m.column}"] = mobile
    return row


class FakeGateway:
    """Sheets gateway over a dict of title -> rows (or an exception to raise)."""

    def __init__(self, sheets: dict, list_error: Exception | None = None):
        self.sheets = sheets
        self.list_error = list_error
        self.list_calls = 0
        self.row_calls: list[str] = []

    async def list_sheets(self) -> list[SheetPropertiesSchema]:
        self.list_calls += 1
        if self.list_error:
            raise self.list_error
        return [
            SheetPropertiesSchema.model_validate(
                {"sheetId": i + 100, "title": title, "index": i + 1, "gridProperties": {"rowCount": 10}}
            )
            for i, title in enumerate(self.sheets)
        ]

    async def get_rows(self, title: str) -> list[dict]:
        self.row_calls.append(title)
        if title not in self.sheets:
            raise SheetNotFoundError(title)
        rows = self.sheets[title]
        if isinstance(rows, Exception):
            raise rows
        return rows


class BrokenCache:
    """Cache whose backend is always unreachable."""

    async def get(self, key: str) -> str | None:
        raise CacheUnavailableError("connection refused")

    async def set(self, key: str, value: str, ttl: int) -> None:
        raise CacheUnavailableError("connection refused")


@pytest.fixture
def make_row():
    return _make_row


@pytest.fixture
def make_split_row():
    return _make_split_row


@pytest.fixture
def fake_gateway():
    return FakeGateway


@pytest.fixture
def broken_cache():
    return BrokenCache()
