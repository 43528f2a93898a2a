"""Metrics service - read-through cache in front of the spreadsheet."""

import asyncio
import json
from collections.abc import Awaitable, Callable
from typing import Any, Protocol, TypeVar

from loguru import logger

from app.errors import (
    CacheUnavailableError,
    NoValidDataError,
    RateLimitedError,
    SheetNotFoundError,
)
from app.models.metrics.entities import SheetMetadata, UrlMetrics
from app.repositories.base import CacheBackend
from app.services.metrics.builder import build_series
from sheets_client.schemas import SheetPropertiesSchema

T = TypeVar("T")

SHEETS_METADATA_KEY = "sheets:metadata"
DEFAULT_TTL = 86400  # 24 hours


def sheet_data_key(sheet_title: str) -> str:
    return f"sheet:data:{sheet_title}"


class SheetsGateway(Protocol):
    async def list_sheets(self) -> list[SheetPropertiesSchema]: ...

    async def get_rows(self, title: str) -> list[dict]: ...


class MetricsService:
    """Sheet listing and per-sheet series, cache first.

    The cache is an optimization only: when it is unreachable reads fall
    through to the spreadsheet and writes are skipped.
    """

    def __init__(
        self,
        gateway: SheetsGateway,
        cache: CacheBackend,
        ttl: int = DEFAULT_TTL,
        sheet_delay: float = 1.0,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        self._gateway = gateway
        self._cache = cache
        self._ttl = ttl
        self._sheet_delay = sheet_delay
        self._sleep = sleep
        logger.debug("MetricsService initialized (ttl={}s, sheet_delay={}s)", ttl, sheet_delay)

    async def _cache_get(self, key: str) -> Any | None:
        try:
            raw = await self._cache.get(key)
        except CacheUnavailableError as e:
            logger.warning("Cache unavailable, reading {} from source: {}", key, e)
            return None

        if raw is None:
            logger.debug("Cache miss: {}", key)
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Corrupt cache entry {}, ignoring", key)
            return None

    async def _cache_set(self, key: str, data: Any) -> None:
        try:
            await self._cache.set(key, json.dumps(data), self._ttl)
        except CacheUnavailableError as e:
            logger.warning("Cache unavailable, {} not saved: {}", key, e)

    async def _get_cached_or_fetch(
        self,
        key: str,
        fetch: Callable[[], Awaitable[Any]],
        decode: Callable[[Any], T],
    ) -> T:
        """Try cache first, fetch and save if missing or undecodable."""
        cached = await self._cache_get(key)
        if cached is not None:
            try:
                return decode(cached)
            except (TypeError, KeyError, ValueError) as e:
                logger.warning("Cache entry {} has an old shape, refetching: {}", key, e)

        data = await fetch()
        await self._cache_set(key, data)
        return decode(data)

    async def list_sheets(self) -> list[SheetMetadata]:
        """Metric sheets, dashboard sheet excluded."""

        async def fetch() -> list[dict]:
            sheets = await self._gateway.list_sheets()
            logger.info("Loaded {} sheets from source", len(sheets))
            return [SheetMetadata(id=s.sheet_id, title=s.title, row_count=s.row_count).to_dict() for s in sheets]

        return await self._get_cached_or_fetch(
            SHEETS_METADATA_KEY,
            fetch,
            lambda data: [SheetMetadata.from_dict(s) for s in data],
        )

    async def get_metrics_for_sheet(self, sheet_title: str) -> UrlMetrics:
        """Series for one sheet.

        Raises SheetNotFoundError, NoValidDataError, RateLimitedError or UpstreamError.
        """

        async def fetch() -> dict:
            rows = await self._gateway.get_rows(sheet_title)
            return build_series(sheet_title, rows).to_dict()

        return await self._get_cached_or_fetch(sheet_data_key(sheet_title), fetch, UrlMetrics.from_dict)

    async def get_all_metrics(self) -> list[UrlMetrics]:
        """Series for every sheet, fetched one at a time.

        Failing sheets are skipped. A rate limit stops the walk and the
        sheets collected so far are returned.
        """
        sheets = await self.list_sheets()
        results: list[UrlMetrics] = []

        for i, sheet in enumerate(sheets):
            if i and self._sheet_delay > 0:
                await self._sleep(self._sheet_delay)
            try:
                results.append(await self.get_metrics_for_sheet(sheet.title))
            except RateLimitedError:
                logger.warning(
                    "Rate limited at sheet {}, returning {} of {} sheets",
                    sheet.title,
                    len(results),
                    len(sheets),
                )
                break
            except (SheetNotFoundError, NoValidDataError) as e:
                logger.warning("Skipping sheet {}: {}", sheet.title, e)
            except Exception as e:
                logger.error("Error processing sheet {}: {}", sheet.title, e)

        logger.info("Loaded metrics for {}/{} sheets", len(results), len(sheets))
        return results
