"""Dependency Injection container - initialized at app startup."""

from loguru import logger

import settings
from app.errors import ConfigurationError
from app.repositories.base import CacheBackend
from app.repositories.common import CacheRepository, MemoryCache, UpstashCache
from app.repositories.db import connect
from app.services.metrics.service import MetricsService, SheetsGateway
from sheets_client import ServiceAccountAuth, SheetsClient


def _require(**values: str) -> None:
    missing = [name for name, value in values.items() if not value]
    if missing:
        raise ConfigurationError(f"Missing settings: {', '.join(missing)}")


def build_gateway() -> SheetsClient:
    """Sheets client for the configured spreadsheet and service account."""
    _require(
        SPREADSHEET_ID=settings.SPREADSHEET_ID,
        CLIENT_EMAIL=settings.CLIENT_EMAIL,
        PRIVATE_KEY=settings.PRIVATE_KEY,
    )
    auth = ServiceAccountAuth(
        client_email=settings.CLIENT_EMAIL,
        private_key=settings.PRIVATE_KEY,
        private_key_id=settings.PRIVATE_KEY_ID,
        project_id=settings.PROJECT_ID,
        token_uri=settings.TOKEN_URI,
    )
    return SheetsClient(settings.SPREADSHEET_ID, auth, timeout=settings.API_TIMEOUT)


def build_cache(backend: str | None = None) -> CacheBackend:
    """Cache backend selected by CACHE_BACKEND."""
    backend = backend or settings.CACHE_BACKEND
    if backend == "upstash":
        _require(
            UPSTASH_REDIS_REST_URL=settings.UPSTASH_REDIS_REST_URL,
            UPSTASH_REDIS_REST_TOKEN=settings.UPSTASH_REDIS_REST_TOKEN,
        )
        return UpstashCache(settings.UPSTASH_REDIS_REST_URL, settings.UPSTASH_REDIS_REST_TOKEN)
    if backend == "duckdb":
        return CacheRepository(connect(settings.CACHE_DB_PATH), read_only=False)
    if backend == "memory":
        return MemoryCache()
    raise ConfigurationError(f"Unknown CACHE_BACKEND: {backend}")


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, gateway: SheetsGateway | None = None, cache: CacheBackend | None = None) -> None:
        """Initialize all dependencies. Call once at app startup.

        Explicit ``gateway``/``cache`` replace the ones built from settings.
        """
        if self._initialized:
            return

        self._gateway = gateway or build_gateway()
        self._cache = cache or build_cache()

        self.metrics = MetricsService(
            gateway=self._gateway,
            cache=self._cache,
            ttl=settings.CACHE_TTL,
            sheet_delay=settings.SHEET_DELAY,
        )

        self._initialized = True
        logger.info("Container initialized ({})", type(self._cache).__name__)

    async def start(self) -> None:
        """Open network clients."""
        for resource in (self._gateway, self._cache):
            if hasattr(resource, "open"):
                await resource.open()

    async def close(self) -> None:
        """Close network clients and connections."""
        for resource in (self._gateway, self._cache):
            if hasattr(resource, "aclose"):
                await resource.aclose()

    def reset(self) -> None:
        """Forget all instances so the next init() rebuilds them."""
        self._initialized = False


# Global container instance
container = Container()
