"""Cache repository - DuckDB-backed cache storage."""

import time
from collections.abc import Callable

import duckdb
from loguru import logger

from app.errors import CacheUnavailableError
from app.repositories.base import BaseRepository


class CacheRepository(BaseRepository):
    """Persistent local cache; expired rows read as misses."""

    def __init__(
        self,
        conn: duckdb.DuckDBPyConnection,
        read_only: bool = False,
        clock: Callable[[], float] = time.time,
    ):
        super().__init__(conn, read_only)
        self._clock = clock

    async def get(self, key: str) -> str | None:
        """Load a live entry."""
        try:
            row = self.fetchone(
                "SELECT data FROM cache_entry WHERE key = ? AND expires_at > ?",
                [key, self._clock()],
            )
        except duckdb.Error as e:
            raise CacheUnavailableError(f"Cache read failed: {e}") from e
        if row:
            logger.debug("Cache hit: {}", key)
            return row[0]
        return None

    async def set(self, key: str, value: str, ttl: int) -> None:
        """Save an entry that expires after ``ttl`` seconds."""
        if self._read_only:
            raise RuntimeError("Cannot write cache in read-only mode")

        try:
            self.execute(
                "INSERT OR REPLACE INTO cache_entry (key, data, expires_at) VALUES (?, ?, ?)",
                [key, value, self._clock() + ttl],
            )
        except duckdb.Error as e:
            raise CacheUnavailableError(f"Cache write failed: {e}") from e
        logger.debug("Cache saved: {} (ttl={}s)", key, ttl)

    async def aclose(self) -> None:
        self.close()
