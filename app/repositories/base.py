"""Base repository class and the cache backend interface."""

from typing import Any, Protocol

import duckdb
from loguru import logger


class CacheBackend(Protocol):
    """Key-value store with per-entry expiry. Values are JSON strings."""

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str, ttl: int) -> None: ...


class BaseRepository:
    """Base repository over an injected DuckDB connection."""

    def __init__(self, conn: duckdb.DuckDBPyConnection, read_only: bool = True):
        self._db = conn
        self._read_only = read_only
        logger.debug("{} initialized", self.__class__.__name__)

    def execute(self, query: str, params: list | None = None) -> Any:
        """Execute SQL query."""
        if params:
            return self._db.execute(query, params)
        return self._db.execute(query)

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        return self.execute(query, params).fetchall()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        return self.execute(query, params).fetchone()

    def close(self) -> None:
        self._db.close()
