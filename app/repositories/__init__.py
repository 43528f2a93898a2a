"""Repositories package - cache storage backends."""

from app.repositories.base import BaseRepository, CacheBackend
from app.repositories.common import CacheRepository, MemoryCache, UpstashCache
from app.repositories.db import connect, init_tables

__all__ = [
    # DB
    "connect",
    "init_tables",
    # Base
    "BaseRepository",
    "CacheBackend",
    # Backends
    "CacheRepository",
    "MemoryCache",
    "UpstashCache",
]
