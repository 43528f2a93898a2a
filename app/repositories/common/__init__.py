"""Cache backends."""

from app.repositories.common.cache import CacheRepository
from app.repositories.common.memory import MemoryCache
from app.repositories.common.upstash import UpstashCache

__all__ = [
    "CacheRepository",
    "MemoryCache",
    "UpstashCache",
]
