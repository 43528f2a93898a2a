"""Tests for cache backends."""

import asyncio
import json

import httpx
import pytest

from app.errors import CacheUnavailableError
from app.repositories.common import CacheRepository, MemoryCache, UpstashCache
from app.repositories.db import connect


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class TestMemoryCache:
    def test_get_after_set(self):
        cache = MemoryCache()

        async def run():
            await cache.set("sheet:data:Home", '{"a": 1}', 60)
            return await cache.get("sheet:data:Home")

        assert asyncio.run(run()) == '{"a": 1}'

    def test_expired(self):
        clock = FakeClock()
        cache = MemoryCache(clock=clock)

        async def run():
            await cache.set("k", "v", 60)
            clock.now += 61
            return await cache.get("k")

        assert asyncio.run(run()) is None

    def test_miss(self):
        assert asyncio.run(MemoryCache().get("nope")) is None


class TestCacheRepository:
    def test_get_after_set(self):
        repo = CacheRepository(connect(":memory:"))

        async def run():
            await repo.set("sheets:metadata", "[1, 2]", 86400)
            return await repo.get("sheets:metadata")

        assert asyncio.run(run()) == "[1, 2]"

    def test_last_write_wins(self):
        repo = CacheRepository(connect(":memory:"))

        async def run():
            await repo.set("k", "first", 60)
            await repo.set("k", "second", 60)
            return await repo.get("k")

        assert asyncio.run(run()) == "second"

    def test_expired(self):
        clock = FakeClock()
        repo = CacheRepository(connect(":memory:"), clock=clock)

        async def run():
            await repo.set("k", "v", 60)
            clock.now += 60
            return await repo.get("k")

        assert asyncio.run(run()) is None

    def test_read_only(self):
        repo = CacheRepository(connect(":memory:"), read_only=True)
        with pytest.raises(RuntimeError):
            asyncio.run(repo.set("k", "v", 60))

    def test_closed_connection(self):
        repo = CacheRepository(connect(":memory:"))
        repo.close()
        with pytest.raises(CacheUnavailableError):
            asyncio.run(repo.get("k"))


class TestUpstashCache:
    def _cache(self, handler) -> UpstashCache:
        return UpstashCache("https://cache.example.io", "secret", transport=httpx.MockTransport(handler))

    def test_get_after_set(self):
        store: dict[str, str] = {}
        commands = []

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.headers["Authorization"] == "Bearer secret"
            command = json.loads(request.content)
            commands.append(command)
            if command[0] == "SET":
                store[command[1]] = command[2]
                return httpx.Response(200, json={"result": "OK"})
            return httpx.Response(200, json={"result": store.get(command[1])})

        async def run():
            async with self._cache(handler) as cache:
                await cache.set("sheet:data:Home", '{"a": 1}', 86400)
                return await cache.get("sheet:data:Home"), await cache.get("other")

        assert asyncio.run(run()) == ('{"a": 1}', None)
        assert commands[0] == ["SET", "sheet:data:Home", '{"a": 1}', "EX", 86400]

    def test_http_error(self):
        cache = self._cache(lambda request: httpx.Response(500))
        with pytest.raises(CacheUnavailableError):
            asyncio.run(cache.get("k"))

    def test_command_error(self):
        cache = self._cache(lambda request: httpx.Response(200, json={"error": "WRONGPASS"}))
        with pytest.raises(CacheUnavailableError):
            asyncio.run(cache.set("k", "v", 60))

    def test_connection_refused(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(CacheUnavailableError):
            asyncio.run(self._cache(handler).get("k"))
