"""Upstash Redis cache over its REST API."""

import httpx
from loguru import logger

from app.errors import CacheUnavailableError


class UpstashCache:
    """Redis GET/SET EX through Upstash's JSON command endpoint."""

    def __init__(
        self,
        url: str,
        token: str,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._url = url
        self._token = token
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def open(self) -> None:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._url,
                timeout=self._timeout,
                headers={"Authorization": f"Bearer {self._token}"},
                transport=self._transport,
            )

    async def aclose(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        await self.open()
        return self

    async def __aexit__(self, *_):
        await self.aclose()

    async def _command(self, *args: str | int):
        """POST one Redis command, return its ``result``."""
        await self.open()
        try:
            resp = await self._client.post("", json=list(args))
            resp.raise_for_status()
            body = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            raise CacheUnavailableError(f"Upstash {args[0]} failed: {e}") from e

        if "error" in body:
            raise CacheUnavailableError(f"Upstash {args[0]} failed: {body['error']}")
        return body.get("result")

    async def get(self, key: str) -> str | None:
        result = await self._command("GET", key)
        if result is not None:
            logger.debug("Cache hit: {}", key)
        return result

    async def set(self, key: str, value: str, ttl: int) -> None:
        await self._command("SET", key, value, "EX", ttl)
        logger.debug("Cache saved: {} (ttl={}s)", key, ttl)
