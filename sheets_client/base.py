"""Base HTTP client with retry logic."""

import asyncio
from typing import Any, Protocol

import httpx
from loguru import logger
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from sheets_client.errors import RateLimitedError, UpstreamError


class TokenProvider(Protocol):
    async def token(self) -> str: ...


_RATE_LIMIT_REASONS = ("rateLimitExceeded", "userRateLimitExceeded")


def _is_retryable_error(exc: BaseException) -> bool:
    """Check if exception is retryable (network errors + 5xx server errors)."""
    if isinstance(exc, (httpx.ReadError, httpx.ConnectError, httpx.TimeoutException)):
        return True
    return isinstance(exc, httpx.HTTPStatusError) and exc.response.status_code >= 500


def _is_rate_limited(resp: httpx.Response) -> bool:
    """429, or a 403 whose error reason is one of the rate-limit reasons."""
    if resp.status_code == 429:
        return True
    return resp.status_code == 403 and any(reason in resp.text for reason in _RATE_LIMIT_REASONS)


class BaseClient:
    """Base async HTTP client with bearer auth, rate-limit detection and exponential backoff."""

    def __init__(
        self,
        auth: TokenProvider,
        base_url: str,
        timeout: int = 30,
        max_concurrent: int = 4,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._auth = auth
        self._base_url = base_url
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._sem = asyncio.Semaphore(max_concurrent)
        self._request_count = 0
        logger.info("{}: max_concurrent={}", self.__class__.__name__, max_concurrent)

    @property
    def request_count(self) -> int:
        return self._request_count

    async def open(self) -> None:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                limits=httpx.Limits(max_connections=20, max_keepalive_connections=5),
                transport=self._transport,
            )

    async def aclose(self) -> None:
        logger.info("Total API requests: {}", self._request_count)
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        await self.open()
        return self

    async def __aexit__(self, *_):
        await self.aclose()

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=30),
        retry=retry_if_exception(_is_retryable_error),
        reraise=True,
    )
    async def _request(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET request with retry logic."""
        await self.open()
        async with self._sem:
            self._request_count += 1
            token = await self._auth.token()
            resp = await self._client.get(path, params=params, headers={"Authorization": f"Bearer {token}"})
            if _is_rate_limited(resp):
                logger.warning("Rate limited by upstream: {} {}", resp.status_code, path)
                raise RateLimitedError()
            resp.raise_for_status()
            return resp.json()

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET with upstream failures translated to UpstreamError."""
        try:
            return await self._request(path, params)
        except httpx.HTTPStatusError as e:
            raise UpstreamError(f"Upstream returned {e.response.status_code} for {path}") from e
        except httpx.TransportError as e:
            raise UpstreamError(f"Upstream request failed for {path}: {e}") from e
