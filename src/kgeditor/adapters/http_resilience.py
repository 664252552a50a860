"""Async httpx client with retries, optional rate limiting and a response cache."""

from __future__ import annotations

import json
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from aiolimiter import AsyncLimiter
from hishel import AsyncSqliteStorage, FilterPolicy
from hishel import Request as HishelCacheRequest
from hishel import Response as HishelCacheResponse
from hishel._policies import BaseFilter
from hishel.httpx import AsyncCacheClient
from httpx_retries import Retry, RetryTransport

from kgeditor.config.http_resilience import (
    CacheConfig,
    CacheMode,
    RateLimit,
    ResilienceConfig,
    RetryPolicy,
    ShouldCacheHook,
)
from kgeditor.config.storage import get_http_cache_path

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType

__all__ = [
    "CacheConfig",
    "RateLimit",
    "ResilienceConfig",
    "ResilientClient",
    "RetryPolicy",
    "build_async_client",
    "build_retry",
]

log = getLogger(__name__)


def build_retry(policy: RetryPolicy) -> Retry:
    return Retry(
        total=policy.total,
        backoff_factor=policy.backoff_factor,
        max_backoff_wait=policy.max_backoff_wait,
        respect_retry_after_header=policy.respect_retry_after_header,
        allowed_methods=tuple(policy.allowed_methods),
        status_forcelist=tuple(policy.status_forcelist),
        retry_on_exceptions=policy.retry_on_exceptions,
        backoff_jitter=policy.backoff_jitter,
    )


def build_async_client(
    config: ResilienceConfig,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """httpx client for ``config``: retrying transport, auth headers, optional cache.

    ``transport`` replaces the network transport underneath the retry layer.
    """

    retrying = RetryTransport(transport=transport, retry=build_retry(config.retry))
    hooks = {"response": list(config.response_hooks)} if config.response_hooks else None
    storage = _build_cache_storage(config.cache)
    if storage is None or config.cache is None:
        return httpx.AsyncClient(
            base_url=config.base_url or "",
            timeout=config.timeout_seconds,
            headers=config.headers(),
            event_hooks=hooks,
            transport=retrying,
        )
    return AsyncCacheClient(
        base_url=config.base_url or "",
        timeout=config.timeout_seconds,
        headers=config.headers(),
        event_hooks=hooks,
        transport=retrying,
        storage=storage,
        policy=_build_cache_policy(config.cache),
    )


class ResilientClient:
    """One connection scope against a service, used as an async context manager."""

    def __init__(
        self,
        config: ResilienceConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self._limiter = _build_limiter(config.ratelimit)
        self._client = build_async_client(config, transport=transport)

    async def __aenter__(self) -> ResilientClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, str] | None = None,
        json: object = None,
    ) -> httpx.Response:
        if self._limiter is None:
            return await self._client.request(method, path, params=params, json=json)
        async with self._limiter:
            return await self._client.request(method, path, params=params, json=json)

    async def request_json(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, str] | None = None,
        json: object = None,
    ) -> object:
        """Send a request and return the decoded body; HTTP error statuses raise."""

        response = await self.request(method, path, params=params, json=json)
        log.debug("%s %s -> %s", method, response.request.url, response.status_code)
        response.raise_for_status()
        if not response.content:
            return None
        return response.json()


def _build_limiter(ratelimit: RateLimit | None) -> AsyncLimiter | None:
    if ratelimit is None:
        return None
    return AsyncLimiter(ratelimit.max_calls, ratelimit.per_seconds)


class _JsonPayloadFilter(BaseFilter[HishelCacheResponse]):
    """Stores a response only when its decoded JSON body satisfies ``predicate``."""

    def __init__(self, predicate: ShouldCacheHook) -> None:
        self._predicate = predicate

    def needs_body(self) -> bool:
        return True

    def apply(self, item: HishelCacheResponse, body: bytes | None) -> bool:  # noqa: ARG002
        if body is None:
            return True
        try:
            payload = json.loads(body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError):
            return False
        return bool(self._predicate(payload))


class _GetOnlyFilter(BaseFilter[HishelCacheRequest]):
    """Cache entries are keyed by URL alone, so requests carrying a body never qualify."""

    def needs_body(self) -> bool:
        return False

    def apply(self, item: HishelCacheRequest, body: bytes | None) -> bool:  # noqa: ARG002
        return item.method.upper() == "GET"


def _build_cache_storage(config: CacheConfig | None) -> AsyncSqliteStorage | None:
    if config is None or config.mode is not CacheMode.SQLITE:
        return None
    database_path = str(config.sqlite_path or get_http_cache_path())
    return AsyncSqliteStorage(database_path=database_path, default_ttl=config.ttl_seconds)


def _build_cache_policy(config: CacheConfig) -> FilterPolicy:
    response_filters: list[BaseFilter[HishelCacheResponse]] = []
    if config.should_cache is not None:
        response_filters.append(_JsonPayloadFilter(config.should_cache))
    return FilterPolicy(request_filters=[_GetOnlyFilter()], response_filters=response_filters)
