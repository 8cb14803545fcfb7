"""
HTTP transport backed by httpx.

Owns retries, timeouts and backoff so the Wikipedia service sees a single
final response per request.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Mapping, Optional

import httpx

from ...domain.models.errors import TransportError
from .policy import RetryPolicy


class HttpxResponse:
    """Adapts ``httpx.Response`` to the service's HttpResponse protocol."""

    def __init__(self, response: httpx.Response) -> None:
        self._response = response

    @property
    def status(self) -> int:
        return self._response.status_code

    @property
    def ok(self) -> bool:
        return self._response.is_success

    async def text(self) -> str:
        await self._response.aread()
        return self._response.text


class HttpxTransport:
    """
    Retrying GET transport.
      - Retries connection errors and timeouts with exponential backoff
      - Retries retryable status codes; the last response is returned as-is
      - Raises TransportError once retries are exhausted on network failures
    """

    def __init__(
        self,
        *,
        client: Optional[httpx.AsyncClient] = None,
        connect_timeout_s: float = 5.0,
        read_timeout_s: float = 20.0,
        retry_policy: Optional[RetryPolicy] = None,
        sleep_fn: Callable[[float], Awaitable[None]] = asyncio.sleep,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        # A caller-provided client is shared and owned by the caller
        self._client = client
        self.connect_timeout_s = float(connect_timeout_s)
        self.read_timeout_s = float(read_timeout_s)
        self.retry_policy = retry_policy or RetryPolicy()
        self.sleep_fn = sleep_fn
        self._logger = logger or logging.getLogger(__name__)

    @classmethod
    def from_settings(cls, settings, **kwargs) -> HttpxTransport:
        """Build from a RetrySettings instance."""
        policy = RetryPolicy(
            max_retries=settings.max_retries,
            backoff_base_s=settings.backoff_base,
            backoff_max_s=settings.backoff_max,
            jitter_ratio=settings.jitter,
            retryable_status_codes=settings.status_code_list,
        )
        return cls(
            connect_timeout_s=settings.connect_timeout_s,
            read_timeout_s=settings.read_timeout_s,
            retry_policy=policy,
            **kwargs,
        )

    def _timeout(self) -> httpx.Timeout:
        return httpx.Timeout(self.read_timeout_s, connect=self.connect_timeout_s)

    async def _send_once(self, method: str, url: str, headers: Mapping[str, str]) -> httpx.Response:
        if self._client is not None:
            return await self._client.request(method, url, headers=dict(headers), timeout=self._timeout())
        async with httpx.AsyncClient(timeout=self._timeout(), follow_redirects=True) as client:
            response = await client.request(method, url, headers=dict(headers))
            await response.aread()
            return response

    async def fetch(
        self,
        url: str,
        *,
        method: str = "GET",
        headers: Optional[Mapping[str, str]] = None,
    ) -> HttpxResponse:
        attempt = 0
        while True:
            try:
                response = await self._send_once(method, url, headers or {})
            except httpx.HTTPError as e:
                if not self.retry_policy.should_retry(e, attempt_index=attempt):
                    self._logger.error(f"Request to {url} failed after {attempt + 1} attempt(s): {e}")
                    raise TransportError(f"Request to {url} failed: {e}") from e
                await self._backoff(attempt, f"{type(e).__name__}: {e}")
                attempt += 1
                continue

            if self.retry_policy.should_retry_status(response.status_code, attempt_index=attempt):
                await self._backoff(attempt, f"HTTP {response.status_code}")
                attempt += 1
                continue
            return HttpxResponse(response)

    async def _backoff(self, attempt: int, reason: str) -> None:
        delay = max(0.0, float(self.retry_policy.backoff_seconds(attempt)))
        self._logger.debug(f"Attempt {attempt + 1} failed ({reason}); retrying in {delay:.2f}s")
        await self.sleep_fn(delay)
