from __future__ import annotations

import asyncio
from typing import List

import httpx
import pytest

from wikipedia_tools.domain.models.errors import TransportError
from wikipedia_tools.infrastructure.config.settings import RetrySettings
from wikipedia_tools.infrastructure.http.policy import RetryPolicy
from wikipedia_tools.infrastructure.http.transport import HttpxTransport
from wikipedia_tools.infrastructure.wikipedia.service import USER_AGENT, WikipediaService

URL = "https://en.wikipedia.org/w/api.php?action=query"


def _transport(handler, max_retries: int = 2, sleeps: List[float] = None) -> HttpxTransport:
    async def _record_sleep(d: float) -> None:
        if sleeps is not None:
            sleeps.append(d)

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    policy = RetryPolicy(max_retries=max_retries, backoff_base_s=0.05, backoff_max_s=0.1, jitter_ratio=0.0)
    return HttpxTransport(client=client, retry_policy=policy, sleep_fn=_record_sleep)


def test_fetch_returns_status_and_body():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text='{"ok": true}')

    res = asyncio.run(_transport(handler).fetch(URL, headers={"User-Agent": USER_AGENT}))

    assert res.status == 200
    assert res.ok is True
    assert asyncio.run(res.text()) == '{"ok": true}'
    assert seen[0].method == "GET"
    assert seen[0].headers["User-Agent"] == USER_AGENT


def test_retryable_status_then_success():
    statuses = [503, 429, 200]
    sleeps: List[float] = []

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(statuses.pop(0), text="body")

    res = asyncio.run(_transport(handler, sleeps=sleeps).fetch(URL))

    assert res.status == 200
    assert sleeps == [0.05, 0.1]


def test_retryable_status_exhausted_returns_last_response():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(503, text="busy")

    res = asyncio.run(_transport(handler, max_retries=2).fetch(URL))

    assert res.status == 503
    assert res.ok is False
    assert len(calls) == 3


def test_non_retryable_status_is_returned_immediately():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(404, text="Not Found")

    res = asyncio.run(_transport(handler).fetch(URL))

    assert res.status == 404
    assert len(calls) == 1


def test_network_error_retried_then_surfaces_as_transport_error():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TransportError) as exc:
        asyncio.run(_transport(handler, max_retries=1).fetch(URL))

    assert len(calls) == 2
    assert isinstance(exc.value.__cause__, httpx.ConnectError)


def test_network_error_recovers():
    attempts = {"n": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        attempts["n"] += 1
        if attempts["n"] == 1:
            raise httpx.ReadTimeout("slow", request=request)
        return httpx.Response(200, text="ok")

    res = asyncio.run(_transport(handler).fetch(URL))

    assert res.status == 200
    assert attempts["n"] == 2


def test_service_over_httpx_end_to_end():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.host == "es.wikipedia.org"
        assert request.url.params["srsearch"] == "inteligencia artificial"
        return httpx.Response(200, json={"query": {"search": [{"title": "Inteligencia artificial"}]}})

    service = WikipediaService({"baseUrl": "https://es.wikipedia.org"}, transport=_transport(handler))
    result = asyncio.run(service.search("inteligencia artificial"))

    assert result["query"]["search"][0]["title"] == "Inteligencia artificial"


def test_from_settings_maps_retry_settings():
    settings = RetrySettings(
        max_retries=5,
        backoff_base=0.25,
        backoff_max=2.0,
        jitter=0.0,
        retryable_status_codes="502,503",
        read_timeout_s=7.0,
    )

    transport = HttpxTransport.from_settings(settings)

    assert transport.retry_policy.max_retries == 5
    assert transport.retry_policy.backoff_base_s == 0.25
    assert transport.retry_policy.backoff_max_s == 2.0
    assert transport.retry_policy.retryable_status_codes == [502, 503]
    assert transport.read_timeout_s == 7.0
