from __future__ import annotations

import asyncio

import httpx

from claimer.adapters.http_resilience import ResilientClient
from claimer.config.http_resilience import ResilienceConfig, RetryPolicy


def _get(config: ResilienceConfig, transport: httpx.MockTransport, url: str) -> httpx.Response:
    async def run() -> httpx.Response:
        async with ResilientClient(config, transport=transport) as client:
            return await client.get(url)

    return asyncio.run(run())


def test_retry_policy_wraps_the_transport() -> None:
    calls: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(str(request.url))
        return httpx.Response(status_code=503)

    config = ResilienceConfig(
        name="retrying",
        base_url="https://api.example.com/",
        retry=RetryPolicy(total=2, backoff_factor=0.0, backoff_jitter=0.0),
    )

    response = _get(config, httpx.MockTransport(handler), "thing.json")

    assert response.status_code == 503
    assert calls == ["https://api.example.com/thing.json"] * 3


def test_zero_retries_sends_once() -> None:
    calls: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(str(request.url))
        return httpx.Response(status_code=502)

    config = ResilienceConfig(name="single", retry=RetryPolicy(total=0))

    response = _get(config, httpx.MockTransport(handler), "https://api.example.com/thing.json")

    assert response.status_code == 502
    assert len(calls) == 1


def test_default_headers_are_sent() -> None:
    seen: list[str | None] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.headers.get("user-agent"))
        return httpx.Response(status_code=200, json={})

    config = ResilienceConfig(
        name="headers",
        base_url="https://api.example.com/",
        default_headers={"User-Agent": "claimer-test"},
    )

    _get(config, httpx.MockTransport(handler), "ping")

    assert seen == ["claimer-test"]
