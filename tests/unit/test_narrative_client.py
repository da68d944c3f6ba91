"""Unit tests for the narrative service client"""

import asyncio
import json

import httpx
import pytest
from finhealth_gateway.domain.exceptions import NarrativeServiceError
from finhealth_gateway.infrastructure.clients.narrative import NarrativeClient

REPORT = {"healthScore": {"overall": "B", "grade": 84, "description": "Good"}}


def _client(handler, **kwargs) -> NarrativeClient:
    options = {"max_retries": 3, "backoff_base": 0}
    options.update(kwargs)
    return NarrativeClient(
        base_url="http://narrative.test",
        transport=httpx.MockTransport(handler),
        **options,
    )


def test_generate_returns_narrative():
    """Test the report is posted and the narrative text returned"""
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"narrative": "You are doing well."})

    narrative = asyncio.run(_client(handler).generate(REPORT))

    assert narrative == "You are doing well."
    assert seen[0].url.path == "/narrative"
    assert json.loads(seen[0].content) == {"report": REPORT}


def test_generate_retries_server_errors():
    """Test 5xx responses are retried until success"""
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if len(calls) < 3:
            return httpx.Response(503)
        return httpx.Response(200, json={"narrative": "Recovered"})

    assert asyncio.run(_client(handler).generate(REPORT)) == "Recovered"
    assert len(calls) == 3


def test_generate_gives_up_after_max_retries():
    """Test persistent 5xx raises after the configured attempts"""
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(500)

    with pytest.raises(NarrativeServiceError):
        asyncio.run(_client(handler).generate(REPORT))
    assert len(calls) == 3


def test_explicit_zero_options_override_settings():
    """Test zero timeout and retry values are kept instead of falling back to settings"""
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(503)

    client = _client(handler, timeout=0, max_retries=0)

    assert client.timeout == 0
    assert client.max_retries == 0
    with pytest.raises(NarrativeServiceError):
        asyncio.run(client.generate(REPORT))
    assert len(calls) == 1

def test_generate_does_not_retry_client_errors():
    """Test 4xx fails on the first attempt"""
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(422, json={"detail": "bad report"})

    with pytest.raises(NarrativeServiceError):
        asyncio.run(_client(handler).generate(REPORT))
    assert len(calls) == 1


def test_generate_retries_network_errors():
    """Test connection failures are retried and then surfaced"""
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(NarrativeServiceError):
        asyncio.run(_client(handler, max_retries=2).generate(REPORT))
    assert len(calls) == 2


def test_generate_rejects_malformed_body():
    """Test a response without narrative text is an error"""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"text": "wrong key"})

    with pytest.raises(NarrativeServiceError):
        asyncio.run(_client(handler).generate(REPORT))


def test_generate_backoff_doubles(monkeypatch):
    """Test backoff delays grow as base * 2^(attempt-1)"""
    delays = []

    async def fake_sleep(seconds):
        delays.append(seconds)

    monkeypatch.setattr("finhealth_gateway.infrastructure.clients.narrative.asyncio.sleep", fake_sleep)

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502)

    with pytest.raises(NarrativeServiceError):
        asyncio.run(_client(handler, max_retries=4, backoff_base=1.0).generate(REPORT))
    assert delays == [1.0, 2.0, 4.0]


def test_generate_requires_url():
    """Test an unconfigured client is disabled and refuses to call out"""
    client = NarrativeClient(base_url="")
    client.base_url = None

    assert client.enabled is False
    with pytest.raises(NarrativeServiceError):
        asyncio.run(client.generate(REPORT))
