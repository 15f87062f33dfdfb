from __future__ import annotations

import asyncio
import re

import httpx
import pytest

from service_health.domain.entities.health import ProbeStatus
from service_health.infrastructure.services.dependency_probes import (
    http_probe,
    tcp_probe,
)


class _Response:
    def __init__(self, status_code: int, text: str = "") -> None:
        self.status_code = status_code
        self.text = text


def _patch_client(monkeypatch, response=None, error=None) -> list:
    calls: list = []

    class _Client:
        def __init__(self, timeout=None):
            self.timeout = timeout

        async def __aenter__(self):
            return self

        async def __aexit__(self, exc_type, exc, tb):
            return None

        async def get(self, url, headers=None):
            calls.append((url, headers))
            if error is not None:
                raise error
            return response

    monkeypatch.setattr("httpx.AsyncClient", _Client)
    return calls


@pytest.mark.asyncio
async def test_http_probe_passes_on_expected_status(monkeypatch) -> None:
    calls = _patch_client(monkeypatch, response=_Response(200))

    result = await http_probe("http://db/health", headers={"X-Key": "1"})()

    assert result.status is ProbeStatus.PASS
    assert result.output == "HTTP 200"
    assert result.details == {"url": "http://db/health", "statusCode": 200}
    assert calls[0][0] == "http://db/health"
    assert calls[0][1]["X-Key"] == "1"
    assert "User-Agent" in calls[0][1]


@pytest.mark.asyncio
async def test_http_probe_warns_on_client_errors(monkeypatch) -> None:
    _patch_client(monkeypatch, response=_Response(404))

    result = await http_probe("http://db/health")()

    assert result.status is ProbeStatus.WARN


@pytest.mark.asyncio
async def test_http_probe_fails_on_server_errors(monkeypatch) -> None:
    _patch_client(monkeypatch, response=_Response(503))

    result = await http_probe("http://db/health")()

    assert result.status is ProbeStatus.FAIL
    assert result.output == "HTTP 503"


@pytest.mark.asyncio
async def test_http_probe_checks_body(monkeypatch) -> None:
    _patch_client(monkeypatch, response=_Response(200, text='{"status":"down"}'))

    mismatch = await http_probe("http://db", expected_body='"status":"up"')()
    match = await http_probe("http://db", expected_body=re.compile(r"status"))()

    assert mismatch.status is ProbeStatus.FAIL
    assert match.status is ProbeStatus.PASS


@pytest.mark.asyncio
async def test_http_probe_converts_transport_errors(monkeypatch) -> None:
    _patch_client(monkeypatch, error=httpx.ConnectError("connection refused"))

    result = await http_probe("http://db/health")()

    assert result.status is ProbeStatus.FAIL
    assert "connection refused" in result.output
    assert result.details == {"url": "http://db/health"}


@pytest.mark.asyncio
async def test_tcp_probe_passes_when_port_accepts() -> None:
    async def _handle(reader, writer):
        writer.close()

    server = await asyncio.start_server(_handle, "127.0.0.1", 0)
    port = server.sockets[0].getsockname()[1]
    try:
        result = await tcp_probe("127.0.0.1", port, timeout=2.0)()
    finally:
        server.close()
        await server.wait_closed()

    assert result.status is ProbeStatus.PASS
    assert result.details == {"host": "127.0.0.1", "port": port}


@pytest.mark.asyncio
async def test_tcp_probe_fails_when_port_is_closed() -> None:
    server = await asyncio.start_server(lambda r, w: None, "127.0.0.1", 0)
    port = server.sockets[0].getsockname()[1]
    server.close()
    await server.wait_closed()

    result = await tcp_probe("127.0.0.1", port, timeout=2.0)()

    assert result.status is ProbeStatus.FAIL
    assert result.output.startswith("Connection failed")
