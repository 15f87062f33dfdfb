"""Ready-made probes for HTTP and TCP dependencies."""

from __future__ import annotations

import asyncio
import re
from datetime import datetime, timezone
from time import perf_counter
from typing import Awaitable, Callable, Iterable, Mapping, Optional, Pattern, Union

import httpx

from service_health.domain.entities.health import ProbeResult, ProbeStatus

DEFAULT_EXPECTED_STATUS_CODES = (200, 201, 202, 204)
DEFAULT_USER_AGENT = "service-health-probe/1.0"

AsyncProbe = Callable[[], Awaitable[ProbeResult]]


def http_probe(
    url: str,
    *,
    expected_status_codes: Iterable[int] = DEFAULT_EXPECTED_STATUS_CODES,
    timeout: float = 5.0,
    headers: Optional[Mapping[str, str]] = None,
    expected_body: Union[str, Pattern[str], None] = None,
) -> AsyncProbe:
    """
    Build a probe issuing ``GET url`` and judging the response.

    An expected status code (and body match, when ``expected_body`` is
    given) passes. Any other 4xx response warns. 5xx responses, unexpected
    codes and transport errors fail.
    """

    accepted = frozenset(expected_status_codes)
    request_headers = {"User-Agent": DEFAULT_USER_AGENT, **(headers or {})}

    async def _check() -> ProbeResult:
        start = perf_counter()
        try:
            async with httpx.AsyncClient(timeout=timeout) as client:
                response = await client.get(url, headers=request_headers)
        except httpx.RequestError as exc:
            return ProbeResult(
                status=ProbeStatus.FAIL,
                timestamp=datetime.now(timezone.utc),
                output=f"HTTP request failed: {exc}",
                response_time_ms=(perf_counter() - start) * 1000,
                details={"url": url},
            )

        latency_ms = (perf_counter() - start) * 1000
        status_code = response.status_code

        if status_code in accepted:
            if _body_matches(response.text, expected_body):
                status, output = ProbeStatus.PASS, f"HTTP {status_code}"
            else:
                status = ProbeStatus.FAIL
                output = f"HTTP {status_code}: unexpected response body"
        elif 400 <= status_code < 500:
            status, output = ProbeStatus.WARN, f"HTTP {status_code}"
        else:
            status, output = ProbeStatus.FAIL, f"HTTP {status_code}"

        return ProbeResult(
            status=status,
            timestamp=datetime.now(timezone.utc),
            output=output,
            response_time_ms=latency_ms,
            details={"url": url, "statusCode": status_code},
        )

    return _check


def tcp_probe(host: str, port: int, *, timeout: float = 5.0) -> AsyncProbe:
    """Build a probe that passes when a TCP connection can be opened."""

    async def _check() -> ProbeResult:
        start = perf_counter()
        details = {"host": host, "port": port}
        try:
            _, writer = await asyncio.wait_for(
                asyncio.open_connection(host, port), timeout=timeout
            )
        except asyncio.TimeoutError:
            return ProbeResult(
                status=ProbeStatus.FAIL,
                timestamp=datetime.now(timezone.utc),
                output="Connection timeout",
                response_time_ms=(perf_counter() - start) * 1000,
                details=details,
            )
        except OSError as exc:
            return ProbeResult(
                status=ProbeStatus.FAIL,
                timestamp=datetime.now(timezone.utc),
                output=f"Connection failed: {exc}",
                response_time_ms=(perf_counter() - start) * 1000,
                details=details,
            )

        latency_ms = (perf_counter() - start) * 1000
        writer.close()
        await writer.wait_closed()
        return ProbeResult(
            status=ProbeStatus.PASS,
            timestamp=datetime.now(timezone.utc),
            output="Connection successful",
            response_time_ms=latency_ms,
            details=details,
        )

    return _check


def _body_matches(body: str, expected: Union[str, Pattern[str], None]) -> bool:
    if expected is None:
        return True
    if isinstance(expected, str):
        return expected in body
    return re.search(expected, body) is not None
