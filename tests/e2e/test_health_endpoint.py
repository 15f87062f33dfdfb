from __future__ import annotations

import asyncio

import pytest
from fastapi.testclient import TestClient

from service_health.domain.entities.health import ProbeResult, ProbeStatus
from service_health.main.app import create_app
from service_health.main.config import AppSettings, HealthSettings


def _boom() -> ProbeResult:
    raise RuntimeError("boom")


@pytest.fixture()
def app():
    return create_app(AppSettings(health=HealthSettings(service="svc")))


def test_health_endpoint_reports_healthy_system(app) -> None:
    with TestClient(app) as client:
        response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert set(body) == {
        "service",
        "version",
        "environment",
        "timestamp",
        "uptime",
        "checks",
    }
    assert body["service"] == "svc"
    assert body["uptime"] >= 0
    assert list(body["checks"]) == ["system"]
    assert body["checks"]["system"]["status"] == "pass"
    assert body["checks"]["system"]["output"] == "System is healthy"
    assert "memory" in body["checks"]["system"]["details"]


def test_failing_probe_turns_endpoint_unavailable(app) -> None:
    app.state.health.add_check("payments", _boom)

    with TestClient(app) as client:
        response = client.get("/health")

    assert response.status_code == 503
    body = response.json()
    assert body["checks"]["payments"]["status"] == "fail"
    assert body["checks"]["payments"]["output"] == "boom"
    assert body["checks"]["system"]["status"] == "pass"


def test_removing_failing_probe_restores_health(app) -> None:
    app.state.health.add_check("payments", _boom)

    with TestClient(app) as client:
        assert client.get("/health").status_code == 503
        assert app.state.health.remove_check("payments") is True
        response = client.get("/health")

    assert response.status_code == 200
    assert list(response.json()["checks"]) == ["system"]


def test_async_warning_probe_returns_503(app) -> None:
    async def _queue_depth() -> ProbeResult:
        await asyncio.sleep(0)
        return ProbeResult(status=ProbeStatus.WARN, output="queue backlog")

    app.state.health.add_check("queue", _queue_depth)

    with TestClient(app) as client:
        response = client.get("/health")

    assert response.status_code == 503
    assert response.json()["checks"]["queue"]["status"] == "warn"


def test_details_can_be_disabled() -> None:
    app = create_app(AppSettings(health=HealthSettings(include_details=False)))

    with TestClient(app) as client:
        body = client.get("/health").json()

    assert "details" not in body["checks"]["system"]


def test_uptime_does_not_decrease(app) -> None:
    with TestClient(app) as client:
        first = client.get("/health").json()["uptime"]
        second = client.get("/health").json()["uptime"]

    assert second >= first
