from __future__ import annotations

from service_health.application.dtos.health_dto import (
    HealthFailureDTO,
    ServiceHealthReportDTO,
)
from service_health.domain.entities.health import (
    ProbeResult,
    ProbeStatus,
    ServiceHealthReport,
)
from tests.conftest import FIXED_NOW, make_report


def test_payload_uses_wire_field_names() -> None:
    report = ServiceHealthReport(
        service="svc",
        version="1.2.3",
        environment="testing",
        timestamp=FIXED_NOW,
        uptime_ms=1500.0,
        checks={
            "system": ProbeResult(
                status=ProbeStatus.PASS,
                timestamp=FIXED_NOW,
                output="System is healthy",
                response_time_ms=1.25,
                details={"pid": 1},
            )
        },
    )

    payload = ServiceHealthReportDTO.from_domain(report).to_payload()

    assert set(payload) == {
        "service",
        "version",
        "environment",
        "timestamp",
        "uptime",
        "checks",
    }
    assert payload["uptime"] == 1500.0
    assert payload["checks"]["system"] == {
        "status": "pass",
        "timestamp": "2024-09-09T12:00:00Z",
        "output": "System is healthy",
        "responseTime": 1.25,
        "details": {"pid": 1},
    }


def test_payload_omits_absent_optional_fields() -> None:
    payload = ServiceHealthReportDTO.from_domain(
        make_report({"system": ProbeStatus.PASS, "db": ProbeStatus.FAIL})
    ).to_payload()

    assert payload["checks"]["db"] == {
        "status": "fail",
        "timestamp": "2024-09-09T12:00:00Z",
        "output": "db",
    }


def test_failure_payload_shape() -> None:
    payload = HealthFailureDTO(
        service="svc", timestamp=FIXED_NOW, error="Internal health check error"
    ).to_payload()

    assert payload == {
        "service": "svc",
        "status": "fail",
        "timestamp": "2024-09-09T12:00:00Z",
        "error": "Internal health check error",
    }
