"""DTOs for health report responses."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from service_health.domain.entities.health import (
    ProbeResult,
    ProbeStatus,
    ServiceHealthReport,
)


class ProbeResultDTO(BaseModel):
    """Serializable representation of one probe outcome."""

    status: ProbeStatus = Field(description="Probe status")
    timestamp: datetime = Field(description="When the result was produced")
    output: Optional[str] = Field(
        default=None, description="Human readable summary"
    )
    response_time_ms: Optional[float] = Field(
        default=None,
        ge=0,
        alias="responseTime",
        description="Measured duration in milliseconds",
    )
    details: Optional[Dict[str, Any]] = Field(
        default=None, description="Additional structured detail"
    )

    @classmethod
    def from_domain(cls, result: ProbeResult) -> "ProbeResultDTO":
        return cls(
            status=result.status,
            timestamp=result.timestamp,
            output=result.output,
            response_time_ms=result.response_time_ms,
            details=result.details,
        )

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "status": "pass",
                "timestamp": "2024-09-09T12:00:00Z",
                "output": "System is healthy",
                "responseTime": 1.4,
            }
        },
    }


class ServiceHealthReportDTO(BaseModel):
    """DTO representing the health endpoint payload."""

    service: str = Field(description="Service name")
    version: str = Field(description="Service version")
    environment: str = Field(description="Deployment environment")
    timestamp: datetime = Field(description="When the report was assembled")
    uptime: float = Field(ge=0, description="Milliseconds since service start")
    checks: Dict[str, ProbeResultDTO] = Field(
        default_factory=dict, description="Probe results keyed by probe name"
    )

    @classmethod
    def from_domain(cls, report: ServiceHealthReport) -> "ServiceHealthReportDTO":
        return cls(
            service=report.service,
            version=report.version,
            environment=report.environment,
            timestamp=report.timestamp,
            uptime=report.uptime_ms,
            checks={
                name: ProbeResultDTO.from_domain(result)
                for name, result in report.checks.items()
            },
        )

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready body with camelCase keys and absent optionals omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "service": "service-health",
                "version": "1.0.0",
                "environment": "production",
                "timestamp": "2024-09-09T12:00:00Z",
                "uptime": 360512.7,
                "checks": {
                    "system": {
                        "status": "pass",
                        "timestamp": "2024-09-09T12:00:00Z",
                        "output": "System is healthy",
                        "responseTime": 1.4,
                        "details": {"pid": 4242, "platform": "linux"},
                    },
                    "database": {
                        "status": "fail",
                        "timestamp": "2024-09-09T12:00:00Z",
                        "output": "connection refused",
                    },
                },
            }
        },
    }


class HealthFailureDTO(BaseModel):
    """Minimal body returned when the evaluation itself breaks."""

    service: str = Field(description="Service name")
    status: ProbeStatus = Field(default=ProbeStatus.FAIL)
    timestamp: datetime = Field(description="When the failure was observed")
    error: str = Field(description="Generic error description")

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")

    model_config = {
        "json_schema_extra": {
            "example": {
                "service": "service-health",
                "status": "fail",
                "timestamp": "2024-09-09T12:00:00Z",
                "error": "Internal health check error",
            }
        }
    }
