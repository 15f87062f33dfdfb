"""
Health domain entities.

This module defines value objects for representing the outcome of a single
probe and the service-level report assembled from all probes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class ProbeStatus(str, Enum):
    """Outcome of a probe, ordered pass < warn < fail."""

    PASS = "pass"
    WARN = "warn"
    FAIL = "fail"


@dataclass(frozen=True, slots=True)
class ProbeResult:
    """Result of a single probe invocation."""

    status: ProbeStatus
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    output: Optional[str] = None
    response_time_ms: Optional[float] = None
    details: Optional[Dict[str, Any]] = None

    @classmethod
    def failed(
        cls,
        output: str,
        *,
        response_time_ms: Optional[float] = None,
        timestamp: Optional[datetime] = None,
    ) -> "ProbeResult":
        return cls(
            status=ProbeStatus.FAIL,
            timestamp=timestamp or datetime.now(timezone.utc),
            output=output,
            response_time_ms=response_time_ms,
        )


@dataclass(frozen=True, slots=True)
class ServiceHealthReport:
    """Snapshot of every probe outcome for one evaluation."""

    service: str
    version: str
    environment: str
    timestamp: datetime
    uptime_ms: float
    checks: Dict[str, ProbeResult] = field(default_factory=dict)
