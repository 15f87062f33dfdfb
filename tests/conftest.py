from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Dict, Optional

import pytest

from service_health.domain.entities.health import (
    ProbeResult,
    ProbeStatus,
    ServiceHealthReport,
)

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

FIXED_NOW = datetime(2024, 9, 9, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    """Clock whose wall time is fixed and whose monotonic time is settable."""

    def __init__(self, now: datetime = FIXED_NOW, monotonic: float = 100.0) -> None:
        self._now = now
        self.current = monotonic

    def now(self) -> datetime:
        return self._now

    def monotonic(self) -> float:
        return self.current

    def advance(self, seconds: float) -> None:
        self.current += seconds


class StubSystemProbe:
    name = "system"

    def __init__(self, status: ProbeStatus = ProbeStatus.PASS) -> None:
        self.status = status
        self.calls = 0

    def execute(self) -> ProbeResult:
        self.calls += 1
        return ProbeResult(
            status=self.status,
            timestamp=FIXED_NOW,
            output="System is healthy",
            response_time_ms=0.5,
        )


def make_report(
    statuses: Optional[Dict[str, ProbeStatus]] = None,
) -> ServiceHealthReport:
    checks = {
        name: ProbeResult(status=status, timestamp=FIXED_NOW, output=name)
        for name, status in (statuses or {"system": ProbeStatus.PASS}).items()
    }
    return ServiceHealthReport(
        service="svc",
        version="1.2.3",
        environment="testing",
        timestamp=FIXED_NOW,
        uptime_ms=1500.0,
        checks=checks,
    )


def raising(message: str) -> Callable[[], ProbeResult]:
    def _probe() -> ProbeResult:
        raise RuntimeError(message)

    return _probe


@pytest.fixture()
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def stub_system_probe() -> StubSystemProbe:
    return StubSystemProbe()
