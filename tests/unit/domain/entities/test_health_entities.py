from __future__ import annotations

import dataclasses
from datetime import timezone

import pytest

from service_health.domain.entities.errors import ProbeDefinitionError
from service_health.domain.entities.health import ProbeResult, ProbeStatus
from service_health.domain.entities.probe import Probe


def test_probe_result_defaults() -> None:
    result = ProbeResult(status=ProbeStatus.PASS)
    assert result.timestamp.tzinfo == timezone.utc
    assert result.output is None
    assert result.response_time_ms is None
    assert result.details is None


def test_probe_result_is_immutable() -> None:
    result = ProbeResult(status=ProbeStatus.WARN)
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.status = ProbeStatus.FAIL  # type: ignore[misc]


def test_failed_factory_sets_fail_status() -> None:
    result = ProbeResult.failed("boom", response_time_ms=3.0)
    assert result.status is ProbeStatus.FAIL
    assert result.output == "boom"
    assert result.response_time_ms == 3.0


def test_probe_status_values_match_wire_format() -> None:
    assert [status.value for status in ProbeStatus] == ["pass", "warn", "fail"]


@pytest.mark.parametrize("name", ["", "   "])
def test_probe_rejects_blank_names(name: str) -> None:
    with pytest.raises(ProbeDefinitionError):
        Probe(name=name, execute=lambda: ProbeResult(status=ProbeStatus.PASS))


def test_probe_rejects_non_callable() -> None:
    with pytest.raises(ValueError):
        Probe(name="db", execute="not callable")  # type: ignore[arg-type]
