"""Port for built-in probes run on every evaluation."""

from __future__ import annotations

from typing import Protocol

from service_health.domain.entities.health import ProbeResult


class IProbe(Protocol):
    """A probe that never raises and always yields a ProbeResult."""

    name: str

    def execute(self) -> ProbeResult:
        ...
