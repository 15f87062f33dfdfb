"""Domain service abstraction for health evaluation."""

from __future__ import annotations

from typing import Protocol

from service_health.domain.entities.health import ServiceHealthReport


class IHealthEvaluator(Protocol):
    """Interface for producing a fresh service health report."""

    async def evaluate(self) -> ServiceHealthReport:
        """Run every probe and assemble the report."""
        ...
