"""Use cases for the health endpoint and probe registration."""

from typing import List

from service_health.application.dtos.health_dto import ServiceHealthReportDTO
from service_health.domain.entities.probe import Probe, ProbeCallable
from service_health.domain.ports.health_evaluator import IHealthEvaluator
from service_health.domain.repositories.probe_registry import IProbeRegistry
from service_health.shared.logging import get_logger

logger = get_logger(__name__)


class GetHealthReportUseCase:
    """Use case responsible for producing a fresh health report."""

    def __init__(self, health_evaluator: IHealthEvaluator) -> None:
        self._health_evaluator = health_evaluator

    async def execute(self) -> ServiceHealthReportDTO:
        report = await self._health_evaluator.evaluate()
        return ServiceHealthReportDTO.from_domain(report)


class ManageProbesUseCase:
    """Use case used by the hosting service to register and drop probes."""

    def __init__(self, probe_registry: IProbeRegistry) -> None:
        self._probe_registry = probe_registry

    def add(self, name: str, execute: ProbeCallable) -> Probe:
        probe = self._probe_registry.add(name, execute)
        logger.debug("health.probe.added", probe=name)
        return probe

    def remove(self, name: str) -> bool:
        removed = self._probe_registry.remove(name)
        if removed:
            logger.debug("health.probe.removed", probe=name)
        return removed

    def list_names(self) -> List[str]:
        return self._probe_registry.names()
