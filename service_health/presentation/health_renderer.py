"""Renders the health report into a status code and response body."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List

from fastapi import status

from service_health.application.dtos.health_dto import HealthFailureDTO
from service_health.application.use_cases.health_use_cases import (
    GetHealthReportUseCase,
    ManageProbesUseCase,
)
from service_health.domain.entities.health import ProbeStatus
from service_health.domain.entities.probe import Probe, ProbeCallable
from service_health.domain.services.status_aggregator import aggregate_status
from service_health.shared.logging import get_logger

logger = get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal health check error"


def encode_body(body: Dict[str, Any]) -> bytes:
    return json.dumps(
        body, ensure_ascii=False, allow_nan=False, separators=(",", ":")
    ).encode("utf-8")


@dataclass(frozen=True)
class HealthResponse:
    """Transport-neutral response produced for the health endpoint."""

    status_code: int
    body: Dict[str, Any]
    content: bytes


class HealthReportRenderer:
    """Evaluate health, pick the status code and shape the response body."""

    def __init__(
        self,
        get_health_report_use_case: GetHealthReportUseCase,
        manage_probes_use_case: ManageProbesUseCase,
        *,
        endpoint: str,
        service: str,
    ) -> None:
        self._get_health_report = get_health_report_use_case
        self._manage_probes = manage_probes_use_case
        self._endpoint = endpoint
        self._service = service

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def matches(self, path: str) -> bool:
        return path == self._endpoint

    async def render(self) -> HealthResponse:
        """
        Build the endpoint response.

        Returns 200 when every probe passes, 503 when any warns or fails and
        500 with a minimal body when the evaluation itself raises.
        """
        try:
            report = await self._get_health_report.execute()
            overall = aggregate_status(
                check.status for check in report.checks.values()
            )
            body = report.to_payload()
            content = encode_body(body)
        except Exception as exc:
            logger.error(
                "health.check.failure",
                endpoint=self._endpoint,
                error=str(exc),
                exc_info=exc,
            )
            failure = HealthFailureDTO(
                service=self._service,
                timestamp=datetime.now(timezone.utc),
                error=INTERNAL_ERROR_MESSAGE,
            )
            failure_body = failure.to_payload()
            return HealthResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                body=failure_body,
                content=encode_body(failure_body),
            )

        status_code = (
            status.HTTP_200_OK
            if overall == ProbeStatus.PASS
            else status.HTTP_503_SERVICE_UNAVAILABLE
        )
        logger.debug(
            "health.check.completed",
            status=overall.value,
            endpoint=self._endpoint,
            checks=len(report.checks),
        )
        return HealthResponse(status_code=status_code, body=body, content=content)

    def add_check(self, name: str, execute: ProbeCallable) -> Probe:
        return self._manage_probes.add(name, execute)

    def remove_check(self, name: str) -> bool:
        return self._manage_probes.remove(name)

    def list_check_names(self) -> List[str]:
        return self._manage_probes.list_names()
