"""Built-in probe sampling process-level metrics."""

from __future__ import annotations

import math
import platform
import sys
import time
from datetime import datetime, timezone
from time import perf_counter
from typing import Any, Dict, Optional

import psutil

from service_health.domain.entities.health import ProbeResult, ProbeStatus
from service_health.domain.ports.probe import IProbe
from service_health.shared.consts import SYSTEM_PROBE_NAME
from service_health.shared.formatting import format_bytes
from service_health.shared.logging import get_logger

logger = get_logger(__name__)


class SystemProbe(IProbe):
    """Report process memory, CPU time, uptime and runtime identity."""

    name = SYSTEM_PROBE_NAME

    def __init__(
        self,
        *,
        include_details: bool = True,
        process: Optional[psutil.Process] = None,
    ) -> None:
        self._include_details = include_details
        self._process = process

    @property
    def include_details(self) -> bool:
        return self._include_details

    def execute(self) -> ProbeResult:
        start = perf_counter()
        try:
            details = self._sample()
            latency_ms = (perf_counter() - start) * 1000
            return ProbeResult(
                status=ProbeStatus.PASS,
                timestamp=datetime.now(timezone.utc),
                output="System is healthy",
                response_time_ms=latency_ms,
                details=details if self._include_details else None,
            )
        except Exception as exc:
            latency_ms = (perf_counter() - start) * 1000
            logger.warning("health.system_probe.failed", error=str(exc))
            return ProbeResult(
                status=ProbeStatus.FAIL,
                timestamp=datetime.now(timezone.utc),
                output=str(exc) or "System check failed",
                response_time_ms=latency_ms,
            )

    def _sample(self) -> Dict[str, Any]:
        process = self._process or psutil.Process()

        with process.oneshot():
            memory = process.memory_info()
            cpu = process.cpu_times()
            created_at = process.create_time()
            pid = process.pid

        host_memory = psutil.virtual_memory()

        return {
            "memory": {
                "rss": format_bytes(memory.rss),
                "vms": format_bytes(memory.vms),
                "systemTotal": format_bytes(host_memory.total),
                "systemAvailable": format_bytes(host_memory.available),
            },
            "cpu": {
                "user": cpu.user,
                "system": cpu.system,
            },
            "uptime": max(0, math.floor(time.time() - created_at)),
            "pid": pid,
            "platform": sys.platform,
            "pythonVersion": platform.python_version(),
        }
