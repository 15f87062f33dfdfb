"""Infrastructure implementation of the concurrent health evaluator."""

from __future__ import annotations

import asyncio
import inspect
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import replace
from time import perf_counter
from typing import Any, Dict, List, Optional, Tuple

from service_health.domain.entities.errors import InvalidProbeResultError
from service_health.domain.entities.health import ProbeResult, ServiceHealthReport
from service_health.domain.entities.probe import ProbeCallable
from service_health.domain.ports.clock import IClock
from service_health.domain.ports.health_evaluator import IHealthEvaluator
from service_health.domain.ports.probe import IProbe
from service_health.domain.repositories.probe_registry import IProbeRegistry
from service_health.infrastructure.clock import SystemClock
from service_health.shared.consts import DEFAULT_PROBE_TIMEOUT_SECONDS
from service_health.shared.logging import get_logger

logger = get_logger(__name__)

TIMED_OUT_OUTPUT = "timed out"
UNKNOWN_ERROR_OUTPUT = "Unknown error"


class HealthEvaluator(IHealthEvaluator):
    """
    Run the system probe and every registered probe, then build a report.

    Blocking probes run on a thread pool owned by the evaluator. A blocking
    probe abandoned by the timeout keeps its thread until it returns; until
    then it is not started again and is reported as timed out.
    """

    def __init__(
        self,
        registry: IProbeRegistry,
        system_probe: IProbe,
        *,
        service: str,
        version: str,
        environment: str,
        clock: Optional[IClock] = None,
        probe_timeout: Optional[float] = DEFAULT_PROBE_TIMEOUT_SECONDS,
        max_workers: Optional[int] = None,
    ) -> None:
        self._registry = registry
        self._system_probe = system_probe
        self._service = service
        self._version = version
        self._environment = environment
        self._clock = clock or SystemClock()
        self._probe_timeout = (
            probe_timeout if probe_timeout is not None and probe_timeout > 0 else None
        )
        self._max_workers = max_workers
        self._executor: Optional[ThreadPoolExecutor] = None
        # id(callable) -> (callable, future) for blocking runs abandoned on timeout
        self._stalled: Dict[int, Tuple[ProbeCallable, Future]] = {}
        self._started_at = self._clock.monotonic()

    @property
    def service(self) -> str:
        return self._service

    @property
    def probe_timeout(self) -> Optional[float]:
        return self._probe_timeout

    async def evaluate(self) -> ServiceHealthReport:
        """
        Fan out to all probes concurrently and wait for every one of them.

        Probe failures and timeouts are converted into failed results, so
        this coroutine only raises on defects outside the probes themselves.
        The system probe samples in-process counters and runs on the loop.
        """

        tasks = [
            asyncio.create_task(
                self._run_probe(
                    self._system_probe.name, self._system_probe.execute, inline=True
                )
            )
        ]
        names: List[str] = [self._system_probe.name]
        for probe in self._registry.snapshot():
            names.append(probe.name)
            tasks.append(asyncio.create_task(self._run_probe(probe.name, probe.execute)))
        results = await asyncio.gather(*tasks)

        checks: Dict[str, ProbeResult] = {}
        for name, result in zip(names, results):
            checks[name] = result

        return ServiceHealthReport(
            service=self._service,
            version=self._version,
            environment=self._environment,
            timestamp=self._clock.now(),
            uptime_ms=self.uptime_ms(),
            checks=checks,
        )

    def uptime_ms(self) -> float:
        return max(0.0, (self._clock.monotonic() - self._started_at) * 1000)

    def close(self) -> None:
        """Release the probe thread pool without waiting for stalled probes."""
        executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=False, cancel_futures=True)

    async def _run_probe(
        self, name: str, execute: ProbeCallable, *, inline: bool = False
    ) -> ProbeResult:
        start = perf_counter()
        if self._still_running(execute):
            logger.warning("health.probe.still_running", probe=name)
            return self._failed(TIMED_OUT_OUTPUT, start)

        attempt = self._attempt(name, execute, start, inline=inline)
        if self._probe_timeout is None:
            return await attempt

        try:
            return await asyncio.wait_for(attempt, timeout=self._probe_timeout)
        except asyncio.TimeoutError:
            # Only the bound itself gets here; probe errors are converted in _attempt.
            logger.warning(
                "health.probe.timed_out", probe=name, timeout=self._probe_timeout
            )
            return self._failed(TIMED_OUT_OUTPUT, start)

    async def _attempt(
        self, name: str, execute: ProbeCallable, start: float, *, inline: bool
    ) -> ProbeResult:
        try:
            if inline:
                result = execute()
                if inspect.isawaitable(result):
                    result = await result
            else:
                result = await self._invoke(execute)
            if not isinstance(result, ProbeResult):
                raise InvalidProbeResultError(name, result)
        except Exception as exc:
            logger.warning("health.probe.failed", probe=name, error=str(exc))
            return self._failed(str(exc) or UNKNOWN_ERROR_OUTPUT, start)

        if result.response_time_ms is None:
            result = replace(result, response_time_ms=self._elapsed_ms(start))
        return result

    async def _invoke(self, execute: ProbeCallable) -> Any:
        # Coroutine probes run on the loop; blocking probes go to the pool.
        if inspect.iscoroutinefunction(execute):
            return await execute()

        future = self._get_executor().submit(execute)
        try:
            outcome = await asyncio.wrap_future(future)
        except asyncio.CancelledError:
            if not future.done():
                self._stalled[id(execute)] = (execute, future)
            raise
        if inspect.isawaitable(outcome):
            return await outcome
        return outcome

    def _still_running(self, execute: ProbeCallable) -> bool:
        entry = self._stalled.get(id(execute))
        if entry is None:
            return False
        if entry[0] is execute and not entry[1].done():
            return True
        del self._stalled[id(execute)]
        return False

    def _get_executor(self) -> ThreadPoolExecutor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self._max_workers, thread_name_prefix="health-probe"
            )
        return self._executor

    def _failed(self, output: str, start: float) -> ProbeResult:
        return ProbeResult.failed(
            output,
            response_time_ms=self._elapsed_ms(start),
            timestamp=self._clock.now(),
        )

    @staticmethod
    def _elapsed_ms(start: float) -> float:
        return (perf_counter() - start) * 1000
