"""Probe entity: a named unit of work producing a ProbeResult."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable, Union

from service_health.domain.entities.errors import ProbeDefinitionError
from service_health.domain.entities.health import ProbeResult

ProbeOutcome = Union[ProbeResult, Awaitable[ProbeResult]]
ProbeCallable = Callable[[], ProbeOutcome]


@dataclass(frozen=True)
class Probe:
    """
    A registered health probe.

    ``execute`` takes no arguments and returns a ProbeResult, either directly
    or as an awaitable. It is allowed to raise; the evaluator converts the
    failure into a failed result.
    """

    name: str
    execute: ProbeCallable

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ProbeDefinitionError("Probe name must be a non-empty string")
        if not callable(self.execute):
            raise ProbeDefinitionError(
                f"Probe '{self.name}' execute must be callable",
                {"probe": self.name},
            )
