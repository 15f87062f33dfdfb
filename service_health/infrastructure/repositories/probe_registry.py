"""
In-memory Probe Registry - Infrastructure Layer

This module implements the probe registry as an ordered list guarded by a
lock, so the hosting service can add or remove probes while an evaluation
is iterating over a snapshot.
"""

from __future__ import annotations

import threading
from typing import Iterable, Iterator, List, Optional, Tuple

from service_health.domain.entities.probe import Probe, ProbeCallable
from service_health.domain.repositories.probe_registry import IProbeRegistry


class InMemoryProbeRegistry(IProbeRegistry):
    """Ordered, duplicate-tolerant collection of probes."""

    def __init__(self, checks: Optional[Iterable[Probe]] = None) -> None:
        self._lock = threading.Lock()
        self._probes: List[Probe] = list(checks or [])

    def add(self, name: str, execute: ProbeCallable) -> Probe:
        probe = Probe(name=name, execute=execute)
        with self._lock:
            self._probes.append(probe)
        return probe

    def remove(self, name: str) -> bool:
        with self._lock:
            for index, probe in enumerate(self._probes):
                if probe.name == name:
                    del self._probes[index]
                    return True
        return False

    def names(self) -> List[str]:
        with self._lock:
            return [probe.name for probe in self._probes]

    def snapshot(self) -> Tuple[Probe, ...]:
        with self._lock:
            return tuple(self._probes)

    def __len__(self) -> int:
        with self._lock:
            return len(self._probes)

    def __iter__(self) -> Iterator[Probe]:
        return iter(self.snapshot())
