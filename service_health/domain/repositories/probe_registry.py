"""
Probe Registry Interface

This module defines the contract for the ordered collection of custom
probes consulted on every health evaluation.
"""

from abc import ABC, abstractmethod
from typing import List, Tuple

from service_health.domain.entities.probe import Probe, ProbeCallable


class IProbeRegistry(ABC):
    """Interface for probe registry implementations."""

    @abstractmethod
    def add(self, name: str, execute: ProbeCallable) -> Probe:
        """
        Append a probe to the registry.

        Names are not required to be unique; a duplicate name coexists with
        the earlier registration.

        Args:
            name: Identifier used as the key in the report
            execute: Callable producing a ProbeResult or an awaitable of one

        Returns:
            The registered probe
        """
        pass

    @abstractmethod
    def remove(self, name: str) -> bool:
        """
        Remove the first probe registered under ``name``.

        Args:
            name: Identifier of the probe to remove

        Returns:
            True if a probe was removed, False otherwise
        """
        pass

    @abstractmethod
    def names(self) -> List[str]:
        """Return the registered probe names in registration order."""
        pass

    @abstractmethod
    def snapshot(self) -> Tuple[Probe, ...]:
        """Return an immutable copy of the current probe sequence."""
        pass
