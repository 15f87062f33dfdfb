"""
Domain Entities Package

This package contains the core health entities and value objects.
"""

from .errors import DomainError, InvalidProbeResultError, ProbeDefinitionError
from .health import ProbeResult, ProbeStatus, ServiceHealthReport
from .probe import Probe, ProbeCallable, ProbeOutcome

__all__ = [
    "Probe",
    "ProbeCallable",
    "ProbeOutcome",
    "ProbeResult",
    "ProbeStatus",
    "ServiceHealthReport",
    "DomainError",
    "ProbeDefinitionError",
    "InvalidProbeResultError",
]
