"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ProbeDefinitionError(DomainError, ValueError):
    """Raised when a probe is registered with an invalid definition."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class InvalidProbeResultError(DomainError, TypeError):
    """Raised when a probe returns something other than a ProbeResult."""

    def __init__(self, probe_name: str, received: Any):
        message = (
            f"Probe '{probe_name}' returned {type(received).__name__}, "
            "expected ProbeResult"
        )
        super().__init__(message, {"probe": probe_name})
