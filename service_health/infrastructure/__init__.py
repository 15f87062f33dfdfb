"""
Infrastructure Layer Package

This package contains implementations of the interfaces defined in the
domain layer: the probe registry, the clock, the system probe and the
concurrent health evaluator.
"""

from service_health.infrastructure import repositories, services

__all__ = ["repositories", "services"]
