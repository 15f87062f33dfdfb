"""Infrastructure services package."""

from .dependency_probes import http_probe, tcp_probe
from .health_evaluator import HealthEvaluator
from .system_probe import SystemProbe

__all__ = ["HealthEvaluator", "SystemProbe", "http_probe", "tcp_probe"]
