"""Domain ports package."""

from .clock import IClock
from .health_evaluator import IHealthEvaluator
from .probe import IProbe

__all__ = ["IClock", "IHealthEvaluator", "IProbe"]
