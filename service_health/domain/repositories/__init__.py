"""
Repositories Package

This package contains interfaces defining repository contracts.
Specific implementations are provided by the infrastructure layer.
"""

from .probe_registry import IProbeRegistry

__all__ = ["IProbeRegistry"]
