"""
Use Cases Package - Application Layer

This package contains use cases orchestrating health evaluation and
probe registration.
"""

from .health_use_cases import GetHealthReportUseCase, ManageProbesUseCase

__all__ = ["GetHealthReportUseCase", "ManageProbesUseCase"]
