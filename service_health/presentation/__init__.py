"""
Presentation Layer Package

This package contains the HTTP-facing components: the ASGI middleware that
claims the health endpoint and the renderer shaping its responses.
"""

from service_health.presentation import middleware
from service_health.presentation.health_renderer import (
    HealthReportRenderer,
    HealthResponse,
)

__all__ = ["middleware", "HealthReportRenderer", "HealthResponse"]
