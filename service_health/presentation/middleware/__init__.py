"""
Middleware Package - Presentation Layer

This package contains ASGI middleware installed on the FastAPI application.
"""

from .health_middleware import HealthCheckMiddleware

__all__ = ["HealthCheckMiddleware"]
