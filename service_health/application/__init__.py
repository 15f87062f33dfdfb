"""
Application Layer Package

This package contains the use cases and DTOs that sit between the health
domain and the HTTP surface.
"""

# Re-export submodules
from service_health.application import dtos, use_cases

__all__ = ["dtos", "use_cases"]
