"""
Domain Layer Package

This package contains the core health-reporting rules of the application.
It defines entities, ports, repositories and services without dependencies
on external frameworks or infrastructure concerns.
"""

# Re-export submodules
from service_health.domain import entities, ports, repositories, services

__all__ = ["entities", "repositories", "services", "ports"]
