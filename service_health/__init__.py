"""
Service Health Root Module

This module serves as the root for the health-reporting service.

Layer Structure:
- Domain: Probe results, reports, aggregation rules and ports
- Application: Use cases and DTOs
- Infrastructure: Probe registry, system probe and the concurrent evaluator
- Presentation: ASGI middleware and response rendering for the health endpoint
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry point and configuration
"""
