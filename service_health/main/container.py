"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager
from typing import Iterable, Optional

from dependency_injector import containers, providers

from service_health.application.use_cases.health_use_cases import (
    GetHealthReportUseCase,
    ManageProbesUseCase,
)
from service_health.domain.entities.probe import Probe
from service_health.infrastructure.clock import SystemClock
from service_health.infrastructure.repositories.probe_registry import (
    InMemoryProbeRegistry,
)
from service_health.infrastructure.services.health_evaluator import HealthEvaluator
from service_health.infrastructure.services.system_probe import SystemProbe
from service_health.presentation.health_renderer import HealthReportRenderer
from service_health.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


def _report_environment(override: Optional[str], environment: object) -> str:
    if override:
        return override
    return environment.value if hasattr(environment, "value") else str(environment)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    # Settings
    config = providers.Configuration()
    initial_checks = providers.Object(())

    # Infrastructure
    clock = providers.Singleton(SystemClock)

    probe_registry = providers.Singleton(
        InMemoryProbeRegistry,
        checks=initial_checks,
    )

    system_probe = providers.Singleton(
        SystemProbe,
        include_details=config.health.include_details,
    )

    health_evaluator = providers.Singleton(
        HealthEvaluator,
        registry=probe_registry,
        system_probe=system_probe,
        service=config.health.service,
        version=config.health.version,
        environment=providers.Callable(
            _report_environment,
            config.health.environment,
            config.environment,
        ),
        clock=clock,
        probe_timeout=config.health.probe_timeout_seconds,
        max_workers=config.health.probe_workers,
    )

    # Application (use cases)
    get_health_report_use_case = providers.Factory(
        GetHealthReportUseCase,
        health_evaluator=health_evaluator,
    )

    manage_probes_use_case = providers.Factory(
        ManageProbesUseCase,
        probe_registry=probe_registry,
    )

    # Presentation
    health_report_renderer = providers.Singleton(
        HealthReportRenderer,
        get_health_report_use_case=get_health_report_use_case,
        manage_probes_use_case=manage_probes_use_case,
        endpoint=config.health.endpoint,
        service=config.health.service,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(
    settings: AppSettings, checks: Optional[Iterable[Probe]] = None
) -> AppContainer:
    """Initialize global container with application settings and probes."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    container.initial_checks.override(providers.Object(tuple(checks or ())))
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan(container: Optional[AppContainer] = None):
    """
    Build the long-lived health components for the application lifetime.

    Uses the given container, or the global one when omitted. The probe
    thread pool is released on exit.
    """
    container = container if container is not None else get_container()

    evaluator = container.health_evaluator()
    registry = container.probe_registry()
    logger.info(
        "container.resources.initialized",
        service=evaluator.service,
        probes=registry.names(),
        probe_timeout=evaluator.probe_timeout,
    )
    try:
        yield container
    finally:
        evaluator.close()
        logger.info("container.resources.shutdown", probes=len(registry))
