"""
Logging Configuration - Shared Layer

This module wires structlog on top of the standard logging package so every
layer emits structured events through the same handlers.
"""

import logging
import os
import sys
from typing import Any, List, Optional

import structlog
from structlog.types import Processor

from service_health.shared.consts import EnumEnvironment

_SHARED_PROCESSORS: List[Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
]


def _plain(value: Any) -> Any:
    return value.value if hasattr(value, "value") else value


def _build_renderer(environment: str) -> Processor:
    if environment.lower() == EnumEnvironment.PRODUCTION.value:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(
    level: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: Optional[str] = None,
) -> None:
    """
    Route structlog and stdlib records through the root logger handlers.

    Arguments left as None fall back to LOG_LEVEL, LOG_FILE_PATH and
    ENVIRONMENT, so logging works before the settings object is loaded.
    Calling again replaces the previous handlers.

    Args:
        level: Minimum severity (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        file_path: Optional file receiving a copy of every record.
        environment: Deployment environment; production renders JSON.
    """
    log_level = level or os.environ.get("LOG_LEVEL") or "INFO"
    log_file = file_path or os.environ.get("LOG_FILE_PATH")
    env_value = (
        environment
        or os.environ.get("ENVIRONMENT")
        or EnumEnvironment.DEVELOPMENT.value
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=_build_renderer(env_value),
        foreign_pre_chain=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
        ],
    )
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.handlers = handlers
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    logging.getLogger(__name__).debug(
        "logging.configured level=%s file=%s", log_level, log_file
    )


def update_logging_from_settings(settings: Any) -> None:
    """Reconfigure logging once ``AppSettings`` has been loaded."""
    try:
        configure_logging(
            level=_plain(settings.logging.level),
            file_path=settings.logging.file_path,
            environment=_plain(settings.environment),
        )
    except (AttributeError, OSError) as exc:
        logging.getLogger(__name__).error(
            "Failed to update logging from settings: %s", exc
        )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)
