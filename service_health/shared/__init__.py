"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides constants, enums, formatting helpers and logging
setup used across multiple layers of the application.

Following Clean Architecture principles it must not depend on
Infrastructure or Frameworks.
"""

from .consts import EnumEnvironment, EnumLogLevel
from .formatting import format_bytes
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "format_bytes",
    "get_logger",
    "update_logging_from_settings",
]
