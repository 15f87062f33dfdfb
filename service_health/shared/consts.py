from enum import Enum


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


DEFAULT_HEALTH_ENDPOINT = "/health"
DEFAULT_SERVICE_NAME = "service-health"
DEFAULT_SERVICE_VERSION = "1.0.0"
DEFAULT_PROBE_TIMEOUT_SECONDS = 5.0
SYSTEM_PROBE_NAME = "system"
