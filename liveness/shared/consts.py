from enum import Enum

HEALTHY_BODY = "WORKING"
DEFAULT_WEB_SERVER_PORT = 4444
DEFAULT_HEALTH_TARGETS = "mongo,redis"


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
