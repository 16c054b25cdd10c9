"""Runtime environments.

The environment decides how logs are rendered (console in development, JSON
elsewhere) and whether the /config diagnostics endpoint answers.
"""

from enum import Enum


class Environment(str, Enum):
    """Where the service is running (ENVIRONMENT variable)."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
