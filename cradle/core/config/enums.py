"""Configuration enums for type-safe settings.

They inherit from str to keep JSON and env-var round trips trivial.
"""

from enum import Enum


class Environment(str, Enum):
    """Deployment environments.

    Controls environment-specific behavior like log formatting and
    which usage-limit checker gets wired into the container.
    """

    LOCAL = "local"
    TEST = "test"
    DEV = "dev"
    PRD = "prd"
