"""Configuration module for the Cradle backend.

Usage:
    from cradle.core.config import settings, Environment

    if settings.ENVIRONMENT == Environment.PRD:
        ...
"""

from cradle.core.config.enums import Environment
from cradle.core.config.settings import Settings

__all__ = [
    "Settings",
    "Environment",
    "settings",
]

# Singleton settings instance
settings = Settings()
