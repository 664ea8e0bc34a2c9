"""Application settings loaded from the environment."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cradle.core.config.enums import Environment


class Settings(BaseSettings):
    """Settings for the Cradle backend.

    Values come from environment variables (or a local ``.env`` file).
    Every field has a default that works for local development against SQLite.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    # Application
    PROJECT_NAME: str = "Cradle"
    ENVIRONMENT: Environment = Environment.LOCAL
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = Field(
        default="sqlite+aiosqlite:///./cradle.db",
        description="SQLAlchemy async URL (postgresql+asyncpg:// or sqlite+aiosqlite://)",
    )
    DB_POOL_SIZE: int = 20
    DB_POOL_MAX_OVERFLOW: int = 40
    CREATE_TABLES_ON_STARTUP: bool = True

    # Auth
    JWT_SECRET: str = "change-me-in-production"
    JWT_ALGORITHM: str = "HS256"

    # Usage limits
    DISABLE_USAGE_LIMITS: bool = Field(
        default=False,
        description="Wire the always-allow limit checker (local development only)",
    )

    @field_validator("DATABASE_URL")
    @classmethod
    def normalize_database_url(cls, v: str) -> str:
        """Promote sync driver URLs to their async counterparts."""
        if v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        if v.startswith("sqlite:///") and "+aiosqlite" not in v:
            return v.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return v

    @property
    def is_sqlite(self) -> bool:
        """Whether the configured database is SQLite."""
        return self.DATABASE_URL.startswith("sqlite")
