"""Configuration settings for the Pets API.

Settings are loaded with Pydantic Settings from environment variables and an
optional ``.env`` file. Related values are grouped into nested models; nested
values are addressed with a double underscore, e.g. ``DATABASE__URL``.
"""

from functools import lru_cache
from typing import List, Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseModel):
    """Core application configuration."""

    name: str = Field(default="Pets API", description="Application name")
    version: str = Field(default="0.1.0", description="Application version")
    environment: Literal["development", "staging", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


class APIConfig(BaseModel):
    """API-specific configuration."""

    prefix: str = Field(default="/api/v1", description="API route prefix")
    cors_origins: List[str] = Field(default=["*"], description="Allowed CORS origins")
    cors_allow_credentials: bool = Field(
        default=True, description="Allow CORS credentials"
    )
    cors_allow_methods: List[str] = Field(
        default=["GET", "POST", "PUT", "DELETE"], description="Allowed CORS methods"
    )
    cors_allow_headers: List[str] = Field(
        default=["*"], description="Allowed CORS headers"
    )


class DatabaseConfig(BaseModel):
    """Database configuration."""

    url: str = Field(
        default="sqlite+aiosqlite:///./pets.db",
        description="SQLAlchemy async connection URL",
    )
    echo: bool = Field(default=False, description="Echo SQL statements")
    pool_size: int = Field(default=10, description="Database connection pool size")
    max_overflow: int = Field(default=5, description="Max overflow connections")

    @property
    def is_sqlite(self) -> bool:
        """Check if the URL points at a SQLite database."""
        return self.url.startswith("sqlite")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Application log level")
    json_format: bool = Field(
        default=False, description="Render log lines as JSON instead of console text"
    )


class Settings(BaseSettings):
    """Application settings with logical grouping."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    app: AppConfig = Field(default_factory=AppConfig)
    api: APIConfig = Field(default_factory=APIConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def database_url(self) -> str:
        """Shortcut for the database URL."""
        return self.database.url

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app.is_production


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Application settings
    """
    return Settings()
