"""Application settings and configuration."""

from functools import lru_cache
from typing import ClassVar, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Heathen Index API", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")
    testing: bool = Field(default=False, description="Testing mode")
    host: str = Field(default="0.0.0.0", description="Host to bind to")
    port: int = Field(default=8000, description="Port to bind to")
    log_level: str = Field(default="INFO", description="Root log level")

    # CORS
    allowed_origins: list[str] = Field(
        default=[
            "http://localhost:3000",
            "http://localhost:5000",
            "http://localhost:5173",
        ],
        description="Allowed CORS origins",
    )

    # Security
    secret_key: str = Field(
        default="your-secret-key-change-in-production",
        description="Shared secret used to verify identity provider tokens",
    )
    algorithm: str = Field(default="HS256", description="JWT algorithm")
    access_token_expire_minutes: int = Field(
        default=30, description="Access token expiration time in minutes"
    )
    auth_cookie_name: str = Field(
        default="access_token", description="Cookie carrying the access token"
    )

    # Storage
    storage_backend: Literal["memory", "database"] = Field(
        default="memory", description="Which storage implementation to use"
    )
    seed_on_startup: bool = Field(
        default=True, description="Seed sample entries when storage is empty"
    )
    default_page_size: int = Field(
        default=12, ge=1, description="Page size used when no limit is given"
    )

    # PostgreSQL Database
    database_url: str | None = Field(
        default=None,
        description="Full connection string; overrides the postgres_* components",
    )
    postgres_user: str = Field(default="admin", description="PostgreSQL user")
    postgres_password: str = Field(
        default="supersecretpassword", description="PostgreSQL password"
    )
    postgres_host: str = Field(default="localhost", description="PostgreSQL host")
    postgres_port: int = Field(default=5432, description="PostgreSQL port")
    postgres_db: str = Field(
        default="heathen_index", description="PostgreSQL database name"
    )
    test_postgres_db: str = Field(
        default="heathen_index_test", description="PostgreSQL test database name"
    )

    @property
    def sqlalchemy_url(self) -> str:
        """Connection string for the async SQLAlchemy engine."""
        if self.database_url:
            return normalize_database_url(self.database_url)

        db_name = self.test_postgres_db if self.testing else self.postgres_db
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{db_name}"
        )


def normalize_database_url(url: str) -> str:
    """Point bare postgres URLs at the asyncpg driver."""
    for prefix in ("postgres://", "postgresql://"):
        if url.startswith(prefix):
            return "postgresql+asyncpg://" + url[len(prefix) :]
    return url


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
