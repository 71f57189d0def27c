"""
Configuration settings for stockroom.

Uses Pydantic Settings to load environment variables for the optional
PostgreSQL backend, logging, and connection behaviour. When the backend is
disabled or still carries placeholder credentials, stores fall back to the
fixed seed data.
"""
from __future__ import annotations

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PLACEHOLDER_MARKER = "placeholder"


class Settings(BaseSettings):
    # Backend database
    db_host: str = Field("localhost", alias="DB_HOST")
    db_port: int = Field(5432, alias="DB_PORT")
    db_user: str = Field("postgres", alias="DB_USER")
    db_password: str = Field("postgres", alias="DB_PASSWORD")
    db_name: str = Field("stockroom", alias="DB_NAME")
    backend_enabled: bool = Field(False, alias="BACKEND_ENABLED")
    table_prefix: str = Field("", alias="TABLE_PREFIX")

    # Connection behaviour
    db_connect_timeout_s: int = Field(5, alias="DB_CONNECT_TIMEOUT_S")
    db_connect_attempts: int = Field(1, alias="DB_CONNECT_ATTEMPTS", ge=1)
    db_statement_timeout_ms: int = Field(5_000, alias="DB_STATEMENT_TIMEOUT_MS")
    db_pool_min_size: int = Field(1, alias="DB_POOL_MIN_SIZE")
    db_pool_max_size: int = Field(5, alias="DB_POOL_MAX_SIZE")

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def backend_configured(self) -> bool:
        """
        Whether a remote backend can be used.

        The backend must be enabled explicitly and its host and credentials
        must be present and free of the placeholder marker.
        """
        if not self.backend_enabled:
            return False
        required = (self.db_host, self.db_user, self.db_password, self.db_name)
        if not all(required):
            return False
        return not any(PLACEHOLDER_MARKER in value.lower() for value in required)

    def table_name(self, table: str) -> str:
        """Physical table name for a collection table."""
        return f"{self.table_prefix}{table}"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings", "PLACEHOLDER_MARKER"]
