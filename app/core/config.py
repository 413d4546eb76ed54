"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Values are read once at process start and are not
changed afterwards; get_settings() caches the instance.
"""

from datetime import timedelta
from functools import lru_cache

from pydantic import AliasChoices, Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.shared.utils.datetime import parse_duration

_LOG_LEVELS = frozenset({"critical", "error", "warning", "info", "debug"})


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    Everything has a development default so the service boots locally
    without a .env file; production deployments override SECRET_KEY and
    the store credentials.
    """

    # App
    app_name: str = Field(
        default="boilerplate",
        validation_alias=AliasChoices("APPLICATION_NAME", "APP_NAME"),
    )
    app_version: str = "1.0.0"
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("NODE_ENV", "ENVIRONMENT"),
    )
    host: str = "localhost"
    port: int = 5000
    log_level: str = "debug"
    debug: bool = False

    # Security
    secret_key: SecretStr = SecretStr("secret")
    algorithm: str = "HS256"
    token_expires_in: str = "1d"
    refresh_token_expires_in: str = "7d"

    # Store: "mysql" or "postgres"
    database_backend: str = "mysql"

    pg_db_driver: str = "postgresql+asyncpg"
    pg_db_host: str = "localhost"
    pg_db_port: int = 5432
    pg_db_user: str = "postgres"
    pg_db_password: SecretStr = SecretStr("postgres")
    pg_db_name: str = "postgres"

    mysql_db_driver: str = "mysql+aiomysql"
    mysql_db_host: str = "localhost"
    mysql_db_port: int = 3306
    mysql_db_user: str = "mysql"
    mysql_db_password: SecretStr = SecretStr("mysql")
    mysql_db_name: str = "mysql"

    db_pool_size: int = 10
    db_max_overflow: int = 5
    db_query_timeout_seconds: float = 10.0

    # Request / middleware
    request_id_header: str = "X-Request-ID"
    allowed_origins: str = "http://localhost:3000"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().lower()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got: {v!r}"
            )
        return level

    @field_validator("token_expires_in", "refresh_token_expires_in")
    @classmethod
    def validate_duration(cls, v: str) -> str:
        parse_duration(v)
        return v

    @model_validator(mode="after")
    def validate_database_backend(self) -> "Settings":
        """Only the two relational backends are supported."""
        if self.database_backend not in ("mysql", "postgres"):
            raise ValueError(
                f"database_backend must be 'mysql' or 'postgres', got: {self.database_backend!r}"
            )
        return self

    @property
    def access_token_ttl(self) -> timedelta:
        return parse_duration(self.token_expires_in)

    @property
    def refresh_token_ttl(self) -> timedelta:
        return parse_duration(self.refresh_token_expires_in)

    @property
    def database_url(self) -> str:
        """SQLAlchemy URL for the selected backend."""
        if self.database_backend == "postgres":
            return (
                f"{self.pg_db_driver}://{self.pg_db_user}:"
                f"{self.pg_db_password.get_secret_value()}@{self.pg_db_host}:"
                f"{self.pg_db_port}/{self.pg_db_name}"
            )
        return (
            f"{self.mysql_db_driver}://{self.mysql_db_user}:"
            f"{self.mysql_db_password.get_secret_value()}@{self.mysql_db_host}:"
            f"{self.mysql_db_port}/{self.mysql_db_name}"
        )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
