"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has an environment variable of the same name (case-insensitive)
    - get_settings() is cached (lru_cache): one Settings instance per process
    - database_url always names an async driver (asyncpg or aiosqlite)

Design Decisions:
    - pydantic-settings over raw os.environ: type coercion, validation, .env support
    - Defaults match the docker-compose stack, so a bare checkout starts against it
    - Log files are opt-in: console only unless LOG_INFO_FILE / LOG_ERROR_FILE are set
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ASYNC_DRIVERS = {
    "postgresql://": "postgresql+asyncpg://",
    "postgres://": "postgresql+asyncpg://",
    "sqlite://": "sqlite+aiosqlite://",
}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Service
    service_name: str = "delivery-api"
    service_version: str = "1.0.0"

    # Database
    database_url: str = "postgresql+asyncpg://delivery:delivery@db:5432/delivery"
    database_pool_size: int = 20
    database_max_overflow: int = 10

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "text"] = "json"
    log_info_file: str | None = None
    log_error_file: str | None = None

    @field_validator("database_url", mode="before")
    @classmethod
    def use_async_driver(cls, v: str) -> str:
        """Plain scheme URLs (hosted Postgres, local SQLite) get their async driver."""
        if isinstance(v, str):
            for plain, async_scheme in _ASYNC_DRIVERS.items():
                if v.startswith(plain):
                    return v.replace(plain, async_scheme, 1)
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


@lru_cache
def get_settings() -> Settings:
    return Settings()
