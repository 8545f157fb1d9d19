"""Application configuration."""

import logging
import secrets
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./lifehacking.db"

    # Auth: HS256 key used to verify caller bearer tokens
    SECRET_KEY: str = ""
    TOKEN_ALGORITHM: str = "HS256"

    # API (constants, not from env)
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Lifehacking API"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    @model_validator(mode="after")
    def validate_secret_key(self) -> "Settings":
        """
        Refuse to run in production without a signing key.

        Elsewhere an empty key is replaced by a random one for this process, so
        tokens signed with an empty key are never accepted.
        """
        if self.SECRET_KEY:
            return self
        if self.ENVIRONMENT == "production":
            msg = "SECRET_KEY is required when ENVIRONMENT is 'production'"
            raise ValueError(msg)
        self.SECRET_KEY = secrets.token_urlsafe(32)
        return self


def configure_logging(environment: str = "development") -> None:
    """Configure structured logging with structlog."""
    use_json = environment == "production"

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if environment == "development" else logging.INFO,
    )

    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
