"""Environment-based configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass


def resolve_database_url() -> str:
    """Resolve DB connection string.

    Priority:
      1) DATABASE_URL (explicit)
      2) Fallback to local sqlite
    """

    explicit = os.getenv("DATABASE_URL")
    if explicit:
        return explicit
    return "sqlite:///./lotto_report.db"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = os.getenv("APP_ENV", "development")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret")
    DATABASE_URL: str = resolve_database_url()
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Local CSV path or http(s) URL.
    HISTORY_SOURCE: str = os.getenv("HISTORY_SOURCE", "./data/lotto_full_history.csv")
    HISTORY_ASYNC_LOAD: bool = _env_bool("HISTORY_ASYNC_LOAD")

    HTTP_TIMEOUT_SECONDS: float = _env_float("HTTP_TIMEOUT_SECONDS", 10.0)
    HTTP_RETRIES: int = _env_int("HTTP_RETRIES", 3)
    HTTP_BACKOFF: float = _env_float("HTTP_BACKOFF", 0.3)

    GENERATE_MAX_ATTEMPTS: int = _env_int("GENERATE_MAX_ATTEMPTS", 10_000)
    # Unset means an unseeded generator.
    GENERATE_SEED: int | None = _env_int("GENERATE_SEED", 0) if os.getenv("GENERATE_SEED") else None
    BOOKMARKS_KEY: str = os.getenv("BOOKMARKS_KEY", "lotto_bookmarks")


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False


def get_config() -> type[BaseConfig]:
    """Resolve configuration class based on APP_ENV."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig
    return DevelopmentConfig
