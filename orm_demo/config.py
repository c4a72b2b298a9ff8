import logging
import sys
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

# Async driver each supported backend is rewritten to
ASYNC_DRIVERS = {
    "sqlite": "sqlite+aiosqlite",
    "postgresql": "postgresql+asyncpg",
    "postgres": "postgresql+asyncpg",
}


def normalize_database_url(url: str) -> str:
    """Rewrite a database URL so it targets an asyncio driver.

    Accepts Prisma-style ``file:./dev.db`` URLs as SQLite files.
    """
    url = url.strip()
    if url.startswith("file:"):
        return f"sqlite+aiosqlite:///{url[len('file:'):]}"

    scheme, sep, rest = url.partition("://")
    if not sep:
        raise ConfigurationError("database_url", f"not a URL: {url!r}")

    backend, _, driver = scheme.partition("+")
    if backend not in ASYNC_DRIVERS:
        raise ConfigurationError("database_url", f"unsupported backend '{backend}'")
    if driver in ("aiosqlite", "asyncpg"):
        return url
    return f"{ASYNC_DRIVERS[backend]}://{rest}"


class Settings(BaseSettings):
    app_name: str = "KodeMonkey ORM Demo"
    debug: bool = False
    database_url: str = "sqlite+aiosqlite:///./dev.db"

    # Create missing tables before running, so an empty SQLite file works
    create_schema: bool = True

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("database_url")
    @classmethod
    def use_async_driver(cls, v):
        return normalize_database_url(v)

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v


settings = Settings()


def get_settings() -> Settings:
    return settings


def setup_logging(level: str = None):
    """Setup logging for the command line entry points."""
    logging.basicConfig(
        level=level or settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    return logging.getLogger("orm_demo")
