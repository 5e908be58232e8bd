"""
Configuration helpers for the Projects backend.

Settings are read from environment variables once and cached, so that
routers/services/repositories do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    store_backend: str
    log_level: str
    log_file: str
    auto_create_tables: bool
    cors_origins: tuple[str, ...]


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        return default

    def _list(value: str | None) -> tuple[str, ...]:
        items = (item.strip().rstrip("/") for item in (value or "").split(","))
        return tuple(item for item in items if item)

    backend = (os.getenv("STORE_BACKEND") or "sql").strip().lower()
    if backend not in {"sql", "memory"}:
        backend = "sql"

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=(os.getenv("DATABASE_URL") or "sqlite:///./projects.db").strip(),
        store_backend=backend,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_file=(os.getenv("LOG_FILE") or "").strip(),
        auto_create_tables=_bool(os.getenv("AUTO_CREATE_TABLES"), True),
        cors_origins=_list(os.getenv("CORS_ORIGINS")),
    )
