"""Runtime settings read from ``TODO_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from todoapp.data import DEFAULT_DB_URL
from todoapp.services.storage import DEFAULT_STORAGE_KEY

ENV_PREFIX = "TODO"
STORAGE_BACKENDS = ("browser", "sql")


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str) -> str:
    value = (os.getenv(name) or "").strip()
    return value or default


def _env_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    debug: bool
    host: str
    port: int
    storage_secret: str
    storage_backend: str
    db_url: str
    storage_key: str
    log_dir: Path


def load_settings() -> Settings:
    backend = _env(_k("STORAGE_BACKEND"), "browser").lower()
    if backend not in STORAGE_BACKENDS:
        backend = "browser"
    return Settings(
        debug=os.getenv(_k("DEBUG")) == "1",
        host=_env(_k("HOST"), "0.0.0.0"),
        port=_env_int(_k("PORT"), 8080),
        storage_secret=_env(_k("STORAGE_SECRET"), "todo-local-secret"),
        storage_backend=backend,
        db_url=_env(_k("DB_URL"), DEFAULT_DB_URL),
        storage_key=_env(_k("STORAGE_KEY"), DEFAULT_STORAGE_KEY),
        log_dir=Path(_env(_k("LOG_DIR"), "./data/logs")).expanduser(),
    )
