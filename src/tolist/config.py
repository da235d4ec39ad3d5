# src/tolist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a local default; nothing is required at import time.

Environment variables (prefix TOLIST_):
- TOLIST_APP_NAME: display name (default: tolist)
- TOLIST_LOG_LEVEL: console log level (default: WARNING)
- TOLIST_DATA_DIR: local data directory (default: .local/tolist)
- TOLIST_STORAGE_BACKEND: "sqlite" or "json" (default: sqlite)
- TOLIST_STORAGE_KEY: name of the storage slot (default: todoTasks)
- TOLIST_TASKS_DB_PATH: SQLite path (default: <data_dir>/tasks.sqlite3)
- TOLIST_TASKS_JSON_PATH: JSON file path (default: <data_dir>/tasks.json)
- TOLIST_CONSOLE_ENABLED: run the console REPL (default: true)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

from .storage.blob_store import DEFAULT_STORAGE_KEY

ENV_PREFIX = "TOLIST"
STORAGE_BACKENDS = ("sqlite", "json")

logger = logging.getLogger(__name__)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    raw = _env(name, default).lower()
    if raw not in choices:
        logger.warning("%s=%r is not one of %s; using %r", name, raw, choices, default)
        return default
    return raw


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Connector flags ----
    console_enabled: bool

    # ---- Storage ----
    storage_backend: str
    storage_key: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_db_path: Path
    tasks_json_path: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "tolist")
        log_level = _env(_k("LOG_LEVEL"), "WARNING").upper()

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)

        storage_backend = _env_choice(_k("STORAGE_BACKEND"), STORAGE_BACKENDS, "sqlite")
        storage_key = _env(_k("STORAGE_KEY"), DEFAULT_STORAGE_KEY)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/tolist"))
        tasks_db_path = _env_path(_k("TASKS_DB_PATH"), data_dir / "tasks.sqlite3")
        tasks_json_path = _env_path(_k("TASKS_JSON_PATH"), data_dir / "tasks.json")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            console_enabled=console_enabled,
            storage_backend=storage_backend,
            storage_key=storage_key,
            data_dir=data_dir,
            tasks_db_path=tasks_db_path,
            tasks_json_path=tasks_json_path,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv(override=False)
    return Settings.from_env()
