# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from tolist.config import Settings


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in (
        "TOLIST_APP_NAME",
        "TOLIST_LOG_LEVEL",
        "TOLIST_DATA_DIR",
        "TOLIST_STORAGE_BACKEND",
        "TOLIST_STORAGE_KEY",
        "TOLIST_TASKS_DB_PATH",
        "TOLIST_TASKS_JSON_PATH",
        "TOLIST_CONSOLE_ENABLED",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    s = Settings.from_env()

    assert s.app_name == "tolist"
    assert s.log_level == "WARNING"
    assert s.storage_backend == "sqlite"
    assert s.storage_key == "todoTasks"
    assert s.data_dir == Path(".local/tolist")
    assert s.tasks_db_path == Path(".local/tolist/tasks.sqlite3")
    assert s.console_enabled is True


def test_env_overrides(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    clean_env.setenv("TOLIST_DATA_DIR", str(tmp_path))
    clean_env.setenv("TOLIST_STORAGE_BACKEND", "JSON")
    clean_env.setenv("TOLIST_STORAGE_KEY", "myTasks")
    clean_env.setenv("TOLIST_CONSOLE_ENABLED", "no")
    clean_env.setenv("TOLIST_LOG_LEVEL", "debug")

    s = Settings.from_env()

    assert s.storage_backend == "json"
    assert s.storage_key == "myTasks"
    assert s.tasks_json_path == tmp_path / "tasks.json"
    assert s.console_enabled is False
    assert s.log_level == "DEBUG"


def test_unknown_backend_falls_back_to_sqlite(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("TOLIST_STORAGE_BACKEND", "redis")
    assert Settings.from_env().storage_backend == "sqlite"
