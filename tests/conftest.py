# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tolist.core.state import AppState
from tolist.tasks.task_store import TaskStore

from .fakes import FakeBlobStorage, FakeClock


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="tolist-test",
        log_level="DEBUG",
        console_enabled=False,
        storage_backend="sqlite",
        storage_key="todoTasks",
        data_dir=tmp_path,
        tasks_db_path=tmp_path / "tasks.sqlite3",
        tasks_json_path=tmp_path / "tasks.json",
    )


@pytest.fixture()
def storage() -> FakeBlobStorage:
    return FakeBlobStorage()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(storage: FakeBlobStorage, clock: FakeClock) -> TaskStore:
    return TaskStore(storage, clock=clock)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """AppState wired with the in-memory storage and a fixed clock."""
    return AppState(settings=settings, task_store=store)
