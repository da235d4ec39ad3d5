# src/tolist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- picks the blob storage backend and builds the TaskStore on top of it.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import BlobStorage
from ..core.state import AppState
from ..storage.blob_store import JsonFileBlobStorage, SQLiteBlobStorage
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_db_path.parent.mkdir(parents=True, exist_ok=True)
    settings.tasks_json_path.parent.mkdir(parents=True, exist_ok=True)


def create_storage(settings) -> BlobStorage:
    backend = str(getattr(settings, "storage_backend", "sqlite")).lower()
    if backend == "json":
        return JsonFileBlobStorage(settings.tasks_json_path)
    if backend == "sqlite":
        return SQLiteBlobStorage(settings.tasks_db_path, key=settings.storage_key)
    raise ValueError(f"Unknown storage backend: {backend!r}")


def create_initial_state(*, settings=None, storage: BlobStorage | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and storage) injectable makes the app easier to test
    and avoids hidden global config reads. If settings is None, falls back
    to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if storage is None:
        storage = create_storage(settings)

    state = AppState(settings=settings, task_store=TaskStore(storage))
    logger.info("State ready backend=%s tasks=%d", storage, state.task_store.count_tasks())
    return state
