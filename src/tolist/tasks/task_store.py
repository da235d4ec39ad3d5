# src/tolist/tasks/task_store.py

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import replace
from datetime import UTC, date, datetime

from ..core.ports import BlobStorage
from .task_codec import decode_tasks, encode_tasks
from .task_models import Priority, Task, ValidationError, parse_due_date

logger = logging.getLogger(__name__)


def _iso_utc_ms(ms: int) -> str:
    dt = datetime.fromtimestamp(ms / 1000, tz=UTC)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class TaskStore:
    """
    In-memory task collection synchronized to a blob storage.

    The collection is ordered newest first. It is loaded once at construction
    and rewritten in full on every effective mutation:
    - every mutation is followed by exactly one storage.save()
    - no save happens without a mutation (lookup misses, empty clears)

    Load policy:
    - absent blob -> empty collection
    - unreadable blob (bad JSON, not an array) -> empty collection, logged;
      the stored blob stays untouched until the next mutation
    """

    def __init__(
        self,
        storage: BlobStorage,
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._storage = storage
        self._clock = clock
        self._tasks: list[Task] = self._load()
        self._last_id = max((t.id for t in self._tasks), default=0)
        logger.info("TaskStore ready storage=%s total=%s", storage, len(self._tasks))

    def close(self) -> None:
        """Compatibility hook for shutdown (storage holds no open handles)."""
        return

    # ---- low-level helpers ----

    def _load(self) -> list[Task]:
        try:
            blob = self._storage.load()
            if blob is None or not blob.strip():
                return []
            return decode_tasks(blob)
        except (ValueError, RecursionError):
            # ValueError covers bad JSON and undecodable bytes (UnicodeDecodeError).
            logger.exception("Stored task blob is unreadable; starting with an empty list.")
            return []

    def _persist(self) -> None:
        self._storage.save(encode_tasks(self._tasks))

    def _next_id(self, now_ms: int) -> int:
        self._last_id = max(now_ms, self._last_id + 1)
        return self._last_id

    def _index_of(self, task_id: int) -> int | None:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return None

    # ---- read API ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def get(self, task_id: int) -> Task | None:
        idx = self._index_of(task_id)
        return self._tasks[idx] if idx is not None else None

    def count_tasks(self) -> int:
        return len(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- mutations ----

    def create(
        self,
        text: str,
        due_date: date | str | None = None,
        priority: Priority | str | None = None,
    ) -> Task:
        clean = (text or "").strip()
        if not clean:
            raise ValidationError("Task text is required")
        prio = Priority.parse(priority)
        due = parse_due_date(due_date)

        now_ms = int(self._clock() * 1000)
        task = Task(
            id=self._next_id(now_ms),
            text=clean,
            due_date=due,
            priority=prio,
            completed=False,
            created_at=_iso_utc_ms(now_ms),
        )
        self._tasks.insert(0, task)
        self._persist()
        logger.debug("Task added id=%s priority=%s due=%s", task.id, prio.value, due)
        return task

    def toggle_completion(self, task_id: int) -> bool | None:
        """Flip `completed`; returns the new state, or None if the id is unknown."""
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("toggle_completion: no task id=%s", task_id)
            return None

        task = self._tasks[idx]
        updated = replace(task, completed=not task.completed)
        self._tasks[idx] = updated
        self._persist()
        logger.debug("Task toggled id=%s completed=%s", task_id, updated.completed)
        return updated.completed

    def delete(self, task_id: int) -> Task | None:
        """Remove a task; returns the removed task, or None if the id is unknown."""
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("delete: no task id=%s", task_id)
            return None

        removed = self._tasks.pop(idx)
        self._persist()
        logger.debug("Task deleted id=%s", task_id)
        return removed

    def clear_completed(self) -> int:
        kept = [t for t in self._tasks if not t.completed]
        removed = len(self._tasks) - len(kept)
        if removed == 0:
            return 0

        self._tasks = kept
        self._persist()
        logger.info("Cleared %d completed task(s)", removed)
        return removed
