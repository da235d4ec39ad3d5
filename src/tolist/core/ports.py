# src/tolist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps storage backends swappable and makes testing easier.
"""

from datetime import date
from typing import Protocol

from ..tasks.task_models import Priority, Task


class BlobStorage(Protocol):
    """
    Single-slot durable key-value store.

    load() returns the last saved blob or None if nothing was ever stored.
    save() overwrites the slot in full.
    """

    def load(self) -> str | None: ...
    def save(self, blob: str) -> None: ...


class TaskRepo(Protocol):
    # Read side (views, rendering)
    @property
    def tasks(self) -> tuple[Task, ...]: ...
    def get(self, task_id: int) -> Task | None: ...
    def count_tasks(self) -> int: ...

    # Mutations
    def create(
            self,
            text: str,
            due_date: date | str | None = None,
            priority: Priority | str | None = None,
    ) -> Task: ...
    def toggle_completion(self, task_id: int) -> bool | None: ...
    def delete(self, task_id: int) -> Task | None: ...
    def clear_completed(self) -> int: ...
