# src/tolist/tasks/task_views.py

"""
Read-only projections over the task collection.

Both projections are recomputed on every call; nothing is cached, so
callers simply ask again after a mutation or a filter change.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..core.ports import TaskRepo
from .task_models import FilterMode, Priority, Task


@dataclass(frozen=True, slots=True)
class TaskCounts:
    total: int
    pending: int
    completed: int


_PREDICATES: dict[FilterMode, Callable[[Task], bool]] = {
    FilterMode.ALL: lambda t: True,
    FilterMode.PENDING: lambda t: not t.completed,
    FilterMode.COMPLETED: lambda t: t.completed,
    FilterMode.HIGH_PRIORITY: lambda t: t.priority is Priority.HIGH,
}


def filtered_view(repo: TaskRepo, mode: FilterMode | str = FilterMode.ALL) -> list[Task]:
    """Tasks matching `mode`, in collection order (newest first)."""
    pred = _PREDICATES[FilterMode.parse(mode)]
    return [t for t in repo.tasks if pred(t)]


def task_counts(repo: TaskRepo) -> TaskCounts:
    """Counts over the whole collection, regardless of the active filter."""
    tasks = repo.tasks
    total = len(tasks)
    completed = sum(1 for t in tasks if t.completed)
    return TaskCounts(total=total, pending=total - completed, completed=completed)
