# src/tolist/tasks/task_codec.py

"""
Blob codec for the task collection.

The persisted blob is a JSON array of flat records:

    {"id": 1729330200123, "text": "Buy milk", "date": "2026-10-20",
     "priority": "high", "completed": false, "createdAt": "2026-10-19T09:30:00.123Z"}

`date` is an empty string when the task has no due date.
There is no schema version field.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Iterable
from datetime import date
from typing import Any

from .task_models import Priority, Task

logger = logging.getLogger(__name__)


def task_to_record(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "text": task.text,
        "date": task.due_date.isoformat() if task.due_date else "",
        "priority": task.priority.value,
        "completed": task.completed,
        "createdAt": task.created_at,
    }


def encode_tasks(tasks: Iterable[Task]) -> str:
    return json.dumps([task_to_record(t) for t in tasks], ensure_ascii=False)


def _valid_id(tid: Any) -> bool:
    if isinstance(tid, bool) or not isinstance(tid, (int, float)):
        return False
    if isinstance(tid, float) and (not math.isfinite(tid) or not tid.is_integer()):
        return False
    return True


def _record_to_task(raw: Any) -> Task | None:
    if not isinstance(raw, dict):
        logger.warning("Skipping non-object task record: %r", raw)
        return None

    tid = raw.get("id")
    if not _valid_id(tid):
        logger.warning("Skipping task record with invalid id: %r", tid)
        return None

    text = raw.get("text")
    if not isinstance(text, str) or not text.strip():
        logger.warning("Skipping task record id=%s with empty text", tid)
        return None

    try:
        priority = Priority(str(raw.get("priority") or Priority.MEDIUM.value))
    except ValueError:
        logger.warning("Skipping task record id=%s with unknown priority %r", tid, raw.get("priority"))
        return None

    due_date: date | None = None
    raw_date = raw.get("date") or ""
    if raw_date:
        try:
            due_date = date.fromisoformat(str(raw_date))
        except ValueError:
            logger.warning("Task id=%s has unreadable date %r; dropping due date", tid, raw_date)

    completed = raw.get("completed", False)
    if not isinstance(completed, bool):
        logger.warning("Task id=%s has non-boolean completed %r; treating as pending", tid, completed)
        completed = False

    return Task(
        id=int(tid),
        text=text,
        due_date=due_date,
        priority=priority,
        completed=completed,
        created_at=str(raw.get("createdAt") or ""),
    )


def decode_tasks(blob: str) -> list[Task]:
    """
    Parse a stored blob back into tasks, preserving order.

    Raises ValueError when the blob is not JSON or not a JSON array
    (RecursionError for pathologically nested JSON).
    Malformed records and duplicate ids are skipped (first occurrence wins).
    """
    data = json.loads(blob)
    if not isinstance(data, list):
        raise ValueError(f"Task blob must be a JSON array, got {type(data).__name__}")

    out: list[Task] = []
    seen: set[int] = set()
    for raw in data:
        task = _record_to_task(raw)
        if task is None:
            continue
        if task.id in seen:
            logger.warning("Skipping duplicate task id=%s", task.id)
            continue
        seen.add(task.id)
        out.append(task)
    return out
