# tests/test_task_codec.py

from __future__ import annotations

import json
from datetime import date

import pytest

from tolist.tasks.task_codec import decode_tasks, encode_tasks, task_to_record
from tolist.tasks.task_models import Priority, Task


def test_record_layout_matches_stored_format() -> None:
    task = Task(
        id=1729330200123,
        text="Buy milk",
        due_date=None,
        priority=Priority.HIGH,
        completed=False,
        created_at="2024-10-19T09:30:00.123Z",
    )

    assert task_to_record(task) == {
        "id": 1729330200123,
        "text": "Buy milk",
        "date": "",
        "priority": "high",
        "completed": False,
        "createdAt": "2024-10-19T09:30:00.123Z",
    }


def test_decode_blob_written_by_browser_version() -> None:
    blob = (
        '[{"id":1729330200456,"text":"Call Bob","date":"2024-10-21","priority":"low",'
        '"completed":true,"createdAt":"2024-10-19T09:30:00.456Z"},'
        '{"id":1729330200123,"text":"Buy milk","date":"","priority":"medium",'
        '"completed":false,"createdAt":"2024-10-19T09:30:00.123Z"}]'
    )

    tasks = decode_tasks(blob)

    assert [t.id for t in tasks] == [1729330200456, 1729330200123]
    assert tasks[0].due_date == date(2024, 10, 21)
    assert tasks[0].completed is True
    assert tasks[1].due_date is None
    assert tasks[1].priority is Priority.MEDIUM

    assert json.loads(encode_tasks(tasks)) == json.loads(blob)


@pytest.mark.parametrize("blob", ["", "nope", "{}", "null"])
def test_decode_rejects_non_array_blob(blob: str) -> None:
    with pytest.raises(ValueError):
        decode_tasks(blob)
