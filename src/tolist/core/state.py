# src/tolist/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_models import FilterMode
from .ports import TaskRepo


@dataclass
class AppState:
    """
    Everything the front end needs, built once by the composition root.

    `active_filter` is presentation state: it selects which view is shown
    but never changes what the store holds.
    """

    settings: Any
    task_store: TaskRepo
    active_filter: FilterMode = FilterMode.ALL
