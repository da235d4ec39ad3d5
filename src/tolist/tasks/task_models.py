# src/tolist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import StrEnum


class ValidationError(ValueError):
    """Raised when a request is rejected before any state is touched."""


class Priority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def parse(cls, raw: Priority | str | None) -> Priority:
        """None means "not specified" and maps to the default (medium)."""
        if raw is None:
            return cls.MEDIUM
        if isinstance(raw, Priority):
            return raw
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            raise ValidationError(f"Unknown priority: {raw!r}") from None


class FilterMode(StrEnum):
    """
    Closed set of list filters.

    Modes never combine: selecting one replaces the active predicate.
    """

    ALL = "all"
    PENDING = "pending"
    COMPLETED = "completed"
    HIGH_PRIORITY = "high-priority"

    @classmethod
    def parse(cls, raw: FilterMode | str) -> FilterMode:
        if isinstance(raw, FilterMode):
            return raw
        key = str(raw).strip().lower()
        if key == "high":
            return cls.HIGH_PRIORITY
        try:
            return cls(key)
        except ValueError:
            raise ValidationError(f"Unknown filter mode: {raw!r}") from None


def parse_due_date(raw: date | str | None) -> date | None:
    """Accept a date, an ISO YYYY-MM-DD string, or empty/None for "no date"."""
    if raw is None:
        return None
    if isinstance(raw, date):
        return raw
    s = str(raw).strip()
    if not s:
        return None
    try:
        return date.fromisoformat(s)
    except ValueError:
        raise ValidationError(f"Invalid due date (expected YYYY-MM-DD): {raw!r}") from None


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    text: str
    due_date: date | None
    priority: Priority
    completed: bool
    created_at: str

    def is_overdue(self, today: date) -> bool:
        if self.due_date is None or self.completed:
            return False
        return self.due_date < today
