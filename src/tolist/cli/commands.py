# src/tolist/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from datetime import date
from typing import cast

from ..core.state import AppState
from ..tasks.task_models import FilterMode, Priority, Task, ValidationError
from ..tasks.task_views import TaskCounts, filtered_view, task_counts

CommandHandler2 = Callable[[AppState, list[str]], str]
# Third argument: everything after the command name, unsplit.
CommandHandler3 = Callable[[AppState, list[str], str], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

_PRIORITY_LABELS = {
    Priority.HIGH: "High Priority",
    Priority.MEDIUM: "Medium Priority",
    Priority.LOW: "Low Priority",
}


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        raw_args = parts[1] if len(parts) > 1 else ""
        args = raw_args.split()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, raw_args)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- rendering ----

def format_due_date(d: date, today: date) -> str:
    label = f"{d:%a}, {d:%b} {d.day}"
    if d.year != today.year:
        label += f", {d.year}"
    return label


def format_task(task: Task, today: date) -> str:
    mark = "x" if task.completed else " "
    meta = [_PRIORITY_LABELS[task.priority]]
    if task.due_date is not None:
        due = f"due {format_due_date(task.due_date, today)}"
        if task.is_overdue(today):
            due += " (overdue!)"
        meta.append(due)
    return f"[{mark}] {task.id}  {task.text}  <{' | '.join(meta)}>"


def format_counts(counts: TaskCounts) -> str:
    return f"Total: {counts.total} | Pending: {counts.pending} | Completed: {counts.completed}"


def render_list(state: AppState, today: date | None = None) -> str:
    today = today or date.today()
    tasks = filtered_view(state.task_store, state.active_filter)
    header = f"Filter: {state.active_filter.value}  ({format_counts(task_counts(state.task_store))})"
    if not tasks:
        return f"{header}\n  No tasks here."
    return "\n".join([header, *(f"  {format_task(t, today)}" for t in tasks)])


def _parse_task_id(args: list[str]) -> int | None:
    if len(args) != 1:
        return None
    try:
        return int(args[0])
    except ValueError:
        return None


# ---- handlers ----

def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help() + "\n  /exit - Leave the console (alias: /quit)."


def add_task_text(
    state: AppState,
    text: str,
    due_date: str | None = None,
    priority: str | None = None,
) -> str:
    """Create a task from text as typed and build the user-facing reply."""
    try:
        task = state.task_store.create(text, due_date=due_date, priority=priority)
    except ValidationError as e:
        return f"Task not added: {e}"

    counts = format_counts(task_counts(state.task_store))
    return f"Task added successfully! id={task.id} ({counts})"


def _looks_like_date(token: str) -> bool:
    return len(token) == 10 and token[4:5] == "-" and token[7:8] == "-"


def cmd_add(state: AppState, args: list[str], raw_args: str) -> str:
    """
    /add [low|medium|high] [YYYY-MM-DD] text...

    Leading priority/date tokens are optional and may come in either order.
    The text is kept exactly as typed after them (only trimmed).
    """
    rest = raw_args.lstrip()
    priority: str | None = None
    due: str | None = None
    while rest:
        head = rest.split(maxsplit=1)[0]
        if priority is None and head.lower() in {p.value for p in Priority}:
            priority = head
        elif due is None and _looks_like_date(head):
            due = head
        else:
            break
        rest = rest[len(head):].lstrip()

    return add_task_text(state, rest, due_date=due, priority=priority)


def cmd_done(state: AppState, args: list[str]) -> str:
    """/done <id> -> toggle completion (unknown ids are ignored)."""
    task_id = _parse_task_id(args)
    if task_id is None:
        return "Usage: /done <id>"

    completed = state.task_store.toggle_completion(task_id)
    if completed is None:
        return ""
    label = "completed" if completed else "pending"
    return f"Task marked as {label}! ({format_counts(task_counts(state.task_store))})"


def cmd_rm(state: AppState, args: list[str]) -> str:
    """/rm <id> -> delete a task (unknown ids are ignored)."""
    task_id = _parse_task_id(args)
    if task_id is None:
        return "Usage: /rm <id>"

    removed = state.task_store.delete(task_id)
    if removed is None:
        return ""
    return f"Task deleted! ({format_counts(task_counts(state.task_store))})"


def cmd_clear(state: AppState, args: list[str]) -> str:
    removed = state.task_store.clear_completed()
    if removed == 0:
        return "No completed tasks to clear!"
    return f"Cleared {removed} completed task(s). ({format_counts(task_counts(state.task_store))})"


def cmd_filter(state: AppState, args: list[str]) -> str:
    """
    /filter            -> show the active filter
    /filter <mode>     -> switch filter and show the list
    """
    if not args:
        modes = ", ".join(m.value for m in FilterMode)
        return f"Active filter: {state.active_filter.value}. Available: {modes}."

    try:
        state.active_filter = FilterMode.parse(args[0])
    except ValidationError as e:
        return str(e)
    return render_list(state)


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_list(state)


def cmd_stats(state: AppState, args: list[str]) -> str:
    return format_counts(task_counts(state.task_store))


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(
    "add", cmd_add, help_text="Add a task: /add [low|medium|high] [YYYY-MM-DD] text.", aliases=["a"]
)
registry.register("done", cmd_done, help_text="Toggle completion: /done <id>.", aliases=["toggle"])
registry.register("rm", cmd_rm, help_text="Delete a task: /rm <id>.", aliases=["del", "delete"])
registry.register("clear", cmd_clear, help_text="Remove all completed tasks.")
registry.register(
    "filter", cmd_filter, help_text="Switch view: /filter all | pending | completed | high.", aliases=["f"]
)
registry.register("list", cmd_list, help_text="Show tasks under the active filter.", aliases=["ls"])
registry.register("stats", cmd_stats, help_text="Show total/pending/completed counts.")
