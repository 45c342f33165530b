# src/todo_lists/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any

from ..core.models import INBOX_ID, Task, TodoList
from ..core.store import TodoStore
from ..core.views import is_usable_due, parse_due

CommandHandler = Callable[[TodoStore, list[str]], str]

logger = logging.getLogger(__name__)

EMPTY_VIEW_TEXT = "No tasks yet. Add your first task above."
EDIT_FIELDS = ("title", "due")


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

    def handle(self, store: TodoStore, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(store, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- rendering ----


def format_due(raw: str | None, now: datetime | None = None) -> str:
    """'Today HH:MM' for same-day due dates, else 'YYYY-MM-DD HH:MM'; '' if unparseable."""
    parsed = parse_due(raw)
    if parsed is None:
        return ""
    if parsed.tzinfo is not None:
        try:
            parsed = parsed.astimezone()
        except (OverflowError, ValueError, OSError):
            return ""
    now = now or datetime.now()
    if parsed.date() == now.date():
        return f"Today {parsed:%H:%M}"
    return f"{parsed:%Y-%m-%d %H:%M}"


def render_task(index: int, task: Task, now: datetime | None = None) -> str:
    mark = "x" if task.done else " "
    line = f"{index}. [{mark}] {task.title}"
    label = format_due(task.due, now)
    if label:
        line += f"  ({label})"
    return line


def render_active_list(store: TodoStore, now: datetime | None = None) -> str:
    current = store.active_list
    header = f"== {current.name if current else 'Inbox'} =="
    tasks = store.sorted_tasks
    if not tasks:
        return f"{header}\n{EMPTY_VIEW_TEXT}"
    lines = [header]
    lines.extend(render_task(i, t, now) for i, t in enumerate(tasks, start=1))
    return "\n".join(lines)


def render_lists(store: TodoStore) -> str:
    current = store.active_list
    lines = ["Lists:"]
    for i, lst in enumerate(store.lists, start=1):
        marker = "*" if current is not None and lst.id == current.id else " "
        lines.append(f"{marker} {i}. {lst.name} ({lst.id})")
    return "\n".join(lines)


# ---- argument helpers ----


def resolve_list(store: TodoStore, ref: str) -> TodoList | None:
    """List by id, else by 1-based position in /lists output (ids may be all digits)."""
    for lst in store.lists:
        if lst.id == ref:
            return lst
    if ref.isdigit():
        idx = int(ref) - 1
        if 0 <= idx < len(store.lists):
            return store.lists[idx]
    return None


def resolve_task(store: TodoStore, ref: str) -> Task | None:
    """Task by 1-based position in the current sorted view."""
    if not ref.isdigit():
        return None
    idx = int(ref) - 1
    tasks = store.sorted_tasks
    if 0 <= idx < len(tasks):
        return tasks[idx]
    return None


def parse_fields(args: list[str]) -> dict[str, str]:
    """
    Parse "title=Buy oat milk due=2024-01-01T10:00" into fields.
    A value runs until the next recognised key=.
    """
    fields: dict[str, list[str]] = {}
    current: str | None = None
    for token in args:
        key, sep, value = token.partition("=")
        if sep and key.lower() in EDIT_FIELDS:
            current = key.lower()
            fields[current] = [value] if value else []
        elif current is not None:
            fields[current].append(token)
    return {k: " ".join(v) for k, v in fields.items()}


def _normalize_due(raw: str) -> str | None:
    raw = raw.strip()
    if raw in ("", "-"):
        return None
    return raw


# ---- commands ----


def cmd_help(store: TodoStore, args: list[str]) -> str:
    return registry.build_help()


def cmd_lists(store: TodoStore, args: list[str]) -> str:
    return render_lists(store)


def cmd_new_list(store: TodoStore, args: list[str]) -> str:
    name = " ".join(args)
    if not name.strip():
        return "Usage: /list NAME"
    store.add_list(name)
    return render_active_list(store)


def cmd_use(store: TodoStore, args: list[str]) -> str:
    if not args:
        return "Usage: /use N|ID"
    lst = resolve_list(store, args[0])
    if lst is None:
        return f"No such list: {args[0]}"
    store.select_list(lst.id)
    return render_active_list(store)


def cmd_rename(store: TodoStore, args: list[str]) -> str:
    if len(args) < 2:
        return "Usage: /rename N|ID NEW NAME"
    lst = resolve_list(store, args[0])
    if lst is None:
        return f"No such list: {args[0]}"
    if lst.id == INBOX_ID:
        return "Inbox cannot be renamed."
    name = " ".join(args[1:]).strip()
    if name and name != lst.name:
        store.rename_list(lst.id, name)
    return render_lists(store)


def cmd_delete_list(store: TodoStore, args: list[str]) -> str:
    if not args:
        return "Usage: /dellist N|ID"
    lst = resolve_list(store, args[0])
    if lst is None:
        return f"No such list: {args[0]}"
    if lst.id == INBOX_ID:
        return "Inbox cannot be deleted."
    store.delete_list(lst.id)
    return render_lists(store)


def cmd_show(store: TodoStore, args: list[str]) -> str:
    return render_active_list(store)


def cmd_add(store: TodoStore, args: list[str]) -> str:
    """
    /add Buy milk
    /add Buy milk @ 2024-01-01T10:00
    """
    due: str | None = None
    title_parts = args
    if "@" in args:
        at = args.index("@")
        title_parts = args[:at]
        due = _normalize_due(" ".join(args[at + 1 :]))
        if due is not None and not is_usable_due(due):
            return f"Invalid due date: {due} (use ISO format, e.g. 2024-01-01T10:00)"

    if store.add_task(" ".join(title_parts), due) is None:
        return "Usage: /add TITLE [@ DUE]"
    return render_active_list(store)


def cmd_done(store: TodoStore, args: list[str]) -> str:
    if not args:
        return "Usage: /done N"
    task = resolve_task(store, args[0])
    if task is None:
        return f"No such task: {args[0]}"
    store.toggle_task(task.id)
    return render_active_list(store)


def cmd_delete(store: TodoStore, args: list[str]) -> str:
    if not args:
        return "Usage: /del N"
    task = resolve_task(store, args[0])
    if task is None:
        return f"No such task: {args[0]}"
    store.delete_task(task.id)
    return render_active_list(store)


def cmd_edit(store: TodoStore, args: list[str]) -> str:
    """
    /edit N title=New title
    /edit N due=2024-01-01T10:00
    /edit N due=-            (clear due date)

    Only fields that differ from the current task are passed to the store.
    """
    if len(args) < 2:
        return "Usage: /edit N [title=...] [due=...|due=-]"
    task = resolve_task(store, args[0])
    if task is None:
        return f"No such task: {args[0]}"

    fields = parse_fields(args[1:])
    if not fields:
        return "Usage: /edit N [title=...] [due=...|due=-]"

    updates: dict[str, Any] = {}
    if "title" in fields:
        trimmed = fields["title"].strip()
        if trimmed and trimmed != task.title:
            updates["title"] = trimmed
    if "due" in fields:
        due = _normalize_due(fields["due"])
        if due is not None and not is_usable_due(due):
            return f"Invalid due date: {due} (use ISO format, e.g. 2024-01-01T10:00)"
        if due != task.due:
            updates["due"] = due

    if updates:
        store.edit_task(task.id, **updates)
    return render_active_list(store)


def cmd_move(store: TodoStore, args: list[str]) -> str:
    if len(args) < 2:
        return "Usage: /move N LIST"
    task = resolve_task(store, args[0])
    if task is None:
        return f"No such task: {args[0]}"
    lst = resolve_list(store, args[1])
    if lst is None:
        return f"No such list: {args[1]}"
    if lst.id != task.list_id:
        store.edit_task(task.id, list_id=lst.id)
    return render_active_list(store)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("lists", cmd_lists, help_text="Show all lists (* = active).", aliases=["ls"])
registry.register("list", cmd_new_list, help_text="Create a list and switch to it: /list NAME.")
registry.register("use", cmd_use, help_text="Switch to a list: /use N|ID.")
registry.register("rename", cmd_rename, help_text="Rename a list: /rename N|ID NEW NAME.")
registry.register("dellist", cmd_delete_list, help_text="Delete a list and its tasks: /dellist N|ID.")
registry.register("show", cmd_show, help_text="Show tasks of the active list.", aliases=["s"])
registry.register("add", cmd_add, help_text="Add a task: /add TITLE [@ DUE].", aliases=["a"])
registry.register("done", cmd_done, help_text="Toggle completion: /done N.", aliases=["x"])
registry.register("del", cmd_delete, help_text="Delete a task: /del N.")
registry.register("edit", cmd_edit, help_text="Edit a task: /edit N [title=...] [due=...|due=-].")
registry.register("move", cmd_move, help_text="Move a task to another list: /move N LIST.")
