# src/todo_lists/core/views.py

"""
Derived views over TodoState.

All functions here are pure and recomputed on every read; nothing is cached,
so a view can never go stale relative to the collections it is built from.
"""

from __future__ import annotations

import locale
import math
from datetime import datetime

from .models import Task, TodoList, TodoState


def active_list(state: TodoState) -> TodoList | None:
    """List matching active_list_id, else the first list (dangling selection fallback)."""
    found = state.find_list(state.active_list_id)
    if found is not None:
        return found
    return state.lists[0] if state.lists else None


def tasks_in_active_list(state: TodoState) -> list[Task]:
    current = active_list(state)
    if current is None:
        return []
    return [t for t in state.tasks if t.list_id == current.id]


_EPOCH = datetime(1970, 1, 1)
_CONVERSION_ERRORS = (OverflowError, ValueError, OSError)


def parse_due(raw: str | None) -> datetime | None:
    if not raw:
        return None
    try:
        return datetime.fromisoformat(raw)
    except (TypeError, ValueError):
        return None


def is_usable_due(raw: str | None) -> bool:
    """True if raw parses and converts to epoch and local time without leaving the calendar."""
    parsed = parse_due(raw)
    if parsed is None:
        return False
    try:
        parsed.timestamp()
        parsed.astimezone()
    except _CONVERSION_ERRORS:
        return False
    return True


def due_sort_value(raw: str | None) -> float:
    """POSIX timestamp of the due date; missing or unparseable sorts last. Never raises."""
    parsed = parse_due(raw)
    if parsed is None:
        return math.inf
    try:
        # naive values are local wall-clock time, same as a datetime-local input
        return parsed.timestamp()
    except _CONVERSION_ERRORS:
        pass
    # Near year 1 or 9999 the local-time conversion leaves the datetime range;
    # subtracting naive datetimes only builds a timedelta, which cannot overflow.
    if parsed.tzinfo is not None:
        offset = parsed.utcoffset()
    else:
        offset = datetime.now().astimezone().utcoffset()
    wall = (parsed.replace(tzinfo=None) - _EPOCH).total_seconds()
    return wall - (offset.total_seconds() if offset is not None else 0.0)


def title_sort_value(title: str) -> str:
    try:
        return locale.strxfrm(title)
    except ValueError:
        # strxfrm rejects embedded NULs
        return title


def task_sort_key(task: Task) -> tuple[bool, float, str]:
    return (task.done, due_sort_value(task.due), title_sort_value(task.title))


def sorted_tasks(state: TodoState) -> list[Task]:
    """
    Tasks of the active list in display order:
    incomplete first, then by due (no due date last), then by title.

    sorted() is stable, so exact ties keep their stored order.
    """
    return sorted(tasks_in_active_list(state), key=task_sort_key)
