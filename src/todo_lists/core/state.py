# src/todo_lists/core/state.py

"""
Pure state transitions.

Every function takes the current TodoState and returns the next one. When an
operation does not apply (unknown id, protected inbox, empty title) the very
same state object is returned, so callers can detect a no-op with `is`.

Id generation is not done here: fresh ids are passed in by the store.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Final

from .models import INBOX_ID, UNTITLED_LIST_NAME, Task, TodoList, TodoState
from .views import active_list


class _Unset:
    __slots__ = ()

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Final[Any] = _Unset()
# Marker for "field not given" in edit_task (None is a meaningful due value).


def add_list(state: TodoState, list_id: str, name: str) -> TodoState:
    clean = name.strip() or UNTITLED_LIST_NAME
    return replace(
        state,
        lists=(*state.lists, TodoList(id=list_id, name=clean)),
        active_list_id=list_id,
    )


def rename_list(state: TodoState, list_id: str, name: str) -> TodoState:
    if not state.has_list(list_id):
        return state
    lists = tuple(replace(lst, name=name) if lst.id == list_id else lst for lst in state.lists)
    return replace(state, lists=lists)


def delete_list(state: TodoState, list_id: str) -> TodoState:
    if list_id == INBOX_ID or not state.has_list(list_id):
        return state
    active = INBOX_ID if state.active_list_id == list_id else state.active_list_id
    return replace(
        state,
        lists=tuple(lst for lst in state.lists if lst.id != list_id),
        tasks=tuple(t for t in state.tasks if t.list_id != list_id),
        active_list_id=active,
    )


def add_task(state: TodoState, task_id: str, title: str, due: str | None = None) -> TodoState:
    clean = title.strip()
    if not clean:
        return state
    current = active_list(state)
    task = Task(
        id=task_id,
        title=clean,
        done=False,
        due=due or None,
        list_id=current.id if current is not None else INBOX_ID,
    )
    return replace(state, tasks=(task, *state.tasks))


def toggle_task(state: TodoState, task_id: str) -> TodoState:
    if state.find_task(task_id) is None:
        return state
    tasks = tuple(replace(t, done=not t.done) if t.id == task_id else t for t in state.tasks)
    return replace(state, tasks=tasks)


def delete_task(state: TodoState, task_id: str) -> TodoState:
    if state.find_task(task_id) is None:
        return state
    return replace(state, tasks=tuple(t for t in state.tasks if t.id != task_id))


def edit_task(
    state: TodoState,
    task_id: str,
    *,
    title: Any = UNSET,
    due: Any = UNSET,
    done: Any = UNSET,
    list_id: Any = UNSET,
) -> TodoState:
    """
    Merge the given fields into a task; fields left as UNSET are untouched.

    A list_id that does not name an existing list is ignored so the
    task -> list reference can never dangle.
    """
    if state.find_task(task_id) is None:
        return state

    changes: dict[str, Any] = {}
    if title is not UNSET:
        changes["title"] = title
    if due is not UNSET:
        changes["due"] = due or None
    if done is not UNSET:
        changes["done"] = bool(done)
    if list_id is not UNSET and state.has_list(list_id):
        changes["list_id"] = list_id

    if not changes:
        return state

    tasks = tuple(replace(t, **changes) if t.id == task_id else t for t in state.tasks)
    return replace(state, tasks=tasks)


def select_list(state: TodoState, list_id: str) -> TodoState:
    if state.active_list_id == list_id:
        return state
    return replace(state, active_list_id=list_id)
