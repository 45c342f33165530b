# src/todo_lists/core/snapshot.py

"""
TodoState <-> snapshot dict.

Encoding is exact. Decoding is best-effort: stored data may be old, hand-edited
or half-written, and it must never crash startup. Bad records are dropped and
the structural invariants (inbox exists, tasks reference existing lists) are
restored on the way in.
"""

from __future__ import annotations

import logging
from typing import Any

from .models import INBOX_ID, INBOX_NAME, UNTITLED_LIST_NAME, Task, TodoList, TodoState
from .ports import Snapshot

logger = logging.getLogger(__name__)


def state_to_snapshot(state: TodoState) -> Snapshot:
    return {
        "lists": [{"id": lst.id, "name": lst.name} for lst in state.lists],
        "tasks": [
            {
                "id": t.id,
                "title": t.title,
                "done": t.done,
                "due": t.due,
                "listId": t.list_id,
            }
            for t in state.tasks
        ],
        "activeListId": state.active_list_id,
    }


def _decode_lists(raw: Any) -> list[TodoList]:
    out: list[TodoList] = []
    seen: set[str] = set()
    if not isinstance(raw, list):
        return out
    for item in raw:
        if not isinstance(item, dict):
            continue
        list_id = item.get("id")
        if not isinstance(list_id, str) or not list_id or list_id in seen:
            continue
        name = item.get("name")
        if not isinstance(name, str) or not name:
            name = INBOX_NAME if list_id == INBOX_ID else UNTITLED_LIST_NAME
        seen.add(list_id)
        out.append(TodoList(id=list_id, name=name))
    return out


def _decode_tasks(raw: Any, list_ids: set[str]) -> list[Task]:
    out: list[Task] = []
    seen: set[str] = set()
    if not isinstance(raw, list):
        return out
    for item in raw:
        if not isinstance(item, dict):
            continue
        task_id = item.get("id")
        title = item.get("title")
        list_id = item.get("listId")
        if not isinstance(task_id, str) or not task_id or task_id in seen:
            continue
        if not isinstance(title, str) or not title.strip():
            continue
        if list_id not in list_ids:
            continue
        due = item.get("due")
        seen.add(task_id)
        out.append(
            Task(
                id=task_id,
                title=title,
                # only a real JSON true counts; "false", 1, etc. fall back to not done
                done=item.get("done") is True,
                due=due if isinstance(due, str) and due else None,
                list_id=list_id,
            )
        )
    return out


def state_from_snapshot(data: Any) -> TodoState | None:
    """
    Decode a snapshot. Returns None when `data` is not a snapshot at all
    (the caller then starts from the default state).
    """
    if not isinstance(data, dict):
        return None

    lists = _decode_lists(data.get("lists"))
    if not any(lst.id == INBOX_ID for lst in lists):
        lists.insert(0, TodoList(id=INBOX_ID, name=INBOX_NAME))

    list_ids = {lst.id for lst in lists}
    tasks = _decode_tasks(data.get("tasks"), list_ids)

    active = data.get("activeListId")
    if not isinstance(active, str) or not active:
        active = INBOX_ID

    raw_tasks = data.get("tasks")
    dropped = len(raw_tasks) - len(tasks) if isinstance(raw_tasks, list) else 0
    if dropped:
        logger.warning("Snapshot repair: dropped %d invalid task record(s).", dropped)

    return TodoState(lists=tuple(lists), tasks=tuple(tasks), active_list_id=active)
