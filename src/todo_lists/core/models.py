# src/todo_lists/core/models.py

from __future__ import annotations

from dataclasses import dataclass, field

INBOX_ID = "inbox"
INBOX_NAME = "Inbox"
UNTITLED_LIST_NAME = "Untitled"


@dataclass(frozen=True, slots=True)
class TodoList:
    id: str
    name: str


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    title: str
    list_id: str
    done: bool = False
    # ISO-8601 string as entered by the user; None means "no due date".
    due: str | None = None


def default_lists() -> tuple[TodoList, ...]:
    return (TodoList(id=INBOX_ID, name=INBOX_NAME),)


@dataclass(frozen=True, slots=True)
class TodoState:
    """
    Whole application state.

    Immutable: every operation builds a new TodoState, so a half-applied
    mutation is never observable.

    Notes:
    - lists keep insertion order (display order)
    - tasks are stored newest-first; display order is always derived by sorting
    """

    lists: tuple[TodoList, ...] = field(default_factory=default_lists)
    tasks: tuple[Task, ...] = ()
    active_list_id: str = INBOX_ID

    def find_list(self, list_id: str) -> TodoList | None:
        for lst in self.lists:
            if lst.id == list_id:
                return lst
        return None

    def find_task(self, task_id: str) -> Task | None:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def has_list(self, list_id: str) -> bool:
        return self.find_list(list_id) is not None
