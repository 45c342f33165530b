# src/todo_lists/core/store.py

from __future__ import annotations

import logging
import uuid
from typing import Any

from . import state as transitions
from .models import Task, TodoList, TodoState
from .ports import IdGenerator, SnapshotRepo
from .snapshot import state_from_snapshot, state_to_snapshot
from .state import UNSET
from .views import active_list, sorted_tasks, tasks_in_active_list

logger = logging.getLogger(__name__)

_MAX_ID_ATTEMPTS = 64


def random_id() -> str:
    """Default id generator: 8 hex chars, random."""
    return uuid.uuid4().hex[:8]


class TodoStore:
    """
    Owner of the application state.

    - holds the current (immutable) TodoState
    - applies pure transitions from core.state
    - persists a snapshot exactly once after every change, in mutation order

    Saving is fire-and-forget: a failing save is logged and the in-memory
    commit stands. Operations never raise for unknown ids or empty input;
    they either no-op or return None.
    """

    def __init__(
        self,
        repo: SnapshotRepo,
        *,
        id_generator: IdGenerator | None = None,
    ) -> None:
        self._repo = repo
        self._new_id: IdGenerator = id_generator or random_id
        self._state = self._load_initial()
        logger.info(
            "TodoStore ready lists=%d tasks=%d active=%s",
            len(self._state.lists),
            len(self._state.tasks),
            self._state.active_list_id,
        )

    # ---- low-level helpers ----

    def _load_initial(self) -> TodoState:
        try:
            raw = self._repo.load()
        except Exception:
            logger.exception("Snapshot load failed; starting from defaults.")
            raw = None
        if raw is None:
            return TodoState()
        decoded = state_from_snapshot(raw)
        if decoded is None:
            logger.warning("Stored snapshot is not usable; starting from defaults.")
            return TodoState()
        return decoded

    def _fresh_id(self) -> str:
        taken = {lst.id for lst in self._state.lists} | {t.id for t in self._state.tasks}
        for _ in range(_MAX_ID_ATTEMPTS):
            candidate = str(self._new_id())
            if candidate and candidate not in taken:
                return candidate
        raise RuntimeError("Id generator keeps returning ids that are already in use")

    def _commit(self, new_state: TodoState, op: str) -> bool:
        """Swap in new_state and persist it. Returns False for a no-op."""
        if new_state is self._state:
            logger.debug("%s: no-op", op)
            return False
        self._state = new_state
        logger.debug(
            "%s: lists=%d tasks=%d active=%s",
            op,
            len(new_state.lists),
            len(new_state.tasks),
            new_state.active_list_id,
        )
        try:
            self._repo.save(state_to_snapshot(new_state))
        except Exception:
            logger.exception("Snapshot save failed after %s", op)
        return True

    # ---- read access ----

    @property
    def state(self) -> TodoState:
        return self._state

    @property
    def lists(self) -> tuple[TodoList, ...]:
        return self._state.lists

    @property
    def tasks(self) -> tuple[Task, ...]:
        return self._state.tasks

    @property
    def active_list_id(self) -> str:
        return self._state.active_list_id

    @property
    def active_list(self) -> TodoList | None:
        return active_list(self._state)

    @property
    def tasks_in_active_list(self) -> list[Task]:
        return tasks_in_active_list(self._state)

    @property
    def sorted_tasks(self) -> list[Task]:
        return sorted_tasks(self._state)

    def snapshot(self) -> dict[str, Any]:
        return state_to_snapshot(self._state)

    # ---- lists ----

    def add_list(self, name: str) -> str:
        list_id = self._fresh_id()
        self._commit(transitions.add_list(self._state, list_id, name), "add_list")
        return list_id

    def rename_list(self, list_id: str, name: str) -> None:
        self._commit(transitions.rename_list(self._state, list_id, name), "rename_list")

    def delete_list(self, list_id: str) -> None:
        self._commit(transitions.delete_list(self._state, list_id), "delete_list")

    def select_list(self, list_id: str) -> None:
        self._commit(transitions.select_list(self._state, list_id), "select_list")

    # ---- tasks ----

    def add_task(self, title: str, due: str | None = None) -> str | None:
        """Create a task in the active list. Returns None when the title is blank."""
        if not title.strip():
            logger.debug("add_task: rejected blank title")
            return None
        task_id = self._fresh_id()
        if not self._commit(transitions.add_task(self._state, task_id, title, due), "add_task"):
            return None
        return task_id

    def toggle_task(self, task_id: str) -> None:
        self._commit(transitions.toggle_task(self._state, task_id), "toggle_task")

    def delete_task(self, task_id: str) -> None:
        self._commit(transitions.delete_task(self._state, task_id), "delete_task")

    def edit_task(
        self,
        task_id: str,
        *,
        title: Any = UNSET,
        due: Any = UNSET,
        done: Any = UNSET,
        list_id: Any = UNSET,
    ) -> None:
        """
        Merge the given fields into a task. The store does no diffing:
        callers pass only the fields that actually changed.
        """
        self._commit(
            transitions.edit_task(
                self._state, task_id, title=title, due=due, done=done, list_id=list_id
            ),
            "edit_task",
        )
