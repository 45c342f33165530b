# tests/test_views.py

from __future__ import annotations

import math

from todo_lists.core.models import INBOX_ID, Task, TodoList, TodoState
from todo_lists.core.views import (
    active_list,
    due_sort_value,
    is_usable_due,
    sorted_tasks,
    tasks_in_active_list,
)


def _state(*tasks: Task, active: str = INBOX_ID) -> TodoState:
    return TodoState(
        lists=(TodoList(INBOX_ID, "Inbox"), TodoList("w", "Work")),
        tasks=tasks,
        active_list_id=active,
    )


def test_sort_incomplete_then_due_then_title() -> None:
    a = Task(id="A", title="B", list_id=INBOX_ID, done=False, due=None)
    b = Task(id="B", title="A", list_id=INBOX_ID, done=False, due="2024-01-01T10:00")
    c = Task(id="C", title="A", list_id=INBOX_ID, done=True, due="2024-01-01T09:00")

    assert [t.id for t in sorted_tasks(_state(a, b, c))] == ["B", "A", "C"]
    assert [t.id for t in sorted_tasks(_state(c, a, b))] == ["B", "A", "C"]


def test_sort_title_breaks_due_ties() -> None:
    x = Task(id="x", title="pears", list_id=INBOX_ID, due="2024-03-01T08:00")
    y = Task(id="y", title="apples", list_id=INBOX_ID, due="2024-03-01T08:00")
    z = Task(id="z", title="bread", list_id=INBOX_ID)
    assert [t.id for t in sorted_tasks(_state(x, z, y))] == ["y", "x", "z"]


def test_sort_is_stable_for_identical_keys() -> None:
    first = Task(id="1", title="same", list_id=INBOX_ID)
    second = Task(id="2", title="same", list_id=INBOX_ID)
    state = _state(first, second)
    assert [t.id for t in sorted_tasks(state)] == ["1", "2"]
    assert [t.id for t in sorted_tasks(state)] == ["1", "2"]


def test_due_compares_instants_not_strings() -> None:
    early = Task(id="e", title="e", list_id=INBOX_ID, due="2024-01-01T09:00:00+02:00")
    late = Task(id="l", title="l", list_id=INBOX_ID, due="2024-01-01T08:00:00+00:00")
    assert [t.id for t in sorted_tasks(_state(late, early))] == ["e", "l"]


def test_unparseable_due_sorts_like_missing() -> None:
    assert due_sort_value(None) == math.inf
    assert due_sort_value("") == math.inf
    assert due_sort_value("tomorrow-ish") == math.inf


def test_tasks_filtered_by_active_list() -> None:
    inbox_task = Task(id="i", title="i", list_id=INBOX_ID)
    work_task = Task(id="w1", title="w", list_id="w")
    state = _state(inbox_task, work_task, active="w")
    assert [t.id for t in tasks_in_active_list(state)] == ["w1"]
    assert active_list(state).name == "Work"


def test_dangling_active_id_falls_back_to_first_list() -> None:
    inbox_task = Task(id="i", title="i", list_id=INBOX_ID)
    state = _state(inbox_task, active="gone")
    assert active_list(state).id == INBOX_ID
    assert [t.id for t in sorted_tasks(state)] == ["i"]


def test_calendar_edge_dues_sort_without_raising(local_tz) -> None:
    local_tz("Asia/Tokyo")
    ancient = Task(id="old", title="old", list_id=INBOX_ID, due="0001-01-01T00:00")
    shifted = Task(id="off", title="off", list_id=INBOX_ID, due="0001-01-01T00:00+05:00")
    far = Task(id="far", title="far", list_id=INBOX_ID, due="9999-12-31T23:59")
    normal = Task(id="now", title="now", list_id=INBOX_ID, due="2024-01-01T10:00")
    undated = Task(id="none", title="none", list_id=INBOX_ID)

    state = _state(undated, far, normal, shifted, ancient)
    order = [t.id for t in sorted_tasks(state)]

    assert order.index("now") < order.index("far") < order.index("none")
    assert order.index("old") < order.index("now")
    assert order.index("off") < order.index("now")
    assert due_sort_value("0001-01-01T00:00") < due_sort_value("0001-01-02T00:00")


def test_is_usable_due(local_tz) -> None:
    local_tz("Asia/Tokyo")
    assert is_usable_due("2024-01-01T10:00")
    assert not is_usable_due("0001-01-01T00:00")
    assert not is_usable_due("not a date")
    assert not is_usable_due(None)

    local_tz("America/Los_Angeles")
    assert not is_usable_due("0001-01-01T00:00+05:00")
