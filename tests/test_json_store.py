# tests/test_json_store.py

from __future__ import annotations

import json
from pathlib import Path

from todo_lists.core.store import TodoStore
from todo_lists.storage.json_store import JsonSnapshotStore

from .fakes import CounterIds


def test_missing_file_loads_none(tmp_path: Path) -> None:
    assert JsonSnapshotStore(tmp_path / "state.json").load() is None


def test_corrupt_file_loads_none(tmp_path: Path) -> None:
    path = tmp_path / "state.json"
    path.write_text("{not json", "utf-8")
    assert JsonSnapshotStore(path).load() is None

    path.write_text("[1, 2, 3]", "utf-8")
    assert JsonSnapshotStore(path).load() is None

    path.write_text(json.dumps({"todo_app_state_v1": "oops"}), "utf-8")
    assert JsonSnapshotStore(path).load() is None


def test_save_writes_under_versioned_key_and_keeps_other_keys(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "state.json"
    path.parent.mkdir()
    path.write_text(json.dumps({"other": {"x": 1}}), "utf-8")

    repo = JsonSnapshotStore(path)
    snap = {"lists": [{"id": "inbox", "name": "Inbox"}], "tasks": [], "activeListId": "inbox"}
    repo.save(snap)

    doc = json.loads(path.read_text("utf-8"))
    assert doc["todo_app_state_v1"] == snap
    assert doc["other"] == {"x": 1}
    assert not path.with_suffix(".tmp").exists()
    assert repo.load() == snap


def test_other_key_is_invisible(tmp_path: Path) -> None:
    path = tmp_path / "state.json"
    JsonSnapshotStore(path, key="todo_app_state_v1").save({"lists": [], "tasks": []})
    assert JsonSnapshotStore(path, key="todo_app_state_v2").load() is None


def test_store_survives_restart(tmp_path: Path) -> None:
    path = tmp_path / "state.json"
    store = TodoStore(JsonSnapshotStore(path), id_generator=CounterIds())
    work = store.add_list("Work")
    task_id = store.add_task("Ship it", "2024-02-02T12:00")
    store.toggle_task(task_id)

    restarted = TodoStore(JsonSnapshotStore(path), id_generator=CounterIds("n"))
    assert restarted.state == store.state
    assert restarted.active_list_id == work
    assert restarted.sorted_tasks[0].done is True


def test_corrupt_file_starts_default_store(tmp_path: Path) -> None:
    path = tmp_path / "state.json"
    path.write_text("garbage", "utf-8")
    store = TodoStore(JsonSnapshotStore(path), id_generator=CounterIds())
    assert [lst.id for lst in store.lists] == ["inbox"]

    store.add_task("first")
    assert JsonSnapshotStore(path).load()["tasks"][0]["title"] == "first"
