# tests/conftest.py

from __future__ import annotations

import time
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_lists.core.store import TodoStore

from .fakes import CounterIds, FakeSnapshotRepo


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap/main.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        console_enabled=True,
        locale="",
        data_dir=data_dir,
        state_path=data_dir / "state.json",
        storage_key="todo_app_state_v1",
    )


@pytest.fixture()
def repo() -> FakeSnapshotRepo:
    return FakeSnapshotRepo()


@pytest.fixture()
def ids() -> CounterIds:
    return CounterIds()


@pytest.fixture()
def store(repo: FakeSnapshotRepo, ids: CounterIds) -> TodoStore:
    """Fresh store on an empty fake repo with deterministic ids."""
    return TodoStore(repo, id_generator=ids)


@pytest.fixture()
def local_tz(monkeypatch: pytest.MonkeyPatch):
    """Switch the process timezone for one test: local_tz("Asia/Tokyo")."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")

    def switch(name: str) -> None:
        monkeypatch.setenv("TZ", name)
        time.tzset()

    yield switch
    monkeypatch.undo()
    time.tzset()
