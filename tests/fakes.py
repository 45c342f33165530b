# tests/fakes.py

from __future__ import annotations

import copy
from typing import Any

from todo_lists.core.ports import Snapshot, SnapshotRepo


class FakeSnapshotRepo(SnapshotRepo):
    """
    In-memory SnapshotRepo used for store unit tests.

    - load() returns the last saved snapshot (or the initial one)
    - every save is recorded for assertions
    - snapshots are deep-copied both ways, like a real serializer would
    """

    def __init__(self, initial: Any = None, *, fail_saves: bool = False) -> None:
        self.initial = copy.deepcopy(initial)
        self.saves: list[Snapshot] = []
        self.fail_saves = fail_saves

    def load(self) -> Snapshot | None:
        if self.saves:
            return copy.deepcopy(self.saves[-1])
        return copy.deepcopy(self.initial)

    def save(self, snapshot: Snapshot) -> None:
        if self.fail_saves:
            raise OSError("disk full")
        self.saves.append(copy.deepcopy(snapshot))


class CounterIds:
    """Deterministic id generator: id1, id2, ..."""

    def __init__(self, prefix: str = "id") -> None:
        self.prefix = prefix
        self.n = 0

    def __call__(self) -> str:
        self.n += 1
        return f"{self.prefix}{self.n}"
