# src/todo_lists/core/ports.py

"""
Ports (interfaces) used by the core.

The store depends on Protocols instead of concrete implementations.
This keeps persistence and id generation swappable and makes testing easier.
"""

from __future__ import annotations

from typing import Any, Protocol

Snapshot = dict[str, Any]
# Wire shape: {"lists": [...], "tasks": [...], "activeListId": "..."}.


class SnapshotRepo(Protocol):
    """
    Persistence adapter.

    load() returns None when nothing is stored or the stored content is unreadable.
    save() must not raise: failures are the adapter's business (log and move on).
    """

    def load(self) -> Snapshot | None: ...

    def save(self, snapshot: Snapshot) -> None: ...


class IdGenerator(Protocol):
    """Produces opaque identifiers for new lists and tasks."""

    def __call__(self) -> str: ...
