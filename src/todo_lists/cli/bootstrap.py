# src/todo_lists/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the JSON snapshot store and the id generator into a TodoStore,
- applies the collation locale used for title ordering.
"""

from __future__ import annotations

import locale
import logging

from ..config import get_settings
from ..core.ports import IdGenerator, SnapshotRepo
from ..core.store import TodoStore, random_id
from ..storage.json_store import JsonSnapshotStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.state_path.parent.mkdir(parents=True, exist_ok=True)


def apply_collation_locale(name: str = "") -> bool:
    """
    Set LC_COLLATE so title ordering follows the user's locale.
    Returns False (and keeps the current locale) if the name is not installed.
    """
    try:
        locale.setlocale(locale.LC_COLLATE, name)
    except locale.Error:
        logger.warning("Collation locale %r is not available; using the current one.", name)
        return False
    return True


def create_store(
    *,
    settings=None,
    repo: SnapshotRepo | None = None,
    id_generator: IdGenerator | None = None,
) -> TodoStore:
    """
    Build a TodoStore from the provided settings.

    Keeping settings and collaborators injectable makes the app easier to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if repo is None:
        _ensure_local_dirs(settings)
        repo = JsonSnapshotStore(settings.state_path, key=settings.storage_key)

    return TodoStore(repo, id_generator=id_generator or random_id)
