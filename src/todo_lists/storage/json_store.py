# src/todo_lists/storage/json_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path
from typing import Any

from ..core.ports import Snapshot

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "todo_app_state_v1"


class JsonSnapshotStore:
    """
    JSON file snapshot store.

    The file holds an object keyed by storage key, like a browser's local
    storage: {"todo_app_state_v1": {...snapshot...}}. Bumping the key is how
    the snapshot format gets versioned; other keys in the file are kept.

    Writes go to a temp file first and are moved into place with os.replace,
    so a crash mid-write leaves the previous snapshot intact.
    """

    def __init__(
        self,
        path: str | Path = ".local/todo/state.json",
        *,
        key: str = DEFAULT_STORAGE_KEY,
    ) -> None:
        self._path = Path(path)
        self._key = key

    @property
    def path(self) -> Path:
        return self._path

    @property
    def key(self) -> str:
        return self._key

    def _read_document(self) -> dict[str, Any] | None:
        if not self._path.exists():
            return None
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, UnicodeDecodeError, ValueError):
            logger.warning("Unreadable state file %s; treating as empty.", self._path, exc_info=True)
            return None
        if not isinstance(data, dict):
            logger.warning("State file %s does not hold a JSON object; ignoring it.", self._path)
            return None
        return data

    def load(self) -> Snapshot | None:
        doc = self._read_document()
        if doc is None:
            return None
        snapshot = doc.get(self._key)
        if not isinstance(snapshot, dict):
            if snapshot is not None:
                logger.warning("Snapshot under key %s is malformed; ignoring it.", self._key)
            return None
        logger.info("Loaded snapshot key=%s from %s", self._key, self._path)
        return snapshot

    def save(self, snapshot: Snapshot) -> None:
        try:
            doc = self._read_document() or {}
            doc[self._key] = snapshot
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self._path.with_suffix(".tmp")
            tmp.write_text(json.dumps(doc, ensure_ascii=False, indent=2), "utf-8")
            os.replace(tmp, self._path)
            with contextlib.suppress(OSError):
                os.chmod(self._path, 0o600)
            logger.debug("Saved snapshot key=%s to %s", self._key, self._path)
        except Exception:
            logger.exception("Failed to save snapshot to %s", self._path)
