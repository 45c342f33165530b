# src/todo_lists/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required at import time; every value has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Front-end ----
    console_enabled: bool
    # Collation locale for title ordering ("" = system default).
    locale: str

    # ---- Local data (ignored by git) ----
    data_dir: Path
    state_path: Path
    storage_key: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo").strip() or "todo"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip() or "INFO"

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)
        collation = _env(_k("LOCALE"), "").strip()

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo"))
        state_path = _env_path(_k("STATE_PATH"), data_dir / "state.json")
        storage_key = _env(_k("STORAGE_KEY"), "todo_app_state_v1").strip() or "todo_app_state_v1"

        return Settings(
            app_name=app_name,
            log_level=log_level,
            console_enabled=console_enabled,
            locale=collation,
            data_dir=data_dir,
            state_path=state_path,
            storage_key=storage_key,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
