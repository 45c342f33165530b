# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo).",
    "TODO_LOG_LEVEL": "Level for the log file (default: INFO). Console shows WARNING+ only.",
    # Front-end
    "TODO_CONSOLE_ENABLED": "Run the interactive console (true/false, default: true).",
    "TODO_LOCALE": "Collation locale for task titles, e.g. de_DE.UTF-8 (default: system).",
    # Paths (gitignored)
    "TODO_DATA_DIR": "Local data directory, also holds todo.log (default: .local/todo).",
    "TODO_STATE_PATH": "Snapshot JSON file (default: <data_dir>/state.json).",
    "TODO_STORAGE_KEY": "Versioned key of the snapshot inside the file (default: todo_app_state_v1).",
}
