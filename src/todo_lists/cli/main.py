# src/todo_lists/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the TodoStore, then runs the console REPL in the
main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import apply_collation_locale, create_store
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    file_level = getattr(logging, level_name, logging.INFO)

    log_dir = getattr(settings, "data_dir", ".local/todo")
    setup_logging(log_dir=log_dir, file_level=file_level)

    logger.info("Starting %s...", getattr(settings, "app_name", "todo"))

    apply_collation_locale(getattr(settings, "locale", ""))

    store = create_store(settings=settings)

    try:
        if settings.console_enabled:
            run_console_loop(store, app_name=settings.app_name)
        else:
            logger.info("Console disabled; nothing to run.")
    finally:
        # Every mutation was already saved by the store; nothing to flush.
        logger.info(
            "Bye. lists=%d tasks=%d saved to %s",
            len(store.lists),
            len(store.tasks),
            settings.state_path,
        )


if __name__ == "__main__":
    main()
