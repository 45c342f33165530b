# src/todo_lists/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import CommandRegistry, render_active_list
from ..cli.commands import registry as command_registry
from ..core.store import TodoStore

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def run_console_loop(
    store: TodoStore,
    *,
    registry: CommandRegistry | None = None,
    read: InputFn = input,
    write: OutputFn = print,
    app_name: str = "todo",
) -> None:
    """
    Interactive REPL over the store.

    Lines starting with "/" are commands; any other non-empty line is added
    as a task to the active list.
    """
    registry = registry or command_registry
    logger.info("Console connector started.")
    write(f"[{app_name}] Type a task to add it. Use /help for commands. Use /exit to quit.\n")
    write(render_active_list(store))

    while True:
        try:
            line = read("> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not line:
            continue

        if line.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = registry.handle(store, line)
            if reply is None:
                # plain text = quick add
                store.add_task(line)
                reply = render_active_list(store)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        write(reply)

    logger.info("Console connector finished.")
