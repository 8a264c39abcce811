# src/pocket_todo/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import format_list, registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def run_console_loop(
    state: AppState,
    *,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> None:
    """
    Line-oriented front end.

    - "/command args" goes through the command registry
    - any other non-empty line is added as a new todo
    - the list is redrawn whenever the store or the theme reports a change
    """
    logger.info("Console connector started (%d todos).", len(state.store))
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "pocket-todo"))

    dirty = {"list": False}

    def _mark_dirty() -> None:
        dirty["list"] = True

    unsubscribe_store = state.store.subscribe(_mark_dirty)
    unsubscribe_theme = state.theme.subscribe(_mark_dirty)

    output_fn(f"{app_name}: type a title to add a todo. Use /help for commands, /exit to quit.\n")
    output_fn(format_list(state))

    try:
        while True:
            try:
                user_input = input_fn("> ").strip()
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                output_fn("")
                break

            if not user_input:
                continue

            if user_input.lower() in ("/exit", "/quit", "/q"):
                logger.info("Console exit command received.")
                break

            dirty["list"] = False
            try:
                if user_input.startswith("/"):
                    reply = command_registry.handle(state, user_input)
                else:
                    reply = command_registry.handle(state, "/add " + user_input)
            except Exception:
                logger.exception("Command handler crashed.")
                reply = "Internal error while handling a command."

            if reply:
                output_fn(reply)

            # /list and /tab already print the list themselves.
            if dirty["list"] and not user_input.lower().startswith(("/list", "/ls", "/tab")):
                output_fn(format_list(state))
    finally:
        unsubscribe_store()
        unsubscribe_theme()

    logger.info("Console connector finished.")
