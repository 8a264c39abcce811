# src/pocket_todo/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (which hydrates the todo list), then runs the
console front end in the main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    file_level = getattr(logging, level_name, logging.INFO)

    # The console handler stays at WARNING so log lines do not tear through the list.
    log_dir = getattr(settings, "data_dir", ".local/pocket_todo")
    setup_logging(log_dir=log_dir, console_level=logging.WARNING, file_level=file_level)

    logger.info("Starting %s...", getattr(settings, "app_name", "pocket-todo"))

    state = create_initial_state(settings=settings)

    try:
        run_console_loop(state)
    finally:
        # Nothing to flush: every mutation was persisted when it happened.
        logger.info("Bye.")


if __name__ == "__main__":
    main()
