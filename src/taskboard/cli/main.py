# src/taskboard/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, paints the restored board once, then
runs the console loop until /exit, EOF or Ctrl+C.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import ConsoleRenderer, run_console_loop
from ..core.controller import BoardController
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    log_dir = getattr(settings, "data_dir", ".local/taskboard")
    log_file = setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s... (full log: %s)", getattr(settings, "app_name", "taskboard"), log_file)

    state = create_initial_state(renderer=ConsoleRenderer(), settings=settings)
    controller = BoardController(state)
    controller.refresh()

    try:
        if settings.console_enabled:
            run_console_loop(controller)
        else:
            logger.info("Console disabled; nothing else to run.")
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
