# src/taskboard/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from datetime import datetime
from typing import TextIO

from ..board.view_sync import BoardView
from ..cli.commands import registry as command_registry
from ..core.controller import BoardController

logger = logging.getLogger(__name__)

RULE_WIDTH = 48


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


class ConsoleRenderer:
    """
    Paints a BoardView as plain text.

    Every call redraws the whole board; nothing is kept between calls.
    """

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out

    def _write(self, line: str = "") -> None:
        out = self._out or sys.stdout
        out.write(line + "\n")

    def render(self, view: BoardView) -> None:
        self._write("=" * RULE_WIDTH)
        if view.show_sidebar:
            if view.boards:
                names = "  ".join(f"[{b}]" if b == view.active_board else b for b in view.boards)
                self._write(f"Boards: {names}")
            else:
                self._write("Boards: (none)")
            self._write("-" * RULE_WIDTH)

        if not view.active_board:
            self._write("No boards yet.")
            self._write("=" * RULE_WIDTH)
            return

        self._write(view.active_board)
        for status, tasks in view.columns.items():
            self._write()
            self._write(f"{status.value.upper()} ({len(tasks)})")
            if not tasks:
                self._write("  (empty)")
            for t in tasks:
                self._write(f"  [{t.id}] {t.title}")
        self._write("=" * RULE_WIDTH)


def run_console_loop(controller: BoardController) -> None:
    logger.info("Console connector started.")
    _print_ts("[CONSOLE] Use /help for commands. Use /exit to quit.\n")

    def emit(text: str) -> None:
        print(f"[{_ts_local()}] {text}", flush=True)

    while True:
        try:
            user_input = input(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = command_registry.handle(controller, user_input, emit=emit)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is None:
            _print_ts("Commands start with '/'. Use /help to list them.")
            continue

        _print_ts(reply)

    logger.info("Console connector finished.")
